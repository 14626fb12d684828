"""
Core Models Package

Data models shared by the splitter, output writers and the host bridge.

Bookmark trees are mutable so that freshly filtered copies can be
renumbered in place. PageRange and SplitResult are frozen.
"""

from .bookmarks import OPEN_END, Bookmark, PageRange, iter_tree
from .results import SplitResult

__all__ = [
    "OPEN_END",
    "Bookmark",
    "PageRange",
    "SplitResult",
    "iter_tree",
]
