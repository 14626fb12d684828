"""
Core package: data models and error types.
"""

from .errors import EngineError, OutlineEmbedError, SectionNotFoundError, SplitError
from .models import OPEN_END, Bookmark, PageRange, SplitResult

__all__ = [
    "OPEN_END",
    "Bookmark",
    "PageRange",
    "SplitResult",
    "SplitError",
    "SectionNotFoundError",
    "EngineError",
    "OutlineEmbedError",
]
