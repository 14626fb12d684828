"""
Module: splitter.outline

Purpose:
    Builds the outline for an extracted section: prune and clip a
    bookmark tree to a page window, then renumber it so the first kept
    page becomes page 1.

Key Functions:
    - filter_to_range(): New tree restricted to [start, end]
    - shift_pages(): Subtract an offset from every page number in place
    - section_outline(): filter_to_range + shift_pages for one section

Used By:
    - splitter.pipeline: Builds each section's outline once
"""

from __future__ import annotations

from typing import List

from proposal_splitter.core.models import Bookmark


def filter_to_range(bookmarks: List[Bookmark], start: int, end: int) -> List[Bookmark]:
    """
    Return a clipped copy of every bookmark overlapping [start, end].

    Children are filtered against the same window, not against their
    parent's clipped span. Bookmarks that do not overlap are dropped
    together with their subtree. The returned tree shares no nodes with
    the input and its ``parent`` links point into the new tree.

    ``end`` must already be a concrete page number; OPEN_END is not
    special-cased here.

    Args:
        bookmarks: Source bookmarks (not modified).
        start: First page of the window (1-based, inclusive).
        end: Last page of the window (1-based, inclusive).

    Returns:
        Filtered bookmarks in input order.

    Example:
        >>> tree = [Bookmark("Description", 2, 16, children=[Bookmark("Aims", 3, 4)])]
        >>> [(b.page_from, b.page_thru) for b in filter_to_range(tree, 4, 10)[0].iter_all()]
        [(4, 10), (4, 4)]
    """
    result: List[Bookmark] = []
    for bookmark in bookmarks:
        if not bookmark.overlaps(start, end):
            continue
        clipped = Bookmark(
            title=bookmark.title,
            page_from=max(bookmark.page_from, start),
            page_thru=min(bookmark.page_thru, end),
            children=filter_to_range(bookmark.children, start, end),
            bold=bookmark.bold,
            italic=bookmark.italic,
            color=bookmark.color,
        )
        for child in clipped.children:
            child.parent = clipped
        result.append(clipped)
    return result


def shift_pages(bookmarks: List[Bookmark], offset: int) -> None:
    """
    Subtract ``offset`` from page_from/page_thru of every node, in place.

    Only call this on a tree returned by filter_to_range, never on the
    outline parsed from the source document.
    """
    for bookmark in bookmarks:
        bookmark.page_from -= offset
        bookmark.page_thru -= offset
        shift_pages(bookmark.children, offset)


def section_outline(bookmarks: List[Bookmark], start: int, end: int) -> List[Bookmark]:
    """Outline for pages [start, end], renumbered so ``start`` becomes page 1."""
    outline = filter_to_range(bookmarks, start, end)
    shift_pages(outline, start - 1)
    return outline
