"""
Module: splitter.locator

Purpose:
    Maps a section recognizer to a page range using the order of the
    top-level bookmarks. A section runs from its bookmark's first page
    up to the page before the next top-level bookmark starts.

Key Functions:
    - resolve_range(): Page range for a recognizer, or the default
    - has_section(): Whether any top-level bookmark matches

Used By:
    - splitter.pipeline: Resolves each section before extraction
"""

from __future__ import annotations

import logging
from typing import List, Pattern

from proposal_splitter.core.models import OPEN_END, Bookmark, PageRange

logger = logging.getLogger(__name__)


def has_section(recognizer: Pattern[str], bookmarks: List[Bookmark]) -> bool:
    """True if any top-level bookmark title matches the recognizer."""
    return any(recognizer.search(b.title) for b in bookmarks)


def resolve_range(
    recognizer: Pattern[str],
    bookmarks: List[Bookmark],
    default_range: PageRange,
) -> PageRange:
    """
    Resolve the page range of the first top-level bookmark matching a recognizer.

    Only top-level titles are scanned; children never define section
    boundaries. The first textual match wins, page order is not checked.

    Args:
        recognizer: Compiled title pattern (matched with ``search``).
        bookmarks: Top-level bookmarks in document order.
        default_range: Returned unchanged when nothing matches.

    Returns:
        ``(page_from, OPEN_END)`` if the match is the last bookmark,
        ``(page_from, next.page_from - 1)`` otherwise, or ``default_range``.

    Example:
        >>> from proposal_splitter.splitter.config import REFERENCES_RE
        >>> bookmarks = [Bookmark("Summary", 1, 1), Bookmark("References", 11, 11)]
        >>> resolve_range(REFERENCES_RE, bookmarks, PageRange(17, OPEN_END))
        PageRange(start=11, end=-1)
    """
    for i, bookmark in enumerate(bookmarks):
        if not recognizer.search(bookmark.title):
            continue
        start = bookmark.page_from
        if i == len(bookmarks) - 1:
            resolved = PageRange(start, OPEN_END)
        else:
            resolved = PageRange(start, bookmarks[i + 1].page_from - 1)
        logger.debug(f"'{bookmark.title}' matched {recognizer.pattern!r} -> {resolved}")
        return resolved

    logger.debug(f"No bookmark matched {recognizer.pattern!r}, using default {default_range}")
    return default_range
