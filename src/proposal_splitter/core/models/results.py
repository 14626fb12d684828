"""
Module: results

Purpose:
    Provides the SplitResult record - one extracted section document.

Dependencies:
    - dataclasses (std)

Used By:
    - splitter.pipeline: Emits one SplitResult per extracted section
    - output: Writes results to a directory or zip archive
    - bridge: Converts results to plain dictionaries
"""

from __future__ import annotations

from dataclasses import dataclass

from .bookmarks import PageRange


@dataclass(frozen=True)
class SplitResult:
    """
    Extracted section document (immutable).

    Attributes:
        name: Output file name, e.g. "submit-summary.pdf"
        data: Standalone PDF bytes for the section
        start_page: First source page included (1-based)
        end_page: Last source page included (1-based, resolved)
    """

    name: str
    data: bytes
    start_page: int
    end_page: int

    @property
    def page_count(self) -> int:
        return self.end_page - self.start_page + 1

    @property
    def page_range(self) -> str:
        """Source page range in "start-end" form."""
        return str(PageRange(self.start_page, self.end_page))

    def __repr__(self) -> str:
        return (
            f"SplitResult(name={self.name!r}, pages={self.page_range}, "
            f"size={len(self.data)})"
        )
