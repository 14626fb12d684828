"""
Module: bookmarks

Purpose:
    Provides the Bookmark tree node and the PageRange value type used to
    describe where a proposal section starts and ends.

Key Classes:
    - Bookmark: Mutable outline node (title, inclusive page span, children)
    - PageRange: Immutable (start, end) pair with an open-ended sentinel

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - splitter.engine: Builds Bookmark trees from the PDF outline
    - splitter.locator: Produces PageRange per section
    - splitter.outline: Filters and renumbers Bookmark trees
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

# Sentinel end page meaning "through the last page of the document"
OPEN_END = -1

Color = Tuple[float, float, float]


@dataclass(eq=True)
class Bookmark:
    """
    Outline node covering an inclusive, 1-based page span.

    The tree is an ownership tree: each node exclusively owns its
    children. ``parent`` is a non-owning back-reference that is only
    meaningful on trees built by ``splitter.outline.filter_to_range``.
    It is excluded from equality and repr so trees compare by content.

    Nesting by page range is not guaranteed: a child may start before
    or end after its parent.

    Attributes:
        title: Display title, used for section recognition
        page_from: First page covered (1-based, inclusive)
        page_thru: Last page covered (1-based, inclusive)
        children: Ordered child bookmarks
        bold: Bold style flag (carried through unchanged)
        italic: Italic style flag (carried through unchanged)
        color: RGB color in 0..1 floats, or None for the viewer default
        parent: Owning node, or None for top-level entries

    Example:
        >>> child = Bookmark("Aims", 3, 4)
        >>> section = Bookmark("Project Description", 2, 16, children=[child])
        >>> [b.title for b in section.iter_all()]
        ['Project Description', 'Aims']
    """

    title: str
    page_from: int
    page_thru: int
    children: List[Bookmark] = field(default_factory=list)
    bold: bool = False
    italic: bool = False
    color: Optional[Color] = None
    parent: Optional[Bookmark] = field(default=None, compare=False, repr=False)

    def overlaps(self, start: int, end: int) -> bool:
        """True if this bookmark's span shares at least one page with [start, end]."""
        return self.page_thru >= start and self.page_from <= end

    def iter_all(self) -> Iterator[Bookmark]:
        """
        Iterate over this bookmark and all descendants (pre-order).

        Yields:
            Bookmark instances in document order
        """
        yield self
        for child in self.children:
            yield from child.iter_all()


def iter_tree(bookmarks: List[Bookmark]) -> Iterator[Bookmark]:
    """Iterate over every node of a bookmark forest in pre-order."""
    for bookmark in bookmarks:
        yield from bookmark.iter_all()


@dataclass(frozen=True, slots=True)
class PageRange:
    """
    Section page range (1-based, inclusive).

    ``end == OPEN_END`` means the range runs to the last page of the
    document. ``start <= 0`` means the section was not located.

    Attributes:
        start: First page of the section
        end: Last page of the section, or OPEN_END

    Example:
        >>> str(PageRange(17, OPEN_END))
        '17-end'
        >>> PageRange.empty().is_resolved
        False
    """

    start: int
    end: int

    @classmethod
    def empty(cls) -> PageRange:
        """Unresolved range used as the default for optional sections."""
        return cls(0, 0)

    @property
    def is_resolved(self) -> bool:
        return self.start > 0

    @property
    def is_open_ended(self) -> bool:
        return self.end == OPEN_END

    def __str__(self) -> str:
        if self.end < 0:
            return f"{self.start}-end"
        return f"{self.start}-{self.end}"
