"""
Module: splitter.engine

Purpose:
    PDF engine used by the splitter. All byte-level PDF work (outline
    parsing, page counting, page extraction, outline writing) goes
    through this interface; the rest of the package never touches raw
    PDF bytes.

Key Classes:
    - PdfEngine: Abstract base class for the engine
    - FitzEngine: PyMuPDF implementation

Dependencies:
    - fitz (PyMuPDF): PDF parsing and writing

Used By:
    - splitter.pipeline: One engine per split run
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import fitz

from proposal_splitter.core.errors import EngineError, OutlineEmbedError
from proposal_splitter.core.models import Bookmark

logger = logging.getLogger(__name__)


class PdfEngine(ABC):
    """
    Abstract interface for the PDF operations the splitter needs.

    Every method takes the complete document as bytes and is free of
    side effects on its input, so sections can be extracted one after
    another from the same source bytes.
    """

    @abstractmethod
    def parse_outline(self, document: bytes) -> List[Bookmark]:
        """
        Extract the full bookmark tree.

        Returns:
            Top-level bookmarks in document order (empty if no outline)

        Raises:
            EngineError: If the document cannot be parsed
        """

    @abstractmethod
    def page_count(self, document: bytes) -> int:
        """
        Total number of pages.

        Raises:
            EngineError: If the document cannot be parsed
        """

    @abstractmethod
    def extract_page_range(self, document: bytes, start: int, end: int) -> bytes:
        """
        Standalone document with pages [start, end] (1-based, inclusive).

        Pages in the result are renumbered from 1. An end past the last
        page is clamped to the last page.

        Raises:
            EngineError: If the document cannot be parsed, start < 1,
                start > end or start is past the last page
        """

    @abstractmethod
    def embed_outline(self, document: bytes, bookmarks: List[Bookmark]) -> bytes:
        """
        Write ``bookmarks`` as the outline of ``document``.

        Any existing outline is replaced.

        Raises:
            OutlineEmbedError: If the outline cannot be written
        """


class FitzEngine(PdfEngine):
    """
    PdfEngine backed by PyMuPDF.

    Each call opens its own fitz.Document from the given bytes and
    closes it before returning.

    Example:
        >>> from pathlib import Path
        >>> engine = FitzEngine()
        >>> data = Path("main.pdf").read_bytes()
        >>> engine.page_count(data)
        20
    """

    def __init__(self, *, garbage: int = 3, deflate: bool = True):
        self.garbage = garbage
        self.deflate = deflate

    def parse_outline(self, document: bytes) -> List[Bookmark]:
        with _open(document) as doc:
            toc = doc.get_toc(simple=False)
            bookmarks = _toc_to_tree(toc, doc.page_count)
        logger.debug(f"Parsed {len(toc)} outline entries ({len(bookmarks)} top-level)")
        return bookmarks

    def page_count(self, document: bytes) -> int:
        with _open(document) as doc:
            return doc.page_count

    def extract_page_range(self, document: bytes, start: int, end: int) -> bytes:
        with _open(document) as doc:
            if not 1 <= start <= min(end, doc.page_count):
                raise EngineError(
                    f"could not select pages {start}-{end}: "
                    f"document has {doc.page_count} pages"
                )
            # An end past the last page selects through the last page
            end = min(end, doc.page_count)
            with fitz.open() as out:
                try:
                    out.insert_pdf(doc, from_page=start - 1, to_page=end - 1)
                except (RuntimeError, ValueError) as e:
                    raise EngineError(f"could not select pages {start}-{end}: {e}") from e
                return out.tobytes(garbage=self.garbage, deflate=self.deflate)

    def embed_outline(self, document: bytes, bookmarks: List[Bookmark]) -> bytes:
        try:
            with _open(document) as doc:
                doc.set_toc(_tree_to_toc(bookmarks))
                return doc.tobytes(garbage=self.garbage, deflate=self.deflate)
        except (EngineError, RuntimeError, ValueError) as e:
            raise OutlineEmbedError(f"could not add bookmarks: {e}") from e


def _open(document: bytes) -> fitz.Document:
    """Open PDF bytes, mapping PyMuPDF failures to EngineError."""
    if not document:
        raise EngineError("could not read PDF data: document is empty")
    try:
        doc = fitz.open(stream=document, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise EngineError(f"could not read PDF data: {e}") from e
    if not doc.is_pdf or doc.page_count == 0:
        doc.close()
        raise EngineError("could not read PDF data: not a PDF document or no pages")
    return doc


def _toc_to_tree(toc: List[list], page_count: int) -> List[Bookmark]:
    """
    Rebuild a nested bookmark tree from PyMuPDF's flat TOC list.

    Each TOC row is ``[level, title, page, dest]`` with 1-based pages.
    A bookmark's page_thru is the page before the next entry at the same
    or a shallower level starts (never before its own first page), or
    the last page of the document if no such entry follows. Rows without
    a target page (page < 1) are dropped; their children attach to the
    nearest shallower bookmark.
    """
    rows: List[Tuple[int, str, int, Dict[str, Any]]] = []
    for row in toc:
        level, title, page = row[0], row[1], row[2]
        if page < 1:
            logger.debug(f"Skipping outline entry without target page: {title!r}")
            continue
        dest = row[3] if len(row) > 3 and isinstance(row[3], dict) else {}
        rows.append((level, title, min(page, page_count), dest))

    roots: List[Bookmark] = []
    stack: List[Tuple[int, Bookmark]] = []
    for i, (level, title, page, dest) in enumerate(rows):
        page_thru = page_count
        for next_level, _, next_page, _ in rows[i + 1:]:
            if next_level <= level:
                page_thru = next_page - 1
                break
        node = Bookmark(
            title=title,
            page_from=page,
            page_thru=max(page, page_thru),
            bold=bool(dest.get("bold", False)),
            italic=bool(dest.get("italic", False)),
            color=_color(dest.get("color")),
        )
        while stack and stack[-1][0] >= level:
            stack.pop()
        if stack:
            node.parent = stack[-1][1]
            node.parent.children.append(node)
        else:
            roots.append(node)
        stack.append((level, node))
    return roots


def _tree_to_toc(bookmarks: List[Bookmark], level: int = 1) -> List[list]:
    """Flatten a bookmark tree into PyMuPDF's ``set_toc`` row format."""
    toc: List[list] = []
    for bookmark in bookmarks:
        dest: Dict[str, Any] = {
            "kind": fitz.LINK_GOTO,
            "zoom": 0,
            "collapse": False,
            "bold": bookmark.bold,
            "italic": bookmark.italic,
        }
        if bookmark.color is not None:
            dest["color"] = bookmark.color
        toc.append([level, bookmark.title, bookmark.page_from, dest])
        toc.extend(_tree_to_toc(bookmark.children, level + 1))
    return toc


def _color(value: Any) -> Optional[Tuple[float, float, float]]:
    if not value or len(value) != 3:
        return None
    return (float(value[0]), float(value[1]), float(value[2]))
