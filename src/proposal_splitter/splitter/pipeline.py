"""
Module: splitter.pipeline

Purpose:
    Main orchestrator for splitting a proposal PDF into section PDFs.
    Resolves each section's page range, extracts those pages, re-embeds
    the section's own renumbered outline and collects the results.

Key Functions:
    - split_pdf_bytes(): Split a whole document (main entry point)
    - extract_section(): Extract one section

Dependencies:
    - splitter.engine: PDF engine (PyMuPDF by default)
    - splitter.locator: Section page ranges
    - splitter.outline: Per-section outline

Used By:
    - proposal_splitter.cli: Command-line splitting
    - proposal_splitter.bridge: Host-embedding export
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from proposal_splitter.core.errors import EngineError, OutlineEmbedError, SectionNotFoundError
from proposal_splitter.core.models import Bookmark, PageRange, SplitResult, iter_tree

from .config import SectionSpec, SplitConfig
from .engine import FitzEngine, PdfEngine
from .locator import has_section, resolve_range
from .outline import section_outline

logger = logging.getLogger(__name__)

# Receives non-fatal problems (outline embedding failures)
WarningSink = Callable[[str], None]


def log_warning(message: str) -> None:
    """Default warning sink: log at WARNING level."""
    logger.warning(message)


def ignore_warning(message: str) -> None:
    """Warning sink that drops every warning."""


def extract_section(
    section: SectionSpec,
    bookmarks: List[Bookmark],
    document: bytes,
    *,
    engine: PdfEngine,
    config: Optional[SplitConfig] = None,
    warn: WarningSink = log_warning,
) -> SplitResult:
    """
    Extract a single section from the source document.

    Steps:
    1. Resolve the page range from the top-level bookmarks
    2. Resolve an open-ended range, or one running past the last
       page, to the last page
    3. Build the section outline (filtered, renumbered from 1)
    4. Extract the pages as a standalone PDF
    5. Embed the outline; a failure here is reported through ``warn``
       and the extracted pages are used without an outline

    Args:
        section: Section to extract.
        bookmarks: Outline of the source document (not modified).
        document: Original PDF bytes.
        engine: PDF engine.
        config: Optional run configuration.
        warn: Sink for non-fatal problems.

    Returns:
        SplitResult with the resolved page range.

    Raises:
        SectionNotFoundError: If no range could be resolved.
        EngineError: If the engine fails to count or extract pages.
    """
    config = config or SplitConfig()

    page_range = resolve_range(section.pattern, bookmarks, section.default_range)
    if not page_range.is_resolved:
        raise SectionNotFoundError(section.name)

    start, end = page_range.start, page_range.end
    last_page = engine.page_count(document)
    if page_range.is_open_ended:
        end = last_page
    elif end > last_page:
        logger.debug(f"{section.name}: clamping {page_range} to last page {last_page}")
        end = last_page

    outline = section_outline(bookmarks, start, end)

    data = engine.extract_page_range(document, start, end)

    if outline and config.embed_outlines:
        try:
            data = engine.embed_outline(data, outline)
        except OutlineEmbedError as e:
            warn(f"{section.name}: {e}")

    name = config.output_name(section.name)
    logger.info(
        f"Extracted {section.name}: pages {PageRange(start, end)}",
        extra={
            "section": section.name,
            "start_page": start,
            "end_page": end,
            "outline_entries": sum(1 for _ in iter_tree(outline)),
        },
    )
    return SplitResult(name=name, data=data, start_page=start, end_page=end)


def split_pdf_bytes(
    document: bytes,
    *,
    engine: Optional[PdfEngine] = None,
    config: Optional[SplitConfig] = None,
    warn: WarningSink = log_warning,
) -> List[SplitResult]:
    """
    Split a proposal PDF into one document per section.

    Sections are processed in table order, each against the source
    document. Optional sections without a matching top-level bookmark
    are skipped silently. The first fatal error aborts the run.

    Args:
        document: Complete proposal PDF bytes.
        engine: PDF engine (defaults to FitzEngine).
        config: Optional run configuration.
        warn: Sink for non-fatal problems (default: log a warning).

    Returns:
        List of SplitResult in section order.

    Raises:
        SplitError: On any fatal error (the message names the section).

    Example:
        >>> from pathlib import Path
        >>> results = split_pdf_bytes(Path("main.pdf").read_bytes())
        >>> [r.name for r in results]
        ['submit-summary.pdf', 'submit-project-description.pdf', 'submit-references.pdf']
    """
    engine = engine or FitzEngine()
    config = config or SplitConfig()

    try:
        bookmarks = engine.parse_outline(document)
    except EngineError as e:
        raise EngineError(f"could not read PDF bookmarks: {e}") from e

    if not bookmarks:
        logger.info("Document has no bookmarks, using default page ranges")

    results: List[SplitResult] = []
    for section in config.sections:
        if not section.mandatory and not has_section(section.pattern, bookmarks):
            logger.debug(f"Skipping optional section {section.name}: no matching bookmark")
            continue
        try:
            result = extract_section(
                section, bookmarks, document,
                engine=engine, config=config, warn=warn,
            )
        except EngineError as e:
            raise EngineError(f"could not extract {section.name}: {e}") from e
        results.append(result)

    logger.info(
        f"Split into {len(results)} sections",
        extra={"section_count": len(results)},
    )
    return results
