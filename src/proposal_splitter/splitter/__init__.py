"""
Module: splitter

Purpose:
    Splits a grant proposal PDF into one PDF per section (summary,
    project description, references and the optional plans) using the
    document's bookmark outline.

Key Functions:
    - split_pdf_bytes(): Main entry point
    - extract_section(): Extract a single section
    - resolve_range() / has_section(): Section location
    - filter_to_range() / shift_pages(): Per-section outline

Key Classes:
    - SplitConfig: Run configuration
    - SectionSpec: Entry of the fixed section table
    - PdfEngine / FitzEngine: PDF engine interface and PyMuPDF implementation

Dependencies:
    - fitz (PyMuPDF): PDF parsing and writing

Used By:
    - proposal_splitter.cli
    - proposal_splitter.bridge
"""

from .config import SECTIONS, SectionSpec, SplitConfig, get_section
from .engine import FitzEngine, PdfEngine
from .locator import has_section, resolve_range
from .outline import filter_to_range, section_outline, shift_pages
from .pipeline import (
    WarningSink,
    extract_section,
    ignore_warning,
    log_warning,
    split_pdf_bytes,
)

__all__ = [
    "SECTIONS",
    "SectionSpec",
    "SplitConfig",
    "get_section",
    "PdfEngine",
    "FitzEngine",
    "has_section",
    "resolve_range",
    "filter_to_range",
    "shift_pages",
    "section_outline",
    "WarningSink",
    "extract_section",
    "split_pdf_bytes",
    "log_warning",
    "ignore_warning",
]
