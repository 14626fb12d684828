"""
Error types raised by the proposal splitter.

Everything the library raises derives from SplitError so callers can
catch a single type. OutlineEmbedError is the only recoverable kind:
the orchestrator downgrades it to a warning.
"""

from __future__ import annotations


class SplitError(Exception):
    """Base error for a failed split run."""
    pass


class SectionNotFoundError(SplitError):
    """Raised when a section has no bookmark and no usable default range."""

    def __init__(self, section: str):
        super().__init__(f"section {section} not found")
        self.section = section


class EngineError(SplitError):
    """Raised when the PDF engine fails to parse, count or extract pages."""
    pass


class OutlineEmbedError(EngineError):
    """Raised when writing an outline into extracted pages fails."""
    pass
