import pytest
import sys
from pathlib import Path

import fitz

# Add src to sys.path so we can import proposal_splitter
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from proposal_splitter.core.models import Bookmark


def make_pdf(num_pages: int, toc: list | None = None) -> bytes:
    """Helper to create a simple test PDF, optionally with an outline."""
    doc = fitz.open()
    for i in range(num_pages):
        page = doc.new_page(width=595, height=842)  # A4 size
        page.insert_text((100, 100), f"Test Page {i + 1}")
    if toc:
        doc.set_toc(toc)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_factory():
    """Factory for test PDFs: pdf_factory(num_pages, toc=None) -> bytes."""
    return make_pdf


# Outline of the standard 20-page proposal used across tests
PROPOSAL_TOC = [
    [1, "Summary", 1],
    [1, "Project Description", 2],
    [2, "Aims", 3],
    [2, "Methods", 8],
    [1, "References Cited", 17],
]


@pytest.fixture
def proposal_pdf() -> bytes:
    """20-page proposal with summary, description and references bookmarks."""
    return make_pdf(20, PROPOSAL_TOC)


@pytest.fixture
def proposal_with_plans_pdf() -> bytes:
    """24-page proposal that also has both optional plans."""
    return make_pdf(24, [
        [1, "Project Summary", 1],
        [1, "Project Description", 2],
        [1, "References Cited", 17],
        [1, "Data Management Plan", 21],
        [1, "Mentoring Plan", 23],
    ])


@pytest.fixture
def simple_bookmarks() -> list[Bookmark]:
    """Three top-level bookmarks without children."""
    return [
        Bookmark("Summary", 1, 1),
        Bookmark("Project Description", 2, 10),
        Bookmark("References", 11, 11),
    ]


@pytest.fixture
def nested_bookmarks() -> list[Bookmark]:
    """Proposal outline with nested description entries."""
    aims = Bookmark("Aims", 3, 7, bold=True)
    methods = Bookmark("Methods", 8, 16, children=[Bookmark("Sampling", 9, 12)])
    description = Bookmark("Project Description", 2, 16, children=[aims, methods], color=(1.0, 0.0, 0.0))
    for child in description.children:
        child.parent = description
    return [
        Bookmark("Summary", 1, 1),
        description,
        Bookmark("References Cited", 17, 20, italic=True),
    ]
