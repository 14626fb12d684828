"""
Module: output

Purpose:
    Writes split results to disk: one PDF per section, or a single ZIP
    archive bundling them.

Key Functions:
    - write_results(): Write section PDFs into a directory
    - results_to_zip_bytes(): Build a ZIP archive in memory
    - write_results_zip(): Write a ZIP archive to disk
"""

from .writer import write_results
from .zip_writer import archive_stem, results_to_zip_bytes, write_results_zip

__all__ = [
    "write_results",
    "archive_stem",
    "results_to_zip_bytes",
    "write_results_zip",
]
