"""
Module: output.zip_writer

Purpose:
    Bundle split results into a single ZIP archive, one entry per
    section PDF, all inside one top-level folder.

Key Functions:
    - results_to_zip_bytes(): Build the archive in memory
    - write_results_zip(): Write the archive to disk

Dependencies:
    - zipfile (std)

Used By:
    - proposal_splitter.cli: --zip option
    - proposal_splitter.bridge: zipFile entry of the host result
"""

from __future__ import annotations

import logging
import zipfile
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional, Sequence

from proposal_splitter.core.models import SplitResult

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H_%M"


def results_to_zip_bytes(outer_dir: str, results: Sequence[SplitResult]) -> bytes:
    """
    Create a ZIP archive containing the split PDFs.

    Structure:
        <outer_dir>/
        ├── submit-summary.pdf
        ├── submit-project-description.pdf
        └── ...

    Args:
        outer_dir: Name of the single top-level folder.
        results: Results to include, in order.

    Returns:
        ZIP file bytes.
    """
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for result in results:
            zf.writestr(f"{outer_dir}/{result.name}", result.data)
    return buffer.getvalue()


def archive_stem(source_name: str, *, timestamp: Optional[datetime] = None) -> str:
    """
    Archive name (without extension) for a source file.

    Examples:
        >>> archive_stem("main.pdf")
        'main'
        >>> archive_stem("main.pdf", timestamp=datetime(2026, 3, 1, 9, 5))
        'main 2026-03-01 09_05'
    """
    stem = Path(source_name).stem or "proposal"
    if timestamp is not None:
        stem = f"{stem} {timestamp.strftime(TIMESTAMP_FORMAT)}"
    return stem


def write_results_zip(results: Sequence[SplitResult], output_path: Path) -> Path:
    """
    Write results to a ZIP file.

    The archive's top-level folder is named after the file stem.

    Args:
        results: Results to include.
        output_path: Path for the .zip file (.zip is appended if missing).

    Returns:
        Path to the created ZIP file.

    Raises:
        OSError: If the output path is not writable.
    """
    if output_path.suffix != ".zip":
        output_path = output_path.with_name(output_path.name + ".zip")

    output_path.write_bytes(results_to_zip_bytes(output_path.stem, results))
    logger.info(f"Wrote {len(results)} section(s) to {output_path}")
    return output_path
