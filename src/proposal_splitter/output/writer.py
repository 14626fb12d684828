"""
Module: output.writer

Purpose:
    Write split results as individual PDF files into a directory.

Key Functions:
    - write_results(): Write every result, return the written paths

Used By:
    - proposal_splitter.cli
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from proposal_splitter.core.models import SplitResult

logger = logging.getLogger(__name__)


def write_results(results: Sequence[SplitResult], output_dir: Path) -> List[Path]:
    """
    Write each result to ``output_dir / result.name``.

    Existing files with the same name are overwritten. The directory
    must already exist.

    Raises:
        FileNotFoundError: If output_dir does not exist.
        OSError: If a file cannot be written. The message names the file.
    """
    if not output_dir.is_dir():
        raise FileNotFoundError(f"output directory does not exist: {output_dir}")

    paths: List[Path] = []
    for result in results:
        path = output_dir / result.name
        try:
            path.write_bytes(result.data)
        except OSError as e:
            raise OSError(f"could not write output PDF {result.name}: {e}") from e
        logger.debug(f"Wrote {path} ({len(result.data)} bytes)")
        paths.append(path)
    return paths
