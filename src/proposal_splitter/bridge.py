"""
Module: bridge

Purpose:
    Host-embedding export. Splits a PDF and returns plain data
    (dicts, lists, bytes) so an embedding host never has to handle
    package types or exceptions.

Key Functions:
    - split_pdf_for_host(): Split and package results for a host

Used By:
    - Embedding hosts (web workers, notebooks, other services)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from proposal_splitter.core.errors import SplitError
from proposal_splitter.output.zip_writer import results_to_zip_bytes
from proposal_splitter.splitter import PdfEngine, ignore_warning, split_pdf_bytes

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def split_pdf_for_host(
    document: BytesLike,
    zip_name: str,
    *,
    engine: Optional[PdfEngine] = None,
) -> Dict[str, Any]:
    """
    Split a proposal and return host-friendly data.

    Warnings are dropped. Fatal errors are returned, not raised.

    Args:
        document: Complete proposal PDF bytes.
        zip_name: Top-level folder name inside the returned archive.
        engine: Optional PDF engine.

    Returns:
        On success::

            {"results": [{"name", "startPage", "endPage", "data"}, ...],
             "zipFile": <zip bytes>}

        On failure::

            {"error": "<message>"}
    """
    if not isinstance(document, (bytes, bytearray, memoryview)):
        return {"error": f"expected PDF bytes, got {type(document).__name__}"}
    if not isinstance(zip_name, str):
        return {"error": f"expected zip name string, got {type(zip_name).__name__}"}

    try:
        results = split_pdf_bytes(bytes(document), engine=engine, warn=ignore_warning)
    except SplitError as e:
        logger.debug(f"Host split failed: {e}")
        return {"error": str(e)}

    return {
        "results": [
            {
                "name": result.name,
                "startPage": result.start_page,
                "endPage": result.end_page,
                "data": result.data,
            }
            for result in results
        ],
        "zipFile": results_to_zip_bytes(zip_name, results),
    }
