"""
Command-line entry point: split a proposal PDF into section PDFs.

    split-proposal --file main.pdf --out-dir submit/ [--zip] [--timestamp]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from proposal_splitter import __version__
from proposal_splitter.core.errors import SplitError
from proposal_splitter.output import archive_stem, write_results, write_results_zip
from proposal_splitter.splitter import split_pdf_bytes

logger = logging.getLogger("proposal_splitter")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="split-proposal",
        description="Split a grant proposal PDF into per-section PDFs using its bookmarks.",
    )
    parser.add_argument("--file", type=Path, default=Path("main.pdf"), help="proposal PDF file")
    parser.add_argument(
        "--out-dir", "--outDir", dest="out_dir", type=Path, default=Path("."),
        help="directory to write output PDFs",
    )
    parser.add_argument("--zip", action="store_true", help="also bundle all PDFs into <stem>.zip")
    parser.add_argument(
        "--timestamp", action="store_true",
        help="append the current date and time to the zip name",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        document = args.file.read_bytes()
    except OSError as e:
        print(f"error reading input: {e}", file=sys.stderr)
        return 1
    logger.debug(f"Read {len(document)} bytes from {args.file}")

    if not args.out_dir.is_dir():
        print(f"output directory does not exist: {args.out_dir}", file=sys.stderr)
        return 1

    try:
        results = split_pdf_bytes(document)
        write_results(results, args.out_dir)
        if args.zip:
            stem = archive_stem(args.file.name, timestamp=datetime.now() if args.timestamp else None)
            write_results_zip(results, args.out_dir / f"{stem}.zip")
    except (SplitError, OSError) as e:
        print(f"error splitting: {e}", file=sys.stderr)
        return 1

    for result in results:
        print(f"{result.name}: {result.page_range}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
