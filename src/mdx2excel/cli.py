"""Command-line interface.

Usage::

    mdx2excel [-s SOURCE] [-o OUTPUT] [-i DIR [DIR ...]] [--log-dir DIR] [-v]
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from mdx2excel import __version__
from mdx2excel.config import Settings
from mdx2excel.exceptions import EmptyResultError, Mdx2ExcelError
from mdx2excel.pipeline import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdx2excel",
        description="Convert a tree of Markdown/MDX documents into one Excel workbook",
    )
    parser.add_argument("-s", "--source", help="Directory containing the documents (default: ./content)")
    parser.add_argument("-o", "--output", help="Directory for the generated workbook (default: ./excel)")
    parser.add_argument(
        "-i",
        "--ignore",
        nargs="*",
        metavar="DIR",
        help="Skip any path containing one of these substrings",
    )
    parser.add_argument("--log-dir", help="Directory for the per-run log file (default: ./logs)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output on the console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    overrides = {
        "source_dir": args.source,
        "output_dir": args.output,
        "ignore_dirs": args.ignore,
        "log_dir": args.log_dir,
    }
    try:
        settings = Settings(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        output = run(settings)
    except EmptyResultError as exc:
        logger.error("%s", exc)
        return 0
    except Mdx2ExcelError as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    if output is not None:
        print(f"Output file: {output}")
    return 0
