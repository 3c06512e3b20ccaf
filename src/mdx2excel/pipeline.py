"""Conversion driver — discovery, per-file processing and the workbook write.

Files are processed one after another.  A file that fails is logged and
skipped; only traversal and write failures abort the run.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from mdx2excel.config import EXCEL_CELL_LIMIT, Settings
from mdx2excel.context import RunContext
from mdx2excel.exceptions import EmptyResultError, TraversalError
from mdx2excel.export.writer import write_workbook
from mdx2excel.ingestion.chunker import chunk_section
from mdx2excel.ingestion.loader import load_document
from mdx2excel.ingestion.sections import extract_sections
from mdx2excel.models import Row

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting a batch of files.

    Attributes
    ----------
    rows:
        All rows from successfully processed files, in processing order.
    succeeded:
        Files that were converted.
    failed:
        ``(path, message)`` pairs for files that were skipped.
    """

    rows: list[Row] = field(default_factory=list)
    succeeded: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    def summary(self) -> str:
        return f"{len(self.succeeded)}/{self.total}"


def discover_files(
    root: str | Path,
    ignore_dirs: Sequence[str] = (),
    extensions: Sequence[str] = (".md", ".mdx"),
) -> list[Path]:
    """Recursively collect document paths under *root*.

    Entries are visited in name order.  Any file or directory whose path
    contains one of *ignore_dirs* is skipped.

    Raises
    ------
    TraversalError
        If *root* does not exist or a directory cannot be listed.
    """
    root = Path(root)
    if not root.is_dir():
        raise TraversalError(f"Source directory not found: {root}")

    ignored = [os.path.normpath(d) for d in ignore_dirs if d]
    suffixes = tuple(extensions)

    def _walk(directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise TraversalError(f"Cannot list {directory}: {exc}") from exc
        for entry in entries:
            if any(part in str(entry) for part in ignored):
                continue
            if entry.is_dir():
                yield from _walk(entry)
            elif entry.name.endswith(suffixes):
                yield entry

    return list(_walk(root))


def process_file(path: str | Path, limit: int = EXCEL_CELL_LIMIT) -> list[Row]:
    """Load, section and chunk one document."""
    document = load_document(path)
    rows: list[Row] = []
    for section in extract_sections(document):
        rows.extend(chunk_section(section, limit))
    return rows


def convert_files(paths: Sequence[Path], context: RunContext) -> ConversionResult:
    """Convert *paths* in order, skipping the ones that fail.

    Writes one log line per file and a final ``succeeded/total`` summary.

    Raises
    ------
    EmptyResultError
        If no file produced any row.
    """
    result = ConversionResult()
    for path in paths:
        try:
            rows = process_file(path, context.settings.cell_limit)
        except Exception as exc:
            result.failed.append((path, str(exc)))
            logger.error("Failed to convert %s: %s", path, exc)
            continue
        result.rows.extend(rows)
        result.succeeded.append(path)
        logger.info("Converted %s (%d rows)", path, len(rows))

    logger.info("Converted %s files, %d rows", result.summary(), len(result.rows))
    if not result.rows:
        raise EmptyResultError("No rows produced from any file; workbook not written")
    return result


def run(settings: Settings, context: RunContext | None = None) -> Path | None:
    """Execute one full conversion.

    Returns
    -------
    Path | None
        The written workbook, or ``None`` when no input files were found.
    """
    with context or RunContext(settings) as ctx:
        files = discover_files(settings.source_dir, settings.ignore_dirs, settings.extensions)
        if not files:
            logger.info("No %s files found in %s", "/".join(settings.extensions), settings.source_dir)
            return None

        logger.info("Found %d files in %s", len(files), settings.source_dir)
        result = convert_files(files, ctx)
        output = write_workbook(result.rows, ctx.output_path, settings.sheet_name)
        logger.info("Workbook saved to %s", output)
        return output
