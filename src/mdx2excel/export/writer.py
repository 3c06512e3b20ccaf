"""Workbook output — writes the accumulated rows to a single-sheet xlsx file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from mdx2excel.exceptions import WriteError
from mdx2excel.models import Row

logger = logging.getLogger(__name__)


def _clean(value: str) -> str:
    # xlsx cannot store ASCII control characters other than tab/CR/LF
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def write_workbook(rows: Iterable[Row], path: str | Path, sheet_name: str = "MDX Content") -> Path:
    """Write *rows* to a new workbook at *path*.

    The first sheet row holds the ``Row`` field names; each following row
    holds one record.  Text starting with ``=`` is stored as a string, not
    as a formula.  Missing parent directories are created.

    Raises
    ------
    WriteError
        If the directory or the file cannot be written.
    """
    path = Path(path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_name
    sheet.append(Row.columns())

    count = 0
    for row_idx, row in enumerate(rows, start=2):
        for col_idx, value in enumerate(row.as_cells(), start=1):
            cell = sheet.cell(row=row_idx, column=col_idx, value=_clean(value))
            if cell.data_type == "f":
                cell.data_type = "s"
        count += 1

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
    except OSError as exc:
        raise WriteError(f"Cannot write workbook {path}: {exc}") from exc
    finally:
        workbook.close()

    logger.debug("Wrote %d rows to %s", count, path)
    return path
