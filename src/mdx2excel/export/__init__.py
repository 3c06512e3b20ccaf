"""Export — spreadsheet output for the converted rows."""

from mdx2excel.export.writer import write_workbook

__all__ = ["write_workbook"]
