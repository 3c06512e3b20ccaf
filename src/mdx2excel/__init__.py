"""
mdx2excel — flatten Markdown/MDX documents into spreadsheet rows.

Public surface
--------------
- :func:`run` — convert a whole source tree into one workbook.
- :class:`Settings` — run configuration.
- :class:`Section`, :class:`Row` — data models.
"""

__version__ = "0.1.0"

from mdx2excel.config import Settings
from mdx2excel.models import Row, Section
from mdx2excel.pipeline import run

__all__ = ["Row", "Section", "Settings", "run"]
