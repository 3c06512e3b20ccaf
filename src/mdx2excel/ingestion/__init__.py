"""
Ingestion — document loading, section extraction, and cell-limit chunking.

This module turns one Markdown/MDX file into the ordered rows that end up
in the workbook:

- :func:`load_document` — read a file and split off its front matter.
- :func:`extract_sections` — main title plus ``##`` sections.
- :func:`chunk_section` — split oversized sections into numbered rows.
"""

from mdx2excel.ingestion.chunker import chunk_section, split_long_content
from mdx2excel.ingestion.loader import load_document, split_front_matter
from mdx2excel.ingestion.sections import extract_sections, resolve_main_title

__all__ = [
    "chunk_section",
    "extract_sections",
    "load_document",
    "resolve_main_title",
    "split_front_matter",
    "split_long_content",
]
