"""Cell-limit chunking of oversized sections.

Excel counts cell text in UTF-16 code units, so every length and offset
here is measured that way: characters outside the Basic Multilingual Plane
(emoji, CJK Extension B …) count as two.
"""

from __future__ import annotations

from mdx2excel.config import EXCEL_CELL_LIMIT
from mdx2excel.models import Row, Section


def utf16_len(text: str) -> int:
    """Return the length of *text* in UTF-16 code units."""
    return len(text.encode("utf-16-le")) // 2


def _index_within(text: str, units: int) -> int:
    """Return the largest index whose prefix of *text* fits in *units*."""
    count = 0
    for idx, char in enumerate(text):
        count += 2 if ord(char) > 0xFFFF else 1
        if count > units:
            return idx
    return len(text)


def _find_split(text: str, limit: int) -> int:
    """Return the index at which to cut *text* so the head fits in *limit*.

    Prefers the last paragraph break, then the last line break, starting at
    or before *limit* units.  A hit at offset 0 is useless and counts as a
    miss; with no usable break the text is hard-cut at *limit* units, never
    inside a surrogate pair.
    """
    cut = _index_within(text, limit)
    index = text.rfind("\n\n", 0, cut + 2)
    if index <= 0:
        index = text.rfind("\n", 0, cut + 1)
    if index <= 0:
        # a single astral character with limit 1 still has to move forward
        index = max(cut, 1)
    return index


def split_long_content(content: str, limit: int = EXCEL_CELL_LIMIT) -> list[str]:
    """Split *content* into pieces of at most *limit* UTF-16 units.

    Each piece and each remainder is stripped at the cut, so only whitespace
    around split points is lost.
    """
    chunks: list[str] = []
    remaining = content
    while remaining:
        if utf16_len(remaining) <= limit:
            chunks.append(remaining)
            break
        index = _find_split(remaining, limit)
        chunks.append(remaining[:index].strip())
        remaining = remaining[index:].strip()
    return chunks


def chunk_section(section: Section, limit: int = EXCEL_CELL_LIMIT) -> list[Row]:
    """Expand *section* into rows that each fit in one cell.

    Parameters
    ----------
    section:
        Section produced by the extractor.
    limit:
        Maximum UTF-16 code units per cell.

    Returns
    -------
    list[Row]
        A single untouched row when the content fits; otherwise one row per
        chunk, titled ``title``, ``title-2``, ``title-3`` …
    """
    if utf16_len(section.content) <= limit:
        return [Row(title=section.title, content=section.content)]

    return [
        Row(title=section.title if idx == 0 else f"{section.title}-{idx + 1}", content=chunk)
        for idx, chunk in enumerate(split_long_content(section.content, limit))
    ]
