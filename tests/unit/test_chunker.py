"""Unit tests for the chunker module."""

from __future__ import annotations

from mdx2excel.config import EXCEL_CELL_LIMIT
from mdx2excel.ingestion.chunker import chunk_section, split_long_content, utf16_len
from mdx2excel.models import Section


def _squash(text: str) -> str:
    return "".join(text.split())


def test_short_content_is_returned_untouched() -> None:
    """Content within the limit keeps its title and surrounding whitespace."""
    section = Section(title="Guide", content="  body text \n")
    rows = chunk_section(section, limit=20)
    assert len(rows) == 1
    assert rows[0].title == "Guide"
    assert rows[0].content == "  body text \n"


def test_content_exactly_at_limit_is_not_split() -> None:
    section = Section(title="Guide", content="x" * 20)
    rows = chunk_section(section, limit=20)
    assert [r.content for r in rows] == ["x" * 20]


def test_split_prefers_paragraph_breaks() -> None:
    content = "a" * 10 + "\n\n" + "b" * 10 + "\n\n" + "c" * 10
    assert split_long_content(content, limit=20) == ["a" * 10, "b" * 10, "c" * 10]


def test_paragraph_break_at_the_limit_is_used() -> None:
    """A break starting exactly at the limit offset still counts."""
    content = "a" * 20 + "\n\n" + "b" * 5
    assert split_long_content(content, limit=20) == ["a" * 20, "b" * 5]


def test_split_falls_back_to_line_breaks() -> None:
    content = "a" * 8 + "\n" + "b" * 8 + "\n" + "c" * 8
    assert split_long_content(content, limit=20) == ["a" * 8 + "\n" + "b" * 8, "c" * 8]


def test_split_hard_cuts_unbroken_text() -> None:
    assert split_long_content("x" * 45, limit=20) == ["x" * 20, "x" * 20, "x" * 5]


def test_break_at_offset_zero_is_ignored() -> None:
    """A lone leading newline is not a usable split point; the text is hard-cut."""
    content = "\n" + "y" * 30
    assert split_long_content(content, limit=20) == ["y" * 19, "y" * 11]


def test_chunk_titles_are_numbered_from_two() -> None:
    section = Section(title="Guide-Setup", content="x" * 45)
    rows = chunk_section(section, limit=20)
    assert [r.title for r in rows] == ["Guide-Setup", "Guide-Setup-2", "Guide-Setup-3"]


def test_oversized_section_fits_excel_cells() -> None:
    """Realistic paragraphs above the Excel limit are split losslessly."""
    paragraph = ("Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 18).strip()
    content = "\n\n".join(f"{idx}. {paragraph}" for idx in range(60))
    assert len(content) > EXCEL_CELL_LIMIT

    rows = chunk_section(Section(title="Big", content=content))

    assert len(rows) > 1
    assert all(len(r.content) <= EXCEL_CELL_LIMIT for r in rows)
    assert _squash("".join(r.content for r in rows)) == _squash(content)
    # Every cut lands on a paragraph boundary.
    assert all(r.content.split(". ", 1)[0].isdigit() for r in rows)
    assert [r.title for r in rows] == ["Big"] + [f"Big-{n}" for n in range(2, len(rows) + 1)]


def test_split_keeps_text_between_cuts() -> None:
    content = "one two\nthree four\n\nfive six seven\neight"
    chunks = split_long_content(content, limit=12)
    assert all(len(c) <= 12 for c in chunks)
    assert _squash("".join(chunks)) == _squash(content)


# ── UTF-16 measurement ──────────────────────────────────────────────────

EMOJI = "\U0001F600"


def test_utf16_len_counts_astral_characters_twice() -> None:
    assert utf16_len("ab") == 2
    assert utf16_len(EMOJI) == 2
    assert utf16_len("a" + EMOJI + "中") == 4


def test_astral_content_under_char_count_is_still_split() -> None:
    """Six emoji are six characters but twelve cell units."""
    rows = chunk_section(Section(title="T", content=EMOJI * 6), limit=10)
    assert [r.content for r in rows] == [EMOJI * 5, EMOJI]
    assert [r.title for r in rows] == ["T", "T-2"]


def test_hard_cut_never_splits_a_surrogate_pair() -> None:
    chunks = split_long_content(EMOJI * 15, limit=9)
    assert chunks == [EMOJI * 4, EMOJI * 4, EMOJI * 4, EMOJI * 3]
    assert all(utf16_len(c) <= 9 for c in chunks)


def test_line_break_search_uses_cell_units() -> None:
    """A newline within the limit in characters but past it in units is not used."""
    content = EMOJI * 6 + "\n" + "b" * 3
    chunks = split_long_content(content, limit=10)
    assert chunks == [EMOJI * 5, EMOJI + "\n" + "b" * 3]


def test_emoji_heavy_section_fits_excel_cells() -> None:
    rows = chunk_section(Section(title="T", content=EMOJI * 20000))
    assert len(rows) == 2
    assert all(utf16_len(r.content) <= EXCEL_CELL_LIMIT for r in rows)
    assert "".join(r.content for r in rows) == EMOJI * 20000
