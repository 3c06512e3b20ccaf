"""Domain models for extracted sections and spreadsheet rows."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Section(BaseModel):
    """A titled slice of a document, bounded by level-2 headings.

    Attributes
    ----------
    title:
        Main title for the preamble, or ``"<main title>-<heading>"`` for
        a ``##`` section.
    content:
        Section text without the heading line itself.
    """

    title: str = Field(min_length=1)
    content: str


class Row(BaseModel):
    """One spreadsheet record.

    The field order is the column order of the generated sheet, and the
    field names become its header row.

    Attributes
    ----------
    title:
        Section title, suffixed ``-2``, ``-3`` … for continuation chunks.
    content:
        Cell text, never longer than the configured cell limit.
    """

    title: str
    content: str

    @classmethod
    def columns(cls) -> list[str]:
        """Return the header labels in column order."""
        return list(cls.model_fields)

    def as_cells(self) -> list[str]:
        return [getattr(self, name) for name in self.columns()]
