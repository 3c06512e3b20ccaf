"""Section extraction — main title resolution and ``##``-level partitioning.

The body is scanned line by line.  Every level-2 heading opens a new
partition; whatever precedes the first one is the preamble and is filed
under the document's main title.  Deeper headings (``###`` …) are plain
content and never split anything.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from langchain_core.documents import Document

from mdx2excel.models import Section

# Only "\n" ends a line; other separators such as \f stay inside it.
_LINE_END_RE = re.compile(r"(?<=\n)")

# `#`/`##`, at least one blank, then title text. Matched on rstripped lines.
_H1_RE = re.compile(r"#[ \t]+(.+)")
_H2_RE = re.compile(r"##[ \t]+(.+)")


def heading_text(line: str, level: int) -> str | None:
    """Return the heading text if *line* is a heading of exactly *level*."""
    pattern = _H1_RE if level == 1 else _H2_RE
    match = pattern.fullmatch(line.rstrip())
    return match.group(1) if match else None


def _lines(body: str) -> list[str]:
    """Split *body* after each newline, keeping the line endings."""
    return [line for line in _LINE_END_RE.split(body) if line]


def resolve_main_title(body: str, metadata: dict[str, Any], source: str | Path) -> str:
    """Pick the document title.

    Priority: the first ``# `` heading anywhere in *body*, then a truthy
    front-matter ``title``, then the file name without its extension.
    """
    for line in _lines(body):
        text = heading_text(line, 1)
        if text is not None:
            return text
    title = metadata.get("title")
    if title:
        return str(title)
    return Path(source).stem


@dataclass
class Partition:
    """Raw slice of the body between two ``##`` headings."""

    heading: str | None
    lines: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.lines)


def split_partitions(body: str) -> list[Partition]:
    """Cut *body* at every level-2 heading line.

    The first partition has ``heading=None`` when there is text before the
    first ``##`` heading; every other partition starts at its heading line,
    which is not kept in ``lines``.
    """
    partitions: list[Partition] = []
    for line in _lines(body):
        heading = heading_text(line, 2)
        if heading is not None:
            partitions.append(Partition(heading=heading))
        elif not partitions:
            partitions.append(Partition(heading=None, lines=[line]))
        else:
            partitions[-1].lines.append(line)
    return partitions


def extract_sections(document: Document) -> list[Section]:
    """Turn a loaded document into its ordered, non-empty sections."""
    body = document.page_content
    main_title = resolve_main_title(body, document.metadata, document.metadata.get("source", ""))

    sections: list[Section] = []
    for partition in split_partitions(body):
        content = partition.text.strip()
        if not content:
            continue
        if partition.heading is None:
            sections.append(Section(title=main_title, content=content))
        else:
            sections.append(Section(title=f"{main_title}-{partition.heading}", content=content))
    return sections
