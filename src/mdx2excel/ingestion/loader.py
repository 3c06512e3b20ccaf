"""Document loader — reads a Markdown/MDX file and splits off its front matter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from langchain_core.documents import Document

from mdx2excel.exceptions import ParseError, ReadError

logger = logging.getLogger(__name__)

_OPENING = "---"
_CLOSING = ("---", "...")


def _locate_block(text: str) -> tuple[str, str] | None:
    """Return ``(raw_yaml, body)`` when *text* opens with a delimited block."""
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _OPENING:
        return None
    for idx in range(1, len(lines)):
        if lines[idx].rstrip() in _CLOSING:
            return "".join(lines[1:idx]), "".join(lines[idx + 1 :])
    return None


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Separate a leading YAML front-matter block from *text*.

    The block must start on the very first line with ``---`` and end at the
    next line that is exactly ``---`` (or ``...``).  Without an opening or a
    closing marker the whole text is body and the metadata is empty.

    Returns
    -------
    tuple[dict, str]
        ``(metadata, body)``.

    Raises
    ------
    ParseError
        If the block is not valid YAML or does not hold a mapping.
    """
    block = _locate_block(text)
    if block is None:
        return {}, text
    raw, body = block

    try:
        data = yaml.safe_load(raw) if raw.strip() else {}
    except (yaml.YAMLError, RecursionError) as exc:
        raise ParseError(f"Invalid YAML front matter: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(f"Front matter must be a mapping, got {type(data).__name__}")
    return {str(key): value for key, value in data.items()}, body


def load_document(path: str | Path) -> Document:
    """Load a single Markdown/MDX file.

    The returned ``Document`` carries the body as ``page_content``.  Its
    metadata holds the front-matter keys plus ``source`` (the file path,
    which overrides a front-matter ``source``).  Malformed front matter
    degrades to empty metadata.

    Raises
    ------
    ReadError
        If the file cannot be opened or is not valid UTF-8.
    """
    path = Path(path)
    try:
        # utf-8-sig drops a leading BOM so the opening marker is still seen
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Cannot read {path}: {exc}") from exc

    try:
        metadata, body = split_front_matter(text)
    except ParseError as exc:
        logger.warning("Ignoring front matter in %s: %s", path, exc)
        block = _locate_block(text)
        metadata, body = {}, block[1] if block else text

    metadata["source"] = str(path)
    return Document(page_content=body, metadata=metadata)
