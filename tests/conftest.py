"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mdx2excel.config import Settings


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: marks tests that run a full conversion on disk")


@pytest.fixture()
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture()
def write_doc(source_dir: Path) -> Callable[..., Path]:
    """Return a helper that writes a UTF-8 document below ``source_dir``."""

    def _write(name: str, text: str) -> Path:
        path = source_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def settings(tmp_path: Path, source_dir: Path) -> Settings:
    return Settings(
        source_dir=source_dir,
        output_dir=tmp_path / "excel",
        log_dir=tmp_path / "logs",
        ignore_dirs=[],
    )
