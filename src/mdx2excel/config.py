"""Shared configuration loaded from environment / ``.env`` / CLI flags."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EXCEL_CELL_LIMIT = 32767


class Settings(BaseSettings):
    """Run settings, populated from ``MDX2EXCEL_*`` env vars or a .env file.

    Command-line flags are passed as init kwargs and therefore take
    precedence over the environment.
    """

    # Input
    source_dir: Path = Field(default=Path("./content"), description="Root directory scanned for documents")
    ignore_dirs: list[str] = Field(
        default_factory=list,
        description=(
            "Path substrings to skip during traversal. A file or directory is "
            "ignored when its full path contains any of them."
        ),
    )
    extensions: tuple[str, ...] = (".md", ".mdx")

    # Output
    output_dir: Path = Field(default=Path("./excel"), description="Directory receiving the workbook")
    sheet_name: str = Field(default="MDX Content", max_length=31)
    cell_limit: int = Field(default=EXCEL_CELL_LIMIT, gt=0, le=EXCEL_CELL_LIMIT)

    # Logging
    log_dir: Path = Field(default=Path("./logs"), description="Directory receiving the per-run log file")

    model_config = SettingsConfigDict(
        env_prefix="MDX2EXCEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
