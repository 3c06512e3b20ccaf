"""Per-invocation run context — timestamp, output paths and the log file."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from types import TracebackType

from mdx2excel.config import Settings
from mdx2excel.exceptions import WriteError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H-%M"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"

# Handler attaches here so every module logger in the package reaches the file.
_PACKAGE_LOGGER = "mdx2excel"


class RunContext:
    """State owned by one conversion run.

    Used as a context manager: entering creates the log directory and
    attaches a ``FileHandler`` to the package logger, exiting always
    detaches and closes it.

    Parameters
    ----------
    settings:
        Resolved run settings.
    now:
        Start time of the run; defaults to the current local time.  The
        workbook and the log file share the timestamp derived from it.
    """

    def __init__(self, settings: Settings, now: datetime | None = None) -> None:
        self.settings = settings
        self.started_at = now or datetime.now()
        self.timestamp = self.started_at.strftime(TIMESTAMP_FORMAT)
        self._handler: logging.FileHandler | None = None
        self._previous_level: int | None = None

    @property
    def log_path(self) -> Path:
        return self.settings.log_dir / f"conversion-{self.timestamp}.log"

    @property
    def output_path(self) -> Path:
        return self.settings.output_dir / f"output-{self.timestamp}.xlsx"

    def __enter__(self) -> RunContext:
        try:
            self.settings.log_dir.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(self.log_path, mode="a", encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Cannot open log file {self.log_path}: {exc}") from exc

        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

        package_logger = logging.getLogger(_PACKAGE_LOGGER)
        if package_logger.getEffectiveLevel() > logging.INFO:
            self._previous_level = package_logger.level
            package_logger.setLevel(logging.INFO)
        package_logger.addHandler(handler)
        self._handler = handler
        logger.debug("Logging run %s to %s", self.timestamp, self.log_path)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Detach and close the log file handler.  Safe to call twice."""
        if self._handler is None:
            return
        package_logger = logging.getLogger(_PACKAGE_LOGGER)
        package_logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None
        if self._previous_level is not None:
            package_logger.setLevel(self._previous_level)
            self._previous_level = None
