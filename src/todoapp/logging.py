"""Centralized logging configuration for todoapp.

Call configure_logging() once from the CLI entry point before running
commands. The interactive shell owns stdout, so console logs go to stderr
and default to WARNING.

Logging Levels:
- DEBUG: Cache reads/writes, rejected todo numbers
- INFO: Todo mutations (added, toggled, deleted)
- WARNING: Unreadable or corrupt todos file
- ERROR: Failed writes
"""

import json
import logging
import os
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from todoapp.config.models import LOG_LEVELS

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "TODOAPP_LOG_LEVEL"

# Default retention period for log files
DEFAULT_LOG_RETENTION_DAYS = 7

# LogRecord attributes that are not user-supplied ``extra`` fields
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "component"}


def prune_old_logs(
    logs_dir: Path,
    retention_days: int = DEFAULT_LOG_RETENTION_DAYS,
    suffix: str = ".jsonl",
) -> int:
    """Remove ``*<suffix>`` files in ``logs_dir`` last written before the cutoff.

    Files that vanish or cannot be removed are skipped. Returns how many were
    removed.
    """
    if not logs_dir.is_dir():
        return 0

    cutoff = (datetime.now(UTC) - timedelta(days=retention_days)).timestamp()
    removed = 0
    for log_file in logs_dir.glob(f"*{suffix}"):
        try:
            if log_file.is_file() and log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                removed += 1
        except OSError:
            continue
    return removed


def _component(name: str) -> str:
    parts = name.split(".")
    if len(parts) >= 2 and parts[0] == "todoapp":
        return parts[1]
    return parts[0]


def _extra_fields(record: logging.LogRecord) -> dict[str, object]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class JSONLHandler(logging.Handler):
    """Appends one JSON object per record to a per-day file.

    Records land in ``<logs_dir>/<UTC date>.jsonl``. Crossing midnight switches
    to a new file, and each switch also drops day files past retention.
    """

    def __init__(
        self,
        logs_dir: Path,
        retention_days: int = DEFAULT_LOG_RETENTION_DAYS,
    ):
        super().__init__()
        logs_dir.mkdir(parents=True, exist_ok=True)
        self._logs_dir = logs_dir
        self._retention_days = retention_days
        self._day: str | None = None
        self._stream: TextIO | None = None

    def _stream_for_today(self) -> TextIO:
        today = datetime.now(UTC).date().isoformat()
        if self._stream is not None and self._day == today:
            return self._stream

        self._close_stream()
        self._day = today
        self._stream = (self._logs_dir / f"{today}.jsonl").open(
            "a", encoding="utf-8"
        )
        prune_old_logs(self._logs_dir, self._retention_days)
        return self._stream

    def _close_stream(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry: dict[str, object] = {
                "ts": datetime.now(UTC).isoformat(),
                "level": record.levelname,
                "component": _component(record.name),
                "logger": record.name,
                "message": record.getMessage(),
            }
            if record.exc_info:
                formatter = self.formatter or logging.Formatter()
                entry["exception"] = formatter.formatException(record.exc_info)
            if extra := _extra_fields(record):
                entry["extra"] = extra

            stream = self._stream_for_today()
            stream.write(json.dumps(entry, default=str) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self._close_stream()
        super().close()


class ComponentFormatter(logging.Formatter):
    """Formatter that shortens logger paths to component names.

    - todoapp.todos.cache -> todos
    - todoapp.cli.shell -> cli
    """

    def format(self, record: logging.LogRecord) -> str:
        record.component = _component(record.name)
        return super().format(record)


def resolve_log_level(level: str | None = None) -> str:
    """Resolve a log level name from the argument or TODOAPP_LOG_LEVEL."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    level = level.upper()
    if level not in LOG_LEVELS:
        level = DEFAULT_LOG_LEVEL
    return level


def configure_logging(
    level: str | None = None,
    log_to_file: bool = False,
) -> None:
    """Configure logging for todoapp.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses TODOAPP_LOG_LEVEL env var or WARNING.
        log_to_file: Also write logs to JSONL files in ~/.todoapp/logs/.
    """
    from todoapp.config.paths import get_logs_path

    log_level = getattr(logging, resolve_log_level(level))

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=False,
        show_path=False,
        show_time=True,
        markup=False,
    )
    console_handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    handlers: list[logging.Handler] = [console_handler]

    if log_to_file:
        file_handler = JSONLHandler(get_logs_path())
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )
