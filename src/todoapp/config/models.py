"""Configuration models using Pydantic."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, field_validator

from todoapp.config.paths import get_todos_path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or applied."""


class StorageBackend(StrEnum):
    """Where todos are kept."""

    FILE = "file"
    MEMORY = "memory"


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str | None = None  # None = TODOAPP_LOG_LEVEL or WARNING
    log_to_file: bool = False

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        upper = value.upper()
        if upper not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return upper


class TodoAppConfig(BaseModel):
    """Root configuration."""

    storage: StorageBackend = StorageBackend.FILE
    todos_file: Path | None = None
    logging: LoggingConfig = LoggingConfig()

    @property
    def resolved_todos_file(self) -> Path:
        """Todos file location, falling back to the data directory."""
        if self.todos_file is None:
            return get_todos_path()
        return self.todos_file.expanduser()
