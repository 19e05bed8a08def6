"""Configuration module."""

from todoapp.config.loader import get_default_config, load_config
from todoapp.config.models import (
    ConfigError,
    LoggingConfig,
    StorageBackend,
    TodoAppConfig,
)
from todoapp.config.paths import (
    get_config_path,
    get_logs_path,
    get_todoapp_home,
    get_todos_path,
)

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "StorageBackend",
    "TodoAppConfig",
    "get_config_path",
    "get_default_config",
    "get_logs_path",
    "get_todoapp_home",
    "get_todos_path",
    "load_config",
]
