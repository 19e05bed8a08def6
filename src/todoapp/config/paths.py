"""Centralized path management for todoapp.

All state (config, todos, logs) is stored under a single base directory.
The base directory can be overridden with the TODOAPP_HOME environment variable.

Default locations:
- Linux/macOS: ~/.todoapp
- Windows: %USERPROFILE%\\.todoapp
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "TODOAPP_HOME"
TODOS_FILENAME = "todos.json"


@lru_cache(maxsize=1)
def get_todoapp_home() -> Path:
    """Get the base directory for all todoapp data.

    Resolution order:
    1. TODOAPP_HOME environment variable (if set)
    2. Platform default (~/.todoapp)

    Returns:
        Path to the todoapp home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".todoapp"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_todoapp_home() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_todoapp_home() / "data"


def get_todos_path() -> Path:
    """Get the default todos file path."""
    return get_data_dir() / TODOS_FILENAME


def get_logs_path() -> Path:
    """Get the default logs directory path."""
    return get_todoapp_home() / "logs"


def get_all_paths() -> dict[str, Path]:
    """Get all standard paths, keyed by name."""
    return {
        "home": get_todoapp_home(),
        "config": get_config_path(),
        "data": get_data_dir(),
        "todos": get_todos_path(),
        "logs": get_logs_path(),
    }
