"""Configuration loading from TOML files."""

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from todoapp.config.models import ConfigError, TodoAppConfig
from todoapp.config.paths import get_config_path

logger = logging.getLogger(__name__)


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("config.toml"),  # Current directory
        get_config_path(),  # ~/.todoapp/config.toml (or TODOAPP_HOME)
    ]


def load_config(path: Path | None = None) -> TodoAppConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit path to config file. If None, searches default locations
            and falls back to defaults when none exists.

    Returns:
        Validated TodoAppConfig instance.

    Raises:
        FileNotFoundError: If an explicit config file does not exist.
        ConfigError: If the config file is not valid TOML or fails validation.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in _get_default_config_paths():
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        logger.debug("config_not_found_using_defaults")
        return get_default_config()

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        return TodoAppConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e


def get_default_config() -> TodoAppConfig:
    """Get the default configuration."""
    return TodoAppConfig()
