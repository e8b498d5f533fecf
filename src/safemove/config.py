"""Application configuration management for safemove.

This module handles the creation, reading, and writing of app-level
configuration stored in OS-specific application data directories. The
settings only provide defaults for the command-line interface; the library
functions take everything as arguments.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_dir

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_app_config_dir() -> Path:
    """Get the application configuration directory path.

    The directory path is OS-dependent:
    - macOS: ~/Library/Application Support/safemove
    - Linux: ~/.config/safemove
    - Windows: %APPDATA%/safemove

    Can be overridden for testing purposes using the SAFEMOVE_APP_CONFIG_DIR
    environment variable.

    Returns:
        Path object pointing to the app configuration directory.
    """
    override_dir = os.environ.get("SAFEMOVE_APP_CONFIG_DIR")
    if override_dir:
        return Path(override_dir)
    return Path(user_config_dir("safemove", appauthor=False))


def get_app_config_path() -> Path:
    """Get the full path to the app configuration file."""
    return get_app_config_dir() / "config.yaml"


def ensure_app_config() -> None:
    """Ensure the app configuration directory and file exist.

    Creates the configuration directory and an empty config.yaml file if they
    don't already exist. Safe to call multiple times.

    Raises:
        OSError: If directory or file creation fails.
    """
    config_dir = get_app_config_dir()
    config_file = get_app_config_path()

    config_dir.mkdir(parents=True, exist_ok=True)

    if not config_file.exists():
        config_file.write_text("{}\n")


def load_app_config() -> dict[str, Any]:
    """Load and parse the app configuration file.

    Returns:
        Dictionary containing the parsed configuration data. Empty if the
        file is empty or does not hold a mapping.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file contains invalid YAML syntax.
    """
    ensure_app_config()
    config_file = get_app_config_path()

    content = config_file.read_text()
    if not content.strip():
        return {}

    config = yaml.safe_load(content)
    return config if isinstance(config, dict) else {}


def save_app_config(config: dict[str, Any]) -> None:
    """Save configuration data to the app configuration file.

    Raises:
        OSError: If the file cannot be written.
        yaml.YAMLError: If the data cannot be serialized to YAML.
    """
    ensure_app_config()
    config_file = get_app_config_path()

    content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
    config_file.write_text(content)


def get_log_level() -> str:
    """Get the configured log level name, falling back to WARNING."""
    level = load_app_config().get("log_level")
    if isinstance(level, str) and level.upper() in VALID_LOG_LEVELS:
        return level.upper()
    return DEFAULT_LOG_LEVEL


def set_log_level(level: str) -> None:
    """Persist the log level used by the CLI.

    Raises:
        ValueError: If level is not a known logging level name.
    """
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level}'. Expected one of: {', '.join(VALID_LOG_LEVELS)}"
        )
    config = load_app_config()
    config["log_level"] = normalized
    save_app_config(config)


def get_replace_existing() -> bool:
    """Get whether the CLI replaces existing files by default."""
    return load_app_config().get("replace_existing") is True


def set_replace_existing(enabled: bool) -> None:
    """Persist the CLI default for replacing existing files."""
    config = load_app_config()
    config["replace_existing"] = bool(enabled)
    save_app_config(config)
