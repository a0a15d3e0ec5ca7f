"""
Configuration management for musixmatch-client.

This module handles loading, validating, and providing access to the
configuration stored in config.yaml and in the environment.

The configuration contains:
    - The Musixmatch user token used to authenticate every request
    - Optional overrides of the API root URL and application identifier
    - Logging level and optional log file for the command-line interface

Sources and Precedence:
    1. MUSIXMATCH_USER_TOKEN environment variable (a .env file in the
       current directory is loaded first, if present)
    2. config.yaml (explicit path, or the current working directory)
    3. Built-in defaults

    The config file is optional when the token comes from the environment.

Example config.yaml:
    musixmatch:
      user_token: "your_user_token_here"
      api_url: "https://apic-desktop.musixmatch.com/ws/1.1/"  # optional
      app_id: "web-desktop-app-v1.0"                         # optional

    logging:
      level: "INFO"
      file: null  # Optional: path to a log file
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from musixmatch_client.api.methods import DEFAULT_API_URL, DEFAULT_APP_ID
from musixmatch_client.core.exceptions import ConfigError


# Default configuration file name (looked up in current working directory)
CONFIG_FILENAME = "config.yaml"

# Environment variable holding the user token
TOKEN_ENV_VAR = "MUSIXMATCH_USER_TOKEN"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class MusixmatchConfig:
    """
    Service access configuration.

    Attributes:
        user_token: Opaque token sent as the 'usertoken' query parameter.
        api_url: Root URL that endpoint paths are appended to.
        app_id: Application identifier sent as the 'app_id' query parameter.
    """
    user_token: str
    api_url: str = DEFAULT_API_URL
    app_id: str = DEFAULT_APP_ID


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging configuration used by the command-line interface.

    Attributes:
        level: Console log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file: Optional path of a detailed log file. None disables file logging.
    """
    level: str = "INFO"
    file: Path | None = None


@dataclass(frozen=True)
class Config:
    """
    Complete configuration, created by load_config().

    Attributes:
        musixmatch: Service access settings.
        logging: Logging settings.

    Example:
        config = load_config()
        client = MusixmatchClient(
            config.musixmatch.user_token,
            api_url=config.musixmatch.api_url,
            app_id=config.musixmatch.app_id
        )
    """
    musixmatch: MusixmatchConfig
    logging: LoggingConfig


def load_config(
    config_path: Path | None = None,
    user_token: str | None = None
) -> Config:
    """
    Load and validate configuration from config.yaml and the environment.

    Args:
        config_path: Optional explicit path to config file.
                     If None, looks for config.yaml in current working directory.
                     An explicit path that does not exist is an error; the
                     implicit one is simply skipped.
        user_token: Optional token that takes precedence over both the
                    environment and the file (used by the --token CLI option).

    Returns:
        Config: A frozen dataclass containing all configuration values.

    Raises:
        ConfigError: If the file has invalid YAML syntax, is not a mapping,
                     contains invalid values, or if no user token can be
                     found in either the file or the environment.
    """
    load_dotenv(find_dotenv(usecwd=True))

    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    raw_config: dict[str, Any] = {}
    if config_path.exists():
        raw_config = _read_config_file(config_path)
    elif explicit:
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            details={"file_path": str(config_path)}
        )

    musixmatch_config = _parse_musixmatch_config(
        _get_section(raw_config, "musixmatch"),
        user_token or os.environ.get(TOKEN_ENV_VAR)
    )
    logging_config = _parse_logging_config(_get_section(raw_config, "logging"))

    return Config(musixmatch=musixmatch_config, logging=logging_config)


def _read_config_file(config_path: Path) -> dict[str, Any]:
    """
    Read and parse the YAML file.

    An empty file is treated as an empty mapping.

    Raises:
        ConfigError: On read errors, YAML syntax errors or non-mapping content.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    if raw_config is None:
        return {}

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    return raw_config


def _get_section(raw_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a section of the raw config, or an empty dict if absent."""
    section = raw_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Section '{name}' must be a dictionary",
            details={"section": name}
        )
    return section


def _parse_musixmatch_config(
    section: dict[str, Any],
    env_token: str | None
) -> MusixmatchConfig:
    """
    Parse and validate the 'musixmatch' section.

    The override token (explicit or environment), when set and non-blank,
    replaces the file value.

    Raises:
        ConfigError: If no token is available or a field has the wrong type.
    """
    token = env_token if env_token and env_token.strip() else section.get("user_token")

    if not isinstance(token, str) or not token.strip():
        raise ConfigError(
            f"A user token is required: set 'musixmatch.user_token' "
            f"or the {TOKEN_ENV_VAR} environment variable",
            details={"field": "musixmatch.user_token"}
        )

    api_url = _optional_string(section, "api_url", DEFAULT_API_URL)
    app_id = _optional_string(section, "app_id", DEFAULT_APP_ID)

    return MusixmatchConfig(
        user_token=token.strip(),
        api_url=api_url,
        app_id=app_id
    )


def _parse_logging_config(section: dict[str, Any]) -> LoggingConfig:
    """
    Parse and validate the 'logging' section, applying defaults.

    Raises:
        ConfigError: If the level is unknown or the file is not a string.
    """
    level = _optional_string(section, "level", "INFO").upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigError(
            f"'logging.level' must be one of {', '.join(VALID_LOG_LEVELS)}",
            details={"field": "logging.level", "value": level}
        )

    log_file = None
    raw_file = section.get("file")
    if raw_file is not None:
        if not isinstance(raw_file, str) or not raw_file.strip():
            raise ConfigError(
                "'logging.file' must be a string path or null",
                details={"field": "logging.file"}
            )
        log_file = Path(raw_file.strip()).expanduser().resolve()

    return LoggingConfig(level=level, file=log_file)


def _optional_string(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(
            f"'{key}' must be a non-empty string",
            details={"field": key}
        )
    return value.strip()
