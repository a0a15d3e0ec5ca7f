"""
Core module for musixmatch-client.

This module provides the foundational components used throughout the library:
    - exceptions: Custom exception classes for error handling
    - logger: Logging setup and token masking
    - config: Configuration loading and validation

Usage:
    from musixmatch_client.core import (
        Config, load_config,
        setup_logging, get_logger,
        MusixmatchError, ConfigError, EnvelopeError
    )
"""

from musixmatch_client.core.exceptions import (
    ApiStatusError,
    ConfigError,
    EnvelopeError,
    MusixmatchError,
    RegistryError,
)
from musixmatch_client.core.logger import (
    get_logger,
    mask_token,
    setup_logging,
    shutdown_logging,
)
from musixmatch_client.core.config import (
    Config,
    LoggingConfig,
    MusixmatchConfig,
    load_config,
)

__all__ = [
    # Config
    "Config",
    "MusixmatchConfig",
    "LoggingConfig",
    "load_config",
    # Exceptions
    "MusixmatchError",
    "ConfigError",
    "RegistryError",
    "EnvelopeError",
    "ApiStatusError",
    # Logger
    "setup_logging",
    "get_logger",
    "mask_token",
    "shutdown_logging",
]
