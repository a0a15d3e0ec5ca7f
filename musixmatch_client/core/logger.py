"""
Logging configuration for musixmatch-client.

Library modules only ever call get_logger(__name__); they never install
handlers. Applications (and the mxm command-line interface) call
setup_logging() once at startup to get:
    - Console: colored, compact output at the configured level
    - Log file (optional): every record at DEBUG and above, detailed format
    - Error log file (optional): ERROR and CRITICAL records only, written
      next to the main log file as <name>.errors<suffix>

The user token travels in every request URL. Use mask_token() before a
URL or token reaches a log record.

Usage:
    from musixmatch_client.core.logger import setup_logging, get_logger

    setup_logging("DEBUG", log_file=Path("mxm.log"))  # Call once at startup
    logger = get_logger(__name__)

    logger.info("Searching tracks")
"""

import logging
import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import quote

import colorama
from colorama import Fore, Style


# Root logger name for the whole library
LOGGER_NAME = "musixmatch_client"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at DEBUG level
QUIET_LIBRARIES = ("urllib3", "requests")


class ColoredConsoleFormatter(logging.Formatter):
    """
    Formatter that adds colors to console output.

    Colors:
        - DEBUG: Blue
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bright Red
    """

    LEVEL_COLORS = {
        logging.DEBUG: Fore.BLUE,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Style.BRIGHT + Fore.RED,
    }

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as "LEVEL: message", coloring the level name.

        Exception info, when present, is appended on the following lines.
        """
        levelname = record.levelname
        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelno, Fore.WHITE)
            levelname = f"{color}{levelname}{Style.RESET_ALL}"

        message = f"{levelname}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


class ErrorOnlyFilter(logging.Filter):
    """
    Filter that only allows ERROR and CRITICAL level records.

    Used by the error log file handler to exclude DEBUG, INFO, and WARNING.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    colored: bool = True,
    stream: TextIO | None = None
) -> None:
    """
    Configure the library logger for an application.

    Call this ONCE at startup. Calling it again replaces the handlers
    installed by the previous call.

    Args:
        level: Console log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of the detailed log file. Its parent directory
                  is created if needed. A sibling error-only log is created too.
        colored: Whether console output uses ANSI colors.
        stream: Console stream. Defaults to sys.stderr.

    Behavior:
        1. Set the library logger level to DEBUG (handlers filter)
        2. Remove handlers installed by a previous call
        3. Add the colored console handler at the requested level
        4. If log_file is given, add the full and error-only file handlers
        5. Silence urllib3/requests below WARNING
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    colorama.just_fix_windows_console()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    _remove_handlers(logger)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(ColoredConsoleFormatter(use_colors=colored))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_formatter = logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT)

        full_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(file_formatter)
        logger.addHandler(full_handler)

        error_log = log_file.with_name(f"{log_file.stem}.errors{log_file.suffix}")
        error_handler = logging.FileHandler(error_log, mode="a", encoding="utf-8")
        error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
        error_handler.addFilter(ErrorOnlyFilter())
        error_handler.setFormatter(file_formatter)
        logger.addHandler(error_handler)

    for library in QUIET_LIBRARIES:
        logging.getLogger(library).setLevel(logging.WARNING)

    logger.debug(f"Logging initialized - Level: {level}, File: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name, typically __name__. Names outside the library
              namespace are nested under it so setup_logging() applies.

    Returns:
        The logger instance.
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def mask_token(text: str, token: str) -> str:
    """
    Replace every occurrence of token in text with a short masked form.

    Both the raw token and its percent-encoded form are replaced, so a
    token with reserved characters is hidden inside a request URL too.

    Args:
        text: Text that may contain the token (typically a request URL).
        token: The secret to hide. Empty tokens leave text unchanged.

    Returns:
        Text with the token replaced by its first four characters and '***'.
        Tokens of eight characters or fewer are replaced by '***' alone.

    Example:
        mask_token("...&usertoken=abcdef123", "abcdef123")
        # '...&usertoken=abcd***'
    """
    if not token:
        return text
    masked = f"{token[:4]}***" if len(token) > 8 else "***"
    for secret in (quote(token, safe=""), token):
        text = text.replace(secret, masked)
    return text


def shutdown_logging() -> None:
    """
    Flush, close and remove the handlers installed by setup_logging().

    Typically called in a finally block at application exit.
    """
    _remove_handlers(logging.getLogger(LOGGER_NAME))


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
