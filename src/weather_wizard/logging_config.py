"""Centralized logging configuration."""

import logging

from weather_wizard.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server and HTTP client loggers that install their own handlers
THIRD_PARTY_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "fastapi")


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level)
    return resolved if isinstance(resolved, int) else logging.INFO


def _use_console_handler(logger: logging.Logger, formatter: logging.Formatter, level: int) -> None:
    """Replace a logger's handlers with a single console handler."""
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(level: str = LOG_LEVEL):
    """
    Send application, server and HTTP client logs to the console in one format.

    Args:
        level: Log level name, unknown names fall back to INFO
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    log_level = _resolve_level(level)

    _use_console_handler(logging.getLogger(), formatter, log_level)

    for logger_name in THIRD_PARTY_LOGGERS:
        logger = logging.getLogger(logger_name)
        _use_console_handler(logger, formatter, log_level)
        # Don't propagate to avoid duplicate messages
        logger.propagate = False
