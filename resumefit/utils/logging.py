"""Logging setup for resumefit."""

import logging
import sys

LOGGER_NAME = "resumefit"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Attach a single stderr handler to the ``resumefit`` logger.

    Calling this again only adjusts the level; handlers are installed once.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown names and
            ``None`` fall back to INFO.
        format_string: Record format.
        date_format: Timestamp format.

    Returns:
        The package logger.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger.setLevel(log_level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
    logger.addHandler(handler)
    # Keep records out of the root logger so host applications don't double-print.
    logger.propagate = False

    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return ``resumefit.<name>``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Drop handlers and forget configuration (tests)."""
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _configured = False
