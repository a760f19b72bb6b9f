"""Utility modules for resumefit."""

from resumefit.utils.logging import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]
