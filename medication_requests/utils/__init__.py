"""Utility functions for medication request processing."""

from .error_handler import format_error_for_user, log_operation
from .logger import logger, setup_logger

__all__ = [
    # Logger utilities
    "setup_logger",
    "logger",
    # Error handling utilities
    "format_error_for_user",
    "log_operation",
]
