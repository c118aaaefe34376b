"""Shared utility helpers for the Cashpot attachment cache."""

from .logging import LoggingOptions, configure_logging, get_logger, log_file_path
from .formatters import format_file_size, format_upload_date

__all__ = [
    "LoggingOptions",
    "configure_logging",
    "get_logger",
    "log_file_path",
    "format_file_size",
    "format_upload_date",
]
