"""Logging and configuration helpers."""

from .logger import configure_logging, get_logger, PathQueryLogger, LogLevel
from .config import load_settings

__all__ = [
    "configure_logging",
    "get_logger",
    "PathQueryLogger",
    "LogLevel",
    "load_settings",
]
