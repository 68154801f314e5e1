from __future__ import annotations

from .config import LoggingConfig
from .core import (
    configure_logging,
    flush_logging,
    get_default_log_path,
    get_logger,
)
from .handlers import ColorFormatter

__all__ = [
    "ColorFormatter",
    "LoggingConfig",
    "configure_logging",
    "flush_logging",
    "get_logger",
    "get_default_log_path",
]
