from __future__ import annotations

"""
Logging Handlers and Formatters.

Provides the handler factories used by the logging core, the tagging
mechanism that tells our handlers apart from library-injected ones, and
the level-colored console formatter used by the command line.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Dict, Optional, TextIO

_HANDLER_TAG_ATTR: str = "_skeldir_handler"

_RESET = "\033[0m"
_LEVEL_STYLES: Dict[int, str] = {
    logging.DEBUG: "\033[35m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
_LEVEL_TAGS: Dict[int, str] = {
    logging.DEBUG: "[DEBUG] ",
    logging.WARNING: "WARNING: ",
    logging.ERROR: "ERROR: ",
    logging.CRITICAL: "CRITICAL: ",
}

# ==============================================================================
# FORMATTERS
# ==============================================================================

class ColorFormatter(logging.Formatter):
    """
    Console formatter that tags and colors records by severity.

    INFO records are printed untouched; other levels get a short textual
    tag so they stay distinguishable when color is disabled.
    """

    def __init__(self, fmt: Optional[str] = None, *, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        tagged = _LEVEL_TAGS.get(record.levelno, "") + message
        style = _LEVEL_STYLES.get(record.levelno)
        if self.use_color and style:
            return f"{style}{tagged}{_RESET}"
        return tagged


def stream_supports_color(stream: TextIO) -> bool:
    """
    Decide whether ANSI colors should be written to `stream`.

    Honors the NO_COLOR convention and requires an interactive terminal.
    """
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False

# ==============================================================================
# HANDLER FACTORIES
# ==============================================================================

def _create_console_handler(level_int: int, fmt: str, color: bool) -> logging.Handler:
    """Build the stderr handler with the level-aware formatter."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(ColorFormatter(fmt, use_color=color and stream_supports_color(sys.stderr)))
    _tag_handler(sh)
    return sh


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler, reporting I/O problems on stderr.

    Returns:
        Optional[RotatingFileHandler]: Configured handler or None if I/O fails.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
        fh.setLevel(level_int)
        fh.setFormatter(formatter)
        _tag_handler(fh)
        return fh
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot write log file '{log_file}': {e}\n")
        return None

# ==============================================================================
# HANDLER TAGGING
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Check whether a handler carries our tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))
