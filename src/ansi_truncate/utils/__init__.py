"""Utility modules for ansi-truncate."""

from ansi_truncate.utils.logging import get_logger, setup_logging
from ansi_truncate.utils.text import (
    ANSI_ESCAPE_PATTERN,
    ANSI_RESET,
    ANSI_RESET_PATTERN,
    char_width,
    clean_ansi,
    display_width,
    is_ansi_tail,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    # Text
    "ANSI_ESCAPE_PATTERN",
    "ANSI_RESET",
    "ANSI_RESET_PATTERN",
    "char_width",
    "clean_ansi",
    "display_width",
    "is_ansi_tail",
]
