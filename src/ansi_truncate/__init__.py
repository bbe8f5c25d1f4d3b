"""ANSI-aware text truncation."""

__version__ = "0.1.0"

from ansi_truncate.core.slicer import SliceResult, slice_text
from ansi_truncate.core.truncator import Truncator, truncate
from ansi_truncate.exceptions import TruncationError, UnsupportedPositionError
from ansi_truncate.models.config import Position, TruncationConfig
from ansi_truncate.utils.text import clean_ansi, display_width

__all__ = [
    "__version__",
    # Truncation
    "Truncator",
    "truncate",
    "slice_text",
    "SliceResult",
    # Config
    "Position",
    "TruncationConfig",
    # Errors
    "TruncationError",
    "UnsupportedPositionError",
    # Text
    "clean_ansi",
    "display_width",
]
