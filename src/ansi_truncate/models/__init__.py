"""Data models for ansi-truncate."""

from ansi_truncate.models.config import Position, TruncationConfig, resolve_position

__all__ = ["Position", "TruncationConfig", "resolve_position"]
