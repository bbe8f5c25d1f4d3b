"""Truncation entry points."""

import re
from functools import partial
from typing import Callable, Optional, Union

from ansi_truncate.core.slicer import Boundary
from ansi_truncate.core.strategies import (
    truncate_ends,
    truncate_from,
    truncate_middle,
    truncate_start,
)
from ansi_truncate.models.config import Position, TruncationConfig, resolve_position
from ansi_truncate.utils.logging import get_logger

logger = get_logger(__name__)

Separator = Union[str, re.Pattern, Boundary, None]
Strategy = Callable[[str, int, str, Optional[Boundary]], str]

# Strategy registry
STRATEGIES: dict[Position, Strategy] = {
    Position.START: truncate_start,
    Position.END: partial(truncate_from, 0),
    Position.MIDDLE: truncate_middle,
    Position.ENDS: truncate_ends,
}


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


def boundary_predicate(separator: Separator) -> Optional[Boundary]:
    """Turn a separator into a word boundary predicate.

    Args:
        separator: Regex string, compiled pattern, predicate or None.

    Returns:
        Predicate matching boundary characters, or None for no word mode.
    """
    if separator is None:
        return None
    if isinstance(separator, str):
        separator = re.compile(separator)
    if isinstance(separator, re.Pattern):
        return lambda char: separator.search(char) is not None
    return separator


class Truncator:
    """Truncates text using a fixed configuration.

    Example:
        >>> truncator = Truncator(length=20, omission="[...]")
        >>> truncator.truncate("It is not down on any map; true places never are.")
        'It is not down [...]'
    """

    def __init__(self, config: Optional[TruncationConfig] = None, **options):
        """Initialize truncator.

        Args:
            config: Base configuration. Defaults to TruncationConfig().
            **options: Field overrides applied on top of config.
        """
        if config is None:
            config = TruncationConfig()
        if options:
            config = TruncationConfig(**{**config.model_dump(), **options})
        self._config = config

    @property
    def configuration(self) -> TruncationConfig:
        """Current configuration."""
        return self._config

    def configure(self, **options) -> "Truncator":
        """Return a new truncator with updated settings.

        Args:
            **options: length, omission, position or separator.

        Returns:
            New Truncator; this one is left unchanged.
        """
        return Truncator(self._config, **options)

    def truncate(
        self,
        text: str,
        truncate_at: Union[int, None, _Unset] = UNSET,
        *,
        length: Optional[int] = None,
        position: object = UNSET,
        separator: Union[Separator, _Unset] = UNSET,
        omission: Union[str, _Unset] = UNSET,
    ) -> str:
        """Truncate text to a display width.

        Args:
            text: Text to truncate, may contain ANSI escape sequences.
            truncate_at: Display width to truncate at.
            length: Same as truncate_at; takes precedence when given.
            position: Where to omit content: "start", "end", "middle",
                "ends" or a non-negative column offset.
            separator: Pattern or predicate for word boundaries.
                Pass None to disable word mode.
            omission: String shown in place of omitted content.

        Returns:
            Truncated text.

        Raises:
            UnsupportedPositionError: If position is not recognised.

        Example:
            >>> Truncator().truncate("It is not down on any map; true places never are.", 15)
            'It is not down…'
        """
        config = self._config
        if truncate_at is UNSET:
            truncate_at = config.length
        if length is not None:
            truncate_at = length
        if position is UNSET:
            position = config.position
        if separator is UNSET:
            separator = config.separator
        if omission is UNSET:
            omission = config.omission

        if truncate_at is None or len(text.encode("utf-8")) <= truncate_at:
            return text

        if truncate_at == 0:
            return ""

        boundary = boundary_predicate(separator)
        resolved = resolve_position(position)
        logger.debug(
            f"Truncating {len(text)} chars at width {truncate_at} "
            f"(position={resolved!s}, word_mode={boundary is not None})"
        )

        if isinstance(resolved, Position):
            return STRATEGIES[resolved](text, truncate_at, omission, boundary)
        return truncate_from(resolved, text, truncate_at, omission, boundary)


def truncate(
    text: str,
    truncate_at: Union[int, None, _Unset] = UNSET,
    *,
    config: Optional[TruncationConfig] = None,
    **overrides,
) -> str:
    """Truncate text with a one-off Truncator.

    Args:
        text: Text to truncate.
        truncate_at: Display width to truncate at; defaults to config.length.
        config: Configuration to use. Defaults to TruncationConfig().
        **overrides: length, position, separator or omission for this call.

    Returns:
        Truncated text.
    """
    return Truncator(config).truncate(text, truncate_at, **overrides)
