"""Configuration models for ansi-truncate."""

import re
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ansi_truncate.exceptions import UnsupportedPositionError


class Position(str, Enum):
    """Where omitted content is removed from."""

    START = "start"
    END = "end"
    MIDDLE = "middle"
    ENDS = "ends"


def resolve_position(position: object) -> Union[Position, int]:
    """Normalize a position selector.

    Args:
        position: A Position, its name ("start", "end", "middle", "ends"),
            or a non-negative integer offset.

    Returns:
        The Position member, or the integer offset.

    Raises:
        UnsupportedPositionError: If the selector is none of the above.
    """
    if isinstance(position, Position):
        return position
    if isinstance(position, str):
        try:
            return Position(position.lower())
        except ValueError:
            raise UnsupportedPositionError(position) from None
    # bool is an int subclass but never an offset
    if isinstance(position, int) and not isinstance(position, bool) and position >= 0:
        return position
    raise UnsupportedPositionError(position)


class TruncationConfig(BaseModel):
    """Default truncation settings."""

    model_config = ConfigDict(frozen=True)

    length: Optional[int] = Field(default=30, ge=0)
    omission: str = "…"
    position: Union[Position, int] = Position.END
    separator: Optional[Union[str, re.Pattern]] = None

    @field_validator("position", mode="before")
    @classmethod
    def _check_position(cls, value: object) -> Union[Position, int]:
        return resolve_position(value)
