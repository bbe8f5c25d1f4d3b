"""Truncation strategies, one per omission position.

Each strategy works out the display-width windows to keep and composes
one or two slices with the omission marker.
"""

from typing import Optional

from ansi_truncate.core.slicer import Boundary, slice_text
from ansi_truncate.utils.text import clean_ansi, display_width


def truncate_start(
    text: str,
    length: int,
    omission: str,
    separator: Optional[Boundary] = None,
) -> str:
    """Omit content from the start of text.

    Args:
        text: Text to truncate.
        length: Maximum display width of the result.
        omission: String that stands in for omitted content.
        separator: Optional word boundary predicate.

    Returns:
        Truncated text.
    """
    text_width = display_width(clean_ansi(text))
    omission_width = display_width(omission)
    if text_width <= length:
        return text
    if omission_width == length:
        return omission

    start = max(text_width - length, 0)
    if start > 0:
        start += omission_width
    words, _ = slice_text(text, start, length - omission_width, omission_width, separator)

    return f"{omission if start > 0 else ''}{words}"


def truncate_from(
    offset: int,
    text: str,
    length: int,
    omission: str,
    separator: Optional[Boundary] = None,
) -> str:
    """Keep content starting at a display column offset.

    An offset of zero truncates the end of text. A positive offset also
    omits everything before it, so two markers may be needed.

    Args:
        offset: Display column to keep content from.
        text: Text to truncate.
        length: Maximum display width of the result.
        omission: String that stands in for omitted content.
        separator: Optional word boundary predicate.

    Returns:
        Truncated text.
    """
    if offset == 0 and display_width(clean_ansi(text)) <= length:
        return text

    omission_width = display_width(omission)
    usable_length = length - omission_width
    if offset > 0:
        usable_length -= omission_width
    words, stopped = slice_text(text, offset, usable_length, omission_width, separator)
    if not words and offset > 0:
        return omission

    return f"{omission if offset > 0 else ''}{words}{omission if stopped else ''}"


def truncate_middle(
    text: str,
    length: int,
    omission: str,
    separator: Optional[Boundary] = None,
) -> str:
    """Omit content from the middle of text.

    The budget is halved between head and tail; an odd column goes to the
    tail. The omission width is split the same way.

    Args:
        text: Text to truncate.
        length: Maximum display width of the result.
        omission: String that stands in for omitted content.
        separator: Optional word boundary predicate.

    Returns:
        Truncated text.
    """
    text_width = display_width(clean_ansi(text))
    omission_width = display_width(omission)
    if text_width <= length:
        return text
    if omission_width == length:
        return omission

    half_length, rem = divmod(length, 2)
    rem_length = half_length + rem
    half_omission, rem = divmod(omission_width, 2)
    rem_omission = half_omission + rem

    head, _ = slice_text(text, 0, half_length - half_omission, half_omission, separator)
    tail, _ = slice_text(
        text,
        text_width - rem_length + rem_omission,
        rem_length - rem_omission,
        rem_omission,
        separator,
    )

    return f"{head}{omission}{tail}"


def truncate_ends(
    text: str,
    length: int,
    omission: str,
    separator: Optional[Boundary] = None,
) -> str:
    """Omit content from both ends, keeping a centered window.

    Args:
        text: Text to truncate.
        length: Maximum display width of the result.
        omission: String that stands in for omitted content.
        separator: Optional word boundary predicate.

    Returns:
        Truncated text, or the omission alone when nothing fits.
    """
    text_width = display_width(clean_ansi(text))
    omission_width = display_width(omission)
    if text_width <= length:
        return text
    if length <= 2 * omission_width:
        return omission

    start = (text_width - length) // 2 + omission_width
    words, stopped = slice_text(
        text, start, length - 2 * omission_width, omission_width, separator
    )
    if not words:
        return omission

    return f"{omission if start > 0 else ''}{words}{omission if stopped else ''}"
