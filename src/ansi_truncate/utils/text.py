"""Text measurement utilities for ansi-truncate."""

import re

from wcwidth import wcwidth

# ANSI escape sequences: graphics/CSI, cursor modes, character sets,
# special keys, cursor movement and OSC 8 hyperlinks
_ANSI = (
    r"\x1b(?:"
    r"\[[\[?>!]?\d*(?:;\d+)*[ ]?[a-zA-Z~@$^\]_{\\]"
    r"|#?\d"
    r"|[)(%+\-*/. ](?:\d|[a-zA-Z@=%]|)"
    r"|O[p-xA-Z]"
    r"|[a-zA-Z=><~}|]"
    r"|\]8;[^;]*;.*?(?:\x1b\\|\x07)"
    r")"
)

ANSI_RESET = "\x1b[0m"

ANSI_ESCAPE_PATTERN = re.compile(_ANSI)
ANSI_RESET_PATTERN = re.compile(re.escape(ANSI_RESET))
# Matches when nothing but escape sequences remain
ANSI_TAIL_PATTERN = re.compile(rf"(?:{_ANSI})*\Z")


def clean_ansi(text: str) -> str:
    """Remove ANSI escape codes from text.

    Args:
        text: Text containing ANSI escape codes.

    Returns:
        Text with ANSI codes removed.
    """
    return ANSI_ESCAPE_PATTERN.sub("", text)


def char_width(char: str) -> int:
    """Column width of a single code point.

    Non-printable control characters count as zero columns.
    """
    return max(wcwidth(char), 0)


def display_width(text: str) -> int:
    """Return the number of terminal columns text occupies.

    Args:
        text: Text without escape sequences (see clean_ansi).

    Returns:
        Sum of per-character widths, wide East Asian characters counting 2.
    """
    return sum(char_width(char) for char in text)


def is_ansi_tail(text: str, pos: int) -> bool:
    """Check whether only escape sequences follow pos."""
    return ANSI_TAIL_PATTERN.match(text, pos) is not None
