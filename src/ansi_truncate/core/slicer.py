"""Width-bounded slicing of text with embedded escape sequences.

The slicer walks a string one token at a time, where a token is either an
escape sequence (copied through, zero width) or a single code point. It keeps
the visible content whose display column lies in ``[start, start + length)``
and reports whether the window ended before the end of the text.
"""

from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Optional

from ansi_truncate.utils.text import (
    ANSI_ESCAPE_PATTERN,
    ANSI_RESET,
    ANSI_RESET_PATTERN,
    char_width,
    is_ansi_tail,
)

Boundary = Callable[[str], bool]


class SliceResult(NamedTuple):
    """Extracted text and whether the scan stopped before the text end."""

    text: str
    stopped: bool


@dataclass
class SliceState:
    """Scanner state advanced by TextSlicer.step()."""

    cursor: int = 0
    position: int = 0
    accumulated_width: int = 0
    pending_word: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)
    open_style: bool = False
    word_break: bool = False
    visible: bool = False
    stopped: bool = False
    previous_char: Optional[str] = None


class TextSlicer:
    """Extract a display-width window from text.

    With a boundary predicate the slicer works in word mode: characters are
    buffered into a pending word that is only emitted once a boundary
    character completes it, and a word straddling ``start`` is dropped.
    """

    def __init__(
        self,
        text: str,
        start: int,
        length: int,
        omission_width: int = 0,
        separator: Optional[Boundary] = None,
    ):
        """Initialize slicer.

        Args:
            text: Text to scan.
            start: Display column where the window begins.
            length: Display width of the window.
            omission_width: Extra width the last word of the text may use.
            separator: Predicate marking word boundary characters.
        """
        self.text = text
        self.start = start
        self.length = length
        self.length_with_omission = length + omission_width
        self.separator = separator
        self.state = SliceState()

    @property
    def done(self) -> bool:
        """Whether scanning has finished."""
        return self.state.stopped or self.state.cursor >= len(self.text)

    def is_boundary(self, char: Optional[str]) -> bool:
        """Check whether char is a word boundary."""
        return self.separator is not None and char is not None and self.separator(char)

    def step(self) -> None:
        """Consume one escape sequence or one character."""
        state = self.state

        match = ANSI_RESET_PATTERN.match(self.text, state.cursor)
        if match:
            state.cursor = match.end()
            self._emit_escape(match.group())
            state.open_style = False
            return

        match = ANSI_ESCAPE_PATTERN.match(self.text, state.cursor)
        if match:
            state.cursor = match.end()
            self._emit_escape(match.group())
            state.open_style = True
            return

        self._consume_char()

    def _emit_escape(self, sequence: str) -> None:
        # escapes inside a buffered word stay in order with its characters
        if self.state.pending_word:
            self.state.pending_word.append(sequence)
        else:
            self.state.output.append(sequence)

    def _consume_char(self) -> None:
        state = self.state

        if self.separator is not None and (
            (self.is_boundary(state.previous_char) and state.position <= self.start)
            or state.position == 0
        ):
            state.word_break = state.position != self.start

        char = self.text[state.cursor]
        state.cursor += 1
        state.previous_char = char
        width = char_width(char)
        state.position += width
        if state.position - width < self.start:
            return

        state.accumulated_width += width

        if self.is_boundary(char):
            if state.word_break:
                state.word_break = False
                state.accumulated_width = 0
                return
            state.visible = True
            state.output.append("".join(state.pending_word))
            state.pending_word.clear()

        if state.accumulated_width <= self.length or (
            is_ansi_tail(self.text, state.cursor)
            and state.accumulated_width <= self.length_with_omission
        ):
            if self.separator is not None:
                if not state.word_break:
                    state.pending_word.append(char)
            else:
                state.output.append(char)
                state.visible = True
        else:
            state.stopped = True

    def finish(self) -> SliceResult:
        """Build the result from the current state."""
        state = self.state
        # a word cut by the window is dropped, one that ends the text is kept
        if state.pending_word and not state.stopped and state.cursor >= len(self.text):
            state.visible = True
            state.output.append("".join(state.pending_word))
        else:
            # escapes of a dropped word still apply to what follows
            state.output.extend(
                token for token in state.pending_word if ANSI_ESCAPE_PATTERN.fullmatch(token)
            )
        state.pending_word.clear()

        if not state.visible:
            return SliceResult("", state.stopped)

        if state.stopped and state.open_style:
            state.output.append(ANSI_RESET)

        return SliceResult("".join(state.output), state.stopped)

    def run(self) -> SliceResult:
        """Scan until the window is filled or the text ends."""
        while not self.done:
            self.step()
        return self.finish()


def slice_text(
    text: str,
    start: int,
    length: int,
    omission_width: int = 0,
    separator: Optional[Boundary] = None,
) -> SliceResult:
    """Extract the visible content of text between two display columns.

    Args:
        text: Text to slice, may contain escape sequences.
        start: Display column to start from.
        length: Maximum display width to extract.
        omission_width: Width of the omission marker; the final word of the
            text may overflow length by this much.
        separator: Optional word boundary predicate.

    Returns:
        SliceResult with the extracted text (empty when nothing visible fits)
        and a flag telling whether the scan stopped early.
    """
    return TextSlicer(text, start, length, omission_width, separator).run()
