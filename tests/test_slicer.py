"""Tests for the slicing engine."""

import pytest
from ansi_truncate.core.slicer import SliceResult, SliceState, TextSlicer, slice_text


def space(char):
    return char == " "


class TestSliceText:
    """Tests for character mode slicing."""

    def test_slice_from_start(self):
        """Should keep the first columns and report stopping early."""
        assert slice_text("hello world", 0, 5) == SliceResult("hello", True)

    def test_slice_from_offset(self):
        """Should skip columns before the start."""
        words, stopped = slice_text("hello world", 6, 5)
        assert words == "world"
        assert stopped is False

    def test_last_character_may_use_omission_width(self):
        """Final character may overflow by the omission width."""
        assert slice_text("abcdef", 0, 5, omission_width=1) == ("abcdef", False)
        assert slice_text("abcdef", 0, 5) == ("abcde", True)

    def test_nothing_fits(self):
        """Should return empty text when no visible character fits."""
        assert slice_text("abc", 0, 0) == ("", True)

    def test_wide_characters(self):
        """Wide characters should count two columns."""
        assert slice_text("日本語テキスト", 0, 5) == ("日本", True)

    def test_wide_character_straddling_start_is_skipped(self):
        """A wide character that begins before the start is not kept."""
        assert slice_text("日本語", 1, 4) == ("本語", False)


class TestSliceEscapes:
    """Tests for escape sequence pass-through."""

    def test_open_style_is_reset(self):
        """Cut inside a style should append a reset."""
        words, stopped = slice_text("\x1b[31mhello\x1b[0m", 0, 3)
        assert words == "\x1b[31mhel\x1b[0m"
        assert stopped is True

    def test_closed_style_not_reset_again(self):
        """A style already reset should not get another reset."""
        words, _ = slice_text("\x1b[1mab\x1b[0mcdef", 0, 4)
        assert words == "\x1b[1mab\x1b[0mcd"

    def test_trailing_reset_preserved(self):
        """Reset at the end of the text should survive."""
        assert slice_text("\x1b[1mab\x1b[0m", 0, 5) == ("\x1b[1mab\x1b[0m", False)

    def test_escape_before_window_is_kept(self):
        """Escapes before the start column still apply to the slice."""
        words, stopped = slice_text("\x1b[32mabcdef", 3, 2)
        assert words == "\x1b[32mde\x1b[0m"
        assert stopped is True

    def test_only_escapes_is_empty(self):
        """Escapes alone are not visible content."""
        assert slice_text("\x1b[31mabc", 0, 0) == ("", True)


class TestSliceWords:
    """Tests for word mode slicing."""

    def test_partial_word_dropped_at_end(self):
        """Word cut by the window end should not be emitted."""
        assert slice_text("one two three", 0, 9, separator=space) == ("one two", True)

    def test_partial_word_dropped_at_start(self):
        """Word straddling the start should be dropped with its separator."""
        assert slice_text("one two three", 2, 20, separator=space) == ("two three", False)

    def test_start_on_word_boundary_keeps_word(self):
        """Start right after a separator keeps the whole word."""
        assert slice_text("one two three", 4, 20, separator=space) == ("two three", False)

    def test_word_wider_than_window(self):
        """Oversized word yields an empty slice, never a broken word."""
        assert slice_text("abcdefghij", 0, 5, separator=space) == ("", True)

    def test_trailing_word_flushed_at_end(self):
        """Last word of the text is emitted when it fits."""
        assert slice_text("one two", 0, 7, separator=space) == ("one two", False)


class TestTextSlicer:
    """Tests for the slicer state machine."""

    def test_initial_state(self):
        """New slicer starts with an empty state."""
        slicer = TextSlicer("abc", 0, 2)
        assert slicer.state == SliceState()
        assert slicer.done is False

    def test_step_consumes_escape_then_char(self):
        """Each step should consume one token."""
        slicer = TextSlicer("\x1b[1mab", 0, 10)

        slicer.step()
        assert slicer.state.output == ["\x1b[1m"]
        assert slicer.state.open_style is True
        assert slicer.state.cursor == 4

        slicer.step()
        assert slicer.state.output == ["\x1b[1m", "a"]
        assert slicer.state.position == 1
        assert slicer.state.accumulated_width == 1
        assert slicer.state.previous_char == "a"

    def test_step_sets_stopped(self):
        """Exceeding the window should stop the slicer."""
        slicer = TextSlicer("abc", 0, 1)
        slicer.step()
        slicer.step()
        assert slicer.state.stopped is True
        assert slicer.done is True
        assert slicer.finish() == ("a", True)

    def test_word_break_flag_on_straddling_word(self):
        """Word started before the start column is flagged for dropping."""
        slicer = TextSlicer("ab cd", 1, 10, separator=space)
        slicer.step()
        assert slicer.state.word_break is True

    @pytest.mark.parametrize("start,expected", [(0, False), (1, True), (3, False)])
    def test_word_break_at_start_column(self, start, expected):
        """Word break is set only when the start falls inside a word."""
        slicer = TextSlicer("ab cd", start, 10, separator=space)
        while slicer.state.position < start + 1:
            slicer.step()
        assert slicer.state.word_break is expected


class TestSliceWordEscapes:
    """Tests for escape sequences inside buffered words."""

    def test_escapes_stay_with_their_word(self):
        """Style codes keep their place around the word they wrap."""
        words, stopped = slice_text("a \x1b[31mred\x1b[0m b", 0, 20, separator=space)
        assert words == "a \x1b[31mred\x1b[0m b"
        assert stopped is False

    def test_open_style_reset_after_cut(self):
        """Style opened by a kept word is closed at the cut."""
        words, stopped = slice_text("x \x1b[1mab cd\x1b[0m ef", 0, 6, separator=space)
        assert words == "x \x1b[1mab\x1b[0m"
        assert stopped is True

    def test_escapes_of_dropped_word_kept(self):
        """Reset inside a dropped word still reaches the output."""
        words, stopped = slice_text("x \x1b[1mab c\x1b[0md ef", 0, 6, separator=space)
        assert words == "x \x1b[1mab\x1b[0m"
        assert stopped is True


class TestSliceResetOnlyWhenCut:
    """Tests for reset placement at the end of a slice."""

    def test_open_style_untouched_at_text_end(self):
        """No reset is added when the whole text fits."""
        assert slice_text("\x1b[31mhello", 0, 10) == ("\x1b[31mhello", False)
