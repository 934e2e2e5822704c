import pytest

from timelocalizer.rewriter import (
    LocalizedSpan,
    TimestampStyle,
    escape_markers,
    format_marker,
    format_range,
    rewrite,
)


class TestTimestampStyle:

    @pytest.mark.parametrize("mode", ["t", "T", "d", "D", "f", "F", "R"])
    def test_known_codes(self, mode):
        assert TimestampStyle.coerce(mode).value == mode

    @pytest.mark.parametrize("mode", ["x", "", None, "tt", 1])
    def test_unknown_codes_fall_back(self, mode):
        assert TimestampStyle.coerce(mode) is TimestampStyle.SHORT_TIME

    def test_style_passes_through(self):
        assert TimestampStyle.coerce(TimestampStyle.RELATIVE) is TimestampStyle.RELATIVE


class TestMarkers:

    def test_format_marker(self):
        assert format_marker(1760884200) == "<t:1760884200:t>"
        assert format_marker(1760884200, TimestampStyle.LONG_DATE_TIME) == "<t:1760884200:F>"

    def test_single_character_separator_becomes_en_dash(self):
        assert format_range(1, 2, "-") == "<t:1:t> – <t:2:t>"
        assert format_range(1, 2, "\u2014") == "<t:1:t> – <t:2:t>"

    def test_word_separator_is_kept(self):
        assert format_range(1, 2, "until", TimestampStyle.SHORT_DATE) == "<t:1:d> until <t:2:d>"

    def test_escape_markers(self):
        assert escape_markers("at <t:1:t> and <t:2:t>") == "at \\<t:1:t> and \\<t:2:t>"


class TestRewrite:

    def test_no_spans(self):
        assert rewrite("nothing here", []) is None

    def test_surrounding_text_is_kept(self):
        text = "Let's meet at 3pm EST, ok?"
        spans = [LocalizedSpan("<t:1:t>", start=14, length=7)]
        assert rewrite(text, spans) == "Let's meet at <t:1:t>, ok?"

    def test_multiple_spans(self):
        text = "9am EST or 10am CET"
        spans = [
            LocalizedSpan("<t:1:t>", start=0, length=7),
            LocalizedSpan("<t:2:t>", start=11, length=8),
        ]
        assert rewrite(text, spans) == "<t:1:t> or <t:2:t>"

    def test_adjacent_spans(self):
        spans = [
            LocalizedSpan("A", start=0, length=2),
            LocalizedSpan("B", start=2, length=2),
        ]
        assert rewrite("xxyyzz", spans) == "ABzz"

    def test_raw(self):
        spans = [LocalizedSpan("<t:1:t>", start=0, length=7)]
        assert rewrite("3pm EST", spans, raw=True) == "\\<t:1:t>"

    def test_span_end(self):
        assert LocalizedSpan("x", start=4, length=3).end == 7
