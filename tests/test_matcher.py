"""
Tests for the composite time expression pattern and full-name resolution.

These tests only check what the pattern captures; whether a capture is a
genuine time is decided by the validators.
"""

import pytest

from timelocalizer.detection.matcher import (
    RawMatch,
    TIME_PATTERN,
    find_candidates,
    resolve_full_name,
)


def only_candidate(text):
    candidates = [c for c in find_candidates(text) if c.timezone]
    assert len(candidates) == 1
    return candidates[0]


# =============================================================================
# Single Times
# =============================================================================

class TestSingleTimeCaptures:
    """Tests for captures of non-range times."""

    def test_meridiem_and_abbreviation(self):
        """'3pm EST' captures hour, meridiem and timezone."""
        candidate = only_candidate("Let's meet at 3pm EST")
        assert candidate.hour == "3"
        assert candidate.meridiem == "pm"
        assert candidate.timezone == "EST"
        assert candidate.text == "3pm EST"
        assert candidate.index == 14
        assert candidate.length == 7
        assert not candidate.is_range

    def test_minutes_seconds_and_separator(self):
        """'10:30:15 UTC' captures every clock field."""
        candidate = only_candidate("10:30:15 UTC")
        assert candidate.hour == "10"
        assert candidate.separator == ":"
        assert candidate.minutes == "30"
        assert candidate.seconds == ":15"

    def test_dotted_meridiem(self):
        """'7 p.m. CET' keeps the punctuation of the meridiem."""
        candidate = only_candidate("7 p.m. CET")
        assert candidate.meridiem == "p.m."
        assert candidate.timezone == "CET"

    def test_meridiem_does_not_fuse_with_abbreviation(self):
        """In '5pst' the p belongs to the abbreviation."""
        candidate = only_candidate("5pst")
        assert candidate.meridiem is None
        assert candidate.timezone == "pst"

    @pytest.mark.parametrize("text, offset", [
        ("14:00 UTC+2", "+2"),
        ("14:00 UTC + 2", " + 2"),
        ("09:00 GMT-5:30", "-5:30"),
        ("20:00 UTC+0530", "+0530"),
    ])
    def test_explicit_offset(self, text, offset):
        """The offset abuts the abbreviation with symmetric whitespace."""
        candidate = only_candidate(text)
        assert candidate.timezone in ("UTC", "GMT")
        assert candidate.offset == offset

    def test_asymmetric_offset_whitespace(self):
        """'UTC +2' leaves the offset out of the match."""
        candidate = only_candidate("14:00 UTC +2")
        assert candidate.offset is None
        assert candidate.text == "14:00 UTC"

    def test_longest_abbreviation_wins(self):
        """WITA is not shadowed by WIT."""
        candidate = only_candidate("3pm WITA")
        assert candidate.timezone == "WITA"

    def test_full_title_capture(self):
        """A phrase ending in 'time' is captured as a candidate timezone."""
        candidate = only_candidate("5pm Irish Standard Time")
        assert candidate.timezone == "Irish Standard Time"

    def test_no_timezone(self):
        """Times without a timezone are still yielded, with timezone None."""
        candidates = list(find_candidates("see you at 3"))
        assert len(candidates) == 1
        assert candidates[0].timezone is None
        assert candidates[0].assumed_timezone is False

    def test_matches_are_ordered(self):
        """Candidates are yielded left to right."""
        candidates = list(find_candidates("9am EST, then 10am CET and 11am UTC"))
        indexes = [c.index for c in candidates]
        assert indexes == sorted(indexes)
        assert [c.timezone for c in candidates] == ["EST", "CET", "UTC"]


# =============================================================================
# Ranges
# =============================================================================

class TestRangeCaptures:
    """Tests for start-end range captures."""

    def test_dash_range(self):
        """'9-11am PT' captures both ends."""
        candidate = only_candidate("9-11am PT")
        assert candidate.is_range
        assert candidate.start_hour == "9"
        assert candidate.range_separator == "-"
        assert candidate.hour == "11"
        assert candidate.meridiem == "am"
        assert candidate.timezone == "PT"

    @pytest.mark.parametrize("separator", ["to", "until", "til", "and", "or"])
    def test_word_separators(self, separator):
        """Range words need a space on both sides."""
        candidate = only_candidate(f"3 {separator} 5pm EST")
        assert candidate.range_separator == separator
        assert candidate.start_hour == "3"
        assert candidate.hour == "5"

    def test_unicode_dash(self):
        """Dash variants such as the en dash separate ranges."""
        candidate = only_candidate("9:30–10:45 UTC")
        assert candidate.range_separator == "–"
        assert candidate.start_minutes == "30"
        assert candidate.minutes == "45"

    def test_start_meridiem(self):
        """'11am - 1pm UTC' captures each side's meridiem."""
        candidate = only_candidate("11am - 1pm UTC")
        assert candidate.start_meridiem == "am"
        assert candidate.meridiem == "pm"
        assert candidate.range_separator == "-"

    def test_asymmetric_separator_whitespace(self):
        """'3 -5pm EST' is not a range."""
        candidate = only_candidate("3 -5pm EST")
        assert not candidate.is_range
        assert candidate.hour == "5"


# =============================================================================
# Full-name Resolution
# =============================================================================

class TestResolveFullName:
    """Tests for rewriting spelled-out timezones."""

    def test_shorthand_name(self):
        """'pacific time' becomes PT and stays subject to validation."""
        candidate = only_candidate("10am pacific time")
        resolve_full_name(candidate)
        assert candidate.timezone == "PT"
        assert candidate.full_name_offset is None

    def test_alias_title(self):
        """A listed title becomes its abbreviation with its own offset."""
        candidate = only_candidate("5pm Irish Standard Time")
        resolve_full_name(candidate)
        assert candidate.timezone == "IST"
        assert candidate.full_name_offset == 60

    def test_unknown_title_is_untouched(self):
        """Unknown phrases are left for the validators to reject."""
        candidate = only_candidate("3pm is a good time")
        resolve_full_name(candidate)
        assert candidate.timezone == "is a good time"
        assert candidate.full_name_offset is None

    def test_abbreviation_is_untouched(self):
        """Plain abbreviations are not looked up by title."""
        candidate = RawMatch(text="3pm EST", index=0, hour="3", meridiem="pm", timezone="EST")
        resolve_full_name(candidate)
        assert candidate.timezone == "EST"


def test_pattern_is_case_insensitive():
    """Abbreviations and meridiems match in any case."""
    match = TIME_PATTERN.search("3PM est")
    assert match.group("meridiem") == "PM"
    assert match.group("timezone") == "est"
