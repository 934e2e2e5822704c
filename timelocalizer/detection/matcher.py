"""
Time Expression Matching

A single composite pattern locates candidate time expressions in free text:

    [start-time <range separator>] end-time [timezone [explicit offset]]

Examples of what the pattern captures (validation happens later):

- "3pm EST"
- "9-11am PT"
- "14:00 UTC+2"
- "10:30 until 11:15:30 pacific time"

The pattern is applied once, left to right, and yields ordered,
non-overlapping matches. Captures are exposed through :class:`RawMatch`
rather than positional groups.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

import regex as re

from ..timezones import get_abbreviations, lookup_shorthand, lookup_title

logger = logging.getLogger(__name__)


# =============================================================================
# Pattern Definition
# =============================================================================

# "<some words> time", e.g. "Pacific Time" or "Irish Standard Time"
FULL_TITLE_PATTERN = r"[a-z \-'áéí–-]{3,45}?(?= time) time"

HOUR_PATTERN = r"[01]?[0-9]|2[0-3]"
MINUTE_PATTERN = r"[0-5][0-9]"
MERIDIEM_PATTERN = r"[ap]\.?m?\.?"
RANGE_SEPARATOR_PATTERN = r"to|until|til|and|or|[-\u2010-\u2015]"


def _build_time_pattern() -> re.Pattern:
    timezones = "|".join(get_abbreviations()) + "|" + FULL_TITLE_PATTERN

    start_time = (
        rf"(?P<start_hour>{HOUR_PATTERN})"
        r"(?P<start_separator>:|\.)?"
        rf"(?P<start_minutes>{MINUTE_PATTERN})?"
        rf"(?P<start_seconds>:{MINUTE_PATTERN})?"
        rf"(?: ?(?P<start_meridiem>{MERIDIEM_PATTERN}))?"
        # Same whitespace either side of the separator
        r"(?P<range_space> ?)"
        rf"(?P<range_separator>{RANGE_SEPARATOR_PATTERN})"
        r"(?P=range_space)"
    )
    end_time = (
        rf"(?P<hour>{HOUR_PATTERN})"
        r"(?P<separator>:|\.)?"
        rf"(?P<minutes>{MINUTE_PATTERN})?"
        rf"(?P<seconds>:{MINUTE_PATTERN})?"
        # The meridiem must not fuse with a following abbreviation ("5pst")
        rf"(?: ?(?P<meridiem>{MERIDIEM_PATTERN})(?= \w|\b))?"
    )
    zone = (
        rf"(?: ?(?P<timezone>{timezones}))"
        r"(?P<offset>(?P<offset_space> ?)[+-](?P=offset_space)[0-9]{1,2}(?::?\d{2})?)?"
    )
    pattern = rf"\b(?:{start_time})?{end_time}(?:{zone})?\b"
    return re.compile(pattern, re.IGNORECASE | re.UNICODE)


TIME_PATTERN = _build_time_pattern()


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class RawMatch:
    """Structural captures of one pattern match."""
    text: str                               # The full matched text
    index: int                              # Start character offset in the source
    hour: str
    separator: Optional[str] = None         # ":" or "."
    minutes: Optional[str] = None
    seconds: Optional[str] = None           # Includes the leading ":"
    meridiem: Optional[str] = None          # Raw token, e.g. "pm", "a.m.", "P"
    timezone: Optional[str] = None          # Raw token, rewritten by resolve_full_name()
    offset: Optional[str] = None            # Raw explicit offset, e.g. "+5:30"
    start_hour: Optional[str] = None
    start_separator: Optional[str] = None
    start_minutes: Optional[str] = None
    start_seconds: Optional[str] = None
    start_meridiem: Optional[str] = None
    range_separator: Optional[str] = None
    full_name_offset: Optional[int] = None  # Set when a full title resolved
    assumed_timezone: bool = False          # Set in manual conversion mode

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.index + len(self.text)

    @property
    def is_range(self) -> bool:
        return self.start_hour is not None

    @property
    def upper_timezone(self) -> Optional[str]:
        return self.timezone.upper() if self.timezone else None

    @classmethod
    def from_match(cls, match: re.Match) -> "RawMatch":
        return cls(
            text=match.group(0),
            index=match.start(),
            hour=match.group("hour"),
            separator=match.group("separator"),
            minutes=match.group("minutes"),
            seconds=match.group("seconds"),
            meridiem=match.group("meridiem"),
            timezone=match.group("timezone"),
            offset=match.group("offset"),
            start_hour=match.group("start_hour"),
            start_separator=match.group("start_separator"),
            start_minutes=match.group("start_minutes"),
            start_seconds=match.group("start_seconds"),
            start_meridiem=match.group("start_meridiem"),
            range_separator=match.group("range_separator"),
        )


# =============================================================================
# Matching
# =============================================================================

def find_candidates(text: str) -> Iterator[RawMatch]:
    """
    Yield every candidate time expression in ``text``, in order.

    Candidates may lack a timezone and have not been validated.
    """
    for match in TIME_PATTERN.finditer(text):
        yield RawMatch.from_match(match)


def resolve_full_name(candidate: RawMatch) -> None:
    """
    Rewrite a spelled-out timezone to its abbreviation, in place.

    "Pacific Time" becomes "PT" and still goes through validation with the
    DST-resolved offset. A title from the alias table ("Irish Standard Time")
    becomes its abbreviation and records the title's own offset in
    ``full_name_offset``, which marks it as unambiguous.
    """
    if not candidate.timezone or " " not in candidate.timezone:
        return

    shorthand = lookup_shorthand(candidate.timezone)
    if shorthand:
        candidate.timezone = shorthand
        return

    alias = lookup_title(candidate.timezone)
    if alias is not None:
        logger.debug(f"Resolved '{candidate.timezone}' to {alias.abbreviation}")
        candidate.timezone = alias.abbreviation
        candidate.full_name_offset = alias.standard_offset
