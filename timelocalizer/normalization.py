"""
Conversion of matched hour/minute/meridiem captures to wall-clock minutes.

All values produced here are minutes since midnight on a 24-hour clock,
still in the timezone the text was written in. Timezone correction and
epoch construction happen in :mod:`timelocalizer.epoch`.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import regex as re

from .detection.matcher import RawMatch

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 1440

WHITESPACE_PATTERN = re.compile(r"\s")


@dataclass
class NormalizedTime:
    """Wall-clock result of normalizing one validated match."""
    minutes: int                            # End (or only) time, minutes since midnight
    seconds: int = 0
    start_minutes: Optional[int] = None     # Range start, minutes since midnight
    start_seconds: int = 0
    offset: int = 0                         # Effective offset, minutes east of UTC

    @property
    def is_range(self) -> bool:
        return self.start_minutes is not None


def hours_to_minutes(hours: int, minutes: int) -> int:
    return hours * 60 + minutes


def minutes_to_hours(minutes: int):
    """Split minutes since midnight into ``(hour, minute)``, wrapping at 24h."""
    minutes = abs(minutes)
    return (minutes // 60) % 24, minutes % 60


def apply_meridiem(hour: int, meridiem: str) -> int:
    """Map a 1-12 hour to 0-23 given an "am"/"pm" style token."""
    hour = (12 + hour) % 12
    if meridiem[0].lower() == 'p':
        hour += 12
    return hour


def parse_seconds(seconds: Optional[str]) -> int:
    # Captured with its leading colon, e.g. ":45"
    return int(seconds[1:]) if seconds else 0


def parse_offset(offset: Optional[str]) -> int:
    """
    Parse an explicit trailing offset into signed minutes.

    Accepts "+2", "- 3", "+5:30", "+0530" and "+530".
    """
    if not offset:
        return 0

    offset = WHITESPACE_PATTERN.sub('', offset)
    sign = -1 if offset[0] == '-' else 1
    parts = offset[1:].split(':')

    if len(parts) == 1 and len(parts[0]) in (3, 4):
        parts = [parts[0][:-2], parts[0][-2:]]

    hours = int(parts[0])
    minutes = int(parts[1]) if len(parts) > 1 else 0
    return sign * hours_to_minutes(hours, minutes)


def effective_offset(candidate: RawMatch, offsets: Mapping[str, int]) -> int:
    """The timezone's offset at this moment plus any explicit "+N" suffix."""
    if candidate.full_name_offset is not None:
        base = candidate.full_name_offset
    else:
        base = offsets[candidate.upper_timezone]
    return base + parse_offset(candidate.offset)


def normalize_end_hour(candidate: RawMatch) -> int:
    hour = int(candidate.hour)
    if candidate.meridiem:
        return apply_meridiem(hour, candidate.meridiem)

    if candidate.start_hour is not None:
        start_hour = int(candidate.start_hour)
        # "11-2 EST": a bare end hour below a bare morning start hour is in
        # the afternoon. Mixed 12/24-hour ranges are not otherwise resolved.
        if hour < 12 and hour < start_hour and start_hour < 12:
            return hour + 12

    return hour


def normalize_start_hour(candidate: RawMatch, end_hour: int) -> int:
    start_hour = int(candidate.start_hour)
    if candidate.start_meridiem:
        return apply_meridiem(start_hour, candidate.start_meridiem)

    if candidate.meridiem:
        # "9-11am": borrow the end meridiem unless that puts the start after the end
        borrowed = apply_meridiem(start_hour, candidate.meridiem)
        if borrowed < end_hour:
            return borrowed

    return start_hour


def has_valid_range_start(candidate: RawMatch) -> bool:
    """A range starting at hour 0 is only trusted when it reads as 24-hour time."""
    if candidate.start_hour is None:
        return False
    if int(candidate.start_hour) == 0:
        return not candidate.meridiem and not candidate.start_meridiem
    return True


def normalize(candidate: RawMatch, offsets: Mapping[str, int]) -> Optional[NormalizedTime]:
    """
    Convert a validated match to wall-clock minutes and an effective offset.

    Returns None for an hour of 0 without minutes ("0 EST"), which is too
    ambiguous to treat as midnight.
    """
    if int(candidate.hour) == 0 and not candidate.minutes:
        logger.debug(f"Dropped '{candidate.text}': hour 0 without minutes")
        return None

    end_hour = normalize_end_hour(candidate)
    result = NormalizedTime(
        minutes=hours_to_minutes(end_hour, int(candidate.minutes or 0)),
        seconds=parse_seconds(candidate.seconds),
        offset=effective_offset(candidate, offsets),
    )

    if has_valid_range_start(candidate):
        start_hour = normalize_start_hour(candidate, end_hour)
        result.start_minutes = hours_to_minutes(start_hour, int(candidate.start_minutes or 0))
        result.start_seconds = parse_seconds(candidate.start_seconds)

    return result
