"""
Epoch computation for normalized wall-clock times.

A time written as "3pm EST" has no date. It is placed on the current
calendar day of the local frame and, if that instant has already passed,
moved forward by one day, so the reported instant is always the next
occurrence of that time of day.
"""

import logging
from datetime import datetime, timedelta, tzinfo

from .normalization import MINUTES_PER_DAY, minutes_to_hours

logger = logging.getLogger(__name__)

ONE_DAY_IN_SECONDS = 86400


class EpochCalculator:
    """
    Turns minutes since midnight in a given UTC offset into Unix seconds.

    Args:
        now: Aware datetime, the reference instant for rollover.
        frame: The local timezone whose calendar day anchors every result.
    """

    def __init__(self, now: datetime, frame: tzinfo):
        self.frame = frame
        self.now = now.astimezone(frame)
        self.local_offset = int(self.now.utcoffset() / timedelta(minutes=1))

    def correct(self, minutes: int, offset: int) -> int:
        """Shift wall-clock minutes written at ``offset`` into the local frame."""
        return minutes - offset + self.local_offset

    def build_timestamp(self, corrected_minutes: int, seconds: int = 0) -> datetime:
        while corrected_minutes < 0:
            corrected_minutes += MINUTES_PER_DAY
        hour, minute = minutes_to_hours(corrected_minutes)
        return datetime(
            self.now.year, self.now.month, self.now.day,
            hour, minute, seconds,
            tzinfo=self.frame,
        )

    def epoch(self, minutes: int, offset: int, seconds: int = 0) -> int:
        """Unix seconds of the next occurrence of ``minutes`` past midnight at ``offset``."""
        timestamp = self.build_timestamp(self.correct(minutes, offset), seconds)
        epoch = int(timestamp.timestamp())
        if timestamp < self.now:
            logger.debug(f"{timestamp.isoformat()} has passed, rolling over to the next day")
            epoch += ONE_DAY_IN_SECONDS
        return epoch
