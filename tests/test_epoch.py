import logging
from datetime import datetime, timedelta, timezone

import pytest
from dateutil import tz

from timelocalizer.epoch import ONE_DAY_IN_SECONDS, EpochCalculator

UTC = timezone.utc
NOW = datetime(2026, 10, 19, 10, 0, tzinfo=UTC)


def epoch_of(*args, tzinfo=UTC):
    return int(datetime(*args, tzinfo=tzinfo).timestamp())


@pytest.fixture
def calculator():
    return EpochCalculator(NOW, UTC)


class TestEpochCalculator:

    def test_later_today(self, calculator):
        """3pm EDT is 19:00 UTC, still ahead of 10:00 UTC."""
        assert calculator.epoch(15 * 60, -240) == epoch_of(2026, 10, 19, 19)

    def test_already_passed_rolls_over(self, calculator):
        """9:00 UTC has passed, so the next occurrence is tomorrow."""
        assert calculator.epoch(9 * 60, 0) == epoch_of(2026, 10, 20, 9)

    def test_rollover_is_logged(self, calculator, caplog):
        """Rolling a passed time forward leaves a debug record on the module logger."""
        with caplog.at_level(logging.DEBUG, logger="timelocalizer.epoch"):
            calculator.epoch(9 * 60, 0)
            calculator.epoch(11 * 60, 0)
        records = [r for r in caplog.records if r.name == "timelocalizer.epoch"]
        assert len(records) == 1
        assert "rolling over" in records[0].getMessage()

    def test_exactly_now_is_not_rolled(self, calculator):
        assert calculator.epoch(10 * 60, 0) == epoch_of(2026, 10, 19, 10)

    def test_seconds(self, calculator):
        assert calculator.epoch(11 * 60, 0, seconds=15) == epoch_of(2026, 10, 19, 11, 0, 15)

    def test_negative_corrected_minutes_wrap(self, calculator):
        """1am at UTC+2 is 23:00 UTC the day before."""
        assert calculator.correct(60, 120) == -60
        assert calculator.epoch(60, 120) == epoch_of(2026, 10, 19, 23)

    def test_corrected_minutes_past_midnight_wrap(self, calculator):
        """11pm EDT is 03:00 UTC."""
        assert calculator.epoch(23 * 60, -240) == epoch_of(2026, 10, 20, 3)

    def test_frame_with_offset(self):
        """Targets are placed on the frame's calendar day, not the UTC one."""
        frame = tz.tzoffset(None, 7200)
        now = datetime(2026, 10, 19, 23, 30, tzinfo=frame)
        calculator = EpochCalculator(now, frame)

        assert calculator.local_offset == 120
        assert calculator.epoch(22 * 60, 0) == epoch_of(2026, 10, 19, 22)

    def test_now_is_converted_to_frame(self):
        frame = tz.tzoffset(None, -18000)
        calculator = EpochCalculator(NOW, frame)
        assert calculator.now.utcoffset() == timedelta(hours=-5)
        assert calculator.local_offset == -300

    def test_result_is_next_occurrence(self, calculator):
        """Every result lies within the day after now."""
        now = int(NOW.timestamp())
        for minutes in range(0, 24 * 60, 45):
            epoch = calculator.epoch(minutes, -300)
            assert now <= epoch < now + ONE_DAY_IN_SECONDS
