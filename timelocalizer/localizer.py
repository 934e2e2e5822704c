import logging
from dataclasses import replace
from datetime import datetime
from typing import List, NamedTuple

from dateutil import tz
from tzlocal import get_localzone

from timelocalizer.conf import apply_settings, check_settings
from timelocalizer.detection.matcher import RawMatch, find_candidates, resolve_full_name
from timelocalizer.detection.validators import ValidationContext, validate
from timelocalizer.dst import resolve_offsets
from timelocalizer.epoch import EpochCalculator
from timelocalizer.normalization import NormalizedTime, normalize
from timelocalizer.rewriter import (
    LocalizedSpan,
    TimestampStyle,
    format_marker,
    format_range,
    rewrite,
)

logger = logging.getLogger(__name__)

NO_INPUT = "noInput"
NO_TIMES_DETECTED = "noTimesDetected"


class LocalizeResult(NamedTuple):
    text: str
    matched: bool


class TimeLocalizer:
    """
    Rewrites timezone-qualified times in text into timestamp markers.

    :param settings:
        Configure customized behavior using settings defined in :mod:`timelocalizer.conf.Settings`.
    :type settings: dict

    :raises:
        ``SettingValidationError``: A provided setting is not valid.
        ``TypeError``: settings is neither a dict nor a ``Settings`` instance.
    """

    @apply_settings
    def __init__(self, settings=None):
        check_settings(settings)
        self._settings = settings

    def get_frame(self):
        """The timezone whose calendar day anchors computed instants."""
        if "local" in self._settings.TIMEZONE.lower():
            return get_localzone()
        return tz.gettz(self._settings.TIMEZONE)

    def get_now(self, frame) -> datetime:
        base = self._settings.RELATIVE_BASE
        if not base:
            return datetime.now(frame)
        if base.tzinfo is None:
            return base.replace(tzinfo=frame)
        return base

    def localize(self, text: str, mode="t", raw: bool = False) -> LocalizeResult:
        """
        Replace every detected time in ``text`` with a timestamp marker.

        :param text:
            Free-form text, e.g. "Let's meet at 3pm EST".
        :param mode:
            One of the :class:`TimestampStyle` codes ``t T d D f F R``.
            Unknown codes fall back to ``t``.
        :param raw:
            Escape the generated markers so the result can be pasted as literal text.

        :return: ``(text, True)`` when at least one time was localized, otherwise
            ``("noInput", False)`` for blank input or ``("noTimesDetected", False)``.
        """
        if not text or not text.strip():
            return LocalizeResult(NO_INPUT, False)

        spans = self.spot_times(text, mode)
        if not spans:
            return LocalizeResult(NO_TIMES_DETECTED, False)

        return LocalizeResult(rewrite(text, spans, raw=raw), True)

    def spot_times(self, text: str, mode="t") -> List[LocalizedSpan]:
        """Find, validate and render every time in ``text``, ordered by position."""
        style = TimestampStyle.coerce(mode)
        frame = self.get_frame()
        now = self.get_now(frame)

        # One offset snapshot per call
        offsets = resolve_offsets(now)
        calculator = EpochCalculator(now, frame)

        context = ValidationContext(
            text=text,
            offsets=offsets,
            ignored=self._settings.ignored_timezones,
            blank_separator=self._settings.BLANK_SEPARATOR,
            avoid_matching_floats_manually=self._settings.AVOID_MATCHING_FLOATS_MANUALLY,
        )
        manual_context = replace(context, manual=True)

        spans = []
        for candidate in find_candidates(text):
            if candidate.timezone:
                resolve_full_name(candidate)
            elif self._settings.ASSUMED_TIMEZONE:
                candidate.timezone = self._settings.ASSUMED_TIMEZONE.upper()
                candidate.assumed_timezone = True
            else:
                continue

            if not validate(candidate, manual_context if candidate.assumed_timezone else context):
                continue

            normalized = normalize(candidate, offsets)
            if normalized is None:
                continue

            spans.append(LocalizedSpan(
                rendered_text=self._render(candidate, normalized, calculator, style),
                start=candidate.index,
                length=candidate.length,
            ))

        logger.debug(f"Localized {len(spans)} time(s)")
        return spans

    def _render(
        self,
        candidate: RawMatch,
        normalized: NormalizedTime,
        calculator: EpochCalculator,
        style: TimestampStyle,
    ) -> str:
        end_epoch = calculator.epoch(normalized.minutes, normalized.offset, normalized.seconds)
        if not normalized.is_range:
            return format_marker(end_epoch, style)

        start_epoch = calculator.epoch(
            normalized.start_minutes, normalized.offset, normalized.start_seconds
        )
        return format_range(start_epoch, end_epoch, candidate.range_separator, style)
