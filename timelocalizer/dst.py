"""
US daylight saving resolution for the ET/CT/MT/PT shorthands.

People write "PT" meaning whatever Pacific time is in effect right now, so
the shorthand's offset has to follow the US DST calendar:

- DST begins on the second Sunday of March at 02:00 local standard time.
- DST ends on the first Sunday of November at 02:00 local daylight time.

Rather than patching a shared table, :func:`resolve_offsets` returns a fresh
read-only snapshot for the instant it is given. Callers resolve once per
top-level call and pass the snapshot along.
"""

import logging
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from dateutil.relativedelta import relativedelta, SU

from .timezones import DEFAULT_OFFSETS, TIMEZONE_ALIASES

logger = logging.getLogger(__name__)


def _as_utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def dst_window(year: int, standard_offset: int, daylight_offset: int) -> Tuple[datetime, datetime]:
    """
    Return the UTC ``(begin, end)`` instants of US daylight saving for a zone.

    Args:
        year: Calendar year to compute the window for.
        standard_offset: Zone offset east of UTC in minutes outside DST.
        daylight_offset: Zone offset east of UTC in minutes during DST.
    """
    second_sunday_of_march = datetime(year, 3, 1, 2, tzinfo=timezone.utc) + relativedelta(weekday=SU(+2))
    first_sunday_of_november = datetime(year, 11, 1, 2, tzinfo=timezone.utc) + relativedelta(weekday=SU(+1))

    begin = second_sunday_of_march - timedelta(minutes=standard_offset)
    end = first_sunday_of_november - timedelta(minutes=daylight_offset)
    return begin, end


def is_us_dst(now: datetime, standard_offset: int, daylight_offset: int) -> bool:
    """True when ``now`` lies within ``[begin, end)`` of the zone's DST window."""
    now = _as_utc(now)
    begin, end = dst_window(now.year, standard_offset, daylight_offset)
    return begin <= now < end


def resolve_dst(now: datetime) -> Dict[str, int]:
    """Effective offsets (minutes east of UTC) for ET, CT, MT and PT at ``now``."""
    patched = {}
    for alias in TIMEZONE_ALIASES:
        if not alias.observes_dst:
            continue
        in_dst = is_us_dst(now, alias.standard_offset, alias.daylight_offset)
        patched[alias.abbreviation] = alias.daylight_offset if in_dst else alias.standard_offset
        logger.debug(
            f"{alias.abbreviation} resolved to {'daylight' if in_dst else 'standard'} "
            f"offset {patched[alias.abbreviation]}"
        )
    return patched


def resolve_offsets(now: datetime) -> Mapping[str, int]:
    """
    Build the per-call abbreviation -> offset snapshot.

    Every known abbreviation keeps its fixed offset; only the US shorthands
    are swapped for their standard or daylight value at ``now``.

    Returns:
        A read-only mapping keyed by uppercase abbreviation.
    """
    offsets = dict(DEFAULT_OFFSETS)
    offsets.update(resolve_dst(now))
    return MappingProxyType(offsets)
