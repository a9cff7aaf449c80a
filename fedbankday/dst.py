"""U.S. Eastern DST boundaries (2007+ rules only).

DST starts 02:00 local on the 2nd Sunday of March and ends 02:00 local on the
1st Sunday of November. Boundaries are memoized per year; the cache is bounded
so a long-lived process walking many years does not grow without limit.
"""
from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from functools import lru_cache

from .resolver import resolve_nth_weekday
from .time_utils import UTC, NaiveTsModeInput, to_aware, to_et

DST_START_RULE = (3, 6, 2)  # month, weekday (Sun), nth
DST_END_RULE = (11, 6, 1)
DST_TRANSITION_TIME = time(2, 0)
EDT = timezone(timedelta(hours=-4))
EST = timezone(timedelta(hours=-5))
DST_CACHE_YEARS = 64


@lru_cache(maxsize=DST_CACHE_YEARS)
def get_dst_start(year: int) -> datetime:
    month, weekday, nth = DST_START_RULE
    day = resolve_nth_weekday(year, month, weekday, nth)
    return datetime.combine(day, DST_TRANSITION_TIME, tzinfo=EDT).astimezone(UTC)


@lru_cache(maxsize=DST_CACHE_YEARS)
def get_dst_end(year: int) -> datetime:
    month, weekday, nth = DST_END_RULE
    day = resolve_nth_weekday(year, month, weekday, nth)
    return datetime.combine(day, DST_TRANSITION_TIME, tzinfo=EST).astimezone(UTC)


def dst_bounds(year: int) -> tuple[datetime, datetime]:
    return get_dst_start(year), get_dst_end(year)


def is_dst_active(when: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> bool:
    """True on [start, end) of the Eastern local year of ``when``."""
    when = to_aware(when, naive_ts_mode=naive_ts_mode)
    start, end = dst_bounds(to_et(when).year)
    return start <= when < end


def eastern_utc_offset_hours(when: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> int:
    return -4 if is_dst_active(when, naive_ts_mode=naive_ts_mode) else -5
