"""Banking-day checks and the next-banking-day walk.

``next_banking_day`` anchors the reference instant to start of business in
U.S. Eastern time (09:00, or 09:00 the next day once past the 17:00 close),
then walks forward one calendar day at a time. The result is always 09:00
Eastern, corrected by an hour when the walk crosses a DST boundary.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import NamedTuple

from .dst import eastern_utc_offset_hours, is_dst_active
from .resolver import match_holiday
from .time_utils import ET_ZONE, UTC, NaiveTsModeInput, et_date, format_utc_iso, to_aware, to_et

logger = logging.getLogger(__name__)

BUSINESS_OPEN_HOUR = 9
BUSINESS_CLOSE_HOUR = 17
MAX_WALK_DAYS = 3650

ONE_HOUR = timedelta(hours=1)
ONE_DAY = timedelta(days=1)


class BankingDayWalkError(RuntimeError):
    """The forward walk ran past its day limit without finding enough banking days."""


class BankingDayResult(NamedTuple):
    day: datetime
    holiday: str | None


def check_if_banking_day(
    when: datetime, *, naive_ts_mode: NaiveTsModeInput = None
) -> tuple[bool, str | None]:
    """(is banking day, matched holiday) for the Eastern date of ``when``.

    Holidays are only looked up on weekdays, so weekends report no holiday.
    """
    d = et_date(when, naive_ts_mode=naive_ts_mode)
    if d.weekday() >= 5:
        return False, None
    holiday = match_holiday(d)
    return holiday is None, holiday


def is_banking_day(when: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> bool:
    return check_if_banking_day(when, naive_ts_mode=naive_ts_mode)[0]


def _business_anchor(when: datetime, offset_hours: int, use_business_hours: bool) -> datetime:
    if not use_business_hours:
        return when
    d = et_date(when)
    business_end = datetime(
        d.year, d.month, d.day, BUSINESS_CLOSE_HOUR, tzinfo=timezone(timedelta(hours=offset_hours))
    ).astimezone(UTC)
    overnight = BUSINESS_CLOSE_HOUR - BUSINESS_OPEN_HOUR
    if when > business_end:
        return business_end + timedelta(hours=24 - overnight)
    return business_end - timedelta(hours=overnight)


def _literal_candidate(anchor: datetime, steps: int) -> datetime:
    # Same Eastern wall-clock time, ``steps`` Eastern calendar days later.
    local = to_et(anchor)
    day = local.date() + steps * ONE_DAY
    return datetime.combine(day, local.time(), tzinfo=ET_ZONE).astimezone(UTC)


def next_banking_day(
    when: datetime,
    count: int = 1,
    *,
    use_business_hours: bool = True,
    max_walk_days: int = MAX_WALK_DAYS,
    naive_ts_mode: NaiveTsModeInput = None,
) -> BankingDayResult:
    """Return the ``count``-th banking day strictly after ``when``.

    With ``use_business_hours`` (the default) the result is 09:00 Eastern on
    that day. With it off, ``when`` is taken as already anchored and the result
    keeps its Eastern wall-clock time.

    ``holiday`` is the last holiday skipped on the way, or None. Only the most
    recent one is kept.
    """
    count = int(count)
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    when = to_aware(when, naive_ts_mode=naive_ts_mode).astimezone(UTC)

    offset_hours = eastern_utc_offset_hours(when)
    anchor = _business_anchor(when, offset_hours, use_business_hours)
    logger.debug("anchor %s (UTC%+d) for %s", format_utc_iso(anchor), offset_hours, format_utc_iso(when))

    skipped: str | None = None
    found = 0
    steps = 0
    candidate = anchor
    while found < count:
        if steps >= max_walk_days:
            raise BankingDayWalkError(
                f"no {count} banking day(s) within {max_walk_days} days of {format_utc_iso(when)}"
            )
        steps += 1
        if use_business_hours:
            candidate = anchor + steps * ONE_DAY
        else:
            candidate = _literal_candidate(anchor, steps)
        is_bank_day, holiday = check_if_banking_day(candidate)
        if is_bank_day:
            found += 1
        elif holiday:
            logger.debug("skipping %s on %s", holiday, et_date(candidate).isoformat())
            skipped = holiday

    # Literal candidates already carry the right Eastern offset.
    if not use_business_hours:
        return BankingDayResult(candidate, skipped)
    in_dst = is_dst_active(candidate)
    if offset_hours == -5 and in_dst:
        candidate -= ONE_HOUR
        logger.debug("crossed into DST, shifted result back one hour")
    elif offset_hours == -4 and not in_dst:
        candidate += ONE_HOUR
        logger.debug("crossed out of DST, shifted result forward one hour")
    return BankingDayResult(candidate, skipped)
