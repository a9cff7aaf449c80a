"""Resolve holiday rules to dates and match dates against them.

Fed observance differs from the federal-employee schedule: a holiday on Sunday
is observed the following Monday, but a holiday on Saturday is not moved to
Friday (Reserve Banks stay open that Friday).
"""
from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, timedelta

from .holidays import FED_HOLIDAYS, HolidayRule, rules_for_month
from .time_utils import NaiveTsModeInput, et_date


def resolve_nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """nth ``weekday`` of the month (0=Mon). n=1 is first, n=-1 is last."""
    if n >= 1:
        first = date(year, month, 1)
        off = (weekday - first.weekday()) % 7
        return first + timedelta(days=off + 7 * (n - 1))
    last_day = date(year, month, monthrange(year, month)[1])
    back = (last_day.weekday() - weekday) % 7
    return last_day - timedelta(days=back + 7 * (abs(n) - 1))


def _observed_fixed(d: date) -> date:
    # Sunday -> Monday; Saturday stays put.
    if d.weekday() == 6:
        return d + timedelta(days=1)
    return d


def observed_date(rule: HolidayRule, year: int) -> date:
    if rule.is_floating:
        return resolve_nth_weekday(year, rule.month, int(rule.weekday), int(rule.nth))
    return _observed_fixed(date(year, rule.month, int(rule.day)))


def match_holiday(d: date) -> str | None:
    """Name of the Fed holiday observed on calendar date ``d``, if any."""
    for rule in rules_for_month(d.month):
        if rule.is_floating:
            if d.weekday() != rule.weekday:
                continue
            if resolve_nth_weekday(d.year, rule.month, int(rule.weekday), int(rule.nth)) == d:
                return rule.name
        elif rule.day == d.day:
            return rule.name
        elif _observed_fixed(date(d.year, rule.month, int(rule.day))) == d:
            return rule.name
    return None


def check_if_fed_bank_holiday(when: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> str | None:
    """Holiday name for the Eastern calendar date of ``when``, else None."""
    return match_holiday(et_date(when, naive_ts_mode=naive_ts_mode))


def observed_holidays(year: int) -> list[tuple[date, str]]:
    return sorted((observed_date(rule, year), rule.name) for rule in FED_HOLIDAYS)
