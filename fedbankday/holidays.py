"""Federal Reserve holiday rule table.

Rules are either a fixed month/day or the Nth weekday of a month. Weekdays use
``date.weekday()`` numbering (0=Mon .. 6=Sun); a negative ``nth`` counts from
the end of the month (-1 is the last occurrence).

https://www.federalreserve.gov/aboutthefed/k8.htm
"""
from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping


class HolidayRuleError(ValueError):
    """A holiday rule that cannot resolve to exactly one date every year."""


@dataclass(frozen=True)
class HolidayRule:
    name: str
    month: int
    day: int | None = None
    weekday: int | None = None
    nth: int | None = None

    @property
    def is_floating(self) -> bool:
        return self.weekday is not None


FED_HOLIDAYS: tuple[HolidayRule, ...] = (
    HolidayRule("New Year's Day", 1, day=1),
    HolidayRule("Birthday of Martin Luther King Jr.", 1, weekday=0, nth=3),
    HolidayRule("Washington's Birthday/Presidents' Day", 2, weekday=0, nth=3),
    HolidayRule("Memorial Day", 5, weekday=0, nth=-1),
    HolidayRule("Juneteenth National Independence Day", 6, day=19),
    HolidayRule("Independence Day", 7, day=4),
    HolidayRule("Labor Day", 9, weekday=0, nth=1),
    HolidayRule("Columbus Day/Indigenous People's Day", 10, weekday=0, nth=2),
    HolidayRule("Veteran's Day", 11, day=11),
    HolidayRule("Thanksgiving Day", 11, weekday=3, nth=4),
    HolidayRule("Christmas Day", 12, day=25),
)


def _check_rule(rule: HolidayRule) -> None:
    if not 1 <= rule.month <= 12:
        raise HolidayRuleError(f"{rule.name}: month {rule.month} out of range")
    if rule.is_floating:
        if rule.day is not None:
            raise HolidayRuleError(f"{rule.name}: both fixed day and weekday given")
        if not 0 <= int(rule.weekday) <= 6:
            raise HolidayRuleError(f"{rule.name}: weekday {rule.weekday} out of range")
        # A 5th weekday does not exist in every month.
        if rule.nth is None or rule.nth == 0 or abs(rule.nth) > 4:
            raise HolidayRuleError(f"{rule.name}: nth={rule.nth} does not resolve every year")
        return
    if rule.day is None:
        raise HolidayRuleError(f"{rule.name}: needs a fixed day or a weekday/nth pair")
    if rule.nth is not None:
        raise HolidayRuleError(f"{rule.name}: nth given without a weekday")
    # 2007 is not a leap year, so Feb 29 is rejected.
    if not 1 <= rule.day <= monthrange(2007, rule.month)[1]:
        raise HolidayRuleError(f"{rule.name}: day {rule.day} does not exist in month {rule.month}")


def validate_rules(rules: Iterable[HolidayRule]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.name in seen:
            raise HolidayRuleError(f"duplicate holiday name: {rule.name}")
        seen.add(rule.name)
        _check_rule(rule)


def build_holiday_index(rules: Iterable[HolidayRule]) -> Mapping[int, tuple[HolidayRule, ...]]:
    """Validate ``rules`` and group them by month, keeping table order."""
    rules = tuple(rules)
    validate_rules(rules)
    grouped: dict[int, list[HolidayRule]] = {}
    for rule in rules:
        grouped.setdefault(rule.month, []).append(rule)
    return MappingProxyType({month: tuple(items) for month, items in grouped.items()})


HOLIDAYS_BY_MONTH = build_holiday_index(FED_HOLIDAYS)


def rules_for_month(month: int) -> tuple[HolidayRule, ...]:
    return HOLIDAYS_BY_MONTH.get(month, ())
