"""Next U.S. banking day under Federal Reserve holiday observance."""
from __future__ import annotations

from .banking_day import (
    BankingDayResult,
    BankingDayWalkError,
    check_if_banking_day,
    is_banking_day,
    next_banking_day,
)
from .dst import get_dst_end, get_dst_start, is_dst_active
from .holidays import FED_HOLIDAYS, HolidayRule, HolidayRuleError
from .resolver import check_if_fed_bank_holiday, observed_holidays, resolve_nth_weekday

__all__ = [
    "BankingDayResult",
    "BankingDayWalkError",
    "FED_HOLIDAYS",
    "HolidayRule",
    "HolidayRuleError",
    "check_if_banking_day",
    "check_if_fed_bank_holiday",
    "get_dst_end",
    "get_dst_start",
    "is_banking_day",
    "is_dst_active",
    "next_banking_day",
    "observed_holidays",
    "resolve_nth_weekday",
]
