"""U.S. Eastern time helpers.

Every calendar decision in this package is made on the Eastern local date, so
instants are converted explicitly instead of trusting the host time zone.
"""
from __future__ import annotations

from enum import Enum
from datetime import date, datetime, timezone
from typing import Union
from zoneinfo import ZoneInfo

ET_ZONE = ZoneInfo("America/New_York")
UTC = timezone.utc
ET_ALIASES = frozenset({"et", "america/new_york"})


class NaiveTsMode(str, Enum):
    UTC = "utc"
    ET = "et"


NaiveTsModeInput = Union[str, NaiveTsMode, None]


def normalize_naive_ts_mode(naive_ts_mode: NaiveTsModeInput, *, default: str = "utc") -> NaiveTsMode:
    """Naive timestamps are UTC unless the mode names Eastern time."""
    if isinstance(naive_ts_mode, NaiveTsMode):
        return naive_ts_mode
    token = str(naive_ts_mode or default).strip().lower()
    return NaiveTsMode.ET if token in ET_ALIASES else NaiveTsMode.UTC


def to_aware(ts: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> datetime:
    """Attach a zone to naive timestamps; aware timestamps pass through."""
    if getattr(ts, "tzinfo", None) is not None:
        return ts
    mode = normalize_naive_ts_mode(naive_ts_mode)
    return ts.replace(tzinfo=ET_ZONE if mode == NaiveTsMode.ET else UTC)


def to_et(ts: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> datetime:
    return to_aware(ts, naive_ts_mode=naive_ts_mode).astimezone(ET_ZONE)


def to_utc(ts: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> datetime:
    return to_aware(ts, naive_ts_mode=naive_ts_mode).astimezone(UTC)


def et_date(ts: datetime, *, naive_ts_mode: NaiveTsModeInput = None) -> date:
    return to_et(ts, naive_ts_mode=naive_ts_mode).date()


def parse_timestamp(raw: str, *, naive_ts_mode: NaiveTsModeInput = None) -> datetime:
    """Parse an ISO-8601 timestamp (``Z`` suffix and bare dates accepted)."""
    text = str(raw).strip()
    if not text:
        raise ValueError("empty timestamp")
    if text[-1] in {"Z", "z"}:
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    return to_aware(parsed, naive_ts_mode=naive_ts_mode)


def format_utc_iso(ts: datetime) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = to_utc(ts)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
