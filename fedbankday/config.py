"""Runtime configuration loaded from environment variables."""
from __future__ import annotations

from dataclasses import dataclass
import os

from .banking_day import MAX_WALK_DAYS
from .time_utils import NaiveTsMode, normalize_naive_ts_mode

DEFAULT_USE_BUSINESS_HOURS = True
DEFAULT_NAIVE_TS_MODE = NaiveTsMode.UTC.value


@dataclass(frozen=True)
class CalendarConfig:
    use_business_hours: bool
    max_walk_days: int
    naive_ts_mode: NaiveTsMode


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def load_config() -> CalendarConfig:
    """Load config from environment, falling back to the library defaults."""
    max_walk_days = int(os.getenv("FEDBANKDAY_MAX_WALK_DAYS", str(MAX_WALK_DAYS)))
    if max_walk_days < 1:
        raise ValueError(f"FEDBANKDAY_MAX_WALK_DAYS must be >= 1, got {max_walk_days}")
    return CalendarConfig(
        use_business_hours=_env_flag("FEDBANKDAY_USE_BUSINESS_HOURS", DEFAULT_USE_BUSINESS_HOURS),
        max_walk_days=max_walk_days,
        naive_ts_mode=normalize_naive_ts_mode(
            os.getenv("FEDBANKDAY_NAIVE_TS_MODE"), default=DEFAULT_NAIVE_TS_MODE
        ),
    )
