from __future__ import annotations

import pytest

from fedbankday.banking_day import MAX_WALK_DAYS
from fedbankday.config import load_config
from fedbankday.time_utils import NaiveTsMode

ENV_KEYS = ("FEDBANKDAY_USE_BUSINESS_HOURS", "FEDBANKDAY_MAX_WALK_DAYS", "FEDBANKDAY_NAIVE_TS_MODE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.use_business_hours is True
    assert cfg.max_walk_days == MAX_WALK_DAYS
    assert cfg.naive_ts_mode == NaiveTsMode.UTC


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEDBANKDAY_USE_BUSINESS_HOURS", "off")
    monkeypatch.setenv("FEDBANKDAY_MAX_WALK_DAYS", "30")
    monkeypatch.setenv("FEDBANKDAY_NAIVE_TS_MODE", "America/New_York")
    cfg = load_config()
    assert cfg.use_business_hours is False
    assert cfg.max_walk_days == 30
    assert cfg.naive_ts_mode == NaiveTsMode.ET


def test_rejects_non_positive_walk_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEDBANKDAY_MAX_WALK_DAYS", "0")
    with pytest.raises(ValueError):
        load_config()
