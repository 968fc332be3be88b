from __future__ import annotations

# ruff: noqa: S101
import time

import pytest
from django.core.cache import caches

from insights.cache import CacheKey, InsightCache
from insights.metrics import (
    insights_cache_hits_total,
    insights_cache_misses_total,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 1_700_000_000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture(autouse=True)
def _clear_cache() -> None:
    caches["default"].clear()


def test_cache_key_normalizes_location() -> None:
    key = CacheKey(domain="solar", location="  New   DELHI ")
    assert key.as_string() == "solar:new delhi"


def test_cache_hit_within_ttl_and_expiry(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    clock = FakeClock()
    monkeypatch.setattr(time, "time", clock)
    cache = InsightCache("travel", 3600)
    hits = insights_cache_hits_total.labels(domain="travel")
    misses = insights_cache_misses_total.labels(domain="travel")
    hits_before = hits._value.get()
    misses_before = misses._value.get()

    assert cache.get("Goa") is None
    cache.set("Goa", {"report": 1})
    clock.now += 3599
    assert cache.get(" goa ") == {"report": 1}

    clock.now += 1
    assert cache.get("Goa") is None

    assert hits._value.get() == hits_before + 1
    assert misses._value.get() == misses_before + 2


def test_cache_uses_django_backend_with_ttl() -> None:
    cache = InsightCache("risk", 10800)
    cache.set("Chennai", "report")
    backend = caches["default"]
    assert backend.get("risk:chennai", version=cache.version) == "report"


def test_cache_domains_are_isolated() -> None:
    travel = InsightCache("travel", 60)
    risk = InsightCache("risk", 60)
    travel.set("Goa", "travel-report")
    assert risk.get("Goa") is None
    assert travel.key("Goa") != risk.key("Goa")


def test_cache_clear_and_overwrite() -> None:
    cache = InsightCache("solar", 60)
    other = InsightCache("agriculture", 60)
    cache.set("Goa", "first")
    cache.set("GOA", "second")
    other.set("Goa", "crop")
    assert cache.get("goa") == "second"
    cache.clear()
    assert cache.get("goa") is None
    assert other.get("goa") == "crop"


def test_cache_rejects_non_positive_ttl() -> None:
    with pytest.raises(ValueError):
        InsightCache("risk", 0)
