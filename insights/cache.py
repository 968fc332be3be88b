from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings
from django.core.cache import caches

from .analyzers.types import Domain
from .metrics import insights_cache_hits_total, insights_cache_misses_total
from .resolver import normalize_query

CACHE_ALIAS = getattr(settings, "INSIGHTS_CACHE_ALIAS", "default")


@dataclass(frozen=True)
class CacheKey:
    domain: Domain
    location: str

    def as_string(self) -> str:
        return f"{self.domain}:{normalize_query(self.location)}"


class InsightCache:
    """Per-domain view over a Django cache with one TTL for every entry.

    Expiry and culling are left to the backend. `clear` only drops this
    domain's entries: it moves to a new key version, so older entries are
    never read again and age out of the backend.
    """

    def __init__(
        self,
        domain: Domain,
        ttl_seconds: int,
        *,
        alias: str = CACHE_ALIAS,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"TTL must be positive: {ttl_seconds}")
        self.domain = domain
        self.ttl_seconds = ttl_seconds
        self.alias = alias
        self.version = 1

    def key(self, query: str) -> str:
        return CacheKey(domain=self.domain, location=query).as_string()

    def get(self, query: str) -> Any | None:
        cache = caches[self.alias]
        cached = cache.get(self.key(query), version=self.version)
        if cached is not None:
            insights_cache_hits_total.labels(domain=self.domain).inc()
            return cached
        insights_cache_misses_total.labels(domain=self.domain).inc()
        return None

    def set(self, query: str, value: Any) -> None:
        cache = caches[self.alias]
        cache.set(
            self.key(query), value, self.ttl_seconds, version=self.version
        )

    def clear(self) -> None:
        self.version += 1
