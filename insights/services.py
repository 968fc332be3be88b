from __future__ import annotations

import logging
import random
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import TypeVar

from django.conf import settings
from django.utils import timezone as dj_timezone

from .analyzers.agriculture import AgricultureAnalyzer
from .analyzers.base import InsightAnalyzer
from .analyzers.risk import RiskAnalyzer
from .analyzers.solar import SolarAnalyzer
from .analyzers.travel import TravelAnalyzer
from .analyzers.types import DOMAINS, Domain, Insight, TravelInsight
from .cache import InsightCache
from .engines.base import ClimateDataSource, CurrentWeatherProvider
from .engines.registry import (
    build_climate_source,
    build_geocoder,
    build_weather_provider,
)
from .engines.types import (
    ClimateSeries,
    CurrentConditions,
    Location,
    ProviderName,
)
from .exceptions import UpstreamError
from .metrics import (
    insights_assembled_total,
    insights_fallbacks_total,
    insights_upstream_errors_total,
    insights_upstream_latency_seconds,
    insights_upstream_requests_total,
)
from .resolver import LocationResolver
from .synthetic import SyntheticSeriesGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRAVEL_TIMEOUT = float(getattr(settings, "INSIGHTS_TRAVEL_TIMEOUT_S", 15))
CACHE_TTLS: Mapping[Domain, int] = {
    "travel": int(getattr(settings, "INSIGHTS_CACHE_TTL_TRAVEL_S", 3600)),
    "agriculture": int(
        getattr(settings, "INSIGHTS_CACHE_TTL_AGRICULTURE_S", 7200)
    ),
    "solar": int(getattr(settings, "INSIGHTS_CACHE_TTL_SOLAR_S", 10800)),
    "risk": int(getattr(settings, "INSIGHTS_CACHE_TTL_RISK_S", 10800)),
}

FALLBACK_CONDITIONS = CurrentConditions(
    temperature=25,
    humidity=65,
    feels_like=26,
    wind_speed=3.2,
    description="sunny",
    condition="Clear",
    icon="☀️",
)


@dataclass(frozen=True)
class InsightReport:
    domain: Domain
    location: Location
    insight: Insight
    timestamp: datetime
    data_points: int
    years_analyzed: int
    demo: bool


class InsightAssembler:
    """Run resolve -> fetch -> analyze for one domain and cache the result.

    Upstream failures at any stage are absorbed: geocoding falls back to the
    gazetteer resolver, climate data to the synthetic generator and current
    weather to fixed conditions. Unknown domains raise `ValueError`.
    """

    def __init__(
        self,
        *,
        resolver: LocationResolver,
        climate_sources: Mapping[Domain, ClimateDataSource],
        analyzers: Mapping[Domain, InsightAnalyzer],
        caches: Mapping[Domain, InsightCache],
        weather_provider: CurrentWeatherProvider | None = None,
        now: Callable[[], datetime] = dj_timezone.now,
    ) -> None:
        self.resolver = resolver
        self.climate_sources = climate_sources
        self.analyzers = analyzers
        self.caches = caches
        self.weather_provider = weather_provider
        self._now = now

    async def assemble(self, domain: str, query: str) -> InsightReport:
        if domain not in self.analyzers:
            raise ValueError(f"Unknown insight domain: {domain}")
        analyzer = self.analyzers[domain]
        cache = self.caches[analyzer.domain]
        cached = cache.get(query)
        if cached is not None:
            return cached

        location = await self._locate(analyzer.domain, query)
        series = await self._fetch(analyzer, location)
        insight = analyzer.analyze(series, location)
        if isinstance(insight, TravelInsight):
            conditions = await self._current_conditions(location)
            insight = replace(
                insight,
                current_conditions=conditions,
                demo=insight.demo or conditions.source is None,
            )

        report = InsightReport(
            domain=analyzer.domain,
            location=location,
            insight=insight,
            timestamp=self._now(),
            data_points=insight.data_points,
            years_analyzed=insight.years_analyzed,
            demo=insight.demo,
        )
        insights_assembled_total.labels(
            domain=analyzer.domain, demo=str(report.demo).lower()
        ).inc()
        logger.info(
            "insights.assemble.done domain=%s location=%s demo=%s",
            analyzer.domain,
            location.name,
            report.demo,
        )
        cache.set(query, report)
        return report

    async def _locate(self, domain: Domain, query: str) -> Location:
        geocoder = self.resolver.geocoder
        if geocoder is None or self.resolver.lookup(query) is not None:
            return self.resolver.resolve(query)
        try:
            return await _observe(
                geocoder.name, lambda: self.resolver.locate(query)
            )
        except UpstreamError as exc:
            self._record_fallback(domain, "geocode", exc)
            return self.resolver.resolve(query)

    async def _fetch(
        self, analyzer: InsightAnalyzer, location: Location
    ) -> ClimateSeries:
        source = self.climate_sources[analyzer.domain]
        try:
            return await _observe(
                source.name,
                lambda: source.fetch(
                    location.lat,
                    location.lon,
                    analyzer.parameters,
                    analyzer.span_years,
                ),
            )
        except UpstreamError as exc:
            self._record_fallback(analyzer.domain, "climate", exc)
            return analyzer.synthetic_series(location)

    async def _current_conditions(
        self, location: Location
    ) -> CurrentConditions:
        provider = self.weather_provider
        if provider is None:
            return FALLBACK_CONDITIONS
        try:
            return await _observe(
                provider.name,
                lambda: provider.current(location.lat, location.lon),
            )
        except UpstreamError as exc:
            self._record_fallback("travel", "weather", exc)
            return FALLBACK_CONDITIONS

    def _record_fallback(
        self, domain: Domain, stage: str, exc: UpstreamError
    ) -> None:
        logger.warning(
            "insights.%s.fallback domain=%s provider=%s err=%s",
            stage,
            domain,
            exc.provider,
            exc,
        )
        insights_fallbacks_total.labels(domain=domain, stage=stage).inc()


async def _observe(
    provider: ProviderName, call: Callable[[], Awaitable[T]]
) -> T:
    start_time = time.perf_counter()
    insights_upstream_requests_total.labels(provider=provider).inc()
    try:
        return await call()
    except Exception as exc:
        insights_upstream_errors_total.labels(
            provider=provider, error_type=exc.__class__.__name__
        ).inc()
        raise
    finally:
        duration = time.perf_counter() - start_time
        insights_upstream_latency_seconds.labels(provider=provider).observe(
            duration
        )


def build_assembler() -> InsightAssembler:
    """Wire the production collaborators from Django settings."""

    seed = getattr(settings, "INSIGHTS_SYNTHETIC_SEED", None)
    rng = random.Random(seed) if seed is not None else None
    generator = SyntheticSeriesGenerator(rng)
    analyzers: dict[Domain, InsightAnalyzer] = {
        "travel": TravelAnalyzer(generator),
        "agriculture": AgricultureAnalyzer(generator),
        "solar": SolarAnalyzer(generator),
        "risk": RiskAnalyzer(generator),
    }
    default_source = build_climate_source()
    climate_sources: dict[Domain, ClimateDataSource] = {
        domain: default_source for domain in DOMAINS
    }
    climate_sources["travel"] = build_climate_source(TRAVEL_TIMEOUT)
    return InsightAssembler(
        resolver=LocationResolver(geocoder=build_geocoder()),
        climate_sources=climate_sources,
        analyzers=analyzers,
        caches={
            domain: InsightCache(domain, CACHE_TTLS[domain])
            for domain in DOMAINS
        },
        weather_provider=build_weather_provider(),
    )


ASSEMBLER = build_assembler()


async def get_insight(domain: str, query: str) -> InsightReport:
    return await ASSEMBLER.assemble(domain, query)
