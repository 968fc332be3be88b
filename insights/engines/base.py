from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .types import (
    ClimateSeries,
    CurrentConditions,
    GeocodeResult,
    Parameter,
    ProviderName,
)


class ClimateDataSource(ABC):
    """Abstract base for multi-year daily climate providers."""

    name: ProviderName

    @abstractmethod
    async def fetch(
        self,
        lat: float,
        lon: float,
        parameters: Sequence[Parameter],
        span_years: int,
    ) -> ClimateSeries:
        """Return a daily series covering the last `span_years` years.

        Raises `UpstreamError` subclasses on timeout, transport failure or
        an unusable payload. Implementations make a single attempt.
        """


class CurrentWeatherProvider(ABC):
    """Abstract base for current-conditions providers."""

    name: ProviderName

    @abstractmethod
    async def current(self, lat: float, lon: float) -> CurrentConditions:
        """Return current conditions for a coordinate."""


class GeocodingProvider(ABC):
    """Abstract base for free-text geocoders."""

    name: ProviderName

    @abstractmethod
    async def search(self, text: str) -> GeocodeResult:
        """Return the best match for a place name."""
