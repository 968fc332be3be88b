from __future__ import annotations

from django.conf import settings

from .base import ClimateDataSource, CurrentWeatherProvider, GeocodingProvider
from .location_iq import LocationIqProvider
from .nasa_power import NasaPowerProvider
from .open_weather import OpenWeatherProvider


def upstream_timeout() -> float:
    return float(getattr(settings, "INSIGHTS_UPSTREAM_TIMEOUT_S", 10))


def build_climate_source(timeout: float | None = None) -> ClimateDataSource:
    """Instantiate the daily climate provider."""

    return NasaPowerProvider(timeout=timeout or upstream_timeout())


def build_weather_provider() -> CurrentWeatherProvider | None:
    """Return the current-weather provider, or None without an API key."""

    api_key = getattr(settings, "OPENWEATHER_API_KEY", "")
    if not api_key:
        return None
    return OpenWeatherProvider(api_key=api_key, timeout=upstream_timeout())


def build_geocoder() -> GeocodingProvider | None:
    """Return the geocoder, or None without an API key."""

    api_key = getattr(settings, "LOCATIONIQ_API_KEY", "")
    if not api_key:
        return None
    return LocationIqProvider(api_key=api_key, timeout=upstream_timeout())
