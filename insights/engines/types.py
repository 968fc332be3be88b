from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Literal

ProviderName = Literal["nasa_power", "open_weather", "location_iq"]

Parameter = Literal[
    "temperature", "precipitation", "humidity", "irradiance", "wind"
]

DAYS_PER_YEAR = 365


class RegionClass(StrEnum):
    """Coarse climate bucket driving seasonal curves and risk bands."""

    COASTAL = "coastal"
    ARID = "arid"
    TROPICAL = "tropical"
    MODERATE = "moderate"


@dataclass(frozen=True)
class Location:
    name: str
    country: str
    state: str
    lat: float
    lon: float
    region: RegionClass = RegionClass.MODERATE

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lon}")


@dataclass(frozen=True)
class GeocodeResult:
    lat: float
    lon: float
    display_name: str
    country: str
    source: ProviderName
    state: str = "Unknown"


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    humidity: float
    feels_like: float
    wind_speed: float
    description: str
    condition: str
    icon: str
    source: ProviderName | None = None


@dataclass(frozen=True)
class ClimateSeries:
    """Climate values keyed by day (upstream) or by month (synthetic).

    Upstream series fill `daily` and keep every key inside `start..end`.
    Synthetic series fill `monthly` with exactly twelve buckets (1-12);
    their values are daily means for the month.
    """

    parameters: tuple[Parameter, ...]
    span_years: int
    synthetic: bool
    daily: Mapping[date, Mapping[Parameter, float]] = field(
        default_factory=dict
    )
    monthly: Mapping[int, Mapping[Parameter, float]] = field(
        default_factory=dict
    )
    start: date | None = None
    end: date | None = None
    source: ProviderName | None = None

    @property
    def primary_parameter(self) -> Parameter:
        return self.parameters[0]

    @property
    def data_points(self) -> int:
        if self.synthetic:
            return DAYS_PER_YEAR * self.span_years
        primary = self.primary_parameter
        return sum(1 for values in self.daily.values() if primary in values)
