"""Synthetic climate data used whenever the upstream source is unavailable.

Curves are closed-form seasonal shapes per region class with bounded uniform
jitter. Pass a seeded `random.Random` for reproducible output.
"""

from __future__ import annotations

import math
import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .engines.types import ClimateSeries, Parameter, RegionClass

MONTHS = tuple(range(12))

# (low, width): value = low + uniform(0, 1) * width
Band = tuple[float, float]

MONSOON_MONTHS = frozenset({5, 6, 7, 8})
PRE_MONSOON_MONTHS = frozenset({2, 3, 4})
PEAK_SUN_MONTHS = frozenset({2, 3, 4, 5})
LOW_SUN_MONTHS = frozenset({6, 7, 8})

TEMPERATURE_CURVES: Mapping[RegionClass, tuple[float, float]] = {
    RegionClass.COASTAL: (27.0, 3.0),
    RegionClass.ARID: (26.0, 9.0),
    RegionClass.TROPICAL: (26.0, 3.0),
    RegionClass.MODERATE: (25.0, 8.0),
}
TEMPERATURE_JITTER = 3.0

RAIN_BANDS: Mapping[str, Band] = {
    "monsoon": (6.5, 6.5),
    "pre_monsoon": (1.5, 2.5),
    "dry": (0.3, 1.2),
}
RAIN_SCALE: Mapping[RegionClass, float] = {
    RegionClass.COASTAL: 1.3,
    RegionClass.ARID: 0.35,
    RegionClass.TROPICAL: 1.15,
    RegionClass.MODERATE: 1.0,
}

HUMIDITY_OFFSET: Mapping[RegionClass, float] = {
    RegionClass.COASTAL: 8.0,
    RegionClass.ARID: -25.0,
    RegionClass.TROPICAL: 10.0,
    RegionClass.MODERATE: 0.0,
}

# (peak, low-sun, other) daily irradiance bands in kWh/m^2/day
IRRADIANCE_BANDS: Mapping[RegionClass, tuple[Band, Band, Band]] = {
    RegionClass.ARID: ((6.5, 1.0), (5.0, 1.0), (5.8, 0.8)),
    RegionClass.COASTAL: ((5.5, 1.0), (4.0, 1.0), (5.0, 0.8)),
    RegionClass.TROPICAL: ((5.5, 1.0), (4.0, 1.0), (5.0, 0.8)),
    RegionClass.MODERATE: ((6.0, 1.0), (4.5, 1.0), (5.5, 0.8)),
}


@dataclass(frozen=True)
class RiskBand:
    """Disaster sub-scores (0-100) for one calendar month."""

    month: int
    heat: float
    flood: float
    storm: float
    drought: float


@dataclass(frozen=True)
class RiskSeason:
    months: frozenset[int]
    heat: Band
    flood: Band
    storm: Band
    drought: Band


# Seasons are matched in order; the last entry covers every month.
RISK_SEASONS: Mapping[RegionClass, tuple[RiskSeason, ...]] = {
    RegionClass.COASTAL: (
        RiskSeason(
            months=frozenset(range(5, 10)),
            heat=(30, 20),
            flood=(70, 25),
            storm=(60, 35),
            drought=(10, 15),
        ),
        RiskSeason(
            months=frozenset(MONTHS),
            heat=(40, 30),
            flood=(20, 30),
            storm=(30, 40),
            drought=(20, 25),
        ),
    ),
    RegionClass.ARID: (
        RiskSeason(
            months=frozenset(range(3, 7)),
            heat=(80, 15),
            flood=(10, 20),
            storm=(20, 30),
            drought=(70, 25),
        ),
        RiskSeason(
            months=frozenset(MONTHS),
            heat=(50, 30),
            flood=(15, 25),
            storm=(25, 35),
            drought=(40, 35),
        ),
    ),
    RegionClass.TROPICAL: (
        RiskSeason(
            months=frozenset(range(5, 10)),
            heat=(30, 20),
            flood=(65, 25),
            storm=(55, 35),
            drought=(10, 15),
        ),
        RiskSeason(
            months=frozenset(range(2, 5)),
            heat=(55, 25),
            flood=(20, 20),
            storm=(30, 30),
            drought=(30, 25),
        ),
        RiskSeason(
            months=frozenset(MONTHS),
            heat=(35, 20),
            flood=(25, 25),
            storm=(30, 25),
            drought=(20, 20),
        ),
    ),
    RegionClass.MODERATE: (
        RiskSeason(
            months=frozenset(range(5, 10)),
            heat=(40, 25),
            flood=(60, 30),
            storm=(50, 40),
            drought=(20, 20),
        ),
        RiskSeason(
            months=frozenset(range(3, 5)),
            heat=(70, 25),
            flood=(20, 25),
            storm=(30, 35),
            drought=(50, 30),
        ),
        RiskSeason(
            months=frozenset(MONTHS),
            heat=(40, 30),
            flood=(25, 30),
            storm=(35, 40),
            drought=(30, 25),
        ),
    ),
}


class SyntheticSeriesGenerator:
    """Produce plausible monthly climate values for a region class."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def generate(
        self,
        region: RegionClass,
        parameters: Sequence[Parameter],
        span_years: int,
    ) -> ClimateSeries:
        monthly: dict[int, dict[Parameter, float]] = {}
        for month in MONTHS:
            values: dict[Parameter, float] = {}
            for param in parameters:
                values[param] = round(self._value(param, region, month), 2)
            monthly[month + 1] = values
        return ClimateSeries(
            parameters=tuple(parameters),
            span_years=span_years,
            synthetic=True,
            monthly=monthly,
        )

    def risk_bands(self, region: RegionClass) -> tuple[RiskBand, ...]:
        seasons = RISK_SEASONS[region]
        bands: list[RiskBand] = []
        for month in MONTHS:
            season = next(s for s in seasons if month in s.months)
            bands.append(
                RiskBand(
                    month=month + 1,
                    heat=self._draw(season.heat),
                    flood=self._draw(season.flood),
                    storm=self._draw(season.storm),
                    drought=self._draw(season.drought),
                )
            )
        return tuple(bands)

    def jitter(self, low: float, width: float) -> float:
        return self._draw((low, width))

    def _draw(self, band: Band) -> float:
        low, width = band
        return low + self.rng.random() * width

    def _value(
        self, param: Parameter, region: RegionClass, month: int
    ) -> float:
        if param == "temperature":
            return self._temperature(region, month)
        if param == "precipitation":
            return self._precipitation(region, month)
        if param == "humidity":
            return self._humidity(region, month)
        if param == "irradiance":
            return self._irradiance(region, month)
        return self._wind(region, month)

    def _temperature(self, region: RegionClass, month: int) -> float:
        base, amplitude = TEMPERATURE_CURVES[region]
        seasonal = math.sin((month - 6) * math.pi / 6) * amplitude
        jitter = (self.rng.random() - 0.5) * 2 * TEMPERATURE_JITTER
        return base + seasonal + jitter

    def _precipitation(self, region: RegionClass, month: int) -> float:
        if month in MONSOON_MONTHS:
            band = RAIN_BANDS["monsoon"]
        elif month in PRE_MONSOON_MONTHS:
            band = RAIN_BANDS["pre_monsoon"]
        else:
            band = RAIN_BANDS["dry"]
        return self._draw(band) * RAIN_SCALE[region]

    def _humidity(self, region: RegionClass, month: int) -> float:
        value = self._draw((60.0, 20.0)) + HUMIDITY_OFFSET[region]
        if month in MONSOON_MONTHS:
            value += 8.0
        return min(100.0, max(5.0, value))

    def _irradiance(self, region: RegionClass, month: int) -> float:
        peak, low_sun, other = IRRADIANCE_BANDS[region]
        if month in PEAK_SUN_MONTHS:
            return self._draw(peak)
        if month in LOW_SUN_MONTHS:
            return self._draw(low_sun)
        return self._draw(other)

    def _wind(self, region: RegionClass, month: int) -> float:
        value = self._draw((2.0, 3.0))
        if month in MONSOON_MONTHS:
            value += 1.5
        if region is RegionClass.COASTAL:
            value += 1.0
        return value
