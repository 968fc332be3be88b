from __future__ import annotations

# ruff: noqa: S101
import random
from datetime import date, timedelta

import pytest

from insights.aggregation import mean, monthly_means, yearly_values
from insights.engines.types import ClimateSeries, RegionClass
from insights.exceptions import AnalysisFailure
from insights.synthetic import SyntheticSeriesGenerator
from insights.timeutils import format_yyyymmdd, parse_yyyymmdd, span_bounds

ALL_PARAMETERS = (
    "temperature",
    "precipitation",
    "humidity",
    "irradiance",
    "wind",
)


@pytest.mark.parametrize("region", list(RegionClass))
def test_generate_produces_twelve_bounded_months(
    region: RegionClass,
) -> None:
    generator = SyntheticSeriesGenerator(random.Random(7))
    series = generator.generate(region, ALL_PARAMETERS, 3)

    assert series.synthetic is True
    assert series.span_years == 3
    assert series.data_points == 1095
    assert sorted(series.monthly) == list(range(1, 13))
    for values in series.monthly.values():
        assert set(values) == set(ALL_PARAMETERS)
        assert 5 <= values["temperature"] <= 45
        assert 0 <= values["precipitation"] <= 20
        assert 5 <= values["humidity"] <= 100
        assert 3 <= values["irradiance"] <= 8
        assert 2 <= values["wind"] <= 7.5


def test_generate_is_reproducible_with_seed() -> None:
    first = SyntheticSeriesGenerator(random.Random(42)).generate(
        RegionClass.COASTAL, ("temperature",), 2
    )
    second = SyntheticSeriesGenerator(random.Random(42)).generate(
        RegionClass.COASTAL, ("temperature",), 2
    )
    assert first.monthly == second.monthly


def test_monsoon_is_wetter_than_dry_season() -> None:
    generator = SyntheticSeriesGenerator(random.Random(3))
    series = generator.generate(RegionClass.MODERATE, ("precipitation",), 1)
    monsoon = [series.monthly[m]["precipitation"] for m in (6, 7, 8, 9)]
    dry = [series.monthly[m]["precipitation"] for m in (1, 2, 11, 12)]
    assert min(monsoon) > max(dry)


def test_arid_regions_get_more_sun_than_coastal_in_peak_months() -> None:
    arid = SyntheticSeriesGenerator(random.Random(1)).generate(
        RegionClass.ARID, ("irradiance",), 1
    )
    coastal = SyntheticSeriesGenerator(random.Random(1)).generate(
        RegionClass.COASTAL, ("irradiance",), 1
    )
    for month in (3, 4, 5, 6):
        assert (
            arid.monthly[month]["irradiance"]
            > coastal.monthly[month]["irradiance"]
        )


@pytest.mark.parametrize("region", list(RegionClass))
def test_risk_bands_cover_every_month(region: RegionClass) -> None:
    bands = SyntheticSeriesGenerator(random.Random(5)).risk_bands(region)
    assert [band.month for band in bands] == list(range(1, 13))
    for band in bands:
        for value in (band.heat, band.flood, band.storm, band.drought):
            assert 0 <= value <= 100


def test_coastal_monsoon_flood_risk_is_high() -> None:
    bands = SyntheticSeriesGenerator(random.Random(9)).risk_bands(
        RegionClass.COASTAL
    )
    assert all(bands[m].flood >= 70 for m in range(5, 10))


def _daily_series(
    values: dict[date, dict[str, float]], span_years: int = 1
) -> ClimateSeries:
    return ClimateSeries(
        parameters=("temperature", "precipitation"),
        span_years=span_years,
        synthetic=False,
        daily=values,  # type: ignore[arg-type]
        start=min(values),
        end=max(values),
    )


def test_monthly_means_pools_days_across_years() -> None:
    daily = {
        date(year, month, 1): {"temperature": float(month + offset)}
        for year, offset in ((2023, 0), (2024, 2))
        for month in range(1, 13)
    }
    series = _daily_series(daily, span_years=2)
    result = monthly_means(series, ("temperature",))
    assert list(result) == list(range(1, 13))
    assert result[1]["temperature"] == pytest.approx(2.0)
    assert result[12]["temperature"] == pytest.approx(13.0)


def test_monthly_means_requires_every_month() -> None:
    daily = {date(2024, 1, 1): {"temperature": 20.0}}
    with pytest.raises(AnalysisFailure, match="months"):
        monthly_means(_daily_series(daily), ("temperature",))


def test_yearly_values_use_whole_windows_back_from_end() -> None:
    start, end = span_bounds(2, date(2026, 10, 19))
    daily = {
        start + timedelta(days=offset): {
            "temperature": 27.0,
            "precipitation": 4.0 if offset <= 365 else 5.0,
        }
        for offset in range((end - start).days + 1)
    }
    # A day lost upstream must not shrink the annual total.
    del daily[date(2026, 1, 1)]["precipitation"]
    series = ClimateSeries(
        parameters=("temperature", "precipitation"),
        span_years=2,
        synthetic=False,
        daily=daily,  # type: ignore[arg-type]
        start=start,
        end=end,
    )

    assert yearly_values(series, "temperature") == {2025: 27.0, 2026: 27.0}
    totals = yearly_values(series, "precipitation", total=True)
    assert totals == {
        2025: pytest.approx(1460.0),
        2026: pytest.approx(1825.0),
    }


def test_yearly_values_need_start_and_end() -> None:
    series = ClimateSeries(
        parameters=("temperature",),
        span_years=1,
        synthetic=False,
        daily={date(2024, 1, 1): {"temperature": 20.0}},
    )
    assert yearly_values(series, "temperature") == {}


def test_mean_rejects_empty_input() -> None:
    assert mean({1: 2.0, 2: 4.0}) == 3.0
    with pytest.raises(AnalysisFailure):
        mean([])


def test_span_bounds_handles_leap_day() -> None:
    start, end = span_bounds(1, date(2024, 2, 29))
    assert start == date(2023, 2, 28)
    assert end == date(2024, 2, 29)
    with pytest.raises(ValueError):
        span_bounds(0, date(2024, 1, 1))


def test_yyyymmdd_helpers() -> None:
    assert format_yyyymmdd(date(2024, 3, 5)) == "20240305"
    assert parse_yyyymmdd("20240305") == date(2024, 3, 5)
    assert parse_yyyymmdd("2024-03-05") is None
