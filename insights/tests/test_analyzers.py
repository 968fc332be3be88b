from __future__ import annotations

# ruff: noqa: S101
import random
from datetime import date, timedelta

import pytest

from insights.analyzers.agriculture import (
    AgricultureAnalyzer,
    identify_risks,
    yield_category,
    yield_score,
)
from insights.analyzers.risk import (
    RiskAnalyzer,
    disaster_probabilities,
    overall_risk,
    risk_calendar,
    risk_label,
    trend_summary,
)
from insights.analyzers.solar import (
    SolarAnalyzer,
    efficiency_factor,
    financial_analysis,
    potential_tier,
    recommendation_tier,
)
from insights.analyzers.travel import (
    TravelAnalyzer,
    activity_suggestions,
    comfort_score,
    rank_months,
    score_month,
)
from insights.analyzers.types import (
    AnnualPotential,
    MonthlyCropClimate,
    MonthlyRisk,
    SubRisks,
)
from insights.engines.types import ClimateSeries, Location, RegionClass
from insights.metrics import insights_fallbacks_total
from insights.resolver import GAZETTEER
from insights.synthetic import SyntheticSeriesGenerator
from insights.timeutils import span_bounds

MUMBAI = GAZETTEER["mumbai"]
JAIPUR = Location(
    name="Jaipur",
    country="India",
    state="Rajasthan",
    lat=26.91,
    lon=75.79,
    region=RegionClass.ARID,
)


def _generator(seed: int = 11) -> SyntheticSeriesGenerator:
    return SyntheticSeriesGenerator(random.Random(seed))


def _daily_series(
    parameters: tuple[str, ...],
    values: dict[str, float],
    *,
    years: int = 2,
    window: tuple[date, date] | None = None,
) -> ClimateSeries:
    """A real-looking series with constant values on every day."""

    if window is None:
        end = date(2024, 12, 31)
        start = end - timedelta(days=365 * years - 1)
    else:
        start, end = window
    daily = {
        start + timedelta(days=offset): dict(values)
        for offset in range((end - start).days + 1)
    }
    return ClimateSeries(
        parameters=parameters,  # type: ignore[arg-type]
        span_years=years,
        synthetic=False,
        daily=daily,  # type: ignore[arg-type]
        start=start,
        end=end,
        source="nasa_power",
    )


# Travel


def test_comfort_score_is_zero_floored() -> None:
    assert comfort_score(22.5, 22.5, 2.5) == 10
    assert comfort_score(60, 22.5, 2.5) == 0


def test_score_month_combines_sub_scores() -> None:
    month = score_month(3, temperature=25.0, rainfall=20.0, humidity=55.0)
    assert month.month == "Mar"
    assert month.month_index == 2
    assert month.sub_scores.temperature == 9.0
    assert month.sub_scores.rainfall == 9.0
    assert month.sub_scores.humidity == 9.0
    assert month.overall_score == 9.0


def test_rank_months_is_stable_for_ties() -> None:
    months = [
        score_month(m, temperature=22.5, rainfall=0.0, humidity=50.0)
        for m in (1, 2, 3)
    ]
    ranked = rank_months(months)
    assert [m.month for m in ranked] == ["Jan", "Feb", "Mar"]


def test_activity_suggestions_are_capped() -> None:
    hot = score_month(5, temperature=30.0, rainfall=10.0, humidity=50.0)
    cold = score_month(1, temperature=5.0, rainfall=150.0, humidity=50.0)
    assert len(activity_suggestions(hot)) == 4
    assert activity_suggestions(hot)[0] == "🏊 Beach activities"
    assert activity_suggestions(cold)[0] == "☕ Cafe hopping"


def test_travel_synthetic_insight_shape() -> None:
    analyzer = TravelAnalyzer(_generator())
    series = analyzer.synthetic_series(MUMBAI)
    insight = analyzer.analyze(series, MUMBAI)

    assert insight.demo is True
    assert insight.confidence_score == 85
    assert insight.data_points == 1825
    assert insight.years_analyzed == 5
    assert len(insight.monthly_breakdown) == 12
    scores = [m.overall_score for m in insight.monthly_breakdown]
    assert scores == sorted(scores, reverse=True)
    assert insight.best_travel_months[0] == insight.monthly_breakdown[0]
    assert {r.type for r in insight.recommendations} >= {
        "best_time",
        "activities",
    }


def test_travel_real_series_confidence_and_hot_tip() -> None:
    series = _daily_series(
        ("temperature", "precipitation", "humidity"),
        {"temperature": 30.0, "precipitation": 1.0, "humidity": 60.0},
        years=5,
    )
    insight = TravelAnalyzer(_generator()).analyze(series, MUMBAI)
    assert insight.demo is False
    assert insight.data_points == 1825
    assert insight.confidence_score == 100
    assert "hot_climate" in {r.type for r in insight.recommendations}


# Agriculture


def test_yield_score_bands() -> None:
    assert yield_score(28, 1500) == 100
    assert yield_score(22, 700) == 85
    assert yield_score(40, 100) == 70
    assert yield_category(100) == ("High", "5-7 tons/hectare")
    assert yield_category(70) == ("Medium", "3-5 tons/hectare")
    assert yield_category(30) == ("Low", "2-4 tons/hectare")


def _crop_months(rain: list[float]) -> list[MonthlyCropClimate]:
    return [
        MonthlyCropClimate(month=str(i), avg_temp=28.0, total_rain=r)
        for i, r in enumerate(rain)
    ]


def test_identify_risks_flags_drought_and_flood() -> None:
    rain = [10, 20, 30, 100, 100, 400, 450, 100, 100, 100, 100, 100]
    risks = identify_risks(_crop_months(rain))
    assert [r.type for r in risks] == ["drought", "flood"]
    assert risks[0].probability == 65
    assert risks[1].level == "Medium"


def test_identify_risks_never_empty() -> None:
    risks = identify_risks(_crop_months([100.0] * 12))
    assert [r.type for r in risks] == ["monsoon_variability"]


def test_agriculture_synthetic_insight_for_mumbai() -> None:
    analyzer = AgricultureAnalyzer(_generator())
    insight = analyzer.analyze(analyzer.synthetic_series(MUMBAI), MUMBAI)

    expected = {
        "High": "5-7 tons/hectare",
        "Medium": "3-5 tons/hectare",
        "Low": "2-4 tons/hectare",
    }
    potential = insight.yield_potential
    assert potential.category in expected
    assert potential.estimated_yield == expected[potential.category]
    assert 30 <= potential.score <= 100
    assert insight.data_points == 1095
    assert insight.confidence_score == 85
    assert len(insight.monthly_data) == 12
    assert insight.risks
    assert len(insight.recommendations) >= 3
    planting = next(
        r
        for r in insight.recommendations
        if r.title == "Optimal Planting Time"
    )
    assert "June - July" in planting.content


def test_agriculture_real_series_caps_confidence() -> None:
    series = _daily_series(
        ("temperature", "precipitation", "humidity"),
        {"temperature": 27.0, "precipitation": 4.0, "humidity": 70.0},
    )
    insight = AgricultureAnalyzer(_generator()).analyze(series, MUMBAI)
    assert insight.demo is False
    assert insight.confidence_score == 92
    # 4 mm/day is about 1461 mm/year.
    assert insight.yield_potential.score == 100


# Solar


def test_efficiency_factor_derates_and_floors() -> None:
    assert efficiency_factor(20) == 1.0
    assert efficiency_factor(35) == pytest.approx(0.96)
    assert efficiency_factor(150) == 0.75


def test_potential_tiers() -> None:
    assert potential_tier(6.2) == ("Excellent", "Very High")
    assert potential_tier(5.5) == ("Very Good", "High")
    assert potential_tier(4.5) == ("Good", "Medium")
    assert potential_tier(4.0) == ("Moderate", "Low")


def test_recommendation_tier_thresholds() -> None:
    assert recommendation_tier(3, 25) == "Highly Recommended"
    assert recommendation_tier(5, 16) == "Recommended"
    assert recommendation_tier(7.5, 11) == "Moderately Recommended"
    assert recommendation_tier(7, 12) == "Moderately Recommended"
    assert recommendation_tier(9, 30) == "Consider Other Options"


def _potential(generation: float) -> AnnualPotential:
    return AnnualPotential(
        total_radiation=2000,
        avg_daily_radiation=5.5,
        annual_generation=generation,
        capacity_factor=17.0,
        potential="Very Good",
        quality="High",
        cost_reduction="20-40%",
        peak_sun_hours=5.5,
    )


def test_financial_analysis_applies_indian_subsidy() -> None:
    result = financial_analysis(_potential(1500), "India")
    assert result.total_cost == 135000
    assert result.subsidy_amount == 54000
    assert result.net_cost == 81000
    assert result.annual_generation == 4500
    assert result.annual_savings == 29250
    assert result.payback_period == pytest.approx(2.8)
    assert result.recommendation == "Highly Recommended"


def test_financial_analysis_without_subsidy_outside_india() -> None:
    result = financial_analysis(_potential(1500), "Kenya")
    assert result.subsidy_amount == 0
    assert result.net_cost == 135000


def test_solar_synthetic_insight() -> None:
    analyzer = SolarAnalyzer(_generator())
    insight = analyzer.analyze(analyzer.synthetic_series(JAIPUR), JAIPUR)
    assert insight.confidence_score == 88
    assert insight.data_points == 730
    assert len(insight.monthly_data) == 12
    titles = [r.title for r in insight.recommendations]
    assert titles[:3] == [
        "Solar Resource Quality",
        "Energy Production",
        "Financial Outlook",
    ]
    assert "Government Support" in titles
    assert insight.annual_potential.potential in {
        "Excellent",
        "Very Good",
        "Good",
        "Moderate",
    }


# Risk


def test_risk_label_and_overall_levels() -> None:
    assert risk_label(60) == "High"
    assert risk_label(45) == "Medium"
    assert risk_label(10) == "Low"
    assert overall_risk(65).level == "High Risk"
    assert overall_risk(45).level == "Moderate Risk"
    assert overall_risk(25).level == "Low Risk"


def _risk_months(heat: int, flood: int) -> list[MonthlyRisk]:
    return [
        MonthlyRisk(
            month=str(i),
            risk_score=50,
            risk_level="Medium",
            sub_risks=SubRisks(heat=heat, flood=flood, storm=10, drought=10),
        )
        for i in range(12)
    ]


def test_disaster_probabilities_apply_regional_multiplier() -> None:
    months = _risk_months(heat=70, flood=65)
    coastal = disaster_probabilities(months, RegionClass.COASTAL)
    assert coastal.flood == 100
    assert coastal.heatwave == 80
    assert coastal.storm == 0
    moderate = disaster_probabilities(months, RegionClass.MODERATE)
    assert moderate.heatwave == 100


def test_risk_calendar_names_dominant_sub_risk() -> None:
    calendar = risk_calendar(_risk_months(heat=30, flood=65))
    assert {entry.primary_risk for entry in calendar} == {"flood"}


def test_trend_summary_uses_least_squares_slope() -> None:
    summary = trend_summary(
        {2020: 25.0, 2021: 25.1, 2022: 25.2},
        rising="Increasing",
        falling="Decreasing",
    )
    assert summary.trend == "Increasing"
    assert summary.rate == pytest.approx(0.1)
    flat = trend_summary({2020: 1.0}, rising="Up", falling="Down")
    assert flat.trend == "Stable"


def test_risk_synthetic_insight() -> None:
    analyzer = RiskAnalyzer(_generator())
    insight = analyzer.analyze(analyzer.synthetic_series(MUMBAI), MUMBAI)
    assert insight.confidence_score == 85
    assert insight.data_points == 730
    assert len(insight.monthly_risks) == 12
    assert len(insight.risk_calendar) == 12
    assert insight.climate_trends.temperature.trend == "Increasing"
    assert insight.preparedness[0].title == "Overall Risk Assessment"
    assert insight.preparedness[-1].title == "Stay Informed"
    # Coastal monsoon flooding is always high, so flood prep is listed.
    assert "Flood Safety" in {p.title for p in insight.preparedness}
    for value in vars(insight.disaster_probabilities).values():
        assert 0 <= value <= 100


def test_risk_real_series_reports_observed_period() -> None:
    series = _daily_series(
        ("temperature", "precipitation", "wind"),
        {"temperature": 27.0, "precipitation": 4.0, "wind": 3.0},
    )
    insight = RiskAnalyzer(_generator()).analyze(series, MUMBAI)
    assert insight.demo is False
    assert insight.confidence_score == 90
    assert insight.climate_trends.data_period == "2023-2024"
    assert insight.climate_trends.temperature.trend == "Stable"


def test_risk_trends_ignore_partial_calendar_years() -> None:
    series = _daily_series(
        ("temperature", "precipitation", "wind"),
        {"temperature": 27.0, "precipitation": 4.0, "wind": 3.0},
        window=span_bounds(2, date(2026, 10, 19)),
    )
    trends = RiskAnalyzer(_generator()).analyze(series, MUMBAI).climate_trends
    assert trends.data_period == "2024-2026"
    assert trends.rainfall.trend == "Stable"
    assert trends.rainfall.rate == 0.0
    assert trends.temperature.trend == "Stable"


# Fallback


def test_analyzer_falls_back_to_default_analysis() -> None:
    broken = ClimateSeries(
        parameters=("temperature", "precipitation", "humidity"),
        span_years=2,
        synthetic=False,
        daily={date(2024, 1, 1): {"temperature": 20.0}},
    )
    counter = insights_fallbacks_total.labels(
        domain="agriculture", stage="analysis"
    )
    before = counter._value.get()
    insight = AgricultureAnalyzer(_generator()).analyze(broken, MUMBAI)
    assert insight.demo is True
    assert insight.data_points == 1095
    assert len(insight.monthly_data) == 12
    assert counter._value.get() == before + 1
