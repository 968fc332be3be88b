"""Climate disaster risk profile.

Monthly sub-risks come from the region's seasonal model; a real climate
series only feeds the long-term trend summary.
"""

from __future__ import annotations

import statistics
from collections.abc import Mapping, Sequence

from django.utils import timezone as dj_timezone

from ..aggregation import MONTH_NAMES, yearly_values
from ..engines.types import ClimateSeries, Location, RegionClass
from ..synthetic import RiskBand
from .base import InsightAnalyzer
from .types import (
    ClimateTrends,
    DisasterProbabilities,
    ExtremeEvents,
    MonthlyRisk,
    OverallRisk,
    Recommendation,
    RiskCalendarEntry,
    RiskInsight,
    SubRisks,
    TrendSummary,
)

HIGH_THRESHOLD = 60
MEDIUM_THRESHOLD = 40
PREPAREDNESS_THRESHOLD = 50

REGIONAL_MULTIPLIERS: Mapping[RegionClass, Mapping[str, float]] = {
    RegionClass.COASTAL: {"flood": 1.6, "storm": 1.4, "heatwave": 0.8},
    RegionClass.ARID: {"drought": 1.8, "heatwave": 1.3, "flood": 0.7},
    RegionClass.TROPICAL: {"storm": 1.5, "flood": 1.4},
    RegionClass.MODERATE: {},
}

OVERALL_LEVELS: tuple[tuple[float, str, str], ...] = (
    (
        HIGH_THRESHOLD,
        "High Risk",
        "Immediate precautions recommended. Monitor weather alerts "
        "regularly.",
    ),
    (
        MEDIUM_THRESHOLD,
        "Moderate Risk",
        "Stay informed about weather forecasts. Basic preparedness advised.",
    ),
    (
        0,
        "Low Risk",
        "Standard safety measures sufficient. Enjoy your activities with "
        "normal precautions.",
    ),
)

# disaster -> (emoji, title, advice)
PREPAREDNESS: Mapping[str, tuple[str, str, str]] = {
    "heatwave": (
        "🔥",
        "Heatwave Preparedness",
        "Stay hydrated, avoid outdoor activities during peak heat hours, "
        "use cooling systems",
    ),
    "flood": (
        "🌊",
        "Flood Safety",
        "Know evacuation routes, avoid floodwaters, keep emergency "
        "supplies ready",
    ),
    "storm": (
        "⚡",
        "Storm Preparedness",
        "Secure outdoor items, prepare emergency kit, monitor weather "
        "alerts",
    ),
    "drought": (
        "🏜️",
        "Water Conservation",
        "Implement water-saving measures, monitor water levels, plan for "
        "shortages",
    ),
}

SYNTHETIC_TEMPERATURE_TREND = TrendSummary(
    trend="Increasing", rate=0.03, confidence=95
)
SYNTHETIC_RAINFALL_TREND = TrendSummary(
    trend="Variable", rate=-1.2, confidence=80
)
SYNTHETIC_TREND_YEARS = 5
TREND_CONFIDENCE = 70
STABLE_SLOPE = 0.01


def risk_label(score: float) -> str:
    if score >= HIGH_THRESHOLD:
        return "High"
    if score >= MEDIUM_THRESHOLD:
        return "Medium"
    return "Low"


def monthly_risk(band: RiskBand) -> MonthlyRisk:
    total = (band.heat + band.flood + band.storm + band.drought) / 4
    return MonthlyRisk(
        month=MONTH_NAMES[band.month - 1],
        risk_score=round(total),
        risk_level=risk_label(total),
        sub_risks=SubRisks(
            heat=round(band.heat),
            flood=round(band.flood),
            storm=round(band.storm),
            drought=round(band.drought),
        ),
    )


def disaster_probabilities(
    months: Sequence[MonthlyRisk], region: RegionClass
) -> DisasterProbabilities:
    multipliers = REGIONAL_MULTIPLIERS[region]

    def probability(name: str, attr: str) -> int:
        hits = sum(
            1
            for m in months
            if getattr(m.sub_risks, attr) >= HIGH_THRESHOLD
        )
        share = hits / len(months) * 100
        return min(100, round(share * multipliers.get(name, 1.0)))

    return DisasterProbabilities(
        heatwave=probability("heatwave", "heat"),
        flood=probability("flood", "flood"),
        storm=probability("storm", "storm"),
        drought=probability("drought", "drought"),
    )


def overall_risk(mean_score: float) -> OverallRisk:
    _, level, preparation = next(
        (entry for entry in OVERALL_LEVELS if mean_score >= entry[0]),
        OVERALL_LEVELS[-1],
    )
    return OverallRisk(
        score=round(mean_score), level=level, preparation=preparation
    )


def risk_calendar(months: Sequence[MonthlyRisk]) -> list[RiskCalendarEntry]:
    entries = []
    for m in months:
        subs = m.sub_risks
        scores = {
            "heat": subs.heat,
            "flood": subs.flood,
            "storm": subs.storm,
            "drought": subs.drought,
        }
        # max() keeps the first key on ties.
        primary = max(scores, key=lambda key: scores[key])
        entries.append(
            RiskCalendarEntry(
                month=m.month, risk_level=m.risk_level, primary_risk=primary
            )
        )
    return entries


def trend_summary(
    yearly: Mapping[int, float], *, rising: str, falling: str
) -> TrendSummary:
    """Least-squares slope over per-year values."""

    if len(yearly) < 2:
        return TrendSummary(trend="Stable", rate=0.0, confidence=0)
    slope, _ = statistics.linear_regression(
        list(yearly.keys()), list(yearly.values())
    )
    if slope > STABLE_SLOPE:
        trend = rising
    elif slope < -STABLE_SLOPE:
        trend = falling
    else:
        trend = "Stable"
    return TrendSummary(
        trend=trend, rate=round(slope, 2), confidence=TREND_CONFIDENCE
    )


def preparedness(
    overall: OverallRisk, probabilities: DisasterProbabilities
) -> list[Recommendation]:
    recommendations = [
        Recommendation(
            emoji="🚨",
            title="Overall Risk Assessment",
            content=f"{overall.level}: {overall.preparation}",
        )
    ]
    for disaster, (emoji, title, advice) in PREPAREDNESS.items():
        if getattr(probabilities, disaster) >= PREPAREDNESS_THRESHOLD:
            recommendations.append(
                Recommendation(emoji=emoji, title=title, content=advice)
            )
    recommendations.append(
        Recommendation(
            emoji="📱",
            title="Stay Informed",
            content=(
                "Download weather alert apps and monitor local forecasts "
                "regularly"
            ),
        )
    )
    return recommendations


class RiskAnalyzer(InsightAnalyzer[RiskInsight]):
    domain = "risk"
    parameters = ("temperature", "precipitation", "wind")
    span_years = 2
    synthetic_span_years = 2
    confidence_ceiling = 90.0
    synthetic_confidence = 85.0

    def compute(
        self, series: ClimateSeries, location: Location
    ) -> RiskInsight:
        months = [
            monthly_risk(band)
            for band in self.generator.risk_bands(location.region)
        ]
        probabilities = disaster_probabilities(months, location.region)
        overall = overall_risk(
            statistics.fmean(m.risk_score for m in months)
        )
        return RiskInsight(
            overall_risk=overall,
            disaster_probabilities=probabilities,
            climate_trends=self.climate_trends(series),
            risk_calendar=tuple(risk_calendar(months)),
            monthly_risks=tuple(months),
            preparedness=tuple(preparedness(overall, probabilities)),
            confidence_score=self.confidence(series),
            data_points=series.data_points,
            years_analyzed=series.span_years,
            demo=series.synthetic,
        )

    def climate_trends(self, series: ClimateSeries) -> ClimateTrends:
        events = ExtremeEvents(
            heatwaves=round(self.generator.jitter(8, 15)),
            floods=round(self.generator.jitter(6, 12)),
            droughts=round(self.generator.jitter(4, 10)),
            storms=round(self.generator.jitter(7, 14)),
        )
        if series.synthetic or series.start is None or series.end is None:
            end_year = dj_timezone.now().year - 1
            start_year = end_year - SYNTHETIC_TREND_YEARS + 1
            return ClimateTrends(
                data_period=f"{start_year}-{end_year}",
                temperature=SYNTHETIC_TEMPERATURE_TREND,
                rainfall=SYNTHETIC_RAINFALL_TREND,
                extreme_events=events,
            )
        temperature = yearly_values(series, "temperature")
        rainfall = yearly_values(series, "precipitation", total=True)
        return ClimateTrends(
            data_period=f"{series.start.year}-{series.end.year}",
            temperature=trend_summary(
                temperature, rising="Increasing", falling="Decreasing"
            ),
            rainfall=trend_summary(
                rainfall, rising="Increasing", falling="Decreasing"
            ),
            extreme_events=events,
        )
