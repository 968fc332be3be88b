"""Rice (Kharif season) cultivation suitability."""

from __future__ import annotations

from collections.abc import Sequence

from ..aggregation import DAYS_PER_MONTH, MONTH_NAMES, mean, monthly_means
from ..engines.types import ClimateSeries, Location
from .base import InsightAnalyzer
from .types import (
    AgricultureInsight,
    CropRisk,
    MonthlyCropClimate,
    PlantingSchedule,
    Recommendation,
    YieldFactors,
    YieldPotential,
)

CROP = "Rice"

KHARIF_SCHEDULE = PlantingSchedule(
    planting="June - July",
    growth="August - September",
    harvest="October - November",
    market="November - December",
    suitability_score=78,
)

BASE_YIELD_SCORE = 70
YIELD_CATEGORIES: tuple[tuple[int, str, str], ...] = (
    (80, "High", "5-7 tons/hectare"),
    (60, "Medium", "3-5 tons/hectare"),
    (0, "Low", "2-4 tons/hectare"),
)

DRY_MONTH_RAIN_MM = 50
DROUGHT_MIN_DRY_MONTHS = 3
WET_MONTH_RAIN_MM = 300
FLOOD_MIN_WET_MONTHS = 2


def yield_score(avg_temp: float, total_rain: float) -> int:
    score = BASE_YIELD_SCORE
    if 25 <= avg_temp <= 32:
        score += 20
    elif 20 <= avg_temp <= 35:
        score += 10
    if 1000 <= total_rain <= 2000:
        score += 10
    elif 500 <= total_rain <= 2500:
        score += 5
    return round(min(100, max(30, score)))


def yield_category(score: float) -> tuple[str, str]:
    """Return (category, estimated yield range) for a 30-100 score."""

    for threshold, category, estimate in YIELD_CATEGORIES:
        if score >= threshold:
            return category, estimate
    return YIELD_CATEGORIES[-1][1:]


def yield_potential(
    months: Sequence[MonthlyCropClimate],
) -> YieldPotential:
    total_rain = sum(m.total_rain for m in months)
    avg_temp = mean([m.avg_temp for m in months])
    score = yield_score(avg_temp, total_rain)
    category, estimate = yield_category(score)
    return YieldPotential(
        score=score,
        category=category,
        estimated_yield=estimate,
        factors=YieldFactors(
            temperature=min(100, round(avg_temp / 35 * 100)),
            rainfall=min(100, round(total_rain / 2000 * 100)),
            season_length=75,
            soil_suitability=80,
        ),
    )


def identify_risks(months: Sequence[MonthlyCropClimate]) -> list[CropRisk]:
    """Flag drought/flood patterns; never returns an empty list."""

    risks: list[CropRisk] = []
    dry_months = sum(1 for m in months if m.total_rain < DRY_MONTH_RAIN_MM)
    if dry_months >= DROUGHT_MIN_DRY_MONTHS:
        risks.append(
            CropRisk(
                type="drought",
                description=(
                    "Extended periods of low rainfall may affect water "
                    "availability for rice cultivation"
                ),
                level="High",
                probability=65,
                mitigation=(
                    "Implement drip irrigation and water conservation "
                    "practices"
                ),
            )
        )
    wet_months = sum(1 for m in months if m.total_rain > WET_MONTH_RAIN_MM)
    if wet_months >= FLOOD_MIN_WET_MONTHS:
        risks.append(
            CropRisk(
                type="flood",
                description=(
                    "Heavy monsoon rainfall may cause flooding in paddy "
                    "fields"
                ),
                level="Medium",
                probability=45,
                mitigation=(
                    "Improve drainage systems and consider raised bed "
                    "cultivation"
                ),
            )
        )
    if not risks:
        risks.append(
            CropRisk(
                type="monsoon_variability",
                description=(
                    "Typical monsoon variability may affect planting "
                    "schedules"
                ),
                level="Low",
                probability=30,
                mitigation=(
                    "Monitor weather forecasts and adjust planting dates "
                    "accordingly"
                ),
            )
        )
    return risks


class AgricultureAnalyzer(InsightAnalyzer[AgricultureInsight]):
    domain = "agriculture"
    parameters = ("temperature", "precipitation", "humidity")
    span_years = 2
    synthetic_span_years = 3
    confidence_ceiling = 92.0
    synthetic_confidence = 85.0

    def compute(
        self, series: ClimateSeries, location: Location
    ) -> AgricultureInsight:
        monthly = monthly_means(series, ("temperature", "precipitation"))
        months = [
            MonthlyCropClimate(
                month=MONTH_NAMES[month - 1],
                avg_temp=round(values["temperature"], 1),
                total_rain=round(values["precipitation"] * DAYS_PER_MONTH),
            )
            for month, values in monthly.items()
        ]
        potential = yield_potential(months)
        risks = identify_risks(months)
        return AgricultureInsight(
            crop=CROP,
            planting_schedule=KHARIF_SCHEDULE,
            yield_potential=potential,
            risks=tuple(risks),
            recommendations=tuple(
                self.recommendations(KHARIF_SCHEDULE, potential, risks)
            ),
            monthly_data=tuple(months),
            confidence_score=self.confidence(series),
            data_points=series.data_points,
            years_analyzed=series.span_years,
            demo=series.synthetic,
        )

    def recommendations(
        self,
        schedule: PlantingSchedule,
        potential: YieldPotential,
        risks: Sequence[CropRisk],
    ) -> list[Recommendation]:
        recommendations = [
            Recommendation(
                emoji="🌱",
                title="Optimal Planting Time",
                content=(
                    f"Start planting during {schedule.planting} for Kharif "
                    "season rice cultivation"
                ),
            ),
            Recommendation(
                emoji="🌾",
                title="Expected Yield",
                content=(
                    f"{potential.category} yield potential: "
                    f"{potential.estimated_yield} under optimal conditions"
                ),
            ),
            Recommendation(
                emoji="💧",
                title="Water Management",
                content=(
                    "Maintain 2-5 cm standing water during vegetative stage "
                    "for optimal growth"
                ),
            ),
        ]
        if risks:
            primary = risks[0]
            recommendations.append(
                Recommendation(
                    emoji="🛡️",
                    title="Risk Management",
                    content=f"Primary risk: {primary.type}. "
                    f"{primary.mitigation}",
                )
            )
        return recommendations
