"""Travel comfort scoring.

Each month gets three 0-10 sub-scores measuring distance from an ideal
(22.5 C, no rain, 50 % humidity); the month score is their mean.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..aggregation import MONTH_NAMES, mean, monthly_means
from ..engines.types import ClimateSeries, Location
from .base import InsightAnalyzer
from .types import (
    ComfortSubScores,
    MonthlyComfort,
    Recommendation,
    TravelInsight,
)

IDEAL_TEMPERATURE = 22.5
TEMPERATURE_SENSITIVITY = 2.5
IDEAL_RAINFALL = 0.0
RAINFALL_SENSITIVITY = 20.0
IDEAL_HUMIDITY = 50.0
HUMIDITY_SENSITIVITY = 5.0
HOT_CLIMATE_THRESHOLD = 28.0


def comfort_score(value: float, ideal: float, sensitivity: float) -> float:
    return max(0.0, 10 - abs(value - ideal) / sensitivity)


def score_month(
    month: int, temperature: float, rainfall: float, humidity: float
) -> MonthlyComfort:
    """Score one calendar month (1-12) from its mean conditions."""

    temp_score = comfort_score(
        temperature, IDEAL_TEMPERATURE, TEMPERATURE_SENSITIVITY
    )
    rain_score = comfort_score(rainfall, IDEAL_RAINFALL, RAINFALL_SENSITIVITY)
    humidity_score = comfort_score(
        humidity, IDEAL_HUMIDITY, HUMIDITY_SENSITIVITY
    )
    overall = (temp_score + rain_score + humidity_score) / 3
    return MonthlyComfort(
        month=MONTH_NAMES[month - 1],
        month_index=month - 1,
        overall_score=round(overall, 1),
        temperature=round(temperature, 1),
        rainfall=round(rainfall, 1),
        humidity=round(humidity),
        sub_scores=ComfortSubScores(
            temperature=round(temp_score, 1),
            rainfall=round(rain_score, 1),
            humidity=round(humidity_score, 1),
        ),
    )


def rank_months(months: Sequence[MonthlyComfort]) -> list[MonthlyComfort]:
    # sorted() is stable, so ties keep calendar order.
    return sorted(months, key=lambda m: m.overall_score, reverse=True)


def activity_suggestions(month: MonthlyComfort) -> list[str]:
    activities: list[str] = []
    if month.temperature > 25:
        activities += ["🏊 Beach activities", "🍦 Ice cream tours"]
        activities += ["🏛️ Indoor museums"]
    elif month.temperature > 15:
        activities += ["🚶 City walking tours", "🌳 Park visits"]
        activities += ["📸 Photography"]
    else:
        activities += ["☕ Cafe hopping", "🏛️ Museums", "🎭 Theater shows"]

    if month.rainfall < 50:
        activities += ["🥾 Hiking", "🚴 Cycling", "🏖️ Outdoor markets"]
    elif month.rainfall < 100:
        activities += ["☂️ Light outdoor activities"]
    else:
        activities += ["🏢 Shopping malls", "🎬 Indoor entertainment"]
    return activities[:4]


class TravelAnalyzer(InsightAnalyzer[TravelInsight]):
    domain = "travel"
    parameters = ("temperature", "precipitation", "humidity")
    span_years = 5
    synthetic_span_years = 5
    synthetic_confidence = 85.0

    def compute(
        self, series: ClimateSeries, location: Location
    ) -> TravelInsight:
        monthly = monthly_means(series, self.parameters)
        scored = [
            score_month(
                month,
                values["temperature"],
                values["precipitation"],
                values["humidity"],
            )
            for month, values in monthly.items()
        ]
        ranked = rank_months(scored)
        best = ranked[0]
        return TravelInsight(
            best_travel_months=(best,),
            monthly_breakdown=tuple(ranked),
            recommendations=tuple(self.recommendations(best, ranked)),
            confidence_score=self.confidence(series),
            data_points=series.data_points,
            years_analyzed=series.span_years,
            demo=series.synthetic,
        )

    def recommendations(
        self, best: MonthlyComfort, months: Sequence[MonthlyComfort]
    ) -> list[Recommendation]:
        recommendations = [
            Recommendation(
                type="best_time",
                title="🌟 Best Month to Visit",
                content=(
                    f"{best.month} has the best conditions with a score "
                    f"of {best.overall_score}/10"
                ),
                emoji="🌟",
            ),
            Recommendation(
                type="activities",
                title="🎯 Recommended Activities",
                content=", ".join(activity_suggestions(best)),
                emoji="🎯",
            ),
        ]
        annual_temperature = mean([m.temperature for m in months])
        if annual_temperature > HOT_CLIMATE_THRESHOLD:
            recommendations.append(
                Recommendation(
                    type="hot_climate",
                    title="🔥 Hot Climate Tip",
                    content=(
                        "Pack light clothing and stay hydrated during "
                        "your visit"
                    ),
                    emoji="🔥",
                )
            )
        return recommendations
