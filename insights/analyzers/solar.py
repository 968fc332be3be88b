"""Rooftop solar potential and installation economics."""

from __future__ import annotations

from collections.abc import Sequence

from ..aggregation import DAYS_PER_MONTH, MONTH_NAMES, monthly_means
from ..engines.types import ClimateSeries, Location
from .base import InsightAnalyzer
from .types import (
    AnnualPotential,
    FinancialAnalysis,
    MonthlySolar,
    Recommendation,
    SolarInsight,
)

PERFORMANCE_RATIO = 0.85
HOURS_PER_YEAR = 24 * 365
COST_REDUCTION = "20-40%"

# (min avg daily kWh/m^2, potential, quality); checked with ">"
POTENTIAL_TIERS: tuple[tuple[float, str, str], ...] = (
    (6.0, "Excellent", "Very High"),
    (5.0, "Very Good", "High"),
    (4.0, "Good", "Medium"),
)
DEFAULT_TIER = ("Moderate", "Low")

REFERENCE_SYSTEM_KW = 3.0
COST_PER_KW_INR = 45000
SMALL_SYSTEM_SUBSIDY = 0.40
LARGE_SYSTEM_SUBSIDY = 0.20
SUBSIDY_SIZE_LIMIT_KW = 3.0
SUBSIDY_COUNTRY = "India"
ELECTRICITY_RATE_INR = 6.5
SYSTEM_LIFETIME_YEARS = 25

# (max payback years, min ROI %, label)
RECOMMENDATION_TIERS: tuple[tuple[float, float, str], ...] = (
    (4, 20, "Highly Recommended"),
    (6, 15, "Recommended"),
    (8, 10, "Moderately Recommended"),
)
FALLBACK_RECOMMENDATION = "Consider Other Options"


def efficiency_factor(temperature: float) -> float:
    """Panel derating: 0.4 % per degree above 25 C, floored at 75 %."""

    return max(0.75, 1 - max(0.0, temperature - 25) * 0.004)


def potential_tier(avg_daily_radiation: float) -> tuple[str, str]:
    for threshold, potential, quality in POTENTIAL_TIERS:
        if avg_daily_radiation > threshold:
            return potential, quality
    return DEFAULT_TIER


def recommendation_tier(payback_years: float, roi: float) -> str:
    for max_payback, min_roi, label in RECOMMENDATION_TIERS:
        if payback_years <= max_payback and roi >= min_roi:
            return label
    return FALLBACK_RECOMMENDATION


def subsidy_rate(country: str, system_size: float) -> float:
    if country != SUBSIDY_COUNTRY:
        return 0.0
    if system_size <= SUBSIDY_SIZE_LIMIT_KW:
        return SMALL_SYSTEM_SUBSIDY
    return LARGE_SYSTEM_SUBSIDY


def annual_potential(months: Sequence[MonthlySolar]) -> AnnualPotential:
    """Yearly irradiance totals and per-kW generation."""

    total_radiation = sum(m.monthly_radiation for m in months)
    avg_daily = sum(m.daily_radiation for m in months) / len(months)
    generation = sum(
        m.monthly_radiation * m.efficiency_factor * PERFORMANCE_RATIO
        for m in months
    )
    potential, quality = potential_tier(avg_daily)
    return AnnualPotential(
        total_radiation=round(total_radiation),
        avg_daily_radiation=round(avg_daily, 2),
        annual_generation=round(generation),
        capacity_factor=round(generation / HOURS_PER_YEAR * 100, 2),
        potential=potential,
        quality=quality,
        cost_reduction=COST_REDUCTION,
        peak_sun_hours=round(avg_daily, 2),
    )


def financial_analysis(
    potential: AnnualPotential,
    country: str,
    *,
    system_size: float = REFERENCE_SYSTEM_KW,
) -> FinancialAnalysis:
    total_cost = system_size * COST_PER_KW_INR
    subsidy = total_cost * subsidy_rate(country, system_size)
    net_cost = total_cost - subsidy
    generation = potential.annual_generation * system_size
    savings = generation * ELECTRICITY_RATE_INR
    payback = net_cost / savings
    lifetime_savings = savings * SYSTEM_LIFETIME_YEARS
    net_profit = lifetime_savings - net_cost
    roi = net_profit / net_cost * 100
    return FinancialAnalysis(
        system_size=system_size,
        total_cost=round(total_cost),
        subsidy_amount=round(subsidy),
        net_cost=round(net_cost),
        annual_generation=round(generation),
        annual_savings=round(savings),
        payback_period=round(payback, 1),
        roi=round(roi, 1),
        total_lifetime_savings=round(lifetime_savings),
        net_profit=round(net_profit),
        recommendation=recommendation_tier(payback, roi),
        electricity_rate=ELECTRICITY_RATE_INR,
    )


class SolarAnalyzer(InsightAnalyzer[SolarInsight]):
    domain = "solar"
    parameters = ("irradiance", "temperature")
    span_years = 2
    synthetic_span_years = 2
    confidence_ceiling = 92.0
    synthetic_confidence = 88.0

    def compute(
        self, series: ClimateSeries, location: Location
    ) -> SolarInsight:
        monthly = monthly_means(series, self.parameters)
        months = [
            MonthlySolar(
                month=MONTH_NAMES[month - 1],
                month_index=month - 1,
                daily_radiation=round(values["irradiance"], 2),
                monthly_radiation=round(
                    values["irradiance"] * DAYS_PER_MONTH, 1
                ),
                avg_temperature=round(values["temperature"], 1),
                efficiency_factor=round(
                    efficiency_factor(values["temperature"]), 2
                ),
            )
            for month, values in monthly.items()
        ]
        potential = annual_potential(months)
        financials = financial_analysis(potential, location.country)
        return SolarInsight(
            monthly_data=tuple(months),
            annual_potential=potential,
            financial_analysis=financials,
            recommendations=tuple(
                self.recommendations(potential, financials, location)
            ),
            confidence_score=self.confidence(series),
            data_points=series.data_points,
            years_analyzed=series.span_years,
            demo=series.synthetic,
        )

    def recommendations(
        self,
        potential: AnnualPotential,
        financials: FinancialAnalysis,
        location: Location,
    ) -> list[Recommendation]:
        recommendations = [
            Recommendation(
                emoji="☀️",
                title="Solar Resource Quality",
                content=(
                    f"{potential.potential} potential with "
                    f"{potential.avg_daily_radiation} kWh/m²/day daily "
                    "radiation"
                ),
            ),
            Recommendation(
                emoji="⚡",
                title="Energy Production",
                content=(
                    f"Estimated {financials.annual_generation:,} kWh per "
                    f"year for a {financials.system_size:g}kW system"
                ),
            ),
            Recommendation(
                emoji="💰",
                title="Financial Outlook",
                content=(
                    f"Payback period: {financials.payback_period} years | "
                    f"ROI: {financials.roi}% over "
                    f"{SYSTEM_LIFETIME_YEARS} years"
                ),
            ),
        ]
        if financials.subsidy_amount > 0:
            share = round(
                financials.subsidy_amount / financials.total_cost * 100
            )
            recommendations.append(
                Recommendation(
                    emoji="🏛️",
                    title="Government Support",
                    content=(
                        f"Eligible for {share}% subsidy - "
                        f"₹{financials.subsidy_amount:,}"
                    ),
                )
            )
        return recommendations
