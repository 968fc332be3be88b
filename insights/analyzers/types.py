from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..engines.types import CurrentConditions

Domain = Literal["travel", "agriculture", "solar", "risk"]
DOMAINS: tuple[Domain, ...] = ("travel", "agriculture", "solar", "risk")


@dataclass(frozen=True)
class Recommendation:
    title: str
    content: str
    emoji: str
    type: str | None = None


@dataclass(frozen=True, kw_only=True)
class Insight:
    confidence_score: float
    data_points: int
    years_analyzed: int
    demo: bool


# Travel


@dataclass(frozen=True)
class ComfortSubScores:
    temperature: float
    rainfall: float
    humidity: float


@dataclass(frozen=True)
class MonthlyComfort:
    month: str
    month_index: int
    overall_score: float
    temperature: float
    rainfall: float
    humidity: float
    sub_scores: ComfortSubScores


@dataclass(frozen=True, kw_only=True)
class TravelInsight(Insight):
    best_travel_months: tuple[MonthlyComfort, ...]
    monthly_breakdown: tuple[MonthlyComfort, ...]
    recommendations: tuple[Recommendation, ...]
    current_conditions: CurrentConditions | None = None


# Agriculture


@dataclass(frozen=True)
class PlantingSchedule:
    planting: str
    growth: str
    harvest: str
    market: str
    suitability_score: int


@dataclass(frozen=True)
class YieldFactors:
    temperature: int
    rainfall: int
    season_length: int
    soil_suitability: int


@dataclass(frozen=True)
class YieldPotential:
    score: int
    category: str
    estimated_yield: str
    factors: YieldFactors


@dataclass(frozen=True)
class CropRisk:
    type: str
    description: str
    level: str
    probability: int
    mitigation: str


@dataclass(frozen=True)
class MonthlyCropClimate:
    month: str
    avg_temp: float
    total_rain: float


@dataclass(frozen=True, kw_only=True)
class AgricultureInsight(Insight):
    crop: str
    planting_schedule: PlantingSchedule
    yield_potential: YieldPotential
    risks: tuple[CropRisk, ...]
    recommendations: tuple[Recommendation, ...]
    monthly_data: tuple[MonthlyCropClimate, ...]


# Solar


@dataclass(frozen=True)
class MonthlySolar:
    month: str
    month_index: int
    daily_radiation: float
    monthly_radiation: float
    avg_temperature: float
    efficiency_factor: float


@dataclass(frozen=True)
class AnnualPotential:
    total_radiation: float
    avg_daily_radiation: float
    annual_generation: float
    capacity_factor: float
    potential: str
    quality: str
    cost_reduction: str
    peak_sun_hours: float


@dataclass(frozen=True)
class FinancialAnalysis:
    system_size: float
    total_cost: int
    subsidy_amount: int
    net_cost: int
    annual_generation: int
    annual_savings: int
    payback_period: float
    roi: float
    total_lifetime_savings: int
    net_profit: int
    recommendation: str
    electricity_rate: float


@dataclass(frozen=True, kw_only=True)
class SolarInsight(Insight):
    monthly_data: tuple[MonthlySolar, ...]
    annual_potential: AnnualPotential
    financial_analysis: FinancialAnalysis
    recommendations: tuple[Recommendation, ...]


# Risk


@dataclass(frozen=True)
class SubRisks:
    heat: int
    flood: int
    storm: int
    drought: int


@dataclass(frozen=True)
class MonthlyRisk:
    month: str
    risk_score: int
    risk_level: str
    sub_risks: SubRisks


@dataclass(frozen=True)
class DisasterProbabilities:
    heatwave: int
    flood: int
    storm: int
    drought: int


@dataclass(frozen=True)
class OverallRisk:
    score: int
    level: str
    preparation: str


@dataclass(frozen=True)
class TrendSummary:
    trend: str
    rate: float
    confidence: int


@dataclass(frozen=True)
class ExtremeEvents:
    heatwaves: int
    floods: int
    droughts: int
    storms: int


@dataclass(frozen=True)
class ClimateTrends:
    data_period: str
    temperature: TrendSummary
    rainfall: TrendSummary
    extreme_events: ExtremeEvents


@dataclass(frozen=True)
class RiskCalendarEntry:
    month: str
    risk_level: str
    primary_risk: str


@dataclass(frozen=True, kw_only=True)
class RiskInsight(Insight):
    overall_risk: OverallRisk
    disaster_probabilities: DisasterProbabilities
    climate_trends: ClimateTrends
    risk_calendar: tuple[RiskCalendarEntry, ...]
    monthly_risks: tuple[MonthlyRisk, ...]
    preparedness: tuple[Recommendation, ...]
