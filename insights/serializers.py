from __future__ import annotations

from rest_framework import serializers

from config.api.responses import JSONValue

from .services import InsightReport
from .timeutils import isoformat_with_tz


class LocationPathSerializer(serializers.Serializer):
    location = serializers.CharField(
        trim_whitespace=True,
        allow_blank=False,
        error_messages={
            "blank": "Location parameter is required",
            "required": "Location parameter is required",
        },
    )


class RecommendationSerializer(serializers.Serializer):
    type = serializers.CharField(allow_null=True, required=False)
    title = serializers.CharField()
    content = serializers.CharField()
    emoji = serializers.CharField()


class LocationSerializer(serializers.Serializer):
    name = serializers.CharField()
    country = serializers.CharField()
    state = serializers.CharField()
    lat = serializers.FloatField()
    lon = serializers.FloatField()
    region = serializers.CharField()


class InsightMetaSerializer(serializers.Serializer):
    confidence_score = serializers.FloatField()
    data_points = serializers.IntegerField()
    years_analyzed = serializers.IntegerField()
    demo = serializers.BooleanField()


# Travel


class ComfortSubScoresSerializer(serializers.Serializer):
    temperature = serializers.FloatField()
    rainfall = serializers.FloatField()
    humidity = serializers.FloatField()


class MonthlyComfortSerializer(serializers.Serializer):
    month = serializers.CharField()
    month_index = serializers.IntegerField()
    overall_score = serializers.FloatField()
    temperature = serializers.FloatField()
    rainfall = serializers.FloatField()
    humidity = serializers.FloatField()
    sub_scores = ComfortSubScoresSerializer()


class CurrentConditionsSerializer(serializers.Serializer):
    temperature = serializers.FloatField()
    humidity = serializers.FloatField()
    feels_like = serializers.FloatField()
    wind_speed = serializers.FloatField()
    description = serializers.CharField()
    condition = serializers.CharField()
    icon = serializers.CharField()
    source = serializers.CharField(allow_null=True)


class TravelInsightSerializer(InsightMetaSerializer):
    best_travel_months = MonthlyComfortSerializer(many=True)
    monthly_breakdown = MonthlyComfortSerializer(many=True)
    recommendations = RecommendationSerializer(many=True)
    current_conditions = CurrentConditionsSerializer(allow_null=True)


# Agriculture


class PlantingScheduleSerializer(serializers.Serializer):
    planting = serializers.CharField()
    growth = serializers.CharField()
    harvest = serializers.CharField()
    market = serializers.CharField()
    suitability_score = serializers.IntegerField()


class YieldFactorsSerializer(serializers.Serializer):
    temperature = serializers.IntegerField()
    rainfall = serializers.IntegerField()
    season_length = serializers.IntegerField()
    soil_suitability = serializers.IntegerField()


class YieldPotentialSerializer(serializers.Serializer):
    score = serializers.IntegerField()
    category = serializers.CharField()
    estimated_yield = serializers.CharField()
    factors = YieldFactorsSerializer()


class CropRiskSerializer(serializers.Serializer):
    type = serializers.CharField()
    description = serializers.CharField()
    level = serializers.CharField()
    probability = serializers.IntegerField()
    mitigation = serializers.CharField()


class MonthlyCropClimateSerializer(serializers.Serializer):
    month = serializers.CharField()
    avg_temp = serializers.FloatField()
    total_rain = serializers.FloatField()


class AgricultureInsightSerializer(InsightMetaSerializer):
    crop = serializers.CharField()
    planting_schedule = PlantingScheduleSerializer()
    yield_potential = YieldPotentialSerializer()
    risks = CropRiskSerializer(many=True)
    recommendations = RecommendationSerializer(many=True)
    monthly_data = MonthlyCropClimateSerializer(many=True)


# Solar


class MonthlySolarSerializer(serializers.Serializer):
    month = serializers.CharField()
    month_index = serializers.IntegerField()
    daily_radiation = serializers.FloatField()
    monthly_radiation = serializers.FloatField()
    avg_temperature = serializers.FloatField()
    efficiency_factor = serializers.FloatField()


class AnnualPotentialSerializer(serializers.Serializer):
    total_radiation = serializers.FloatField()
    avg_daily_radiation = serializers.FloatField()
    annual_generation = serializers.FloatField()
    capacity_factor = serializers.FloatField()
    potential = serializers.CharField()
    quality = serializers.CharField()
    cost_reduction = serializers.CharField()
    peak_sun_hours = serializers.FloatField()


class FinancialAnalysisSerializer(serializers.Serializer):
    system_size = serializers.FloatField()
    total_cost = serializers.IntegerField()
    subsidy_amount = serializers.IntegerField()
    net_cost = serializers.IntegerField()
    annual_generation = serializers.IntegerField()
    annual_savings = serializers.IntegerField()
    payback_period = serializers.FloatField()
    roi = serializers.FloatField()
    total_lifetime_savings = serializers.IntegerField()
    net_profit = serializers.IntegerField()
    recommendation = serializers.CharField()
    electricity_rate = serializers.FloatField()


class SolarInsightSerializer(InsightMetaSerializer):
    monthly_data = MonthlySolarSerializer(many=True)
    annual_potential = AnnualPotentialSerializer()
    financial_analysis = FinancialAnalysisSerializer()
    recommendations = RecommendationSerializer(many=True)


# Risk


class SubRisksSerializer(serializers.Serializer):
    heat = serializers.IntegerField()
    flood = serializers.IntegerField()
    storm = serializers.IntegerField()
    drought = serializers.IntegerField()


class MonthlyRiskSerializer(serializers.Serializer):
    month = serializers.CharField()
    risk_score = serializers.IntegerField()
    risk_level = serializers.CharField()
    sub_risks = SubRisksSerializer()


class DisasterProbabilitiesSerializer(serializers.Serializer):
    heatwave = serializers.IntegerField()
    flood = serializers.IntegerField()
    storm = serializers.IntegerField()
    drought = serializers.IntegerField()


class OverallRiskSerializer(serializers.Serializer):
    score = serializers.IntegerField()
    level = serializers.CharField()
    preparation = serializers.CharField()


class TrendSummarySerializer(serializers.Serializer):
    trend = serializers.CharField()
    rate = serializers.FloatField()
    confidence = serializers.IntegerField()


class ExtremeEventsSerializer(serializers.Serializer):
    heatwaves = serializers.IntegerField()
    floods = serializers.IntegerField()
    droughts = serializers.IntegerField()
    storms = serializers.IntegerField()


class ClimateTrendsSerializer(serializers.Serializer):
    data_period = serializers.CharField()
    temperature = TrendSummarySerializer()
    rainfall = TrendSummarySerializer()
    extreme_events = ExtremeEventsSerializer()


class RiskCalendarEntrySerializer(serializers.Serializer):
    month = serializers.CharField()
    risk_level = serializers.CharField()
    primary_risk = serializers.CharField()


class RiskInsightSerializer(InsightMetaSerializer):
    overall_risk = OverallRiskSerializer()
    disaster_probabilities = DisasterProbabilitiesSerializer()
    climate_trends = ClimateTrendsSerializer()
    risk_calendar = RiskCalendarEntrySerializer(many=True)
    monthly_risks = MonthlyRiskSerializer(many=True)
    preparedness = RecommendationSerializer(many=True)


INSIGHT_SERIALIZERS: dict[str, type[InsightMetaSerializer]] = {
    "travel": TravelInsightSerializer,
    "agriculture": AgricultureInsightSerializer,
    "solar": SolarInsightSerializer,
    "risk": RiskInsightSerializer,
}


def report_fields(domain: str) -> dict[str, serializers.Field]:
    """Fields of the serialized report, for OpenAPI documentation."""

    return {
        "domain": serializers.CharField(),
        "location": LocationSerializer(),
        "insight": INSIGHT_SERIALIZERS[domain](),
        "timestamp": serializers.DateTimeField(),
        "data_points": serializers.IntegerField(),
        "years_analyzed": serializers.IntegerField(),
        "demo": serializers.BooleanField(),
    }


def serialize_report(report: InsightReport) -> dict[str, JSONValue]:
    insight_class = INSIGHT_SERIALIZERS[report.domain]
    return {
        "domain": report.domain,
        "location": dict(LocationSerializer(report.location).data),
        "insight": dict(insight_class(report.insight).data),
        "timestamp": isoformat_with_tz(report.timestamp),
        "data_points": report.data_points,
        "years_analyzed": report.years_analyzed,
        "demo": report.demo,
    }
