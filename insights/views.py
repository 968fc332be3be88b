"""Climate insight API endpoints.

Authentication: none; every endpoint is public.
Responses: wrapped by `config.api.responses.success_response`
(status/message/data/errors).
"""

from __future__ import annotations

import logging
from typing import ClassVar

from asgiref.sync import async_to_sync
from django.conf import settings
from django.utils import timezone as dj_timezone
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiTypes,
    extend_schema,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.api.openapi import (
    error_envelope_serializer,
    success_envelope_serializer,
)
from config.api.responses import error_response, success_response

from . import services
from .analyzers.types import Domain
from .serializers import (
    LocationPathSerializer,
    report_fields,
    serialize_report,
)
from .timeutils import isoformat_with_tz

logger = logging.getLogger(__name__)

ENVIRONMENT = getattr(settings, "INSIGHTS_ENVIRONMENT", "production")

insight_error_schema = error_envelope_serializer("InsightErrorResponse")
health_schema = inline_serializer(
    name="HealthResponse",
    fields={
        "status": serializers.CharField(),
        "message": serializers.CharField(),
        "timestamp": serializers.DateTimeField(),
        "environment": serializers.CharField(),
    },
)

location_parameter = OpenApiParameter(
    name="location",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    required=True,
    description="City, state or free-text place name (e.g. Mumbai)",
)


def _report_schema(domain: str) -> object:
    title = domain.capitalize()
    return success_envelope_serializer(
        f"{title}InsightSuccess",
        data=inline_serializer(
            name=f"{title}InsightReport", fields=report_fields(domain)
        ),
    )


class InsightView(APIView):
    """Base view: validate the location, assemble, wrap in the envelope.

    Upstream failures never surface here; the report comes back with
    `demo=true` instead. Blank locations return 400 and anything unexpected
    returns 500, both with `errors = {error, details}`.
    """

    permission_classes: ClassVar[list[type[AllowAny]]] = [AllowAny]
    authentication_classes: ClassVar[list[type]] = []
    domain: ClassVar[Domain]

    def get(self, request: Request, location: str = "") -> Response:
        serializer = LocationPathSerializer(data={"location": location})
        if not serializer.is_valid():
            return error_response(
                "Location parameter is required",
                details=serializer.errors["location"],
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        query = serializer.validated_data["location"]

        try:
            report = async_to_sync(services.get_insight)(self.domain, query)
        except Exception as exc:
            logger.exception(
                "insights.view.failed domain=%s location=%r",
                self.domain,
                query,
            )
            return error_response(
                f"Failed to generate {self.domain} insights",
                error="Internal server error",
                details=str(exc),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return success_response(serialize_report(report))


class TravelInsightView(InsightView):
    """Best months to visit, ranked by temperature/rain/humidity comfort."""

    domain = "travel"

    @extend_schema(
        parameters=[location_parameter],
        responses={
            200: _report_schema("travel"),
            400: insight_error_schema,
            500: insight_error_schema,
        },
    )
    def get(self, request: Request, location: str = "") -> Response:
        return super().get(request, location)


class AgricultureInsightView(InsightView):
    """Rice cultivation calendar, yield potential and crop risks."""

    domain = "agriculture"

    @extend_schema(
        parameters=[location_parameter],
        responses={
            200: _report_schema("agriculture"),
            400: insight_error_schema,
            500: insight_error_schema,
        },
    )
    def get(self, request: Request, location: str = "") -> Response:
        return super().get(request, location)


class SolarInsightView(InsightView):
    """Solar resource quality and 3 kW rooftop system economics."""

    domain = "solar"

    @extend_schema(
        parameters=[location_parameter],
        responses={
            200: _report_schema("solar"),
            400: insight_error_schema,
            500: insight_error_schema,
        },
    )
    def get(self, request: Request, location: str = "") -> Response:
        return super().get(request, location)


class RiskInsightView(InsightView):
    """Monthly disaster risk, probabilities and preparedness advice."""

    domain = "risk"

    @extend_schema(
        parameters=[location_parameter],
        responses={
            200: _report_schema("risk"),
            400: insight_error_schema,
            500: insight_error_schema,
        },
    )
    def get(self, request: Request, location: str = "") -> Response:
        return super().get(request, location)


class HealthView(APIView):
    permission_classes: ClassVar[list[type[AllowAny]]] = [AllowAny]
    authentication_classes: ClassVar[list[type]] = []

    @extend_schema(responses={200: health_schema})
    def get(self, request: Request) -> Response:
        return Response(
            {
                "status": "OK",
                "message": "Climate Insights API is running",
                "timestamp": isoformat_with_tz(dj_timezone.now()),
                "environment": ENVIRONMENT,
            }
        )
