from __future__ import annotations

from django.urls import path

from .views import (
    AgricultureInsightView,
    HealthView,
    RiskInsightView,
    SolarInsightView,
    TravelInsightView,
)

INSIGHT_VIEWS = (
    ("travel", TravelInsightView),
    ("agriculture", AgricultureInsightView),
    ("solar", SolarInsightView),
    ("risk", RiskInsightView),
)

urlpatterns = [path("health/", HealthView.as_view(), name="health")]

for domain, view in INSIGHT_VIEWS:
    urlpatterns += [
        path(
            f"{domain}/<str:location>/",
            view.as_view(),
            name=f"insights-{domain}",
        ),
        # A missing location segment is answered with a 400 envelope.
        path(
            f"{domain}/",
            view.as_view(),
            name=f"insights-{domain}-missing",
        ),
    ]
