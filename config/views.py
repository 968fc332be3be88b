"""Project-level non-DRF views.

This module contains the root landing endpoint used for quick service checks
and links to the interactive API documentation and insight endpoints.
"""

from __future__ import annotations

from django.http import HttpRequest, JsonResponse

from insights.analyzers.types import DOMAINS


def home(request: HttpRequest) -> JsonResponse:
    """Return basic service metadata and documentation links."""
    return JsonResponse(
        {
            "ok": True,
            "service": "climate-insights",
            "docs": "/api/docs/",
            "redoc": "/api/redoc/",
            "health": "/api/health/",
            "endpoints": {
                domain: f"/api/{domain}/<location>/" for domain in DOMAINS
            },
        }
    )
