"""Root URL configuration.

Routes:
- GET / -> home
- /metrics -> Prometheus exposition (django-prometheus)
- /api/schema/ -> OpenAPI schema
- /api/docs/ -> Swagger UI
- /api/redoc/ -> ReDoc
- /api/ -> insights.urls (health and the four insight domains)
"""

from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from .views import home

urlpatterns = [
    path("", home, name="home"),
    path("", include("django_prometheus.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    path("api/", include("insights.urls")),
]
