"""Django settings for the climate insights service.

Every deployment-specific value is read from the environment.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str = "") -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-not-for-prod")
DEBUG = _env_bool("DJANGO_DEBUG")
ALLOWED_HOSTS = _env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "django_prometheus",
    "rest_framework",
    "drf_spectacular",
    "insights.apps.InsightsConfig",
]

MIDDLEWARE = [
    "django_prometheus.middleware.PrometheusBeforeMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django_prometheus.middleware.PrometheusAfterMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    }
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "climate-insights",
        "OPTIONS": {
            "MAX_ENTRIES": int(
                os.getenv("INSIGHTS_CACHE_MAX_ENTRIES", "1000")
            ),
        },
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("DJANGO_TIME_ZONE", "UTC")
USE_I18N = False
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "config.api.exceptions.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Climate Insights API",
    "DESCRIPTION": (
        "Travel, rice agriculture, solar and disaster-risk insights derived "
        "from multi-year climate data."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "insights": {
            "handlers": ["console"],
            "level": os.getenv("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}

# Upstream providers
NASA_POWER_BASE_URL = os.getenv(
    "NASA_POWER_BASE_URL",
    "https://power.larc.nasa.gov/api/temporal/daily/point",
)
OPENWEATHER_BASE_URL = os.getenv(
    "OPENWEATHER_BASE_URL",
    "https://api.openweathermap.org/data/2.5/weather",
)
LOCATIONIQ_BASE_URL = os.getenv(
    "LOCATIONIQ_BASE_URL", "https://us1.locationiq.com/v1/search"
)
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")
LOCATIONIQ_API_KEY = os.getenv("LOCATIONIQ_API_KEY", "")

INSIGHTS_UPSTREAM_TIMEOUT_S = float(
    os.getenv("INSIGHTS_UPSTREAM_TIMEOUT_S", "10")
)
INSIGHTS_TRAVEL_TIMEOUT_S = float(os.getenv("INSIGHTS_TRAVEL_TIMEOUT_S", "15"))
INSIGHTS_CACHE_TTL_TRAVEL_S = int(
    os.getenv("INSIGHTS_CACHE_TTL_TRAVEL_S", "3600")
)
INSIGHTS_CACHE_TTL_AGRICULTURE_S = int(
    os.getenv("INSIGHTS_CACHE_TTL_AGRICULTURE_S", "7200")
)
INSIGHTS_CACHE_TTL_SOLAR_S = int(
    os.getenv("INSIGHTS_CACHE_TTL_SOLAR_S", "10800")
)
INSIGHTS_CACHE_TTL_RISK_S = int(
    os.getenv("INSIGHTS_CACHE_TTL_RISK_S", "10800")
)
INSIGHTS_SYNTHETIC_SEED = _env_int("INSIGHTS_SYNTHETIC_SEED")
INSIGHTS_ENVIRONMENT = os.getenv("INSIGHTS_ENVIRONMENT", "production")
