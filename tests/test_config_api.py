from __future__ import annotations

# ruff: noqa: S101
from decimal import Decimal
from unittest.mock import patch

from django.test import Client
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from config.api.exceptions import _to_json_value, custom_exception_handler
from config.api.responses import error_response, success_response


def test_success_response_payload() -> None:
    resp = success_response({"value": 1}, "Done")
    assert resp.status_code == 200
    assert resp.data == {
        "status": 0,
        "message": "Done",
        "data": {"value": 1},
        "errors": None,
    }


def test_error_response_payload() -> None:
    resp = error_response(
        "Bad request",
        details={"field": ["missing"]},
        status_code=418,
    )
    assert resp.status_code == 418
    assert resp.data["status"] == 1
    assert resp.data["message"] == "Bad request"
    assert resp.data["data"] is None
    assert resp.data["errors"] == {
        "error": "Bad request",
        "details": {"field": ["missing"]},
    }


def test_error_response_separate_error_label() -> None:
    resp = error_response(
        "Failed to generate solar insights",
        error="Internal server error",
        details="boom",
        status_code=500,
    )
    assert resp.data["errors"]["error"] == "Internal server error"
    assert resp.data["errors"]["details"] == "boom"


def test_custom_exception_handler_returns_500_on_unhandled() -> None:
    with patch("rest_framework.views.exception_handler", return_value=None):
        resp = custom_exception_handler(Exception("boom"), {})
    assert resp.status_code == 500
    assert resp.data["status"] == 1
    assert resp.data["message"] == "Internal server error"
    assert resp.data["errors"] == {
        "error": "Internal server error",
        "details": "boom",
    }


def test_custom_exception_handler_wraps_drf_errors() -> None:
    with patch(
        "rest_framework.views.exception_handler",
        return_value=Response({"detail": "Not found."}, status=404),
    ):
        resp = custom_exception_handler(NotFound(), {})
    assert resp.status_code == 404
    assert resp.data["message"] == "Not found."
    assert resp.data["errors"]["error"] == "Not found."
    assert resp.data["errors"]["details"] == {"detail": "Not found."}


def test_custom_exception_handler_non_dict_detail() -> None:
    with patch(
        "rest_framework.views.exception_handler",
        return_value=Response(["bad"], status=400),
    ):
        resp = custom_exception_handler(Exception("bad"), {})
    assert resp.data["message"] == "Request failed"
    assert resp.data["errors"]["details"] == ["bad"]


def test_to_json_value_handles_sequences() -> None:
    payload = ("ok", {"value": Decimal("1.25")})
    assert _to_json_value(payload) == ["ok", {"value": "1.25"}]


def test_home_view_returns_metadata() -> None:
    client = Client()
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["service"] == "climate-insights"
    assert body["docs"] == "/api/docs/"
    assert body["health"] == "/api/health/"
    assert body["endpoints"]["risk"] == "/api/risk/<location>/"
