from __future__ import annotations

from typing import TypeAlias

from rest_framework import status
from rest_framework.response import Response

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


def success_response(
    data: JSONValue | None,
    message: str = "OK",
    *,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    payload: dict[str, JSONValue] = {
        "status": 0,
        "message": message,
        "data": data,
        "errors": None,
    }
    return Response(payload, status=status_code)


def error_response(
    message: str,
    *,
    error: str | None = None,
    details: JSONValue | None = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> Response:
    """Failure envelope; `errors` is `{error, details}`.

    `error` defaults to `message`.
    """

    payload: dict[str, JSONValue] = {
        "status": 1,
        "message": message,
        "data": None,
        "errors": {"error": error or message, "details": details},
    }
    return Response(payload, status=status_code)
