"""Shared single-attempt JSON GET used by every upstream provider."""

from __future__ import annotations

from typing import Any

import httpx

from ..exceptions import (
    UpstreamMalformed,
    UpstreamTimeout,
    UpstreamUnavailable,
)


async def get_json(
    provider: str,
    url: str,
    params: dict[str, Any],
    *,
    timeout: float,
) -> Any:
    """GET `url` once and return the decoded JSON body.

    Timeouts raise `UpstreamTimeout`, transport errors and non-2xx statuses
    raise `UpstreamUnavailable`, undecodable bodies raise `UpstreamMalformed`.
    """

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url, params=params)
        response.raise_for_status()
    except httpx.TimeoutException as exc:
        raise UpstreamTimeout(provider, f"timed out after {timeout}s") from exc
    except httpx.HTTPStatusError as exc:
        raise UpstreamUnavailable(
            provider, f"HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise UpstreamUnavailable(
            provider, str(exc) or "request failed"
        ) from exc

    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamMalformed(provider, "response is not JSON") from exc
