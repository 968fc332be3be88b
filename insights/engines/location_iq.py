from __future__ import annotations

from typing import Any, cast

from django.conf import settings

from ..exceptions import UpstreamMalformed
from .base import GeocodingProvider
from .http import get_json
from .types import GeocodeResult, ProviderName


class LocationIqProvider(GeocodingProvider):
    """LocationIQ forward geocoding; returns the first search hit."""

    name: ProviderName = "location_iq"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.base_url: str = base_url or cast(
            str,
            getattr(
                settings,
                "LOCATIONIQ_BASE_URL",
                "https://us1.locationiq.com/v1/search",
            ),
        )
        self.timeout = timeout

    async def search(self, text: str) -> GeocodeResult:
        hits = await self._request(
            {
                "key": self.api_key,
                "q": text,
                "format": "json",
                "limit": 1,
                "addressdetails": 1,
            }
        )
        if not hits or not isinstance(hits[0], dict):
            raise UpstreamMalformed(self.name, f"no match for {text!r}")
        hit = hits[0]
        try:
            lat = float(hit["lat"])
            lon = float(hit["lon"])
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamMalformed(
                self.name, "hit has no coordinates"
            ) from exc

        address = hit.get("address")
        if not isinstance(address, dict):
            address = {}
        return GeocodeResult(
            lat=lat,
            lon=lon,
            display_name=str(hit.get("display_name") or text),
            country=str(address.get("country") or "Unknown"),
            state=str(address.get("state") or "Unknown"),
            source=self.name,
        )

    async def _request(self, params: dict[str, Any]) -> list[Any]:
        data = await get_json(
            self.name, self.base_url, params, timeout=self.timeout
        )
        if not isinstance(data, list):
            raise UpstreamMalformed(
                self.name, "Unexpected LocationIQ response shape"
            )
        return data
