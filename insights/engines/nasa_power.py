from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any, cast

from django.conf import settings
from django.utils import timezone as dj_timezone

from ..exceptions import UpstreamMalformed
from ..timeutils import format_yyyymmdd, parse_yyyymmdd, span_bounds
from .base import ClimateDataSource
from .http import get_json
from .types import ClimateSeries, Parameter, ProviderName


class NasaPowerProvider(ClimateDataSource):
    """NASA POWER daily point provider.

    Requests the renewable-energy community so irradiance arrives in
    kWh/m^2/day. Days carrying the payload's fill value (usually -999) are
    dropped, as are days outside the requested window.
    """

    name: ProviderName = "nasa_power"
    PARAMETER_CODES: Mapping[Parameter, str] = {
        "temperature": "T2M",
        "precipitation": "PRECTOTCORR",
        "humidity": "RH2M",
        "irradiance": "ALLSKY_SFC_SW_DWN",
        "wind": "WS2M",
    }

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url: str = base_url or cast(
            str,
            getattr(
                settings,
                "NASA_POWER_BASE_URL",
                "https://power.larc.nasa.gov/api/temporal/daily/point",
            ),
        )
        self.timeout = timeout

    async def fetch(
        self,
        lat: float,
        lon: float,
        parameters: Sequence[Parameter],
        span_years: int,
    ) -> ClimateSeries:
        start, end = span_bounds(span_years, dj_timezone.now().date())
        codes = [self.PARAMETER_CODES[param] for param in parameters]
        params = {
            "latitude": lat,
            "longitude": lon,
            "start": format_yyyymmdd(start),
            "end": format_yyyymmdd(end),
            "parameters": ",".join(codes),
            "community": "RE",
            "format": "JSON",
        }
        payload = await self._request(params)
        properties = payload.get("properties")
        if not isinstance(properties, dict):
            raise UpstreamMalformed(self.name, "payload has no properties")
        fill_value = properties.get("fill_value", -999)
        parameter_block = properties.get("parameter")
        if not isinstance(parameter_block, dict):
            raise UpstreamMalformed(self.name, "payload has no parameters")

        daily: dict[date, dict[Parameter, float]] = {}
        for param in parameters:
            container = parameter_block.get(self.PARAMETER_CODES[param])
            if not isinstance(container, dict):
                continue
            for raw_day, raw_value in container.items():
                day = parse_yyyymmdd(raw_day)
                if day is None or not start <= day <= end:
                    continue
                value = self._extract_value(raw_value, fill_value)
                if value is None:
                    continue
                daily.setdefault(day, {})[param] = value

        series = ClimateSeries(
            parameters=tuple(parameters),
            span_years=span_years,
            synthetic=False,
            daily=daily,
            start=start,
            end=end,
            source=self.name,
        )
        if series.data_points == 0:
            raise UpstreamMalformed(
                self.name, f"no usable {series.primary_parameter} values"
            )
        return series

    async def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        data = await get_json(
            self.name, self.base_url, params, timeout=self.timeout
        )
        if not isinstance(data, dict):
            raise UpstreamMalformed(
                self.name, "Unexpected NASA POWER response shape"
            )
        return data

    def _extract_value(self, raw: Any, fill_value: Any) -> float | None:
        if raw is None:
            return None
        try:
            value = float(raw)
            if value == float(fill_value):
                return None
        except (TypeError, ValueError):
            return None
        return value
