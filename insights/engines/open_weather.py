from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from django.conf import settings

from ..exceptions import UpstreamMalformed
from .base import CurrentWeatherProvider
from .http import get_json
from .types import CurrentConditions, ProviderName

CONDITION_ICONS: Mapping[str, str] = {
    "Clear": "☀️",
    "Clouds": "☁️",
    "Rain": "🌧️",
    "Drizzle": "🌦️",
    "Thunderstorm": "⛈️",
    "Snow": "❄️",
    "Mist": "🌫️",
}
DEFAULT_ICON = "🌍"


class OpenWeatherProvider(CurrentWeatherProvider):
    """OpenWeatherMap current conditions (`/data/2.5/weather`, metric)."""

    name: ProviderName = "open_weather"

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
                "OPENWEATHER_BASE_URL",
                "https://api.openweathermap.org/data/2.5/weather",
            ),
        )
        self.timeout = timeout

    async def current(self, lat: float, lon: float) -> CurrentConditions:
        payload = await self._request(
            {"lat": lat, "lon": lon, "appid": self.api_key, "units": "metric"}
        )
        main = payload.get("main")
        if not isinstance(main, dict):
            raise UpstreamMalformed(self.name, "payload has no main block")
        temperature = self._to_float(main.get("temp"))
        if temperature is None:
            raise UpstreamMalformed(self.name, "payload has no temperature")

        weather = payload.get("weather")
        first = weather[0] if isinstance(weather, list) and weather else {}
        if not isinstance(first, dict):
            first = {}
        condition = str(first.get("main") or "Clear")
        wind = payload.get("wind")
        wind_speed = None
        if isinstance(wind, dict):
            wind_speed = self._to_float(wind.get("speed"))
        humidity = self._to_float(main.get("humidity"))
        feels_like = self._to_float(main.get("feels_like"))

        return CurrentConditions(
            temperature=round(temperature),
            humidity=humidity if humidity is not None else 0.0,
            feels_like=round(
                feels_like if feels_like is not None else temperature
            ),
            wind_speed=round(wind_speed or 0.0, 1),
            description=str(first.get("description") or condition.lower()),
            condition=condition,
            icon=CONDITION_ICONS.get(condition, DEFAULT_ICON),
            source=self.name,
        )

    async def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        data = await get_json(
            self.name, self.base_url, params, timeout=self.timeout
        )
        if not isinstance(data, dict):
            raise UpstreamMalformed(
                self.name, "Unexpected OpenWeatherMap response shape"
            )
        return data

    def _to_float(self, value: Any) -> float | None:
        try:
            if value is None:
                return None
            return float(value)
        except (TypeError, ValueError):
            return None
