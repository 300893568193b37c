"""Open-Meteo forecast API client. Single attempt per call, no retries."""

import logging

import httpx

from minweather.config.schema import DEFAULT_USER_AGENT, ForecastConfig, WindSpeedUnit
from minweather.errors import DecodeFailure, NetworkFailure

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "weather_code",
    "wind_speed_10m",
    "apparent_temperature",
    "visibility",
)
HOURLY_FIELDS = ("temperature_2m", "weather_code")
DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min", "weather_code")


def build_forecast_params(
    latitude: float,
    longitude: float,
    wind_speed_unit: WindSpeedUnit = WindSpeedUnit.MPH,
    forecast_days: int = 7,
) -> dict[str, str]:
    """Query parameters for /forecast. Temperatures are always Celsius."""
    return {
        "latitude": str(latitude),
        "longitude": str(longitude),
        "current": ",".join(CURRENT_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
        "temperature_unit": "celsius",
        "wind_speed_unit": str(wind_speed_unit),
        "forecast_days": str(forecast_days),
        "timezone": "auto",
    }


def _error_reason(resp: httpx.Response) -> str:
    # Open-Meteo reports bad requests as {"error": true, "reason": "..."}
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return resp.text[:200]


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        wind_speed_unit: WindSpeedUnit = WindSpeedUnit.MPH,
        forecast_days: int = 7,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.wind_speed_unit = wind_speed_unit
        self.forecast_days = forecast_days
        self._client = client

    @classmethod
    def from_config(
        cls, config: ForecastConfig, client: httpx.AsyncClient | None = None
    ) -> "OpenMeteoClient":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout_seconds,
            wind_speed_unit=config.wind_speed_unit,
            forecast_days=config.forecast_days,
            client=client,
        )

    async def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch current, hourly and daily forecast data as a raw JSON object.

        Raises NetworkFailure on transport errors or non-2xx responses and
        DecodeFailure when the body is not a JSON object.
        """
        url = f"{self.base_url}/forecast"
        params = build_forecast_params(
            latitude, longitude, self.wind_speed_unit, self.forecast_days
        )
        headers = {"User-Agent": self.user_agent}

        try:
            if self._client is not None:
                resp = await self._client.get(
                    url, params=params, headers=headers, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            reason = _error_reason(e.response)
            logger.error(
                "Open-Meteo returned %d for (%s, %s): %s",
                status, latitude, longitude, reason,
            )
            raise NetworkFailure(f"HTTP {status}: {reason}", status) from e
        except httpx.RequestError as e:
            logger.error(
                "Open-Meteo request failed for (%s, %s): %s", latitude, longitude, e
            )
            raise NetworkFailure(f"Request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeFailure("Forecast response is not valid JSON") from e
        if not isinstance(data, dict):
            raise DecodeFailure(
                f"Forecast response is a {type(data).__name__}, expected an object"
            )
        return data
