"""Convert an Open-Meteo payload into a WeatherSnapshot."""

import logging
from datetime import datetime

from pydantic import ValidationError

from minweather.config.schema import WindowConfig
from minweather.errors import DecodeFailure, NoDataFailure
from minweather.ingest.windowing import window_daily, window_hourly
from minweather.models.common import utc_now
from minweather.models.condition import classify
from minweather.models.forecast import WeatherSnapshot
from minweather.models.openmeteo import OpenMeteoResponse

logger = logging.getLogger(__name__)


def decode_forecast(payload: dict) -> OpenMeteoResponse:
    """Validate a raw payload. Misaligned or mistyped arrays are a DecodeFailure."""
    try:
        return OpenMeteoResponse.model_validate(payload)
    except ValidationError as e:
        logger.error("Forecast payload failed validation: %d errors", e.error_count())
        raise DecodeFailure(f"Malformed forecast payload: {e}") from e


def build_snapshot(
    raw: OpenMeteoResponse,
    place_name: str,
    now: datetime | None = None,
    window: WindowConfig | None = None,
) -> WeatherSnapshot:
    """Assemble the canonical snapshot from a decoded payload.

    Visibility and feels-like fall back to defaults when absent; temperature,
    humidity and wind speed have no safe default and raise NoDataFailure.
    """
    if now is None:
        now = utc_now()
    if window is None:
        window = WindowConfig()

    current = raw.current
    if current is None:
        raise NoDataFailure("Forecast payload has no current conditions")

    missing = [
        name
        for name in ("temperature_2m", "relative_humidity_2m", "wind_speed_10m")
        if getattr(current, name) is None
    ]
    if missing:
        raise NoDataFailure(f"Current conditions missing: {', '.join(missing)}")

    classification = classify(current.weather_code)
    visibility = (
        int(current.visibility)
        if current.visibility is not None
        else window.default_visibility
    )
    feels_like = (
        current.apparent_temperature
        if current.apparent_temperature is not None
        else current.temperature_2m
    )

    hourly = window_hourly(
        raw.hourly, now, raw.utc_offset_seconds, size=window.hourly_slots
    )
    daily = window_daily(raw.daily, size=window.daily_slots)

    logger.debug(
        "Built snapshot for %s: %s, %d hourly, %d daily",
        place_name, classification.label, len(hourly), len(daily),
    )

    return WeatherSnapshot(
        place_name=place_name,
        label=classification.category,
        description=classification.description,
        icon_key=classification.icon_key,
        weather_code=current.weather_code,
        temperature=current.temperature_2m,
        humidity=current.relative_humidity_2m,
        wind_speed=current.wind_speed_10m,
        visibility=visibility,
        feels_like=feels_like,
        fetched_at=now,
        hourly=hourly,
        daily=daily,
        utc_offset_seconds=raw.utc_offset_seconds,
    )
