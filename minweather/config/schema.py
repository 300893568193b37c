"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = "minweather/0.1.0"


class WindSpeedUnit(StrEnum):
    KMH = "kmh"
    MS = "ms"
    MPH = "mph"
    KNOTS = "kn"


class CityConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.open-meteo.com/v1"
    wind_speed_unit: WindSpeedUnit = WindSpeedUnit.MPH
    forecast_days: int = Field(default=7, ge=1, le=16)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class GeocoderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://nominatim.openstreetmap.org"
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    zoom: int = Field(default=10, ge=0, le=18)


class WindowConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_slots: int = Field(default=12, ge=1)
    daily_slots: int = Field(default=7, ge=1)
    default_visibility: int = Field(default=10000, ge=0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast: ForecastConfig = ForecastConfig()
    geocoder: GeocoderConfig = GeocoderConfig()
    window: WindowConfig = WindowConfig()
    cities: list[CityConfig] = []
