"""Open-Meteo forecast payload, as returned by /v1/forecast."""

from pydantic import BaseModel, model_validator


class CurrentBlock(BaseModel):
    model_config = {"extra": "ignore"}

    time: str | None = None
    temperature_2m: float | None = None
    relative_humidity_2m: int | None = None
    weather_code: int | None = None
    wind_speed_10m: float | None = None
    apparent_temperature: float | None = None
    visibility: float | None = None


class HourlyBlock(BaseModel):
    model_config = {"extra": "ignore"}

    time: list[str] = []
    temperature_2m: list[float] = []
    weather_code: list[int] = []

    @model_validator(mode="after")
    def _check_aligned(self) -> "HourlyBlock":
        n = len(self.time)
        if len(self.temperature_2m) != n or len(self.weather_code) != n:
            raise ValueError(
                f"hourly arrays not aligned: time={n} "
                f"temperature_2m={len(self.temperature_2m)} "
                f"weather_code={len(self.weather_code)}"
            )
        return self


class DailyBlock(BaseModel):
    model_config = {"extra": "ignore"}

    time: list[str] = []
    temperature_2m_max: list[float] = []
    temperature_2m_min: list[float] = []
    weather_code: list[int] = []

    @model_validator(mode="after")
    def _check_aligned(self) -> "DailyBlock":
        n = len(self.time)
        lengths = (
            len(self.temperature_2m_max),
            len(self.temperature_2m_min),
            len(self.weather_code),
        )
        if any(length != n for length in lengths):
            raise ValueError(f"daily arrays not aligned: time={n} others={lengths}")
        return self


class OpenMeteoResponse(BaseModel):
    model_config = {"extra": "ignore"}

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    utc_offset_seconds: int = 0
    current: CurrentBlock | None = None
    hourly: HourlyBlock | None = None
    daily: DailyBlock | None = None
