"""Canonical weather snapshot consumed by the presentation layer."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from minweather.models.condition import ConditionCategory

HOURLY_TIME_FORMAT = "%Y-%m-%dT%H:%M"
DAILY_DATE_FORMAT = "%Y-%m-%d"


def hour_label(value: datetime) -> str:
    """12-hour clock label without padding, e.g. "12am", "2pm"."""
    suffix = "am" if value.hour < 12 else "pm"
    return f"{value.hour % 12 or 12}{suffix}"


@dataclass(frozen=True)
class HourlySlice:
    time: str  # provider local time, "YYYY-MM-DDTHH:MM"
    temperature: float
    weather_code: int

    @property
    def hour(self) -> str:
        try:
            parsed = datetime.strptime(self.time, HOURLY_TIME_FORMAT)
        except ValueError:
            return self.time
        return hour_label(parsed)


@dataclass(frozen=True)
class DailySlice:
    date: str  # YYYY-MM-DD
    temperature_min: float
    temperature_max: float
    weather_code: int

    @property
    def day_of_week(self) -> str:
        try:
            parsed = datetime.strptime(self.date, DAILY_DATE_FORMAT)
        except ValueError:
            return self.date
        return parsed.strftime("%a")


@dataclass(frozen=True)
class WeatherSnapshot:
    place_name: str
    label: ConditionCategory
    description: str
    icon_key: str
    weather_code: int | None
    temperature: float  # Celsius
    humidity: int
    wind_speed: float
    visibility: int  # meters
    feels_like: float
    fetched_at: datetime
    hourly: tuple[HourlySlice, ...] = ()
    daily: tuple[DailySlice, ...] = ()
    utc_offset_seconds: int = 0  # offset of the forecast location

    @property
    def image_name(self) -> str:
        """Asset key such as "d_Rain": day/night suffix of the icon, then label."""
        return f"{self.icon_key[-1]}_{self.label.value}"

    @property
    def local_fetched_at(self) -> datetime:
        """Fetch time on the forecast location's wall clock. Naive means UTC."""
        fetched = self.fetched_at
        if fetched.tzinfo is None:
            fetched = fetched.replace(tzinfo=UTC)
        return fetched.astimezone(timezone(timedelta(seconds=self.utc_offset_seconds)))

    @property
    def date_description(self) -> str:
        local = self.local_fetched_at
        return f"{local:%B} {local.day}, {local:%Y}"
