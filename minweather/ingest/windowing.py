"""Fixed-size hourly and daily windows aligned to the current time."""

from datetime import UTC, datetime, timedelta, timezone

from minweather.models.forecast import DailySlice, HourlySlice
from minweather.models.openmeteo import DailyBlock, HourlyBlock

HOURLY_WINDOW = 12
DAILY_WINDOW = 7


def _parse_local_time(value: str, tz: timezone) -> datetime | None:
    """Parse a provider timestamp; naive values are in the location's zone."""
    try:
        dt = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt


def anchor_hourly_index(
    times: list[str], now: datetime, utc_offset_seconds: int = 0
) -> int:
    """Index of the first hourly entry at or after now.

    An entry on the same local day whose hour is at least the current local
    hour also matches, so a 14:00 slot anchors a fetch made at 14:35.
    Unparseable entries are skipped. Returns 0 when nothing matches.
    """
    tz = timezone(timedelta(seconds=utc_offset_seconds))
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    local_now = now.astimezone(tz)

    for idx, raw in enumerate(times):
        ts = _parse_local_time(raw, tz)
        if ts is None:
            continue
        if ts >= now:
            return idx
        local_ts = ts.astimezone(tz)
        if local_ts.date() == local_now.date() and local_ts.hour >= local_now.hour:
            return idx
    return 0


def window_hourly(
    hourly: HourlyBlock | None,
    now: datetime,
    utc_offset_seconds: int = 0,
    size: int = HOURLY_WINDOW,
) -> tuple[HourlySlice, ...]:
    """Up to `size` hourly slices starting at the current hour. No padding."""
    if hourly is None or not hourly.time:
        return ()
    start = anchor_hourly_index(hourly.time, now, utc_offset_seconds)
    end = min(start + size, len(hourly.time))
    return tuple(
        HourlySlice(
            time=hourly.time[i],
            temperature=hourly.temperature_2m[i],
            weather_code=hourly.weather_code[i],
        )
        for i in range(start, end)
    )


def window_daily(
    daily: DailyBlock | None, size: int = DAILY_WINDOW
) -> tuple[DailySlice, ...]:
    """The first min(size, n) days, unmodified. The series starts at today."""
    if daily is None:
        return ()
    count = min(size, len(daily.time))
    return tuple(
        DailySlice(
            date=daily.time[i],
            temperature_min=daily.temperature_2m_min[i],
            temperature_max=daily.temperature_2m_max[i],
            weather_code=daily.weather_code[i],
        )
        for i in range(count)
    )
