"""Output formatters for weather snapshots."""

import json

from minweather.models.condition import Classification
from minweather.models.forecast import WeatherSnapshot


def format_snapshot_text(s: WeatherSnapshot) -> str:
    """Plain text summary for the terminal."""
    lines = [
        f"=== {s.place_name} | {s.date_description} ===",
        f"{s.label}: {s.description.capitalize()} ({s.icon_key})",
        f"Temperature: {s.temperature:.1f}C | Feels like: {s.feels_like:.1f}C",
        f"Humidity: {s.humidity}% | Wind: {s.wind_speed:.1f} | "
        f"Visibility: {s.visibility} m",
    ]
    if s.hourly:
        lines.append(
            "Hourly: "
            + ", ".join(f"{h.hour} {h.temperature:.0f}C" for h in s.hourly)
        )
    for d in s.daily:
        lines.append(
            f"  {d.day_of_week}: {d.temperature_min:.0f}C / {d.temperature_max:.0f}C "
            f"(code {d.weather_code})"
        )
    return "\n".join(lines)


def format_snapshot_json(s: WeatherSnapshot) -> str:
    """JSON snapshot for programmatic consumption."""
    data = {
        "place_name": s.place_name,
        "label": s.label.value,
        "description": s.description,
        "icon_key": s.icon_key,
        "image_name": s.image_name,
        "weather_code": s.weather_code,
        "temperature": s.temperature,
        "humidity": s.humidity,
        "wind_speed": s.wind_speed,
        "visibility": s.visibility,
        "feels_like": s.feels_like,
        "fetched_at": s.fetched_at.isoformat(),
        "date": s.date_description,
        "utc_offset_seconds": s.utc_offset_seconds,
        "hourly": [
            {
                "time": h.time,
                "hour": h.hour,
                "temperature": h.temperature,
                "weather_code": h.weather_code,
            }
            for h in s.hourly
        ],
        "daily": [
            {
                "date": d.date,
                "day_of_week": d.day_of_week,
                "temperature_min": d.temperature_min,
                "temperature_max": d.temperature_max,
                "weather_code": d.weather_code,
            }
            for d in s.daily
        ],
    }
    return json.dumps(data, indent=2)


def format_classification(code: int, c: Classification) -> str:
    return f"{code}: {c.label} | {c.description} | {c.icon_key}"
