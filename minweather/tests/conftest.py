"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from minweather.config.defaults import DEFAULT_CITIES
from minweather.config.schema import AppConfig, ForecastConfig, GeocoderConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with default cities."""
    return AppConfig(cities=DEFAULT_CITIES)


@pytest.fixture
def test_config() -> AppConfig:
    """AppConfig pointing both providers at test hosts."""
    return AppConfig(
        forecast=ForecastConfig(base_url="https://test-meteo.example.com/v1"),
        geocoder=GeocoderConfig(base_url="https://test-geo.example.com"),
        cities=DEFAULT_CITIES,
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "forecast": {"wind_speed_unit": "mph", "forecast_days": 7},
        "window": {"hourly_slots": 12},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    """48 hourly entries from 2026-02-11T00:00 and 7 daily entries, UTC."""
    with open(FIXTURE_DIR / "openmeteo_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def springfield_reverse() -> dict:
    with open(FIXTURE_DIR / "nominatim_reverse_springfield.json") as f:
        return json.load(f)


@pytest.fixture
def afternoon() -> datetime:
    """14:35 UTC on the first fixture day; the 14:00 slot is index 14."""
    return datetime(2026, 2, 11, 14, 35, tzinfo=UTC)
