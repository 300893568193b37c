"""YAML config loader and in-place editor."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from minweather.config.defaults import DEFAULT_CITIES
from minweather.config.schema import AppConfig, CityConfig

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> dict:
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return raw


def _validate(raw: dict) -> AppConfig:
    raw = copy.deepcopy(raw)
    if not raw.get("cities"):
        raw["cities"] = [c.model_dump() for c in DEFAULT_CITIES]
    return AppConfig(**raw)


def load_config(path: str | Path) -> AppConfig:
    """Load and validate config from a YAML file.

    If no cities are specified in the YAML, injects DEFAULT_CITIES.
    """
    return _validate(_read_yaml(Path(path)))


def find_city(config: AppConfig, name: str) -> CityConfig | None:
    """Case-insensitive lookup in the configured city table."""
    wanted = name.strip().lower()
    for city in config.cities:
        if city.name.lower() == wanted:
            return city
    return None


def update_config_file(path: str | Path, dotted_key: str, value: str) -> AppConfig:
    """Set ``dotted_key`` (e.g. ``window.hourly_slots``) in the YAML file.

    ``value`` is parsed as a YAML scalar, so "6" becomes an int and "kmh"
    stays a string. The edited document must validate before it is written;
    keys the file did not mention stay unmentioned.
    """
    path = Path(path)
    raw = _read_yaml(path) if path.exists() else {}

    parts = dotted_key.split(".")
    target: Any = raw
    for part in parts[:-1]:
        if isinstance(target, list):
            target = target[int(part)]
        else:
            target = target.setdefault(part, {})
        if not isinstance(target, dict | list):
            raise KeyError(f"Config key not found: {dotted_key}")

    leaf = parts[-1]
    parsed = yaml.safe_load(value) if value else value
    if isinstance(target, list):
        target[int(leaf)] = parsed
    else:
        target[leaf] = parsed

    config = _validate(raw)
    with open(path, "w") as f:
        yaml.safe_dump(raw, f, sort_keys=False)
    logger.info("Wrote %s = %r to %s", dotted_key, parsed, path)
    return config


def default_config() -> AppConfig:
    """Config used when no YAML file is available."""
    return _validate({})
