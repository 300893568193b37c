"""CLI entry point for the weather snapshot pipeline."""

import argparse
import asyncio
import logging

import yaml

from minweather.config.loader import default_config, load_config, update_config_file
from minweather.errors import WeatherError
from minweather.models.condition import classify
from minweather.pipeline.weather_pipeline import WeatherPipeline
from minweather.reporting.formatters import (
    format_classification,
    format_snapshot_json,
    format_snapshot_text,
)

DEFAULT_CONFIG = "ops/configs/default.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minweather",
        description="Fetch and normalize current, hourly and daily weather",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # current
    current_p = sub.add_parser("current", help="Weather for a coordinate")
    current_p.add_argument("--lat", type=float, required=True)
    current_p.add_argument("--lon", type=float, required=True)
    current_p.add_argument("--json", action="store_true", help="JSON output")

    # city
    city_p = sub.add_parser("city", help="Weather for a configured city")
    city_p.add_argument("name", help='City name, e.g. "Chicago, IL"')
    city_p.add_argument("--json", action="store_true", help="JSON output")

    # cities
    sub.add_parser("cities", help="List configured cities")

    # classify
    classify_p = sub.add_parser("classify", help="Classify a WMO weather code")
    classify_p.add_argument("code", type=int)

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "classify":
        print(format_classification(args.code, classify(args.code)))
        return 0

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except FileNotFoundError:
        if args.config != DEFAULT_CONFIG:
            print(f"Error: config file not found: {args.config}")
            return 1
        logger.info("No %s here; using built-in defaults", DEFAULT_CONFIG)
        config = default_config()
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    if args.command == "current":
        return _cmd_current(config, args)
    elif args.command == "city":
        return _cmd_city(config, args)
    elif args.command == "cities":
        return _cmd_cities(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _print_snapshot(snapshot, as_json: bool) -> None:
    if as_json:
        print(format_snapshot_json(snapshot))
    else:
        print(format_snapshot_text(snapshot))


def _cmd_current(config, args) -> int:
    pipeline = WeatherPipeline(config)
    try:
        snapshot = asyncio.run(pipeline.fetch_for_coordinates(args.lat, args.lon))
    except WeatherError as e:
        print(f"Error: {e}")
        return 1
    _print_snapshot(snapshot, args.json)
    return 0


def _cmd_city(config, args) -> int:
    pipeline = WeatherPipeline(config)
    try:
        snapshot = asyncio.run(pipeline.fetch_for_city(args.name))
    except WeatherError as e:
        print(f"Error: {e}")
        return 1
    _print_snapshot(snapshot, args.json)
    return 0


def _cmd_cities(config) -> int:
    for c in config.cities:
        print(f"{c.name}: {c.latitude:.4f}, {c.longitude:.4f}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    if args.config_command != "set":
        print("Use: config show | config set key=value")
        return 1

    key, sep, value = args.keyvalue.partition("=")
    if not sep or not key.strip():
        print("Error: use key=value format")
        return 1
    key = key.strip()
    try:
        update_config_file(args.config, key, value.strip())
    except (LookupError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1
    print(f"Set {key} = {value.strip()} in {args.config}")
    return 0
