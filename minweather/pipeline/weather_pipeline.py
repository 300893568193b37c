"""Weather pipeline: resolve a place name, fetch the forecast, normalize it."""

import logging
from datetime import datetime

from minweather.config.loader import find_city
from minweather.config.schema import AppConfig
from minweather.errors import LocationResolutionFailure
from minweather.ingest.geocoder import ReverseGeocoder
from minweather.ingest.normalizer import build_snapshot, decode_forecast
from minweather.ingest.openmeteo_client import OpenMeteoClient
from minweather.models.common import PlaceName
from minweather.models.forecast import WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherPipeline:
    """One fetch per call: either a complete snapshot or a single WeatherError.

    Nothing is retried, cached or de-duplicated; concurrent calls are
    independent and the caller decides which result is current.
    """

    def __init__(
        self,
        config: AppConfig,
        geocoder: ReverseGeocoder | None = None,
        forecast_client: OpenMeteoClient | None = None,
    ):
        self.config = config
        self.geocoder = geocoder or ReverseGeocoder.from_config(config.geocoder)
        self.forecast_client = forecast_client or OpenMeteoClient.from_config(
            config.forecast
        )

    async def resolve_place(self, latitude: float, longitude: float) -> PlaceName:
        return await self.geocoder.resolve(latitude, longitude)

    async def fetch_snapshot(
        self,
        latitude: float,
        longitude: float,
        place_name: PlaceName,
        now: datetime | None = None,
    ) -> WeatherSnapshot:
        payload = await self.forecast_client.get_forecast(latitude, longitude)
        raw = decode_forecast(payload)
        snapshot = build_snapshot(raw, place_name, now=now, window=self.config.window)
        logger.info(
            "Weather for %s: %s %.1fC (%d hourly, %d daily)",
            snapshot.place_name, snapshot.label, snapshot.temperature,
            len(snapshot.hourly), len(snapshot.daily),
        )
        return snapshot

    async def fetch_for_coordinates(
        self, latitude: float, longitude: float, now: datetime | None = None
    ) -> WeatherSnapshot:
        """Resolve the place name first, then fetch.

        A resolver failure is raised as-is and no forecast request is made.
        """
        place_name = await self.resolve_place(latitude, longitude)
        return await self.fetch_snapshot(latitude, longitude, place_name, now=now)

    async def fetch_for_city(
        self, name: str, now: datetime | None = None
    ) -> WeatherSnapshot:
        """Fetch for a city in the configured table, using its name as the place."""
        city = find_city(self.config, name)
        if city is None:
            raise LocationResolutionFailure(f"No coordinates known for {name!r}")
        return await self.fetch_snapshot(
            city.latitude, city.longitude, city.name, now=now
        )
