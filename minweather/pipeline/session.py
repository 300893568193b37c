"""Caller-side holder for the latest published snapshot.

The pipeline never cancels or de-duplicates fetches. The session tags each
fetch with a generation number and only publishes the result of the most
recently started one, so a slow older fetch cannot overwrite a newer result.
"""

import logging
from collections.abc import Awaitable
from enum import StrEnum

from minweather.errors import WeatherError
from minweather.models.forecast import WeatherSnapshot
from minweather.pipeline.weather_pipeline import WeatherPipeline

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class WeatherSession:
    def __init__(self, pipeline: WeatherPipeline):
        self.pipeline = pipeline
        self.state = SessionState.LOADING
        self.snapshot: WeatherSnapshot | None = None
        self.error: Exception | None = None
        self._generation = 0

    async def refresh(self, latitude: float, longitude: float) -> bool:
        """Fetch for a device position. Returns True if the result was published."""
        return await self._publish(
            self.pipeline.fetch_for_coordinates(latitude, longitude)
        )

    async def select_city(self, name: str) -> bool:
        """Fetch for a city from the table. Returns True if the result was published."""
        return await self._publish(self.pipeline.fetch_for_city(name))

    async def _publish(self, fetch: Awaitable[WeatherSnapshot]) -> bool:
        self._generation += 1
        generation = self._generation
        self.state = SessionState.LOADING

        try:
            snapshot = await fetch
        except WeatherError as e:
            if generation != self._generation:
                logger.info("Dropping stale failure from fetch #%d: %s", generation, e)
                return False
            logger.warning("Weather fetch #%d failed: %s", generation, e)
            self.error = e
            self.state = SessionState.ERROR
            return False
        except Exception as e:
            if generation == self._generation:
                logger.exception("Weather fetch #%d crashed", generation)
                self.error = e
                self.state = SessionState.ERROR
            raise

        if generation != self._generation:
            logger.info(
                "Dropping stale snapshot for %s from fetch #%d",
                snapshot.place_name, generation,
            )
            return False

        self.snapshot = snapshot
        self.error = None
        self.state = SessionState.LOADED
        return True
