"""Failure types surfaced by a single fetch attempt."""


class WeatherError(Exception):
    """Base class for every terminal fetch failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LocationResolutionFailure(WeatherError):
    """Reverse geocoding failed or the city is not in the table."""


class NetworkFailure(WeatherError):
    """Transport error or non-2xx response from the forecast provider."""


class DecodeFailure(WeatherError):
    """Response body is not a forecast payload we can read."""


class NoDataFailure(WeatherError):
    """Payload decoded but a required field is absent and has no default."""
