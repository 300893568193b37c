"""Reverse geocoding via the Nominatim /reverse endpoint."""

import logging
from dataclasses import dataclass

import httpx

from minweather.config.schema import DEFAULT_USER_AGENT, GeocoderConfig
from minweather.errors import LocationResolutionFailure
from minweather.models.common import UNKNOWN_LOCATION, PlaceName

logger = logging.getLogger(__name__)

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"

# Nominatim address keys, most specific first.
_LOCALITY_KEYS = ("city", "town", "village", "municipality", "hamlet")
_SUB_LOCALITY_KEYS = ("suburb", "city_district", "borough", "quarter", "neighbourhood")
_ADMIN_AREA_KEYS = ("state", "region", "province")
_ADMIN_CODE_KEYS = ("ISO3166-2-lvl4", "ISO3166-2-lvl6", "ISO3166-2-lvl3")


@dataclass(frozen=True)
class PlaceComponents:
    locality: str | None = None
    sub_locality: str | None = None
    administrative_area: str | None = None  # abbreviation when known, e.g. "IL"

    @classmethod
    def from_nominatim(cls, address: dict) -> "PlaceComponents":
        return cls(
            locality=_first(address, _LOCALITY_KEYS),
            sub_locality=_first(address, _SUB_LOCALITY_KEYS),
            administrative_area=_region_abbreviation(address),
        )


def _first(address: dict, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = address.get(key)
        if value:
            return str(value)
    return None


def _region_abbreviation(address: dict) -> str | None:
    """Abbreviate "US-IL" to "IL"; fall back to the full state/region name."""
    code = _first(address, _ADMIN_CODE_KEYS)
    if code and "-" in code:
        return code.split("-", 1)[1]
    return _first(address, _ADMIN_AREA_KEYS)


def format_place_name(components: PlaceComponents) -> PlaceName:
    """Best-effort display name: locality, sub-locality, region, then a sentinel.

    The region is appended as "<place>, <region>" unless it is the chosen
    component itself.
    """
    place = (
        components.locality
        or components.sub_locality
        or components.administrative_area
        or UNKNOWN_LOCATION
    )
    region = components.administrative_area
    if region and region != place:
        return f"{place}, {region}"
    return place


class ReverseGeocoder:
    def __init__(
        self,
        base_url: str = NOMINATIM_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        zoom: int = 10,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.zoom = zoom
        self._client = client

    @classmethod
    def from_config(
        cls, config: GeocoderConfig, client: httpx.AsyncClient | None = None
    ) -> "ReverseGeocoder":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout_seconds,
            zoom=config.zoom,
            client=client,
        )

    async def reverse(self, latitude: float, longitude: float) -> PlaceComponents:
        """Look up the address components for a coordinate.

        Raises LocationResolutionFailure on any provider error.
        """
        url = f"{self.base_url}/reverse"
        params = {
            "lat": str(latitude),
            "lon": str(longitude),
            "format": "jsonv2",
            "addressdetails": "1",
            "zoom": str(self.zoom),
        }
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            if self._client is not None:
                resp = await self._client.get(
                    url, params=params, headers=headers, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("Geocoder returned %d for (%s, %s)", status, latitude, longitude)
            raise LocationResolutionFailure(
                f"Reverse geocoding failed: HTTP {status}", status
            ) from e
        except httpx.RequestError as e:
            logger.error("Geocoder request failed for (%s, %s): %s", latitude, longitude, e)
            raise LocationResolutionFailure(f"Reverse geocoding failed: {e}") from e
        except ValueError as e:
            raise LocationResolutionFailure("Geocoder response is not valid JSON") from e

        if not isinstance(data, dict):
            raise LocationResolutionFailure("Geocoder response is not an object")
        if "error" in data:
            # e.g. {"error": "Unable to geocode"} for open ocean
            raise LocationResolutionFailure(f"Reverse geocoding failed: {data['error']}")

        return PlaceComponents.from_nominatim(data.get("address") or {})

    async def resolve(self, latitude: float, longitude: float) -> PlaceName:
        components = await self.reverse(latitude, longitude)
        name = format_place_name(components)
        logger.info("Geocoded (%s, %s) -> %s", latitude, longitude, name)
        return name
