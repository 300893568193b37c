"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias

PlaceName: TypeAlias = str

UNKNOWN_LOCATION: PlaceName = "Unknown Location"


def utc_now() -> datetime:
    return datetime.now(UTC)
