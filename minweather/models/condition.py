"""WMO weather code classification.

Open-Meteo reports conditions as WMO codes (0-99). The code space is sparse,
so codes are grouped into a handful of categories that drive theming and
icon selection. See https://open-meteo.com/en/docs for the code list.
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class ConditionCategory(StrEnum):
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    DRIZZLE = "Drizzle"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"
    FOG = "Fog"


@dataclass(frozen=True)
class Classification:
    category: ConditionCategory
    description: str
    icon_key: str  # OpenWeather-style icon code, e.g. "10d"

    @property
    def label(self) -> str:
        return self.category.value


DEFAULT_CLASSIFICATION = Classification(ConditionCategory.CLOUDS, "cloudy", "03d")

# Grouped codes, expanded below into a flat read-only lookup.
_GROUPS: tuple[tuple[tuple[int, ...], Classification], ...] = (
    ((0,), Classification(ConditionCategory.CLEAR, "clear sky", "01d")),
    ((1,), Classification(ConditionCategory.CLOUDS, "mainly clear", "02d")),
    ((2,), Classification(ConditionCategory.CLOUDS, "partly cloudy", "03d")),
    ((3,), Classification(ConditionCategory.CLOUDS, "overcast", "04d")),
    ((45, 48), Classification(ConditionCategory.FOG, "foggy", "50d")),
    ((51, 53, 55), Classification(ConditionCategory.DRIZZLE, "drizzle", "09d")),
    ((56, 57), Classification(ConditionCategory.DRIZZLE, "freezing drizzle", "09d")),
    ((61, 63, 65), Classification(ConditionCategory.RAIN, "rain", "10d")),
    ((66, 67), Classification(ConditionCategory.RAIN, "freezing rain", "13d")),
    ((71, 73, 75), Classification(ConditionCategory.SNOW, "snow", "13d")),
    ((77,), Classification(ConditionCategory.SNOW, "snow grains", "13d")),
    ((80, 81, 82), Classification(ConditionCategory.RAIN, "rain showers", "09d")),
    ((85, 86), Classification(ConditionCategory.SNOW, "snow showers", "13d")),
    ((95,), Classification(ConditionCategory.THUNDERSTORM, "thunderstorm", "11d")),
    ((96, 99), Classification(ConditionCategory.THUNDERSTORM, "thunderstorm with hail", "11d")),
)

WMO_CODE_TABLE: MappingProxyType[int, Classification] = MappingProxyType(
    {code: cls for codes, cls in _GROUPS for code in codes}
)


def classify(code: int | None) -> Classification:
    """Map a WMO code to its classification.

    Total over all inputs: unlisted or missing codes return the cloudy default.
    """
    if code is None:
        return DEFAULT_CLASSIFICATION
    return WMO_CODE_TABLE.get(code, DEFAULT_CLASSIFICATION)
