"""WMO weather code tables for Open-Meteo.

Both lookups are total: codes missing from a table fall back to "Clear".
"""
from weatherflow.models.weather_model import ConditionCategory

FALLBACK_CONDITION = ConditionCategory.CLEAR
# Mirrors the category name rather than a sentence; kept until product decides otherwise.
FALLBACK_DESCRIPTION = "Clear"

CONDITION_BY_CODE = {
    0: ConditionCategory.CLEAR,
    1: ConditionCategory.CLEAR,
    2: ConditionCategory.CLOUDS,
    3: ConditionCategory.CLOUDS,
    45: ConditionCategory.FOG,
    48: ConditionCategory.FOG,
    51: ConditionCategory.DRIZZLE,
    53: ConditionCategory.DRIZZLE,
    55: ConditionCategory.DRIZZLE,
    56: ConditionCategory.DRIZZLE,
    57: ConditionCategory.DRIZZLE,
    61: ConditionCategory.RAIN,
    63: ConditionCategory.RAIN,
    65: ConditionCategory.RAIN,
    66: ConditionCategory.RAIN,
    67: ConditionCategory.RAIN,
    71: ConditionCategory.SNOW,
    73: ConditionCategory.SNOW,
    75: ConditionCategory.SNOW,
    77: ConditionCategory.SNOW,
    80: ConditionCategory.RAIN,
    81: ConditionCategory.RAIN,
    82: ConditionCategory.RAIN,
    85: ConditionCategory.SNOW,
    86: ConditionCategory.SNOW,
    95: ConditionCategory.THUNDERSTORM,
    96: ConditionCategory.THUNDERSTORM,
    99: ConditionCategory.THUNDERSTORM,
}

DESCRIPTION_BY_CODE = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def get_condition(code: int) -> ConditionCategory:
    """Maps a WMO code to its coarse condition category."""
    return CONDITION_BY_CODE.get(code, FALLBACK_CONDITION)


def get_description(code: int) -> str:
    """Maps a WMO code to a short human readable sentence."""
    return DESCRIPTION_BY_CODE.get(code, FALLBACK_DESCRIPTION)
