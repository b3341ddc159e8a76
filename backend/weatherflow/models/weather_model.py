from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from enum import Enum

# --- Enums ---
class ConditionCategory(str, Enum):
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    FOG = "Fog"
    DRIZZLE = "Drizzle"
    RAIN = "Rain"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"

# --- Domain Models ---
class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    display_name: str
    country: str = ""

class WeatherRecord(BaseModel):
    """Normalized weather for one place. Numbers are unrounded."""
    model_config = ConfigDict(frozen=True)

    place_name: str
    country: str
    temperature: Optional[float]
    feels_like: Optional[float]
    humidity: Optional[float]
    pressure_hpa: Optional[float]
    temp_max: Optional[float]
    temp_min: Optional[float]
    wind_speed: Optional[float]
    condition: ConditionCategory
    description: str

# --- Upstream Response Models (Open-Meteo) ---
class GeocodingResult(BaseModel):
    latitude: float
    longitude: float
    name: str
    country: Optional[str] = None

class GeocodingResponse(BaseModel):
    results: Optional[List[GeocodingResult]] = None

class CurrentConditions(BaseModel):
    # Open-Meteo reports null when a variable is unavailable for a location
    temperature_2m: Optional[float]
    apparent_temperature: Optional[float]
    relative_humidity_2m: Optional[float]
    pressure_msl: Optional[float]
    wind_speed_10m: Optional[float]
    weather_code: int
    precipitation: Optional[float] = None
    is_day: Optional[int] = None

class DailySeries(BaseModel):
    """Per-day aggregates, index 0 is today in the location's timezone."""
    weather_code: List[Optional[int]] = []
    temperature_2m_max: List[Optional[float]] = Field(min_length=1)
    temperature_2m_min: List[Optional[float]] = Field(min_length=1)

class RawForecast(BaseModel):
    current: CurrentConditions
    daily: DailySeries
    timezone: Optional[str] = None

# --- API Request Models ---
class WeatherRequest(BaseModel):
    city: str = Field(..., min_length=1, description="Free-text city name")
