import asyncio
import httpx
import logging
from pydantic import ValidationError
from weatherflow.models.weather_model import Coordinates, RawForecast, WeatherRecord
from weatherflow.services.weather_codes import get_condition, get_description
from weatherflow.core.config import settings
from weatherflow.core.errors import NetworkError
from weatherflow.core.logger import logs

CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,apparent_temperature,is_day,precipitation,weather_code,wind_speed_10m,pressure_msl"
DAILY_FIELDS = "weather_code,temperature_2m_max,temperature_2m_min"

class WeatherService:
    def __init__(self, base_url: str = None, timeout: float = None, transport: httpx.AsyncBaseTransport = None):
        self.base_url = base_url or settings.FORECAST_URL
        self.timeout = timeout if timeout is not None else settings.FORECAST_TIMEOUT
        self.transport = transport

    async def fetch(self, coords: Coordinates) -> WeatherRecord:
        logs.log(logging.INFO, f"Fetching forecast for {coords.display_name} at {coords.latitude}, {coords.longitude}")

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                params = {
                    "latitude": coords.latitude,
                    "longitude": coords.longitude,
                    "current": CURRENT_FIELDS,
                    "daily": DAILY_FIELDS,
                    # Lets "today" follow the location's calendar day
                    "timezone": "auto"
                }
                resp = await asyncio.wait_for(
                    client.get(self.base_url, params=params, timeout=self.timeout),
                    self.timeout
                )
                resp.raise_for_status()
                raw = RawForecast.model_validate(resp.json())
            except (httpx.HTTPError, asyncio.TimeoutError, ValueError, ValidationError) as e:
                logs.log(logging.ERROR, f"Weather API failed: {str(e)}")
                raise NetworkError("Failed to fetch weather data") from e

        return self.normalize(coords, raw)

    @staticmethod
    def normalize(coords: Coordinates, raw: RawForecast) -> WeatherRecord:
        """Reshapes an Open-Meteo response into a WeatherRecord."""
        current = raw.current
        code = current.weather_code
        return WeatherRecord(
            place_name=coords.display_name,
            country=coords.country,
            temperature=current.temperature_2m,
            feels_like=current.apparent_temperature,
            humidity=current.relative_humidity_2m,
            pressure_hpa=current.pressure_msl,
            temp_max=raw.daily.temperature_2m_max[0],
            temp_min=raw.daily.temperature_2m_min[0],
            wind_speed=current.wind_speed_10m,
            condition=get_condition(code),
            description=get_description(code)
        )
