from fastapi import APIRouter, Depends, HTTPException

from weatherflow.models.weather_model import WeatherRequest, WeatherRecord
from weatherflow.services.Geocoding_service import GeocodingService
from weatherflow.services.Weather_service import WeatherService
from weatherflow.services.Lookup_service import lookup_weather
from weatherflow.core.errors import NotFoundError, NetworkError

router = APIRouter()

# --- Dependency Injection ---
def get_geocoding_service() -> GeocodingService:
    return GeocodingService()

def get_weather_service() -> WeatherService:
    return WeatherService()

@router.post("/weather", response_model=WeatherRecord)
async def get_weather_endpoint(
    request: WeatherRequest, 
    geocoder: GeocodingService = Depends(get_geocoding_service),
    forecaster: WeatherService = Depends(get_weather_service)
):
    city = request.city.strip()
    if not city:
        raise HTTPException(status_code=422, detail="City name must not be blank")
    try:
        return await lookup_weather(city, geocoder, forecaster)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except NetworkError as e:
        raise HTTPException(status_code=502, detail=e.message)
