import logging
from weatherflow.models.weather_model import WeatherRecord
from weatherflow.models.state_model import RequestState, Idle, Loading, Success, Failure
from weatherflow.services.Geocoding_service import GeocodingService
from weatherflow.services.Weather_service import WeatherService
from weatherflow.core.errors import WeatherLookupError
from weatherflow.core.logger import logs

UNEXPECTED_ERROR_MESSAGE = "Something went wrong"


async def lookup_weather(query: str, geocoder: GeocodingService, forecaster: WeatherService) -> WeatherRecord:
    """
    Two-stage pipeline: place name -> coordinates -> normalized weather.
    A geocoding failure raises before the forecast is requested.
    """
    coords = await geocoder.resolve(query)
    return await forecaster.fetch(coords)


class LookupSession:
    """
    Request state machine for one user.

    Every accepted submission takes a new token; only the run holding the
    latest token may write the final state, so a slow older request can never
    overwrite a newer one.
    """

    def __init__(self, geocoder: GeocodingService = None, forecaster: WeatherService = None):
        self.geocoder = geocoder or GeocodingService()
        self.forecaster = forecaster or WeatherService()
        self.state: RequestState = Idle()
        self._latest_token = 0

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    async def submit(self, query: str) -> RequestState:
        cleaned = (query or "").strip()
        if not cleaned:
            logs.log(logging.DEBUG, "Ignoring empty query")
            return self.state

        self._latest_token += 1
        token = self._latest_token
        # Drop the previous record/message before the new run starts
        self.state = Loading(query=cleaned)
        logs.log(logging.INFO, f"Lookup #{token} started", extra={"query": cleaned})

        outcome = None
        try:
            record = await lookup_weather(cleaned, self.geocoder, self.forecaster)
            outcome = Success(record=record)
        except WeatherLookupError as e:
            logs.log(logging.WARNING, f"Lookup #{token} failed: {e.message}")
            outcome = Failure(message=e.message)
        except Exception as e:
            logs.log(logging.ERROR, f"Lookup #{token} crashed: {str(e)}")
            outcome = Failure(message=UNEXPECTED_ERROR_MESSAGE)
        finally:
            if token == self._latest_token:
                # outcome is None only when the run was cancelled
                self.state = outcome if outcome is not None else Idle()
            else:
                logs.log(logging.INFO, f"Discarding stale result of lookup #{token} (latest is #{self._latest_token})")

        return self.state
