import asyncio
import httpx
import logging
from pydantic import ValidationError
from weatherflow.models.weather_model import Coordinates, GeocodingResponse
from weatherflow.core.config import settings
from weatherflow.core.errors import NetworkError, NotFoundError
from weatherflow.core.logger import logs

class GeocodingService:
    def __init__(self, base_url: str = None, timeout: float = None, transport: httpx.AsyncBaseTransport = None):
        self.base_url = base_url or settings.GEOCODING_URL
        self.timeout = timeout if timeout is not None else settings.GEOCODING_TIMEOUT
        self.transport = transport

    async def resolve(self, query: str) -> Coordinates:
        """
        Resolves a place name to the first Open-Meteo geocoding match.
        The caller is responsible for passing a trimmed, non-empty query.
        """
        logs.log(logging.INFO, f"Geocoding '{query}'")

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                # httpx only bounds each connect/read step, wait_for bounds the whole call
                resp = await asyncio.wait_for(
                    client.get(self.base_url, params={"name": query, "count": 1}, timeout=self.timeout),
                    self.timeout
                )
                resp.raise_for_status()
                data = GeocodingResponse.model_validate(resp.json())
            except (httpx.HTTPError, asyncio.TimeoutError, ValueError, ValidationError) as e:
                logs.log(logging.ERROR, f"Geocoding API error: {str(e)}")
                raise NetworkError("Failed to find city coordinates") from e

        if not data.results:
            logs.log(logging.WARNING, f"No geocoding results for '{query}'")
            raise NotFoundError()

        # First result wins, no disambiguation
        match = data.results[0]
        logs.log(logging.INFO, f"Resolved '{query}' to {match.name} ({match.latitude}, {match.longitude})")
        return Coordinates(
            latitude=match.latitude,
            longitude=match.longitude,
            display_name=match.name,
            country=match.country or ""
        )
