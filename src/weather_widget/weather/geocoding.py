"""Geocoding client for city searches."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from weather_widget.config import (
    GEOCODING_API_URL, USER_AGENT,
    GEOCODING_RESULT_COUNT, GEOCODING_LANGUAGE
)
from weather_widget.weather.client import OpenMeteoHTTPClient
from weather_widget.weather.errors import TransportError
from weather_widget.weather.models import Location, OpenMeteoGeocodingResponse

logger = logging.getLogger(__name__)


class GeocodingClient(OpenMeteoHTTPClient):
    """Resolves free-text city names through the Open-Meteo geocoding API."""

    def __init__(
        self,
        base_url: str = GEOCODING_API_URL,
        user_agent: str = USER_AGENT,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(base_url, user_agent, http_client)

    async def resolve_city(self, query: str) -> Optional[Location]:
        """Convert a city name to its best-match location.

        The query is expected to be validated (non-empty) by the caller.

        Args:
            query: City name to look up

        Returns:
            First matching Location, or None if the search has no results

        Raises:
            TransportError: If the request fails or the response is malformed
        """
        params = {
            "name": query,
            "count": GEOCODING_RESULT_COUNT,
            "language": GEOCODING_LANGUAGE,
            "format": "json",
        }

        logger.info(f"Geocoding city: {query}")
        data = await self._get_json(params)

        try:
            response = OpenMeteoGeocodingResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid geocoding response format: {e}")
            raise TransportError("Invalid geocoding response format") from e

        if not response.results:
            logger.info(f"No geocoding results for '{query}'")
            return None

        result = response.results[0]
        location = Location(
            name=result.name,
            country=result.country or "",
            latitude=result.latitude,
            longitude=result.longitude,
        )
        logger.info(f"Successfully geocoded '{query}' to {location.name}, {location.country} "
                    f"({location.latitude}, {location.longitude})")
        return location
