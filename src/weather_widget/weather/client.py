"""HTTP clients for the Open-Meteo forecast API."""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from weather_widget.config import (
    FORECAST_API_URL, USER_AGENT, HTTP_TIMEOUT_SECONDS,
    DAILY_VARIABLES, FORECAST_TIMEZONE
)
from weather_widget.weather.errors import TransportError
from weather_widget.weather.models import OpenMeteoForecastResponse, WeatherSnapshot

logger = logging.getLogger(__name__)


class LoadingObserver:
    """Receives busy/idle notifications around forecast requests.

    The default implementation does nothing; a UI layer subclasses it to show
    progress.
    """

    def begin_loading(self) -> None:
        pass

    def end_loading(self) -> None:
        pass


class OpenMeteoHTTPClient:
    """Async JSON client shared by the Open-Meteo endpoints."""

    def __init__(
        self,
        base_url: str,
        user_agent: str = USER_AGENT,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the client.

        Args:
            base_url: Endpoint URL requests are sent to
            user_agent: User-Agent header for API requests
            http_client: Preconfigured httpx client (creates default if None)
        """
        self.base_url = base_url
        self.user_agent = user_agent
        self.client = http_client or httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=HTTP_TIMEOUT_SECONDS
        )

    async def _get_json(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Issue a single GET request and decode the JSON body.

        Args:
            params: Query parameters

        Returns:
            Decoded JSON object

        Raises:
            TransportError: On non-success status, network failure or a body
                that is not a JSON object
        """
        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"HTTP error from {self.base_url}: {status_code} - {e.response.text}")
            raise TransportError(f"HTTP {status_code}", status_code=status_code) from e
        except httpx.RequestError as e:
            logger.error(f"Request error to {self.base_url}: {e!r}")
            raise TransportError(f"Request failed: {e.__class__.__name__}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {self.base_url}: {e}")
            raise TransportError("Invalid JSON in response") from e

        if not isinstance(data, dict):
            logger.error(f"Unexpected response format from {self.base_url}: {type(data).__name__}")
            raise TransportError("Unexpected response format")
        return data

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()


class ForecastClient(OpenMeteoHTTPClient):
    """Async client for current conditions and daily forecasts."""

    def __init__(
        self,
        base_url: str = FORECAST_API_URL,
        user_agent: str = USER_AGENT,
        http_client: Optional[httpx.AsyncClient] = None,
        observer: Optional[LoadingObserver] = None
    ):
        super().__init__(base_url, user_agent, http_client)
        self.observer = observer or LoadingObserver()

    async def fetch_weather(self, lat: float, lon: float) -> WeatherSnapshot:
        """Fetch current conditions and the daily forecast for coordinates.

        Coordinates are passed through unchecked; the API rejects bad values
        with an error status.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Fully populated WeatherSnapshot

        Raises:
            TransportError: If the request fails or the response is malformed
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current_weather": "true",
            "daily": DAILY_VARIABLES,
            "timezone": FORECAST_TIMEZONE,
        }

        logger.info(f"Fetching weather for lat={lat}, lon={lon}")
        self.observer.begin_loading()
        try:
            data = await self._get_json(params)
            try:
                snapshot = OpenMeteoForecastResponse.model_validate(data).to_snapshot()
            except ValidationError as e:
                logger.error(f"Invalid forecast response format: {e}")
                raise TransportError("Invalid forecast response format") from e
        finally:
            self.observer.end_loading()

        logger.info(f"Weather data received with {len(snapshot.daily)} daily entries")
        return snapshot
