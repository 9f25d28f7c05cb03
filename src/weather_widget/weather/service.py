"""Weather service orchestrating city search and popular city lookups."""

import logging
from typing import Optional, Sequence

from weather_widget.weather.aggregator import CityWeatherAggregator
from weather_widget.weather.cities import POPULAR_CITIES
from weather_widget.weather.client import ForecastClient
from weather_widget.weather.errors import CityNotFoundError, EmptyQueryError, TransportError
from weather_widget.weather.geocoding import GeocodingClient
from weather_widget.weather.models import (
    Location, PopularCitiesResponse, PopularCity, SearchResponse, SnapshotResponse
)
from weather_widget.weather.presentation import (
    present_current, present_forecast, present_popular_cities
)

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Please enter a city name"
CITY_NOT_FOUND_MESSAGE = "City not found. Try another name."


def validate_query(query: Optional[str]) -> str:
    """Trim a search query and reject it if nothing is left.

    Args:
        query: Raw user input

    Returns:
        Trimmed query

    Raises:
        EmptyQueryError: If the query is missing, empty or whitespace only
    """
    cleaned = (query or "").strip()
    if not cleaned:
        raise EmptyQueryError(EMPTY_QUERY_MESSAGE)
    return cleaned


class WeatherService:
    """Service composing geocoding, forecasts and presentation."""

    def __init__(
        self,
        forecast_client: Optional[ForecastClient] = None,
        geocoding_client: Optional[GeocodingClient] = None,
        aggregator: Optional[CityWeatherAggregator] = None,
        popular_cities: Sequence[PopularCity] = POPULAR_CITIES
    ):
        """Initialize the weather service.

        Args:
            forecast_client: Forecast client instance (creates default if None)
            geocoding_client: Geocoding client instance (creates default if None)
            aggregator: Popular cities aggregator (built on forecast_client if None)
            popular_cities: Cities shown on the popular panel
        """
        self.forecast_client = forecast_client or ForecastClient()
        self.geocoding_client = geocoding_client or GeocodingClient()
        self.aggregator = aggregator or CityWeatherAggregator(self.forecast_client)
        self.popular_cities = popular_cities

    async def search_weather(self, query: Optional[str]) -> SearchResponse:
        """Resolve a city name and fetch its weather.

        Args:
            query: City name as typed by the user

        Returns:
            SearchResponse with the location, current view and forecast

        Raises:
            EmptyQueryError: If the query is empty
            CityNotFoundError: If the city cannot be resolved
            TransportError: If the forecast request fails
        """
        city_name = validate_query(query)

        try:
            location = await self.geocoding_client.resolve_city(city_name)
        except TransportError as e:
            logger.error(f"Geocoding request failed for '{city_name}': {e.reason}")
            raise CityNotFoundError(CITY_NOT_FOUND_MESSAGE) from e

        if location is None:
            logger.info(f"City not found: '{city_name}'")
            raise CityNotFoundError(CITY_NOT_FOUND_MESSAGE)

        snapshot = await self.forecast_client.fetch_weather(location.latitude, location.longitude)

        return SearchResponse(
            location=location,
            current=present_current(location, snapshot),
            forecast=present_forecast(snapshot.daily),
        )

    async def weather_at(self, lat: float, lon: float) -> SnapshotResponse:
        """Fetch weather for coordinates without a place name.

        Raises:
            TransportError: If the forecast request fails
        """
        snapshot = await self.forecast_client.fetch_weather(lat, lon)
        place = Location(name=f"{lat}, {lon}", latitude=lat, longitude=lon)
        return SnapshotResponse(
            latitude=lat,
            longitude=lon,
            current=present_current(place, snapshot),
            forecast=present_forecast(snapshot.daily),
        )

    async def popular_cities_panel(self) -> PopularCitiesResponse:
        """Build the popular cities panel; never raises for upstream failures."""
        results = await self.aggregator.load_popular_cities(self.popular_cities)
        return present_popular_cities(results)

    async def aclose(self):
        """Close the underlying clients."""
        for client in (self.forecast_client, self.geocoding_client):
            try:
                await client.aclose()
            except Exception as e:
                logger.error(f"Error closing client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
