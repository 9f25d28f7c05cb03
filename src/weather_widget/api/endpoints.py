"""API endpoints for the weather widget service."""

import logging
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from weather_widget.config import FORECAST_DAYS
from weather_widget.weather.cities import POPULAR_CITIES
from weather_widget.weather.errors import CityNotFoundError, EmptyQueryError, TransportError
from weather_widget.weather.models import (
    ErrorResponse, PopularCitiesResponse, SearchResponse, SnapshotResponse
)
from weather_widget.weather.service import WeatherService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["weather"])


async def get_weather_service() -> AsyncGenerator[WeatherService, None]:
    """Dependency providing a weather service closed after the request."""
    async with WeatherService() as service:
        yield service


def weather_failure_message(error: TransportError) -> str:
    """Build the user-facing message for a failed forecast request.

    Args:
        error: Transport failure from the forecast client

    Returns:
        Message naming the failure reason
    """
    return f"Failed to load weather: {error.reason}"


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}
)
async def search_weather(
    city: Optional[str] = Query(None, description="City name to search for"),
    service: WeatherService = Depends(get_weather_service)
) -> SearchResponse:
    """Search for a city and return its current weather and forecast.

    Args:
        city: City name as typed by the user

    Returns:
        SearchResponse with the resolved location and weather views

    Raises:
        HTTPException: 400 for an empty query, 404 if the city cannot be
            found, 502 if the forecast cannot be loaded
    """
    try:
        result = await service.search_weather(city)
        logger.info(f"Search for '{city}' returned {len(result.forecast)} forecast days")
        return result

    except EmptyQueryError as e:
        raise HTTPException(status_code=400, detail=e.message)

    except CityNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    except TransportError as e:
        logger.error(f"Weather API error for '{city}': {e.reason}")
        raise HTTPException(status_code=502, detail=weather_failure_message(e))


@router.get("/", response_model=SnapshotResponse, responses={502: {"model": ErrorResponse}})
async def get_weather_at(
    lat: float = Query(..., description="Latitude in decimal degrees"),
    lon: float = Query(..., description="Longitude in decimal degrees"),
    service: WeatherService = Depends(get_weather_service)
) -> SnapshotResponse:
    """Get current weather and forecast for coordinates.

    Coordinates are forwarded as given; out-of-range values are rejected by
    the upstream API and surface as 502.
    """
    try:
        return await service.weather_at(lat, lon)
    except TransportError as e:
        logger.error(f"Weather API error for ({lat}, {lon}): {e.reason}")
        raise HTTPException(status_code=502, detail=weather_failure_message(e))


@router.get("/popular", response_model=PopularCitiesResponse)
async def get_popular_cities(
    service: WeatherService = Depends(get_weather_service)
) -> PopularCitiesResponse:
    """Get the popular cities panel.

    Cities whose weather cannot be loaded are left out; when none load the
    response carries a message instead of failing.
    """
    return await service.popular_cities_panel()


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "weather-widget"}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information.

    Returns:
        Service information including popular cities and features
    """
    return {
        "service": "Weather Widget Service",
        "version": "0.1.0",
        "forecast_days": FORECAST_DAYS,
        "popular_cities": [city.name for city in POPULAR_CITIES],
        "features": [
            "City search with current conditions",
            "Daily forecast",
            "Popular cities panel"
        ],
        "data_source": "Open-Meteo API"
    }
