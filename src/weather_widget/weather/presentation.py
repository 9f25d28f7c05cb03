"""Shapes weather records into display-ready views."""

import math
from datetime import date
from typing import List, Sequence, Tuple, Union

from weather_widget.config import FORECAST_DAYS
from weather_widget.weather.codes import describe
from weather_widget.weather.models import (
    CityCardView, CurrentWeatherView, DailyForecast, ForecastDayView,
    Location, PopularCitiesResponse, PopularCity, WeatherSnapshot
)

NO_CITY_DATA_MESSAGE = "No city data available"


def round_temperature(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3, -2.5 -> -2).

    The fractional part is compared directly so values just below a half
    (e.g. 0.49999999999999994) are not pushed over it by float addition.

    Args:
        value: Temperature in Celsius

    Returns:
        Rounded temperature
    """
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    return int(whole)


def format_forecast_date(day: date) -> str:
    """Format a forecast date as e.g. 'Sat, Oct 17'."""
    return f"{day:%a}, {day:%b} {day.day}"


def format_location_label(place: Union[Location, PopularCity]) -> str:
    """Build the display label for a place.

    Args:
        place: Resolved location or popular city

    Returns:
        "Name, Country", or just the name when the country is unknown
    """
    if place.country:
        return f"{place.name}, {place.country}"
    return place.name


def present_current(place: Union[Location, PopularCity], snapshot: WeatherSnapshot) -> CurrentWeatherView:
    """Build the current-conditions view for a location."""
    current = snapshot.current
    weather = describe(current.weather_code)
    return CurrentWeatherView(
        label=format_location_label(place),
        icon=weather.icon,
        description=weather.description,
        temperature_c=round_temperature(current.temperature_c),
        wind_speed_kmh=current.wind_speed_kmh,
        wind_direction_deg=current.wind_direction_deg,
    )


def present_forecast(daily: DailyForecast, days: int = FORECAST_DAYS) -> List[ForecastDayView]:
    """Build forecast views for the first ``days`` entries."""
    views = []
    for entry in daily.first(days).entries():
        weather = describe(entry.weather_code)
        views.append(ForecastDayView(
            date=entry.date,
            label=format_forecast_date(entry.date),
            icon=weather.icon,
            description=weather.description,
            temp_max_c=round_temperature(entry.temp_max_c),
            temp_min_c=round_temperature(entry.temp_min_c),
        ))
    return views


def present_city(city: PopularCity, snapshot: WeatherSnapshot) -> CityCardView:
    """Build the card shown for a city on the popular panel.

    Args:
        city: Popular city entry
        snapshot: Weather fetched for the city

    Returns:
        CityCardView with rounded temperature and weather description
    """
    current = snapshot.current
    weather = describe(current.weather_code)
    return CityCardView(
        name=city.name,
        country=city.country,
        icon=weather.icon,
        description=weather.description,
        temperature_c=round_temperature(current.temperature_c),
        wind_speed_kmh=current.wind_speed_kmh,
    )


def present_popular_cities(
    results: Sequence[Tuple[PopularCity, WeatherSnapshot]]
) -> PopularCitiesResponse:
    """Build the popular cities panel; an empty panel carries a message."""
    if not results:
        return PopularCitiesResponse(cities=[], message=NO_CITY_DATA_MESSAGE)
    return PopularCitiesResponse(
        cities=[present_city(city, snapshot) for city, snapshot in results]
    )
