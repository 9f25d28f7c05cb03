from datetime import date

import pytest

from weather_widget.weather.models import Location, OpenMeteoForecastResponse, PopularCity
from weather_widget.weather.presentation import (
    NO_CITY_DATA_MESSAGE, format_forecast_date, present_city, present_current,
    present_forecast, present_popular_cities, round_temperature
)

from conftest import forecast_payload

PARIS = Location(name="Paris", country="France", latitude=48.8566, longitude=2.3522)


def snapshot(**kwargs):
    return OpenMeteoForecastResponse.model_validate(forecast_payload(**kwargs)).to_snapshot()


@pytest.mark.parametrize("value,expected", [
    (17.6, 18),
    (17.4, 17),
    (2.5, 3),
    (-2.5, -2),
    (-2.6, -3),
    (0.0, 0),
    (0.49999999999999994, 0),
    (-0.5, 0),
    (-1.5, -1),
    (1e16 + 2, 10000000000000002),
    (-0.4, 0),
])
def test_round_temperature_rounds_halves_up(value, expected):
    assert round_temperature(value) == expected


def test_format_forecast_date():
    assert format_forecast_date(date(2026, 10, 17)) == "Sat, Oct 17"
    assert format_forecast_date(date(2026, 1, 5)) == "Mon, Jan 5"


def test_present_current():
    view = present_current(PARIS, snapshot(temperature=17.6, weathercode=3))

    assert view.label == "Paris, France"
    assert view.icon == "☁️"
    assert view.description == "Overcast"
    assert view.temperature_c == 18
    assert view.wind_speed_kmh == 12.4
    assert view.wind_direction_deg == 230.0


def test_present_current_without_country():
    place = Location(name="Nowhere", latitude=0.0, longitude=0.0)

    assert present_current(place, snapshot()).label == "Nowhere"


def test_present_forecast_limits_to_seven_days():
    views = present_forecast(snapshot(days=16).daily)

    assert len(views) == 7
    assert views[0].label == "Sat, Oct 17"
    assert views[0].temp_max_c == 21
    assert views[0].temp_min_c == 10
    assert views[6].date == date(2026, 10, 23)


def test_present_forecast_short_series():
    views = present_forecast(snapshot(days=3).daily)

    assert len(views) == 3


def test_present_forecast_describes_each_day():
    views = present_forecast(snapshot(days=3, daily_codes=[0, 61, 42]).daily)

    assert [view.description for view in views] == ["Clear sky", "Light rain", "Unknown"]


def test_present_city():
    city = PopularCity(name="Tokyo", country="Japan", latitude=35.6762, longitude=139.6503)

    card = present_city(city, snapshot(temperature=-0.5, weathercode=73))

    assert card.name == "Tokyo"
    assert card.country == "Japan"
    assert card.temperature_c == 0
    assert card.description == "Snow"
    assert card.icon == "❄️"


def test_empty_popular_panel_has_message():
    panel = present_popular_cities([])

    assert panel.cities == []
    assert panel.message == NO_CITY_DATA_MESSAGE


def test_popular_panel_keeps_order():
    cities = [
        PopularCity(name="London", country="UK", latitude=51.5074, longitude=-0.1278),
        PopularCity(name="Dubai", country="UAE", latitude=25.2048, longitude=55.2708),
    ]

    panel = present_popular_cities([(city, snapshot()) for city in cities])

    assert [card.name for card in panel.cities] == ["London", "Dubai"]
    assert panel.message is None
