from datetime import date, timedelta
from typing import Callable, Dict, List, Optional

import httpx
import pytest

from weather_widget.weather.client import ForecastClient
from weather_widget.weather.geocoding import GeocodingClient

GEOCODING_HOST = "geocoding-api.open-meteo.com"
FORECAST_HOST = "api.open-meteo.com"


def forecast_payload(
    days: int = 7,
    temperature: float = 17.6,
    weathercode: int = 3,
    start: date = date(2026, 10, 17),
    daily_codes: Optional[List[int]] = None,
) -> Dict:
    dates = [(start + timedelta(days=offset)).isoformat() for offset in range(days)]
    return {
        "latitude": 48.86,
        "longitude": 2.35,
        "timezone": "Europe/Paris",
        "current_weather": {
            "temperature": temperature,
            "windspeed": 12.4,
            "winddirection": 230.0,
            "weathercode": weathercode,
        },
        "daily": {
            "time": dates,
            "temperature_2m_max": [20.5 + offset for offset in range(days)],
            "temperature_2m_min": [10.4 + offset for offset in range(days)],
            "weathercode": daily_codes if daily_codes is not None else [weathercode] * days,
        },
    }


PARIS_GEOCODING = {
    "results": [
        {
            "id": 2988507,
            "name": "Paris",
            "latitude": 48.8566,
            "longitude": 2.3522,
            "country": "France",
            "country_code": "FR",
        }
    ]
}


class RecordingTransport:
    """Routes requests to per-host handlers and records every request."""

    def __init__(self, geocoding: Callable = None, forecast: Callable = None):
        self.geocoding = geocoding or (lambda request: httpx.Response(200, json=PARIS_GEOCODING))
        self.forecast = forecast or (lambda request: httpx.Response(200, json=forecast_payload()))
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == GEOCODING_HOST:
            return self.geocoding(request)
        return self.forecast(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_clients():
    def build(transport: RecordingTransport, observer=None):
        forecast = ForecastClient(http_client=transport.client(), observer=observer)
        geocoding = GeocodingClient(http_client=transport.client())
        return forecast, geocoding
    return build
