import asyncio
import json

import httpx
import pytest

from weather_widget.weather.client import ForecastClient, LoadingObserver
from weather_widget.weather.errors import TransportError

from conftest import RecordingTransport, forecast_payload


class RecordingObserver(LoadingObserver):
    def __init__(self):
        self.events = []

    def begin_loading(self) -> None:
        self.events.append("begin")

    def end_loading(self) -> None:
        self.events.append("end")


def fetch(transport: RecordingTransport, lat: float = 48.8566, lon: float = 2.3522, observer=None):
    async def run():
        async with ForecastClient(http_client=transport.client(), observer=observer) as client:
            return await client.fetch_weather(lat, lon)
    return asyncio.run(run())


def test_fetch_weather_returns_snapshot(transport):
    snapshot = fetch(transport)

    assert snapshot.current.temperature_c == 17.6
    assert snapshot.current.weather_code == 3
    assert len(snapshot.daily) == 7


def test_fetch_weather_request_parameters(transport):
    fetch(transport, lat=-33.8688, lon=151.2093)

    params = transport.requests[0].url.params
    assert params["latitude"] == "-33.8688"
    assert params["longitude"] == "151.2093"
    assert params["current_weather"] == "true"
    assert params["daily"] == "temperature_2m_max,temperature_2m_min,weathercode"
    assert params["timezone"] == "auto"


def test_out_of_range_coordinates_are_forwarded(transport):
    fetch(transport, lat=123.0, lon=500.0)

    params = transport.requests[0].url.params
    assert params["latitude"] == "123.0"
    assert params["longitude"] == "500.0"


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_error_status_raises_transport_error(status):
    transport = RecordingTransport(
        forecast=lambda request: httpx.Response(status, json={"error": True, "reason": "bad"})
    )

    with pytest.raises(TransportError) as excinfo:
        fetch(transport)

    assert excinfo.value.reason == f"HTTP {status}"


def test_timeout_raises_transport_error():
    def hang(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TransportError):
        fetch(RecordingTransport(forecast=hang))


def test_misaligned_daily_series_raise_transport_error():
    payload = forecast_payload(days=7)
    payload["daily"]["weathercode"] = payload["daily"]["weathercode"][:5]
    transport = RecordingTransport(forecast=lambda request: httpx.Response(200, json=payload))

    with pytest.raises(TransportError):
        fetch(transport)


def test_missing_current_weather_raises_transport_error():
    payload = forecast_payload()
    del payload["current_weather"]
    transport = RecordingTransport(forecast=lambda request: httpx.Response(200, json=payload))

    with pytest.raises(TransportError):
        fetch(transport)


def test_observer_brackets_successful_fetch(transport):
    observer = RecordingObserver()

    fetch(transport, observer=observer)

    assert observer.events == ["begin", "end"]


def test_observer_brackets_failed_fetch():
    observer = RecordingObserver()
    transport = RecordingTransport(forecast=lambda request: httpx.Response(500))

    with pytest.raises(TransportError):
        fetch(transport, observer=observer)

    assert observer.events == ["begin", "end"]


def json_response(payload) -> httpx.Response:
    # json.dumps writes float("inf") as the bare Infinity token
    return httpx.Response(
        200,
        content=json.dumps(payload).encode(),
        headers={"content-type": "application/json"},
    )


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_current_temperature_raises_transport_error(value):
    payload = forecast_payload()
    payload["current_weather"]["temperature"] = value
    transport = RecordingTransport(forecast=lambda request: json_response(payload))

    with pytest.raises(TransportError) as excinfo:
        fetch(transport)

    assert excinfo.value.reason == "Invalid forecast response format"


def test_non_finite_daily_temperature_raises_transport_error():
    payload = forecast_payload()
    payload["daily"]["temperature_2m_min"][2] = float("nan")
    transport = RecordingTransport(forecast=lambda request: json_response(payload))

    with pytest.raises(TransportError):
        fetch(transport)


def test_null_in_daily_series_raises_transport_error():
    payload = forecast_payload()
    payload["daily"]["temperature_2m_max"][6] = None
    transport = RecordingTransport(forecast=lambda request: httpx.Response(200, json=payload))

    with pytest.raises(TransportError) as excinfo:
        fetch(transport)

    assert excinfo.value.reason == "Invalid forecast response format"


def test_non_object_body_raises_transport_error(caplog):
    transport = RecordingTransport(forecast=lambda request: httpx.Response(200, json=[1, 2, 3]))

    with pytest.raises(TransportError) as excinfo:
        fetch(transport)

    assert excinfo.value.reason == "Unexpected response format"
    assert "Unexpected response format" in caplog.text
