"""Weather code descriptions and icons."""

from typing import Dict, Final

from weather_widget.weather.models import WeatherCodeEntry

UNKNOWN_WEATHER: Final[WeatherCodeEntry] = WeatherCodeEntry(description="Unknown", icon="🌡️")

# WMO weather interpretation codes reported by Open-Meteo
WEATHER_CODES: Final[Dict[int, WeatherCodeEntry]] = {
    0: WeatherCodeEntry(description="Clear sky", icon="☀️"),
    1: WeatherCodeEntry(description="Mainly clear", icon="🌤️"),
    2: WeatherCodeEntry(description="Partly cloudy", icon="⛅"),
    3: WeatherCodeEntry(description="Overcast", icon="☁️"),
    45: WeatherCodeEntry(description="Foggy", icon="🌫️"),
    48: WeatherCodeEntry(description="Foggy", icon="🌫️"),
    51: WeatherCodeEntry(description="Light drizzle", icon="🌦️"),
    53: WeatherCodeEntry(description="Drizzle", icon="🌦️"),
    55: WeatherCodeEntry(description="Heavy drizzle", icon="🌧️"),
    61: WeatherCodeEntry(description="Light rain", icon="🌧️"),
    63: WeatherCodeEntry(description="Rain", icon="🌧️"),
    65: WeatherCodeEntry(description="Heavy rain", icon="⛈️"),
    71: WeatherCodeEntry(description="Light snow", icon="🌨️"),
    73: WeatherCodeEntry(description="Snow", icon="❄️"),
    75: WeatherCodeEntry(description="Heavy snow", icon="❄️"),
    80: WeatherCodeEntry(description="Rain showers", icon="🌦️"),
    95: WeatherCodeEntry(description="Thunderstorm", icon="⛈️"),
}


def describe(code: int) -> WeatherCodeEntry:
    """Look up the description and icon for a weather code.

    Args:
        code: Weather code as reported by the forecast API

    Returns:
        Mapped entry, or UNKNOWN_WEATHER for codes without one
    """
    return WEATHER_CODES.get(code, UNKNOWN_WEATHER)
