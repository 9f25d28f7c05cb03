"""Configuration settings for the weather widget service."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Open-Meteo API configuration
GEOCODING_API_URL: str = os.getenv("GEOCODING_API_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_API_URL: str = os.getenv("FORECAST_API_URL", "https://api.open-meteo.com/v1/forecast")
USER_AGENT: Final[str] = "WeatherWidgetService/0.1 (user@example.com)"
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))

# Geocoding request settings
GEOCODING_RESULT_COUNT: Final[int] = 1
GEOCODING_LANGUAGE: Final[str] = "en"

# Forecast request settings
DAILY_VARIABLES: Final[str] = "temperature_2m_max,temperature_2m_min,weathercode"
FORECAST_TIMEZONE: Final[str] = "auto"
FORECAST_DAYS: int = int(os.getenv("FORECAST_DAYS", "7"))  # Days shown in the forecast strip

# Popular cities panel
POPULAR_CITIES_CONCURRENCY: int = int(os.getenv("POPULAR_CITIES_CONCURRENCY", "1"))  # 1 = sequential

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
