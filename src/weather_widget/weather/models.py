"""Data models for the weather widget service."""

from datetime import date as date_type
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Domain records

class Location(BaseModel):
    """Best-match location resolved from a city search."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Place name")
    country: str = Field("", description="Country name")
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")


class PopularCity(BaseModel):
    """Entry of the fixed popular-cities table."""
    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    latitude: float
    longitude: float


class WeatherCodeEntry(BaseModel):
    """Human description and icon for a weather code."""
    model_config = ConfigDict(frozen=True)

    description: str
    icon: str


class CurrentConditions(BaseModel):
    """Current conditions at a location."""
    temperature_c: float = Field(..., description="Temperature in Celsius")
    wind_speed_kmh: float = Field(..., description="Wind speed in km/h")
    wind_direction_deg: float = Field(..., description="Wind direction in degrees")
    weather_code: int = Field(..., description="Weather condition code")


class DailyForecastEntry(BaseModel):
    """One day of the daily forecast."""
    date: date_type
    weather_code: int
    temp_max_c: float
    temp_min_c: float


class DailyForecast(BaseModel):
    """Daily forecast kept as index-aligned parallel series."""
    dates: List[date_type] = Field(default_factory=list)
    weather_codes: List[int] = Field(default_factory=list)
    temp_max_c: List[float] = Field(default_factory=list)
    temp_min_c: List[float] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_aligned(self) -> "DailyForecast":
        lengths = {
            len(self.dates),
            len(self.weather_codes),
            len(self.temp_max_c),
            len(self.temp_min_c),
        }
        if len(lengths) != 1:
            raise ValueError(
                "Daily forecast series differ in length: "
                f"dates={len(self.dates)}, weather_codes={len(self.weather_codes)}, "
                f"temp_max_c={len(self.temp_max_c)}, temp_min_c={len(self.temp_min_c)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.dates)

    def first(self, days: int) -> "DailyForecast":
        """Return the first ``days`` entries, or all of them if fewer exist."""
        days = max(days, 0)
        return DailyForecast(
            dates=self.dates[:days],
            weather_codes=self.weather_codes[:days],
            temp_max_c=self.temp_max_c[:days],
            temp_min_c=self.temp_min_c[:days],
        )

    def entries(self) -> List[DailyForecastEntry]:
        """Re-shape the parallel series into per-day records."""
        return [
            DailyForecastEntry(date=day, weather_code=code, temp_max_c=high, temp_min_c=low)
            for day, code, high, low in zip(
                self.dates, self.weather_codes, self.temp_max_c, self.temp_min_c
            )
        ]


class WeatherSnapshot(BaseModel):
    """Current conditions plus the daily forecast for one location."""
    current: CurrentConditions
    daily: DailyForecast


# Raw Open-Meteo payloads

class OpenMeteoGeocodingResult(BaseModel):
    """Single result of the Open-Meteo geocoding API."""
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    country: Optional[str] = None
    latitude: float
    longitude: float


class OpenMeteoGeocodingResponse(BaseModel):
    """Raw response from the Open-Meteo geocoding API."""
    results: Optional[List[OpenMeteoGeocodingResult]] = None


class OpenMeteoCurrentWeather(BaseModel):
    """Raw ``current_weather`` block of the forecast API."""
    model_config = ConfigDict(allow_inf_nan=False)

    temperature: float
    windspeed: float
    winddirection: float
    weathercode: int


class OpenMeteoDaily(BaseModel):
    """Raw ``daily`` block of the forecast API."""
    model_config = ConfigDict(allow_inf_nan=False)

    time: List[date_type]
    temperature_2m_max: List[float]
    temperature_2m_min: List[float]
    weathercode: List[int]


class OpenMeteoForecastResponse(BaseModel):
    """Raw response from the Open-Meteo forecast API."""
    model_config = ConfigDict(allow_inf_nan=False)

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    current_weather: OpenMeteoCurrentWeather
    daily: OpenMeteoDaily

    def to_snapshot(self) -> WeatherSnapshot:
        """Convert the raw payload into a WeatherSnapshot."""
        current = CurrentConditions(
            temperature_c=self.current_weather.temperature,
            wind_speed_kmh=self.current_weather.windspeed,
            wind_direction_deg=self.current_weather.winddirection,
            weather_code=self.current_weather.weathercode,
        )
        daily = DailyForecast(
            dates=self.daily.time,
            weather_codes=self.daily.weathercode,
            temp_max_c=self.daily.temperature_2m_max,
            temp_min_c=self.daily.temperature_2m_min,
        )
        return WeatherSnapshot(current=current, daily=daily)


# View records returned by the API

class CurrentWeatherView(BaseModel):
    """Display-ready current conditions."""
    label: str = Field(..., description="Location label, e.g. 'Paris, France'")
    icon: str
    description: str
    temperature_c: int = Field(..., description="Rounded temperature in Celsius")
    wind_speed_kmh: float
    wind_direction_deg: float


class ForecastDayView(BaseModel):
    """Display-ready forecast day."""
    date: date_type
    label: str = Field(..., description="Formatted date, e.g. 'Sat, Oct 17'")
    icon: str
    description: str
    temp_max_c: int
    temp_min_c: int


class CityCardView(BaseModel):
    """Display-ready popular city card."""
    name: str
    country: str
    icon: str
    description: str
    temperature_c: int
    wind_speed_kmh: float


class SearchResponse(BaseModel):
    """Result of a city search."""
    location: Location
    current: CurrentWeatherView
    forecast: List[ForecastDayView]


class SnapshotResponse(BaseModel):
    """Weather at a pair of coordinates."""
    latitude: float
    longitude: float
    current: CurrentWeatherView
    forecast: List[ForecastDayView]


class PopularCitiesResponse(BaseModel):
    """Popular cities panel."""
    cities: List[CityCardView] = Field(default_factory=list)
    message: Optional[str] = Field(None, description="Shown when no city data is available")


class ErrorResponse(BaseModel):
    """Error response model."""
    detail: str = Field(..., description="User-facing error message")
