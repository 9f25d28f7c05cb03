"""Exceptions raised by the weather widget clients and services."""

from typing import Optional


class WeatherWidgetError(Exception):
    """Base exception for all weather widget errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(WeatherWidgetError):
    """Raised when an upstream request fails.

    Covers non-success HTTP statuses, network exceptions, timeouts and
    response bodies that cannot be decoded into the expected shape.
    """

    def __init__(self, reason: str, *, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class CityNotFoundError(WeatherWidgetError):
    """Raised when a city search yields no usable location."""
    pass


class EmptyQueryError(WeatherWidgetError):
    """Raised when a city search is submitted without a name."""
    pass
