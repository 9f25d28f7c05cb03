"""Best-effort weather aggregation for the popular cities panel."""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from weather_widget.config import POPULAR_CITIES_CONCURRENCY
from weather_widget.weather.client import ForecastClient
from weather_widget.weather.errors import TransportError
from weather_widget.weather.models import PopularCity, WeatherSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CityFetchOutcome:
    """Result of fetching one city: a snapshot, or the reason it was skipped."""
    index: int
    city: PopularCity
    snapshot: Optional[WeatherSnapshot] = None
    skip_reason: Optional[str] = None

    @classmethod
    def succeeded(cls, index: int, city: PopularCity, snapshot: WeatherSnapshot) -> "CityFetchOutcome":
        """Record a city whose weather was fetched.

        Args:
            index: Position of the city in the input list
            city: City that was fetched
            snapshot: Weather fetched for the city

        Returns:
            Outcome carrying the snapshot
        """
        return cls(index=index, city=city, snapshot=snapshot)

    @classmethod
    def skipped(cls, index: int, city: PopularCity, reason: str) -> "CityFetchOutcome":
        """Record a city left out of the results.

        Args:
            index: Position of the city in the input list
            city: City that failed
            reason: Transport failure reason

        Returns:
            Outcome carrying the skip reason
        """
        return cls(index=index, city=city, skip_reason=reason)

    @property
    def ok(self) -> bool:
        """True when the city has a snapshot."""
        return self.snapshot is not None


class CityWeatherAggregator:
    """Fetches forecasts for a fixed list of cities, dropping failures."""

    def __init__(self, client: ForecastClient, max_concurrency: int = POPULAR_CITIES_CONCURRENCY):
        """Initialize the aggregator.

        Args:
            client: Forecast client used for every city
            max_concurrency: Number of requests in flight at once; 1 fetches
                the cities strictly one after another
        """
        self.client = client
        self.max_concurrency = max(1, max_concurrency)

    async def load_popular_cities(
        self,
        cities: Sequence[PopularCity]
    ) -> List[Tuple[PopularCity, WeatherSnapshot]]:
        """Fetch weather for every city, keeping only the ones that succeed.

        Args:
            cities: Cities in display order

        Returns:
            (city, snapshot) pairs in input order; empty if every fetch failed
        """
        logger.info(f"Loading weather for {len(cities)} popular cities")

        if self.max_concurrency == 1:
            outcomes = [
                await self._fetch_city(index, city)
                for index, city in enumerate(cities)
            ]
        else:
            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def bounded(index: int, city: PopularCity) -> CityFetchOutcome:
                async with semaphore:
                    return await self._fetch_city(index, city)

            outcomes = await asyncio.gather(
                *(bounded(index, city) for index, city in enumerate(cities))
            )
            outcomes = sorted(outcomes, key=lambda outcome: outcome.index)

        results = [(outcome.city, outcome.snapshot) for outcome in outcomes if outcome.ok]
        logger.info(f"Loaded weather for {len(results)} of {len(cities)} popular cities")
        return results

    async def _fetch_city(self, index: int, city: PopularCity) -> CityFetchOutcome:
        """Fetch one city, turning a transport failure into a skipped outcome.

        Args:
            index: Position of the city in the input list
            city: City to fetch

        Returns:
            Succeeded or skipped outcome; never raises for TransportError
        """
        try:
            snapshot = await self.client.fetch_weather(city.latitude, city.longitude)
        except TransportError as e:
            logger.warning(f"Skipping {city.name}: {e.reason}")
            return CityFetchOutcome.skipped(index, city, e.reason)
        return CityFetchOutcome.succeeded(index, city, snapshot)
