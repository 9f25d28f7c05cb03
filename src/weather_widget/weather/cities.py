"""Fixed table of popular cities shown on the landing panel."""

from typing import Final, Tuple

from weather_widget.weather.models import PopularCity

POPULAR_CITIES: Final[Tuple[PopularCity, ...]] = (
    PopularCity(name="London", country="UK", latitude=51.5074, longitude=-0.1278),
    PopularCity(name="New York", country="USA", latitude=40.7128, longitude=-74.0060),
    PopularCity(name="Tokyo", country="Japan", latitude=35.6762, longitude=139.6503),
    PopularCity(name="Paris", country="France", latitude=48.8566, longitude=2.3522),
    PopularCity(name="Sydney", country="Australia", latitude=-33.8688, longitude=151.2093),
    PopularCity(name="Dubai", country="UAE", latitude=25.2048, longitude=55.2708),
    PopularCity(name="Singapore", country="Singapore", latitude=1.3521, longitude=103.8198),
    PopularCity(name="Los Angeles", country="USA", latitude=34.0522, longitude=-118.2437),
    PopularCity(name="Hong Kong", country="China", latitude=22.3193, longitude=114.1694),
    PopularCity(name="Manila", country="Philippines", latitude=14.5995, longitude=120.9842),
)
