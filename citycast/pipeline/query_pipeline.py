"""Weather query pipeline: validate -> geocode -> fetch -> project."""

import logging

from citycast.errors import InvalidInputError
from citycast.ingest.forecast_projector import project_current, project_forecast
from citycast.ingest.openweather_client import OpenWeatherClient
from citycast.models.weather import WeatherReport

logger = logging.getLogger(__name__)


class WeatherQueryPipeline:
    """Resolves a city name to current weather plus a 5-day sampled forecast.

    Fail fast, fail whole: any step's error propagates and no partial report
    is returned. Nothing is cached between calls.
    """

    def __init__(self, client: OpenWeatherClient):
        self.client = client

    def get_forecast_for_city(self, city_name: object) -> WeatherReport:
        if not isinstance(city_name, str) or not city_name.strip():
            logger.warning("Rejected city name: %r", city_name)
            raise InvalidInputError("A valid city name must be provided.")

        city = city_name.strip()
        logger.info("Weather query for %r", city)

        coordinate = self.client.resolve_coordinate(city)
        payload = self.client.fetch_forecast(coordinate)

        current = project_current(payload, city)
        forecast = project_forecast(payload["list"])
        logger.info(
            "Weather for %r at (%.4f, %.4f): %.1fF, %d forecast days",
            city, coordinate.latitude, coordinate.longitude,
            current.temperature_f, len(forecast),
        )
        return WeatherReport(current=current, forecast=forecast)
