"""OpenWeather API client: geocoding and 5-day/3-hour forecast."""

import logging

import httpx

from citycast.config.schema import ProviderConfig
from citycast.errors import ConfigurationError, NoMatchError, TransportError
from citycast.models.weather import Coordinate

logger = logging.getLogger(__name__)

GEOCODE_PATH = "/geo/1.0/direct"
FORECAST_PATH = "/data/2.5/forecast"


class OpenWeatherClient:
    """Issues the two outbound calls of a weather query.

    No retries: one failed call surfaces as TransportError immediately.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        geocode_limit: int = 5,
    ):
        self.base_url = base_url.rstrip("/") if base_url else ""
        self.api_key = api_key
        self.timeout = timeout
        self.geocode_limit = geocode_limit

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "OpenWeatherClient":
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            timeout=config.timeout_seconds,
            geocode_limit=config.geocode_limit,
        )

    def resolve_coordinate(self, city_name: str) -> Coordinate:
        """Geocode a city name and return the first candidate's coordinate."""
        candidates = self._get(
            GEOCODE_PATH, {"q": city_name, "limit": self.geocode_limit}
        )
        if not isinstance(candidates, list) or not candidates:
            raise NoMatchError(f"No location data found for city: {city_name}")

        first = candidates[0]
        if not isinstance(first, dict):
            raise NoMatchError(f"Location data for {city_name} is not an object")
        lat = first.get("lat")
        lon = first.get("lon")
        if lat is None or lon is None:
            raise NoMatchError("Location data does not contain coordinates")

        try:
            latitude, longitude = float(lat), float(lon)
        except (TypeError, ValueError) as e:
            raise NoMatchError(
                f"Location data for {city_name} has unusable coordinates"
            ) from e

        return Coordinate(
            name=first.get("name") or city_name,
            latitude=latitude,
            longitude=longitude,
        )

    def fetch_forecast(self, coordinate: Coordinate) -> dict:
        """Fetch the raw forecast body for a coordinate. Not validated here."""
        return self._get(
            FORECAST_PATH,
            {
                "lat": coordinate.latitude,
                "lon": coordinate.longitude,
                "exclude": "minutely,hourly",
                "units": "imperial",
            },
        )

    def _get(self, path: str, params: dict) -> object:
        if not self.base_url or not self.api_key:
            raise ConfigurationError("Missing API_BASE_URL or API_KEY")

        url = f"{self.base_url}{path}"
        logger.info("OpenWeather GET %s %s", path, params)
        try:
            resp = httpx.get(
                url,
                params={**params, "appid": self.api_key},
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed: %s -> %s", path, e)
            raise TransportError(f"Request to {path} failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("OpenWeather %d: %s", resp.status_code, path)
            raise TransportError(
                f"HTTP error! status: {resp.status_code}", resp.status_code
            )
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"Undecodable response from {path}") from e
