"""Weather models produced by the query pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CurrentWeather:
    city: str
    date: str  # M/D/YYYY
    icon: str
    description: str
    temperature_f: float
    wind_speed_mph: float
    humidity_percent: int

    def to_payload(self) -> dict:
        return {
            "city": self.city,
            "date": self.date,
            "icon": self.icon,
            "iconDescription": self.description,
            "tempF": self.temperature_f,
            "windSpeed": self.wind_speed_mph,
            "humidity": self.humidity_percent,
        }


@dataclass(frozen=True)
class ForecastDay:
    date: str  # M/D/YYYY
    temperature_f: float
    description: str
    humidity_percent: int
    icon: str
    wind_speed_mph: float

    def to_payload(self) -> dict:
        return {
            "date": self.date,
            "tempF": self.temperature_f,
            "description": self.description,
            "humidity": self.humidity_percent,
            "icon": self.icon,
            "wind": self.wind_speed_mph,
        }


@dataclass(frozen=True)
class WeatherReport:
    current: CurrentWeather
    forecast: list[ForecastDay]

    def to_payload(self) -> dict:
        """Response body shape expected by the front end."""
        return {
            "currentWeather": self.current.to_payload(),
            "forecast": [day.to_payload() for day in self.forecast],
        }
