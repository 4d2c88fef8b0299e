"""Projects a raw OpenWeather forecast body into current weather + daily samples."""

import logging
from datetime import datetime

from citycast.errors import MalformedPayloadError
from citycast.models.weather import CurrentWeather, ForecastDay

logger = logging.getLogger(__name__)

# 3-hour resolution -> 8 entries per day
ENTRIES_PER_DAY = 8
MAX_FORECAST_DAYS = 5


def project_current(payload: dict, city: str) -> CurrentWeather:
    """Build the current-weather record from the first series entry.

    Raises MalformedPayloadError when the series is missing or entry 0 lacks
    temperature, description, icon, humidity or timestamp. Wind speed
    defaults to 0.
    """
    entries = payload.get("list") if isinstance(payload, dict) else None
    if not isinstance(entries, list) or not entries:
        logger.error("Forecast payload has no time series")
        raise MalformedPayloadError(
            "API response does not contain valid weather data"
        )

    first = _as_dict(entries[0])
    main = _as_dict(first.get("main"))
    conditions = _first_condition(first)
    fields = {
        "main.temp": main.get("temp"),
        "weather[0].description": conditions.get("description"),
        "main.humidity": main.get("humidity"),
        "weather[0].icon": conditions.get("icon"),
        "dt_txt": first.get("dt_txt"),
    }
    missing = [name for name, value in fields.items() if value is None]
    if missing:
        raise MalformedPayloadError(
            f"Weather data is missing required properties: {', '.join(missing)}"
        )

    try:
        date = format_date(first["dt_txt"])
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError(f"Unparseable timestamp: {first['dt_txt']!r}") from e

    try:
        temperature_f = float(main["temp"])
        humidity_percent = int(main["humidity"])
        wind_speed_mph = _wind_speed(first)
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError(f"Weather data has non-numeric readings: {e}") from e

    return CurrentWeather(
        city=city,
        date=date,
        icon=conditions["icon"],
        description=conditions["description"],
        temperature_f=temperature_f,
        wind_speed_mph=wind_speed_mph,
        humidity_percent=humidity_percent,
    )


def project_forecast(entries: list[dict]) -> list[ForecastDay]:
    """Sample every 8th entry (one per day) for up to 5 days.

    Entries are not presence-checked; a broken sampled entry raises the
    underlying KeyError/IndexError/TypeError.
    """
    sampled = entries[::ENTRIES_PER_DAY][:MAX_FORECAST_DAYS]
    return [
        ForecastDay(
            date=format_date(entry["dt_txt"]),
            temperature_f=float(entry["main"]["temp"]),
            description=entry["weather"][0]["description"],
            humidity_percent=int(entry["main"]["humidity"]),
            icon=entry["weather"][0]["icon"],
            wind_speed_mph=_wind_speed(entry),
        )
        for entry in sampled
    ]


def format_date(dt_txt: str) -> str:
    """'2026-10-19 12:00:00' -> '10/19/2026' (US locale calendar date)."""
    dt = datetime.fromisoformat(dt_txt)
    return f"{dt.month}/{dt.day}/{dt.year}"


def _wind_speed(entry: dict) -> float:
    wind = _as_dict(entry.get("wind"))
    speed = wind.get("speed")
    return float(speed) if speed is not None else 0.0


def _first_condition(entry: dict) -> dict:
    conditions = entry.get("weather")
    if isinstance(conditions, list) and conditions:
        return _as_dict(conditions[0])
    return {}


def _as_dict(value: object) -> dict:
    return value if isinstance(value, dict) else {}
