"""CLI entry point for the city weather service."""

import argparse
import logging

from citycast.config.loader import load_config, masked_config_json
from citycast.errors import CitycastError
from citycast.ingest.openweather_client import OpenWeatherClient
from citycast.pipeline.query_pipeline import WeatherQueryPipeline
from citycast.storage.history_store import HistoryStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="citycast",
        description="City weather forecasts with search history",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--history", default=None, help="History JSON path")

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Forecast for a city")
    weather_p.add_argument("city", nargs="+", help="City name")

    # history list / history remove
    history_p = sub.add_parser("history", help="Search history operations")
    history_sub = history_p.add_subparsers(dest="history_command")
    history_sub.add_parser("list", help="List recorded cities")
    remove_p = history_sub.add_parser("remove", help="Remove a city by id")
    remove_p.add_argument("id")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.history:
        config = config.model_copy(
            update={"history": config.history.model_copy(update={"path": args.history})}
        )

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "history":
        return _cmd_history(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _open_store(config) -> HistoryStore:
    store = HistoryStore(config.history.path)
    if config.history.create_if_missing:
        store.ensure_exists()
    return store


def _cmd_weather(config, args) -> int:
    pipeline = WeatherQueryPipeline(OpenWeatherClient.from_config(config.provider))
    try:
        report = pipeline.get_forecast_for_city(" ".join(args.city))
    except CitycastError as e:
        print(f"Error: {e.message}")
        return 1

    current = report.current
    print(f"{current.city} ({current.date}): {current.temperature_f:.1f}°F, {current.description}")
    print(f"  Wind: {current.wind_speed_mph:.1f} mph | Humidity: {current.humidity_percent}%")
    for day in report.forecast:
        print(
            f"  {day.date}: {day.temperature_f:.1f}°F {day.description} "
            f"(wind {day.wind_speed_mph:.1f} mph, humidity {day.humidity_percent}%)"
        )

    try:
        _open_store(config).add_city(current.city)
    except CitycastError:
        logger.exception("Failed to record %r in history", current.city)
    return 0


def _cmd_history(config, args) -> int:
    store = _open_store(config)
    try:
        if args.history_command == "list":
            cities = store.get_cities()
            if not cities:
                print("No cities in history")
            for city in cities:
                print(f"{city.id}\t{city.name}")
            return 0
        elif args.history_command == "remove":
            store.remove_city(args.id)
            print(f"City {args.id} removed")
            return 0
    except CitycastError as e:
        print(f"Error: {e.message}")
        return 1
    print("Use: history list | history remove <id>")
    return 1


def _cmd_serve(config, args) -> int:
    from citycast.server import run

    run(config, host=args.host, port=args.port)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    print("Use: config show")
    return 1
