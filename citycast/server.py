"""FastAPI routing layer: weather query and search history endpoints."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from citycast.config.schema import AppConfig
from citycast.errors import CitycastError
from citycast.ingest.openweather_client import OpenWeatherClient
from citycast.pipeline.query_pipeline import WeatherQueryPipeline
from citycast.storage.history_store import HistoryStore

logger = logging.getLogger(__name__)


class WeatherRequest(BaseModel):
    # type checked by the pipeline so bad input maps to InvalidInputError
    cityName: Any = None


def create_app(
    config: AppConfig,
    pipeline: WeatherQueryPipeline | None = None,
    store: HistoryStore | None = None,
) -> FastAPI:
    """Build the app around one pipeline and one history store."""
    if pipeline is None:
        pipeline = WeatherQueryPipeline(OpenWeatherClient.from_config(config.provider))
    if store is None:
        store = HistoryStore(config.history.path)
        if config.history.create_if_missing:
            store.ensure_exists()

    app = FastAPI(title="Citycast Weather", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CitycastError)
    def handle_citycast_error(request: Request, exc: CitycastError) -> JSONResponse:
        logger.error(
            "%s %s failed: %s: %s",
            request.method, request.url.path, type(exc).__name__, exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    @app.post("/api/weather")
    def submit_city(body: WeatherRequest):
        """Current weather + forecast for a city; the city is then recorded."""
        report = pipeline.get_forecast_for_city(body.cityName)
        try:
            store.add_city(report.current.city)
        except CitycastError:
            logger.exception("Failed to record %r in history", report.current.city)
        return report.to_payload()

    @app.get("/api/weather/history")
    def list_history():
        return [city.to_payload() for city in store.get_cities()]

    @app.delete("/api/weather/history/{city_id}")
    def delete_history(city_id: str):
        store.remove_city(city_id)
        return {"message": "City removed"}

    return app


def run(config: AppConfig, host: str | None = None, port: int | None = None) -> None:
    import uvicorn

    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
    )
