"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    geocode_limit: int = Field(default=5, ge=1, le=5)


class HistoryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    path: str = "data/history.json"
    create_if_missing: bool = True


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=3001, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    history: HistoryConfig = HistoryConfig()
    server: ServerConfig = ServerConfig()
