"""YAML config loader with environment overrides for provider settings."""

import json
import os
from pathlib import Path

import yaml

from citycast.config.schema import AppConfig

# env var -> provider field
ENV_OVERRIDES = {
    "API_BASE_URL": "base_url",
    "API_KEY": "api_key",
}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from an optional YAML file.

    API_BASE_URL and API_KEY from the environment take precedence over the
    file when set and non-empty.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    provider = dict(raw.get("provider") or {})
    for env_name, field in ENV_OVERRIDES.items():
        value = os.environ.get(env_name, "")
        if value:
            provider[field] = value
    if provider:
        raw["provider"] = provider

    return AppConfig(**raw)


def masked_config_json(config: AppConfig) -> str:
    """Dump config as JSON with the API key hidden."""
    data = json.loads(config.model_dump_json())
    if data["provider"]["api_key"]:
        data["provider"]["api_key"] = "***"
    return json.dumps(data, indent=2)
