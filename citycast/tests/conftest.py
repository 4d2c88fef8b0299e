"""Shared test fixtures."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest
import yaml

from citycast.config.schema import AppConfig, HistoryConfig, ProviderConfig

TEST_BASE_URL = "https://test-owm.example.com"
TEST_API_KEY = "test-key-123"


def make_entry(index: int, start: datetime = datetime(2026, 10, 19)) -> dict:
    """One 3-hour forecast entry as returned by /data/2.5/forecast."""
    ts = start + timedelta(hours=3 * index)
    return {
        "dt": int(ts.timestamp()),
        "main": {"temp": 60.0 + index, "humidity": 40 + index},
        "weather": [{"description": f"sky {index}", "icon": f"{index:02d}d"}],
        "wind": {"speed": 5.0 + index / 10},
        "dt_txt": ts.strftime("%Y-%m-%d %H:%M:%S"),
    }


def make_forecast_payload(count: int = 40) -> dict:
    return {"cod": "200", "cnt": count, "list": [make_entry(i) for i in range(count)]}


@pytest.fixture
def forecast_payload() -> dict:
    """5 days x 8 samples."""
    return make_forecast_payload()


@pytest.fixture
def geocode_boston() -> list[dict]:
    return [
        {"name": "Boston", "lat": 42.3554, "lon": -71.0605, "country": "US", "state": "Massachusetts"},
        {"name": "Boston", "lat": 52.9789, "lon": -0.0266, "country": "GB"},
    ]


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    """Path to an initialized empty history file."""
    path = tmp_path / "db" / "history.json"
    path.parent.mkdir()
    path.write_text("[]")
    return path


@pytest.fixture
def test_config(history_path: Path) -> AppConfig:
    return AppConfig(
        provider=ProviderConfig(base_url=TEST_BASE_URL, api_key=TEST_API_KEY),
        history=HistoryConfig(path=str(history_path)),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"base_url": TEST_BASE_URL, "api_key": TEST_API_KEY},
        "history": {"path": str(tmp_path / "history.json")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(autouse=True)
def _clear_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
