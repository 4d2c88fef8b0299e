"""Tests for config loading and environment overrides."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from citycast.config.loader import load_config, masked_config_json
from citycast.config.schema import OPENWEATHER_BASE_URL, AppConfig


class TestLoadConfig:
    def test_no_path_uses_defaults(self):
        config = load_config()
        assert config.provider.base_url == OPENWEATHER_BASE_URL
        assert config.provider.api_key == ""
        assert config.history.path == "data/history.json"
        assert config.server.port == 3001

    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.provider.base_url == "https://test-owm.example.com"
        assert config.provider.api_key == "test-key-123"
        assert config.provider.timeout_seconds == 10.0

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("provider:\n  api_token: x\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_invalid_timeout(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("provider:\n  timeout_seconds: 0\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestEnvOverrides:
    def test_env_overrides_file(self, config_yaml_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_BASE_URL", "https://env.example.com/")
        monkeypatch.setenv("API_KEY", "env-key")

        config = load_config(config_yaml_path)
        assert config.provider.base_url == "https://env.example.com/"
        assert config.provider.api_key == "env-key"

    def test_env_without_file(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_KEY", "env-key")
        assert load_config().provider.api_key == "env-key"

    def test_empty_env_ignored(self, config_yaml_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_KEY", "")
        assert load_config(config_yaml_path).provider.api_key == "test-key-123"


class TestMaskedConfig:
    def test_key_hidden(self, test_config: AppConfig):
        dumped = masked_config_json(test_config)
        assert "test-key-123" not in dumped
        assert json.loads(dumped)["provider"]["api_key"] == "***"

    def test_empty_key_left_empty(self):
        assert json.loads(masked_config_json(AppConfig()))["provider"]["api_key"] == ""


class TestShippedConfig:
    def test_default_yaml_loads(self):
        path = Path(__file__).parents[3] / "ops" / "configs" / "default.yaml"
        assert load_config(path) == AppConfig()
