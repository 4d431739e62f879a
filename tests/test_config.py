"""
Tests for configuration loading
"""

import json

import pytest
from pydantic import ValidationError

from config import AppConfig, LoggingConfig, load_config


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("EDGE_LOG_LEVEL", raising=False)

        app_config = load_config(tmp_path / "missing.json")

        assert app_config == AppConfig()
        assert app_config.logging.level == "INFO"
        assert app_config.edge.reader_timeout_seconds == 60

    def test_values_from_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("EDGE_LOG_LEVEL", raising=False)
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "environment": "prod",
                    "primary_region": "ap-southeast-2",
                    "logging": {"level": "debug"},
                    "edge": {"reader_memory_size": 256},
                }
            )
        )

        app_config = load_config(path)

        assert app_config.environment == "prod"
        assert app_config.primary_region == "ap-southeast-2"
        assert app_config.logging.level == "DEBUG"
        assert app_config.edge.reader_memory_size == 256

    def test_env_overrides_log_level(self, tmp_path, monkeypatch):
        monkeypatch.setenv("EDGE_LOG_LEVEL", "warning")

        app_config = load_config(tmp_path / "missing.json")

        assert app_config.logging.level == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_invalid_reader_timeout(self):
        with pytest.raises(ValidationError):
            AppConfig(edge={"reader_timeout_seconds": 0})
