"""Tests for application configuration."""

import logging

import pytest
from pydantic import ValidationError

from zotsync.config import AppConfig, configure_logging


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()
        assert config.store_path == "data/settings.json"
        assert config.debug is False
        assert config.log_level == "WARNING"

    def test_log_level_normalized(self):
        assert AppConfig(log_level=" info ").log_level == "INFO"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            AppConfig(log_level="LOUD")


class TestFromEnv:
    """Tests for AppConfig.from_env."""

    def test_defaults_without_env(self, clean_env):
        config = AppConfig.from_env()
        assert config.store_path == "data/settings.json"
        assert config.log_level == "WARNING"

    def test_reads_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("ZOTSYNC_STORE_PATH", "/tmp/zs.json")
        monkeypatch.setenv("ZOTSYNC_LOG_LEVEL", "error")
        config = AppConfig.from_env()
        assert config.store_path == "/tmp/zs.json"
        assert config.log_level == "ERROR"

    def test_debug_forces_debug_level(self, clean_env, monkeypatch):
        monkeypatch.setenv("ZOTSYNC_DEBUG", "true")
        monkeypatch.setenv("ZOTSYNC_LOG_LEVEL", "ERROR")
        config = AppConfig.from_env()
        assert config.debug is True
        assert config.log_level == "DEBUG"


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    configure_logging(AppConfig(log_level="INFO"))
    assert calls["level"] == logging.INFO
