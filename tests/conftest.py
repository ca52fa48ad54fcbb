"""Pytest configuration and fixtures."""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest


class RecordingSettings:
    """Host-like settings accessor backed by a live dict, with spied methods.

    ``get_all`` returns the live dict itself, as the host does, so tests can
    check that reconciliation never mutates what it reads.
    """

    def __init__(self, data=None):
        self.data = data if data is not None else {}
        self.get_all = Mock(side_effect=lambda: self.data)
        self.get = Mock(side_effect=lambda key: self.data.get(key))
        self.set = Mock(side_effect=self._set)

    def _set(self, key, value):
        self.data[key] = value


@pytest.fixture
def host_settings():
    """Empty recording accessor."""
    return RecordingSettings()


@pytest.fixture
def make_extension_api():
    """Build a host extension API around a recording accessor."""

    def _make(data=None):
        return SimpleNamespace(settings=RecordingSettings(data))

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove zotsync environment variables."""
    for key in ("ZOTSYNC_STORE_PATH", "ZOTSYNC_LOG_LEVEL", "ZOTSYNC_DEBUG"):
        monkeypatch.delenv(key, raising=False)
