"""Pytest configuration.

The repository root is inserted into ``sys.path`` so the tests import the
:mod:`weather_cli` package without installing it first.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from tests.factories import NOW  # noqa: E402


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's environment and .env file out of the tests."""
    for name in (
        "WEATHER_LOG_LEVEL",
        "WEATHER_USER_AGENT",
        "GEOCODING_URL",
        "GEOCODING_API_KEY",
        "FORECAST_URL",
        "REQUEST_TIMEOUT",
        "WEATHER_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler and level changes made by ``configure_logging``."""
    lib_logger = logging.getLogger("weather_cli")
    handlers, level = list(lib_logger.handlers), lib_logger.level
    yield
    lib_logger.handlers[:] = handlers
    lib_logger.setLevel(level)
