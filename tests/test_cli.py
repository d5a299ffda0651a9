import logging
from datetime import datetime, timedelta, timezone

import aiohttp
import pytest
from click.testing import CliRunner

from tests.factories import make_entry, make_weather
from weather_cli import __version__, cli
from weather_cli.errors import LocationNotFoundError, MissingDataError
from weather_cli.forecast.models import DurationType, OutputMode
from weather_cli.geocoding.views import GeoCodingData

OSLO = GeoCodingData(lat="59.9133301", lon="10.7389701", display_name="Oslo, Norway")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fetched(monkeypatch):
    """Replace the network lookups with a canned forecast around the current time."""
    now = datetime.now(timezone.utc)
    weather = make_weather(
        [make_entry(now + timedelta(minutes=minutes)) for minutes in (-90, 0, 90)]
    )
    calls = []

    async def fake_fetch_forecast(location, env):
        calls.append(location)
        return OSLO, weather

    monkeypatch.setattr(cli, "fetch_forecast", fake_fetch_forecast)
    return calls


@pytest.fixture
def rendered(monkeypatch, fetched):
    requests = []

    def fake_render(weather_data, request):
        requests.append(request)
        return "rendered forecast"

    monkeypatch.setattr(cli, "render", fake_render)
    return requests


def test_prints_current_weather(runner, fetched):
    result = runner.invoke(cli.main, ["Oslo"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith("Weather for Oslo, Norway at ")
    assert lines[1] == "☀️ Clear Sky (Day) 5°C"
    assert fetched == ["Oslo"]


def test_defaults_to_now_and_compact(runner, rendered):
    result = runner.invoke(cli.main, ["Oslo"])

    assert result.exit_code == 0, result.output
    assert result.output == "rendered forecast\n"
    assert rendered[0].duration is DurationType.NOW
    assert rendered[0].output_mode is OutputMode.COMPACT
    assert rendered[0].location_name == "Oslo, Norway"


def test_duration_and_output_mode_options(runner, rendered):
    result = runner.invoke(cli.main, ["Oslo", "-d", "week", "--output-mode", "Detailed"])

    assert result.exit_code == 0, result.output
    assert rendered[0].duration is DurationType.WEEK
    assert rendered[0].output_mode is OutputMode.DETAILED


def test_config_file_supplies_defaults(runner, rendered, tmp_path):
    config = tmp_path / "weather.yaml"
    config.write_text(
        "defaults:\n  duration: tomorrow\n  output_mode: complete\n", encoding="utf-8"
    )

    result = runner.invoke(cli.main, ["Oslo", "--config", str(config), "-o", "compact"])

    assert result.exit_code == 0, result.output
    assert rendered[0].duration is DurationType.TOMORROW
    assert rendered[0].output_mode is OutputMode.COMPACT


def test_invalid_config_file_exits_with_error(runner, rendered, tmp_path):
    config = tmp_path / "weather.yaml"
    config.write_text("defaults:\n  duration: fortnight\n", encoding="utf-8")

    result = runner.invoke(cli.main, ["Oslo", "--config", str(config)])

    assert result.exit_code == 1
    assert "Invalid config values" in result.output
    assert rendered == []


def test_invalid_duration_is_a_usage_error(runner, fetched):
    result = runner.invoke(cli.main, ["Oslo", "--duration", "fortnight"])

    assert result.exit_code == 2
    assert fetched == []


def test_missing_data_exits_with_error(runner, fetched, monkeypatch):
    def failing_render(weather_data, request):
        raise MissingDataError()

    monkeypatch.setattr(cli, "render", failing_render)

    result = runner.invoke(cli.main, ["Oslo"])

    assert result.exit_code == 1
    assert "Missing data" in result.output


def test_unknown_location_exits_with_error(runner, monkeypatch):
    async def not_found(location, env):
        raise LocationNotFoundError(location)

    monkeypatch.setattr(cli, "fetch_forecast", not_found)

    result = runner.invoke(cli.main, ["Atlantis"])

    assert result.exit_code == 1
    assert "No location found for 'Atlantis'" in result.output


def test_network_failure_exits_with_error(runner, monkeypatch):
    async def offline(location, env):
        raise aiohttp.ClientConnectionError("Cannot connect to host")

    monkeypatch.setattr(cli, "fetch_forecast", offline)

    result = runner.invoke(cli.main, ["Oslo"])

    assert result.exit_code == 1
    assert "Cannot connect to host" in result.output


def test_invalid_environment_setting_exits_with_error(runner, fetched, monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "ten")

    result = runner.invoke(cli.main, ["Oslo"])

    assert result.exit_code == 1
    assert "Invalid environment settings" in result.output
    assert "request_timeout" in result.output
    assert fetched == []


def test_log_settings_come_from_environment(runner, rendered, monkeypatch):
    monkeypatch.setenv("WEATHER_LOG_LEVEL", "INFO")
    monkeypatch.setenv("WEATHER_LOG_FORMAT", "%(levelname)s|%(message)s")

    result = runner.invoke(cli.main, ["Oslo"])

    assert result.exit_code == 0, result.output
    lib_logger = logging.getLogger("weather_cli")
    assert lib_logger.level == logging.INFO
    record = logging.makeLogRecord({"msg": "hello", "levelname": "INFO"})
    assert lib_logger.handlers[0].format(record) == "INFO|hello"


def test_log_level_option_overrides_environment(runner, rendered, monkeypatch):
    monkeypatch.setenv("WEATHER_LOG_LEVEL", "ERROR")

    result = runner.invoke(cli.main, ["Oslo", "--log-level", "debug"])

    assert result.exit_code == 0, result.output
    assert logging.getLogger("weather_cli").level == logging.DEBUG


def test_version(runner):
    result = runner.invoke(cli.main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
