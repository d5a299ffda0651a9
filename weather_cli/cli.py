import asyncio
from pathlib import Path

import aiohttp
import click
from dotenv import load_dotenv
from pydantic import ValidationError

from weather_cli import __version__
from weather_cli.config import WeatherEnv
from weather_cli.config.loader import RenderDefaults, load_config
from weather_cli.errors import WeatherError
from weather_cli.forecast import (
    DurationType,
    OutputMode,
    RenderRequest,
    WeatherData,
    render,
)
from weather_cli.forecast.service import ForecastClient
from weather_cli.geocoding import GeoCodingData, GeocodingClient
from weather_cli.shared import configure_from_env

load_dotenv()

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


async def fetch_forecast(
    location: str, env: WeatherEnv
) -> tuple[GeoCodingData, WeatherData]:
    """Geocode ``location`` and fetch the forecast for its first match."""
    place = await GeocodingClient(env).resolve(location)
    latitude, longitude = place.coordinates
    weather_data = await ForecastClient(env).fetch(latitude, longitude)
    return place, weather_data


def _load_defaults(config_path: Path | None) -> RenderDefaults:
    if config_path is None:
        return RenderDefaults()
    try:
        return load_config(config_path).defaults
    except RuntimeError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("location")
@click.option(
    "--duration",
    "-d",
    type=click.Choice([d.value for d in DurationType], case_sensitive=False),
    default=None,
    help="Duration of the forecast  [default: now]",
)
@click.option(
    "--output-mode",
    "-o",
    type=click.Choice([m.value for m in OutputMode], case_sensitive=False),
    default=None,
    help="Output format of the forecast  [default: compact]",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with default duration and output mode",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override WEATHER_LOG_LEVEL for this run",
)
@click.version_option(__version__, prog_name="weather")
def main(location, duration, output_mode, config_path, log_level):
    """Show the weather forecast for LOCATION."""
    try:
        env = WeatherEnv()
    except ValidationError as e:
        raise click.ClickException(f"Invalid environment settings:\n{e}") from e
    configure_from_env(env, log_level)

    defaults = _load_defaults(config_path)

    try:
        place, weather_data = asyncio.run(fetch_forecast(location, env))
        request = RenderRequest(
            duration=DurationType(duration.lower()) if duration else defaults.duration,
            location_name=place.display_name,
            output_mode=(
                OutputMode(output_mode.lower()) if output_mode else defaults.output_mode
            ),
        )
        output = render(weather_data, request)
    except (WeatherError, aiohttp.ClientError, TimeoutError) as e:
        raise click.ClickException(str(e) or type(e).__name__) from e
    except ValidationError as e:
        raise click.ClickException(f"Unexpected response from upstream service:\n{e}") from e

    click.echo(output)


if __name__ == "__main__":
    main()
