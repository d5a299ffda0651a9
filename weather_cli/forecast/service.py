import aiohttp

from weather_cli.config import WeatherEnv
from weather_cli.errors import ServiceError
from weather_cli.forecast.views import WeatherData
from weather_cli.shared.logging_mixin import LoggingMixin

# MET Norway rejects coordinates with more than four decimals
COORDINATE_PRECISION = 4


class ForecastClient(LoggingMixin):
    """Client for the MET Norway Locationforecast API."""

    def __init__(self, env: WeatherEnv | None = None):
        self._env = env or WeatherEnv()

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self._env.weather_user_agent}

    def build_params(self, latitude: float, longitude: float) -> dict[str, str]:
        return {
            "lat": str(round(latitude, COORDINATE_PRECISION)),
            "lon": str(round(longitude, COORDINATE_PRECISION)),
        }

    async def fetch(self, latitude: float, longitude: float) -> WeatherData:
        """Fetch the forecast for a coordinate pair and validate it."""
        params = self.build_params(latitude, longitude)
        timeout = aiohttp.ClientTimeout(total=self._env.request_timeout)

        self.logger.info("Fetching forecast for %s, %s", params["lat"], params["lon"])
        async with aiohttp.ClientSession(headers=self.headers, timeout=timeout) as session:
            async with session.get(self._env.forecast_url, params=params) as response:
                if response.status != 200:
                    self.logger.error("Forecast request failed: %d", response.status)
                    raise ServiceError("forecast", response.status)

                raw_data = await response.json()

        weather_data = WeatherData.model_validate(raw_data)
        self.logger.debug(
            "Received %d timeseries entries (updated %s)",
            len(weather_data.timeseries),
            weather_data.properties.meta.updated_at,
        )
        return weather_data
