import aiohttp
from pydantic import TypeAdapter

from weather_cli.config import WeatherEnv
from weather_cli.errors import LocationNotFoundError, ServiceError
from weather_cli.geocoding.views import GeoCodingData
from weather_cli.shared.logging_mixin import LoggingMixin

_RESULTS_ADAPTER = TypeAdapter(list[GeoCodingData])


class GeocodingClient(LoggingMixin):
    """Resolves free-text locations through the geocode.maps.co search API."""

    def __init__(self, env: WeatherEnv | None = None):
        self._env = env or WeatherEnv()

    def build_params(self, query: str) -> dict[str, str]:
        params = {"q": query}
        if self._env.geocoding_api_key:
            params["api_key"] = self._env.geocoding_api_key
        return params

    async def search(self, query: str) -> list[GeoCodingData]:
        """Return every candidate match for ``query``, best match first."""
        timeout = aiohttp.ClientTimeout(total=self._env.request_timeout)
        headers = {"User-Agent": self._env.weather_user_agent}

        self.logger.info("Geocoding %r", query)
        async with aiohttp.ClientSession(headers=headers, timeout=timeout) as session:
            async with session.get(
                self._env.geocoding_url, params=self.build_params(query)
            ) as response:
                if response.status != 200:
                    self.logger.error("Geocoding request failed: %d", response.status)
                    raise ServiceError("geocoding", response.status)

                raw_data = await response.json()

        return parse_results(raw_data)

    async def resolve(self, query: str) -> GeoCodingData:
        """
        Resolve ``query`` to its first match.

        Raises:
            LocationNotFoundError: if the geocoder returns no candidates
        """
        results = await self.search(query)
        if not results:
            raise LocationNotFoundError(query)

        location = results[0]
        self.logger.debug(
            "Resolved %r to %s (%d candidates)", query, location.display_name, len(results)
        )
        return location


def parse_results(raw_data: object) -> list[GeoCodingData]:
    return _RESULTS_ADAPTER.validate_python(raw_data)
