"""
Exceptions raised while looking up and rendering a forecast.
"""


class WeatherError(Exception):
    """Base class for every error the weather CLI reports to the user"""


class MissingDataError(WeatherError):
    """A selected timeseries entry lacks a field the requested duration needs"""

    def __init__(self) -> None:
        super().__init__("Missing data")


class LocationNotFoundError(WeatherError):
    def __init__(self, query: str) -> None:
        super().__init__(f"No location found for {query!r}")
        self.query = query


class ServiceError(WeatherError):
    """An upstream service answered with an unexpected HTTP status"""

    def __init__(self, service: str, status: int) -> None:
        super().__init__(f"Error while fetching {service} data: {status}")
        self.service = service
        self.status = status
