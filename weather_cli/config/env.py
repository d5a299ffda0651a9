import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "Weather-Cli/0.0.1"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class WeatherEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    weather_log_level: str = "WARNING"
    weather_log_format: str = DEFAULT_LOG_FORMAT
    weather_user_agent: str = DEFAULT_USER_AGENT

    geocoding_url: str = "https://geocode.maps.co/search"
    geocoding_api_key: str | None = None

    forecast_url: str = "https://api.met.no/weatherapi/locationforecast/2.0/compact"
    request_timeout: float = 10.0

    @field_validator("weather_log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        # Formatter raises ValueError for a %-style string without any fields
        logging.Formatter(value)
        return value
