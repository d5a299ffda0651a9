from .env import DEFAULT_LOG_FORMAT, DEFAULT_USER_AGENT, WeatherEnv

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_USER_AGENT",
    "WeatherEnv",
]
