import logging
from typing import ClassVar

from weather_cli.config import DEFAULT_LOG_FORMAT, WeatherEnv

LIBRARY_NAME = "weather_cli"

logger = logging.getLogger(LIBRARY_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: str = "WARNING", fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Send ``weather_cli`` records at ``level`` and above to stderr.

    Replaces any handler installed by an earlier call, so the CLI can
    reconfigure after the import-time setup.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    lib_logger = logging.getLogger(LIBRARY_NAME)
    lib_logger.handlers.clear()
    lib_logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    lib_logger.addHandler(handler)


def configure_from_env(env: WeatherEnv, level: str | None = None) -> None:
    configure_logging(level or env.weather_log_level, env.weather_log_format)


try:
    configure_from_env(WeatherEnv())
except ValueError:
    # bad settings are reported to the user when the CLI loads them
    configure_logging()


class LoggingMixin:
    logger: ClassVar[logging.Logger]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.logger = logging.getLogger(f"{LIBRARY_NAME}.{cls.__name__}")
