from .logging_mixin import LoggingMixin, configure_from_env, configure_logging

__all__ = ["LoggingMixin", "configure_from_env", "configure_logging"]
