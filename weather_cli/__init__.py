"""Command-line weather lookup backed by MET Norway forecasts."""

__version__ = "0.1.0"
