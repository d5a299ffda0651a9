"""Forecast data model, symbol labels and text rendering."""

from .models import DurationType, OutputMode, RenderRequest
from .rendering import render
from .symbols import describe
from .views import WeatherData

__all__ = [
    "DurationType",
    "OutputMode",
    "RenderRequest",
    "WeatherData",
    "describe",
    "render",
]
