"""
Forecast selection and rendering.

A renderer picks the timeseries entries relevant to a duration and turns
them into text. There is one renderer per output mode; ``render`` captures
the current time once and dispatches to the renderer for the request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone

from weather_cli.errors import MissingDataError
from weather_cli.forecast.models import DurationType, OutputMode, RenderRequest
from weather_cli.forecast.symbols import describe
from weather_cli.forecast.views import NextHoursForecast, TimeseriesEntry, WeatherData
from weather_cli.shared.logging_mixin import LoggingMixin

WEEK_SPAN_DAYS = 7


def render(
    weather: WeatherData, request: RenderRequest, now: datetime | None = None
) -> str:
    """Render ``weather`` for the duration and output mode in ``request``.

    Raises:
        MissingDataError: if a selected entry lacks a field the duration needs
    """
    current_time = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    renderer = get_renderer(request.output_mode)
    return renderer.render(
        weather.timeseries, request.duration, request.location_name, current_time
    )


def get_renderer(output_mode: OutputMode) -> ForecastRenderer:
    return _RENDERERS[output_mode]()


# =============================================================================
# Renderers
# =============================================================================


class ForecastRenderer(ABC, LoggingMixin):
    """Base class for all output modes"""

    @abstractmethod
    def render(
        self,
        timeseries: list[TimeseriesEntry],
        duration: DurationType,
        location_name: str,
        now: datetime,
    ) -> str: ...


class CompactRenderer(ForecastRenderer):
    """One line per selected entry: symbol description and temperature."""

    def render(
        self,
        timeseries: list[TimeseriesEntry],
        duration: DurationType,
        location_name: str,
        now: datetime,
    ) -> str:
        header = f"Weather for {location_name} "

        if duration is DurationType.NOW:
            entry = _closest_entry(timeseries, now)
            self.logger.debug("Closest entry to %s is %s", now, entry.time)
            return "\n".join(
                [
                    header + f"at {now:%H:%M}",
                    f"{_describe(entry.data.next_1_hours)} {_temperature(entry)}°C",
                ]
            )

        if duration is DurationType.WEEK:
            entries = _entries_between(timeseries, now, 0, WEEK_SPAN_DAYS)
            self.logger.debug("Selected %d of %d entries", len(entries), len(timeseries))
            lines = [header + "this week"]
            lines.extend(_format_week_line(entry) for entry in entries)
            return "\n".join(lines)

        day_offset = 1 if duration is DurationType.TOMORROW else 0
        entries = _entries_between(timeseries, now, day_offset, day_offset)
        self.logger.debug("Selected %d of %d entries", len(entries), len(timeseries))
        lines = [header + f"on {now:%A, %d %B}"]
        lines.extend(_format_hourly_line(entry) for entry in entries)
        return "\n".join(lines)


class DetailedRenderer(ForecastRenderer):
    def render(
        self,
        timeseries: list[TimeseriesEntry],
        duration: DurationType,
        location_name: str,
        now: datetime,
    ) -> str:
        return ""


class CompleteRenderer(ForecastRenderer):
    def render(
        self,
        timeseries: list[TimeseriesEntry],
        duration: DurationType,
        location_name: str,
        now: datetime,
    ) -> str:
        return ""


_RENDERERS: dict[OutputMode, type[ForecastRenderer]] = {
    OutputMode.COMPACT: CompactRenderer,
    OutputMode.DETAILED: DetailedRenderer,
    OutputMode.COMPLETE: CompleteRenderer,
}


# =============================================================================
# Selection Helpers
# =============================================================================


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _closest_entry(timeseries: list[TimeseriesEntry], now: datetime) -> TimeseriesEntry:
    """Entry with the smallest whole-second distance to ``now``; first one wins ties."""
    if not timeseries:
        raise MissingDataError()
    return min(
        timeseries, key=lambda entry: abs(int((entry.time - now).total_seconds()))
    )


def _day_offset(entry: TimeseriesEntry, now: datetime) -> int:
    return (entry.time.date() - now.date()).days


def _entries_between(
    timeseries: list[TimeseriesEntry], now: datetime, first_day: int, last_day: int
) -> list[TimeseriesEntry]:
    """Entries whose calendar day lies ``first_day``..``last_day`` days after today."""
    return [
        entry
        for entry in timeseries
        if first_day <= _day_offset(entry, now) <= last_day
    ]


# =============================================================================
# Formatting Helpers
# =============================================================================


def _describe(outlook: NextHoursForecast | None) -> str:
    if outlook is None:
        raise MissingDataError()
    return describe(outlook.summary.symbol_code)


def _temperature(entry: TimeseriesEntry) -> str:
    value = entry.data.instant.details.air_temperature
    if value is None:
        raise MissingDataError()
    return _format_number(value)


def _format_number(value: float) -> str:
    """Shortest round-tripping form, without a trailing `.0` on whole numbers."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _format_hourly_line(entry: TimeseriesEntry) -> str:
    return (
        f"{entry.time:%H:%M}: "
        f"{_describe(entry.data.next_1_hours)} {_temperature(entry)}°C"
    )


def _format_week_line(entry: TimeseriesEntry) -> str:
    return (
        f"{entry.time:%A %H:%M}: "
        f"{_describe(entry.data.next_12_hours)} {_temperature(entry)}°C"
    )
