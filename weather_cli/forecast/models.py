from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class DurationType(StrEnum):
    """Time window a forecast is rendered for"""

    NOW = "now"
    TODAY = "today"
    TOMORROW = "tomorrow"
    WEEK = "week"


class OutputMode(StrEnum):
    """Verbosity of the rendered forecast"""

    COMPACT = "compact"
    DETAILED = "detailed"
    COMPLETE = "complete"


class RenderRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    duration: DurationType = DurationType.NOW
    location_name: str
    output_mode: OutputMode = OutputMode.COMPACT
