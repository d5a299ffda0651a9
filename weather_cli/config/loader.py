from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from weather_cli.forecast.models import DurationType, OutputMode


class RenderDefaults(BaseModel):
    """Defaults applied when the command line leaves an option unset"""

    model_config = ConfigDict(extra="forbid")

    duration: DurationType = DurationType.NOW
    output_mode: OutputMode = OutputMode.COMPACT


class CliConfig(BaseModel):
    """Main command line configuration"""

    defaults: RenderDefaults = Field(default_factory=RenderDefaults)


def load_config(path: str | Path) -> CliConfig:
    """
    Load and validate a YAML config file.

    Raises:
        FileNotFoundError: if the file does not exist
        RuntimeError: for YAML syntax errors or validation errors
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise RuntimeError(f"Invalid YAML in {p}: {e}") from e

    try:
        return CliConfig.model_validate(raw)
    except ValidationError as e:
        raise RuntimeError(f"Invalid config values in {p}:\n{e}") from e
