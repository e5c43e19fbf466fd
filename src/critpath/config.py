"""Project-level configuration loaded from critpath_config.yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .scheduler import SchedulingConfig

DEFAULT_CONFIG_NAME = "critpath_config.yaml"


class OutputConfig(BaseModel):
    """Configuration for CLI output."""

    show_dates: bool = True  # Show calendar dates when the schedule is anchored
    critical_marker: str = "*"


class ProjectConfig(BaseModel):
    """Root configuration model."""

    scheduler: SchedulingConfig = Field(default_factory=SchedulingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(config_path: Path | str) -> ProjectConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to critpath_config.yaml

    Returns:
        Validated ProjectConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        data: Any = yaml.safe_load(f)

    if not data:
        raise ValueError("Empty configuration file")
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a mapping")

    return ProjectConfig.model_validate(data)
