"""Board configuration loaded from an optional JSON file."""
from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from roughsketch.renderer import RoughOptions

CONFIG_ENV_VAR = "ROUGHSKETCH_CONFIG"

ToolLiteral = Literal["line", "rectangle", "selection"]

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be read or validated."""


class BoardConfig(BaseModel):
    roughness: float = Field(1.0, ge=0.0, le=10.0, description="Jitter strength of hand-drawn strokes.")
    bowing: float = Field(1.0, ge=0.0, le=10.0, description="How far strokes bend away from the straight edge.")
    stroke_width: float = Field(1.5, gt=0.0, le=20.0, description="Pen width in pixels.")
    stroke_color: str = Field("#1e1e1e", description="Pen colour as a hex string.")
    seed: Optional[int] = Field(None, description="Fixed jitter seed; leave empty for fresh noise.")
    default_tool: Optional[ToolLiteral] = Field("line", description="Tool active when the window opens.")
    window_width: int = Field(1200, ge=200, le=10000)
    window_height: int = Field(800, ge=200, le=10000)
    log_level: str = Field("INFO", description="Level for the roughsketch logger.")

    @field_validator("stroke_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        value = value.strip()
        if not _HEX_COLOR.match(value):
            raise ValueError(f"'{value}' is not a hex colour")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def rough_options(self) -> RoughOptions:
        return RoughOptions(
            roughness=self.roughness,
            bowing=self.bowing,
            stroke_width=self.stroke_width,
            stroke_color=self.stroke_color,
        )


def default_config_path() -> Optional[Path]:
    raw = os.getenv(CONFIG_ENV_VAR)
    if not raw:
        return None
    return Path(raw).expanduser()


def load_config(path: str | Path | None = None) -> BoardConfig:
    """Read ``path`` (or ``$ROUGHSKETCH_CONFIG``); defaults when no file is given."""
    config_path = Path(path) if path is not None else default_config_path()
    if config_path is None:
        return BoardConfig()
    if not config_path.exists():
        raise ConfigError(f"Config file '{config_path}' does not exist")
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not read config file '{config_path}': {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{config_path}' must contain a JSON object")
    try:
        return BoardConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in '{config_path}': {exc}") from exc
