"""Formatter configuration: settings schema and outlaw.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


CONFIG_FILE = "outlaw.yaml"
ENV_PREFIX = "OUTLAW_"


class Settings(BaseModel):
    """Immutable formatting settings passed explicitly through the pipeline."""
    model_config = ConfigDict(frozen=True)

    indent_shift:        int = Field(default=4,   ge=1, description="Spaces per nesting level")
    max_line_length:     int = Field(default=119, ge=1, description="Wrap body lines longer than this")
    max_wrap_iterations: int = Field(default=100, ge=1, description="Ceiling on line-wrap passes per block")

    header_prefix:            str = Field(default="=== ", min_length=1)
    bullet_prefix:            str = Field(default="* ",   min_length=1)
    todo_prefix:              str = Field(default="[",    min_length=1)
    todo_prefix_length:       int = Field(default=4, ge=1, description="Width of '[ ] ' / '[x] '")
    continuation_prefix:      str = Field(default="  ")
    preformatted_prefix:      str = Field(default="| ",   min_length=1)
    quote_prefix:             str = Field(default="> ",   min_length=1)
    fence_backtick:           str = Field(default="```",  min_length=1)
    fence_tilde:              str = Field(default="~~~",  min_length=1)

    log_level: str = Field(default="WARNING", description="Log level for diagnostics on stderr")

    @property
    def fence_markers(self) -> tuple[str, str]:
        return self.fence_backtick, self.fence_tilde


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from outlaw.yaml, then OUTLAW_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
