"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, designdemos.toml only contains
overrides.  An empty file (or none at all) reproduces the stock demos.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from designdemos.domain.color import parse_color


class GaugeConfig(BaseModel):
    """[gauge] section."""

    model_config = {"frozen": True}

    range_min: float = 0.0
    range_max: float = 10.0
    tick_step: float = Field(default=1.0, gt=0.0)
    size: float = Field(default=200.0, gt=0.0)
    style: str = "standard"
    sweep_steps: int = Field(default=10, ge=1)

    @model_validator(mode="after")
    def _check_range(self) -> Self:
        if not self.range_min < self.range_max:
            msg = f"range_min ({self.range_min}) must be below range_max ({self.range_max})"
            raise ValueError(msg)
        return self


class UberConfig(BaseModel):
    """[uber] section — one key per parameter of the monolithic gauge."""

    model_config = {"frozen": True}

    background_size: float = Field(default=200.0, gt=0.0)
    background_color: str = "blue"
    needle_width: float = Field(default=4.0, gt=0.0)
    needle_length: float = Field(default=75.0, gt=0.0)
    needle_color: str = "red"

    @field_validator("background_color", "needle_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        parse_color(value)
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".designdemos/plugins"


class DemoConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    gauge: GaugeConfig = Field(default_factory=GaugeConfig)
    uber: UberConfig = Field(default_factory=UberConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
