"""Configuration models for springr."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from springr.core.curves.damping import DEFAULT_MAX_ITERATIONS, DEFAULT_PRECISION
from springr.core.curves.diagnostics import DEFAULT_SAMPLES, DEFAULT_TOLERANCE
from springr.core.curves.models import CurveSettings


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")


class SearchConfig(BaseModel):
    """Damping search tuning."""

    model_config = ConfigDict(extra="forbid")

    precision: float = Field(
        default=DEFAULT_PRECISION, gt=0.0, description="Fixed gamma step size"
    )
    max_iterations: int = Field(
        default=DEFAULT_MAX_ITERATIONS, ge=1, description="Iteration cap before failing"
    )


class DiagnosticsConfig(BaseModel):
    """Self-test sampling and tolerance."""

    model_config = ConfigDict(extra="forbid")

    samples: int = Field(default=DEFAULT_SAMPLES, ge=2)
    tolerance: float = Field(default=DEFAULT_TOLERANCE, gt=0.0)


class VisualizationConfig(BaseModel):
    """Terminal visualizer settings."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=150, gt=0, description="Characters drawn at x(t) = 1")
    interval_ms: int = Field(default=32, gt=0, description="Polling interval")
    running_mode: bool = Field(
        default=True, description="Print a new line per frame instead of overwriting"
    )


class PresetConfig(BaseModel):
    """Named curve settings with an animation duration."""

    model_config = ConfigDict(extra="forbid")

    settings: CurveSettings
    duration_ms: int = Field(..., gt=0)
    description: str | None = None


def _default_presets() -> dict[str, PresetConfig]:
    return {
        "long": PresetConfig(
            settings=CurveSettings(overshoot=0.85, rest_position_runs=16),
            duration_ms=20000,
            description="Long running, lightly damped visualization",
        ),
        "mobile": PresetConfig(
            settings=CurveSettings(overshoot=0.25, rest_position_runs=4),
            duration_ms=2000,
            description="Typical mobile animation",
        ),
    }


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    search: SearchConfig = SearchConfig()
    diagnostics: DiagnosticsConfig = DiagnosticsConfig()
    visualization: VisualizationConfig = VisualizationConfig()
    presets: dict[str, PresetConfig] = Field(default_factory=_default_presets)

    @field_validator("presets", mode="after")
    @classmethod
    def _merge_default_presets(cls, value: dict[str, PresetConfig]) -> dict[str, PresetConfig]:
        """Configured presets extend (and may override) the built-in ones."""
        return {**_default_presets(), **value}

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("springr.yaml")

    def get_preset(self, name: str) -> PresetConfig:
        try:
            return self.presets[name]
        except KeyError as exc:
            available = ", ".join(sorted(self.presets)) or "none"
            raise KeyError(f"Unknown preset '{name}' (available: {available})") from exc
