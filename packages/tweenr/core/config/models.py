"""Configuration models for tweenr."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from tweenr.core.animation.values import InterpolationMethod


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")


class AnimationConfig(BaseModel):
    """Defaults applied to newly created curves."""

    model_config = ConfigDict(extra="ignore")

    default_method: InterpolationMethod = Field(
        default=InterpolationMethod.LINEAR, description="Interpolation method for new curves"
    )
    default_tension: float = Field(
        default=0.5, ge=0.0, description="Spline tension (scales finite-difference tangents)"
    )
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for the animation config."""
        return Path("tweenr.yaml")
