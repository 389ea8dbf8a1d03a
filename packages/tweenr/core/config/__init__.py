"""Configuration management for tweenr."""

from tweenr.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_animation_config,
    load_config,
)
from tweenr.core.config.models import AnimationConfig, LoggingConfig

__all__ = [
    "AnimationConfig",
    "LoggingConfig",
    "configure_logging_from_config",
    "detect_format",
    "load_animation_config",
    "load_config",
]
