"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from tweenr.core.config.models import AnimationConfig
from tweenr.core.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Returns:
        "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("tweenr.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a raw configuration dictionary from JSON or YAML.

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    text = path.read_text(encoding="utf-8")

    if fmt == "json":
        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            # safe_load returns None for empty files
            content = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root in {path} must be a mapping")
    return content


def load_animation_config(path: str | Path | None = None) -> AnimationConfig:
    """Load and validate animation configuration.

    Falls back to defaults when ``path`` is None and the default file is
    absent.

    Raises:
        FileNotFoundError: If an explicit ``path`` does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        path = AnimationConfig.default_path()
        if not path.exists():
            logger.debug("No config at %s, using defaults", path)
            return AnimationConfig()

    return AnimationConfig.model_validate(load_config(path))


def configure_logging_from_config(config: AnimationConfig | None = None) -> None:
    """Configure Python logging from the animation config."""
    if config is None:
        config = load_animation_config()

    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
