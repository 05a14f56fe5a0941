"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from warpspec.core.config.models import LoggingConfig, WarpConfig
from warpspec.core.utils.logging import configure_logging as _configure_root_logging

logger = logging.getLogger(__name__)

# Environment variables consulted when no explicit value is given
CONFIG_PATH_ENV = "WARPSPEC_CONFIG"
LOG_LEVEL_ENV = "WARPSPEC_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("presets.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                # safe_load returns None for empty files
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_warp_config(path: str | Path | None = None) -> WarpConfig:
    """Load and validate application configuration.

    When ``path`` is None the ``WARPSPEC_CONFIG`` environment variable is
    used; with neither, all defaults apply. ``WARPSPEC_LOG_LEVEL`` overrides
    the configured log level.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated WarpConfig

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = os.getenv(CONFIG_PATH_ENV) or None

    if path is not None:
        config = WarpConfig.model_validate(load_config(path))
        logger.debug(f"Loaded config from {path} ({len(config.presets)} presets)")
    else:
        config = WarpConfig()

    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        config = with_log_level(config, level)

    return config


def with_log_level(config: WarpConfig, level: str) -> WarpConfig:
    """Return a copy of config with the log level replaced.

    Raises:
        ValidationError: If level is not a valid level name
    """
    logging_config = LoggingConfig.model_validate(
        {**config.logging.model_dump(), "level": level.upper()}
    )
    return config.model_copy(update={"logging": logging_config})


def configure_logging(config: WarpConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: WarpConfig instance (loads default if None)
    """
    if config is None:
        config = load_warp_config()

    _configure_root_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
