"""Configuration management for warpspec."""

from warpspec.core.config.loader import (
    configure_logging,
    detect_format,
    load_config,
    load_warp_config,
    with_log_level,
)
from warpspec.core.config.models import LoggingConfig, PresetConfig, WarpConfig

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_config",
    "load_warp_config",
    "with_log_level",
    # Models
    "LoggingConfig",
    "PresetConfig",
    "WarpConfig",
]
