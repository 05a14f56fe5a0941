"""Configuration models for warpspec."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from warpspec.core.curves.models import WarpSpec


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout if unset)")


class PresetConfig(BaseModel):
    """A named spec declared in a config file.

    ``curve`` takes a curve name ("lin", "exp", "exponential", ...) or a
    number, which selects a raised curve with that exponent.

    Example:
        >>> PresetConfig(minval=100, maxval=8000, curve="exp").to_spec().describe()
        'exp [100, 8000]'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    minval: float
    maxval: float
    curve: str | float = "lin"
    description: str | None = None

    def to_spec(self) -> WarpSpec:
        """Build the WarpSpec for this preset."""
        return WarpSpec.create(self.minval, self.maxval, self.curve)


class WarpConfig(BaseModel):
    """Application configuration: logging and user presets."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = LoggingConfig()
    presets: dict[str, PresetConfig] = Field(default_factory=dict)
    include_defaults: bool = Field(
        default=True, description="Layer presets over the built-in default specs"
    )
