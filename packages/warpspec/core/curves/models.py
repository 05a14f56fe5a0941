"""Warp spec value object.

A WarpSpec binds a parameter range to a curve kind and converts between
the normalized control domain [0, 1] and the parameter domain:

- ``map``: control value -> parameter value
- ``unmap``: parameter value -> control value

Specs are frozen pydantic models, so they compare by value, hash, and
serialize with ``model_dump()``. The curve functions are looked up per call
from the dispatch table rather than stored on the instance.
"""

from __future__ import annotations

import logging
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from warpspec.core.curves.enums import CurveKind, parse_curve_kind
from warpspec.core.curves.functions import get_curve_functions
from warpspec.core.utils.math import clamp, safe_divide

logger = logging.getLogger(__name__)

# Raised-curve exponents closer to zero than this are replaced by it
MIN_EXPONENT = 0.001


class WarpSpec(BaseModel):
    """Numeric range plus curve shape for one parameter.

    ``minval`` and ``maxval`` may be given in either order; a descending
    range inverts the sense of the curve. ``exponent`` is used only by
    ``CurveKind.RAISED`` and is required there.

    Attributes:
        minval: Parameter value at control 0.
        maxval: Parameter value at control 1.
        curve: Curve kind used by map/unmap.
        exponent: Curvature of a RAISED curve.

    Example:
        >>> spec = WarpSpec(minval=20, maxval=20000, curve=CurveKind.EXPONENTIAL)
        >>> round(spec.map(0.5), 2)
        632.46
        >>> round(spec.unmap(632.46), 3)
        0.5
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    minval: float = Field(..., description="Parameter value at control 0")
    maxval: float = Field(..., description="Parameter value at control 1")
    curve: CurveKind = Field(default=CurveKind.LINEAR, description="Curve shape")
    exponent: float | None = Field(default=None, description="RAISED curve exponent")

    @field_validator("exponent")
    @classmethod
    def _substitute_near_zero_exponent(cls, value: float | None) -> float | None:
        """Keep the raised curve away from its zero-exponent singularity."""
        if value is not None and -MIN_EXPONENT < value < MIN_EXPONENT:
            logger.debug(f"Curve exponent {value} too close to zero, using {MIN_EXPONENT}")
            return MIN_EXPONENT
        return value

    @model_validator(mode="after")
    def _validate_exponent_matches_curve(self) -> WarpSpec:
        """Validate that exponent is present exactly for RAISED curves."""
        if self.curve is CurveKind.RAISED and self.exponent is None:
            raise ValueError("RAISED curve requires an exponent")
        if self.curve is not CurveKind.RAISED and self.exponent is not None:
            raise ValueError(f"exponent only applies to RAISED curves, not {self.curve.value!r}")
        return self

    @classmethod
    def create(
        cls,
        minval: float,
        maxval: float,
        curve: CurveKind | str | float = CurveKind.LINEAR,
    ) -> Self:
        """Build a spec from a curve kind, a curve name, or an exponent.

        A numeric ``curve`` selects a RAISED curve with that exponent, so
        ``WarpSpec.create(0, 1, -4)`` is a fast-start curve.

        Args:
            minval: Parameter value at control 0.
            maxval: Parameter value at control 1.
            curve: CurveKind, curve name ("exp", "exponential", ...) or exponent.

        Returns:
            New WarpSpec.

        Raises:
            ValueError: If ``curve`` is an unknown name.

        Example:
            >>> WarpSpec.create(0.5, 2, "divmul").curve
            <CurveKind.DIVMUL: 'divmul'>
        """
        if isinstance(curve, CurveKind):
            return cls(minval=minval, maxval=maxval, curve=curve)
        if isinstance(curve, str):
            return cls(minval=minval, maxval=maxval, curve=parse_curve_kind(curve))
        return cls(minval=minval, maxval=maxval, curve=CurveKind.RAISED, exponent=curve)

    @property
    def range(self) -> float:
        """Signed width of the parameter range (``maxval - minval``)."""
        return self.maxval - self.minval

    @property
    def ratio(self) -> float:
        """``maxval / minval``; ``inf`` or ``nan`` when minval is zero."""
        return safe_divide(self.maxval, self.minval)

    def clip(self, value: float) -> float:
        """Clamp a parameter value into the spec range, whatever its orientation."""
        low = min(self.minval, self.maxval)
        high = max(self.minval, self.maxval)
        return clamp(value, low, high)

    def map(self, value: float) -> float:
        """Convert a control value to a parameter value.

        The control value is clamped to [0, 1] first.
        """
        return get_curve_functions(self.curve).map(self, clamp(value, 0.0, 1.0))

    def unmap(self, value: float) -> float:
        """Convert a parameter value to a control value.

        The parameter value is clipped to the spec range first.
        """
        return get_curve_functions(self.curve).unmap(self, self.clip(value))

    @property
    def shape(self) -> str:
        """Curve symbol, with the exponent for raised curves (``"curve(-4)"``)."""
        if self.curve is CurveKind.RAISED:
            return f"curve({self.exponent:g})"
        return self.curve.value

    def describe(self) -> str:
        """Short human-readable form, e.g. ``"exp [20, 20000]"``."""
        return f"{self.shape} [{self.minval:g}, {self.maxval:g}]"
