"""Curve family: forward (map) and inverse (unmap) functions per curve kind.

Every ``*_map`` function receives a control value already clamped to
[0, 1] and returns a parameter value. Every ``*_unmap`` function receives a
parameter value already clipped to the spec range and returns a control
value in [0, 1].

Degenerate specs (zero ``minval`` on exponential curves, zero range on
linear unmap, non-positive amplitudes on decibel curves) yield ``inf`` or
``nan`` instead of raising.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import math
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from warpspec.core.curves.conversions import amp_to_db, db_to_amp
from warpspec.core.curves.enums import CurveKind
from warpspec.core.utils.math import safe_divide

if TYPE_CHECKING:
    from warpspec.core.curves.models import WarpSpec

CurveFn = Callable[["WarpSpec", float], float]

_HALF_PI = 0.5 * math.pi


# ============================================================================
# Numeric helpers
# ============================================================================


def _log(value: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(value))


def _pow(base: float, exponent: float) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.power(base, exponent))


def _unit_clip(value: float, low: float = 0.0) -> float:
    """Clip into [low, 1] while letting nan through."""
    return float(np.clip(value, low, 1.0))


# ============================================================================
# Linear
# ============================================================================


def lin_map(spec: WarpSpec, value: float) -> float:
    """Map [0, 1] linearly onto [minval, maxval].

    Example:
        >>> lin_map(WarpSpec(minval=-1, maxval=1), 0.75)
        0.5
    """
    return value * spec.range + spec.minval


def lin_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of lin_map."""
    return safe_divide(value - spec.minval, spec.range)


# ============================================================================
# Divide / multiply
# ============================================================================


def divmul_map(spec: WarpSpec, value: float) -> float:
    """Two linear segments meeting at 1.0 in the middle of the control range.

    The lower half of the control covers [minval, 1] and the upper half
    covers [1, maxval], so a ratio spec like 0.5..2 puts unity at 0.5.
    """
    if value < 0.5:
        return value * 2.0 * (1.0 - spec.minval) + spec.minval
    return (value - 0.5) * 2.0 * (spec.maxval - 1.0) + 1.0


def divmul_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of divmul_map."""
    if value < 1.0:
        return safe_divide(value - spec.minval, 1.0 - spec.minval) / 2.0
    return safe_divide(value - 1.0, spec.maxval - 1.0) / 2.0 + 0.5


# ============================================================================
# Exponential
# ============================================================================


def exp_map(spec: WarpSpec, value: float) -> float:
    """Geometric interpolation: equal control steps give equal ratios.

    Example:
        >>> round(exp_map(WarpSpec(minval=20, maxval=20000, curve="exp"), 0.5), 2)
        632.46
    """
    return _pow(spec.ratio, value) * spec.minval


def exp_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of exp_map."""
    return safe_divide(_log(safe_divide(value, spec.minval)), _log(spec.ratio))


# ============================================================================
# Raised (custom exponent)
# ============================================================================


def _raised_terms(spec: WarpSpec) -> tuple[float, float, float, float]:
    """Return (exponent, grow, a, b) for the raised curve formula."""
    if spec.exponent is None:
        raise ValueError("Raised curve requires an exponent")
    exponent = spec.exponent
    grow = _pow(math.e, exponent)
    a = safe_divide(spec.range, 1.0 - grow)
    b = spec.minval + a
    return exponent, grow, a, b


def curve_map(spec: WarpSpec, value: float) -> float:
    """Exponential-shaped curve with a free exponent.

    Positive exponents bend the curve so it moves slowly at first, negative
    exponents so it moves quickly at first. Large magnitudes are steeper.
    """
    _, grow, a, b = _raised_terms(spec)
    return b - a * _pow(grow, value)


def curve_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of curve_map."""
    exponent, _, a, b = _raised_terms(spec)
    return safe_divide(_log(safe_divide(b - value, a)), exponent)


# ============================================================================
# Cosine / Sine
# ============================================================================


def cos_map(spec: WarpSpec, value: float) -> float:
    """S-shaped half cosine: slow at both ends, fastest in the middle."""
    return lin_map(spec, 0.5 - math.cos(math.pi * value) * 0.5)


def cos_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of cos_map."""
    shaped = _unit_clip(1.0 - lin_unmap(spec, value) * 2.0, low=-1.0)
    return float(np.arccos(shaped)) / math.pi


def sin_map(spec: WarpSpec, value: float) -> float:
    """Quarter sine: fast at the start, flattening towards maxval."""
    return lin_map(spec, math.sin(_HALF_PI * value))


def sin_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of sin_map."""
    shaped = _unit_clip(lin_unmap(spec, value), low=-1.0)
    return float(np.arcsin(shaped)) / _HALF_PI


def sin_unmap_legacy(spec: WarpSpec, value: float) -> float:
    """Sine unmap as historically computed: ``asin(u) / 0.5 * pi``.

    This multiplies by pi instead of dividing by pi/2, so it does not invert
    sin_map (``sin_unmap_legacy(spec, spec.maxval)`` is ``pi ** 2`` rather
    than 1). Only useful to reproduce stored values from older sessions.
    """
    shaped = _unit_clip(lin_unmap(spec, value), low=-1.0)
    return float(np.arcsin(shaped)) / 0.5 * math.pi


# ============================================================================
# Amplitude / Decibel
# ============================================================================


def _square_law(value: float, span: float, start: float) -> float:
    # Descending ranges mirror the parabola so the slow end stays at the quiet end
    if span >= 0:
        return value * value * span + start
    inverse = 1.0 - value
    return (1.0 - inverse * inverse) * span + start


def _square_law_inverse(value: float, span: float, start: float) -> float:
    fraction = safe_divide(value - start, span)
    if span >= 0:
        return float(np.sqrt(_unit_clip(fraction)))
    return 1.0 - float(np.sqrt(_unit_clip(1.0 - fraction)))


def amp_map(spec: WarpSpec, value: float) -> float:
    """Perceptual amplitude curve (square law)."""
    return _square_law(value, spec.range, spec.minval)


def amp_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of amp_map."""
    return _square_law_inverse(value, spec.range, spec.minval)


def db_map(spec: WarpSpec, value: float) -> float:
    """Amplitude curve evaluated in linear amplitude, returned in decibels."""
    low = db_to_amp(spec.minval)
    span = db_to_amp(spec.maxval) - low
    return amp_to_db(_square_law(value, span, low))


def db_unmap(spec: WarpSpec, value: float) -> float:
    """Inverse of db_map."""
    low = db_to_amp(spec.minval)
    span = db_to_amp(spec.maxval) - low
    return _square_law_inverse(db_to_amp(value), span, low)


# ============================================================================
# Dispatch
# ============================================================================


@dataclass(frozen=True)
class CurveFunctions:
    """Forward and inverse function pair for one curve kind."""

    map: CurveFn
    unmap: CurveFn


CURVE_FUNCTIONS: Mapping[CurveKind, CurveFunctions] = MappingProxyType(
    {
        CurveKind.LINEAR: CurveFunctions(lin_map, lin_unmap),
        CurveKind.DIVMUL: CurveFunctions(divmul_map, divmul_unmap),
        CurveKind.EXPONENTIAL: CurveFunctions(exp_map, exp_unmap),
        CurveKind.RAISED: CurveFunctions(curve_map, curve_unmap),
        CurveKind.COSINE: CurveFunctions(cos_map, cos_unmap),
        CurveKind.SINE: CurveFunctions(sin_map, sin_unmap),
        CurveKind.AMPLITUDE: CurveFunctions(amp_map, amp_unmap),
        CurveKind.DECIBEL: CurveFunctions(db_map, db_unmap),
    }
)


def get_curve_functions(kind: CurveKind) -> CurveFunctions:
    """Return the map/unmap pair bound to a curve kind."""
    return CURVE_FUNCTIONS[kind]
