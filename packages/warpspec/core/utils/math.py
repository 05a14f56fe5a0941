"""Math utilities shared by the curve engine."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning ``inf``/``nan`` instead of raising on zero.

    Example:
        >>> safe_divide(1.0, 0.0)
        inf
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(numerator, denominator))
