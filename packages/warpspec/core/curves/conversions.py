"""Decibel / linear amplitude conversions."""

from __future__ import annotations

import numpy as np


def db_to_amp(db: float) -> float:
    """Convert decibels to linear amplitude.

    Example:
        >>> db_to_amp(0.0)
        1.0
    """
    with np.errstate(over="ignore"):
        return float(np.power(10.0, db / 20.0))


def amp_to_db(amp: float) -> float:
    """Convert linear amplitude to decibels.

    Zero amplitude gives ``-inf`` and negative amplitude gives ``nan``;
    neither raises.

    Example:
        >>> amp_to_db(1.0)
        0.0
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(20.0 * np.log10(amp))
