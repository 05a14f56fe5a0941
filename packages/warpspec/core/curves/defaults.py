"""Default warp specs for common synthesis parameters.

The table is built once at import time and exposed read-only. Lookup is by
exact name; there is no normalisation or fallback.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from types import MappingProxyType

from warpspec.core.curves.enums import CurveKind
from warpspec.core.curves.models import WarpSpec

logger = logging.getLogger(__name__)


class UnknownDefaultNameError(KeyError):
    """Raised when no spec is registered under a name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No default spec named {self.name!r}"


def _spec(minval: float, maxval: float, curve: CurveKind) -> WarpSpec:
    return WarpSpec(minval=minval, maxval=maxval, curve=curve)


_LIN = CurveKind.LINEAR
_EXP = CurveKind.EXPONENTIAL
_AMP = CurveKind.AMPLITUDE
_DB = CurveKind.DECIBEL
_DIVMUL = CurveKind.DIVMUL

_FIVE_MINUTES = 5 * 60
_FULL_RANGE = 1.0e38

DEFAULT_SPECS: Mapping[str, WarpSpec] = MappingProxyType(
    {
        # Frequencies
        "freq": _spec(20, 20000, _EXP),
        "lofreq": _spec(0.01, 100, _EXP),
        "widefreq": _spec(0.1, 20000, _EXP),
        "rq": _spec(0.001, 2, _EXP),
        "q": _spec(0.5, 100, _EXP),
        # Levels
        "amp": _spec(0, 10, _AMP),
        "amp1": _spec(0, 1, _AMP),
        "db": _spec(-96, 0, _DB),
        "boostcut": _spec(-20, 20, _DB),
        # Routing and switches
        "gate": _spec(0, 1, _LIN),
        "pan": _spec(-1, 1, _LIN),
        "out": _spec(0, 1000, _LIN),
        "_out": _spec(0, 1000, _LIN),
        "in": _spec(0, 1000, _LIN),
        # Envelopes and times
        "attack": _spec(1 / 20000, 10, _EXP),
        "release": _spec(1 / 20000, 10, _EXP),
        "compression": _spec(0, 20, _LIN),
        "delay": _spec(0, 1, _LIN),
        "rdur": _spec(0.0001, 1, _LIN),
        "time": _spec(0, _FIVE_MINUTES, _LIN),
        "transition_time": _spec(0, _FIVE_MINUTES, _LIN),
        "_transition_time": _spec(0, _FIVE_MINUTES, _LIN),
        # Ratios around unity
        "divmul2": _spec(0.5, 2, _DIVMUL),
        "divmul3": _spec(1 / 3, 3, _DIVMUL),
        "divmul5": _spec(1 / 5, 5, _DIVMUL),
        "divmul10": _spec(0.1, 10, _DIVMUL),
        "divmul100": _spec(0.01, 100, _DIVMUL),
        # Unbounded
        "any": _spec(-_FULL_RANGE, _FULL_RANGE, _LIN),
        "no": _spec(-_FULL_RANGE, _FULL_RANGE, _LIN),
    }
)


def get_default(name: str) -> WarpSpec:
    """Look up a default spec by name.

    Args:
        name: Parameter name, e.g. "freq" or "pan".

    Returns:
        The registered WarpSpec (immutable, shared).

    Raises:
        UnknownDefaultNameError: If the name is not registered.

    Example:
        >>> get_default("freq").describe()
        'exp [20, 20000]'
    """
    try:
        return DEFAULT_SPECS[name]
    except KeyError:
        logger.debug(f"Default spec lookup failed: {name!r}")
        raise UnknownDefaultNameError(name) from None


def list_defaults() -> list[str]:
    """List all default spec names, sorted."""
    return sorted(DEFAULT_SPECS)
