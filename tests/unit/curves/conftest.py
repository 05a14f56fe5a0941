"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from warpspec.core.curves.enums import CurveKind
from warpspec.core.curves.models import WarpSpec

# One well-formed spec per curve shape, both orientations where it matters
WELL_FORMED_SPECS: dict[str, WarpSpec] = {
    "linear": WarpSpec(minval=0, maxval=10, curve=CurveKind.LINEAR),
    "linear_descending": WarpSpec(minval=1, maxval=-1, curve=CurveKind.LINEAR),
    "divmul": WarpSpec(minval=0.5, maxval=2, curve=CurveKind.DIVMUL),
    "divmul100": WarpSpec(minval=0.01, maxval=100, curve=CurveKind.DIVMUL),
    "exponential": WarpSpec(minval=20, maxval=20000, curve=CurveKind.EXPONENTIAL),
    "exponential_descending": WarpSpec(minval=10, maxval=0.01, curve=CurveKind.EXPONENTIAL),
    "raised_negative": WarpSpec(minval=0, maxval=1, curve=CurveKind.RAISED, exponent=-4),
    "raised_positive": WarpSpec(minval=10, maxval=100, curve=CurveKind.RAISED, exponent=3),
    "cosine": WarpSpec(minval=0, maxval=1, curve=CurveKind.COSINE),
    "sine": WarpSpec(minval=0, maxval=1, curve=CurveKind.SINE),
    "amplitude": WarpSpec(minval=0, maxval=10, curve=CurveKind.AMPLITUDE),
    "amplitude_descending": WarpSpec(minval=10, maxval=0, curve=CurveKind.AMPLITUDE),
    "decibel": WarpSpec(minval=-96, maxval=0, curve=CurveKind.DECIBEL),
    "decibel_descending": WarpSpec(minval=0, maxval=-96, curve=CurveKind.DECIBEL),
}

CONTROL_VALUES = [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0]


@pytest.fixture(params=sorted(WELL_FORMED_SPECS))
def well_formed_spec(request: pytest.FixtureRequest) -> WarpSpec:
    """Each well-formed spec in turn."""
    return WELL_FORMED_SPECS[request.param]


@pytest.fixture(params=CONTROL_VALUES)
def control_value(request: pytest.FixtureRequest) -> float:
    """Each sample control value in turn."""
    return request.param


@pytest.fixture
def sine_spec() -> WarpSpec:
    """Unit-range sine spec."""
    return WarpSpec(minval=0, maxval=1, curve=CurveKind.SINE)
