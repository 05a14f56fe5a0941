"""Curve kind enumeration."""

from __future__ import annotations

from enum import Enum


class CurveKind(str, Enum):
    """Shape of the mapping between control and parameter domains.

    Values are the short symbols used in preset files (``"exp"``, ``"db"``).
    """

    LINEAR = "lin"
    DIVMUL = "divmul"
    EXPONENTIAL = "exp"
    RAISED = "curve"  # Custom exponent, see WarpSpec.exponent
    COSINE = "cos"
    SINE = "sin"
    AMPLITUDE = "amp"
    DECIBEL = "db"


# Long spellings accepted wherever a curve name is parsed
CURVE_ALIASES: dict[str, CurveKind] = {
    "linear": CurveKind.LINEAR,
    "exponential": CurveKind.EXPONENTIAL,
    "raised": CurveKind.RAISED,
    "cosine": CurveKind.COSINE,
    "sine": CurveKind.SINE,
    "amplitude": CurveKind.AMPLITUDE,
    "decibel": CurveKind.DECIBEL,
}


def parse_curve_kind(name: str) -> CurveKind:
    """Resolve a curve symbol or long name to a CurveKind.

    Args:
        name: Symbol (``"exp"``) or long name (``"exponential"``), any case.

    Returns:
        Matching CurveKind.

    Raises:
        ValueError: If the name is not a known curve.

    Example:
        >>> parse_curve_kind("exponential")
        <CurveKind.EXPONENTIAL: 'exp'>
    """
    key = name.strip().lower()
    if key in CURVE_ALIASES:
        return CURVE_ALIASES[key]
    try:
        return CurveKind(key)
    except ValueError as exc:
        raise ValueError(f"Unknown curve kind: {name!r}") from exc
