"""Sampling of warp specs over the control domain.

Produces (control, value) tables for inspection and plotting.
"""

from __future__ import annotations

from dataclasses import dataclass

from warpspec.core.curves.models import WarpSpec


@dataclass(frozen=True)
class SamplePoint:
    """One control value and the parameter value it maps to."""

    control: float
    value: float


def control_grid(n: int) -> list[float]:
    """Generate N evenly-spaced control values covering [0, 1].

    Both endpoints are included, unlike a looping time grid.

    Args:
        n: Number of samples. Must be >= 2.

    Returns:
        List of N values from 0.0 to 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> control_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]


def sample_spec(spec: WarpSpec, n: int) -> list[SamplePoint]:
    """Map an evenly-spaced control grid through a spec.

    Args:
        spec: Spec to sample.
        n: Number of samples (>= 2).

    Returns:
        SamplePoints in increasing control order.
    """
    return [SamplePoint(control=c, value=spec.map(c)) for c in control_grid(n)]
