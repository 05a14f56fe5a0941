"""Shared utilities for warpspec."""

from warpspec.core.utils.math import clamp, safe_divide

__all__ = [
    "clamp",
    "safe_divide",
]
