"""Midi note number <-> frequency conversion (equal temperament, A4 = 440 Hz)."""

from __future__ import annotations

import numpy as np

A4_FREQ = 440.0
A4_NOTE = 69


def midi_to_freq(note: float) -> float:
    """Convert a (fractional) midi note number to hertz.

    Example:
        >>> midi_to_freq(69)
        440.0
    """
    return A4_FREQ * 2.0 ** ((note - A4_NOTE) / 12.0)


def freq_to_midi(freq: float) -> float:
    """Convert hertz to a fractional midi note number.

    Zero gives ``-inf`` and negative frequencies give ``nan``.

    Example:
        >>> freq_to_midi(880.0)
        81.0
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(12.0 * np.log2(freq / A4_FREQ) + A4_NOTE)
