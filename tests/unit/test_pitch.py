"""Tests for midi/frequency conversion."""

from __future__ import annotations

import math

import pytest

from warpspec.core.pitch import freq_to_midi, midi_to_freq


class TestMidiToFreq:
    """Tests for midi_to_freq()."""

    def test_a4(self) -> None:
        """Note 69 is 440 Hz."""
        assert midi_to_freq(69) == 440.0

    def test_octave_doubles(self) -> None:
        """Twelve semitones up doubles the frequency."""
        assert midi_to_freq(81) == 880.0
        assert midi_to_freq(57) == 220.0

    def test_middle_c(self) -> None:
        """Note 60 is middle C."""
        assert midi_to_freq(60) == pytest.approx(261.6256, abs=1e-4)

    def test_fractional_note(self) -> None:
        """Fractional notes give detuned frequencies."""
        assert midi_to_freq(69.5) == pytest.approx(440.0 * 2 ** (0.5 / 12))


class TestFreqToMidi:
    """Tests for freq_to_midi()."""

    def test_a4(self) -> None:
        """440 Hz is note 69."""
        assert freq_to_midi(440.0) == 69.0

    def test_inverse(self) -> None:
        """freq_to_midi undoes midi_to_freq."""
        for note in (0.0, 21.0, 60.0, 60.25, 127.0):
            assert freq_to_midi(midi_to_freq(note)) == pytest.approx(note, abs=1e-9)

    def test_zero_is_negative_infinity(self) -> None:
        """Zero hertz does not raise."""
        assert freq_to_midi(0.0) == -math.inf

    def test_negative_is_nan(self) -> None:
        """Negative frequencies do not raise."""
        assert math.isnan(freq_to_midi(-440.0))
