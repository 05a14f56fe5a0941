"""Tests for decibel/amplitude conversions."""

from __future__ import annotations

import math

import pytest

from warpspec.core.curves.conversions import amp_to_db, db_to_amp


class TestDbToAmp:
    def test_zero_db_is_unity(self) -> None:
        assert db_to_amp(0.0) == 1.0

    def test_twenty_db_steps(self) -> None:
        """Every 20 dB is a factor of ten."""
        assert db_to_amp(20.0) == pytest.approx(10.0)
        assert db_to_amp(-40.0) == pytest.approx(0.01)

    def test_half_amplitude(self) -> None:
        assert db_to_amp(-6.0206) == pytest.approx(0.5, abs=1e-5)


class TestAmpToDb:
    def test_unity_is_zero_db(self) -> None:
        assert amp_to_db(1.0) == 0.0

    def test_inverse_of_db_to_amp(self) -> None:
        for db in (-96.0, -20.0, -3.0, 0.0, 12.0):
            assert amp_to_db(db_to_amp(db)) == pytest.approx(db)

    def test_zero_amplitude_is_negative_infinity(self) -> None:
        """Zero amplitude does not raise."""
        assert amp_to_db(0.0) == -math.inf

    def test_negative_amplitude_is_nan(self) -> None:
        """Negative amplitude does not raise."""
        assert math.isnan(amp_to_db(-1.0))
