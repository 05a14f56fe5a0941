"""Tests for control-grid sampling."""

from __future__ import annotations

import pytest

from warpspec.core.curves.models import WarpSpec
from warpspec.core.curves.sampling import SamplePoint, control_grid, sample_spec


class TestControlGrid:
    """Tests for control_grid()."""

    def test_includes_both_endpoints(self) -> None:
        """Grid starts at 0.0 and ends at 1.0."""
        assert control_grid(5) == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_two_points(self) -> None:
        """Smallest grid is just the endpoints."""
        assert control_grid(2) == [0.0, 1.0]

    @pytest.mark.parametrize("n", [1, 0, -3])
    def test_too_few_points_raises(self, n: int) -> None:
        """Fewer than two points is rejected."""
        with pytest.raises(ValueError, match="n must be >= 2"):
            control_grid(n)


class TestSampleSpec:
    """Tests for sample_spec()."""

    def test_samples_follow_map(self, freq_spec: WarpSpec) -> None:
        """Each point is the spec's map of its control value."""
        points = sample_spec(freq_spec, 3)

        assert [p.control for p in points] == [0.0, 0.5, 1.0]
        assert points[0] == SamplePoint(control=0.0, value=20.0)
        assert points[1].value == pytest.approx(632.4555, abs=1e-3)
        assert points[2].value == pytest.approx(20000.0)

    def test_sample_point_is_frozen(self) -> None:
        """SamplePoint cannot be modified."""
        point = SamplePoint(control=0.0, value=1.0)
        with pytest.raises(AttributeError):
            point.value = 2.0  # type: ignore[misc]
