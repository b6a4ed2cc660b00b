"""Tests for curve sampling."""

import pytest

from springr.core.curves.models import CurveParams
from springr.core.curves.oscillator import evaluate
from springr.core.curves.sampling import sample_curve, sample_uniform_grid


class TestSampleUniformGrid:
    """Tests for sample_uniform_grid function."""

    def test_sample_uniform_grid_n4_returns_quarters(self) -> None:
        """Test sample_uniform_grid(4) returns [0.0, 0.25, 0.5, 0.75]."""
        assert sample_uniform_grid(4) == [0.0, 0.25, 0.5, 0.75]

    def test_sample_uniform_grid_matches_self_test_grid(self) -> None:
        """Test 100 samples are i / 100 and never include t=1."""
        grid = sample_uniform_grid(100)
        assert len(grid) == 100
        assert grid[1] == 0.01
        assert grid[-1] == 0.99

    @pytest.mark.parametrize("n", [1, 0, -1])
    def test_sample_uniform_grid_too_small_raises(self, n: int) -> None:
        """Test n < 2 raises ValueError."""
        with pytest.raises(ValueError, match="n must be >= 2"):
            sample_uniform_grid(n)


class TestSampleCurve:
    """Tests for sample_curve function."""

    def test_samples_match_evaluate(self, typical_params: CurveParams) -> None:
        """Test sampled values equal scalar evaluation on the grid."""
        points = sample_curve(typical_params, 20)

        assert len(points) == 20
        assert points[0].t == 0.0
        assert points[0].v == 0.0
        for p in points:
            assert p.v == pytest.approx(
                evaluate(typical_params.omega, typical_params.gamma, p.t), abs=1e-12
            )

    def test_samples_overshoot(self, typical_params: CurveParams) -> None:
        """Test the sampled curve rises above 1."""
        points = sample_curve(typical_params, 100)
        assert max(p.v for p in points) > 1.15
