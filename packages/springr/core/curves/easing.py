"""Spring easing function built on the derived oscillator parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from springr.core.curves.damping import DEFAULT_MAX_ITERATIONS, DEFAULT_PRECISION
from springr.core.curves.derivation import derive_params
from springr.core.curves.models import CurveParams, CurvePoint, CurveSettings
from springr.core.curves.oscillator import evaluate
from springr.core.curves.sampling import sample_curve


class SpringEasing:
    """Callable easing backed by a damped oscillator.

    Parameters are derived once on construction; evaluation afterwards is a
    pure function of t, so one instance can be shared between callers.

    Example:
        >>> ease = SpringEasing.from_settings(
        ...     CurveSettings(overshoot=0.25, rest_position_runs=4)
        ... )
        >>> ease(0.0)
        0.0
    """

    def __init__(self, params: CurveParams) -> None:
        self.params = params

    @classmethod
    def from_settings(
        cls,
        settings: CurveSettings | Mapping[str, Any],
        *,
        precision: float = DEFAULT_PRECISION,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> SpringEasing:
        params = derive_params(settings, precision=precision, max_iterations=max_iterations)
        return cls(params)

    def ease(self, t: float) -> float:
        return evaluate(self.params.omega, self.params.gamma, t)

    def __call__(self, t: float) -> float:
        return self.ease(t)

    def sample(self, n_samples: int) -> list[CurvePoint]:
        """Sample the easing at n_samples uniform times in [0, 1)."""
        return sample_curve(self.params, n_samples)

    def __repr__(self) -> str:
        return f"SpringEasing(omega={self.params.omega!r}, gamma={self.params.gamma!r})"
