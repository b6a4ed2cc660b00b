"""Self-test diagnostics for derived spring curves.

Samples a curve on a uniform grid and measures the settings it actually
realizes:

- Rest position runs: sign changes of (x(t) - 1), minus the crossing out of
  the initial trough.
- Overshoot: the largest |x(t) - 1| seen after the first sign change.

Both are compared against the settings the curve was derived from.
"""

from __future__ import annotations

import logging

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from springr.core.curves.damping import DEFAULT_MAX_ITERATIONS, DEFAULT_PRECISION
from springr.core.curves.derivation import derive_params
from springr.core.curves.models import CurveParams, CurveSettings
from springr.core.curves.oscillator import evaluate_array
from springr.core.curves.sampling import sample_uniform_grid

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 100
DEFAULT_TOLERANCE = 0.01


class CurveAnalysis(BaseModel):
    """Realized shape of a sampled curve.

    Attributes:
        n_samples: Number of samples taken.
        crossings: Sign changes of (x(t) - 1), including the first one.
        realized_runs: crossings - 1.
        realized_overshoot: Signed value of the largest |x(t) - 1| after the
            first crossing (0.0 if the curve never crosses).
    """

    model_config = ConfigDict(frozen=True)

    n_samples: int
    crossings: int
    realized_runs: int
    realized_overshoot: float


class CurveReport(BaseModel):
    """Comparison of a derived curve against its settings."""

    model_config = ConfigDict(frozen=True)

    settings: CurveSettings
    params: CurveParams
    analysis: CurveAnalysis
    tolerance: float = Field(..., gt=0.0)

    @property
    def overshoot_error(self) -> float:
        return abs(self.settings.overshoot - self.analysis.realized_overshoot)

    @property
    def runs_ok(self) -> bool:
        return self.analysis.realized_runs == self.settings.rest_position_runs

    @property
    def overshoot_ok(self) -> bool:
        return self.overshoot_error <= self.tolerance

    @property
    def passed(self) -> bool:
        return self.runs_ok and self.overshoot_ok

    def failures(self) -> list[str]:
        """Human-readable failure messages (empty if passed)."""
        messages: list[str] = []
        if not self.runs_ok:
            messages.append(
                f"Rest position runs should have been {self.settings.rest_position_runs} "
                f"but was {self.analysis.realized_runs}"
            )
        if not self.overshoot_ok:
            messages.append(
                f"Overshoot should have been {self.settings.overshoot} "
                f"but was {self.analysis.realized_overshoot:.6f}"
            )
        return messages


def analyze_curve(params: CurveParams, n_samples: int = DEFAULT_SAMPLES) -> CurveAnalysis:
    """Measure crossings and overshoot of a curve sampled at t = i / n_samples.

    Args:
        params: Oscillator parameters.
        n_samples: Number of uniform samples (must be >= 2).

    Returns:
        CurveAnalysis of the sampled curve.
    """
    t_grid = sample_uniform_grid(n_samples)
    normalized = evaluate_array(params.omega, params.gamma, t_grid) - 1

    # The curve starts in its trough, so the sample before t=0 counts as below 1
    previous = np.concatenate(([-1.0], normalized[:-1]))
    crossed = previous * normalized < 0
    crossings = int(np.count_nonzero(crossed))

    realized_overshoot = 0.0
    if crossings:
        after_first = normalized[int(np.argmax(crossed)) :]
        realized_overshoot = float(after_first[int(np.argmax(np.abs(after_first)))])

    return CurveAnalysis(
        n_samples=n_samples,
        crossings=crossings,
        realized_runs=crossings - 1,
        realized_overshoot=realized_overshoot,
    )


def verify_settings(
    settings: CurveSettings,
    *,
    n_samples: int = DEFAULT_SAMPLES,
    tolerance: float = DEFAULT_TOLERANCE,
    precision: float = DEFAULT_PRECISION,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> CurveReport:
    """Derive a curve from settings and check that it realizes them.

    Args:
        settings: Settings to derive and verify.
        n_samples: Number of uniform samples.
        tolerance: Allowed absolute overshoot error.
        precision: Gamma step size of the damping search.
        max_iterations: Iteration cap of the damping search.

    Returns:
        CurveReport; check ``report.passed``.
    """
    params = derive_params(settings, precision=precision, max_iterations=max_iterations)
    analysis = analyze_curve(params, n_samples)
    report = CurveReport(settings=settings, params=params, analysis=analysis, tolerance=tolerance)

    if report.passed:
        logger.info(f"Curve verification passed (overshoot error {report.overshoot_error:.6f})")
    else:
        for message in report.failures():
            logger.warning(f"Curve verification failed: {message}")

    return report
