"""Spring curve models.

This module defines the value types passed between the curve solvers:
- CurveSettings: Designer-facing constraints (overshoot, rest position runs)
- CurveParams: Derived oscillator parameters (omega, gamma)
- CurvePoint: A single sampled point (t, v) of an evaluated curve
- DampingSearchResult: Outcome of the damping search, including its trace

All models are immutable and validate on construction.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CurveSettings(BaseModel):
    """Designer-facing constraints for a spring curve.

    Attributes:
        overshoot: Fraction by which the curve exceeds 1 at its first peak.
            Must be in (0, 1) exclusive.
        rest_position_runs: How often the curve crosses 1 before settling.
            The final settling crossing is not counted.

    Example:
        >>> settings = CurveSettings(overshoot=0.2, rest_position_runs=4)
        >>> settings.overshoot
        0.2
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    overshoot: float = Field(..., gt=0.0, lt=1.0, description="Peak overshoot fraction (0,1)")
    rest_position_runs: float = Field(
        ..., ge=0.0, description="Crossings of the rest position before settling"
    )


class CurveParams(BaseModel):
    """Oscillator parameters of x(t) = 1 - exp(-gamma * t) * cos(omega * t).

    Attributes:
        omega: Angular frequency, > 0.
        gamma: Damping coefficient, > 0 so the oscillation decays.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    omega: float = Field(..., gt=0.0, description="Angular frequency")
    gamma: float = Field(..., gt=0.0, description="Damping coefficient")


class CurvePoint(BaseModel):
    """A single sampled point of a spring curve.

    Time is normalized to [0, 1]. The value is unbounded since the
    curve overshoots its resting value of 1.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., description="Curve value")


class SearchStatus(str, Enum):
    """Termination state of the damping search."""

    CONVERGED = "converged"
    MAX_ITERATIONS_EXCEEDED = "max_iterations_exceeded"


class DampingStep(BaseModel):
    """An accepted step of the damping search."""

    model_config = ConfigDict(frozen=True)

    gamma: float
    deviation: float


class DampingSearchResult(BaseModel):
    """Outcome of a damping search.

    Attributes:
        gamma: Last accepted damping coefficient.
        deviation: |target overshoot - achieved overshoot| at ``gamma``.
        seed_gamma: Naive gamma the search started from.
        seed_deviation: Deviation at ``seed_gamma``.
        direction: +1 when damping was increased, -1 when decreased.
        iterations: Number of candidate steps evaluated.
        status: Whether the search converged or hit its iteration cap.
        steps: Accepted steps, in order. Deviations are strictly decreasing.
    """

    model_config = ConfigDict(frozen=True)

    gamma: float
    deviation: float
    seed_gamma: float
    seed_deviation: float
    direction: int = Field(..., description="+1 or -1")
    iterations: int = Field(..., ge=0)
    status: SearchStatus
    steps: tuple[DampingStep, ...] = ()

    @property
    def converged(self) -> bool:
        """True if the search stopped on its own termination condition."""
        return self.status is SearchStatus.CONVERGED
