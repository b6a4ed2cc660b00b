"""Damped oscillator curve and its closed-form solvers.

The curve is

    x(t) = 1 - exp(-gamma * t) * cos(omega * t)

which satisfies x(0) = 0 and approaches 1 as the oscillation decays.
"""

from __future__ import annotations

import math

import numpy as np

from springr.core.curves.errors import InvalidParamsError, InvalidSettingsError
from springr.core.curves.models import CurveParams

# Quarter cycles the curve needs before its first countable crossing,
# expressed in full oscillations. The curve starts at full deflection.
PHASE_OFFSET_CYCLES = 0.75


def evaluate(omega: float, gamma: float, t: float) -> float:
    """Evaluate the curve at time t.

    Args:
        omega: Angular frequency of the oscillator.
        gamma: Damping coefficient of the oscillator.
        t: Time, normally in [0, 1] but any real value is accepted.

    Returns:
        Curve value. evaluate(omega, gamma, 0) == 0.

    Example:
        >>> evaluate(10.0, 5.0, 0.0)
        0.0
    """
    return 1 - math.exp(-gamma * t) * math.cos(omega * t)


def evaluate_params(params: CurveParams, t: float) -> float:
    """Same as evaluate(), taking a CurveParams."""
    return evaluate(params.omega, params.gamma, t)


def evaluate_array(omega: float, gamma: float, t: np.ndarray | list[float]) -> np.ndarray:
    """Vectorized evaluate() over an array of times."""
    t = np.asarray(t, dtype=float)
    return 1 - np.exp(-gamma * t) * np.cos(omega * t)


def derive_frequency(rest_position_runs: float) -> float:
    """Derive the angular frequency from the rest position run count.

    Every crossing of the rest position adds half an oscillation. Exact for
    the undamped oscillator and a close approximation for the damping
    ranges used in animations.

    Args:
        rest_position_runs: Crossings of 1 before settling (>= 0).

    Returns:
        omega = 2 * pi * (rest_position_runs / 2 + 0.75)

    Raises:
        InvalidSettingsError: If rest_position_runs is negative or not finite.

    Example:
        >>> round(derive_frequency(0) / math.pi, 6)
        1.5
    """
    if not math.isfinite(rest_position_runs) or rest_position_runs < 0:
        raise InvalidSettingsError(
            f"rest_position_runs must be a finite value >= 0, got {rest_position_runs}"
        )

    full_oscillations = rest_position_runs / 2 + PHASE_OFFSET_CYCLES
    return 2 * math.pi * full_oscillations


def derive_extremum_time(omega: float, gamma: float) -> float:
    """Time of the first extremum of the curve after t = 0.

    Solves d/dt (1 - exp(-gamma * t) * cos(omega * t)) = 0 on its principal
    branch. The extremum is the first peak above 1, so it depends on gamma
    and must be recomputed whenever gamma changes.

    Args:
        omega: Angular frequency (> 0).
        gamma: Damping coefficient (> 0).

    Returns:
        Time at which the curve reaches its maximum overshoot.

    Raises:
        InvalidParamsError: If omega or gamma is not a positive finite value.
    """
    if not (omega > 0 and math.isfinite(omega)):
        raise InvalidParamsError(f"omega must be > 0, got {omega}")
    if not (gamma > 0 and math.isfinite(gamma)):
        raise InvalidParamsError(f"gamma must be > 0, got {gamma}")

    half_angle = math.atan(omega / gamma - math.sqrt(gamma**2 + omega**2) / gamma)
    return 2 * half_angle / omega + math.pi / omega


def peak_overshoot(omega: float, gamma: float) -> float:
    """Overshoot above 1 reached at the first extremum."""
    return evaluate(omega, gamma, derive_extremum_time(omega, gamma)) - 1
