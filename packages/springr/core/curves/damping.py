"""Damping search.

Finds the damping coefficient whose first peak matches a target overshoot.
The search is a fixed-step, single-direction hill climb:

1. Seed gamma from the exponential decay over the undamped half period.
2. Score it at its own extremum time and pick a direction once: more damping
   if the curve overshoots too far, less damping otherwise.
3. Step gamma by ``precision`` in that direction while the deviation from the
   target strictly improves.

The deviation is assumed unimodal along the chosen direction. The direction
is never revisited, so the result is a local minimum at resolution
``precision``, not a root to machine precision.
"""

from __future__ import annotations

import logging
import math

from springr.core.curves.errors import InvalidSettingsError
from springr.core.curves.models import DampingSearchResult, DampingStep, SearchStatus
from springr.core.curves.oscillator import peak_overshoot

logger = logging.getLogger(__name__)

# Step size of gamma itself, not a tolerance on the overshoot deviation.
DEFAULT_PRECISION = 0.01
DEFAULT_MAX_ITERATIONS = 10_000


def seed_damping(overshoot: float, omega: float) -> float:
    """Naive gamma from exp(-gamma * t0) = overshoot with t0 = pi / omega."""
    half_period = math.pi / omega
    return -math.log(overshoot) / half_period


def search_damping(
    overshoot: float,
    omega: float,
    *,
    precision: float = DEFAULT_PRECISION,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> DampingSearchResult:
    """Search for the damping coefficient producing the target overshoot.

    Args:
        overshoot: Target overshoot in (0, 1).
        omega: Angular frequency already derived for the curve (> 0).
        precision: Fixed gamma step size (> 0).
        max_iterations: Maximum number of candidate steps to evaluate.

    Returns:
        DampingSearchResult. Its status is MAX_ITERATIONS_EXCEEDED if the
        search was still improving when the cap was reached.

    Raises:
        InvalidSettingsError: If overshoot is not in (0, 1).
        ValueError: If omega, precision or max_iterations is out of range.
    """
    if not (0.0 < overshoot < 1.0):
        raise InvalidSettingsError(f"overshoot must be in (0, 1), got {overshoot}")
    if not (omega > 0 and math.isfinite(omega)):
        raise ValueError(f"omega must be > 0, got {omega}")
    if not (precision > 0 and math.isfinite(precision)):
        raise ValueError(f"precision must be > 0, got {precision}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    seed_gamma = seed_damping(overshoot, omega)
    achieved = peak_overshoot(omega, seed_gamma)
    seed_deviation = abs(overshoot - achieved)

    # Too much overshoot means too little damping
    direction = 1 if achieved - overshoot > 0 else -1

    logger.debug(
        f"Damping seed: gamma={seed_gamma:.6f} achieved={achieved:.6f} "
        f"deviation={seed_deviation:.6f} direction={direction:+d}"
    )

    gamma = seed_gamma
    deviation = seed_deviation
    steps: list[DampingStep] = []
    iterations = 0
    status = SearchStatus.MAX_ITERATIONS_EXCEEDED

    while iterations < max_iterations:
        tuned_gamma = gamma + direction * precision
        if tuned_gamma <= 0:
            logger.warning(
                f"Damping search reached the gamma floor at {gamma:.6f}; "
                f"target overshoot {overshoot} may not be reachable"
            )
            status = SearchStatus.CONVERGED
            break

        iterations += 1
        tuned_deviation = abs(overshoot - peak_overshoot(omega, tuned_gamma))
        if tuned_deviation >= deviation:
            status = SearchStatus.CONVERGED
            break

        gamma = tuned_gamma
        deviation = tuned_deviation
        steps.append(DampingStep(gamma=gamma, deviation=deviation))

    if status is SearchStatus.MAX_ITERATIONS_EXCEEDED:
        logger.warning(
            f"Damping search did not terminate within {max_iterations} iterations "
            f"(gamma={gamma:.6f}, deviation={deviation:.6f})"
        )
    else:
        logger.debug(
            f"Damping search converged after {iterations} iterations: "
            f"gamma={gamma:.6f} deviation={deviation:.6f}"
        )

    return DampingSearchResult(
        gamma=gamma,
        deviation=deviation,
        seed_gamma=seed_gamma,
        seed_deviation=seed_deviation,
        direction=direction,
        iterations=iterations,
        status=status,
        steps=tuple(steps),
    )
