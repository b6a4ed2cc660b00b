"""Conversion from designer-facing settings to oscillator parameters."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from pydantic import ValidationError

from springr.core.curves.damping import DEFAULT_MAX_ITERATIONS, DEFAULT_PRECISION, search_damping
from springr.core.curves.errors import ConvergenceError, InvalidSettingsError
from springr.core.curves.models import CurveParams, CurveSettings, DampingSearchResult
from springr.core.curves.oscillator import derive_frequency

logger = logging.getLogger(__name__)


def _coerce_settings(settings: CurveSettings | Mapping[str, Any]) -> CurveSettings:
    if isinstance(settings, CurveSettings):
        return settings
    try:
        return CurveSettings.model_validate(dict(settings))
    except ValidationError as e:
        raise InvalidSettingsError(f"Invalid curve settings: {e}") from e


def derive_params_with_trace(
    settings: CurveSettings | Mapping[str, Any],
    *,
    precision: float = DEFAULT_PRECISION,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> tuple[CurveParams, DampingSearchResult]:
    """Derive oscillator parameters and return the damping search result too.

    Args:
        settings: CurveSettings, or a mapping with ``overshoot`` and
            ``rest_position_runs``.
        precision: Gamma step size of the damping search.
        max_iterations: Iteration cap of the damping search.

    Returns:
        Tuple of (CurveParams, DampingSearchResult).

    Raises:
        InvalidSettingsError: If the settings are outside their valid domain.
        ConvergenceError: If the damping search hits its iteration cap.
    """
    settings = _coerce_settings(settings)

    omega = derive_frequency(settings.rest_position_runs)
    result = search_damping(
        settings.overshoot,
        omega,
        precision=precision,
        max_iterations=max_iterations,
    )
    if not result.converged:
        raise ConvergenceError(
            f"Damping search did not converge within {max_iterations} iterations "
            f"for overshoot={settings.overshoot}, "
            f"rest_position_runs={settings.rest_position_runs}",
            result,
        )

    params = CurveParams(omega=omega, gamma=result.gamma)
    logger.debug(f"Derived {params!r} from {settings!r}")
    return params, result


def derive_params(
    settings: CurveSettings | Mapping[str, Any],
    *,
    precision: float = DEFAULT_PRECISION,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> CurveParams:
    """Derive oscillator parameters from designer-facing settings.

    Example:
        >>> params = derive_params(CurveSettings(overshoot=0.2, rest_position_runs=4))
        >>> params.gamma > 0
        True
    """
    params, _ = derive_params_with_trace(
        settings, precision=precision, max_iterations=max_iterations
    )
    return params
