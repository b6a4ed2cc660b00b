"""Exceptions raised while deriving spring curve parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from springr.core.curves.models import DampingSearchResult


class SpringCurveError(Exception):
    """Base exception for all spring curve errors."""


class InvalidSettingsError(SpringCurveError, ValueError):
    """Designer-facing settings are outside their valid domain.

    Raised for an overshoot outside (0, 1), a negative rest position run
    count, or non-finite input.
    """


class InvalidParamsError(SpringCurveError, ValueError):
    """Oscillator parameters cannot be used by a solver (e.g. gamma <= 0)."""


class ConvergenceError(SpringCurveError):
    """Raised when the damping search hits its iteration cap.

    Attributes:
        result: The search result at the point the cap was reached.
    """

    def __init__(self, message: str, result: DampingSearchResult) -> None:
        super().__init__(message)
        self.result = result
