"""Spring curve models, solvers and diagnostics."""

from springr.core.curves.damping import search_damping
from springr.core.curves.derivation import derive_params, derive_params_with_trace
from springr.core.curves.diagnostics import analyze_curve, verify_settings
from springr.core.curves.easing import SpringEasing
from springr.core.curves.errors import (
    ConvergenceError,
    InvalidParamsError,
    InvalidSettingsError,
    SpringCurveError,
)
from springr.core.curves.models import (
    CurveParams,
    CurvePoint,
    CurveSettings,
    DampingSearchResult,
    SearchStatus,
)
from springr.core.curves.oscillator import derive_extremum_time, derive_frequency, evaluate

__all__ = [
    # Models
    "CurveParams",
    "CurvePoint",
    "CurveSettings",
    "DampingSearchResult",
    "SearchStatus",
    # Operations
    "evaluate",
    "derive_frequency",
    "derive_extremum_time",
    "derive_params",
    "derive_params_with_trace",
    "search_damping",
    "SpringEasing",
    # Diagnostics
    "analyze_curve",
    "verify_settings",
    # Errors
    "SpringCurveError",
    "InvalidSettingsError",
    "InvalidParamsError",
    "ConvergenceError",
]
