"""Shared pytest fixtures for springr tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from springr.core.curves.derivation import derive_params
from springr.core.curves.models import CurveParams, CurveSettings

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Curve Fixtures
# ============================================================================


@pytest.fixture
def typical_settings() -> CurveSettings:
    """Settings of the reference self-test (4 runs, 20% overshoot)."""
    return CurveSettings(overshoot=0.2, rest_position_runs=4)


@pytest.fixture
def long_settings() -> CurveSettings:
    """Lightly damped, long running settings (16 runs, 85% overshoot)."""
    return CurveSettings(overshoot=0.85, rest_position_runs=16)


@pytest.fixture
def typical_params(typical_settings: CurveSettings) -> CurveParams:
    """Parameters derived from typical_settings."""
    return derive_params(typical_settings)


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging.basicConfig(force=True) calls made by a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        # pytest capture handlers are StreamHandler subclasses and stay in place
        if isinstance(handler, logging.FileHandler) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
