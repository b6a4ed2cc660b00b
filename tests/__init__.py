"""Test suite for springr.

Test Structure:
- core/curves/: Curve evaluation, closed-form solvers, damping search, diagnostics
- core/config/: Config models and loading
- core/utils/: Logging configuration
- cli/: Command-line interface and terminal visualizer
- conftest.py: Shared fixtures
"""
