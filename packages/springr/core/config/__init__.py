"""Configuration management for springr."""

from springr.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from springr.core.config.models import (
    AppConfig,
    DiagnosticsConfig,
    LoggingConfig,
    PresetConfig,
    SearchConfig,
    VisualizationConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "SearchConfig",
    "DiagnosticsConfig",
    "VisualizationConfig",
    "PresetConfig",
]
