"""Framework layer: configuration, logging and startup validation."""

from __future__ import annotations

from site_intel.core.config import APIConfig, AppSettings, ObservabilityConfig, ResearchConfig
from site_intel.core.logging_config import setup_logging
from site_intel.core.startup_checks import validate_settings

__all__ = [
    "APIConfig",
    "AppSettings",
    "ObservabilityConfig",
    "ResearchConfig",
    "setup_logging",
    "validate_settings",
]
