"""
Gatewarden configuration module.

Settings, declarative quality gate definitions and logging setup.
"""

from gatewarden.config.environment import setup_logging
from gatewarden.config.settings import (
    ConfigurationError,
    GatewardenSettings,
    QualityGateDefinition,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "GatewardenSettings",
    "QualityGateDefinition",
    "load_settings",
    "setup_logging",
]
