"""
Runtime Configuration Module

Provides configuration loading and management for keylib.
"""

from .runtime import (
    KeysConfig,
    LoggingConfig,
    OutputConfig,
    RuntimeConfig,
    get_default_config_template,
)

__all__ = [
    "KeysConfig",
    "LoggingConfig",
    "OutputConfig",
    "RuntimeConfig",
    "get_default_config_template",
]
