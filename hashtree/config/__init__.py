"""
Runtime Configuration Module

Provides configuration loading and logging setup.
"""

from .runtime import (
    HashTreeConfig,
    RenderConfig,
    LoggingConfig,
    get_default_config,
    set_default_config,
)
from .logging_setup import setup_logging

__all__ = [
    "HashTreeConfig",
    "RenderConfig",
    "LoggingConfig",
    "get_default_config",
    "set_default_config",
    "setup_logging",
]
