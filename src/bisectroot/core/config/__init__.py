"""Configuration loading and environment initialisation."""

from __future__ import annotations

from .defaults import get_config, get_default_config, init_environment
from .schemas import (
    AppConfig,
    ConfigValidationError,
    JaxConfig,
    LoggingConfig,
    SolverConfig,
    collect_and_validate,
    discover_config_files,
    load_config,
)

__all__ = [
    "AppConfig",
    "ConfigValidationError",
    "JaxConfig",
    "LoggingConfig",
    "SolverConfig",
    "collect_and_validate",
    "discover_config_files",
    "get_config",
    "get_default_config",
    "init_environment",
    "load_config",
]
