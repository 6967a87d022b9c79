"""Solver settings and configuration management."""

from . import config
from .settings import (
    DEFAULT_MAX_ITERATION,
    DEFAULT_PRECISION,
    SolverSettings,
    get_precision,
    get_solver_settings,
    reset_solver_settings,
    set_solver_settings,
    solver_settings_scope,
)

__all__ = [
    "DEFAULT_MAX_ITERATION",
    "DEFAULT_PRECISION",
    "SolverSettings",
    "config",
    "get_precision",
    "get_solver_settings",
    "reset_solver_settings",
    "set_solver_settings",
    "solver_settings_scope",
]
