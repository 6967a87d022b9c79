"""bisectroot package."""

from __future__ import annotations

from .core.settings import (
    DEFAULT_MAX_ITERATION,
    DEFAULT_PRECISION,
    get_solver_settings,
    set_solver_settings,
    solver_settings_scope,
)
from .solver import (
    BisectionError,
    BisectionResult,
    ErrorKind,
    EvaluationError,
    find,
    find_result,
)

__all__ = [
    "DEFAULT_MAX_ITERATION",
    "DEFAULT_PRECISION",
    "BisectionError",
    "BisectionResult",
    "ErrorKind",
    "EvaluationError",
    "find",
    "find_result",
    "get_solver_settings",
    "set_solver_settings",
    "solver_settings_scope",
]
