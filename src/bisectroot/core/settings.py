"""Process-wide tolerances for the bisection solver.

The solver reads ``precision`` and ``max_iteration`` from a single global
state at the start of every call rather than taking them as arguments.
Changing the state affects every subsequent call in the process.
"""
from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator

__all__ = [
    "DEFAULT_MAX_ITERATION",
    "DEFAULT_PRECISION",
    "SolverSettings",
    "get_precision",
    "get_solver_settings",
    "reset_solver_settings",
    "set_solver_settings",
    "solver_settings_scope",
]

DEFAULT_PRECISION: float = 1e-6

# Typically about 20 iterations are needed for a precision of 1e-6.
DEFAULT_MAX_ITERATION: int = 500


def _validate_precision(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError("precision must be a finite, strictly positive number")
    return value


def _validate_max_iteration(value: int) -> int:
    if isinstance(value, bool) or int(value) != value:
        raise ValueError("max_iteration must be an integer")
    value = int(value)
    if value <= 0:
        raise ValueError("max_iteration must be strictly positive")
    return value


@dataclass(frozen=True)
class SolverSettings:
    """Container describing the global solver tolerances."""

    precision: float = DEFAULT_PRECISION
    max_iteration: int = DEFAULT_MAX_ITERATION

    def __post_init__(self) -> None:
        object.__setattr__(self, "precision", _validate_precision(self.precision))
        object.__setattr__(
            self, "max_iteration", _validate_max_iteration(self.max_iteration)
        )


_GLOBAL_STATE = SolverSettings()


def get_solver_settings() -> SolverSettings:
    """Return the current global solver settings."""

    return _GLOBAL_STATE


def get_precision() -> float:
    """Return the globally configured convergence threshold."""

    return _GLOBAL_STATE.precision


def set_solver_settings(
    settings: SolverSettings | None = None,
    *,
    precision: float | None = None,
    max_iteration: int | None = None,
) -> SolverSettings:
    """Update the global solver settings.

    ``settings`` replaces the whole state; keyword values then override single
    fields. Values left as ``None`` keep their current setting. Invalid values
    raise :class:`ValueError` and leave the global state untouched.
    """

    global _GLOBAL_STATE
    state = _GLOBAL_STATE if settings is None else settings
    if precision is not None:
        state = replace(state, precision=precision)
    if max_iteration is not None:
        state = replace(state, max_iteration=max_iteration)
    _GLOBAL_STATE = state
    return state


def reset_solver_settings() -> SolverSettings:
    """Restore the default tolerances."""

    global _GLOBAL_STATE
    _GLOBAL_STATE = SolverSettings()
    return _GLOBAL_STATE


@contextmanager
def solver_settings_scope(
    *, precision: float | None = None, max_iteration: int | None = None
) -> Iterator[SolverSettings]:
    """Temporarily override the global solver settings."""

    global _GLOBAL_STATE
    previous = get_solver_settings()
    try:
        yield set_solver_settings(precision=precision, max_iteration=max_iteration)
    finally:
        _GLOBAL_STATE = previous
