import math

import pytest

from bisectroot.core.settings import (
    DEFAULT_MAX_ITERATION,
    DEFAULT_PRECISION,
    SolverSettings,
    get_precision,
    get_solver_settings,
    reset_solver_settings,
    set_solver_settings,
    solver_settings_scope,
)


def test_defaults():
    settings = get_solver_settings()
    assert settings == SolverSettings()
    assert math.isclose(settings.precision, DEFAULT_PRECISION)
    assert settings.max_iteration == DEFAULT_MAX_ITERATION == 500
    assert DEFAULT_PRECISION == 1e-6


def test_set_keeps_unspecified_values():
    set_solver_settings(precision=1e-9)
    assert get_precision() == 1e-9
    assert get_solver_settings().max_iteration == DEFAULT_MAX_ITERATION

    set_solver_settings(max_iteration=42)
    assert get_precision() == 1e-9
    assert get_solver_settings().max_iteration == 42


def test_scope_updates_and_restores():
    baseline = get_solver_settings()
    with solver_settings_scope(precision=1e-3, max_iteration=10) as scoped:
        assert scoped.precision == 1e-3
        assert scoped.max_iteration == 10
        assert get_solver_settings() == scoped
    assert get_solver_settings() == baseline


def test_scope_restores_after_exception():
    baseline = get_solver_settings()
    with pytest.raises(RuntimeError):
        with solver_settings_scope(max_iteration=3):
            raise RuntimeError("boom")
    assert get_solver_settings() == baseline


@pytest.mark.parametrize("precision", [0.0, -1e-6, math.inf, math.nan])
def test_invalid_precision_is_rejected(precision):
    baseline = get_solver_settings()
    with pytest.raises(ValueError):
        set_solver_settings(precision=precision)
    assert get_solver_settings() == baseline


@pytest.mark.parametrize("max_iteration", [0, -5, 2.5, True])
def test_invalid_max_iteration_is_rejected(max_iteration):
    with pytest.raises(ValueError):
        SolverSettings(max_iteration=max_iteration)


def test_reset():
    set_solver_settings(precision=1e-2, max_iteration=7)
    assert reset_solver_settings() == SolverSettings()


def test_set_from_settings_object():
    installed = set_solver_settings(SolverSettings(precision=1e-8, max_iteration=64))
    assert get_solver_settings() == installed == SolverSettings(1e-8, 64)

    overridden = set_solver_settings(SolverSettings(precision=1e-4), max_iteration=9)
    assert overridden == SolverSettings(precision=1e-4, max_iteration=9)
