"""Tests for evaluator adapters and the error hierarchy."""

import math

import pytest

from bisectroot.solver import (
    BisectionError,
    CountingEvaluator,
    ErrorKind,
    EvaluationError,
    InternalError,
    Interval,
    MaximalIterationError,
    NoRootError,
    NotValidValueError,
    RecoveryError,
    find,
    pair_evaluator,
)


def sqrt_residual(x):
    """(y, error) style function: sqrt(x) - 1.5, undefined for x < 0."""
    if x < 0:
        return -1.0, "negative argument"
    return math.sqrt(x) - 1.5, None


class TestPairEvaluator:
    """Tests for the (value, error) adapter."""

    def test_returns_value_without_error(self):
        f = pair_evaluator(sqrt_residual)
        assert f(4.0) == pytest.approx(0.5)

    def test_string_error_is_raised(self):
        f = pair_evaluator(sqrt_residual)
        with pytest.raises(EvaluationError, match="negative argument"):
            f(-1.0)

    def test_exception_error_is_chained(self):
        cause = ValueError("bad input")
        f = pair_evaluator(lambda x: (0.0, cause))

        with pytest.raises(EvaluationError) as exc_info:
            f(1.0)
        assert exc_info.value.__cause__ is cause

    def test_evaluation_error_is_raised_as_is(self):
        error = EvaluationError("domain")
        f = pair_evaluator(lambda x: (0.0, error))

        with pytest.raises(EvaluationError) as exc_info:
            f(1.0)
        assert exc_info.value is error

    def test_solver_with_pair_evaluator(self):
        root = find(pair_evaluator(sqrt_residual), 0.0, 4.0)
        assert root == pytest.approx(2.25, abs=1e-5)

    def test_reported_error_is_internal(self):
        with pytest.raises(InternalError) as exc_info:
            find(pair_evaluator(sqrt_residual), -4.0, 4.0)
        assert exc_info.value.kind is ErrorKind.INTERNAL


class TestCountingEvaluator:
    def test_counts_calls(self):
        counter = CountingEvaluator(lambda x: x - 1.0)
        counter(0.0)
        counter(1.0)
        assert counter.calls == 2

        counter.reset()
        assert counter.calls == 0


class TestErrorHierarchy:
    """Kinds and context carried by solver errors."""

    @pytest.mark.parametrize(
        "error_cls, kind",
        [
            (MaximalIterationError, ErrorKind.MAXIMAL_ITERATION),
            (InternalError, ErrorKind.INTERNAL),
            (NoRootError, ErrorKind.INTERNAL),
            (NotValidValueError, ErrorKind.NOT_VALID_VALUE),
            (RecoveryError, ErrorKind.RECOVERY),
        ],
    )
    def test_kind(self, error_cls, kind):
        err = error_cls("boom", interval=Interval(-1.0, 2.0), iteration=3)

        assert isinstance(err, BisectionError)
        assert isinstance(err, RuntimeError)
        assert err.kind is kind
        assert err.iteration == 3
        assert err.samples == ()
        assert err.reason == "boom"
        assert str(err) == "Cannot find [-1.00000e+00,2.00000e+00]: boom"

    def test_kind_values(self):
        assert ErrorKind("recovery") is ErrorKind.RECOVERY
        assert ErrorKind.MAXIMAL_ITERATION.value == "maximal_iteration"
