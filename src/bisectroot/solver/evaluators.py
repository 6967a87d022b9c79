"""Adapters between caller functions and the solver's evaluator contract."""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, Tuple

from .errors import EvaluationError

__all__ = ["CountingEvaluator", "pair_evaluator"]

PairFunction = Callable[[float], Tuple[Any, Optional[Any]]]


def pair_evaluator(func: PairFunction) -> Callable[[float], Any]:
    """Adapt a function returning ``(y, error)`` pairs.

    A ``None`` error yields ``y``. Any other error is raised as
    :class:`EvaluationError`, chained to it when it is an exception.

    Example:
        >>> def sqrt_minus_one(x):
        ...     if x < 0:
        ...         return 0.0, "negative argument"
        ...     return x**0.5 - 1.0, None
        >>> f = pair_evaluator(sqrt_minus_one)
        >>> f(4.0)
        1.0
    """

    @functools.wraps(func)
    def wrapper(x: float) -> Any:
        y, error = func(x)
        if error is None:
            return y
        if isinstance(error, EvaluationError):
            raise error
        if isinstance(error, BaseException):
            raise EvaluationError(str(error)) from error
        raise EvaluationError(str(error))

    return wrapper


class CountingEvaluator:
    """Callable wrapper that counts evaluator invocations."""

    def __init__(self, func: Callable[[float], Any]):
        self.func = func
        self.calls = 0

    def __call__(self, x: float) -> Any:
        self.calls += 1
        return self.func(x)

    def reset(self) -> None:
        self.calls = 0
