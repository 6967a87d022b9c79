"""
Guarded bisection root finding.

In mathematics, the bisection method is a root-finding method that applies to
any continuous function for which one knows two values with opposite signs.
The method repeatedly bisects the interval defined by these values and then
selects the subinterval in which the function changes sign, and therefore
must contain a root.

See https://en.wikipedia.org/wiki/Bisection_method

The solver in this module additionally guards the search against evaluator
failures, NaN/Inf values and runaway iteration, and reports every failure as
a classified :class:`~bisectroot.solver.errors.BisectionError`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from bisectroot.core.settings import SolverSettings, get_solver_settings

from .errors import (
    BisectionError,
    EvaluationError,
    InternalError,
    MaximalIterationError,
    NoRootError,
    NotValidValueError,
    RecoveryError,
)

logger = logging.getLogger(__name__)

Evaluator = Callable[[float], float]

__all__ = [
    "BisectionResult",
    "Evaluator",
    "Interval",
    "Sample",
    "find",
    "find_result",
]


@dataclass(frozen=True)
class Interval:
    """Search bracket ``[low, high]`` with ``low <= high``."""

    low: float
    high: float

    @classmethod
    def normalized(cls, a: float, b: float) -> "Interval":
        """Build an interval from bounds given in any order."""
        a, b = float(a), float(b)
        if a > b:
            a, b = b, a
        return cls(a, b)

    @property
    def midpoint(self) -> float:
        return self.low + (self.high - self.low) / 2.0

    @property
    def width(self) -> float:
        """Bracket width, relative to ``low`` unless ``low`` is exactly zero."""
        if self.low == 0:
            return abs(self.high - self.low)
        return abs((self.high - self.low) / self.low)

    def contains(self, x: float) -> bool:
        return self.low <= x <= self.high


@dataclass(frozen=True)
class Sample:
    """An abscissa paired with the evaluator's value there."""

    x: float
    y: float

    @property
    def negative(self) -> bool:
        """Sign bit of ``y``; ``-0.0`` counts as negative."""
        return bool(np.signbit(self.y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class BisectionResult:
    """Outcome of :func:`find_result`.

    Attributes:
        root: Root estimate; ``nan`` when ``error`` is set.
        error: Classified failure, or ``None`` on success.
        iterations: Number of bracketing iterations performed.
        evaluations: Number of evaluator calls, including the confirmation.
    """

    root: float
    error: Optional[BisectionError]
    iterations: int
    evaluations: int

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the root or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.root


class _GuardedEvaluator:
    """Fault barrier around a caller-supplied evaluator.

    Every call is counted. :class:`EvaluationError` becomes an
    :class:`InternalError`; any other exception becomes a :class:`RecoveryError`.
    """

    def __init__(self, func: Evaluator, interval: Interval):
        self._func = func
        self.interval = interval
        self.calls = 0

    def __call__(
        self,
        x: float,
        *,
        iteration: Optional[int] = None,
        samples: Sequence[Sample] = (),
    ) -> Sample:
        self.calls += 1
        try:
            y = float(self._func(x))
        except EvaluationError as exc:
            raise InternalError(
                f"evaluation failed at x={x:.5e}: {exc}",
                interval=self.interval,
                iteration=iteration,
                samples=samples,
            ) from exc
        except Exception as exc:
            raise RecoveryError(
                f"evaluator raised {type(exc).__name__} at x={x:.5e}: {exc!r}",
                interval=self.interval,
                iteration=iteration,
                samples=samples,
            ) from exc
        return Sample(x, y)

    def not_valid(
        self, sample: Sample, iteration: Optional[int], samples: Sequence[Sample]
    ) -> NotValidValueError:
        return NotValidValueError(
            f"not valid value at x={sample.x:.5e}: y={sample.y:.5e}",
            interval=self.interval,
            iteration=iteration,
            samples=samples,
        )


def _search(
    evaluate: _GuardedEvaluator, settings: SolverSettings
) -> Tuple[float, int]:
    """Run the bracketing loop; return ``(root, iterations)`` or raise."""
    prec = settings.precision
    max_iter = settings.max_iteration
    bracket = evaluate.interval

    left = evaluate(bracket.low)
    middle = evaluate(bracket.midpoint)
    right = evaluate(bracket.high)

    for endpoint in (left, right):
        if abs(endpoint.y) < prec:
            logger.debug("Endpoint x=%.6e is already a root", endpoint.x)
            evaluate(endpoint.x, samples=(left, middle, right))
            return endpoint.x, 0

    # Endpoint values may be infinite; only the midpoint must stay finite.
    if not middle.is_finite():
        raise evaluate.not_valid(middle, None, (left, middle, right))

    iteration = 0
    while True:
        if iteration >= max_iter:
            raise MaximalIterationError(
                f"Too many iterations: {iteration}",
                interval=evaluate.interval,
                iteration=iteration,
                samples=(left, middle, right),
            )

        if abs(middle.y) < prec and bracket.width < prec:
            logger.debug(
                "Converged after %d iterations: x=%.6e y=%.6e",
                iteration,
                middle.x,
                middle.y,
            )
            break

        if left.negative != middle.negative:
            right = middle
        elif middle.negative != right.negative:
            left = middle
        else:
            raise NoRootError(
                f"No root: [{left.y:.3e}, {middle.y:.3e}, {right.y:.3e}]",
                interval=evaluate.interval,
                iteration=iteration,
                samples=(left, middle, right),
            )

        bracket = Interval(left.x, right.x)
        middle = evaluate(bracket.midpoint, iteration=iteration, samples=(left, right))
        if not middle.is_finite():
            raise evaluate.not_valid(middle, iteration, (left, middle, right))

        logger.debug(
            "%3d %15.6e %15.6e %15.6e", iteration, middle.x, middle.y, bracket.width
        )
        iteration += 1

    # Last operation of the search is a call at the root.
    evaluate(middle.x, iteration=iteration, samples=(left, middle, right))
    return middle.x, iteration


def _prepare(f: Evaluator, min_x: float, max_x: float) -> _GuardedEvaluator:
    interval = Interval.normalized(min_x, max_x)
    evaluate = _GuardedEvaluator(f, interval)
    if not (math.isfinite(interval.low) and math.isfinite(interval.high)):
        raise NotValidValueError(
            "bounds must be finite", interval=interval, iteration=None
        )
    return evaluate


def find(f: Evaluator, min_x: float, max_x: float) -> float:
    """
    Find a root of ``f`` between ``min_x`` and ``max_x`` by bisection.

    Bounds may be given in any order. Convergence uses the process-wide
    settings from :mod:`bisectroot.core.settings`, read once per call: the
    search stops when ``|f(mid)| < precision`` and the bracket width (relative
    to the left endpoint, or absolute when that endpoint is exactly zero) is
    below ``precision``. The evaluator is called at most
    ``3 + max_iteration + 1`` times, the last call being made at the root.

    Args:
        f: Evaluator ``x -> y``. Raise :class:`EvaluationError` to report a
            failure at ``x``.
        min_x: One end of the search interval.
        max_x: The other end of the search interval.

    Returns:
        Root ``r`` inside the normalized interval.

    Raises:
        MaximalIterationError: The iteration cap was reached.
        InternalError: The evaluator reported a failure.
        NoRootError: No sign change in either half of the bracket.
        NotValidValueError: A bound or midpoint became NaN or infinite.
        RecoveryError: The evaluator raised any other exception.

    Example:
        >>> root = find(lambda x: x**2 - 2.0, 0.0, 2.0)
        >>> abs(root - 1.41421356) < 1e-5
        True
    """
    settings = get_solver_settings()
    try:
        evaluate = _prepare(f, min_x, max_x)
        root, _ = _search(evaluate, settings)
    except BisectionError as exc:
        logger.debug("Bisection failed (%s): %s", exc.kind.value, exc)
        raise
    return root


def find_result(f: Evaluator, min_x: float, max_x: float) -> BisectionResult:
    """Like :func:`find` but return a :class:`BisectionResult` instead of raising."""
    settings = get_solver_settings()
    try:
        evaluate = _prepare(f, min_x, max_x)
    except BisectionError as exc:
        logger.debug("Bisection failed (%s): %s", exc.kind.value, exc)
        return BisectionResult(math.nan, exc, 0, 0)
    try:
        root, iterations = _search(evaluate, settings)
    except BisectionError as exc:
        logger.debug("Bisection failed (%s): %s", exc.kind.value, exc)
        return BisectionResult(
            math.nan, exc, exc.iteration or 0, evaluate.calls
        )
    return BisectionResult(root, None, iterations, evaluate.calls)
