"""Error taxonomy for the bisection solver.

Every failure of :func:`bisectroot.solver.find` is reported as a subclass of
:class:`BisectionError`. The ``kind`` attribute classifies the failure and the
remaining attributes carry enough context (search bounds, iteration, the
samples known at the time) to diagnose it without re-running the search.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .bisection import Interval, Sample

__all__ = [
    "ErrorKind",
    "EvaluationError",
    "BisectionError",
    "MaximalIterationError",
    "InternalError",
    "NoRootError",
    "NotValidValueError",
    "RecoveryError",
]


class ErrorKind(str, Enum):
    """Classification of a failed search."""

    MAXIMAL_ITERATION = "maximal_iteration"
    INTERNAL = "internal"
    NOT_VALID_VALUE = "not_valid_value"
    RECOVERY = "recovery"


class EvaluationError(Exception):
    """Raised by an evaluator to report that it cannot produce a value at ``x``.

    The solver treats it as a regular evaluator failure (:attr:`ErrorKind.INTERNAL`).
    Any other exception escaping the evaluator is considered a runtime fault
    (:attr:`ErrorKind.RECOVERY`).
    """


class BisectionError(RuntimeError):
    """Base class for classified solver failures."""

    kind: ErrorKind

    def __init__(
        self,
        reason: str,
        *,
        interval: "Interval",
        iteration: Optional[int] = None,
        samples: Sequence["Sample"] = (),
    ) -> None:
        self.reason = reason
        self.interval = interval
        self.iteration = iteration
        self.samples: Tuple["Sample", ...] = tuple(samples)
        super().__init__(
            f"Cannot find [{interval.low:.5e},{interval.high:.5e}]: {reason}"
        )


class MaximalIterationError(BisectionError):
    """The iteration cap was reached before the bracket converged."""

    kind = ErrorKind.MAXIMAL_ITERATION


class InternalError(BisectionError):
    """The evaluator reported a failure during the search."""

    kind = ErrorKind.INTERNAL


class NoRootError(InternalError):
    """No sign change was found in either half of the bracket."""


class NotValidValueError(BisectionError):
    """The midpoint or its value became NaN or infinite."""

    kind = ErrorKind.NOT_VALID_VALUE


class RecoveryError(BisectionError):
    """The evaluator raised an unexpected exception, caught at the solver boundary."""

    kind = ErrorKind.RECOVERY
