"""
Guarded bisection root finder.

This package provides the bisection solver, its error taxonomy and adapters
for evaluator functions.
"""

from bisectroot.solver.bisection import (
    BisectionResult,
    Evaluator,
    Interval,
    Sample,
    find,
    find_result,
)
from bisectroot.solver.errors import (
    BisectionError,
    ErrorKind,
    EvaluationError,
    InternalError,
    MaximalIterationError,
    NoRootError,
    NotValidValueError,
    RecoveryError,
)
from bisectroot.solver.evaluators import CountingEvaluator, pair_evaluator

__all__ = [
    "BisectionError",
    "BisectionResult",
    "CountingEvaluator",
    "ErrorKind",
    "EvaluationError",
    "Evaluator",
    "InternalError",
    "Interval",
    "MaximalIterationError",
    "NoRootError",
    "NotValidValueError",
    "RecoveryError",
    "Sample",
    "find",
    "find_result",
    "pair_evaluator",
]
