# matching_core/errors.py
from __future__ import annotations


class MatchingError(ValueError):
    """Base class for problems with the matrix handed to the solver."""


class InvalidShape(MatchingError):
    pass


class InvalidMatrix(MatchingError):
    pass


class InvariantViolation(RuntimeError):
    """Internal state the algorithm should never reach. Not retried."""
