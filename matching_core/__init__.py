"""
matching_core package: Hungarian (Kuhn-Munkres) assignment solver, matrix IO,
rendering and validation helpers.
"""
from matching_core.errors import InvalidMatrix, InvalidShape, InvariantViolation, MatchingError
from matching_core.hungarian import match, solve
from matching_core.models import CellPosition, MatchResult

__all__ = [
    "solve",
    "match",
    "CellPosition",
    "MatchResult",
    "MatchingError",
    "InvalidShape",
    "InvalidMatrix",
    "InvariantViolation",
]
