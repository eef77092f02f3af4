"""Parsing primitives behind the coercion rules."""

from .errors import CoercionError, InvalidPatternError, PatternMismatchError
from .numeric import NumberKind
from .timestamp import RFC3339_PATTERN, UNIX_EPOCH

__all__ = [
    "CoercionError",
    "InvalidPatternError",
    "NumberKind",
    "PatternMismatchError",
    "RFC3339_PATTERN",
    "UNIX_EPOCH",
]
