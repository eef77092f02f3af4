"""Failure signals raised by the coercion rules.

These never leave the package: accessors translate them into the
``propbag.errors`` taxonomy once the property name is known.
"""

from __future__ import annotations

from typing import Optional


class CoercionError(ValueError):
    """Value cannot be converted to the requested kind."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidPatternError(CoercionError):
    """Regular expression does not compile."""

    def __init__(self, pattern: str, cause: BaseException) -> None:
        super().__init__(f"invalid regex {pattern!r}: {cause}", cause=cause)
        self.pattern = pattern


class PatternMismatchError(CoercionError):
    """String does not match the regular expression."""

    def __init__(self, value: str, pattern: str) -> None:
        super().__init__(f"{value!r} does not match {pattern!r}")
        self.value = value
        self.pattern = pattern


__all__ = ["CoercionError", "InvalidPatternError", "PatternMismatchError"]
