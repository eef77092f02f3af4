"""Exception classes for property bag access.

Every accessor failure is one of three kinds, all subclasses of
``PropertyError``:

1. ``MissingFieldError``: the bag is ``None`` or does not contain the key.
2. ``InvalidTypeError``: the key is present but its value cannot be coerced
   to the requested kind.
3. ``RegexMismatchError``: the value is a string that does not match the
   requested pattern.

``PropertyAbortError`` is the fault raised by the ``must_*`` accessors. It
wraps one of the kinds above and is deliberately not a ``PropertyError``.
"""

from __future__ import annotations

from typing import Any, Optional


class PropertyError(Exception):
    """Property bag access failed.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Property bag access failed"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class MissingFieldError(PropertyError):
    """Property is missing from the bag."""

    def __init__(self, prop: str) -> None:
        super().__init__(f"property '{prop}' is missing", prop=prop)


class InvalidTypeError(PropertyError):
    """Property exists but is not of the expected type."""

    def __init__(self, prop: str, expected: str, actual: Any, cause: Optional[BaseException] = None) -> None:
        message = f"property '{prop}' is not of type {expected}, got {type(actual).__name__}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, prop=prop, expected=expected, actual=actual, cause=cause)
        if cause is not None:
            self.__cause__ = cause

    @property
    def actual_type(self) -> str:
        return type(self.actual).__name__

    @classmethod
    def for_element(
        cls, prop: str, index: int, expected: str, actual: Any, cause: Optional[BaseException] = None
    ) -> "InvalidTypeError":
        """Create error for an array element that failed coercion."""
        err = cls(prop, f"{expected} element", actual, cause)
        err.index = index
        err.args = (f"{err.args[0]} (index {index})",)
        return err

    @classmethod
    def invalid_pattern(cls, prop: str, pattern: str, actual: Any, cause: BaseException) -> "InvalidTypeError":
        """Create error for a pattern that does not compile; ``actual`` is the property value."""
        err = cls(prop, "string matching a valid regex", actual, cause)
        err.pattern = pattern
        err.args = (f"property '{prop}': invalid regex {pattern!r}: {cause}",)
        return err


class RegexMismatchError(PropertyError):
    """Property is a string but does not match the required pattern."""

    def __init__(self, prop: str, value: str, pattern: str) -> None:
        super().__init__(
            f"property '{prop}' value {value!r} does not match pattern {pattern!r}",
            prop=prop,
            value=value,
            pattern=pattern,
        )


class PropertyAbortError(RuntimeError):
    """Required property could not be read."""

    def __init__(self, error: PropertyError, message: Optional[str] = None) -> None:
        super().__init__(message if message else str(error))
        self.error = error
        self.__cause__ = error

    @property
    def prop(self) -> str:
        return self.error.prop


__all__ = [
    "InvalidTypeError",
    "MissingFieldError",
    "PropertyAbortError",
    "PropertyError",
    "RegexMismatchError",
]
