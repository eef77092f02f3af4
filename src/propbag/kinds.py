"""Target kinds understood by the accessors.

A ``ValueKind`` is the explicit type tag passed to the generic accessors: it
names the expected kind for error messages, holds the coercion rule and,
where one exists, the numpy dtype of an already-typed array of that kind.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

import numpy as np

from .coercion import (
    coerce_bigint,
    coerce_bool,
    coerce_instance,
    coerce_number,
    coerce_regex_string,
    coerce_string,
    coerce_timestamp,
    type_label,
)
from .coercion_helpers.errors import CoercionError, InvalidPatternError, PatternMismatchError
from .coercion_helpers.numeric import NumberKind
from .errors import InvalidTypeError, RegexMismatchError

T = TypeVar("T")


@dataclass(frozen=True)
class ValueKind(Generic[T]):
    """Expected-kind description, coercion rule and native array dtype."""

    name: str
    coerce: Callable[[Any], T]
    dtype: Optional[np.dtype] = None

    def convert(self, prop: str, value: Any, *, index: Optional[int] = None) -> T:
        """
        Coerce ``value`` read from ``prop``.

        Args:
            prop: Property the value was read from (for error messages)
            value: Raw value
            index: Position of the value when it is an array element

        Raises:
            InvalidTypeError: If the value cannot be coerced or the pattern is invalid
            RegexMismatchError: If a string does not match the kind's pattern
        """
        try:
            return self.coerce(value)
        except PatternMismatchError as exc:
            raise RegexMismatchError(prop, exc.value, exc.pattern) from None
        except InvalidPatternError as exc:
            raise InvalidTypeError.invalid_pattern(prop, exc.pattern, value, exc.cause) from exc.cause
        except CoercionError as exc:
            if index is None:
                raise InvalidTypeError(prop, self.name, value, exc.cause) from exc.cause
            raise InvalidTypeError.for_element(prop, index, self.name, value, exc.cause) from exc.cause


STRING: ValueKind[str] = ValueKind("string", coerce_string)
BOOLEAN: ValueKind[bool] = ValueKind("bool", coerce_bool, np.dtype(np.bool_))
BIGINT: ValueKind[int] = ValueKind("bigint", coerce_bigint)
TIMESTAMP: ValueKind = ValueKind("datetime", coerce_timestamp)


@functools.lru_cache(maxsize=None)
def number_kind(kind: NumberKind = NumberKind.FLOAT64) -> ValueKind:
    """Kind for numbers of the given width."""
    return ValueKind(kind.value, functools.partial(coerce_number, kind=kind), kind.dtype)


@functools.lru_cache(maxsize=256)
def regex_kind(pattern: str) -> ValueKind[str]:
    """Kind for strings matching ``pattern``."""
    return ValueKind("string", functools.partial(coerce_regex_string, pattern=pattern))


@functools.lru_cache(maxsize=256)
def object_kind(cls: type | tuple[type, ...]) -> ValueKind:
    """Kind for values that already are instances of ``cls``."""
    return ValueKind(type_label(cls), functools.partial(coerce_instance, cls=cls))


__all__ = [
    "BIGINT",
    "BOOLEAN",
    "STRING",
    "TIMESTAMP",
    "NumberKind",
    "ValueKind",
    "number_kind",
    "object_kind",
    "regex_kind",
]
