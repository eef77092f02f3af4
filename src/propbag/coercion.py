"""Coercion rules for dynamically typed property values.

Each rule converts one raw value to a target kind or raises
``CoercionError``. Rules never see the property name and never treat
``None`` as anything but a failure; deciding what an explicit null means is
left to the accessor and its failure policy.
"""

from __future__ import annotations

import functools
import re
from datetime import datetime
from typing import Any, Pattern

import numpy as np

from .coercion_helpers.errors import CoercionError, InvalidPatternError, PatternMismatchError
from .coercion_helpers.numeric import (
    Number,
    NumberKind,
    narrow,
    parse_integer_text,
    parse_number_text,
    truncate_to_int,
)
from .coercion_helpers.timestamp import from_datetime64, from_epoch_millis, parse_rfc3339

_REGEX_CACHE_SIZE = 256
_BOOL_TYPES = (bool, np.bool_)


def _unsupported(value: Any, target: str) -> CoercionError:
    return CoercionError(f"cannot convert {type(value).__name__} to {target}")


def coerce_string(value: Any) -> str:
    """Accept strings only; other values are never stringified."""
    if isinstance(value, str):
        return value
    raise _unsupported(value, "string")


def coerce_bool(value: Any) -> bool:
    """Accept booleans only; ``"true"`` and ``1`` are rejected."""
    if isinstance(value, _BOOL_TYPES):
        return bool(value)
    raise _unsupported(value, "bool")


def coerce_number(value: Any, kind: NumberKind = NumberKind.FLOAT64) -> Number:
    """
    Convert a value to the numeric width described by ``kind``.

    Args:
        value: int, float, numpy numeric scalar, or numeric string
        kind: Target width

    Returns:
        ``int`` for integer kinds, ``float`` for float kinds

    Raises:
        CoercionError: If the value is not numeric (booleans included) or
            cannot be represented at all
    """
    if isinstance(value, _BOOL_TYPES):
        raise _unsupported(value, kind.value)
    if isinstance(value, str):
        return narrow(parse_number_text(value, kind), kind)
    if isinstance(value, np.integer):
        return narrow(int(value), kind)
    if isinstance(value, np.floating):
        return narrow(float(value), kind)
    if isinstance(value, (int, float)):
        return narrow(value, kind)
    raise _unsupported(value, kind.value)


def coerce_bigint(value: Any) -> int:
    """
    Convert a value to an arbitrary-precision integer.

    Decimal strings are parsed exactly, integers are promoted as they are and
    floats are truncated toward zero.

    Raises:
        CoercionError: If the value is not a decimal string or number
    """
    if isinstance(value, _BOOL_TYPES):
        raise _unsupported(value, "bigint")
    if isinstance(value, str):
        return parse_integer_text(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        return truncate_to_int(float(value))
    raise _unsupported(value, "bigint")


def coerce_timestamp(value: Any) -> datetime:
    """
    Convert a value to a ``datetime``.

    Precedence: ``datetime`` instances as they are, numpy ``datetime64``
    values as UTC, then RFC 3339 strings, then numbers as milliseconds since
    the Unix epoch (UTC).

    Raises:
        CoercionError: If the value is none of the above, or a string that is
            not strict RFC 3339
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, np.datetime64):
        return from_datetime64(value)
    if isinstance(value, str):
        return parse_rfc3339(value)
    if isinstance(value, _BOOL_TYPES):
        raise _unsupported(value, "datetime")
    if isinstance(value, (int, np.integer)):
        return from_epoch_millis(int(value))
    if isinstance(value, (float, np.floating)):
        return from_epoch_millis(float(value))
    raise _unsupported(value, "datetime")


@functools.lru_cache(maxsize=_REGEX_CACHE_SIZE)
def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile and cache ``pattern``.

    Raises:
        InvalidPatternError: If the pattern does not compile
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(pattern, exc) from exc


def coerce_regex_string(value: Any, pattern: str) -> str:
    """
    Accept a string that contains a match for ``pattern``.

    Anchor the pattern with ``^``/``$`` to require a full match.

    Raises:
        CoercionError: If the value is not a string
        InvalidPatternError: If the pattern does not compile
        PatternMismatchError: If the string does not match
    """
    text = coerce_string(value)
    if compile_pattern(pattern).search(text) is None:
        raise PatternMismatchError(text, pattern)
    return text


def coerce_instance(value: Any, cls: type | tuple[type, ...]) -> Any:
    """Accept values that already are instances of ``cls``; nothing is converted."""
    if isinstance(value, cls):
        return value
    raise _unsupported(value, type_label(cls))


def type_label(cls: type | tuple[type, ...]) -> str:
    if isinstance(cls, tuple):
        return " | ".join(item.__name__ for item in cls)
    return cls.__name__


__all__ = [
    "CoercionError",
    "InvalidPatternError",
    "NumberKind",
    "PatternMismatchError",
    "coerce_bigint",
    "coerce_bool",
    "coerce_instance",
    "coerce_number",
    "coerce_regex_string",
    "coerce_string",
    "coerce_timestamp",
    "compile_pattern",
    "type_label",
]
