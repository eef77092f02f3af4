"""
Numeric parsing and fixed-width narrowing.

Conversions here are best effort. Floats narrowed to an integer width are
truncated toward zero and integers wider than the target wrap around
(two's complement) instead of being rejected.
"""

from __future__ import annotations

import enum
import math
import re
from typing import Union

import numpy as np

from .errors import CoercionError

Number = Union[int, float]

# ASCII only; int() and float() alone would also accept whitespace, underscores and non-ASCII digits
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT_TEXT = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_UINT64_MASK = (1 << 64) - 1


class NumberKind(enum.Enum):
    """Closed set of numeric target widths."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_DTYPES[self])

    @property
    def is_float(self) -> bool:
        return self.dtype.kind == "f"


_DTYPES = {
    NumberKind.INT: np.int64,
    NumberKind.INT8: np.int8,
    NumberKind.INT16: np.int16,
    NumberKind.INT32: np.int32,
    NumberKind.INT64: np.int64,
    NumberKind.UINT: np.uint64,
    NumberKind.UINT8: np.uint8,
    NumberKind.UINT16: np.uint16,
    NumberKind.UINT32: np.uint32,
    NumberKind.UINT64: np.uint64,
    NumberKind.FLOAT32: np.float32,
    NumberKind.FLOAT64: np.float64,
}


def parse_number_text(text: str, kind: NumberKind) -> Number:
    """
    Parse a base-10 numeric string for the given target kind.

    Integer targets take an exact integer parse when the text is a plain
    integer, so values beyond float64 precision survive; everything else
    is parsed as a float. Only ASCII decimal and exponent notation is
    accepted, plus the ``inf``/``infinity``/``nan`` spellings.

    Raises:
        CoercionError: If the text is not numeric, or names a finite value
            outside the float64 range
    """
    if not kind.is_float and _INTEGER_TEXT.fullmatch(text):
        return parse_integer_text(text)
    if _SPECIAL_FLOAT_TEXT.fullmatch(text):
        return float(text)
    if not _FLOAT_TEXT.fullmatch(text):
        raise CoercionError(f"cannot parse {text!r} as a number", cause=ValueError(f"invalid syntax: {text!r}"))
    value = float(text)
    if math.isinf(value):
        raise CoercionError(
            f"cannot parse {text!r} as a number", cause=OverflowError(f"{text!r} is out of the float64 range")
        )
    return value


def parse_integer_text(text: str) -> int:
    """
    Parse a decimal integer string exactly.

    Raises:
        CoercionError: If the text is not an optionally signed run of digits,
            or exceeds the interpreter's integer string conversion limit
    """
    if not _INTEGER_TEXT.fullmatch(text):
        raise CoercionError(f"cannot parse {text!r} as a decimal integer")
    try:
        return int(text, 10)
    except ValueError as exc:
        raise CoercionError(f"cannot parse {text!r} as a decimal integer", cause=exc) from exc


def truncate_to_int(value: float) -> int:
    """Drop the fractional part of ``value``.

    Raises:
        CoercionError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise CoercionError(f"cannot convert non-finite value {value!r} to an integer")
    return math.trunc(value)


def wrap_integer(value: int, dtype: np.dtype) -> int:
    """Reinterpret the low bits of ``value`` as an integer of ``dtype``."""
    low_bits = np.array(value & _UINT64_MASK, dtype=np.uint64)
    return int(low_bits.astype(dtype))


def narrow(value: Number, kind: NumberKind) -> Number:
    """
    Convert a native int or float to the width described by ``kind``.

    Returns:
        Plain Python ``float`` for float kinds, ``int`` otherwise

    Raises:
        CoercionError: If the value cannot be represented at all (NaN or
            infinity to an integer, an integer too large for a float)
    """
    if kind.is_float:
        try:
            as_float = float(value)
        except OverflowError as exc:
            raise CoercionError(f"{value!r} is too large for {kind.value}", cause=exc) from exc
        if kind is NumberKind.FLOAT64:
            return as_float
        with np.errstate(over="ignore"):
            return float(kind.dtype.type(as_float))

    if isinstance(value, float):
        value = truncate_to_int(value)
    return wrap_integer(value, kind.dtype)


__all__ = [
    "Number",
    "NumberKind",
    "narrow",
    "parse_integer_text",
    "parse_number_text",
    "truncate_to_int",
    "wrap_integer",
]
