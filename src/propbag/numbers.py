"""
Numeric property accessors.

Every function takes the target width as ``kind`` (float64 unless stated).
Numeric strings are accepted, floats are truncated toward zero for integer
widths and out-of-range integers wrap instead of raising.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from . import arrays, scalar
from .coercion_helpers.numeric import Number, NumberKind
from .kinds import number_kind
from .scalar import PropertyBag

_DEFAULT_KIND = NumberKind.FLOAT64


def get_number(bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND) -> Number:
    """
    Read ``prop`` as a number of width ``kind``.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not numeric; a numeric string that
            fails to parse carries the parse error as cause
    """
    return scalar.get(bag, prop, number_kind(kind))


def must_get_number(
    bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND, message: Optional[str] = None
) -> Number:
    return scalar.must_get(bag, prop, number_kind(kind), message)


def get_number_or_default(bag: PropertyBag, prop: str, default: Number, kind: NumberKind = _DEFAULT_KIND) -> Number:
    return scalar.get_or_default(bag, prop, number_kind(kind), default)


def get_number_or_else(
    bag: PropertyBag, prop: str, default_fn: Callable[[], Number], kind: NumberKind = _DEFAULT_KIND
) -> Number:
    return scalar.get_or_else(bag, prop, number_kind(kind), default_fn)


def get_number_ref(bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND) -> Number:
    return scalar.get_ref(bag, prop, number_kind(kind))


def must_get_number_ref(
    bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND, message: Optional[str] = None
) -> Number:
    return scalar.must_get_ref(bag, prop, number_kind(kind), message)


def get_number_ref_or_default(
    bag: PropertyBag, prop: str, default: Optional[Number] = None, kind: NumberKind = _DEFAULT_KIND
) -> Optional[Number]:
    return scalar.get_ref_or_default(bag, prop, number_kind(kind), default)


def get_number_ref_or_else(
    bag: PropertyBag, prop: str, default_fn: Callable[[], Optional[Number]], kind: NumberKind = _DEFAULT_KIND
) -> Optional[Number]:
    return scalar.get_ref_or_else(bag, prop, number_kind(kind), default_fn)


def get_number_array(bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND) -> List[Number]:
    return arrays.get_array(bag, prop, number_kind(kind))


def must_get_number_array(
    bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND, message: Optional[str] = None
) -> List[Number]:
    return arrays.must_get_array(bag, prop, number_kind(kind), message)


def get_number_array_or_default(
    bag: PropertyBag, prop: str, default: List[Number], kind: NumberKind = _DEFAULT_KIND
) -> List[Number]:
    return arrays.get_array_or_default(bag, prop, number_kind(kind), default)


def get_number_array_or_else(
    bag: PropertyBag, prop: str, default_fn: Callable[[], List[Number]], kind: NumberKind = _DEFAULT_KIND
) -> List[Number]:
    return arrays.get_array_or_else(bag, prop, number_kind(kind), default_fn)


def get_number_ref_array(bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND) -> List[Optional[Number]]:
    return arrays.get_ref_array(bag, prop, number_kind(kind))


def get_number_array_ref(bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND) -> List[Number]:
    return arrays.get_array_ref(bag, prop, number_kind(kind))


def get_number_array_ref_or_default(
    bag: PropertyBag, prop: str, default: Optional[List[Number]] = None, kind: NumberKind = _DEFAULT_KIND
) -> Optional[List[Number]]:
    return arrays.get_array_ref_or_default(bag, prop, number_kind(kind), default)


def get_number_ref_array_ref(
    bag: PropertyBag, prop: str, kind: NumberKind = _DEFAULT_KIND
) -> List[Optional[Number]]:
    return arrays.get_ref_array_ref(bag, prop, number_kind(kind))


__all__ = [
    "get_number",
    "get_number_array",
    "get_number_array_or_default",
    "get_number_array_or_else",
    "get_number_array_ref",
    "get_number_array_ref_or_default",
    "get_number_or_default",
    "get_number_or_else",
    "get_number_ref",
    "get_number_ref_array",
    "get_number_ref_array_ref",
    "get_number_ref_or_default",
    "get_number_ref_or_else",
    "must_get_number",
    "must_get_number_array",
    "must_get_number_ref",
]
