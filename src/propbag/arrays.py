"""
Array accessors.

An array property is a list or tuple of raw values, or a one-dimensional
numpy array. Elements are coerced with the same rule as the scalar
accessors and the result is all-or-nothing: the first element that fails
fails the whole access. A numpy array whose dtype already is the kind's
native dtype is taken without re-validating its elements. Elements of a
``datetime64`` array are passed on as numpy datetimes.

Four result shapes share that coercion:

- ``get_array``: list of values
- ``get_ref_array``: list of element copies, ``None`` elements kept as ``None``
- ``get_array_ref``: a fresh list object (``None`` permitted as a default)
- ``get_ref_array_ref``: a fresh list of element copies
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence, TypeVar

import numpy as np

from .errors import InvalidTypeError
from .kinds import ValueKind
from .policies import or_abort, or_default, or_else
from .scalar import PropertyBag, lookup

T = TypeVar("T")

_ARRAY_TYPES = (list, tuple)
_ARRAY_LABEL = "array"
_DATETIME64_KIND = "M"


def _raw_elements(prop: str, value: Any, kind: Optional[ValueKind] = None) -> tuple[Sequence[Any], bool]:
    """Return the elements of an array value and whether they are already typed."""
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise InvalidTypeError(prop, _ARRAY_LABEL, value)
        typed = kind is not None and kind.dtype is not None and value.dtype == kind.dtype
        if value.dtype.kind == _DATETIME64_KIND:
            # tolist() would turn nanosecond datetimes into bare ints
            return list(value), typed
        return value.tolist(), typed
    if isinstance(value, _ARRAY_TYPES):
        return value, False
    raise InvalidTypeError(prop, _ARRAY_LABEL, value)


def _coerce_elements(prop: str, value: Any, kind: ValueKind[T], *, keep_none: bool) -> List[Optional[T]]:
    items, typed = _raw_elements(prop, value, kind)
    if typed:
        return list(items)
    result: List[Optional[T]] = []
    for index, item in enumerate(items):
        if keep_none and item is None:
            result.append(None)
            continue
        converted = kind.convert(prop, item, index=index)
        result.append(copy.copy(converted) if keep_none else converted)
    return result


def get_array(bag: PropertyBag, prop: str, kind: ValueKind[T]) -> List[T]:
    """
    Read ``prop`` as an array of ``kind``.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not an array or any element fails coercion
        RegexMismatchError: If any element does not match the kind's pattern
    """
    return _coerce_elements(prop, lookup(bag, prop), kind, keep_none=False)


def must_get_array(bag: PropertyBag, prop: str, kind: ValueKind[T], message: Optional[str] = None) -> List[T]:
    return or_abort(lambda: get_array(bag, prop, kind), message)


def get_array_or_default(bag: PropertyBag, prop: str, kind: ValueKind[T], default: List[T]) -> List[T]:
    return or_default(lambda: get_array(bag, prop, kind), default)


def get_array_or_else(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default_fn: Callable[[], List[T]]
) -> List[T]:
    return or_else(lambda: get_array(bag, prop, kind), default_fn)


def get_ref_array(bag: PropertyBag, prop: str, kind: ValueKind[T]) -> List[Optional[T]]:
    """Array of element copies; explicit ``None`` elements are kept as null references."""
    return _coerce_elements(prop, lookup(bag, prop), kind, keep_none=True)


def must_get_ref_array(
    bag: PropertyBag, prop: str, kind: ValueKind[T], message: Optional[str] = None
) -> List[Optional[T]]:
    return or_abort(lambda: get_ref_array(bag, prop, kind), message)


def get_ref_array_or_default(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default: List[Optional[T]]
) -> List[Optional[T]]:
    return or_default(lambda: get_ref_array(bag, prop, kind), default)


def get_ref_array_or_else(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default_fn: Callable[[], List[Optional[T]]]
) -> List[Optional[T]]:
    return or_else(lambda: get_ref_array(bag, prop, kind), default_fn)


def get_array_ref(bag: PropertyBag, prop: str, kind: ValueKind[T]) -> List[T]:
    return list(get_array(bag, prop, kind))


def must_get_array_ref(
    bag: PropertyBag, prop: str, kind: ValueKind[T], message: Optional[str] = None
) -> List[T]:
    return or_abort(lambda: get_array_ref(bag, prop, kind), message)


def get_array_ref_or_default(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default: Optional[List[T]] = None
) -> Optional[List[T]]:
    return or_default(lambda: get_array_ref(bag, prop, kind), default)


def get_array_ref_or_else(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default_fn: Callable[[], Optional[List[T]]]
) -> Optional[List[T]]:
    return or_else(lambda: get_array_ref(bag, prop, kind), default_fn)


def get_ref_array_ref(bag: PropertyBag, prop: str, kind: ValueKind[T]) -> List[Optional[T]]:
    return list(get_ref_array(bag, prop, kind))


def must_get_ref_array_ref(
    bag: PropertyBag, prop: str, kind: ValueKind[T], message: Optional[str] = None
) -> List[Optional[T]]:
    return or_abort(lambda: get_ref_array_ref(bag, prop, kind), message)


def get_ref_array_ref_or_default(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default: Optional[List[Optional[T]]] = None
) -> Optional[List[Optional[T]]]:
    return or_default(lambda: get_ref_array_ref(bag, prop, kind), default)


def get_ref_array_ref_or_else(
    bag: PropertyBag,
    prop: str,
    kind: ValueKind[T],
    default_fn: Callable[[], Optional[List[Optional[T]]]],
) -> Optional[List[Optional[T]]]:
    return or_else(lambda: get_ref_array_ref(bag, prop, kind), default_fn)


def get_object_array_via(bag: PropertyBag, prop: str, ctor: Callable[[Mapping[str, Any]], T]) -> List[T]:
    """
    Build one object per nested bag in the array under ``prop``.

    Every element is checked before ``ctor`` runs, so a single non-mapping
    element fails the access without constructing anything.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not an array or an element is not a mapping
    """
    items, _ = _raw_elements(prop, lookup(bag, prop))
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise InvalidTypeError.for_element(prop, index, "object", item)
    return [ctor(item) for item in items]


def must_get_object_array_via(
    bag: PropertyBag, prop: str, ctor: Callable[[Mapping[str, Any]], T], message: Optional[str] = None
) -> List[T]:
    return or_abort(lambda: get_object_array_via(bag, prop, ctor), message)


def get_object_array_via_or_default(
    bag: PropertyBag, prop: str, ctor: Callable[[Mapping[str, Any]], T], default: List[T]
) -> List[T]:
    return or_default(lambda: get_object_array_via(bag, prop, ctor), default)


def get_object_array_via_or_else(
    bag: PropertyBag,
    prop: str,
    ctor: Callable[[Mapping[str, Any]], T],
    default_fn: Callable[[], List[T]],
) -> List[T]:
    return or_else(lambda: get_object_array_via(bag, prop, ctor), default_fn)


__all__ = [
    "get_array",
    "get_array_or_default",
    "get_array_or_else",
    "get_array_ref",
    "get_array_ref_or_default",
    "get_array_ref_or_else",
    "get_object_array_via",
    "get_object_array_via_or_default",
    "get_object_array_via_or_else",
    "get_ref_array",
    "get_ref_array_or_default",
    "get_ref_array_or_else",
    "get_ref_array_ref",
    "get_ref_array_ref_or_default",
    "get_ref_array_ref_or_else",
    "must_get_array",
    "must_get_array_ref",
    "must_get_object_array_via",
    "must_get_ref_array",
    "must_get_ref_array_ref",
]
