"""
Nested object and mapping accessors.

No structural conversion happens here. A value is returned only if it
already is an instance of the requested class; turning a nested bag into a
structured type always goes through a caller-supplied constructor.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, TypeVar

import numpy as np

from .coercion import type_label
from .errors import InvalidTypeError, MissingFieldError
from .kinds import object_kind
from .policies import or_abort, or_default, or_else
from .scalar import PropertyBag, get, get_ref, lookup

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

NestedBag = Mapping[str, Any]
_OBJECT_LABEL = "object"
_BOOL_TYPES = (bool, np.bool_)
_NUMBER_TYPES = (int, float)


def get_object(bag: PropertyBag, prop: str, cls: type[T]) -> T:
    """
    Read ``prop`` as an instance of ``cls``.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not an instance of ``cls``
    """
    return get(bag, prop, object_kind(cls))


def must_get_object(bag: PropertyBag, prop: str, cls: type[T], message: Optional[str] = None) -> T:
    return or_abort(lambda: get_object(bag, prop, cls), message)


def get_object_or_default(bag: PropertyBag, prop: str, cls: type[T], default: T) -> T:
    return or_default(lambda: get_object(bag, prop, cls), default)


def get_object_or_else(bag: PropertyBag, prop: str, cls: type[T], default_fn: Callable[[], T]) -> T:
    return or_else(lambda: get_object(bag, prop, cls), default_fn)


def get_object_ref(bag: PropertyBag, prop: str, cls: type[T]) -> T:
    """Shallow copy of the instance stored under ``prop``."""
    return get_ref(bag, prop, object_kind(cls))


def must_get_object_ref(bag: PropertyBag, prop: str, cls: type[T], message: Optional[str] = None) -> T:
    return or_abort(lambda: get_object_ref(bag, prop, cls), message)


def get_object_ref_or_default(
    bag: PropertyBag, prop: str, cls: type[T], default: Optional[T] = None
) -> Optional[T]:
    return or_default(lambda: get_object_ref(bag, prop, cls), default)


def get_object_ref_or_else(
    bag: PropertyBag, prop: str, cls: type[T], default_fn: Callable[[], Optional[T]]
) -> Optional[T]:
    return or_else(lambda: get_object_ref(bag, prop, cls), default_fn)


def get_object_allow_null(bag: PropertyBag, prop: str, cls: type[T], default: T) -> Optional[T]:
    """
    Read ``prop`` treating an explicit ``None`` as a valid result.

    Returns:
        None if the property is present and null, a copy of the value if it is
        an instance of ``cls``, otherwise ``default``
    """
    try:
        value = lookup(bag, prop)
    except MissingFieldError:  # Expected for optional properties
        logger.debug("Property %r missing, using default", prop)
        return default
    if value is None:
        return None
    if isinstance(value, cls):
        return copy.copy(value)
    logger.debug("Property %r is %s, not %s; using default", prop, type(value).__name__, type_label(cls))
    return default


def get_object_via(bag: PropertyBag, prop: str, ctor: Callable[[NestedBag], T]) -> T:
    """
    Build an object from the nested bag under ``prop``.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not a mapping
    """
    value = lookup(bag, prop)
    if not isinstance(value, Mapping):
        raise InvalidTypeError(prop, _OBJECT_LABEL, value)
    return ctor(value)


def must_get_object_via(
    bag: PropertyBag, prop: str, ctor: Callable[[NestedBag], T], message: Optional[str] = None
) -> T:
    return or_abort(lambda: get_object_via(bag, prop, ctor), message)


def get_object_via_or_default(bag: PropertyBag, prop: str, ctor: Callable[[NestedBag], T], default: T) -> T:
    """Build an object from the nested bag under ``prop``, or return ``default``.

    ``ctor`` only runs for a nested mapping; whatever it raises propagates.
    """
    return or_default(lambda: get_object_via(bag, prop, ctor), default)


def get_object_via_or_else(
    bag: PropertyBag, prop: str, ctor: Callable[[NestedBag], T], default_fn: Callable[[], T]
) -> T:
    return or_else(lambda: get_object_via(bag, prop, ctor), default_fn)


def _is_entry_of(item: Any, cls: type) -> bool:
    # bool subclasses int but is not a number here
    if isinstance(item, _BOOL_TYPES) and cls in _NUMBER_TYPES:
        return False
    return isinstance(item, cls)


def _map_label(key_type: type, value_type: type) -> str:
    return f"Mapping[{key_type.__name__}, {value_type.__name__}]"


def get_map(bag: PropertyBag, prop: str, key_type: type[K] = str, value_type: type[V] = object) -> Mapping[K, V]:
    """
    Read ``prop`` as a mapping whose entries already have the requested types.

    The mapping is returned unchanged. Entries are checked, never converted:
    ``{"a": "1"}`` requested as ``Mapping[str, int]`` is an error, not ``{"a": 1}``.
    Booleans do not satisfy ``int`` or ``float``.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not a mapping or any key or value has another type
    """
    value = lookup(bag, prop)
    expected = _map_label(key_type, value_type)
    if not isinstance(value, Mapping):
        raise InvalidTypeError(prop, expected, value)
    for key, item in value.items():
        if not _is_entry_of(key, key_type) or not _is_entry_of(item, value_type):
            raise InvalidTypeError(prop, expected, value)
    return value


def must_get_map(
    bag: PropertyBag,
    prop: str,
    key_type: type[K] = str,
    value_type: type[V] = object,
    message: Optional[str] = None,
) -> Mapping[K, V]:
    return or_abort(lambda: get_map(bag, prop, key_type, value_type), message)


def get_map_or_default(
    bag: PropertyBag,
    prop: str,
    default: Optional[Mapping[K, V]] = None,
    key_type: type[K] = str,
    value_type: type[V] = object,
) -> Optional[Mapping[K, V]]:
    return or_default(lambda: get_map(bag, prop, key_type, value_type), default)


def get_map_or_else(
    bag: PropertyBag,
    prop: str,
    default_fn: Callable[[], Mapping[K, V]],
    key_type: type[K] = str,
    value_type: type[V] = object,
) -> Mapping[K, V]:
    return or_else(lambda: get_map(bag, prop, key_type, value_type), default_fn)


__all__ = [
    "NestedBag",
    "get_map",
    "get_map_or_default",
    "get_map_or_else",
    "get_object",
    "get_object_allow_null",
    "get_object_or_default",
    "get_object_or_else",
    "get_object_ref",
    "get_object_ref_or_default",
    "get_object_ref_or_else",
    "get_object_via",
    "get_object_via_or_default",
    "get_object_via_or_else",
    "must_get_map",
    "must_get_object",
    "must_get_object_ref",
    "must_get_object_via",
]
