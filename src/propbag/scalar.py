"""
Single-value accessors.

Every accessor in the package starts from ``lookup``: a ``None`` bag or an
absent key is ``MissingFieldError``, anything else (explicit ``None``
included) is handed to the kind's coercion rule.

Reference variants return a shallow copy of the coerced value, or ``None``,
so the result never aliases a mutable object held by the bag.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Mapping, Optional, TypeVar

from .errors import MissingFieldError
from .kinds import ValueKind
from .policies import or_abort, or_default, or_else

logger = logging.getLogger(__name__)

T = TypeVar("T")

PropertyBag = Optional[Mapping[str, Any]]


def lookup(bag: PropertyBag, prop: str) -> Any:
    """
    Return the raw value stored under ``prop``.

    Raises:
        MissingFieldError: If ``bag`` is None or does not contain ``prop``
    """
    if bag is None or prop not in bag:
        raise MissingFieldError(prop)
    return bag[prop]


def get(bag: PropertyBag, prop: str, kind: ValueKind[T]) -> T:
    """
    Read ``prop`` and coerce it to ``kind``.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value cannot be coerced
        RegexMismatchError: If ``kind`` requires a pattern the string does not match
    """
    return kind.convert(prop, lookup(bag, prop))


def must_get(bag: PropertyBag, prop: str, kind: ValueKind[T], message: Optional[str] = None) -> T:
    return or_abort(lambda: get(bag, prop, kind), message)


def get_or_default(bag: PropertyBag, prop: str, kind: ValueKind[T], default: T) -> T:
    return or_default(lambda: get(bag, prop, kind), default)


def get_or_else(bag: PropertyBag, prop: str, kind: ValueKind[T], default_fn: Callable[[], T]) -> T:
    return or_else(lambda: get(bag, prop, kind), default_fn)


def get_ref(bag: PropertyBag, prop: str, kind: ValueKind[T]) -> T:
    """Like ``get`` but returns a fresh copy of the value."""
    return copy.copy(get(bag, prop, kind))


def must_get_ref(bag: PropertyBag, prop: str, kind: ValueKind[T], message: Optional[str] = None) -> T:
    return or_abort(lambda: get_ref(bag, prop, kind), message)


def get_ref_or_default(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default: Optional[T] = None
) -> Optional[T]:
    """Copy of the value, or ``default`` exactly as passed (``None`` allowed)."""
    return or_default(lambda: get_ref(bag, prop, kind), default)


def get_ref_or_else(
    bag: PropertyBag, prop: str, kind: ValueKind[T], default_fn: Callable[[], Optional[T]]
) -> Optional[T]:
    return or_else(lambda: get_ref(bag, prop, kind), default_fn)


def get_with(bag: PropertyBag, prop: str, convert: Callable[[Any], T], default: T) -> T:
    """
    Hand the raw value under ``prop`` to ``convert``.

    Unlike the kind-based accessors the converter sees every present value,
    explicit ``None`` included. Only an absent property falls back to
    ``default``; errors raised by ``convert`` propagate.
    """
    try:
        raw = lookup(bag, prop)
    except MissingFieldError:  # Expected for optional properties
        logger.debug("Property %r missing, using default", prop)
        return default
    return convert(raw)


def get_with_or_else(
    bag: PropertyBag, prop: str, convert: Callable[[Any], T], default_fn: Callable[[], T]
) -> T:
    try:
        raw = lookup(bag, prop)
    except MissingFieldError:  # Expected for optional properties
        logger.debug("Property %r missing, computing default", prop)
        return default_fn()
    return convert(raw)


__all__ = [
    "PropertyBag",
    "get",
    "get_or_default",
    "get_or_else",
    "get_ref",
    "get_ref_or_default",
    "get_ref_or_else",
    "get_with",
    "get_with_or_else",
    "lookup",
    "must_get",
    "must_get_ref",
]
