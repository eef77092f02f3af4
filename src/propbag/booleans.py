"""Boolean property accessors. Only real booleans are accepted; ``"true"`` is an error."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from . import arrays, scalar
from .kinds import BOOLEAN
from .scalar import PropertyBag


def get_boolean(bag: PropertyBag, prop: str) -> bool:
    return scalar.get(bag, prop, BOOLEAN)


def must_get_boolean(bag: PropertyBag, prop: str, message: Optional[str] = None) -> bool:
    return scalar.must_get(bag, prop, BOOLEAN, message)


def get_boolean_or_default(bag: PropertyBag, prop: str, default: bool) -> bool:
    return scalar.get_or_default(bag, prop, BOOLEAN, default)


def get_boolean_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], bool]) -> bool:
    return scalar.get_or_else(bag, prop, BOOLEAN, default_fn)


def get_boolean_ref(bag: PropertyBag, prop: str) -> bool:
    return scalar.get_ref(bag, prop, BOOLEAN)


def must_get_boolean_ref(bag: PropertyBag, prop: str, message: Optional[str] = None) -> bool:
    return scalar.must_get_ref(bag, prop, BOOLEAN, message)


def get_boolean_ref_or_default(bag: PropertyBag, prop: str, default: Optional[bool] = None) -> Optional[bool]:
    return scalar.get_ref_or_default(bag, prop, BOOLEAN, default)


def get_boolean_ref_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], Optional[bool]]) -> Optional[bool]:
    return scalar.get_ref_or_else(bag, prop, BOOLEAN, default_fn)


def get_boolean_with(bag: PropertyBag, prop: str, convert: Callable[[Any], bool], default: bool) -> bool:
    """Let ``convert`` interpret whatever is stored under ``prop``; ``default`` if absent."""
    return scalar.get_with(bag, prop, convert, default)


def get_boolean_with_or_else(
    bag: PropertyBag, prop: str, convert: Callable[[Any], bool], default_fn: Callable[[], bool]
) -> bool:
    return scalar.get_with_or_else(bag, prop, convert, default_fn)


def get_boolean_array(bag: PropertyBag, prop: str) -> List[bool]:
    return arrays.get_array(bag, prop, BOOLEAN)


def must_get_boolean_array(bag: PropertyBag, prop: str, message: Optional[str] = None) -> List[bool]:
    return arrays.must_get_array(bag, prop, BOOLEAN, message)


def get_boolean_array_or_default(bag: PropertyBag, prop: str, default: List[bool]) -> List[bool]:
    return arrays.get_array_or_default(bag, prop, BOOLEAN, default)


def get_boolean_array_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], List[bool]]) -> List[bool]:
    return arrays.get_array_or_else(bag, prop, BOOLEAN, default_fn)


def get_boolean_ref_array(bag: PropertyBag, prop: str) -> List[Optional[bool]]:
    return arrays.get_ref_array(bag, prop, BOOLEAN)


def get_boolean_array_ref(bag: PropertyBag, prop: str) -> List[bool]:
    return arrays.get_array_ref(bag, prop, BOOLEAN)


def get_boolean_array_ref_or_default(
    bag: PropertyBag, prop: str, default: Optional[List[bool]] = None
) -> Optional[List[bool]]:
    return arrays.get_array_ref_or_default(bag, prop, BOOLEAN, default)


def get_boolean_ref_array_ref(bag: PropertyBag, prop: str) -> List[Optional[bool]]:
    return arrays.get_ref_array_ref(bag, prop, BOOLEAN)


__all__ = [
    "get_boolean",
    "get_boolean_array",
    "get_boolean_array_or_default",
    "get_boolean_array_or_else",
    "get_boolean_array_ref",
    "get_boolean_array_ref_or_default",
    "get_boolean_or_default",
    "get_boolean_or_else",
    "get_boolean_ref",
    "get_boolean_ref_array",
    "get_boolean_ref_array_ref",
    "get_boolean_ref_or_default",
    "get_boolean_ref_or_else",
    "get_boolean_with",
    "get_boolean_with_or_else",
    "must_get_boolean",
    "must_get_boolean_array",
    "must_get_boolean_ref",
]
