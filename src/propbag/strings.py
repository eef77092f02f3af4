"""String property accessors, including pattern-checked strings."""

from __future__ import annotations

from typing import Callable, List, Optional

from . import arrays, scalar
from .kinds import STRING, regex_kind
from .scalar import PropertyBag


def get_string(bag: PropertyBag, prop: str) -> str:
    return scalar.get(bag, prop, STRING)


def must_get_string(bag: PropertyBag, prop: str, message: Optional[str] = None) -> str:
    return scalar.must_get(bag, prop, STRING, message)


def get_string_or_default(bag: PropertyBag, prop: str, default: str) -> str:
    return scalar.get_or_default(bag, prop, STRING, default)


def get_string_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], str]) -> str:
    return scalar.get_or_else(bag, prop, STRING, default_fn)


def get_string_ref(bag: PropertyBag, prop: str) -> str:
    return scalar.get_ref(bag, prop, STRING)


def must_get_string_ref(bag: PropertyBag, prop: str, message: Optional[str] = None) -> str:
    return scalar.must_get_ref(bag, prop, STRING, message)


def get_string_ref_or_default(bag: PropertyBag, prop: str, default: Optional[str] = None) -> Optional[str]:
    return scalar.get_ref_or_default(bag, prop, STRING, default)


def get_string_ref_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], Optional[str]]) -> Optional[str]:
    return scalar.get_ref_or_else(bag, prop, STRING, default_fn)


def get_string_matching(bag: PropertyBag, prop: str, pattern: str) -> str:
    """
    Read ``prop`` as a string containing a match for ``pattern``.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not a string or ``pattern`` is not a valid regex
        RegexMismatchError: If the string does not match
    """
    return scalar.get(bag, prop, regex_kind(pattern))


def must_get_string_matching(bag: PropertyBag, prop: str, pattern: str, message: Optional[str] = None) -> str:
    return scalar.must_get(bag, prop, regex_kind(pattern), message)


def get_string_matching_or_default(bag: PropertyBag, prop: str, pattern: str, default: str) -> str:
    return scalar.get_or_default(bag, prop, regex_kind(pattern), default)


def get_string_matching_or_else(
    bag: PropertyBag, prop: str, pattern: str, default_fn: Callable[[], str]
) -> str:
    return scalar.get_or_else(bag, prop, regex_kind(pattern), default_fn)


def get_string_matching_ref(bag: PropertyBag, prop: str, pattern: str) -> str:
    return scalar.get_ref(bag, prop, regex_kind(pattern))


def must_get_string_matching_ref(
    bag: PropertyBag, prop: str, pattern: str, message: Optional[str] = None
) -> str:
    return scalar.must_get_ref(bag, prop, regex_kind(pattern), message)


def get_string_matching_ref_or_default(
    bag: PropertyBag, prop: str, pattern: str, default: Optional[str] = None
) -> Optional[str]:
    return scalar.get_ref_or_default(bag, prop, regex_kind(pattern), default)


def get_string_matching_ref_or_else(
    bag: PropertyBag, prop: str, pattern: str, default_fn: Callable[[], Optional[str]]
) -> Optional[str]:
    return scalar.get_ref_or_else(bag, prop, regex_kind(pattern), default_fn)


def get_string_array(bag: PropertyBag, prop: str) -> List[str]:
    return arrays.get_array(bag, prop, STRING)


def must_get_string_array(bag: PropertyBag, prop: str, message: Optional[str] = None) -> List[str]:
    return arrays.must_get_array(bag, prop, STRING, message)


def get_string_array_or_default(bag: PropertyBag, prop: str, default: List[str]) -> List[str]:
    return arrays.get_array_or_default(bag, prop, STRING, default)


def get_string_array_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], List[str]]) -> List[str]:
    return arrays.get_array_or_else(bag, prop, STRING, default_fn)


def get_string_ref_array(bag: PropertyBag, prop: str) -> List[Optional[str]]:
    return arrays.get_ref_array(bag, prop, STRING)


def get_string_array_ref(bag: PropertyBag, prop: str) -> List[str]:
    return arrays.get_array_ref(bag, prop, STRING)


def get_string_array_ref_or_default(
    bag: PropertyBag, prop: str, default: Optional[List[str]] = None
) -> Optional[List[str]]:
    return arrays.get_array_ref_or_default(bag, prop, STRING, default)


def get_string_ref_array_ref(bag: PropertyBag, prop: str) -> List[Optional[str]]:
    return arrays.get_ref_array_ref(bag, prop, STRING)


__all__ = [
    "get_string",
    "get_string_array",
    "get_string_array_or_default",
    "get_string_array_or_else",
    "get_string_array_ref",
    "get_string_array_ref_or_default",
    "get_string_matching",
    "get_string_matching_or_default",
    "get_string_matching_or_else",
    "get_string_matching_ref",
    "get_string_matching_ref_or_default",
    "get_string_matching_ref_or_else",
    "get_string_or_default",
    "get_string_or_else",
    "get_string_ref",
    "get_string_ref_array",
    "get_string_ref_array_ref",
    "get_string_ref_or_default",
    "get_string_ref_or_else",
    "must_get_string",
    "must_get_string_array",
    "must_get_string_matching",
    "must_get_string_matching_ref",
    "must_get_string_ref",
]
