"""Arbitrary-precision integer accessors.

Decimal strings are parsed exactly, so values beyond 64 bits survive.
Floats are truncated toward zero.
"""

from __future__ import annotations

from typing import Callable, Optional

from . import scalar
from .kinds import BIGINT
from .scalar import PropertyBag


def get_bigint(bag: PropertyBag, prop: str) -> int:
    return scalar.get(bag, prop, BIGINT)


def must_get_bigint(bag: PropertyBag, prop: str, message: Optional[str] = None) -> int:
    return scalar.must_get(bag, prop, BIGINT, message)


def get_bigint_or_default(bag: PropertyBag, prop: str, default: int) -> int:
    return scalar.get_or_default(bag, prop, BIGINT, default)


def get_bigint_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], int]) -> int:
    return scalar.get_or_else(bag, prop, BIGINT, default_fn)


def get_bigint_ref(bag: PropertyBag, prop: str) -> int:
    return scalar.get_ref(bag, prop, BIGINT)


def must_get_bigint_ref(bag: PropertyBag, prop: str, message: Optional[str] = None) -> int:
    return scalar.must_get_ref(bag, prop, BIGINT, message)


def get_bigint_ref_or_default(bag: PropertyBag, prop: str, default: Optional[int] = None) -> Optional[int]:
    return scalar.get_ref_or_default(bag, prop, BIGINT, default)


def get_bigint_ref_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], Optional[int]]) -> Optional[int]:
    return scalar.get_ref_or_else(bag, prop, BIGINT, default_fn)


__all__ = [
    "get_bigint",
    "get_bigint_or_default",
    "get_bigint_or_else",
    "get_bigint_ref",
    "get_bigint_ref_or_default",
    "get_bigint_ref_or_else",
    "must_get_bigint",
    "must_get_bigint_ref",
]
