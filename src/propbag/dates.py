"""
Timestamp property accessors.

Accepted values, in order: ``datetime`` instances (returned unchanged),
strict RFC 3339 strings, and numbers counted as milliseconds since the Unix
epoch (returned as aware UTC datetimes).
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from . import arrays, scalar
from .kinds import TIMESTAMP
from .scalar import PropertyBag


def get_date(bag: PropertyBag, prop: str) -> datetime:
    """
    Read ``prop`` as a datetime.

    Raises:
        MissingFieldError: If the property is absent
        InvalidTypeError: If the value is not a timestamp; a malformed string
            carries the parse failure as cause
    """
    return scalar.get(bag, prop, TIMESTAMP)


def must_get_date(bag: PropertyBag, prop: str, message: Optional[str] = None) -> datetime:
    return scalar.must_get(bag, prop, TIMESTAMP, message)


def get_date_or_default(bag: PropertyBag, prop: str, default: datetime) -> datetime:
    return scalar.get_or_default(bag, prop, TIMESTAMP, default)


def get_date_or_else(bag: PropertyBag, prop: str, default_fn: Callable[[], datetime]) -> datetime:
    return scalar.get_or_else(bag, prop, TIMESTAMP, default_fn)


def get_date_ref(bag: PropertyBag, prop: str) -> datetime:
    return scalar.get_ref(bag, prop, TIMESTAMP)


def must_get_date_ref(bag: PropertyBag, prop: str, message: Optional[str] = None) -> datetime:
    return scalar.must_get_ref(bag, prop, TIMESTAMP, message)


def get_date_ref_or_default(bag: PropertyBag, prop: str, default: Optional[datetime] = None) -> Optional[datetime]:
    return scalar.get_ref_or_default(bag, prop, TIMESTAMP, default)


def get_date_ref_or_else(
    bag: PropertyBag, prop: str, default_fn: Callable[[], Optional[datetime]]
) -> Optional[datetime]:
    return scalar.get_ref_or_else(bag, prop, TIMESTAMP, default_fn)


def get_date_array(bag: PropertyBag, prop: str) -> List[datetime]:
    return arrays.get_array(bag, prop, TIMESTAMP)


def must_get_date_array(bag: PropertyBag, prop: str, message: Optional[str] = None) -> List[datetime]:
    return arrays.must_get_array(bag, prop, TIMESTAMP, message)


def get_date_array_or_default(bag: PropertyBag, prop: str, default: List[datetime]) -> List[datetime]:
    return arrays.get_array_or_default(bag, prop, TIMESTAMP, default)


def get_date_array_or_else(
    bag: PropertyBag, prop: str, default_fn: Callable[[], List[datetime]]
) -> List[datetime]:
    return arrays.get_array_or_else(bag, prop, TIMESTAMP, default_fn)


def get_date_ref_array(bag: PropertyBag, prop: str) -> List[Optional[datetime]]:
    return arrays.get_ref_array(bag, prop, TIMESTAMP)


def get_date_array_ref(bag: PropertyBag, prop: str) -> List[datetime]:
    return arrays.get_array_ref(bag, prop, TIMESTAMP)


def get_date_array_ref_or_default(
    bag: PropertyBag, prop: str, default: Optional[List[datetime]] = None
) -> Optional[List[datetime]]:
    return arrays.get_array_ref_or_default(bag, prop, TIMESTAMP, default)


def get_date_ref_array_ref(bag: PropertyBag, prop: str) -> List[Optional[datetime]]:
    return arrays.get_ref_array_ref(bag, prop, TIMESTAMP)


__all__ = [
    "get_date",
    "get_date_array",
    "get_date_array_or_default",
    "get_date_array_or_else",
    "get_date_array_ref",
    "get_date_array_ref_or_default",
    "get_date_or_default",
    "get_date_or_else",
    "get_date_ref",
    "get_date_ref_array",
    "get_date_ref_array_ref",
    "get_date_ref_or_default",
    "get_date_ref_or_else",
    "must_get_date",
    "must_get_date_array",
    "must_get_date_ref",
]
