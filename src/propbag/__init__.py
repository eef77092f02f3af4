"""Typed access to loosely typed property bags.

A property bag is any ``Mapping[str, Any]`` (or ``None``), typically the
result of decoding JSON or schema-less configuration. The accessors read one
key, coerce the value to a requested kind and apply one failure policy:

- ``get_*`` raises ``MissingFieldError``, ``InvalidTypeError`` or ``RegexMismatchError``
- ``must_get_*`` raises ``PropertyAbortError`` wrapping that error
- ``get_*_or_default`` returns the given default
- ``get_*_or_else`` returns the result of a default function
"""

import logging

from . import arrays, bigints, booleans, dates, numbers, objects, scalar, strings
from .arrays import get_object_array_via, get_object_array_via_or_default
from .bigints import get_bigint, get_bigint_or_default, must_get_bigint
from .booleans import get_boolean, get_boolean_array, get_boolean_or_default, must_get_boolean
from .dates import get_date, get_date_array, get_date_or_default, must_get_date
from .errors import InvalidTypeError, MissingFieldError, PropertyAbortError, PropertyError, RegexMismatchError
from .kinds import BIGINT, BOOLEAN, STRING, TIMESTAMP, NumberKind, ValueKind, number_kind, object_kind, regex_kind
from .numbers import get_number, get_number_array, get_number_or_default, must_get_number
from .objects import (
    get_map,
    get_object,
    get_object_allow_null,
    get_object_or_default,
    get_object_via,
    get_object_via_or_default,
    must_get_object,
)
from .policies import FailurePolicy
from .strings import (
    get_string,
    get_string_array,
    get_string_matching,
    get_string_or_default,
    get_string_or_else,
    must_get_string,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BIGINT",
    "BOOLEAN",
    "FailurePolicy",
    "InvalidTypeError",
    "MissingFieldError",
    "NumberKind",
    "PropertyAbortError",
    "PropertyError",
    "RegexMismatchError",
    "STRING",
    "TIMESTAMP",
    "ValueKind",
    "arrays",
    "bigints",
    "booleans",
    "dates",
    "get_bigint",
    "get_bigint_or_default",
    "get_boolean",
    "get_boolean_array",
    "get_boolean_or_default",
    "get_date",
    "get_date_array",
    "get_date_or_default",
    "get_map",
    "get_number",
    "get_number_array",
    "get_number_or_default",
    "get_object",
    "get_object_allow_null",
    "get_object_array_via",
    "get_object_array_via_or_default",
    "get_object_or_default",
    "get_object_via",
    "get_object_via_or_default",
    "get_string",
    "get_string_array",
    "get_string_matching",
    "get_string_or_default",
    "get_string_or_else",
    "must_get_bigint",
    "must_get_boolean",
    "must_get_date",
    "must_get_number",
    "must_get_object",
    "must_get_string",
    "number_kind",
    "numbers",
    "object_kind",
    "objects",
    "regex_kind",
    "scalar",
    "strings",
]
