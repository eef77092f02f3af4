from __future__ import annotations

"""Strict RFC 3339 parsing and epoch-millisecond conversion."""

import re
from datetime import datetime, timedelta, timezone
from typing import Union

import numpy as np

from .errors import CoercionError
from .numeric import truncate_to_int

RFC3339_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})T"
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})"
)
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# datetime resolution
_FRACTION_DIGITS = 6


def parse_rfc3339(text: str) -> datetime:
    """
    Parse ``text`` as an RFC 3339 date-time.

    Only the full ``date-time`` production is accepted: no date-only values,
    no space separator, no missing offset, and ``T``/``Z`` must be uppercase.
    Fractional seconds beyond microseconds are truncated.

    Raises:
        CoercionError: If the text does not conform or names an impossible date
    """
    match = RFC3339_PATTERN.fullmatch(text)
    if match is None:
        raise CoercionError(f"{text!r} is not an RFC 3339 timestamp")

    fraction = (match["fraction"] or "")[:_FRACTION_DIGITS].ljust(_FRACTION_DIGITS, "0")
    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=_parse_offset(match["offset"]),
        )
    except ValueError as exc:
        raise CoercionError(f"{text!r} is not a valid RFC 3339 timestamp", cause=exc) from exc


def _parse_offset(token: str) -> timezone:
    if token == "Z":
        return timezone.utc
    hours, minutes = int(token[1:3]), int(token[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError(f"UTC offset out of range: {token}")
    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if token[0] == "-" else offset)


def from_epoch_millis(value: Union[int, float]) -> datetime:
    """
    Convert milliseconds since the Unix epoch to an aware UTC datetime.

    Floats are truncated to whole milliseconds first.

    Raises:
        CoercionError: If value is not finite or falls outside datetime's range
    """
    millis = truncate_to_int(value) if isinstance(value, float) else int(value)
    try:
        return UNIX_EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise CoercionError(f"{millis} ms is outside the supported date range", cause=exc) from exc



def from_datetime64(value: np.datetime64) -> datetime:
    """
    Convert a numpy ``datetime64`` to an aware UTC datetime.

    numpy datetimes carry no zone and are read as UTC. Resolution finer than
    microseconds is truncated.

    Raises:
        CoercionError: If value is NaT or falls outside datetime's range
    """
    if np.isnat(value):
        raise CoercionError("cannot convert NaT to a datetime")
    micros = int(value.astype("datetime64[us]").astype(np.int64))
    try:
        return UNIX_EPOCH + timedelta(microseconds=micros)
    except OverflowError as exc:
        raise CoercionError(f"{value} is outside the supported date range", cause=exc) from exc


__all__ = ["RFC3339_PATTERN", "UNIX_EPOCH", "from_datetime64", "from_epoch_millis", "parse_rfc3339"]
