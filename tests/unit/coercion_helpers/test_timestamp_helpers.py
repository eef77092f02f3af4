"""Tests for propbag.coercion_helpers.timestamp module."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from propbag.coercion_helpers.errors import CoercionError
from propbag.coercion_helpers.timestamp import UNIX_EPOCH, from_datetime64, from_epoch_millis, parse_rfc3339


class TestParseRfc3339:
    """Tests for parse_rfc3339 function."""

    def test_utc_designator(self) -> None:
        """Z suffix yields an aware UTC datetime."""
        assert parse_rfc3339("2023-11-14T22:13:20Z") == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_numeric_offset_and_fraction(self) -> None:
        """Offsets are kept and fractions truncated to microseconds."""
        result = parse_rfc3339("2023-11-14T22:13:20.123456789+02:00")
        assert result.microsecond == 123456
        assert result.utcoffset() == timedelta(hours=2)

    def test_negative_offset(self) -> None:
        """Negative offsets are west of UTC."""
        result = parse_rfc3339("2023-11-14T17:13:20-05:00")
        assert result.utcoffset() == timedelta(hours=-5)
        assert result == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_short_fraction_is_scaled(self) -> None:
        """A single fractional digit means tenths of a second."""
        assert parse_rfc3339("2023-11-14T22:13:20.5Z").microsecond == 500000

    @pytest.mark.parametrize(
        "text",
        [
            "2023-11-14",
            "2023-11-14 22:13:20Z",
            "2023-11-14T22:13:20",
            "2023-11-14t22:13:20Z",
            "2023-11-14T22:13:20z",
            "2023-11-14T22:13Z",
            "20231114T221320Z",
            "1700000000000",
            "not a date",
            "",
        ],
    )
    def test_rejects_non_conforming_text(self, text: str) -> None:
        """No alternate formats are attempted."""
        with pytest.raises(CoercionError, match="not an RFC 3339 timestamp"):
            parse_rfc3339(text)

    @pytest.mark.parametrize(
        "text",
        ["2023-02-30T00:00:00Z", "2023-13-01T00:00:00Z", "2023-11-14T24:00:00Z", "2023-11-14T00:00:00+24:00"],
    )
    def test_rejects_impossible_values(self, text: str) -> None:
        """Well-formed text naming an impossible instant is rejected with a cause."""
        with pytest.raises(CoercionError, match="not a valid RFC 3339 timestamp") as excinfo:
            parse_rfc3339(text)
        assert isinstance(excinfo.value.cause, ValueError)


class TestFromEpochMillis:
    """Tests for from_epoch_millis function."""

    def test_epoch(self) -> None:
        """Zero is the epoch."""
        assert from_epoch_millis(0) == UNIX_EPOCH

    def test_integer_millis(self) -> None:
        """Integer milliseconds map to the exact instant."""
        assert from_epoch_millis(1700000000000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_float_millis_truncated(self) -> None:
        """Sub-millisecond parts of floats are dropped."""
        result = from_epoch_millis(1700000000123.9)
        assert result.microsecond == 123000

    def test_negative_millis(self) -> None:
        """Negative values are before the epoch."""
        assert from_epoch_millis(-1) == UNIX_EPOCH - timedelta(milliseconds=1)

    def test_out_of_range(self) -> None:
        """Instants datetime cannot hold are rejected."""
        with pytest.raises(CoercionError, match="outside the supported date range"):
            from_epoch_millis(10**18)

    def test_non_finite_float(self) -> None:
        """NaN cannot be an instant."""
        with pytest.raises(CoercionError):
            from_epoch_millis(float("nan"))


class TestFromDatetime64:
    """Tests for from_datetime64 function."""

    def test_nanosecond_value(self) -> None:
        """Nanosecond datetimes become aware UTC datetimes."""
        value = np.datetime64("2023-11-14T22:13:20.123456789", "ns")
        result = from_datetime64(value)
        assert result == datetime(2023, 11, 14, 22, 13, 20, 123456, tzinfo=timezone.utc)

    def test_day_resolution(self) -> None:
        """Coarse units convert to midnight UTC."""
        assert from_datetime64(np.datetime64("2023-11-14")) == datetime(2023, 11, 14, tzinfo=timezone.utc)

    def test_nat_rejected(self) -> None:
        """NaT has no instant."""
        with pytest.raises(CoercionError, match="NaT"):
            from_datetime64(np.datetime64("NaT"))
