"""End-to-end access scenarios over JSON-decoded bags."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

import propbag
from propbag import InvalidTypeError, MissingFieldError, NumberKind


class TestDecodedBagScenarios:
    """Scenarios on bags produced by a JSON decoder."""

    def test_person_bag(self, json_bag: Any) -> None:
        """String reads on a simple record."""
        bag = json_bag('{"name": "Alice", "age": 30}')
        assert propbag.get_string(bag, "name") == "Alice"
        with pytest.raises(InvalidTypeError):
            propbag.get_string(bag, "age")
        with pytest.raises(MissingFieldError):
            propbag.get_string(bag, "missing")
        assert propbag.get_string_or_default(bag, "missing", "Bob") == "Bob"

    def test_numeric_string(self, json_bag: Any) -> None:
        """Numbers stored as strings are parsed."""
        bag = json_bag('{"count": "42"}')
        assert propbag.get_number(bag, "count", NumberKind.INT) == 42

    def test_epoch_millis(self, json_bag: Any) -> None:
        """Timestamps stored as epoch milliseconds."""
        bag = json_bag('{"ts": 1700000000000}')
        expected = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=1700000000000)
        assert propbag.get_date(bag, "ts") == expected

    def test_string_arrays(self, json_bag: Any) -> None:
        """Arrays fail as a whole on one bad element."""
        with pytest.raises(InvalidTypeError):
            propbag.get_string_array(json_bag('{"items": ["a", "b", 3]}'), "items")
        assert propbag.get_string_array(json_bag('{"items": ["a", "b"]}'), "items") == ["a", "b"]

    def test_allow_null_object(self, json_bag: Any) -> None:
        """Explicit null is a result, absence is the default."""
        bag = json_bag('{"null": null}')
        assert propbag.get_object_allow_null(bag, "null", str, "d") is None
        assert propbag.get_object_allow_null(bag, "missing", str, "d") == "d"

    def test_nested_records(self, sample_bag: dict) -> None:
        """Nested bags become structured values through constructors."""
        owner = propbag.get_object_via(sample_bag, "nested", lambda nested: (nested["name"], nested["age"]))
        assert owner == ("Bob", 7)
        names = propbag.get_object_array_via(sample_bag, "children", lambda child: child["name"])
        assert names == ["Carol", "Dan"]
