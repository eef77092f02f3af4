"""Tests for propbag.strings module."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from propbag.errors import InvalidTypeError, MissingFieldError, PropertyAbortError, RegexMismatchError
from propbag.strings import (
    get_string,
    get_string_array,
    get_string_array_or_default,
    get_string_array_or_else,
    get_string_array_ref,
    get_string_array_ref_or_default,
    get_string_matching,
    get_string_matching_or_default,
    get_string_matching_or_else,
    get_string_matching_ref,
    get_string_matching_ref_or_default,
    get_string_matching_ref_or_else,
    get_string_or_default,
    get_string_or_else,
    get_string_ref,
    get_string_ref_array,
    get_string_ref_array_ref,
    get_string_ref_or_default,
    get_string_ref_or_else,
    must_get_string,
    must_get_string_array,
    must_get_string_matching,
    must_get_string_matching_ref,
    must_get_string_ref,
)

EMAIL_PATTERN = r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$"


class TestGetString:
    """Tests for single string accessors."""

    def test_get_string(self, sample_bag: Dict[str, Any]) -> None:
        """Strings are returned."""
        assert get_string(sample_bag, "name") == "Alice"

    def test_number_is_not_a_string(self, sample_bag: Dict[str, Any]) -> None:
        """Numbers are never stringified."""
        with pytest.raises(InvalidTypeError, match="property 'wrong' is not of type string, got int"):
            get_string(sample_bag, "wrong")

    def test_missing(self, sample_bag: Dict[str, Any]) -> None:
        """Absent keys raise MissingFieldError."""
        with pytest.raises(MissingFieldError, match="property 'missing' is missing"):
            get_string(sample_bag, "missing")

    def test_policy_variants(self, sample_bag: Dict[str, Any]) -> None:
        """Default, computed default and abort variants."""
        assert get_string_or_default(sample_bag, "missing", "default") == "default"
        assert get_string_or_default(sample_bag, "name", "default") == "Alice"
        assert get_string_or_else(sample_bag, "wrong", lambda: "computed") == "computed"
        with pytest.raises(PropertyAbortError, match="^name missing$"):
            must_get_string({}, "name", "name missing")
        assert must_get_string(sample_bag, "name") == "Alice"

    def test_ref_variants(self, sample_bag: Dict[str, Any]) -> None:
        """Reference variants return the value or None."""
        assert get_string_ref(sample_bag, "name") == "Alice"
        assert must_get_string_ref(sample_bag, "name") == "Alice"
        assert get_string_ref_or_default(sample_bag, "missing") is None
        assert get_string_ref_or_default(sample_bag, "nothing", "x") == "x"
        assert get_string_ref_or_else(sample_bag, "wrong", lambda: None) is None


class TestGetStringMatching:
    """Tests for pattern-checked string accessors."""

    def test_matching(self, sample_bag: Dict[str, Any]) -> None:
        """Matching strings are returned."""
        assert get_string_matching(sample_bag, "email", EMAIL_PATTERN) == "test@example.com"

    def test_mismatch(self, sample_bag: Dict[str, Any]) -> None:
        """Non-matching strings raise RegexMismatchError."""
        with pytest.raises(RegexMismatchError) as excinfo:
            get_string_matching(sample_bag, "name", EMAIL_PATTERN)
        assert excinfo.value.prop == "name"
        assert excinfo.value.value == "Alice"

    def test_non_string(self, sample_bag: Dict[str, Any]) -> None:
        """Non-strings are type errors, not mismatches."""
        with pytest.raises(InvalidTypeError):
            get_string_matching(sample_bag, "wrong", EMAIL_PATTERN)

    def test_invalid_pattern(self, sample_bag: Dict[str, Any]) -> None:
        """Broken patterns are reported, not ignored."""
        with pytest.raises(InvalidTypeError, match="invalid regex"):
            get_string_matching(sample_bag, "email", "[a-")

    def test_invalid_pattern_reports_value(self, sample_bag: Dict[str, Any]) -> None:
        """The error carries the property value and keeps the pattern separately."""
        with pytest.raises(InvalidTypeError) as excinfo:
            get_string_matching(sample_bag, "email", "[")
        assert excinfo.value.actual == "test@example.com"
        assert excinfo.value.pattern == "["

    def test_invalid_pattern_with_default(self, sample_bag: Dict[str, Any]) -> None:
        """Broken patterns fall back like any other access error."""
        assert get_string_matching_or_default(sample_bag, "email", "[a-", "d") == "d"

    def test_policy_variants(self, sample_bag: Dict[str, Any]) -> None:
        """Default, computed default and abort variants."""
        assert get_string_matching_or_default(sample_bag, "name", EMAIL_PATTERN, "d") == "d"
        assert get_string_matching_or_else(sample_bag, "name", EMAIL_PATTERN, lambda: "e") == "e"
        with pytest.raises(PropertyAbortError) as excinfo:
            must_get_string_matching(sample_bag, "name", EMAIL_PATTERN)
        assert isinstance(excinfo.value.error, RegexMismatchError)

    def test_ref_variants(self, sample_bag: Dict[str, Any]) -> None:
        """Reference variants of the pattern accessors."""
        assert get_string_matching_ref(sample_bag, "email", EMAIL_PATTERN) == "test@example.com"
        assert must_get_string_matching_ref(sample_bag, "email", EMAIL_PATTERN) == "test@example.com"
        assert get_string_matching_ref_or_default(sample_bag, "name", EMAIL_PATTERN) is None
        assert get_string_matching_ref_or_else(sample_bag, "name", EMAIL_PATTERN, lambda: "e") == "e"


class TestGetStringArray:
    """Tests for string array accessors."""

    def test_array(self, sample_bag: Dict[str, Any]) -> None:
        """String arrays are returned in order."""
        assert get_string_array(sample_bag, "tags") == ["a", "b", "c"]

    def test_mixed_array_fails(self, sample_bag: Dict[str, Any]) -> None:
        """One non-string element fails the whole array."""
        with pytest.raises(InvalidTypeError) as excinfo:
            get_string_array(sample_bag, "mixed")
        assert excinfo.value.index == 1

    def test_policy_variants(self, sample_bag: Dict[str, Any]) -> None:
        """Default, computed default and abort variants."""
        assert get_string_array_or_default(sample_bag, "mixed", []) == []
        assert get_string_array_or_else(sample_bag, "missing", lambda: ["x"]) == ["x"]
        with pytest.raises(PropertyAbortError):
            must_get_string_array(sample_bag, "name")

    def test_ref_shapes(self, json_bag: Any) -> None:
        """Reference shapes keep nulls and return fresh lists."""
        bag = json_bag('{"tags": ["a", null]}')
        assert get_string_ref_array(bag, "tags") == ["a", None]
        assert get_string_ref_array_ref(bag, "tags") == ["a", None]
        assert get_string_array_ref_or_default(bag, "tags") is None
        assert get_string_array_ref(json_bag('{"tags": ["a"]}'), "tags") == ["a"]
