"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable, Dict

import orjson
import pytest

SAMPLE_DOCUMENT = b"""
{
    "name": "Alice",
    "age": 30,
    "score": 95.5,
    "active": true,
    "nothing": null,
    "count": "42",
    "wrong": 123,
    "email": "test@example.com",
    "created": "2023-11-14T22:13:20Z",
    "created_ms": 1700000000000,
    "big": "12345678901234567890123",
    "tags": ["a", "b", "c"],
    "mixed": ["a", 1, "c"],
    "nested": {"name": "Bob", "age": 7},
    "children": [{"name": "Carol"}, {"name": "Dan"}]
}
"""


@pytest.fixture
def json_bag() -> Callable[[bytes | str], Dict[str, Any]]:
    """Factory that decodes a JSON document into a property bag."""

    def _decode(document: bytes | str) -> Dict[str, Any]:
        return orjson.loads(document)

    return _decode


@pytest.fixture
def sample_bag(json_bag: Callable[[bytes | str], Dict[str, Any]]) -> Dict[str, Any]:
    """Decoded bag covering every value kind."""
    return json_bag(SAMPLE_DOCUMENT)
