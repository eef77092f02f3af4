"""
Failure policies shared by every accessor.

An accessor is written once in its raising form; the other policies wrap a
zero-argument fetch of that form:

- ``FailurePolicy.RAISE``: let the ``PropertyError`` propagate
- ``FailurePolicy.ABORT``: ``or_abort`` turns it into ``PropertyAbortError``
- ``FailurePolicy.DEFAULT``: ``or_default`` returns the supplied default
- ``FailurePolicy.COMPUTED_DEFAULT``: ``or_else`` calls a default function

Only ``PropertyError`` is handled. Exceptions from caller-supplied
constructors or default functions propagate untouched.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Optional, TypeVar

from .errors import PropertyAbortError, PropertyError

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")


class FailurePolicy(enum.Enum):
    RAISE = "raise"
    ABORT = "abort"
    DEFAULT = "default"
    COMPUTED_DEFAULT = "computed_default"


def or_abort(fetch: Callable[[], T], message: Optional[str] = None) -> T:
    """
    Run ``fetch`` and escalate any access error to ``PropertyAbortError``.

    Args:
        fetch: Raising accessor call
        message: Replaces the original error text when given

    Raises:
        PropertyAbortError: Carrying the original error as ``error`` and ``__cause__``
    """
    try:
        return fetch()
    except PropertyError as exc:
        raise PropertyAbortError(exc, message) from exc


def or_default(fetch: Callable[[], T], default: D) -> T | D:
    """Run ``fetch`` and return ``default`` on any access error."""
    try:
        return fetch()
    except PropertyError as exc:  # Expected when the property is absent or malformed
        logger.debug("Property unavailable, using default: %s", exc)
        return default


def or_else(fetch: Callable[[], T], default_fn: Callable[[], D]) -> T | D:
    """Run ``fetch`` and return ``default_fn()`` on any access error.

    ``default_fn`` is called at most once, and only on the failure path.
    """
    try:
        return fetch()
    except PropertyError as exc:  # Expected when the property is absent or malformed
        logger.debug("Property unavailable, computing default: %s", exc)
    return default_fn()


def resolve(
    fetch: Callable[[], T],
    policy: FailurePolicy,
    *,
    default: Optional[T] = None,
    default_fn: Optional[Callable[[], T]] = None,
    message: Optional[str] = None,
) -> Optional[T]:
    """
    Apply ``policy`` to ``fetch`` for callers that choose the policy at runtime.

    Raises:
        ValueError: If ``COMPUTED_DEFAULT`` is requested without ``default_fn``
    """
    if policy is FailurePolicy.RAISE:
        return fetch()
    if policy is FailurePolicy.ABORT:
        return or_abort(fetch, message)
    if policy is FailurePolicy.DEFAULT:
        return or_default(fetch, default)
    if default_fn is None:
        raise ValueError("COMPUTED_DEFAULT policy requires default_fn")
    return or_else(fetch, default_fn)


__all__ = ["FailurePolicy", "or_abort", "or_default", "or_else", "resolve"]
