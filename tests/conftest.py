"""
Pytest configuration and shared fixtures for pagination tests.
"""

from collections.abc import Callable
from typing import Any

import pytest

from lambda_pagination.strategies.limit_offset import LimitOffsetStrategy, create_strategy


@pytest.fixture
def default_strategy() -> LimitOffsetStrategy:
    """Limit-offset strategy with the built-in defaults."""
    return create_strategy()


@pytest.fixture
def number_sequence() -> Callable[[int], list[int]]:
    """
    Helper producing ``[1, 2, ..., n]``.

    Usage:
        items = number_sequence(100)
    """

    def _generate(n: int) -> list[int]:
        return list(range(1, n + 1))

    return _generate


@pytest.fixture
def make_event() -> Callable[..., dict[str, Any]]:
    """
    Helper building an API Gateway GET event.

    Usage:
        event = make_event({"limit": "10", "offset": "20"})
    """

    def _make(
        query: dict[str, Any] | None = None,
        *,
        method: str = "GET",
    ) -> dict[str, Any]:
        return {
            "httpMethod": method,
            "path": "/",
            "queryStringParameters": query,
            "headers": {"x-api-key": "test-api-key"},
        }

    return _make
