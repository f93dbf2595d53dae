"""
Container test base

Shared assertions and hypothesis strategies for Either, List and Maybe
tests.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from hypothesis import strategies as st

from monadic import Either, Left, List, Maybe, Right

T = TypeVar("T")

# =============================================================================
# STRATEGIES
# =============================================================================

values = st.one_of(st.integers(), st.text(max_size=8), st.booleans())


def eithers(inner: st.SearchStrategy[Any] = values) -> st.SearchStrategy[Either[Any, Any]]:
    """Generate Right and Left values."""
    return st.one_of(inner.map(Right), inner.map(Left))


def lists(
    inner: st.SearchStrategy[Any] = st.integers(), max_size: int = 8
) -> st.SearchStrategy[List[Any]]:
    """Generate List values."""
    return st.lists(inner, max_size=max_size).map(List)


# Integer functions returning Either; one fails on odd numbers
either_functions: st.SearchStrategy[Callable[[int], Either[str, int]]] = st.sampled_from(
    [
        lambda x: Right(x + 1),
        lambda x: Right(x * 2),
        lambda x: Left("odd") if x % 2 else Right(x // 2),
    ]
)

# Integer functions returning plain lists of zero, one or many results
list_functions: st.SearchStrategy[Callable[[int], list[int]]] = st.sampled_from(
    [
        lambda x: [],
        lambda x: [x],
        lambda x: [x, x + 1],
        lambda x: [x] * (abs(x) % 3),
    ]
)

plain_functions: st.SearchStrategy[Callable[[int], int]] = st.sampled_from(
    [lambda x: x + 1, lambda x: x * 3, lambda x: -x, abs]
)


# =============================================================================
# ASSERTIONS
# =============================================================================


class MonadTestCase:
    """Base class for container tests."""

    def assert_right(self, result: Either[Any, T], expected_value: Any = None) -> T:
        """Assert Either is Right and optionally check value."""
        assert result.is_right(), f"Expected Right, got {result!r}"
        if expected_value is not None:
            assert result.value == expected_value
        return result.value  # type: ignore[no-any-return]

    def assert_left(self, result: Either[T, Any], expected_error: Any = None) -> T:
        """Assert Either is Left and optionally check error."""
        assert result.is_left(), f"Expected Left, got {result!r}"
        if expected_error is not None:
            assert result.value == expected_error
        return result.value  # type: ignore[no-any-return]

    def assert_some(self, maybe: Maybe[T], expected_value: Any = None) -> T:
        """Assert Maybe is Some and optionally check value."""
        assert maybe.is_some(), f"Expected Some, got {maybe!r}"
        value = maybe.value_or(None)
        if expected_value is not None:
            assert value == expected_value
        return value  # type: ignore[return-value]

    def assert_nothing(self, maybe: Maybe[Any]) -> None:
        """Assert Maybe is Nothing."""
        assert maybe.is_none(), f"Expected Nothing, got {maybe!r}"
