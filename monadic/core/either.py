"""
Either monad for handling success/error cases in functional programming.

This module provides an Either type for representing computations that may fail,
with Left representing failure and Right representing success. Both arms are
frozen dataclasses; shared combinators dispatch on the arm with ``match``.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from monadic.config import get_settings
from monadic.exceptions import TypeMismatchError

from .maybe import NOTHING, Maybe
from .right_biased import recover
from .transformer import Transformer

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


# Either Monad
# Monad Laws:
# 1. Left Identity: Right(a).bind(f) == f(a)
# 2. Right Identity: m.bind(Right) == m
# 3. Associativity: m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


class Either(Transformer, Generic[E, T]):
    """Base class for Right and Left."""

    value: Any

    @staticmethod
    def traverse(
        collection: Iterable[Either[E, Any]],
        f: Callable[[Any], T] | None = None,
    ) -> Either[E, list[T]]:
        """Turn an iterable of Eithers into a single Either of a list.

        Each Right value is passed through ``f`` when given. The first Left
        stops the iteration and is returned as is; nothing after it is
        inspected.

        Example:
            Either.traverse([Right(1), Right(2), Right(3)], lambda x: x * 2)
            # Right([2, 4, 6])

            Either.traverse([Right(1), Left("1st"), Left("2nd")])
            # Left("1st")

        Raises:
            TypeMismatchError: an element is not an Either
        """
        results: list[T] = []
        for index, item in enumerate(collection):
            match item:
                case Right(value):
                    results.append(f(value) if f is not None else value)
                case Left():
                    logger.debug("traverse short-circuited at index %d: %r", index, item)
                    return item
                case _:
                    raise TypeMismatchError(
                        f"Expected Either at index {index}, got {type(item).__name__}",
                        index=index,
                        actual_type=type(item).__name__,
                    )
        return Right(results)

    def is_right(self) -> bool:
        """Check if this is a Right (success) value."""
        return isinstance(self, Right)

    def is_left(self) -> bool:
        """Check if this is a Left (error) value."""
        return isinstance(self, Left)

    is_success = is_right
    is_failure = is_left

    def either(self, on_left: Callable[[E], U], on_right: Callable[[T], U]) -> U:
        """Apply ``on_left`` or ``on_right`` to the value depending on the arm."""
        match self:
            case Right(value):
                return on_right(value)
            case Left(value):
                return on_left(value)
        raise TypeError(f"Unknown Either variant: {type(self).__name__}")

    def bind(self, f: Callable[..., Either[E, U]], *args: Any) -> Either[E, U]:
        """Apply function that returns an Either, Left passes through."""
        match self:
            case Right(value):
                return f(value, *args)
            case _:
                return self  # type: ignore[return-value]

    def fmap(self, f: Callable[..., U], *args: Any) -> Either[E, U]:
        """Apply function to the Right value and wrap the result in Right."""
        match self:
            case Right(value):
                return Right(f(value, *args))
            case _:
                return self  # type: ignore[return-value]

    def tee(self, f: Callable[..., Either[E, Any]], *args: Any) -> Either[E, T]:
        """Run ``f`` on the Right value; keep self unless ``f`` returns a Left."""
        return self.bind(f, *args).bind(lambda _: self)

    def value_or(self, default: T) -> T:
        """Get Right value or return default."""
        match self:
            case Right(value):
                return value  # type: ignore[no-any-return]
            case _:
                return default

    def to_either(self) -> Either[E, T]:
        """Returns self, keeps the interface compatible with other monads."""
        return self

    def to_maybe(self) -> Maybe[T]:
        match self:
            case Right(None):
                if get_settings().warn_on_none_conversion:
                    warnings.warn(
                        "Right(None) transformed to Nothing", UserWarning, stacklevel=2
                    )
                return NOTHING
            case Right(value):
                return Maybe.coerce(value)
            case _:
                return NOTHING


@dataclass(frozen=True, repr=False)
class Right(Either[E, T]):
    """Right side of Either representing success."""

    value: T

    @property
    def right(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"

    __str__ = __repr__


@dataclass(frozen=True, repr=False)
class Left(Either[E, T]):
    """Left side of Either representing an error/failure."""

    value: E

    @property
    def left(self) -> E:
        return self.value

    def or_(self, default_or_fn: Any, *args: Any) -> Any:
        """
        Recover from the failure.

        If ``default_or_fn`` is callable it is called with the Left value
        and ``args`` and its result returned, otherwise it is returned as is.
        A callable default has to be wrapped: ``left.or_(lambda _: fn)``.

        Example:
            Left(ValueError("boom")).or_(str)  # "boom"
            Left("no value").or_(0)  # 0
        """
        return recover(self.value, default_or_fn, *args)

    def or_fmap(self, default_or_fn: Any, *args: Any) -> Either[Any, Any]:
        """A lifted version of ``or_``, wraps the recovered value with Right."""
        return Right(self.or_(default_or_fn, *args))

    def __repr__(self) -> str:
        return f"Left({self.value!r})"

    __str__ = __repr__


# Utility functions for creating Either instances
def left(value: E) -> Either[E, Any]:
    """Create a Left Either."""
    return Left(value)


def right(value: T) -> Either[Any, T]:
    """Create a Right Either."""
    return Right(value)


__all__ = [
    "Either",
    "Left",
    "Right",
    "left",
    "right",
]
