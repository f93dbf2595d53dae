"""
Maybe monad for values that may be absent.

``Some`` holds a present value and ``Nothing`` stands for absence. Either
and List convert into Maybe via ``Either.to_maybe`` and ``List.head``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .transformer import Transformer

if TYPE_CHECKING:
    from collections.abc import Callable

    from .either import Either
    from .list import List

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


# Maybe Monad
# Monad Laws:
# 1. Left Identity: Some(a).bind(f) == f(a)
# 2. Right Identity: m.bind(Maybe.coerce) == m
# 3. Associativity: m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


class Maybe(Transformer, Generic[T]):
    """Base class for Some and Nothing."""

    @staticmethod
    def coerce(value: T | None) -> Maybe[T]:
        """Wrap ``value`` in Some, or return Nothing for None."""
        return NOTHING if value is None else Some(value)

    @staticmethod
    def none() -> Maybe[Any]:
        """Return the shared Nothing instance."""
        return NOTHING

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_none(self) -> bool:
        return isinstance(self, Nothing)

    def bind(self, f: Callable[..., Any], *args: Any) -> Any:
        """Apply function that returns a Maybe."""
        match self:
            case Some(value):
                return f(value, *args)
            case _:
                return self

    def fmap(self, f: Callable[..., U], *args: Any) -> Maybe[U]:
        """Apply function to the contained value, None results become Nothing."""
        match self:
            case Some(value):
                return Maybe.coerce(f(value, *args))
            case _:
                return self  # type: ignore[return-value]

    def tee(self, f: Callable[..., Any], *args: Any) -> Maybe[T]:
        """Run ``f`` for its outcome, keeping the current value."""
        return self.bind(f, *args).bind(lambda _: self)  # type: ignore[no-any-return]

    def value_or(self, default: T) -> T:
        match self:
            case Some(value):
                return value
            case _:
                return default

    def to_either(self, left_value: E) -> Either[E, T]:
        """Convert to Right(value), or Left(left_value) when absent."""
        from .either import Left, Right

        match self:
            case Some(value):
                return Right(value)
            case _:
                return Left(left_value)

    def to_list(self) -> List[T]:
        """Convert to a single-element list, or the empty list."""
        from .list import List

        match self:
            case Some(value):
                return List.of(value)
            case _:
                return List.EMPTY

    def to_maybe(self) -> Maybe[T]:
        return self


@dataclass(frozen=True, repr=False)
class Some(Maybe[T]):
    """Value is present."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Some cannot contain None - use Nothing instead")

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    __str__ = __repr__


@dataclass(frozen=True, repr=False)
class Nothing(Maybe[T]):
    """No value is present."""

    def or_(self, default_or_fn: Any, *args: Any) -> Any:
        """Return ``default_or_fn(*args)`` when callable, else the default itself."""
        if callable(default_or_fn):
            return default_or_fn(*args)
        return default_or_fn

    def or_fmap(self, default_or_fn: Any, *args: Any) -> Maybe[Any]:
        """Like ``or_`` but wraps the result back into a Maybe."""
        return Maybe.coerce(self.or_(default_or_fn, *args))

    def __repr__(self) -> str:
        return "Nothing"

    __str__ = __repr__


NOTHING: Nothing[Any] = Nothing()


def some(value: T) -> Maybe[T]:
    """Create a Some Maybe."""
    return Some(value)


def nothing() -> Maybe[Any]:
    """Return the Nothing Maybe."""
    return NOTHING


__all__ = ["NOTHING", "Maybe", "Nothing", "Some", "nothing", "some"]
