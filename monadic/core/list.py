"""
List monad: an immutable ordered sequence with monadic composition.

``bind`` maps and then flattens exactly one level, which makes List the
monad of non-deterministic (fan-out) computations.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from monadic.exceptions import CoercionError, MissingTransformError

from .maybe import Maybe
from .transformer import Transformer

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

_STRING_TYPES = (str, bytes, bytearray)


def _to_tuple(value: Any) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, List):
        return value.value
    if isinstance(value, tuple):
        return value
    if isinstance(value, Sequence) and not isinstance(value, _STRING_TYPES):
        return tuple(value)
    logger.debug("Rejected list coercion of %s", type(value).__name__)
    raise CoercionError(f"Can't coerce {value!r} to List", invalid_value=value)


# List Monad
# Monad Laws:
# 1. Left Identity: List.of(a).bind(f) == List.coerce(f(a))
# 2. Right Identity: m.bind(List.of) == m
# 3. Associativity: m.bind(f).bind(g) == m.bind(lambda x: List.coerce(f(x)).bind(g))


@dataclass(frozen=True, repr=False)
class List(Transformer, Generic[T]):
    """Immutable ordered sequence.

    ``List(value)`` accepts the same inputs as ``List.coerce``: None, another
    List, or any non-string sequence.
    """

    value: tuple[T, ...] = ()

    EMPTY: ClassVar[List[Any]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_tuple(self.value))

    @classmethod
    def of(cls, *values: T) -> List[T]:
        """Build a list from the arguments."""
        return cls(values)

    @classmethod
    def coerce(cls, value: Sequence[T] | List[T] | None) -> List[T]:
        """Coerce a value to a list. None becomes the empty list.

        Raises:
            CoercionError: value is neither None nor a sequence
        """
        if value is None:
            return cls.EMPTY
        if isinstance(value, List):
            return value
        return cls(_to_tuple(value))

    def bind(self, f: Callable[..., Any], *args: Any) -> List[Any]:
        """Run ``f`` on every element and concatenate the results.

        Each result must be coercible to a list.

        Example:
            List.of(1, 2).bind(lambda x: [x, x + 1])  # List[1, 2, 2, 3]
        """
        flattened: list[Any] = []
        for element in self.value:
            flattened.extend(_to_tuple(f(element, *args)))
        return List(tuple(flattened))

    def fmap(self, f: Callable[..., U], *args: Any) -> List[U]:
        """Map ``f`` over the list, one result per element."""
        return List(tuple(f(element, *args) for element in self.value))

    def map(self, f: Callable[[T], U] | None = None) -> List[U]:
        """Map ``f`` over the list. The function is required."""
        if f is None:
            raise MissingTransformError("Missing transform function")
        return self.fmap(f)

    def __add__(self, other: Sequence[T] | List[T]) -> List[T]:
        return List(self.value + _to_tuple(other))

    def fold_left(self, initial: A, f: Callable[[A, T], A]) -> A:
        """Fold the list from the left: ``acc = f(acc, element)``."""
        acc = initial
        for element in self.value:
            acc = f(acc, element)
        return acc

    foldl = fold_left
    reduce = fold_left

    def fold_right(self, initial: A, f: Callable[[T, A], A]) -> A:
        """Fold the list from the right: ``acc = f(element, acc)``."""
        acc = initial
        for element in reversed(self.value):
            acc = f(element, acc)
        return acc

    foldr = fold_right

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return List(tuple(e for e in self.value if predicate(e)))

    select = filter

    def sort(self) -> List[T]:
        """Sort in ascending natural order."""
        return List(tuple(sorted(self.value)))  # type: ignore[type-var]

    def reverse(self) -> List[T]:
        return List(self.value[::-1])

    def head(self) -> Maybe[T]:
        """Return the first element wrapped with Maybe."""
        return Maybe.coerce(self.first())

    def tail(self) -> List[T]:
        return List(self.value[1:])

    def first(self) -> T | None:
        return self.value[0] if self.value else None

    def last(self) -> T | None:
        return self.value[-1] if self.value else None

    def is_empty(self) -> bool:
        return not self.value

    def size(self) -> int:
        return len(self.value)

    def to_list(self) -> list[T]:
        return list(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.value)

    def __contains__(self, item: object) -> bool:
        return item in self.value

    def __repr__(self) -> str:
        return f"List[{', '.join(repr(e) for e in self.value)}]"

    __str__ = __repr__


List.EMPTY = List(())


def list_of(*values: T) -> List[T]:
    """Create a List from the arguments."""
    return List.of(*values)


__all__ = ["List", "list_of"]
