"""
Right-biased combinator contract.

A right-biased container has a success arm that carries a value and a
failure arm that short-circuits every combinator:

- ``bind(f, *args)``: success returns ``f(value, *args)``, which must be
  another container; failure returns ``self``.
- ``fmap(f, *args)``: success re-wraps ``f(value, *args)``; failure
  returns ``self``.
- ``tee(f, *args)``: success runs ``f`` and keeps ``self`` unless ``f``
  produced a failure; failure returns ``self``.
- ``value_or(default)``: success returns the value, failure ``default``.

Failure arms additionally offer ``or_`` and ``or_fmap`` for recovery.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


@runtime_checkable
class RightBiased(Protocol[T]):
    """Protocol shared by Either and Maybe arms."""

    def bind(self, f: Callable[..., Any], *args: Any) -> Any: ...

    def fmap(self, f: Callable[..., Any], *args: Any) -> RightBiased[Any]: ...

    def tee(self, f: Callable[..., Any], *args: Any) -> RightBiased[T]: ...

    def value_or(self, default: T) -> T: ...


@runtime_checkable
class Recoverable(Protocol):
    """Failure arm of a right-biased container."""

    def or_(self, default_or_fn: Any, *args: Any) -> Any: ...

    def or_fmap(self, default_or_fn: Any, *args: Any) -> RightBiased[Any]: ...


def recover(value: Any, default_or_fn: Any, *args: Any) -> Any:
    """Apply ``default_or_fn`` to ``value`` when callable, else return it."""
    if callable(default_or_fn):
        return default_or_fn(value, *args)
    return default_or_fn


__all__ = ["Recoverable", "RightBiased", "recover"]
