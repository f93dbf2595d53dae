"""Mapping through nested containers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class Transformer:
    """Mixin adding ``fmap2``/``fmap3`` to any container with ``fmap``."""

    def fmap(self, f: Callable[..., Any], *args: Any) -> Any:
        raise NotImplementedError

    def fmap2(self, f: Callable[..., Any], *args: Any) -> Any:
        """Map over a container nested one level deep.

        Example:
            Right(List.of(1, 2)).fmap2(lambda x: x + 1)  # Right(List[2, 3])
        """
        return self.fmap(lambda inner: inner.fmap(f, *args))

    def fmap3(self, f: Callable[..., Any], *args: Any) -> Any:
        """Map over a container nested two levels deep."""
        return self.fmap(lambda inner: inner.fmap2(f, *args))


__all__ = ["Transformer"]
