"""
monadic - algebraic container types for Python.

This package provides:
- Either (Right/Left) for computations that may fail, with short-circuiting
  bind/fmap and Either.traverse
- List for ordered fan-out computations with flattening bind and folds
- Maybe (Some/Nothing) for optional values
"""

import logging

from .config import get_settings
from .core import (
    NOTHING,
    Either,
    Left,
    List,
    Maybe,
    Nothing,
    Recoverable,
    Right,
    RightBiased,
    Some,
    Transformer,
    left,
    list_of,
    nothing,
    right,
    some,
)
from .exceptions import (
    CoercionError,
    MissingTransformError,
    MonadError,
    TypeMismatchError,
)

__version__ = "0.1.0"
__description__ = "Either, List and Maybe containers with monadic combinators"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def configure_logging() -> None:
    """Apply the configured level to the package logger."""
    logger.setLevel(get_settings().numeric_log_level)


configure_logging()

__all__ = [
    "NOTHING",
    "CoercionError",
    "Either",
    "Left",
    "List",
    "Maybe",
    "MissingTransformError",
    "MonadError",
    "Nothing",
    "Recoverable",
    "Right",
    "RightBiased",
    "Some",
    "Transformer",
    "TypeMismatchError",
    "configure_logging",
    "left",
    "list_of",
    "nothing",
    "right",
    "some",
]
