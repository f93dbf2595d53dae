"""
Core container types.

Either, List and Maybe together with the right-biased contract they
share and the Transformer mixin for nested mapping.
"""

from .either import Either, Left, Right, left, right
from .list import List, list_of
from .maybe import NOTHING, Maybe, Nothing, Some, nothing, some
from .right_biased import Recoverable, RightBiased
from .transformer import Transformer

__all__ = [
    "NOTHING",
    "Either",
    "Left",
    "List",
    "Maybe",
    "Nothing",
    "Recoverable",
    "Right",
    "RightBiased",
    "Some",
    "Transformer",
    "left",
    "list_of",
    "nothing",
    "right",
    "some",
]
