"""
This module provides a base class for Semigroup instances.
"""

from collections.abc import Iterable
from typing import Protocol, Self


class Semigroup(Protocol):
    """Base class for Semigroup instances.

    To implement a semigroup instance, create a sub-class of Semigroup and
    override the append method ensuring that the closure and
    associativity laws hold.

    """

    def append(self, other: Self) -> Self:
        """Combines two Semigroup instances."""
        ...


def sconcat[S: Semigroup](first: S, rest: Iterable[S]) -> S:
    """Reduces a non empty sequence of semigroup values, given as its
    first element and the remaining ones, with the append operation.
    There is no identity to fall back on, so the first value seeds the fold.
    """
    result = first
    for value in rest:
        result = result.append(value)
    return result
