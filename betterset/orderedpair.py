"""
This module defines the OrderedPair type, the element type of a Relation.
"""
from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterator, Self, TypeVar

from .functor import Functor
from .oracle import owned, value_hash, values_equal

A = TypeVar('A')
B = TypeVar('B')
L = TypeVar('L')


@dataclass(frozen=True, eq=False, repr=False)
class OrderedPair[L, A](Functor[A]):
    """An immutable pair of two values, where order matters:
    (a, b) == (c, d) only when a == c and b == d."""

    first: L
    second: A

    def __post_init__(self):
        object.__setattr__(self, "first", owned(self.first))
        object.__setattr__(self, "second", owned(self.second))

    @classmethod
    def make(cls, first, second) -> 'OrderedPair':
        """Creates a new instance of the specific subtype."""
        return cls(first, second)

    def map(self: Self, f: Callable[[A], B]) -> "OrderedPair[L, B]":
        """Applies a function to the second value inside the OrderedPair."""
        return self.make(self.first, f(self.second))

    def swap(self) -> "OrderedPair[A, L]":
        """Returns the pair with its components exchanged."""
        return self.make(self.second, self.first)

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[L | A]:
        yield self.first
        yield self.second

    def __getitem__(self, index: int):
        """Allows indexing into the OrderedPair."""
        match index:
            case 0: return self.first
            case 1: return self.second
            case _: raise IndexError("OrderedPair index out of range")

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self

    def __repr__(self):
        """String representation of the OrderedPair."""
        return f'({self.first!r}, {self.second!r})'

    def __eq__(self, other) -> bool:
        """Equality check for OrderedPair."""
        return isinstance(other, OrderedPair) \
            and values_equal(self.first, other.first) \
            and values_equal(self.second, other.second)

    def __hash__(self) -> int:
        return hash(('pair', value_hash(self.first), value_hash(self.second)))
