"""
Implements Relation, a HashSet of OrderedPairs.
"""
from __future__ import annotations

from typing import Self, TypeVar

from .errors import InvalidArgument, NOT_A_PAIR, NOT_A_SEQUENCE
from .hashset import HashSet
from .oracle import values_equal
from .orderedpair import OrderedPair

A = TypeVar("A")
B = TypeVar("B")


class Relation[A, B](HashSet[OrderedPair[A, B]]):
    """
    A set of ordered pairs. Apart from only holding OrderedPairs it is an
    ordinary HashSet, so subset, union and equality work as for any set.
    """

    def __init__(self,
                 pairs: HashSet[OrderedPair[A, B]] | list | tuple | None = None):
        match pairs:
            case None:
                elements: tuple = ()
            case HashSet():
                elements = pairs.items
            case list() | tuple():
                elements = tuple(pairs)
            case _:
                raise InvalidArgument(NOT_A_SEQUENCE)
        if not all(isinstance(pair, OrderedPair) for pair in elements):
            raise InvalidArgument(NOT_A_PAIR)
        super().__init__(elements)

    def domain(self) -> HashSet[A]:
        """Returns the set of first components."""
        return HashSet._from_iterable(pair.first for pair in self.items)

    def range(self) -> HashSet[B]:
        """Returns the set of second components."""
        return HashSet._from_iterable(pair.second for pair in self.items)

    def inverse(self) -> Relation[B, A]:
        """Returns the relation with every pair swapped."""
        return Relation._from_iterable(pair.swap() for pair in self.items)

    def image(self, value: A) -> HashSet[B]:
        """Returns every b such that (value, b) is in the relation."""
        return HashSet._from_iterable(
            pair.second for pair in self.items
            if values_equal(pair.first, value))

    @classmethod
    def from_pairs(cls, pairs: list[tuple[A, B]]) -> Self:
        """Creates a Relation from plain 2-tuples."""
        return cls([OrderedPair(a, b) for a, b in pairs])
