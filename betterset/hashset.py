"""Implements a finite, immutable HashSet with structural equality."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import chain
from typing import TYPE_CHECKING, Any, Self, TypeVar

from immutabledict import immutabledict

from .config import settings
from .errors import CapacityExceeded, InvalidArgument, NOT_A_SEQUENCE, NOT_A_SET
from .functor import Functor
from .monoid import Monoid, mconcat
from .oracle import owned, value_hash, values_equal
from .orderedpair import OrderedPair
from .semigroup import Semigroup, sconcat

if TYPE_CHECKING:
    from .relation import Relation

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True, init=False, eq=False, repr=False)
class HashSet[A](Functor[A], Monoid):
    """
    Represents an immutable set of distinct values.

    Elements are kept in first-insertion order in `items`; `buckets` maps
    each element's hash to the positions holding elements with that hash.
    Two HashSets are equal when each contains the other, whatever order
    their elements were inserted in.
    """

    items: tuple[A, ...]
    buckets: immutabledict[int, tuple[int, ...]]
    fingerprint: int

    def __init__(self, elements: list[A] | tuple[A, ...] | None = None):
        if elements is None:
            elements = ()
        if not isinstance(elements, (list, tuple)):
            raise InvalidArgument(NOT_A_SEQUENCE)
        self._install(owned(element) for element in elements)

    @classmethod
    def _from_iterable(cls, values: Iterable[A]) -> Self:
        """Builds an instance from values that are already owned by a set."""
        instance = cls.__new__(cls)
        instance._install(values)
        return instance

    def _install(self, values: Iterable[A]) -> None:
        items: list[A] = []
        buckets: dict[int, list[int]] = {}
        for value in values:
            bucket = buckets.setdefault(value_hash(value), [])
            if any(values_equal(items[i], value) for i in bucket):
                continue
            bucket.append(len(items))
            items.append(value)
        object.__setattr__(self, "items", tuple(items))
        object.__setattr__(self, "buckets", immutabledict(
            (key, tuple(positions)) for key, positions in buckets.items()))
        # order-independent, since the keys are exactly the member hashes
        object.__setattr__(self, "fingerprint", hash(frozenset(buckets)))

    @classmethod
    def empty(cls) -> Self:
        """Creates an empty HashSet."""
        return cls._from_iterable(())

    @classmethod
    def mempty(cls) -> Self:
        """Returns the identity of union, the empty set."""
        return cls.empty()

    def __iter__(self) -> Iterator[A]:
        """Iterates over the elements in first-insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Returns the number of elements in the HashSet."""
        return len(self.items)

    def __contains__(self, item: Any) -> bool:
        """Allows use of `item in my_hashset`."""
        return self.member(item)

    def member(self, item: Any) -> bool:
        """Returns True if an element equal to item is in the HashSet."""
        return any(values_equal(self.items[i], item)
                   for i in self.buckets.get(value_hash(item), ()))

    def cardinality(self) -> int:
        """Returns the number of distinct elements."""
        return len(self.items)

    def is_empty(self) -> bool:
        """Returns True if the HashSet has no elements."""
        return not self.items

    def to_a(self) -> list[A]:
        """Returns the elements as a list, in first-insertion order."""
        return list(self.items)

    def all(self, predicate: Callable[[A], Any] = bool) -> bool:
        """Returns True if predicate holds for every element."""
        return all(predicate(x) for x in self.items)

    def any(self, predicate: Callable[[A], Any] = bool) -> bool:
        """Returns True if predicate holds for some element."""
        return any(predicate(x) for x in self.items)

    def none(self, predicate: Callable[[A], Any] = bool) -> bool:
        """Returns True if predicate holds for no element."""
        return not self.any(predicate)

    def map(self, f: Callable[[A], B]) -> HashSet[B]:
        """
        Returns the image of the set under f.
        Elements that f sends to equal values collapse into one.
        """
        return HashSet([f(x) for x in self.items])

    def __rand__(self, other: Callable[[A], B]) -> HashSet[B]:
        """Defines the right-hand side of the map operation."""
        if not callable(other):
            return NotImplemented
        return self.map(other)

    def union(self, other: HashSet[A]) -> HashSet[A]:
        """
        Returns the elements of either set: self's in order,
        then other's that were not already present.
        """
        _require_set(other)
        result_type = type(self) if type(self) is type(other) else HashSet
        return result_type._from_iterable(chain(self.items, other.items))

    def intersection(self, other: HashSet[A]) -> Self:
        """Returns the elements of self that are also in other."""
        _require_set(other)
        return type(self)._from_iterable(
            x for x in self.items if other.member(x))

    def difference(self, other: HashSet[A]) -> Self:
        """Returns the elements of self that are not in other."""
        _require_set(other)
        return type(self)._from_iterable(
            x for x in self.items if not other.member(x))

    def append(self, other: HashSet[A]) -> HashSet[A]:
        """Semigroup append is union."""
        return self.union(other)

    def __or__(self, other: HashSet[A]) -> HashSet[A]:
        return self.union(other)

    def __and__(self, other: HashSet[A]) -> Self:
        return self.intersection(other)

    def __sub__(self, other: HashSet[A]) -> Self:
        return self.difference(other)

    def is_subset(self, other: HashSet) -> bool:
        """Returns True if every element of self is in other."""
        _require_set(other)
        return len(self) <= len(other) \
            and all(other.member(x) for x in self.items)

    def is_superset(self, other: HashSet) -> bool:
        """Returns True if every element of other is in self."""
        _require_set(other)
        return other.is_subset(self)

    def is_proper_subset(self, other: HashSet) -> bool:
        """Returns True if self is a subset of other but not equal to it."""
        # a subset with as many elements as other is other
        return self.is_subset(other) and len(self) < len(other)

    def is_proper_superset(self, other: HashSet) -> bool:
        """Returns True if self is a superset of other but not equal to it."""
        _require_set(other)
        return other.is_proper_subset(self)

    def __le__(self, other: HashSet) -> bool:
        return self.is_subset(other)

    def __ge__(self, other: HashSet) -> bool:
        return self.is_superset(other)

    def __lt__(self, other: HashSet) -> bool:
        return self.is_proper_subset(other)

    def __gt__(self, other: HashSet) -> bool:
        return self.is_proper_superset(other)

    def __eq__(self, other) -> bool:
        """
        Two HashSets are equal when each is a subset of the other.
        Anything that is not a HashSet is unequal.
        """
        if not isinstance(other, HashSet):
            return False
        if self.fingerprint != other.fingerprint:
            return False
        # subset plus equal cardinality is mutual containment
        return len(self) == len(other) and self.is_subset(other)

    def __hash__(self) -> int:
        return self.fingerprint

    def cartesian_product(self, other: HashSet[B]) -> Relation[A, B]:
        """
        Returns the Relation holding an OrderedPair (a, b) for every a in
        self and b in other, ordered by self's elements first.
        """
        _require_set(other)
        from .relation import Relation  # pylint: disable=import-outside-toplevel
        return Relation._from_iterable(
            OrderedPair(a, b) for a in self.items for b in other.items)

    def powerset(self) -> HashSet[Self]:
        """
        Returns the set of every subset of self, the empty set and self
        included. Bit i of each integer in 0 .. 2**n - 1 decides whether
        the i-th element belongs to the corresponding subset.
        """
        n = len(self.items)
        limit = settings().powerset_limit
        if limit is not None and n > limit:
            logger.warning("refusing powerset of %d elements (limit %d)",
                           n, limit)
            raise CapacityExceeded(n, limit)
        logger.debug("powerset of %d elements: %d subsets", n, 1 << n)
        subset_type = type(self)
        return HashSet._from_iterable(
            subset_type._from_iterable(
                x for i, x in enumerate(self.items) if mask >> i & 1)
            for mask in range(1 << n))

    @classmethod
    def big_union(cls, *sets: HashSet) -> HashSet:
        """Returns the union of any number of HashSets."""
        return big_union(*sets)

    @classmethod
    def big_intersection(cls, *sets: HashSet) -> HashSet:
        """Returns the intersection of one or more HashSets."""
        return big_intersection(*sets)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self

    def __repr__(self) -> str:
        """Renders as Ø, or the elements between braces in insertion order."""
        if not self.items:
            return "Ø"
        return "{" + ", ".join(repr(x) for x in self.items) + "}"


@dataclass(frozen=True)
class Intersection[A](Semigroup):
    """
    Wraps a HashSet so that append means intersection.
    Has no identity (there is no universal set), so it is only a Semigroup.
    """
    members: HashSet[A]

    def append(self, other: Intersection[A]) -> Intersection[A]:
        return Intersection(self.members.intersection(other.members))


def big_union(*sets: HashSet) -> HashSet:
    """
    Returns the union of any number of HashSets, folding from the empty set.
    Raises InvalidArgument if any argument is not a HashSet.
    """
    for s in sets:
        _require_set(s)
    logger.debug("big union over %d sets", len(sets))
    return mconcat(HashSet, sets)


def big_intersection(*sets: HashSet) -> HashSet:
    """
    Returns the intersection of one or more HashSets, folding from the first.
    Raises InvalidArgument if any argument is not a HashSet, or if no set
    is given.
    """
    if not sets:
        raise InvalidArgument("big_intersection needs at least one HashSet")
    for s in sets:
        _require_set(s)
    logger.debug("big intersection over %d sets", len(sets))
    first, *rest = sets
    return sconcat(Intersection(first), (Intersection(s) for s in rest)).members


def _require_set(value: Any) -> None:
    if not isinstance(value, HashSet):
        raise InvalidArgument(NOT_A_SET)

