# --------------------------------------------------------
# (c) Copyright 2014, 2020 by Jason DeLaat.
# Licensed under BSD 3-clause licence.
# --------------------------------------------------------
# pylint:disable=W2301
"""Monoid Implementation.

A monoid is an algebraic structure consisting of a set of objects, S,
and an operation usually denoted as '+' which obeys the following
rules:

    1. Closure: If 'a' and 'b' are in S, then 'a + b' is also in S.
    2. Identity: There exists an element in S (denoted 0) such that
       a + 0 = a = 0 + a
    3. Associativity: (a + b) + c = a + (b + c)

HashSet under union is a monoid whose identity is the empty set.

Example:
    mconcat(HashSet, [])                                # Ø
    mconcat(HashSet, [HashSet([1]), HashSet([2])])      # {1, 2}

"""

from typing import (
    Iterable,
    Protocol,
    Self,
)

from .semigroup import Semigroup, sconcat


class Monoid(Semigroup, Protocol):
    """Base class for Monoid instances.

    To implement a monoid instance, create a sub-class of Monoid and
    override the mempty and append methods ensuring that the closure,
    identity, and associativity laws hold.

    """

    @classmethod
    def mempty(cls) -> Self:
        """Returns the identity element for this Monoid."""
        ...


def mconcat[M: Monoid](m_cls: type[M], monoid_list: Iterable[M]) -> M:
    """Takes a list of monoid values and reduces them to a single value
    by applying the append operation to all elements of the list,
    starting from the identity of m_cls. An empty list gives the identity.
    """
    return sconcat(m_cls.mempty(), monoid_list)
