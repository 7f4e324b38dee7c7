""" Abstract base class for Functor """
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)


class Functor[A](ABC):
    """Base class for Functor instances.

    To implement a functor instance, create a sub-class of Functor and
    override the map method ensuring that the functor laws hold.
    `f & functor` is shorthand for `functor.map(f)`.
    """

    def __rand__(self, other):
        """Defines the right-hand side of the map operation."""
        return map(other, self)

    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Applies a function to the value(s) inside the Functor."""


def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the value inside the functor
    'f' using its map method."""
    return f.map(fn)
