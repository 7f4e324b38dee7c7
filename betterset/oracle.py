"""
Equality and hashing for arbitrary set elements.

Every container in betterset decides identity through these two functions,
so a HashSet nested inside a list (or a list nested inside a HashSet) is
compared and bucketed the same way wherever it appears.

The one contract that matters: if values_equal(a, b) then
value_hash(a) == value_hash(b).
"""
from collections import UserString
from collections.abc import Mapping, Sequence, Set
from typing import Any


def values_equal(a: Any, b: Any) -> bool:
    """
    Returns True if a and b are the same value.
    HashSet operands compare by mutual containment through their own __eq__.
    """
    return a is b or bool(a == b)


def value_hash(value: Any) -> int:
    """
    Returns a hash consistent with values_equal.
    Unordered aggregates (mappings, sets) combine their members' hashes
    order-independently; ordered aggregates keep the order.
    """
    match value:
        case str() | bytes():
            return hash(value)
        case UserString():
            return hash(str(value))
        case bytearray() | memoryview():
            return hash(bytes(value))
        case tuple():
            return _ordered_hash("tuple", value)
        case Sequence():
            return _ordered_hash("list", value)
        case Mapping():
            return hash(("mapping", frozenset(
                (value_hash(k), value_hash(v)) for k, v in value.items())))
        case Set():
            return hash(("set", frozenset(value_hash(x) for x in value)))
        case _:
            return _natural_hash(value)


def _ordered_hash(kind: str, values) -> int:
    return hash((kind, tuple(value_hash(x) for x in values)))


def _natural_hash(value: Any) -> int:
    try:
        return hash(value)
    except TypeError:
        # all unhashable values of one type share a bucket
        return hash(("unhashable", type(value).__qualname__))


def owned(value: Any) -> Any:
    """
    Rebuilds builtin list, tuple, dict, set and bytearray values, all the
    way down, so the caller keeps no handle that could change the value
    after it was hashed. Anything else is shared as is.
    """
    kind = type(value)
    if kind is list:
        return [owned(x) for x in value]
    if kind is tuple:
        return tuple(owned(x) for x in value)
    if kind is dict:
        return {k: owned(v) for k, v in value.items()}
    if kind in (set, bytearray):
        return kind(value)
    return value
