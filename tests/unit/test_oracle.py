"""
Tests for the equality/hash oracle

Checked invariants:
1. Equal values always hash equal
2. Set-valued elements hash independently of insertion order
3. Unhashable aggregates (lists, dicts) still get structural hashes
"""

from collections import UserString

from betterset import HashSet, OrderedPair, value_hash, values_equal


# =============================================================================
# EQUALITY
# =============================================================================


class TestValuesEqual:
    """values_equal: natural equality, set equality for HashSets."""

    def test_primitives(self):
        assert values_equal(1, 1)
        assert values_equal("justine", "justine")
        assert not values_equal(1, "1")

    def test_numeric_tower_is_kept(self):
        """1, 1.0 and True are the same value, as everywhere in Python."""
        assert values_equal(1, 1.0)
        assert values_equal(1, True)

    def test_sets_compare_by_membership(self):
        assert values_equal(HashSet([1, 2]), HashSet([2, 1]))
        assert not values_equal(HashSet([1]), HashSet([1, 2]))

    def test_set_against_non_set(self):
        assert not values_equal(HashSet(), [])
        assert not values_equal([], HashSet())

    def test_sets_nested_in_lists(self):
        assert values_equal([HashSet([1, 2])], [HashSet([2, 1])])

    def test_nan_is_equal_to_itself_by_identity(self):
        nan = float("nan")
        assert values_equal(nan, nan)


# =============================================================================
# HASHING
# =============================================================================


class TestValueHash:
    """value_hash: consistent with values_equal."""

    def test_set_hash_is_order_independent(self):
        assert value_hash(HashSet([1, 2, 3])) == value_hash(HashSet([3, 1, 2]))

    def test_empty_sets_hash_equal(self):
        assert value_hash(HashSet()) == value_hash(HashSet([]))

    def test_list_hash(self):
        assert value_hash([1, [2, 3]]) == value_hash([1, [2, 3]])

    def test_list_hash_keeps_order(self):
        assert value_hash([1, 2]) != value_hash([2, 1])

    def test_list_of_sets(self):
        assert value_hash([HashSet([1, 2])]) == value_hash([HashSet([2, 1])])

    def test_dict_hash_is_order_independent(self):
        assert value_hash({"a": 1, "b": 2}) == value_hash({"b": 2, "a": 1})

    def test_builtin_sets(self):
        assert value_hash({1, 2}) == value_hash(frozenset({2, 1}))

    def test_bytes_like_values(self):
        """bytes, bytearray and memoryview with the same content are one value."""
        assert value_hash(b"a") == value_hash(bytearray(b"a"))
        assert value_hash(b"a") == value_hash(memoryview(b"a"))

    def test_user_string(self):
        assert value_hash(UserString("a")) == value_hash("a")

    def test_bytes_and_bytearray_collapse_in_a_set(self):
        s = HashSet([b"a", bytearray(b"a")])
        assert s.cardinality() == 1
        assert HashSet([b"a"]).member(bytearray(b"a"))

    def test_user_string_collapses_with_str(self):
        assert HashSet(["a", UserString("a")]).cardinality() == 1
        assert HashSet(["a"]).member(UserString("a"))

    def test_numeric_tower(self):
        assert value_hash(1) == value_hash(1.0) == value_hash(True)

    def test_ordered_pair(self):
        assert value_hash(OrderedPair(1, [2])) == value_hash(OrderedPair(1, [2]))

    def test_unhashable_objects_share_a_type_bucket(self):
        class Box:
            __hash__ = None  # type: ignore[assignment]

            def __init__(self, v):
                self.v = v

            def __eq__(self, other):
                return isinstance(other, Box) and self.v == other.v

        assert value_hash(Box(1)) == value_hash(Box(2))
