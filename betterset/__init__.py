""" imports for betterset """
from .config import SetConfig, settings, configure, reset
from .display import set_text, relation_table, rich_to_str
from .errors import BetterSetError, InvalidArgument, CapacityExceeded
from .functor import Functor, map #pylint: disable=redefined-builtin
from .hashset import HashSet, Intersection, big_union, big_intersection
from .log import configure_logging
from .monoid import Monoid, mconcat
from .oracle import value_hash, values_equal
from .orderedpair import OrderedPair
from .relation import Relation
from .semigroup import Semigroup, sconcat
