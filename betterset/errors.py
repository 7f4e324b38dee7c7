"""
Exceptions raised by betterset.
"""


class BetterSetError(Exception):
    """Base class for every error raised by the package."""


class InvalidArgument(BetterSetError, TypeError):
    """
    Raised when a constructor or a set operation receives an argument
    of the wrong kind, e.g. a string where a HashSet was expected.
    """


class CapacityExceeded(BetterSetError, ValueError):
    """Raised when a powerset would exceed the configured size limit."""

    def __init__(self, cardinality: int, limit: int):
        self.cardinality = cardinality
        self.limit = limit
        super().__init__(
            f"Powerset of a set with {cardinality} elements exceeds "
            f"the limit of {limit} elements")


NOT_A_SET = "Argument must be a HashSet"
NOT_A_SEQUENCE = "Argument must be a list or tuple"
NOT_A_PAIR = "Relation elements must be OrderedPair"
