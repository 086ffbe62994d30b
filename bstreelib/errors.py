"""Exception hierarchy for bstreelib.

Ordinary outcomes (duplicate inserts, lookup misses) are reported through
return values. The exceptions here are raised only when a caller breaks a
precondition, so they always indicate a bug in the calling code or its
configuration.
"""


class TreeError(Exception):
    """Base class for all bstreelib errors."""
    pass


class ConfigError(TreeError, ValueError):
    """Raised when a TreeConfig value is invalid."""
    pass


class CapacityError(TreeError):
    """Raised when flattening needs more slots than the caller provided."""

    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(
            f"Tree holds {size} elements but array capacity is {capacity}"
        )


class UnsortedSequenceError(TreeError, ValueError):
    """Raised when a balanced rebuild is given unsorted or duplicate input."""

    def __init__(self, index: int, previous, current):
        self.index = index
        self.previous = previous
        self.current = current
        super().__init__(
            f"Sequence is not strictly ascending at index {index}: "
            f"{previous} followed by {current}"
        )


class TreeDepthError(TreeError, RecursionError):
    """Raised when a recursive operation exceeds the interpreter's limit.

    Degenerate insertion orders produce chains as deep as the element
    count. Raise ``TreeConfig.max_recursion_depth`` or rebalance the tree
    with a flatten/rebuild round-trip.
    """
    pass
