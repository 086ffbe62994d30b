"""Element contract for bstreelib.

Trees never inspect their elements beyond comparing and rendering them.
Any type with a strict total order works: ints, strings, tuples, or
dataclasses declared with ``order=True``. ``Comparable`` spells out the
contract for record types written specifically for a tree.
"""

from abc import ABC, abstractmethod
from typing import Any, TypeVar


class Comparable(ABC):
    """Abstract base class for records stored in a BinTree.

    Implementations must provide a strict total order consistent with
    equality: for any two records exactly one of ``a < b``, ``a > b`` and
    ``a == b`` holds. Records that compare equal are the same key to the
    tree, so a second one is rejected on insert.
    """

    @abstractmethod
    def __lt__(self, other: Any) -> bool:
        pass

    @abstractmethod
    def __gt__(self, other: Any) -> bool:
        pass

    @abstractmethod
    def __eq__(self, other: Any) -> bool:
        pass

    @abstractmethod
    def __str__(self) -> str:
        """Human-readable rendering used by the in-order and sideways dumps."""
        pass

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None


T = TypeVar("T")
