"""Test fixtures for bstreelib consumers.

These fixtures provide a ready-made record type and shape helpers so test
suites can make structural assertions without reaching into node links
themselves.
"""

from typing import Any, Optional, Tuple

from ..core.element import Comparable
from ..core.node import BinaryNode
from ..core.tree import BinTree

Shape = Optional[Tuple[Any, 'Shape', 'Shape']]


class Record(Comparable):
    """String-keyed record with an optional payload.

    Ordering and equality use the key only, so two records with the same key
    and different payloads are duplicates as far as a tree is concerned.
    The payload lets tests check which instance a tree kept.

    Example:
        tree = BinTree()
        tree.insert(Record("m", payload=1))
        tree.insert(Record("m", payload=2))   # rejected
        found, stored = tree.retrieve(Record("m"))
        assert stored.payload == 1
    """

    def __init__(self, key: str, payload: Any = None):
        if not isinstance(key, str):
            raise TypeError("Record key must be a string")
        self.key = key
        self.payload = payload

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.key < other.key

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.key > other.key

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.key == other.key

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"Record({self.key!r}, payload={self.payload!r})"


def collect_shape(tree: BinTree) -> Shape:
    """Return the tree as nested ``(element, left, right)`` tuples.

    Empty subtrees are None, so ``(5, (3, None, None), None)`` is a root 5
    with a single left child 3.
    """

    def _shape(node: Optional[BinaryNode]) -> Shape:
        if node is None:
            return None
        return (node.element, _shape(node.left), _shape(node.right))

    return _shape(tree.root)
