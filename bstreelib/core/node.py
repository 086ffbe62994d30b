"""BinaryNode, the storage cell of a BinTree.

Nodes are intentionally dumb: they hold an element and two child links.
Every ordering decision is made by BinTree, which is the only code that
creates, links or unlinks nodes.
"""

from typing import Generic, Optional

from .element import T


class BinaryNode(Generic[T]):
    """One position in a binary search tree.

    The left subtree holds only elements strictly less than ``element``
    and the right subtree only elements strictly greater. A node belongs
    to exactly one tree; copies of a tree get their own nodes.
    """

    __slots__ = ('element', 'left', 'right')

    def __init__(self,
                 element: Optional[T],
                 left: Optional['BinaryNode[T]'] = None,
                 right: Optional['BinaryNode[T]'] = None):
        self.element = element
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self):
        """Yield the present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(element={self.element!r})"
