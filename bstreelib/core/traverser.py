"""Traversal strategies for bstreelib.

Traversers implement the different orders for walking a binary tree's
nodes. BinTree uses them for iteration, copying, clearing and rendering,
so every walk in the package goes through one of these classes. All of them
keep an explicit stack or queue, so a degenerate chain is walked in linear
time without touching the recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .node import BinaryNode


class TreeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies.

    Traversers are stateless; a single instance can walk any number of
    trees, concurrently or not.
    """

    @abstractmethod
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass


class InOrderTraverser(TreeTraverser):
    """Left subtree, node, right subtree.

    On a binary search tree this yields elements in ascending order.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        stack: List[Tuple[BinaryNode, int]] = []
        node, depth = root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node, depth = node.left, depth + 1
            node, depth = stack.pop()
            right = node.right
            yield (node, depth)
            node, depth = right, depth + 1


class PreOrderTraverser(TreeTraverser):
    """Node, left subtree, right subtree.

    Re-inserting elements in this order into an empty tree reproduces the
    source shape, which is how BinTree copies itself.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return
        stack: List[Tuple[BinaryNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            # Right is pushed first so the left subtree is walked first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))
            yield (node, depth)


class PostOrderTraverser(TreeTraverser):
    """Left subtree, right subtree, node.

    Children are yielded before their parent, so a consumer may unlink each
    node as soon as it is seen.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return
        stack: List[Tuple[BinaryNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue
            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


class ReverseInOrderTraverser(TreeTraverser):
    """Right subtree, node, left subtree.

    Drives the sideways dump: printed top to bottom, the tree reads as if
    rotated 90 degrees counter-clockwise.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        stack: List[Tuple[BinaryNode, int]] = []
        node, depth = root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node, depth = node.right, depth + 1
            node, depth = stack.pop()
            left = node.left
            yield (node, depth)
            node, depth = left, depth + 1


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1, left to
    right within a level.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[BinaryNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            for child in node.children():
                queue.append((child, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (inorder, preorder, postorder,
            reverse, level)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'inorder': InOrderTraverser,
        'in_order': InOrderTraverser,
        'preorder': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'postorder': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'reverse': ReverseInOrderTraverser,
        'sideways': ReverseInOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
        'bfs': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
