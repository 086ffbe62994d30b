"""High-level API for bstreelib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the BinTree methods for ease of use in
simple cases and add a few whole-tree measurements.
"""

from typing import Any, Dict, Iterable, List, Optional

from ._common.config import TreeConfig
from .core.node import BinaryNode
from .core.traverser import InOrderTraverser, LevelOrderTraverser
from .core.tree import BinTree


def build_tree(elements: Iterable[Any], config: Optional[TreeConfig] = None) -> BinTree:
    """Build a tree by inserting elements in the given order.

    The insertion order fixes the tree's shape. Duplicates are skipped.

    Args:
        elements: Elements to insert
        config: Tree configuration (None = runtime config)

    Returns:
        The new BinTree

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> tree == build_tree([5, 8, 3])
        True
    """
    return BinTree.from_iterable(elements, config=config)


def balance_tree(tree: BinTree, capacity: Optional[int] = None) -> BinTree:
    """Rebalance a tree in place through the array round-trip.

    Args:
        tree: Tree to rebalance
        capacity: Array capacity (None = the tree's configured default)

    Returns:
        The same tree, now of minimal height

    Raises:
        CapacityError: If the tree holds more elements than the capacity
    """
    elements = tree.to_array(capacity=capacity)
    return tree.from_array(elements)


def count_nodes(tree: BinTree) -> int:
    """Count nodes by walking the structure.

    Unlike ``len(tree)`` this does not trust the size counter, which makes
    it useful for consistency checks.
    """
    return sum(1 for _ in InOrderTraverser().traverse(tree.root))


def get_leaf_elements(tree: BinTree) -> List[Any]:
    """Return the elements held by leaf nodes, in ascending order."""
    return [
        node.element
        for node, _ in InOrderTraverser().traverse(tree.root)
        if node.is_leaf()
    ]


def is_valid_bst(tree: BinTree) -> bool:
    """Check the ordering invariant over the whole node structure.

    Every element must be strictly greater than everything in its left
    subtree and strictly less than everything in its right subtree.
    """

    def _check(node: Optional[BinaryNode], low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and not low < node.element:
            return False
        if high is not None and not node.element < high:
            return False
        return (_check(node.left, low, node.element)
                and _check(node.right, node.element, high))

    return _check(tree.root, None, None)


def get_tree_stats(tree: BinTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary containing:
        - size: Number of elements
        - height: Edges from root to deepest leaf (-1 when empty)
        - leaves: Number of leaf nodes
        - width: Largest number of nodes on one level
        - balanced: Whether height is minimal for the size
        - min / max: Smallest and largest element (None when empty)
    """
    level_counts: Dict[int, int] = {}
    leaves = 0
    for node, depth in LevelOrderTraverser().traverse(tree.root):
        level_counts[depth] = level_counts.get(depth, 0) + 1
        if node.is_leaf():
            leaves += 1

    size = len(tree)
    height = tree.tree_height()
    elements = list(tree.inorder()) if size else []

    return {
        'size': size,
        'height': height,
        'leaves': leaves,
        'width': max(level_counts.values()) if level_counts else 0,
        'balanced': height == size.bit_length() - 1,
        'min': elements[0] if elements else None,
        'max': elements[-1] if elements else None,
    }
