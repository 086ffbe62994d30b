"""Core abstractions for bstreelib.

This package contains the element contract, the node type, the traversal
strategies and the BinTree built from them.
"""

from .element import Comparable
from .node import BinaryNode
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    ReverseInOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .tree import BinTree
from .synchronized import SynchronizedTree

__all__ = [
    "Comparable",
    "BinaryNode",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "ReverseInOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "BinTree",
    "SynchronizedTree",
]
