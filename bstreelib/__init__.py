"""bstreelib - Ordered, duplicate-free binary search trees.

bstreelib provides BinTree, a binary search tree over any totally ordered
element type, with lookup, shape-sensitive equality, subtree heights and a
sorted-array round-trip that rebuilds a balanced tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bstreelib import BinTree

    tree = BinTree.from_iterable([7, 3, 9, 1, 5])
    tree.height(3)                          # 1
    tree.from_array(tree.to_array())        # rebalance
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .errors import (
    TreeError,
    ConfigError,
    CapacityError,
    UnsortedSequenceError,
    TreeDepthError,
)
from ._common import (
    DEFAULT_ARRAY_CAPACITY,
    TreeConfig,
    runtime_config,
    reset_runtime_config_cache,
)
from .core import (
    Comparable,
    BinaryNode,
    BinTree,
    SynchronizedTree,
    create_traverser,
)
from .api import (
    build_tree,
    balance_tree,
    count_nodes,
    get_leaf_elements,
    get_tree_stats,
    is_valid_bst,
)

__all__ = [
    "__version__",
    # Errors
    "TreeError",
    "ConfigError",
    "CapacityError",
    "UnsortedSequenceError",
    "TreeDepthError",
    # Config
    "DEFAULT_ARRAY_CAPACITY",
    "TreeConfig",
    "runtime_config",
    "reset_runtime_config_cache",
    # Core
    "Comparable",
    "BinaryNode",
    "BinTree",
    "SynchronizedTree",
    "create_traverser",
    # API
    "build_tree",
    "balance_tree",
    "count_nodes",
    "get_leaf_elements",
    "get_tree_stats",
    "is_valid_bst",
]
