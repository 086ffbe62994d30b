#!/usr/bin/env python3
"""
Rebalancing a degenerate tree through the array round-trip.

This example demonstrates:
- How insertion order fixes a tree's shape
- Shape-sensitive equality
- Flattening to an array and rebuilding a balanced tree
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BinTree, build_tree, get_tree_stats
from bstreelib.testing import Record


def show(title: str, tree: BinTree) -> None:
    """Print a tree's in-order dump, sideways view and statistics."""
    stats = get_tree_stats(tree)
    print(f"--- {title} ---")
    print(f"In order: {tree}", end="")
    tree.display_sideways()
    print(f"size={stats['size']} height={stats['height']} balanced={stats['balanced']}")
    print()


def main() -> int:
    words = ["and", "bee", "cat", "dog", "eel", "fox", "gnu"]

    chain = build_tree(Record(word) for word in words)
    show("Inserted in sorted order", chain)

    balanced = chain.copy()
    buffer = [None] * 10
    balanced.to_array(buffer)
    balanced.from_array(buffer, consume=True)
    show("After array round-trip", balanced)

    print(f"Same elements: {list(map(str, chain)) == list(map(str, balanced))}")
    print(f"Same shape:    {chain == balanced}")

    found, record = balanced.retrieve(Record("dog"))
    print(f"Retrieve dog:  {found} (height {balanced.height(record)})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
