"""Tests for the functional helpers in bstreelib.api."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BinTree,
    BinaryNode,
    build_tree,
    count_nodes,
    get_leaf_elements,
    get_tree_stats,
    is_valid_bst,
)


def test_build_tree_inserts_in_order():
    tree = build_tree([5, 3, 8])
    assert tree.root.element == 5
    assert tree.root.left.element == 3
    assert tree.root.right.element == 8


def test_count_nodes_matches_len():
    tree = build_tree([7, 3, 9, 1, 5, 3, 7])
    assert count_nodes(tree) == len(tree) == 5
    assert count_nodes(BinTree()) == 0


def test_get_leaf_elements():
    assert get_leaf_elements(build_tree([7, 3, 9, 1, 5])) == [1, 5, 9]
    assert get_leaf_elements(build_tree([1, 2, 3])) == [3]
    assert get_leaf_elements(BinTree()) == []


def test_is_valid_bst_accepts_built_trees():
    assert is_valid_bst(build_tree([50, 20, 80, 10, 30, 70, 90]))
    assert is_valid_bst(BinTree())


def test_is_valid_bst_detects_violation_below_root():
    """A node can satisfy its parent yet still break an ancestor's bound."""
    tree = build_tree([50, 20, 80])
    tree.root.left.right = BinaryNode(60)
    assert not is_valid_bst(tree)


def test_is_valid_bst_detects_equal_child():
    tree = build_tree([50, 20])
    tree.root.right = BinaryNode(50)
    assert not is_valid_bst(tree)


def test_tree_stats():
    stats = get_tree_stats(build_tree([7, 3, 9, 1, 5]))
    assert stats == {
        'size': 5,
        'height': 2,
        'leaves': 3,
        'width': 2,
        'balanced': True,
        'min': 1,
        'max': 9,
    }


def test_tree_stats_for_chain():
    stats = get_tree_stats(build_tree([1, 2, 3, 4]))
    assert stats['height'] == 3
    assert stats['width'] == 1
    assert stats['balanced'] is False


def test_tree_stats_for_empty_tree():
    stats = get_tree_stats(BinTree())
    assert stats['size'] == 0
    assert stats['height'] == -1
    assert stats['leaves'] == 0
    assert stats['width'] == 0
    assert stats['balanced'] is True
    assert stats['min'] is None
    assert stats['max'] is None
