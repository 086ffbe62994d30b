"""BinTree, the binary search tree at the heart of bstreelib.

A BinTree keeps its elements ordered (left subtree strictly less, right
subtree strictly greater) and free of duplicates. Insertion never
rebalances; the only balancing mechanism is the explicit round-trip
through a sorted array (``to_array`` followed by ``from_array``), which
rebuilds a tree of minimal height.

Insert, lookup, height and equality are recursive, mirroring the recursive
definition of the structure. Recursion depth is bounded by the tree height,
which for a degenerate insertion order equals the element count. Whole-tree
walks (clearing, copying, flattening, iteration, rendering) go through the
stack-based traversers instead.
"""

import copy
import functools
import sys
from collections.abc import MutableSequence
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple

from .._common.config import TreeConfig, runtime_config
from ..errors import CapacityError, ConfigError, TreeDepthError, UnsortedSequenceError
from ..logging import get_logger
from .element import T
from .node import BinaryNode
from .traverser import (
    InOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    ReverseInOrderTraverser,
)

# Four spaces per level; the root is already two levels in.
SIDEWAYS_INDENT = "    "
SIDEWAYS_ROOT_LEVEL = 2

_inorder = InOrderTraverser()
_preorder = PreOrderTraverser()
_postorder = PostOrderTraverser()
_reverse = ReverseInOrderTraverser()


def _depth_guarded(method: Callable) -> Callable:
    """Translate RecursionError from a recursive tree walk into TreeDepthError."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except TreeDepthError:
            raise
        except RecursionError as exc:
            self._logger.warning(
                "%s exceeded the recursion limit (%d) on a tree of %d elements",
                method.__name__, sys.getrecursionlimit(), self._size
            )
            raise TreeDepthError(
                f"{method.__name__} exceeded the recursion limit; the tree is "
                f"{self._size} elements deep at most"
            ) from exc
    return wrapper


class BinTree(Generic[T]):
    """Ordered, duplicate-free binary search tree.

    Elements must support ``<``, ``>`` and ``==`` as a strict total order
    and render with ``str()``. Two elements that compare equal are the same
    key: the second is rejected on insert, never overwritten.

    Every node is owned by exactly one tree. Copies (``copy()``,
    ``copy.copy``, ``copy.deepcopy``, ``BinTree(other)``, ``assign``) build
    new nodes holding new element instances.

    Example:
        >>> tree = BinTree.from_iterable([7, 3, 9, 1, 5])
        >>> str(tree)
        '1 3 5 7 9 \\n'
        >>> tree.height(3)
        1
    """

    def __init__(self,
                 source: Optional['BinTree[T]'] = None,
                 config: Optional[TreeConfig] = None):
        """Create an empty tree, or a deep copy of ``source``.

        Args:
            source: Tree to copy (None = start empty)
            config: Tree configuration (None = runtime config from environment)

        Raises:
            ConfigError: If an explicit config is invalid
        """
        if config is None:
            config = source._config if source is not None else runtime_config()
        else:
            config_errors = config.validate()
            if config_errors:
                raise ConfigError(f"Invalid configuration: {'; '.join(config_errors)}")
            config.ensure_recursion_budget()

        self._config = config
        self._logger = get_logger("tree", config=config)
        self._root: Optional[BinaryNode[T]] = None
        self._size = 0

        if source is not None:
            self._copy_from(source, self._element_copier())

    @classmethod
    def from_iterable(cls,
                      elements: Iterable[T],
                      config: Optional[TreeConfig] = None) -> 'BinTree[T]':
        """Build a tree by inserting ``elements`` in iteration order.

        Duplicates are skipped, keeping the first occurrence.
        """
        tree = cls(config=config)
        for element in elements:
            tree.insert(element)
        return tree

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def root(self) -> Optional[BinaryNode[T]]:
        """Root node, for read-only inspection. Mutating it breaks the tree."""
        return self._root

    # ------------------------------------------------------------------
    # Emptiness

    def is_empty(self) -> bool:
        """Check if the tree holds no elements."""
        return self._root is None

    def clear(self) -> None:
        """Release every node, children before parents, and reset to empty.

        Safe on an already-empty tree.
        """
        root = self._root
        self._root = None
        self._size = 0
        for node, _ in _postorder.traverse(root):
            node.element = None
            node.left = None
            node.right = None

    # ------------------------------------------------------------------
    # Insert and lookup

    @_depth_guarded
    def insert(self, element: T) -> bool:
        """Insert ``element`` at its ordered position.

        Args:
            element: Element to add; must not be None

        Returns:
            True if inserted, False if an equal element is already present
            (the tree keeps no reference to the rejected element)

        Raises:
            TypeError: If element is None
        """
        if element is None:
            raise TypeError("BinTree cannot store None")
        self._root, inserted = self._insert(self._root, element)
        if inserted:
            self._size += 1
        else:
            self._logger.debug("Rejected duplicate element %s", element)
        return inserted

    def _insert(self, node: Optional[BinaryNode[T]], element: T) -> Tuple[BinaryNode[T], bool]:
        # Returns the (possibly new) subtree root; the caller relinks it.
        if node is None:
            return BinaryNode(element), True
        if element < node.element:
            node.left, inserted = self._insert(node.left, element)
        elif element > node.element:
            node.right, inserted = self._insert(node.right, element)
        else:
            inserted = False
        return node, inserted

    @_depth_guarded
    def retrieve(self, element: T) -> Tuple[bool, Optional[T]]:
        """Look up the stored element equal to ``element``.

        Returns:
            ``(True, stored)`` where ``stored`` is the instance held by the
            tree (not a copy), or ``(False, None)`` when absent
        """
        node = self._retrieve(self._root, element)
        if node is None:
            return False, None
        return True, node.element

    def _retrieve(self, node: Optional[BinaryNode[T]], element: T) -> Optional[BinaryNode[T]]:
        if node is None:
            return None
        if node.element == element:
            return node
        if element < node.element:
            return self._retrieve(node.left, element)
        if element > node.element:
            return self._retrieve(node.right, element)
        return None

    def __contains__(self, element: Any) -> bool:
        found, _ = self.retrieve(element)
        return found

    # ------------------------------------------------------------------
    # Height

    def height(self, element: T) -> int:
        """Height of the subtree rooted at the node holding ``element``.

        Height counts edges on the longest downward path, so a leaf has
        height 0. An absent element also reports 0; use ``find_height`` to
        tell the two apart.
        """
        found = self.find_height(element)
        return 0 if found is None else found

    @_depth_guarded
    def find_height(self, element: T) -> Optional[int]:
        """Like ``height`` but returns None when ``element`` is absent."""
        node = self._locate(self._root, element)
        if node is None:
            return None
        return self._subtree_height(node)

    @_depth_guarded
    def tree_height(self) -> int:
        """Height of the whole tree: -1 when empty, 0 for a single node."""
        return self._subtree_height(self._root)

    def _locate(self, node: Optional[BinaryNode[T]], element: T) -> Optional[BinaryNode[T]]:
        # Walks both children; ordering is not used for this search.
        if node is None:
            return None
        if node.element == element:
            return node
        found = self._locate(node.left, element)
        if found is None:
            found = self._locate(node.right, element)
        return found

    def _subtree_height(self, node: Optional[BinaryNode[T]]) -> int:
        if node is None:
            return -1
        return 1 + max(self._subtree_height(node.left), self._subtree_height(node.right))

    # ------------------------------------------------------------------
    # Equality

    @_depth_guarded
    def __eq__(self, other: object) -> bool:
        """Trees are equal if every position holds an equal element.

        Shape matters: the same elements inserted in a different order may
        produce an unequal tree.
        """
        if not isinstance(other, BinTree):
            return NotImplemented
        if self._root is None and other._root is None:
            return True
        return self._equal(self._root, other._root)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def _equal(self, left: Optional[BinaryNode[T]], right: Optional[BinaryNode[T]]) -> bool:
        if left is None and right is None:
            return True
        if left is None or right is None:
            return False
        if left.element != right.element:
            return False
        return self._equal(left.left, right.left) and self._equal(left.right, right.right)

    # ------------------------------------------------------------------
    # Copying

    def _element_copier(self) -> Callable[[T], T]:
        if self._config.copy_elements:
            return copy.copy
        return lambda element: element

    def _copy_from(self, source: 'BinTree[T]', copier: Callable[[T], T]) -> None:
        # Pre-order re-insertion reproduces the source shape exactly.
        for node, _ in _preorder.traverse(source._root):
            self.insert(copier(node.element))

    def assign(self, source: 'BinTree[T]') -> 'BinTree[T]':
        """Replace this tree's contents with a deep copy of ``source``.

        When ``source`` is structurally equal to this tree (including
        ``source is self``) nothing changes. Otherwise the current contents
        are released first.

        Returns:
            This tree
        """
        if source == self:
            self._logger.debug("Assignment short-circuited: trees already equal")
            return self
        self.clear()
        if source.is_empty():
            return self
        self._copy_from(source, self._element_copier())
        return self

    def copy(self) -> 'BinTree[T]':
        """Return an independent deep copy with the same shape."""
        return self.__class__(self, config=self._config)

    def __copy__(self) -> 'BinTree[T]':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'BinTree[T]':
        duplicate = self.__class__(config=self._config)
        memo[id(self)] = duplicate
        duplicate._copy_from(self, lambda element: copy.deepcopy(element, memo))
        return duplicate

    # ------------------------------------------------------------------
    # Array round-trip

    def to_array(self,
                 out: Optional[MutableSequence] = None,
                 capacity: Optional[int] = None) -> MutableSequence:
        """Move every element, in ascending order, into an array.

        The tree is left empty. Nothing moves if the elements do not fit.

        Args:
            out: Caller-provided buffer written from index 0; its length is
                the capacity. Slots past the last element are untouched.
            capacity: Slot count for a new list when ``out`` is None
                (None = ``config.array_capacity``)

        Returns:
            ``out`` when given, else a new list holding just the elements

        Raises:
            ValueError: If both ``out`` and ``capacity`` are given
            CapacityError: If the tree holds more elements than fit
        """
        if out is not None and capacity is not None:
            raise ValueError("Pass either an output buffer or a capacity, not both")
        if out is not None:
            capacity = len(out)
        elif capacity is None:
            capacity = self._config.array_capacity

        if capacity < 0 or self._size > capacity:
            self._logger.warning(
                "Refusing to flatten %d elements into %d slots", self._size, capacity
            )
            raise CapacityError(self._size, capacity)

        # The tree stays intact until every element has been collected
        elements: List[T] = [node.element for node, _ in _inorder.traverse(self._root)]
        self.clear()
        self._logger.debug("Flattened %d elements into array", len(elements))

        if out is None:
            return elements
        out[:len(elements)] = elements
        return out

    @_depth_guarded
    def from_array(self, sequence: Sequence[Optional[T]], consume: bool = False) -> 'BinTree[T]':
        """Discard current contents and rebuild a balanced tree.

        ``sequence`` must be sorted ascending without duplicates, as produced
        by ``to_array``. None entries (unused buffer slots) are skipped. The
        midpoint of each index range is inserted first, so the result has
        minimal height.

        Args:
            sequence: Sorted elements, optionally padded with None
            consume: Vacate each slot of a mutable ``sequence`` (set it to
                None) as its element moves into the tree

        Returns:
            This tree

        Raises:
            UnsortedSequenceError: If ``config.validate_sequences`` is on and
                the elements are not strictly ascending. The tree is left
                unchanged.
        """
        elements = [element for element in sequence if element is not None]
        if self._config.validate_sequences:
            self._check_sorted(elements)

        self.clear()
        self._build(elements, 0, len(elements) - 1)
        self._logger.debug(
            "Rebuilt balanced tree of %d elements, height %d",
            self._size, self._subtree_height(self._root)
        )

        if consume and isinstance(sequence, MutableSequence):
            for index, element in enumerate(sequence):
                if element is not None:
                    sequence[index] = None
        return self

    def _check_sorted(self, elements: List[T]) -> None:
        for index in range(1, len(elements)):
            previous, current = elements[index - 1], elements[index]
            if not previous < current:
                self._logger.warning(
                    "Rejected rebuild input: %s followed by %s at index %d",
                    previous, current, index
                )
                raise UnsortedSequenceError(index, previous, current)

    def _build(self, elements: List[T], low: int, high: int) -> None:
        if low > high:
            return
        mid = (low + high) // 2
        self.insert(elements[mid])
        self._build(elements, low, mid - 1)
        self._build(elements, mid + 1, high)

    # ------------------------------------------------------------------
    # Iteration

    def inorder(self) -> Iterator[T]:
        """Yield elements in ascending order."""
        for node, _ in _inorder.traverse(self._root):
            yield node.element

    def preorder(self) -> Iterator[T]:
        """Yield each element before those of its subtrees."""
        for node, _ in _preorder.traverse(self._root):
            yield node.element

    def postorder(self) -> Iterator[T]:
        """Yield each element after those of its subtrees."""
        for node, _ in _postorder.traverse(self._root):
            yield node.element

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    # ------------------------------------------------------------------
    # Rendering

    def inorder_string(self) -> str:
        """Ascending elements, each followed by a space, then a newline."""
        return "".join(f"{element} " for element in self.inorder()) + "\n"

    def sideways_string(self) -> str:
        """Render the tree rotated 90 degrees: right subtrees above, left below."""
        lines = []
        for node, depth in _reverse.traverse(self._root):
            lines.append(SIDEWAYS_INDENT * (depth + SIDEWAYS_ROOT_LEVEL) + f"{node.element}\n")
        return "".join(lines)

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Write the in-order dump to ``stream`` (default stdout)."""
        (stream or sys.stdout).write(self.inorder_string())

    def display_sideways(self, stream: Optional[TextIO] = None) -> None:
        """Write the sideways dump to ``stream`` (default stdout)."""
        (stream or sys.stdout).write(self.sideways_string())

    def __str__(self) -> str:
        return self.inorder_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.inorder())!r})"
