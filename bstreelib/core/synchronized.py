"""
Thread-safe proxy for BinTree.

BinTree assumes exclusive access during every call. SynchronizedTree wraps
a tree and serialises all method calls through a single re-entrant lock,
for applications that share one tree between threads.
"""

import copy
import functools
import inspect
import threading
from typing import Any, Iterator, Optional

from .tree import BinTree


class SynchronizedTree:
    """
    Proxy that guards every method of a wrapped BinTree with one lock.

    Uses the dynamic proxy pattern: any attribute not defined here is
    fetched from the wrapped tree, and callables are wrapped so they run
    while holding the lock. Iteration, and any method returning a generator
    (``inorder``, ``preorder``, ``postorder``), materialises the elements
    under the lock, so callers iterate over a snapshot. Methods that return
    the wrapped tree itself (``from_array``) return the proxy instead.
    Copies of a proxy wrap a copied tree with a fresh lock.

    Operations that take a second tree (``assign``, ``==``) lock only this
    proxy; lock the other proxy too if it is shared.
    """

    def __init__(self, tree: Optional[BinTree] = None, lock: Optional[threading.RLock] = None):
        """
        Initialize the proxy.

        Args:
            tree: The tree to guard (defaults to a new empty BinTree)
            lock: Lock to use (defaults to a new RLock)
        """
        self._tree = tree if tree is not None else BinTree()
        self._lock = lock if lock is not None else threading.RLock()

    def __getattr__(self, name: str) -> Any:
        """
        Dynamic proxy that wraps all tree methods with the lock.

        Args:
            name: The attribute name being accessed

        Returns:
            The attribute from the wrapped tree, wrapped if it's a method

        Raises:
            AttributeError: For private names, which are never forwarded
        """
        # Private lookups also arrive here before __init__ has run (copy, pickle)
        if name.startswith('_'):
            raise AttributeError(name)

        attr = getattr(self._tree, name)

        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def wrapper(*args, **kwargs):
            with self._lock:
                result = attr(*args, **kwargs)
                if inspect.isgenerator(result):
                    # Walk to completion while the lock is still held
                    result = iter(list(result))
            if result is self._tree:
                return self
            return result

        return wrapper

    @property
    def lock(self) -> threading.RLock:
        """The lock guarding the tree; hold it to batch several calls."""
        return self._lock

    def get_tree(self) -> BinTree:
        """
        Get the wrapped tree.

        Returns:
            The underlying BinTree (unguarded)
        """
        return self._tree

    def _unwrap(self, other: Any) -> Any:
        return other._tree if isinstance(other, SynchronizedTree) else other

    # Special methods bypass __getattr__, so each is forwarded explicitly
    def __len__(self) -> int:
        with self._lock:
            return len(self._tree)

    def __bool__(self) -> bool:
        with self._lock:
            return bool(self._tree)

    def __contains__(self, element: Any) -> bool:
        with self._lock:
            return element in self._tree

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = list(self._tree)
        return iter(snapshot)

    def __eq__(self, other: object) -> bool:
        with self._lock:
            return self._tree == self._unwrap(other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None

    def assign(self, source: Any) -> 'SynchronizedTree':
        with self._lock:
            self._tree.assign(self._unwrap(source))
        return self

    def copy(self) -> 'SynchronizedTree':
        """Return a new proxy guarding an independent deep copy of the tree."""
        return self.__copy__()

    def __copy__(self) -> 'SynchronizedTree':
        with self._lock:
            duplicate = self._tree.copy()
        return SynchronizedTree(duplicate)

    def __deepcopy__(self, memo: dict) -> 'SynchronizedTree':
        with self._lock:
            duplicate = copy.deepcopy(self._tree, memo)
        return SynchronizedTree(duplicate)

    def __str__(self) -> str:
        with self._lock:
            return str(self._tree)

    def __repr__(self) -> str:
        """String representation."""
        with self._lock:
            return f"SynchronizedTree({self._tree!r})"
