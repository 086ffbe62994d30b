"""
Tests for the SynchronizedTree lock proxy.
"""

import copy
import random
import sys
import threading
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BinTree, SynchronizedTree, build_tree, is_valid_bst


class TestSynchronizedTree:
    """Test that the proxy forwards calls and serialises them."""

    def test_wraps_new_tree_by_default(self):
        proxy = SynchronizedTree()
        assert isinstance(proxy.get_tree(), BinTree)
        assert proxy.is_empty()

    def test_methods_forwarded(self):
        proxy = SynchronizedTree(build_tree([2, 1, 3]))
        assert proxy.insert(4)
        assert not proxy.insert(2)
        assert proxy.retrieve(3) == (True, 3)
        assert proxy.height(2) == 2
        assert len(proxy) == 4
        assert 4 in proxy
        assert list(proxy) == [1, 2, 3, 4]
        assert str(proxy) == "1 2 3 4 \n"

    def test_wrapped_methods_keep_names(self):
        proxy = SynchronizedTree()
        assert proxy.insert.__name__ == "insert"

    def test_method_runs_under_lock(self):
        proxy = SynchronizedTree(build_tree([1]))
        observed = []

        original = proxy.get_tree().is_empty

        def spying_is_empty():
            # Another thread must not be able to take the lock mid-call
            result = []
            thread = threading.Thread(target=lambda: result.append(proxy.lock.acquire(blocking=False)))
            thread.start()
            thread.join()
            observed.append(result[0])
            return original()

        proxy.get_tree().is_empty = spying_is_empty
        proxy.is_empty()

        assert observed == [False]

    def test_equality_unwraps_proxies(self):
        left = SynchronizedTree(build_tree([5, 3, 8]))
        right = SynchronizedTree(build_tree([5, 8, 3]))
        assert left == right
        assert left == build_tree([5, 3, 8])
        assert left != build_tree([3, 5, 8])

    def test_assign_from_proxy(self):
        target = SynchronizedTree()
        source = SynchronizedTree(build_tree([2, 1, 3]))
        assert target.assign(source) is target
        assert target.get_tree() == source.get_tree()

    def test_concurrent_inserts(self):
        proxy = SynchronizedTree()
        workers = 8
        per_worker = 200
        values = list(range(workers * per_worker))
        random.Random(1234).shuffle(values)

        def insert_slice(offset):
            for value in values[offset::workers]:
                proxy.insert(value)

        threads = [threading.Thread(target=insert_slice, args=(i,)) for i in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(proxy) == workers * per_worker
        assert list(proxy) == list(range(workers * per_worker))
        assert is_valid_bst(proxy.get_tree())

    def test_traversal_is_snapshot_taken_under_lock(self):
        proxy = SynchronizedTree(build_tree([4, 2, 6, 1, 3, 5, 7]))
        walk = proxy.inorder()
        assert next(walk) == 1

        thread = threading.Thread(target=proxy.clear)
        thread.start()
        thread.join()

        assert proxy.is_empty()
        assert list(walk) == [2, 3, 4, 5, 6, 7]

    def test_traversal_waits_for_lock_holder(self):
        proxy = SynchronizedTree(build_tree([2, 1, 3]))
        walks = []

        with proxy.lock:
            thread = threading.Thread(target=lambda: walks.append(list(proxy.preorder())))
            thread.start()
            thread.join(timeout=0.2)
            assert thread.is_alive()
            proxy.insert(4)
        thread.join()

        assert walks == [[2, 1, 3, 4]]

    def test_methods_returning_tree_return_proxy(self):
        proxy = SynchronizedTree()
        assert proxy.from_array([1, 2, 3]) is proxy
        assert list(proxy) == [1, 2, 3]

    def test_copy_is_guarded_and_independent(self):
        proxy = SynchronizedTree(build_tree([2, 1, 3]))
        for duplicate in (proxy.copy(), copy.copy(proxy), copy.deepcopy(proxy)):
            assert isinstance(duplicate, SynchronizedTree)
            assert duplicate == proxy
            assert duplicate.get_tree() is not proxy.get_tree()
            assert duplicate.lock is not proxy.lock
            duplicate.insert(4)
            assert 4 not in proxy

    def test_private_names_not_forwarded(self):
        proxy = SynchronizedTree(build_tree([1]))
        with pytest.raises(AttributeError):
            proxy._root
