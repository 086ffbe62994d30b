"""Testing utilities for bstreelib consumers."""

from .fixtures import Record, collect_shape

__all__ = ['Record', 'collect_shape']
