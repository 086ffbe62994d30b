"""Common components shared across bstreelib.

This internal package contains configuration that every tree reads. It
should NOT be imported directly by users; the public names are re-exported
from ``bstreelib``.

Important: This package must NEVER import from ``bstreelib.core`` to avoid
circular dependencies.
"""

from .config import (
    DEFAULT_ARRAY_CAPACITY,
    TreeConfig,
    runtime_config,
    reset_runtime_config_cache,
)

__all__ = [
    'DEFAULT_ARRAY_CAPACITY',
    'TreeConfig',
    'runtime_config',
    'reset_runtime_config_cache',
]
