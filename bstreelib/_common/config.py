"""Configuration system for bstreelib.

This module defines how users tune tree behaviour: default flatten
capacity, input validation for balanced rebuilds, element copying and the
recursion budget used by the recursive algorithms.
"""

import logging
import os
import sys
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import List, Optional

from ..errors import ConfigError

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

DEFAULT_ARRAY_CAPACITY = 100


def _bool_from_env(value: Optional[str], *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid integer value '{raw}'") from exc


@dataclass(frozen=True)
class TreeConfig:
    """Complete configuration for a BinTree.

    Trees read this once at construction. Use ``runtime_config()`` for the
    process-wide default derived from the environment, or build one
    directly for a single tree.
    """

    array_capacity: int = DEFAULT_ARRAY_CAPACITY  # Default slots for to_array()
    validate_sequences: bool = True               # Check from_array() ordering
    copy_elements: bool = True                    # New element instances on deep copy
    max_recursion_depth: Optional[int] = None     # Raise interpreter limit to this
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'TreeConfig':
        """Create config from ``BSTREELIB_*`` environment variables.

        Returns:
            TreeConfig with defaults for every unset variable

        Raises:
            ConfigError: If a variable is malformed or the result is invalid
        """
        capacity = _parse_optional_int(os.getenv("BSTREELIB_ARRAY_CAPACITY"))
        config = cls(
            array_capacity=DEFAULT_ARRAY_CAPACITY if capacity is None else capacity,
            validate_sequences=_bool_from_env(
                os.getenv("BSTREELIB_VALIDATE_SEQUENCES"), default=True
            ),
            copy_elements=_bool_from_env(
                os.getenv("BSTREELIB_COPY_ELEMENTS"), default=True
            ),
            max_recursion_depth=_parse_optional_int(
                os.getenv("BSTREELIB_MAX_RECURSION_DEPTH")
            ),
            log_level=os.getenv("BSTREELIB_LOG_LEVEL", "WARNING").strip().upper(),
        )
        errors = config.validate()
        if errors:
            raise ConfigError(f"Invalid configuration: {'; '.join(errors)}")
        return config

    def with_overrides(self, **changes) -> 'TreeConfig':
        """Return a copy of this config with the given fields replaced."""
        return replace(self, **changes)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.array_capacity < 0:
            errors.append("array_capacity cannot be negative")

        if self.max_recursion_depth is not None and self.max_recursion_depth <= 0:
            errors.append("max_recursion_depth must be positive")

        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(sorted(_SUPPORTED_LOG_LEVELS))}"
            )

        return errors

    def ensure_recursion_budget(self) -> int:
        """Raise the interpreter recursion limit to ``max_recursion_depth``.

        The limit is never lowered.

        Returns:
            The recursion limit in effect afterwards
        """
        current = sys.getrecursionlimit()
        if self.max_recursion_depth is not None and self.max_recursion_depth > current:
            sys.setrecursionlimit(self.max_recursion_depth)
            return self.max_recursion_depth
        return current


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("bstreelib")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> TreeConfig:
    config = TreeConfig.from_env()
    _configure_logging(config.log_level)
    config.ensure_recursion_budget()
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
