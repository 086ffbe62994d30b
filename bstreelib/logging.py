"""Project-wide logging utilities that honour ``TreeConfig.log_level``."""

import logging
from typing import Optional

from ._common import config as bst_config


def get_logger(name: Optional[str] = None,
               config: Optional[bst_config.TreeConfig] = None) -> logging.Logger:
    """Return a logger at the level of ``config`` (default: runtime configuration).

    The environment is only consulted when no ``config`` is given.
    """

    logger_name = "bstreelib" if name is None else f"bstreelib.{name}"
    if config is None:
        config = bst_config.runtime_config()
    logger = logging.getLogger(logger_name)
    logger.setLevel(config.log_level)
    return logger
