import logging

import pytest

from bstreelib import BinTree, CapacityError, ConfigError, TreeConfig
from bstreelib._common import config as bst_config
from bstreelib.logging import get_logger


@pytest.fixture(autouse=True)
def _reset_runtime_config():
    bst_config.reset_runtime_config_cache()
    yield
    bst_config.reset_runtime_config_cache()


def test_logger_respects_runtime_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BSTREELIB_LOG_LEVEL", "DEBUG")

    logger = get_logger("tests.logging")

    assert logger.level == logging.DEBUG
    assert logger.name == "bstreelib.tests.logging"


def test_root_logger_name(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("BSTREELIB_LOG_LEVEL", raising=False)

    logger = get_logger()

    assert logger.name == "bstreelib"
    assert logger.level == logging.WARNING


def test_duplicate_insert_logged_at_debug(caplog: pytest.LogCaptureFixture):
    tree = BinTree.from_iterable([5])
    caplog.set_level(logging.DEBUG, logger="bstreelib.tree")

    tree.insert(5)

    assert any("Rejected duplicate element 5" in message for message in caplog.messages)


def test_capacity_violation_logged_at_warning(caplog: pytest.LogCaptureFixture):
    tree = BinTree.from_iterable([1, 2, 3])
    caplog.set_level(logging.WARNING, logger="bstreelib.tree")

    with pytest.raises(CapacityError):
        tree.to_array(capacity=1)

    records = [record for record in caplog.records if record.name == "bstreelib.tree"]
    assert records
    assert records[-1].levelno == logging.WARNING


def test_explicit_config_sets_tree_logger_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BSTREELIB_LOG_LEVEL", "ERROR")

    tree = BinTree(config=TreeConfig(log_level="DEBUG"))

    assert tree._logger.name == "bstreelib.tree"
    assert tree._logger.isEnabledFor(logging.DEBUG)


def test_explicit_config_ignores_malformed_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BSTREELIB_ARRAY_CAPACITY", "plenty")

    tree = BinTree(config=TreeConfig(array_capacity=8))
    tree.insert(1)

    assert tree.to_array() == [1]
    with pytest.raises(ConfigError):
        BinTree()


def test_get_logger_with_config_skips_runtime(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BSTREELIB_LOG_LEVEL", "NOISY")

    logger = get_logger("tests.explicit", config=TreeConfig(log_level="INFO"))

    assert logger.level == logging.INFO
