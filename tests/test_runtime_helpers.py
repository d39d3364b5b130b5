import logging

import pytest

from hex_cells.runtime.helpers import configure_logging


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_configure_logging_accepts_level_name():
    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_accepts_numeric_level():
    assert configure_logging(logging.WARNING) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_rejects_unknown_level_name():
    with pytest.raises(ValueError):
        configure_logging("chatty")
