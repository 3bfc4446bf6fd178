import logging

import pytest

from country_lookup.setup_logging import setup_logging


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers; levels put back afterwards."""
    root = logging.getLogger()
    names = ("country_lookup", "urllib3", "requests")
    saved = {n: logging.getLogger(n).level for n in names}
    saved_root = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    root.setLevel(saved_root)
    for n, lvl in saved.items():
        logging.getLogger(n).setLevel(lvl)


def test_installs_one_stdout_handler(bare_root):
    h = setup_logging("INFO")
    assert bare_root.handlers == [h]
    assert "%(threadName)s" in h.formatter._fmt

def test_second_call_keeps_existing_handler(bare_root):
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(bare_root.handlers) == 1

def test_level_applies_to_package_only(bare_root):
    setup_logging("DEBUG")
    assert logging.getLogger("country_lookup").level == logging.DEBUG
    assert logging.getLogger("country_lookup.lookup").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("urllib3").level == logging.WARNING
    assert bare_root.level == logging.INFO

def test_unknown_level_falls_back_to_info(bare_root):
    setup_logging("chatty")
    assert logging.getLogger("country_lookup").level == logging.INFO
