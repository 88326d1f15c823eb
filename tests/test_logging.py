import logging

from americanformat.utils import ROOT_LOGGER_NAME, enable_console_logging, setup_logger


def test_setup_logger_nests_under_package():
    assert setup_logger("americanformat.pairing").name == "americanformat.pairing"
    assert setup_logger("scratch").name == "americanformat.scratch"


def test_console_logging_attaches_one_handler():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = root.level
    try:
        first = enable_console_logging()
        second = enable_console_logging(logging.DEBUG)

        assert first is second
        assert root.handlers.count(first) == 1
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(first)
        root.setLevel(level)
