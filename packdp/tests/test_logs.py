import logging
import pytest

import packdp.logs
from packdp.logs import DEBUGGING_FORMAT, DEFAULT_FORMAT, logger, set_loglevel


@pytest.fixture(autouse=True)
def reset_loglevel():
    yield
    set_loglevel(logging.NOTSET)


def test_verbose_level():
    assert logging.VERBOSE == packdp.logs.VERBOSE == logging.INFO - 1
    assert logging.getLevelName(logging.VERBOSE) == "VERBOSE"


@pytest.mark.parametrize("loglevel", ["DEBUG", "VERBOSE"])
def test_debugging_formatter(loglevel):
    set_loglevel(loglevel)
    assert packdp.logs.handler.formatter._fmt == DEBUGGING_FORMAT
    assert logger.level == logging.getLevelName(loglevel)


def test_default_formatter_is_restored():
    set_loglevel("DEBUG")
    set_loglevel("WARNING")
    assert packdp.logs.handler.formatter._fmt == DEFAULT_FORMAT
    assert logger.level == logging.WARNING


def test_verbose_messages(caplog):
    with caplog.at_level(logging.INFO, logger="packdp"):
        logger.verbose("hidden")
    assert "hidden" not in caplog.text

    with caplog.at_level(logging.VERBOSE, logger="packdp"):
        logger.verbose("shown")
    assert [r.levelname for r in caplog.records] == ["VERBOSE"]
    assert "shown" in caplog.text
