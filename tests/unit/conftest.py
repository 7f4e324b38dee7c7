"""Shared fixtures for betterset unit tests."""
import logging

import pytest

from betterset import reset
from betterset.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends with default settings and a bare logger."""
    reset()
    yield
    reset()
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
