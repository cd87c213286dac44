import logging

import pytest

from logger import ROOT_LOGGER


@pytest.fixture(autouse=True)
def restore_crawler_logger():
    """Drop file handlers and level changes a test left on the 'crawler' logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    level = logger.level
    yield logger
    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler):
            logger.removeHandler(h)
            h.close()
    logger.setLevel(level)
