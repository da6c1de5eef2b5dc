import logging

import pytest

from ordered_search.logging_setup import PACKAGE_LOGGER


@pytest.fixture
def restore_package_logging():
    """Undo handler/level changes made by ``setup_logging``."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
