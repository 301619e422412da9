import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("riesel_llr")
    old_handlers = logger.handlers[:]
    old_level = logger.level
    old_propagate = logger.propagate
    try:
        yield
    finally:
        for handler in logger.handlers[:]:
            if handler not in old_handlers:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(old_level)
        logger.propagate = old_propagate
