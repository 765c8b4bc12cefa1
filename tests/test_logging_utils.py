import logging

from magnets.config import LOG_LEVEL
from magnets.logging_utils import LOGGER_NAME, get_logger, set_log_level


def test_logger_is_shared_and_configured_once():
    logger = get_logger()
    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.level == logging.getLevelName(LOG_LEVEL)

    handlers = list(logger.handlers)
    assert get_logger().handlers == handlers


def test_set_log_level():
    logger = get_logger()
    try:
        set_log_level("WARNING")
        assert logger.level == logging.WARNING
    finally:
        set_log_level(LOG_LEVEL)
