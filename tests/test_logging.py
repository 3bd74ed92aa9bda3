import logging

import structlog

from claimcache.observability import configure_logging


def test_configure_logging_installs_single_handler() -> None:
    try:
        configure_logging("debug", json_output=True)
        configure_logging("debug", json_output=True)

        logger = logging.getLogger("claimcache")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
    finally:
        structlog.reset_defaults()
        logging.getLogger("claimcache").handlers.clear()
        logging.getLogger("claimcache").propagate = True


def test_unknown_level_falls_back_to_info() -> None:
    try:
        configure_logging("chatty")

        assert logging.getLogger("claimcache").level == logging.INFO
    finally:
        structlog.reset_defaults()
        logging.getLogger("claimcache").handlers.clear()
        logging.getLogger("claimcache").propagate = True
