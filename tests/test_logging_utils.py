import logging

from rich.logging import RichHandler

from gitplace.utils import setup_logging


def test_setup_logging_installs_single_rich_handler():
    setup_logging("info")
    setup_logging("debug")

    logger = logging.getLogger("gitplace")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
