import logging

from s3walker.logger import log_console, setup_logger


def test_logger_writes_to_stderr():
    logger = setup_logger()

    assert len(logger.handlers) == 1
    assert logger.handlers[0].console is log_console
    assert log_console.stderr is True


def test_setup_logger_updates_level_without_new_handlers():
    logger = setup_logger(level=logging.DEBUG)
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    finally:
        setup_logger(level=logging.INFO)
