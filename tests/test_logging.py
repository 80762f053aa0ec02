"""
日誌模組測試
"""

import logging

from doris_schema.utils import NullLogger, get_logger
from doris_schema.utils.logging import ColoredFormatter


def test_external_logger_returned_as_is():
    external = NullLogger()
    assert get_logger("doris_schema.test_external", level="DEBUG", external_logger=external) is external


def test_level_applied_to_existing_logger():
    name = "doris_schema.test_levels"
    logger = get_logger(name)
    try:
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.propagate is False

        assert get_logger(name, level="DEBUG") is logger
        assert logger.level == logging.DEBUG

        get_logger(name)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def test_colored_formatter_restores_levelname():
    formatter = ColoredFormatter("%(levelname)s %(message)s")
    formatter.use_colors = True
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hi", None, None)

    output = formatter.format(record)

    assert "\033[33mWARNING\033[0m hi" == output
    assert record.levelname == "WARNING"
