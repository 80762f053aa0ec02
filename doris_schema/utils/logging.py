"""
Doris Schema 日誌模組

支援外部日誌器注入 (config.logger)，未注入時使用內建的 stdout 日誌器。
"""

import logging
import sys
from typing import Optional, Protocol, runtime_checkable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@runtime_checkable
class LoggerProtocol(Protocol):
    """注入的日誌器需具備的介面 (logging.Logger、loguru 等皆可)"""

    def debug(self, msg: str, *args, **kwargs) -> None:
        ...

    def info(self, msg: str, *args, **kwargs) -> None:
        ...

    def warning(self, msg: str, *args, **kwargs) -> None:
        ...

    def error(self, msg: str, *args, **kwargs) -> None:
        ...


class NullLogger:
    """
    空日誌器 - 不輸出任何內容

    Example:
        >>> config = DorisReadConfig(logger=NullLogger())
    """

    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    def error(self, msg: str, *args, **kwargs) -> None:
        pass


class ColoredFormatter(logging.Formatter):
    """終端機支援時以 ANSI 顏色標示日誌級別"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str = None):
        super().__init__(fmt)
        self.use_colors = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not self.use_colors or color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def get_logger(
    name: str = "doris_schema",
    level: Optional[str] = None,
    external_logger: Optional[LoggerProtocol] = None,
):
    """
    獲取日誌器

    Args:
        name: 日誌器名稱
        level: 日誌級別 ("DEBUG", "INFO", ...)；每次呼叫都會套用，
               None 時保留目前級別 (新建立的日誌器為 INFO)
        external_logger: 外部注入的日誌器，有值時直接返回

    Returns:
        日誌器實例 (logging.Logger 或外部注入的物件)

    Example:
        >>> logger = get_logger("doris_schema.rest", level="DEBUG")
        >>> logger.info("Hello!")
    """
    if external_logger is not None:
        return external_logger

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColoredFormatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        if level is None:
            logger.setLevel(logging.INFO)

    # handler 不設級別，由 logger 的級別決定輸出
    if level is not None:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    return logger
