"""
Doris Schema 工具模組

包含日誌、類型映射、SQL 識別符工具等。
"""

from .logging import get_logger, NullLogger, LoggerProtocol
from .type_mapping import (
    get_duckdb_type,
    DORIS_TO_DUCKDB_MAPPING,
    DORIS_DECIMAL_TYPES,
    DORIS_UNSUPPORTED_TYPES,
)
from .query_builder import quote_identifier

__all__ = [
    # 日誌
    "get_logger",
    "NullLogger",
    "LoggerProtocol",
    # 類型映射
    "get_duckdb_type",
    "DORIS_TO_DUCKDB_MAPPING",
    "DORIS_DECIMAL_TYPES",
    "DORIS_UNSUPPORTED_TYPES",
    # SQL 工具
    "quote_identifier",
]
