"""
Doris 到 DuckDB 的類型映射模組

日期、LARGEINT、JSONB、ARRAY 等類型在 DuckDB 端一律放寬為 VARCHAR，
由資料產生端提供已字串化的值。
"""

from typing import Dict

from .. import duckdb_types as dt
from ..duckdb_types import TargetType
from ..exceptions import DorisUnsupportedTypeError, DorisUnrecognizedTypeError

# Doris 類型標籤到 DuckDB 類型的映射表 (不含 DECIMAL 系列)
DORIS_TO_DUCKDB_MAPPING: Dict[str, TargetType] = {
    "NULL_TYPE": dt.NULL,
    "BOOLEAN": dt.BOOLEAN,

    # 整數類型
    "TINYINT": dt.TINYINT,
    "SMALLINT": dt.SMALLINT,
    "INT": dt.INTEGER,
    "BIGINT": dt.BIGINT,

    # 浮點數類型
    "FLOAT": dt.FLOAT,
    "DOUBLE": dt.DOUBLE,
    "TIME": dt.DOUBLE,

    # 日期時間類型
    "DATE": dt.VARCHAR,
    "DATEV2": dt.VARCHAR,
    "DATETIME": dt.VARCHAR,
    "DATETIMEV2": dt.VARCHAR,

    # 二進位類型
    "BINARY": dt.BLOB,

    # 字串類型
    "CHAR": dt.VARCHAR,
    "LARGEINT": dt.VARCHAR,
    "VARCHAR": dt.VARCHAR,
    "JSONB": dt.VARCHAR,
    "STRING": dt.VARCHAR,
    "ARRAY": dt.VARCHAR,
}

# 保留 precision/scale 的 DECIMAL 系列
DORIS_DECIMAL_TYPES = frozenset({
    "DECIMAL",
    "DECIMALV2",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128I",
})

# 已知但不支援的類型
DORIS_UNSUPPORTED_TYPES = frozenset({"HLL"})


def get_duckdb_type(doris_type: str, precision: int, scale: int) -> TargetType:
    """
    將 Doris 類型轉換為 DuckDB 類型

    Args:
        doris_type: Doris 類型標籤 (大小寫敏感)
        precision: DECIMAL 精度
        scale: DECIMAL 小數位數

    Returns:
        TargetType: 對應的 DuckDB 類型

    Raises:
        DorisUnsupportedTypeError: 類型已知但不支援 (HLL)
        DorisUnrecognizedTypeError: 無法識別的類型

    Example:
        >>> get_duckdb_type("INT", 0, 0).sql
        'INTEGER'
        >>> get_duckdb_type("DECIMALV2", 27, 9).sql
        'DECIMAL(27,9)'
    """
    if doris_type in DORIS_TO_DUCKDB_MAPPING:
        return DORIS_TO_DUCKDB_MAPPING[doris_type]

    if doris_type in DORIS_DECIMAL_TYPES:
        return dt.decimal(precision, scale)

    if doris_type in DORIS_UNSUPPORTED_TYPES:
        raise DorisUnsupportedTypeError(doris_type)

    raise DorisUnrecognizedTypeError(doris_type)
