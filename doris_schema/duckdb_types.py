"""
DuckDB 目標類型模組

以封閉的 TypeKind 列舉描述 Doris 欄位轉換後的 DuckDB 類型，
DECIMAL 類型額外攜帶 (precision, scale)。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import duckdb
from duckdb import sqltypes


class TypeKind(Enum):
    """DuckDB 類型種類"""
    NULL = "NULL"
    BOOLEAN = "BOOLEAN"
    TINYINT = "TINYINT"        # int8
    SMALLINT = "SMALLINT"      # int16
    INTEGER = "INTEGER"        # int32
    BIGINT = "BIGINT"          # int64
    FLOAT = "FLOAT"            # float32
    DOUBLE = "DOUBLE"          # float64
    VARCHAR = "VARCHAR"
    BLOB = "BLOB"
    DECIMAL = "DECIMAL"


_PRIMITIVE_DUCKDB_TYPES = {
    TypeKind.NULL: sqltypes.SQLNULL,
    TypeKind.BOOLEAN: sqltypes.BOOLEAN,
    TypeKind.TINYINT: sqltypes.TINYINT,
    TypeKind.SMALLINT: sqltypes.SMALLINT,
    TypeKind.INTEGER: sqltypes.INTEGER,
    TypeKind.BIGINT: sqltypes.BIGINT,
    TypeKind.FLOAT: sqltypes.FLOAT,
    TypeKind.DOUBLE: sqltypes.DOUBLE,
    TypeKind.VARCHAR: sqltypes.VARCHAR,
    TypeKind.BLOB: sqltypes.BLOB,
}


@dataclass(frozen=True)
class TargetType:
    """
    DuckDB 目標類型

    Attributes:
        kind: 類型種類
        precision: 精度 (僅 DECIMAL)
        scale: 小數位數 (僅 DECIMAL)
    """
    kind: TypeKind
    precision: Optional[int] = None
    scale: Optional[int] = None

    def __post_init__(self):
        is_decimal = self.kind is TypeKind.DECIMAL
        has_params = self.precision is not None or self.scale is not None
        if is_decimal and (self.precision is None or self.scale is None):
            raise ValueError("DECIMAL 類型必須指定 precision 與 scale")
        if not is_decimal and has_params:
            raise ValueError(f"{self.kind.value} 類型不接受 precision/scale")

    @property
    def is_decimal(self) -> bool:
        return self.kind is TypeKind.DECIMAL

    @property
    def sql(self) -> str:
        """DuckDB SQL 類型名稱，例如 'INTEGER' 或 'DECIMAL(10,2)'"""
        if self.is_decimal:
            return f"DECIMAL({self.precision},{self.scale})"
        return self.kind.value

    def to_duckdb(self) -> "sqltypes.DuckDBPyType":
        """
        轉換為 duckdb 的類型物件

        Note:
            DuckDB 的 DECIMAL 寬度必須介於 1 到 38，
            (0, 0) 這類未知精度會由 duckdb 拋出例外，交由呼叫端處理。
        """
        if self.is_decimal:
            return duckdb.decimal_type(self.precision, self.scale)
        return _PRIMITIVE_DUCKDB_TYPES[self.kind]

    def __str__(self) -> str:
        return self.sql


NULL = TargetType(TypeKind.NULL)
BOOLEAN = TargetType(TypeKind.BOOLEAN)
TINYINT = TargetType(TypeKind.TINYINT)
SMALLINT = TargetType(TypeKind.SMALLINT)
INTEGER = TargetType(TypeKind.INTEGER)
BIGINT = TargetType(TypeKind.BIGINT)
FLOAT = TargetType(TypeKind.FLOAT)
DOUBLE = TargetType(TypeKind.DOUBLE)
VARCHAR = TargetType(TypeKind.VARCHAR)
BLOB = TargetType(TypeKind.BLOB)


def decimal(precision: int, scale: int) -> TargetType:
    """建立 DECIMAL(precision, scale) 類型"""
    return TargetType(TypeKind.DECIMAL, precision, scale)
