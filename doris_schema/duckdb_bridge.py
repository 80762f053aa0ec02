"""
DuckDB 整合

將 TargetSchema 套用到 DuckDB 連線上:
- to_create_table_sql: 產生 CREATE TABLE 語句
- create_table_from_schema: 建立空表格
- describe_table: 讀回表格結構
"""

import duckdb
import pandas as pd

from .duckdb_types import TypeKind
from .exceptions import DorisSchemaError
from .models import TargetSchema
from .utils.logging import get_logger
from .utils.query_builder import quote_identifier

logger = get_logger("doris_schema.duckdb")

_IF_EXISTS_OPTIONS = {"fail", "replace", "ignore"}


def to_create_table_sql(table_name: str, schema: TargetSchema) -> str:
    """
    產生 CREATE TABLE 語句

    NULL_TYPE 欄位沒有可建表的 DuckDB 類型，遇到時拋出 DorisSchemaError。

    Example:
        >>> to_create_table_sql("orders", schema)
        'CREATE TABLE "orders" ("id" INTEGER, "amount" DECIMAL(10,2))'
    """
    if len(schema) == 0:
        raise DorisSchemaError(f"無法為 '{table_name}' 建立沒有欄位的表格")

    null_columns = [f.name for f in schema if f.type.kind is TypeKind.NULL]
    if null_columns:
        raise DorisSchemaError(
            f"DuckDB 表格欄位不能是 NULL 類型: {null_columns}"
        )

    columns_sql = ", ".join(
        f"{quote_identifier(f.name)} {f.type.sql}" for f in schema
    )
    return f"CREATE TABLE {quote_identifier(table_name)} ({columns_sql})"


def _table_exists(conn: duckdb.DuckDBPyConnection, table_name: str) -> bool:
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = ?",
        [table_name],
    ).fetchone()
    return result[0] > 0


def create_table_from_schema(
    conn: duckdb.DuckDBPyConnection,
    table_name: str,
    schema: TargetSchema,
    if_exists: str = "fail",
) -> bool:
    """
    依 TargetSchema 在 DuckDB 建立空表格

    Args:
        conn: DuckDB 連線
        table_name: 表格名稱
        schema: 目標 Schema
        if_exists: 'fail' (報錯), 'replace' (替換), 'ignore' (保留現有表格)

    Returns:
        bool: 是否建立了新表格

    Raises:
        DorisSchemaError: 表格已存在且 if_exists='fail'，或 Schema 含 NULL 類型欄位
        ValueError: if_exists 參數無效
    """
    if if_exists not in _IF_EXISTS_OPTIONS:
        raise ValueError(
            f"無效的 if_exists: {if_exists}，有效值: {sorted(_IF_EXISTS_OPTIONS)}"
        )

    # 在刪除現有表格之前驗證 Schema
    sql = to_create_table_sql(table_name, schema)

    if _table_exists(conn, table_name):
        if if_exists == "fail":
            raise DorisSchemaError(f"表格 '{table_name}' 已存在")
        if if_exists == "ignore":
            logger.info(f"表格 '{table_name}' 已存在，略過建立")
            return False
        logger.warning(f"替換現有表格 '{table_name}'")
        conn.execute(f"DROP TABLE {quote_identifier(table_name)}")

    logger.debug(f"建立表格: {sql}")
    conn.execute(sql)
    logger.info(f"成功建立表格 '{table_name}'，共 {len(schema)} 個欄位")
    return True


def describe_table(conn: duckdb.DuckDBPyConnection, table_name: str) -> pd.DataFrame:
    """
    讀回 DuckDB 表格結構

    Returns:
        pd.DataFrame: 欄位 column_name, column_type
    """
    info = conn.execute(f"DESCRIBE {quote_identifier(table_name)}").df()
    return info[["column_name", "column_type"]]
