"""
Doris Schema - Apache Doris 到 DuckDB 的 Schema 轉換模組

從 Doris FE 取得表格 Schema，依欄位清單篩選，並轉換為 DuckDB 類型。

基本用法:
    from doris_schema import DorisReadConfig, discover_schema

    config = DorisReadConfig(
        fenodes="127.0.0.1:8030",
        table_identifier="demo.orders",
        user="root",
        password="",
        read_field_list="id,amount",   # None 或空字串代表全部欄位
    )
    schema = discover_schema(config)
    print(schema.to_dict())   # {'id': 'INTEGER', 'amount': 'DECIMAL(10,2)'}

BE 欄位描述轉換:
    from doris_schema import convert_scan_columns, convert_to_target_schema

    raw = convert_scan_columns([("c1", "INT"), ("c2", "VARCHAR")])
    schema = convert_to_target_schema(raw)

建立 DuckDB 表格:
    import duckdb
    from doris_schema import create_table_from_schema

    conn = duckdb.connect()
    create_table_from_schema(conn, "orders", schema)

整合專案日誌:
    config = DorisReadConfig(..., logger=get_logger("etl.doris"))
"""

from .config import DorisReadConfig
from .duckdb_types import TargetType, TypeKind
from .models import ColumnDescriptor, RawSchema, TargetField, TargetSchema
from .rest import DorisRestClient, parse_schema
from .schema import (
    parse_read_fields,
    convert_to_target_schema,
    discover_schema_from_fe,
    discover_schema,
)
from .wire import ScanColumnDesc, convert_scan_columns
from .duckdb_bridge import (
    to_create_table_sql,
    create_table_from_schema,
    describe_table,
)
from .utils.type_mapping import get_duckdb_type
from .exceptions import (
    DorisSchemaError,
    DorisMetadataUnavailableError,
    DorisTypeMappingError,
    DorisUnsupportedTypeError,
    DorisUnrecognizedTypeError,
    DorisConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    # 配置
    "DorisReadConfig",

    # 模型
    "ColumnDescriptor",
    "RawSchema",
    "TargetField",
    "TargetSchema",
    "TargetType",
    "TypeKind",

    # Schema 探索與轉換
    "DorisRestClient",
    "parse_schema",
    "parse_read_fields",
    "convert_to_target_schema",
    "discover_schema_from_fe",
    "discover_schema",
    "get_duckdb_type",
    "ScanColumnDesc",
    "convert_scan_columns",

    # DuckDB
    "to_create_table_sql",
    "create_table_from_schema",
    "describe_table",

    # 異常
    "DorisSchemaError",
    "DorisMetadataUnavailableError",
    "DorisTypeMappingError",
    "DorisUnsupportedTypeError",
    "DorisUnrecognizedTypeError",
    "DorisConfigurationError",
]
