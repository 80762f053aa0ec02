"""
Schema 探索與轉換

流程:
    1. discover_schema_from_fe: 從 Doris FE 取得 RawSchema
    2. convert_to_target_schema: 依 read_field_list 篩選欄位並轉換為 DuckDB 類型

read_field_list 為 None 或空字串時代表讀取全部欄位 (萬用字元，而非空集合)。
"""

from typing import FrozenSet, Optional

from .config import DorisReadConfig
from .models import RawSchema, TargetField, TargetSchema
from .rest import DorisRestClient
from .utils.logging import get_logger
from .utils.type_mapping import get_duckdb_type


def parse_read_fields(read_fields: Optional[str]) -> Optional[FrozenSet[str]]:
    """
    解析逗號分隔的欄位清單

    Returns:
        欄位名稱集合；None 代表選取全部欄位

    Example:
        >>> parse_read_fields("id,amount")
        frozenset({'id', 'amount'})
        >>> parse_read_fields("") is None
        True
    """
    if not read_fields:
        return None
    return frozenset(read_fields.split(","))


def convert_to_target_schema(
    raw_schema: RawSchema,
    read_fields: Optional[str] = None,
    log=None,
) -> TargetSchema:
    """
    將 Doris Schema 轉換為 DuckDB Schema

    欄位順序以 raw_schema 為準，不在 raw_schema 中的欄位名稱會被忽略。
    任一欄位類型無法轉換時立即拋出例外，不返回部分結果。

    Args:
        raw_schema: Doris 原始 Schema
        read_fields: 逗號分隔的欄位名稱，None 或空字串代表全部
        log: 日誌器，預設使用 doris_schema.schema

    Returns:
        TargetSchema: 所有欄位皆為 nullable

    Raises:
        DorisUnsupportedTypeError: 遇到不支援的類型
        DorisUnrecognizedTypeError: 遇到無法識別的類型
    """
    log = log or get_logger("doris_schema.schema")
    selected = parse_read_fields(read_fields)

    target_fields = []
    for column in raw_schema:
        if selected is not None and column.name not in selected:
            continue
        target_type = get_duckdb_type(column.type_tag, column.precision, column.scale)
        log.debug(f"欄位 '{column.name}': {column.type_tag} -> {target_type.sql}")
        target_fields.append(TargetField(column.name, target_type, nullable=True))

    return TargetSchema(tuple(target_fields))


def discover_schema_from_fe(
    config: DorisReadConfig,
    client: Optional[DorisRestClient] = None,
) -> RawSchema:
    """
    從 Doris FE 取得原始 Schema

    未傳入 client 時自行建立，並在返回前關閉其 Session。

    Raises:
        DorisMetadataUnavailableError: FE 請求失敗或回應格式錯誤
    """
    if client is not None:
        return client.get_schema()

    with DorisRestClient(config) as own_client:
        return own_client.get_schema()


def discover_schema(
    config: DorisReadConfig,
    client: Optional[DorisRestClient] = None,
) -> TargetSchema:
    """
    探索 Doris 表格 Schema 並轉換為 DuckDB Schema

    Example:
        >>> config = DorisReadConfig(
        ...     fenodes="127.0.0.1:8030",
        ...     table_identifier="demo.orders",
        ...     read_field_list="id,amount",
        ... )
        >>> schema = discover_schema(config)
        >>> schema.to_dict()
        {'id': 'INTEGER', 'amount': 'DECIMAL(10,2)'}
    """
    log = get_logger(
        name="doris_schema.schema",
        level=config.log_level,
        external_logger=config.logger,
    )
    raw_schema = discover_schema_from_fe(config, client)
    try:
        target = convert_to_target_schema(raw_schema, config.read_field_list, log=log)
    except Exception as e:
        log.error(f"轉換 '{config.table_identifier}' 的 Schema 失敗: {e}")
        raise

    log.info(
        f"'{config.table_identifier}' Schema 轉換完成: "
        f"{len(target)}/{len(raw_schema)} 個欄位"
    )
    return target
