"""
DuckDB 整合測試
"""

import duckdb
import pytest

from doris_schema import (
    ColumnDescriptor,
    DorisSchemaError,
    RawSchema,
    TargetSchema,
    convert_to_target_schema,
    create_table_from_schema,
    describe_table,
    to_create_table_sql,
)


@pytest.fixture
def conn():
    connection = duckdb.connect()
    yield connection
    connection.close()


@pytest.fixture
def target_schema():
    raw = RawSchema((
        ColumnDescriptor("id", "BIGINT"),
        ColumnDescriptor("flag", "BOOLEAN"),
        ColumnDescriptor("small", "TINYINT"),
        ColumnDescriptor("ratio", "FLOAT"),
        ColumnDescriptor("amount", "DECIMAL128I", precision=38, scale=6),
        ColumnDescriptor("created_at", "DATETIMEV2"),
        ColumnDescriptor("payload", "BINARY"),
        ColumnDescriptor('odd "name"', "STRING"),
    ))
    return convert_to_target_schema(raw)


def test_create_table_sql(target_schema):
    sql = to_create_table_sql("orders", target_schema)
    assert sql.startswith('CREATE TABLE "orders" ("id" BIGINT, "flag" BOOLEAN')
    assert '"amount" DECIMAL(38,6)' in sql
    assert '"odd ""name""" VARCHAR' in sql


def test_create_table_sql_rejects_empty_schema():
    with pytest.raises(DorisSchemaError):
        to_create_table_sql("orders", TargetSchema())


def test_create_and_describe(conn, target_schema):
    assert create_table_from_schema(conn, "orders", target_schema) is True

    info = describe_table(conn, "orders")

    assert info["column_name"].tolist() == target_schema.names
    assert info["column_type"].tolist() == [
        "BIGINT", "BOOLEAN", "TINYINT", "FLOAT",
        "DECIMAL(38,6)", "VARCHAR", "BLOB", "VARCHAR",
    ]


def test_if_exists_modes(conn, target_schema):
    create_table_from_schema(conn, "orders", target_schema)

    with pytest.raises(DorisSchemaError):
        create_table_from_schema(conn, "orders", target_schema)

    assert create_table_from_schema(conn, "orders", target_schema, if_exists="ignore") is False

    narrow = TargetSchema(target_schema.fields[:2])
    assert create_table_from_schema(conn, "orders", narrow, if_exists="replace") is True
    assert describe_table(conn, "orders")["column_name"].tolist() == ["id", "flag"]


def test_invalid_if_exists(conn, target_schema):
    with pytest.raises(ValueError):
        create_table_from_schema(conn, "orders", target_schema, if_exists="append")


def test_null_type_column_is_rejected(conn, target_schema):
    raw = RawSchema((
        ColumnDescriptor("id", "INT"),
        ColumnDescriptor("nothing", "NULL_TYPE"),
    ))
    with_null = convert_to_target_schema(raw)

    with pytest.raises(DorisSchemaError, match="nothing"):
        to_create_table_sql("t", with_null)

    create_table_from_schema(conn, "t", target_schema)
    with pytest.raises(DorisSchemaError):
        create_table_from_schema(conn, "t", with_null, if_exists="replace")
    assert describe_table(conn, "t")["column_name"].tolist() == target_schema.names
