"""
共用測試 fixtures
"""

from unittest.mock import MagicMock

import pytest
import requests

from doris_schema import ColumnDescriptor, DorisReadConfig, RawSchema
from doris_schema.utils import NullLogger


@pytest.fixture
def raw_schema():
    """三個欄位的 Doris Schema: a INT, b VARCHAR, c DECIMALV2(27,9)"""
    return RawSchema((
        ColumnDescriptor("a", "INT"),
        ColumnDescriptor("b", "VARCHAR"),
        ColumnDescriptor("c", "DECIMALV2", precision=27, scale=9),
    ))


@pytest.fixture
def config():
    return DorisReadConfig(
        fenodes="fe1:8030",
        table_identifier="demo.orders",
        user="reader",
        password="secret",
        request_retries=0,
        logger=NullLogger(),
    )


@pytest.fixture
def schema_payload():
    """新版 FE 回應格式"""
    return {
        "code": 0,
        "msg": "success",
        "data": {
            "status": 200,
            "keysType": "DUP_KEYS",
            "properties": [
                {"name": "id", "type": "BIGINT", "comment": "主鍵", "aggregation_type": ""},
                {"name": "amount", "type": "DECIMAL64", "comment": "", "precision": 18, "scale": 2},
                {"name": "created_at", "type": "DATETIMEV2", "comment": ""},
            ],
        },
    }


def _make_response(payload=None, status_code=200, json_error=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def make_response():
    """建立假的 requests.Response"""
    return _make_response


@pytest.fixture
def fake_session():
    return MagicMock(spec=requests.Session)
