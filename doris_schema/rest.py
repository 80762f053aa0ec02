"""
Doris FE REST 客戶端

透過 FE 的 HTTP API 取得表格 Schema:

    GET {scheme}://{fe_host:port}/api/{db}/{table}/_schema

FE 回應有兩種格式:
- 舊版: {"properties": [...], "status": 200}
- 新版: {"code": 0, "msg": "success", "data": {"properties": [...], "status": 200}}
"""

import random
from typing import Any, Dict, Optional

import requests
from requests.auth import HTTPBasicAuth

from .config import DorisReadConfig
from .exceptions import DorisConfigurationError, DorisMetadataUnavailableError
from .models import ColumnDescriptor, RawSchema
from .utils.logging import get_logger

SCHEMA_API_TEMPLATE = "{scheme}://{fe_node}/api/{database}/{table}/_schema"


def parse_schema(payload: Dict[str, Any]) -> RawSchema:
    """
    解析 FE 回應的 Schema JSON

    Args:
        payload: 已解碼的 JSON 物件

    Returns:
        RawSchema: 原始 Schema

    Raises:
        DorisMetadataUnavailableError: 回應狀態異常或格式錯誤
    """
    if not isinstance(payload, dict):
        raise DorisMetadataUnavailableError(
            f"Doris FE 回應格式錯誤，預期為 JSON 物件: {type(payload).__name__}"
        )

    # 新版 FE 將 Schema 包在 data 內
    if "data" in payload and "properties" not in payload:
        code = payload.get("code", 0)
        if code != 0:
            raise DorisMetadataUnavailableError(
                f"Doris FE's response is not OK, code is {code}, msg: {payload.get('msg')}"
            )
        payload = payload["data"]
        if not isinstance(payload, dict):
            raise DorisMetadataUnavailableError("Doris FE 回應的 data 欄位格式錯誤")

    status = payload.get("status", 200)
    if status != 200:
        raise DorisMetadataUnavailableError(
            f"Doris FE's response is not OK, status is {status}"
        )

    properties = payload.get("properties")
    if not isinstance(properties, list):
        raise DorisMetadataUnavailableError("Doris FE 回應中缺少 properties 欄位")

    try:
        columns = [
            ColumnDescriptor(
                name=prop["name"],
                type_tag=prop["type"],
                precision=int(prop.get("precision") or 0),
                scale=int(prop.get("scale") or 0),
                comment=prop.get("comment") or "",
                aggregation_type=prop.get("aggregation_type") or "",
            )
            for prop in properties
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise DorisMetadataUnavailableError(
            "Doris FE 回應的欄位描述格式錯誤", original_error=e
        )

    return RawSchema(columns, status=status)


class DorisRestClient:
    """
    Doris FE REST 客戶端

    依隨機順序嘗試 FE 節點，最多嘗試 request_retries + 1 次。

    Example:
        >>> config = DorisReadConfig(
        ...     fenodes="fe1:8030,fe2:8030",
        ...     table_identifier="demo.orders",
        ... )
        >>> schema = DorisRestClient(config).get_schema()
    """

    def __init__(
        self,
        config: DorisReadConfig,
        session: Optional[requests.Session] = None
    ):
        self.config = config
        self.session = session or requests.Session()
        self.logger = get_logger(
            name="doris_schema.rest",
            level=config.log_level,
            external_logger=config.logger,
        )

    def schema_url(self, fe_node: str) -> str:
        """組出 Schema API 的 URL"""
        return SCHEMA_API_TEMPLATE.format(
            scheme=self.config.scheme,
            fe_node=fe_node,
            database=self.config.database,
            table=self.config.table,
        )

    def _timeout(self) -> tuple:
        return (
            self.config.connect_timeout_ms / 1000,
            self.config.read_timeout_ms / 1000,
        )

    def _request_schema(self, url: str) -> RawSchema:
        try:
            response = self.session.get(
                url,
                auth=HTTPBasicAuth(self.config.user, self.config.password),
                timeout=self._timeout(),
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise DorisMetadataUnavailableError(
                "請求 Doris FE 失敗", url=url, original_error=e
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DorisMetadataUnavailableError(
                "Doris FE 回應不是合法的 JSON", url=url, original_error=e
            )

        return parse_schema(payload)

    def get_schema(self) -> RawSchema:
        """
        從 FE 取得表格 Schema

        Returns:
            RawSchema: 原始 Schema

        Raises:
            DorisConfigurationError: 未設定 fenodes 或 table_identifier
            DorisMetadataUnavailableError: 所有嘗試皆失敗
        """
        fe_nodes = self.config.fe_nodes
        if not fe_nodes:
            raise DorisConfigurationError("fenodes", "未設定 Doris FE 節點 (fenodes)")

        candidates = random.sample(fe_nodes, len(fe_nodes))
        attempts = self.config.request_retries + 1
        last_error: Optional[DorisMetadataUnavailableError] = None

        for attempt in range(attempts):
            url = self.schema_url(candidates[attempt % len(candidates)])
            self.logger.debug(f"取得 Schema ({attempt + 1}/{attempts}): {url}")
            try:
                schema = self._request_schema(url)
            except DorisMetadataUnavailableError as e:
                self.logger.warning(f"取得 Schema 失敗 ({attempt + 1}/{attempts}): {e}")
                last_error = e
                continue
            self.logger.info(
                f"成功取得 '{self.config.table_identifier}' 的 Schema，共 {len(schema)} 個欄位"
            )
            return schema

        self.logger.error(f"無法從任何 FE 節點取得 '{self.config.table_identifier}' 的 Schema")
        raise last_error

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
