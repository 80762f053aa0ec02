"""
Doris Schema 讀取配置模組

支援多種配置方式:
- DorisReadConfig dataclass 實例
- dict 字典 (可使用 Spark Doris Connector 的 doris.* 鍵名)
- TOML 檔案
- YAML 檔案
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, List, Optional

from .exceptions import DorisConfigurationError
from .utils.logging import LoggerProtocol

# 其他命名方式到欄位名稱的對照
_KEY_ALIASES = {
    "read-field-list": "read_field_list",
    "doris.read.field": "read_field_list",
    "doris.fenodes": "fenodes",
    "doris.table.identifier": "table_identifier",
    "doris.request.auth.user": "user",
    "doris.request.auth.password": "password",
    "doris.request.connect.timeout.ms": "connect_timeout_ms",
    "doris.request.read.timeout.ms": "read_timeout_ms",
    "doris.request.retries": "request_retries",
}

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class DorisReadConfig:
    """
    Doris Schema 讀取配置

    Attributes:
        fenodes: FE 節點列表，逗號分隔的 host:port
        table_identifier: 表格識別符，格式為 "db.table"
        user: HTTP 認證使用者
        password: HTTP 認證密碼
        read_field_list: 逗號分隔的欄位名稱，None 或空字串代表讀取全部欄位
        connect_timeout_ms: 連線逾時毫秒數
        read_timeout_ms: 讀取逾時毫秒數
        request_retries: FE 請求失敗時的重試次數
        scheme: HTTP scheme
        logger: 外部注入的日誌器，為 None 時使用內建日誌
        log_level: 日誌級別
    """

    # 連線設定
    fenodes: str = ""
    table_identifier: str = ""
    user: str = "root"
    password: str = field(default="", repr=False)
    scheme: str = "http"

    # 讀取設定
    read_field_list: Optional[str] = None

    # 請求設定
    connect_timeout_ms: int = 30000
    read_timeout_ms: int = 30000
    request_retries: int = 3

    # 日誌設定 (可插拔)
    logger: Optional[LoggerProtocol] = field(default=None, repr=False)
    log_level: str = "INFO"

    def __post_init__(self):
        """初始化後驗證"""
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            raise DorisConfigurationError(
                "log_level",
                f"無效的 log_level: {self.log_level}，有效值: {sorted(_VALID_LOG_LEVELS)}"
            )
        self.log_level = self.log_level.upper()

        for key in ("connect_timeout_ms", "read_timeout_ms", "request_retries"):
            raw_value = getattr(self, key)
            try:
                value = int(raw_value)
            except (TypeError, ValueError):
                raise DorisConfigurationError(key, f"{key} 必須為整數: {raw_value!r}")
            if value < 0:
                raise DorisConfigurationError(key, f"{key} 不可為負數: {value}")
            setattr(self, key, value)

    @property
    def fe_nodes(self) -> List[str]:
        """FE 節點列表"""
        return [node.strip() for node in self.fenodes.split(",") if node.strip()]

    @property
    def database(self) -> str:
        return self._split_identifier()[0]

    @property
    def table(self) -> str:
        return self._split_identifier()[1]

    def _split_identifier(self) -> tuple:
        parts = self.table_identifier.split(".")
        if len(parts) != 2 or not all(parts):
            raise DorisConfigurationError(
                "table_identifier",
                f"table_identifier 格式必須為 'db.table'，目前為: '{self.table_identifier}'"
            )
        return parts[0], parts[1]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DorisReadConfig":
        """
        從字典建立配置

        鍵名可以是欄位名稱、"read-field-list"，
        或 Spark Doris Connector 的 doris.* 鍵名。

        Example:
            >>> config = DorisReadConfig.from_dict({
            ...     "doris.fenodes": "127.0.0.1:8030",
            ...     "doris.table.identifier": "demo.orders",
            ...     "read-field-list": "id,amount",
            ... })
        """
        valid_fields = {f.name for f in fields(cls)}
        normalized = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in valid_fields:
                normalized[name] = value
        return cls(**normalized)

    @classmethod
    def from_toml(
        cls,
        path: str | Path,
        section: str = "doris"
    ) -> "DorisReadConfig":
        """
        從 TOML 檔案建立配置

        Raises:
            FileNotFoundError: 檔案不存在
            KeyError: 指定的 section 不存在
        """
        import tomllib

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"配置檔案不存在: {path}")

        with open(path, "rb") as f:
            toml_data = tomllib.load(f)

        if section not in toml_data:
            raise KeyError(f"配置檔案中找不到 [{section}] 區段")

        return cls.from_dict(toml_data[section])

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        section: str = "doris"
    ) -> "DorisReadConfig":
        """
        從 YAML 檔案建立配置

        Raises:
            FileNotFoundError: 檔案不存在
            KeyError: 指定的 section 不存在
            ValueError: YAML 檔案為空
        """
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"配置檔案不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)

        if yaml_data is None:
            raise ValueError(f"YAML 檔案為空或格式錯誤: {path}")

        if section not in yaml_data:
            raise KeyError(f"配置檔案中找不到 '{section}' 區段")

        return cls.from_dict(yaml_data[section])

    def to_dict(self) -> dict[str, Any]:
        """
        轉換為字典 (排除 logger 與 password)
        """
        return {
            "fenodes": self.fenodes,
            "table_identifier": self.table_identifier,
            "user": self.user,
            "scheme": self.scheme,
            "read_field_list": self.read_field_list,
            "connect_timeout_ms": self.connect_timeout_ms,
            "read_timeout_ms": self.read_timeout_ms,
            "request_retries": self.request_retries,
            "log_level": self.log_level,
        }

    def copy(self, **overrides) -> "DorisReadConfig":
        """
        建立配置副本，可覆蓋部分設定

        Example:
            >>> new_config = config.copy(read_field_list="id,name")
        """
        data = self.to_dict()
        data["password"] = self.password
        if self.logger is not None:
            data["logger"] = self.logger
        data.update(overrides)
        return DorisReadConfig.from_dict(data)
