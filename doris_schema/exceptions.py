"""
Doris Schema 自定義異常模組

所有異常類都以 Doris 前綴命名，避免與 Python 內建異常衝突。
"""


class DorisSchemaError(Exception):
    """Doris Schema 基礎異常類"""
    pass


class DorisMetadataUnavailableError(DorisSchemaError):
    """
    無法從 Doris FE 取得 Schema 元資料

    Attributes:
        url: 請求的 URL
        original_error: 原始異常
    """

    def __init__(
        self,
        message: str,
        url: str = None,
        original_error: Exception = None
    ):
        self.url = url
        self.original_error = original_error
        full_message = message
        if url:
            full_message += f" (url: {url})"
        if original_error:
            full_message += f"\n原始錯誤: {original_error}"
        super().__init__(full_message)


class DorisTypeMappingError(DorisSchemaError):
    """
    類型轉換錯誤的基礎類

    Attributes:
        type_tag: Doris 類型標籤
        message: 錯誤訊息
    """

    def __init__(self, type_tag: str, message: str = None):
        self.type_tag = type_tag
        self.message = message or f"無法轉換 Doris 類型: {type_tag}"
        super().__init__(self.message)


class DorisUnsupportedTypeError(DorisTypeMappingError):
    """已知但刻意不支援的 Doris 類型 (例如 HLL)"""

    def __init__(self, type_tag: str):
        super().__init__(type_tag, f"Unsupported type {type_tag}")


class DorisUnrecognizedTypeError(DorisTypeMappingError):
    """無法識別的 Doris 類型，通常代表 Doris 版本與映射表不一致"""

    def __init__(self, type_tag: str):
        super().__init__(type_tag, f"Unrecognized Doris type {type_tag}")


class DorisConfigurationError(DorisSchemaError):
    """
    配置錯誤

    Attributes:
        config_key: 配置鍵名
        message: 錯誤訊息
    """

    def __init__(self, config_key: str, message: str = None):
        self.config_key = config_key
        self.message = message or f"配置錯誤: {config_key}"
        super().__init__(self.message)
