"""
Schema 資料模型

- ColumnDescriptor / RawSchema: Doris 端的原始欄位描述
- TargetField / TargetSchema: 轉換後的 DuckDB 欄位描述

所有模型皆為不可變物件，轉換一律產生新的 Schema。
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

import pandas as pd

from .duckdb_types import TargetType


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Doris 欄位描述

    Attributes:
        name: 欄位名稱
        type_tag: Doris 類型標籤，例如 "INT"、"DECIMALV2"
        precision: DECIMAL 精度
        scale: DECIMAL 小數位數
        comment: 欄位註解
        aggregation_type: 聚合類型 (Aggregate 模型表才有)
    """
    name: str
    type_tag: str
    precision: int = 0
    scale: int = 0
    comment: str = ""
    aggregation_type: str = ""


@dataclass(frozen=True)
class RawSchema:
    """
    Doris 原始 Schema，欄位順序即來源表的欄位順序

    Attributes:
        columns: 欄位描述 (依來源順序)
        status: FE 回應中的狀態碼
    """
    columns: Tuple[ColumnDescriptor, ...] = ()
    status: int = 200

    def __post_init__(self):
        # 接受 list 等可迭代物件，統一轉為 tuple
        object.__setattr__(self, "columns", tuple(self.columns))

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[ColumnDescriptor]:
        return iter(self.columns)

    def __getitem__(self, index: int) -> ColumnDescriptor:
        return self.columns[index]

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.columns]


@dataclass(frozen=True)
class TargetField:
    """
    DuckDB 欄位描述

    Doris 端不保證非空，因此 nullable 預設為 True。
    """
    name: str
    type: TargetType
    nullable: bool = True


@dataclass(frozen=True)
class TargetSchema:
    """
    DuckDB 目標 Schema

    Attributes:
        fields: 欄位 (依 RawSchema 的順序)
    """
    fields: Tuple[TargetField, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[TargetField]:
        return iter(self.fields)

    def __getitem__(self, index: int) -> TargetField:
        return self.fields[index]

    @property
    def names(self) -> List[str]:
        return [f.name for f in self.fields]

    def field(self, name: str) -> Optional[TargetField]:
        """依名稱取得欄位，不存在時返回 None"""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def to_dict(self) -> Dict[str, str]:
        """
        轉換為 {欄位名稱: DuckDB 類型} 字典

        Example:
            >>> schema.to_dict()
            {'id': 'INTEGER', 'amount': 'DECIMAL(10,2)'}
        """
        return {f.name: f.type.sql for f in self.fields}

    def to_df(self) -> pd.DataFrame:
        """
        轉換為摘要 DataFrame

        Returns:
            pd.DataFrame: 欄位 column_name, column_type, nullable
        """
        rows: List[Dict[str, Any]] = [
            {
                "column_name": f.name,
                "column_type": f.type.sql,
                "nullable": f.nullable,
            }
            for f in self.fields
        ]
        return pd.DataFrame(rows, columns=["column_name", "column_type", "nullable"])
