"""
BE 掃描欄位描述轉換

將 BE 回傳的欄位描述 (只有名稱與類型) 轉為 RawSchema，
以便沿用 convert_to_target_schema 的類型轉換邏輯。
"""

from enum import Enum
from typing import Any, Iterable, Mapping, NamedTuple, Optional

from .models import ColumnDescriptor, RawSchema


class ScanColumnDesc(NamedTuple):
    """BE 掃描欄位描述"""
    name: str
    type: Any


def _type_tag(type_value: Any, type_names: Optional[Mapping[int, str]]) -> str:
    if isinstance(type_value, Enum):
        return type_value.name
    # thrift 產生的 Python 程式碼以整數常數表示 TPrimitiveType
    if type_names is not None and isinstance(type_value, int):
        return type_names.get(type_value, str(type_value))
    return str(type_value)


def _unpack(desc: Any) -> tuple:
    if isinstance(desc, Mapping):
        return desc["name"], desc["type"]
    if hasattr(desc, "name") and hasattr(desc, "type"):
        return desc.name, desc.type
    name, type_value = desc
    return name, type_value


def convert_scan_columns(
    descs: Iterable[Any],
    type_names: Optional[Mapping[int, str]] = None,
) -> RawSchema:
    """
    將 BE 欄位描述轉換為 RawSchema

    精度與小數位數固定為 0，註解為空字串。

    Args:
        descs: ScanColumnDesc、(name, type) 配對、
               含 name/type 鍵的字典，或具有 name/type 屬性的物件。
               type 可以是類型名稱字串或 enum.Enum 成員
        type_names: 整數類型代碼到名稱的對照，
                    例如 thrift 產生的 TPrimitiveType._VALUES_TO_NAMES；
                    未提供時整數代碼會原樣轉為字串

    Example:
        >>> schema = convert_scan_columns([("c1", "INT"), ("c2", "VARCHAR")])
        >>> schema.names
        ['c1', 'c2']
        >>> convert_scan_columns(
        ...     [("c1", 5)], type_names=TPrimitiveType._VALUES_TO_NAMES
        ... )[0].type_tag
        'INT'
    """
    columns = []
    for desc in descs:
        name, type_value = _unpack(desc)
        columns.append(
            ColumnDescriptor(
                name=name,
                type_tag=_type_tag(type_value, type_names),
                precision=0,
                scale=0,
                comment="",
            )
        )
    return RawSchema(tuple(columns))
