"""
SQL 識別符工具模組
"""


def quote_identifier(name: str) -> str:
    """
    安全地引用 SQL 識別符 (表名、欄位名)

    使用雙引號包裹識別符，並轉義內部的雙引號。

    Example:
        >>> quote_identifier("users")
        '"users"'
        >>> quote_identifier('my"table')
        '"my""table"'
    """
    escaped = name.replace('"', '""')
    return f'"{escaped}"'
