"""
SQL错误类型定义
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """语法错误期望类别"""

    KEYWORD = "KEYWORD"
    DELIMITER = "DELIMITER"
    IDENTIFIER = "IDENTIFIER"
    WHITESPACE = "WHITESPACE"


class SQLError(Exception):
    """所有SQL错误的基类"""

    error_type = "SQLError"

    def __init__(self, reason: str, position: Optional[str] = None):
        self.reason = reason
        self.error_list = [self.error_type, position or "unknown", reason]
        super().__init__(reason)

    def __str__(self):
        return str(self.error_list)


class ParseError(SQLError, SyntaxError):
    """语法错误：携带未消费的剩余输入与失败的期望类别"""

    error_type = "SyntaxError"

    def __init__(self, code: ErrorCode, expected: str, remainder: str, position: int):
        self.code = code
        self.expected = expected
        self.remainder = remainder
        self.position = position
        self.column = position + 1
        found = remainder[:1] if remainder else "EOF"
        reason = f"expected {code.value.lower()} {expected!r}, found {found!r}"
        super().__init__(reason, f"column {self.column}")


class ExecutionError(SQLError):
    """执行阶段错误"""

    error_type = "ExecutionError"

    def __init__(self, reason: str, table_name: str):
        self.table_name = table_name
        super().__init__(reason, f"table {table_name}")


class InvalidSchemaError(ExecutionError):
    error_type = "InvalidSchema"


class SchemaMismatchError(ExecutionError):
    error_type = "SchemaMismatch"


class TableNotFoundError(ExecutionError):
    error_type = "NotFound"
