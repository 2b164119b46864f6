"""
抽象语法树节点定义
"""

from abc import ABC
from typing import List, Optional


class ASTNode(ABC):
    """抽象语法树节点基类"""

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self).__name__, repr(self)))


class Statement(ASTNode):
    """语句基类"""

    table_name: str


# 语句节点
class CreateTableStatement(Statement):
    """CREATE TABLE 语句"""

    def __init__(self, table_name: str, columns: List[str]):
        self.table_name = table_name
        self.columns = list(columns)

    def __repr__(self):
        return f"CREATE TABLE {self.table_name} ({', '.join(self.columns)})"


class DropTableStatement(Statement):
    """DROP TABLE 语句"""

    def __init__(self, table_name: str):
        self.table_name = table_name

    def __repr__(self):
        return f"DROP TABLE {self.table_name}"


class InsertStatement(Statement):
    """INSERT 语句"""

    def __init__(self, table_name: str, columns: List[str], values: List[str]):
        self.table_name = table_name
        self.columns = list(columns)
        self.values = list(values)  # 值按位置与列对应，不做类型解释

    def __repr__(self):
        return (
            f"INSERT INTO {self.table_name} ({', '.join(self.columns)}) "
            f"VALUES ({', '.join(self.values)})"
        )


class SelectStatement(Statement):
    """SELECT 语句

    all_columns 与 columns 互斥：通配符时 columns 为 None。
    """

    def __init__(
        self,
        table_name: str,
        columns: Optional[List[str]] = None,
        all_columns: bool = False,
    ):
        self.table_name = table_name
        self.columns = list(columns) if columns is not None else None
        self.all_columns = all_columns

    @property
    def is_wildcard(self) -> bool:
        return self.all_columns

    def __repr__(self):
        selected = "*" if self.all_columns else f"({', '.join(self.columns or [])})"
        return f"SELECT {selected} FROM {self.table_name}"
