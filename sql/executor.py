"""
SQL执行器
"""

from typing import Any, Dict, List, Optional

from storage.lock_manager import TableLockManager
from .ast_nodes import (
    CreateTableStatement,
    DropTableStatement,
    InsertStatement,
    SelectStatement,
    Statement,
)
from .errors import InvalidSchemaError, SchemaMismatchError, TableNotFoundError


class SQLExecutor:
    """SQL执行器

    每条语句在对应表的表级锁内执行；文件句柄在单次操作内打开并释放。
    """

    def __init__(
        self,
        store,
        lock_manager: Optional[TableLockManager] = None,
        log_manager=None,
    ):
        self.store = store
        self.lock_manager = lock_manager or TableLockManager()
        self.log_manager = log_manager

    def execute(self, stmt: Statement) -> Dict[str, Any]:
        """执行语句，返回结果字典；执行错误以异常形式抛出"""
        if isinstance(stmt, CreateTableStatement):
            handler = self._execute_create_table
        elif isinstance(stmt, DropTableStatement):
            handler = self._execute_drop_table
        elif isinstance(stmt, InsertStatement):
            handler = self._execute_insert
        elif isinstance(stmt, SelectStatement):
            handler = self._execute_select
        else:
            raise TypeError(f"不支持的语句类型: {type(stmt).__name__}")

        with self.lock_manager.locked(stmt.table_name):
            return handler(stmt)

    def _execute_create_table(self, stmt: CreateTableStatement) -> Dict[str, Any]:
        """写入表头；已存在的同名表会被覆盖"""
        if not stmt.columns or "" in stmt.columns:
            raise InvalidSchemaError("Empty or no column name provided", stmt.table_name)

        if self.store.exists(stmt.table_name) and self.log_manager:
            self.log_manager.log_table_overwrite(stmt.table_name)

        with self.store.create(stmt.table_name) as f:
            f.write(self.store.DELIMITER.join(stmt.columns))

        self._log_table("create", stmt.table_name, f"columns: {stmt.columns}")
        return {
            "success": True,
            "type": "CREATE_TABLE",
            "table": stmt.table_name,
            "message": f"Created table {stmt.table_name}",
        }

    def _execute_drop_table(self, stmt: DropTableStatement) -> Dict[str, Any]:
        self.store.delete(stmt.table_name)

        self._log_table("drop", stmt.table_name)
        return {
            "success": True,
            "type": "DROP_TABLE",
            "table": stmt.table_name,
            "message": f"Table {stmt.table_name} is dropped",
        }

    def _execute_insert(self, stmt: InsertStatement) -> Dict[str, Any]:
        """列清单必须与表头完全一致（名称与顺序）

        值的个数不做校验，按给定内容原样追加。
        """
        if not self.store.exists(stmt.table_name):
            raise TableNotFoundError(
                f"Table {stmt.table_name} does not exist", stmt.table_name
            )

        header = self.store.read_header(stmt.table_name)
        if header != stmt.columns:
            raise SchemaMismatchError(
                "Columns do not match table columns. Column names either not in order "
                "or not all columns are listed or are invalid",
                stmt.table_name,
            )

        with self.store.open_append(stmt.table_name) as f:
            f.write("\n" + self.store.DELIMITER.join(stmt.values))

        self._log_table("insert", stmt.table_name, f"values: {stmt.values}")
        return {
            "success": True,
            "type": "INSERT",
            "table": stmt.table_name,
            "rows_affected": 1,
            "message": "",
        }

    def _execute_select(self, stmt: SelectStatement) -> Dict[str, Any]:
        header, rows = self.store.read_table(stmt.table_name)

        if stmt.all_columns:
            columns = list(header)
            data = [list(row) for row in rows]
        else:
            indexes = projection_indexes(header, stmt.columns or [])
            columns = [header[i] for i in indexes]
            data = [[row[i] for i in indexes if i < len(row)] for row in rows]

        return {
            "success": True,
            "type": "SELECT",
            "table": stmt.table_name,
            "columns": columns,
            "data": data,
            "message": "",
        }

    def _log_table(self, operation: str, table_name: str, details: str = ""):
        if self.log_manager:
            self.log_manager.log_table_operation(operation, table_name, details)


def projection_indexes(header: List[str], requested: List[str]) -> List[int]:
    """按表头顺序返回被请求列的位置；重复请求产生重复位置，未知列忽略"""
    indexes = []
    for i, column in enumerate(header):
        for wanted in requested:
            if column == wanted:
                indexes.append(i)
    return indexes
