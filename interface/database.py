"""
数据库主接口
"""

import time
from typing import Any, Dict, List, Optional

from db_logging import LogManager
from sql import ParseError, SQLError, SQLExecutor, parse_query
from storage import TableLockManager, TableStore
from .config import Settings


class SimpleDatabase:
    """平面文件数据库主接口

    一次接收一条完整语句：词法/语法分析 → 执行 → 记录日志 → 返回结果字典。
    语法、模式与存在性错误只中止当前语句；其它I/O错误向外传播。
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

        self.log_manager = LogManager(
            self.settings.db_name, self.settings.log_dir, self.settings.log_level
        )

        self.store = TableStore(self.settings.data_dir)
        self.lock_manager = TableLockManager()
        self.executor = SQLExecutor(self.store, self.lock_manager, self.log_manager)

    def execute_sql(self, sql: str) -> Dict[str, Any]:
        """执行一条SQL语句"""
        sql = sql.strip()
        started = time.perf_counter()

        try:
            _, statement = parse_query(sql)
            result = self.executor.execute(statement)
        except SQLError as e:
            elapsed = (time.perf_counter() - started) * 1000
            self.log_manager.log_sql_execution(sql, False, elapsed, 0)
            return self._error_result(e)

        elapsed = (time.perf_counter() - started) * 1000
        self.log_manager.log_sql_execution(
            sql, True, elapsed, len(result.get("data") or [])
        )
        return result

    def _error_result(self, error: SQLError) -> Dict[str, Any]:
        result = {
            "success": False,
            "type": "ERROR",
            "error_type": error.error_type,
            "error": str(error),
            "message": error.reason,
            "data": [],
        }
        if isinstance(error, ParseError):
            result["code"] = error.code.value
            result["remainder"] = error.remainder
            result["column"] = error.column
            result["message"] = f"{error.reason} at column {error.column}"
        return result

    def list_tables(self) -> List[str]:
        """列出所有表"""
        return self.store.list_tables()

    def get_table_data(self, table_name: str) -> Dict[str, Any]:
        """获取表头与全部数据行"""
        with self.lock_manager.locked(table_name):
            header, rows = self.store.read_table(table_name)
        return {"table": table_name, "columns": header, "rows": rows}

    def close(self):
        self.log_manager.close()
