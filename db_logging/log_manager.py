"""
日志管理器 - 为执行器与表存储提供统一的日志接口
"""

from .logger import Component, DatabaseLogger, LogLevel


class LogManager:
    """日志管理器"""

    def __init__(self, db_name: str, log_dir: str = "logs", level: LogLevel = LogLevel.INFO):
        self.logger = DatabaseLogger(db_name, log_dir, level)

    def log_sql_execution(
        self, sql: str, success: bool, execution_time: float, result_count: int = 0
    ):
        """记录一条语句的执行结果与耗时（毫秒）"""
        sql_preview = sql[:100] + "..." if len(sql) > 100 else sql
        status = "ok" if success else "failed"
        message = f"sql {status}: {sql_preview} ({execution_time:.3f}ms, {result_count} rows)"
        level = LogLevel.INFO if success else LogLevel.ERROR
        self.logger.log(level, Component.SQL_EXECUTOR, message)

    def log_table_operation(self, operation: str, table_name: str, details: str = ""):
        """记录表文件的创建、追加与删除"""
        message = f"{operation} {table_name}"
        if details:
            message += f" - {details}"
        self.logger.log(LogLevel.INFO, Component.TABLE_STORE, message)

    def log_table_overwrite(self, table_name: str):
        self.logger.log(
            LogLevel.WARNING, Component.TABLE_STORE, f"overwriting existing table {table_name}"
        )

    def set_log_level(self, level: LogLevel):
        self.logger.set_log_level(level)

    def close(self):
        self.logger.close()
