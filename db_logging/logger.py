"""
数据库日志器 - 语句与表文件操作按行追加到 <log_dir>/<db_name>.log
"""

import os
import sys
from datetime import datetime
from enum import Enum


class LogLevel(Enum):
    """日志级别"""

    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    @classmethod
    def parse(cls, name: str) -> "LogLevel":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"未知的日志级别: {name}")


class Component(Enum):
    """日志来源"""

    DATABASE = "DATABASE"
    SQL_EXECUTOR = "SQL_EXECUTOR"
    TABLE_STORE = "TABLE_STORE"


def format_log_line(level: LogLevel, component: Component, message: str) -> str:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return f"[{timestamp}] [{level.name}] [{component.value}] {message}\n"


class DatabaseLogger:
    """csvsql 日志器

    每条记录单独打开一次文件追加写入，不持有文件句柄；
    写日志失败只提示到 stderr，不影响语句执行。
    """

    def __init__(self, db_name: str, log_dir: str = "logs", min_level: LogLevel = LogLevel.INFO):
        self.db_name = db_name
        self.log_file = os.path.join(log_dir, f"{db_name}.log")
        self.min_level = min_level

        os.makedirs(log_dir, exist_ok=True)
        self.log(LogLevel.INFO, Component.DATABASE, f"{db_name} opened")

    def log(self, level: LogLevel, component: Component, message: str):
        if level.value < self.min_level.value:
            return
        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(format_log_line(level, component, message))
        except OSError as e:
            print(f"写入日志失败: {e}", file=sys.stderr)

    def set_log_level(self, level: LogLevel):
        self.min_level = level

    def close(self):
        self.log(LogLevel.INFO, Component.DATABASE, f"{self.db_name} closed")
