"""
运行配置 - 显式参数优先，其次读取环境变量
"""

import os
from typing import Optional

from db_logging import LogLevel

DEFAULT_DATA_DIR = "data"
DEFAULT_LOG_DIR = "logs"
DEFAULT_DB_NAME = "csvsql"


class Settings:
    """数据库运行配置"""

    def __init__(
        self,
        data_dir: Optional[str] = None,
        log_dir: Optional[str] = None,
        log_level: Optional[str] = None,
        db_name: str = DEFAULT_DB_NAME,
        secret_key: Optional[str] = None,
    ):
        self.data_dir = data_dir or os.environ.get("CSVSQL_DATA_DIR", DEFAULT_DATA_DIR)
        self.log_dir = log_dir or os.environ.get("CSVSQL_LOG_DIR", DEFAULT_LOG_DIR)
        self.log_level = LogLevel.parse(
            log_level or os.environ.get("CSVSQL_LOG_LEVEL", "INFO")
        )
        self.db_name = db_name
        self.secret_key = secret_key or os.environ.get(
            "CSVSQL_SECRET_KEY", "csvsql-web-secret-key"
        )

    def __repr__(self):
        return (
            f"Settings(data_dir={self.data_dir!r}, log_dir={self.log_dir!r}, "
            f"log_level={self.log_level.name})"
        )
