"""
数据库日志模块
"""

from .logger import Component, DatabaseLogger, LogLevel
from .log_manager import LogManager

__all__ = ["Component", "DatabaseLogger", "LogLevel", "LogManager"]
