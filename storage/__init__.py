"""
存储层模块 - 提供表文件存储与表级锁
"""

from .lock_manager import TableLockManager
from .table_store import TableStore

__all__ = ["TableStore", "TableLockManager"]
