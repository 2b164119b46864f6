"""
表级锁管理
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class _TableLock:
    def __init__(self):
        self.lock = threading.RLock()
        self.holders = 0  # 持有或等待该锁的语句数


class TableLockManager:
    """表级互斥锁（进程内共享，冲突时阻塞等待）

    同一时刻每张表只允许一条语句在执行；同一线程可重入。
    最后一个持有者退出后条目即被移除，表名不会在内存中累积。
    """

    def __init__(self):
        self._locks: Dict[str, _TableLock] = {}
        self._guard = threading.Lock()

    @contextmanager
    def locked(self, table_name: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.get(table_name)
            if entry is None:
                entry = _TableLock()
                self._locks[table_name] = entry
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.holders -= 1
                if entry.holders == 0:
                    self._locks.pop(table_name, None)

    def __len__(self):
        with self._guard:
            return len(self._locks)
