"""
表文件存储 - 每张表对应数据目录下的一个 <table>.csv 文件

文件第一行是表头（逗号连接的列名，无结尾分隔符），之后每行一条记录。
数据目录由外层驱动程序负责创建，这里不做创建。
"""

import csv
import os
import re
from typing import IO, List, Tuple

from sql.errors import TableNotFoundError

TABLE_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


class TableStore:
    """表文件存储"""

    EXTENSION = ".csv"
    DELIMITER = ","

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def table_path(self, table_name: str) -> str:
        """表名到文件路径；非法表名不可能对应任何表"""
        if not TABLE_NAME_PATTERN.fullmatch(table_name or ""):
            raise TableNotFoundError(f"Table {table_name} does not exist", table_name)
        return os.path.join(self.data_dir, f"{table_name}{self.EXTENSION}")

    def exists(self, table_name: str) -> bool:
        try:
            return os.path.isfile(self.table_path(table_name))
        except TableNotFoundError:
            return False

    def create(self, table_name: str) -> IO[str]:
        """创建（或截断）表文件，返回可写流"""
        return open(self.table_path(table_name), "w", encoding="utf-8", newline="")

    def open_read(self, table_name: str) -> IO[str]:
        try:
            return open(self.table_path(table_name), "r", encoding="utf-8", newline="")
        except FileNotFoundError:
            raise TableNotFoundError(f"Table {table_name} does not exist", table_name)

    def open_append(self, table_name: str) -> IO[str]:
        # 追加模式会自动创建文件，必须先确认表存在
        if not self.exists(table_name):
            raise TableNotFoundError(f"Table {table_name} does not exist", table_name)
        return open(self.table_path(table_name), "a", encoding="utf-8", newline="")

    def delete(self, table_name: str):
        try:
            os.remove(self.table_path(table_name))
        except FileNotFoundError:
            raise TableNotFoundError(f"Table {table_name} does not exist", table_name)

    def list_tables(self) -> List[str]:
        """列出数据目录中的所有表"""
        if not os.path.isdir(self.data_dir):
            return []
        tables = []
        for entry in os.listdir(self.data_dir):
            name, ext = os.path.splitext(entry)
            if ext == self.EXTENSION and TABLE_NAME_PATTERN.fullmatch(name):
                tables.append(name)
        return sorted(tables)

    def read_header(self, table_name: str) -> List[str]:
        """读取表头并按逗号拆分"""
        with self.open_read(table_name) as f:
            first_line = f.readline()
        return first_line.rstrip("\r\n").split(self.DELIMITER)

    def read_table(self, table_name: str) -> Tuple[List[str], List[List[str]]]:
        """读取表头与全部数据行（按追加顺序，空行跳过）"""
        with self.open_read(table_name) as f:
            reader = csv.reader(f, delimiter=self.DELIMITER)
            header = next(reader, [])
            rows = [row for row in reader if row]
        return header, rows
