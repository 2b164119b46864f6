"""
用户接口层模块
"""

from .config import Settings
from .database import SimpleDatabase
from .shell import SQLShell, interactive_sql_shell
from .formatter import format_query_result, format_table_list, render_row, render_rows

__all__ = [
    "Settings",
    "SimpleDatabase",
    "SQLShell",
    "interactive_sql_shell",
    "format_query_result",
    "format_table_list",
    "render_row",
    "render_rows",
]
