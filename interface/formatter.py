"""
查询结果格式化器
"""

import sys
from typing import Any, Dict, List, Optional, TextIO


def render_row(fields: List[str]) -> str:
    """每个字段渲染为 " 值 |"，依次拼接"""
    return "".join(f" {value} |" for value in fields)


def render_rows(rows: List[List[str]]) -> List[str]:
    return [render_row(row) for row in rows]


def format_query_result(
    result: Dict[str, Any],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
):
    """格式化并打印执行结果：成功信息写 out，错误写 err"""
    out = out or sys.stdout
    err = err or sys.stderr

    if not result.get("success", True):
        print(f"Error: {result.get('message', 'unknown error')}", file=err)
        return

    if result.get("type") == "SELECT":
        for line in render_rows(result.get("data", [])):
            print(line, file=out)
    elif result.get("message"):
        print(result["message"], file=out)


def format_table_list(tables: List[str], out: Optional[TextIO] = None):
    """格式化表列表"""
    out = out or sys.stdout
    if not tables:
        print("No tables", file=out)
        return
    for name in tables:
        print(name, file=out)
