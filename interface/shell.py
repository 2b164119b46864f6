"""
交互式SQL Shell
"""

import sys
from typing import Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from .database import SimpleDatabase
from .formatter import format_query_result, format_table_list


class _SQLCompleter(Completer):
    """关键字与表名补全"""

    keywords = ["CREATE TABLE", "DROP TABLE", "INSERT INTO", "VALUES", "SELECT", "FROM"]

    def __init__(self, database: SimpleDatabase):
        self.db = database

    def get_completions(self, document: Document, complete_event):
        word = document.get_word_before_cursor(WORD=True)
        if not word:
            return
        for kw in self.keywords:
            if kw.startswith(word):
                yield Completion(kw, start_position=-len(word))
        # 表名补全
        for t in self.db.list_tables():
            if t.startswith(word):
                yield Completion(t, start_position=-len(word))


class SQLShell:
    """SQL交互式Shell

    每次读取一行，一行即一条完整语句；输入 quit/exit 或 EOF 结束循环。
    """

    PROMPT = "psql> "

    def __init__(
        self,
        database: SimpleDatabase,
        session=None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.database = database
        self.running = True
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.session = session or PromptSession(completer=_SQLCompleter(database))

    def start(self):
        """启动Shell"""
        print("Type 'help' for help, 'quit' to exit", file=self.out)
        while self.running:
            line = self._get_input()
            if line is None:
                break
            self._process_command(line)

    def _get_input(self) -> Optional[str]:
        """读取一行；EOF 返回 None，Ctrl-C 放弃当前行"""
        try:
            return self.session.prompt(self.PROMPT)
        except EOFError:
            return None
        except KeyboardInterrupt:
            return ""

    def _process_command(self, command: str):
        command = command.strip()
        if not command:
            return

        if command in ("quit", "exit"):
            self.running = False
            return

        if command in ("help", "?"):
            self._show_help()
            return

        if command == "tables":
            format_table_list(self.database.list_tables(), self.out)
            return

        result = self.database.execute_sql(command)
        format_query_result(result, self.out, self.err)

    def _show_help(self):
        print(
            "Statements (one per line, ending with ';'):\n"
            "  CREATE TABLE name (col1, col2);\n"
            "  DROP TABLE name;\n"
            "  INSERT INTO name (col1, col2) VALUES (v1, v2);\n"
            "  SELECT * FROM name;\n"
            "  SELECT col1, col2 FROM name;\n"
            "Commands: tables, help, quit",
            file=self.out,
        )


def interactive_sql_shell(database: SimpleDatabase):
    """启动交互式SQL Shell"""
    shell = SQLShell(database)
    shell.start()
