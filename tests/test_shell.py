"""
/tests/test_shell.py

交互式Shell测试（使用脚本化的输入会话代替终端）
"""
import sys
import os
import io
import tempfile

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from interface import Settings, SimpleDatabase, SQLShell


class ScriptedSession:
    """按顺序返回预设输入，耗尽后抛出EOFError"""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def prompt(self, text):
        self.prompts.append(text)
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


def run_shell(lines):
    with tempfile.TemporaryDirectory() as tmp_dir:
        db = SimpleDatabase(Settings(data_dir=tmp_dir, log_dir=os.path.join(tmp_dir, "logs")))
        session = ScriptedSession(lines)
        out, err = io.StringIO(), io.StringIO()
        shell = SQLShell(db, session=session, out=out, err=err)
        shell.start()
        db.close()
        return shell, session, out.getvalue(), err.getvalue()


def test_shell_executes_statements_until_quit():
    shell, session, out, err = run_shell([
        "CREATE TABLE t (a, b);",
        "INSERT INTO t (a, b) VALUES (1, 2);",
        "  SELECT * FROM t;  ",
        "quit",
        "DROP TABLE t;",
    ])
    assert shell.running is False
    assert "Created table t\n" in out
    assert " 1 | 2 |\n" in out
    assert "is dropped" not in out
    assert err == ""
    assert session.prompts == ["psql> "] * 4
    assert session.lines == ["DROP TABLE t;"]


def test_shell_reports_errors_and_continues():
    _, _, out, err = run_shell([
        "SELEC * FROM t;",
        "INSERT INTO t (a) VALUES (1);",
        "CREATE TABLE t (a);",
        "exit",
    ])
    assert err.count("Error: ") == 2
    assert "Created table t" in out


def test_shell_stops_at_end_of_input():
    shell, session, _, _ = run_shell(["CREATE TABLE t (a);"])
    assert len(session.prompts) == 2
    assert shell.running is True


def test_shell_ignores_blank_lines_and_interrupts():
    _, _, out, err = run_shell(["", KeyboardInterrupt(), "   ", "quit"])
    assert err == ""
    assert out.startswith("Type 'help'")


def test_shell_builtin_commands():
    _, _, out, _ = run_shell([
        "tables",
        "CREATE TABLE people (name);",
        "tables",
        "help",
        "quit",
    ])
    assert "No tables\n" in out
    assert "people\n" in out
    assert "SELECT * FROM name;" in out


def test_shell_exit_commands_are_case_sensitive():
    shell, session, out, err = run_shell(["QUIT", "Quit", "quit", "DROP TABLE t;"])
    assert shell.running is False
    assert err.count("Error: ") == 2
    assert session.lines == ["DROP TABLE t;"]
