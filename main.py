#!/usr/bin/env python3
"""
平面文件SQL数据库主程序
"""

import os
import shutil
import sys
import tempfile

from interface import Settings, SimpleDatabase, format_query_result, interactive_sql_shell


def run_demo():
    """运行演示程序"""
    print("csvsql demo")
    print("=" * 40)
    data_dir = tempfile.mkdtemp(prefix="csvsql-demo-")
    db = SimpleDatabase(Settings(data_dir=data_dir, log_dir=os.path.join(data_dir, "logs")))

    try:
        commands = [
            "CREATE TABLE students (id, name, age);",
            "INSERT INTO students (id, name, age) VALUES (1, Alice, 20);",
            "INSERT INTO students (id, name, age) VALUES (2, Bob, 21);",
            "INSERT INTO students (age, name, id) VALUES (22, Carol, 3);",
            "SELECT * FROM students;",
            "SELECT age, name FROM students;",
            "DROP TABLE students;",
            "SELECT * FROM students;",
        ]
        for cmd in commands:
            print(f"psql> {cmd}")
            format_query_result(db.execute_sql(cmd))
    finally:
        db.close()
        shutil.rmtree(data_dir, ignore_errors=True)


def _open_database(data_dir: str) -> SimpleDatabase:
    settings = Settings(data_dir=data_dir)
    # 数据目录由驱动程序负责创建
    os.makedirs(settings.data_dir, exist_ok=True)
    return SimpleDatabase(settings)


def main():
    """主程序"""
    if len(sys.argv) > 1:
        command = sys.argv[1].lower()

        if command == "demo":
            run_demo()
            return
        elif command == "shell":
            data_dir = sys.argv[2] if len(sys.argv) > 2 else None
            db = _open_database(data_dir)
            print(f"csvsql shell, data directory: {db.settings.data_dir}")
            try:
                interactive_sql_shell(db)
            finally:
                db.close()
            return
        elif command == "web":
            from interface.web_api import DatabaseWebAPI

            data_dir = sys.argv[2] if len(sys.argv) > 2 else None
            port = int(sys.argv[3]) if len(sys.argv) > 3 else 5000
            settings = Settings(data_dir=data_dir)
            os.makedirs(settings.data_dir, exist_ok=True)
            DatabaseWebAPI(settings).run(port=port)
            return

    # 显示使用说明
    print("csvsql")
    print("=" * 40)
    print("Usage:")
    print("  python main.py shell [data_dir]        # interactive shell")
    print("  python main.py web [data_dir] [port]   # JSON web API")
    print("  python main.py demo                    # run a short demo")


if __name__ == "__main__":
    main()
