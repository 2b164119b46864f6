"""
Web API 接口
基于 Flask 提供 JSON API，直接调用 SimpleDatabase
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from sql import TableNotFoundError
from .config import Settings
from .database import SimpleDatabase
from .formatter import render_rows

# 设置日志
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class DatabaseWebAPI:
    """数据库 Web API"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.app = Flask(__name__)
        self.app.secret_key = self.settings.secret_key

        # 启用 CORS 支持前端跨域访问
        CORS(self.app)

        self.db = SimpleDatabase(self.settings)
        self._setup_routes()

    def _setup_routes(self):
        """设置路由"""

        @self.app.route("/api/health", methods=["GET"])
        def health_check():
            """健康检查"""
            return jsonify({"status": "ok", "message": "Database Web API is running"})

        @self.app.route("/api/sql/execute", methods=["POST"])
        def execute_sql():
            """执行一条SQL语句"""
            data = request.get_json(silent=True)
            if not data or not isinstance(data.get("sql"), str):
                return jsonify({"success": False, "message": "request body must be JSON with a 'sql' string"}), 400

            sql = data["sql"].strip()
            if not sql:
                return jsonify({"success": False, "message": "empty statement"}), 400

            result = self.db.execute_sql(sql)
            if result.get("success") and result.get("type") == "SELECT":
                result["lines"] = render_rows(result["data"])
            if not result.get("success"):
                logger.info(f"SQL执行失败: {result.get('message')}")
                return jsonify(result), 400
            return jsonify(result)

        @self.app.route("/api/tables", methods=["GET"])
        def list_tables():
            """获取表列表"""
            tables = self.db.list_tables()
            return jsonify({"success": True, "data": tables, "message": f"{len(tables)} tables"})

        @self.app.route("/api/tables/<table_name>/data", methods=["GET"])
        def get_table_data(table_name: str):
            """获取表的表头与数据行"""
            try:
                table = self.db.get_table_data(table_name)
            except TableNotFoundError as e:
                return jsonify({"success": False, "message": e.reason}), 404
            return jsonify({"success": True, "data": table})

    def run(self, host: str = "127.0.0.1", port: int = 5000, debug: bool = False):
        """启动Web服务器"""
        logger.info(f"Web API listening on http://{host}:{port}, data dir {self.settings.data_dir}")
        try:
            self.app.run(host=host, port=port, debug=debug)
        finally:
            self.db.close()


def create_web_app(settings: Optional[Settings] = None) -> Flask:
    """创建Flask应用实例"""
    web_api = DatabaseWebAPI(settings)
    return web_api.app
