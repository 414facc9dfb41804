"""
Web API 接口
基于 Flask 提供 RESTful API，直接调用 SchemaCompiler
"""

from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from .compiler import SchemaCompiler
from .config import CompilerConfig


def _to_json(result: Dict[str, Any]) -> Dict[str, Any]:
    """将编译结果中的 Table 转为可序列化的字典"""
    data = dict(result)
    if data.get("table") is not None:
        data["table"] = data["table"].to_dict()
    return data


class SchemaWebAPI:
    """编译器 Web API"""

    def __init__(self, config: Optional[CompilerConfig] = None):
        self.app = Flask(__name__)

        # 启用 CORS 支持前端跨域访问
        CORS(self.app)

        self.compiler = SchemaCompiler(config)
        self._setup_routes()

    def _setup_routes(self):
        app = self.app

        @app.route("/api/health", methods=["GET"])
        def health():
            return jsonify({"success": True, "status": "ok"})

        @app.route("/api/compile", methods=["POST"])
        def compile_sql():
            payload = request.get_json(silent=True) or {}
            sql = payload.get("sql")
            if not isinstance(sql, str):
                return jsonify({"success": False, "message": "缺少 sql 参数", "error": "BAD_REQUEST"}), 400
            result = self.compiler.compile(sql)
            return jsonify(_to_json(result)), (200 if result["success"] else 422)

        @app.route("/api/compile/batch", methods=["POST"])
        def compile_batch():
            payload = request.get_json(silent=True) or {}
            statements = payload.get("statements")
            if not isinstance(statements, list) or not all(isinstance(s, str) for s in statements):
                return jsonify({"success": False, "message": "statements 必须是字符串列表", "error": "BAD_REQUEST"}), 400
            results = [_to_json(r) for r in self.compiler.compile_many(statements)]
            return jsonify({
                "success": all(r["success"] for r in results),
                "results": results,
            })

        @app.route("/api/tables", methods=["GET"])
        def list_tables():
            return jsonify({"success": True, "tables": self.compiler.list_tables()})

        @app.route("/api/tables/<name>", methods=["GET"])
        def get_table(name: str):
            table = self.compiler.get_table(name)
            if table is None:
                return jsonify({"success": False, "message": f"表 '{name}' 不存在", "error": "NOT_FOUND"}), 404
            return jsonify({"success": True, "table": table.to_dict()})

    def run(self, host: str = "127.0.0.1", port: int = 5000, debug: bool = False):
        """启动Web服务器"""
        print("🌐 编译器 Web API 启动中...")
        print(f"   地址: http://{host}:{port}")
        print(f"   调试模式: {'开启' if debug else '关闭'}")

        try:
            self.app.run(host=host, port=port, debug=debug)
        finally:
            self.compiler.close()


def create_web_app(config: Optional[CompilerConfig] = None) -> Flask:
    """创建Flask应用实例"""
    return SchemaWebAPI(config).app
