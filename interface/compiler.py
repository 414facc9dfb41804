"""
编译器主接口
"""

import time
from typing import Any, Dict, List, Optional

from catalog import Table
from db_logging import LogLevel, LogManager
from sql import SQLLexer, SQLParser, SchemaBuilder, DDLSyntaxError
from .config import CompilerConfig, load_config


class SchemaCompiler:
    """CREATE TABLE 编译器主接口

    compile() 不会因为词法/语法错误抛出异常，而是返回 success=False 的结果字典。
    """

    def __init__(self, config: Optional[CompilerConfig] = None):
        self.config = config or load_config()
        self.log_manager = LogManager(
            self.config.name, self.config.log_dir, self.config.log_level
        )
        self.builder = SchemaBuilder()
        # 本次会话成功编译过的表，按表名索引，同名后者覆盖前者
        self._tables: Dict[str, Table] = {}

    def compile(self, sql: str) -> Dict[str, Any]:
        """编译一条 CREATE TABLE 语句"""
        start = time.perf_counter()
        try:
            # 词法分析
            tokens = SQLLexer(sql).tokenize()

            # 语法分析
            ast = SQLParser(tokens).parse()

            # 生成表结构
            table = self.builder.build(ast)
        except DDLSyntaxError as e:
            elapsed = (time.perf_counter() - start) * 1000
            self.log_manager.log_compile(sql, False, elapsed)
            self.log_manager.log_error("COMPILER", type(e).__name__, e.reason)
            return {
                "success": False,
                "error": str(e),
                "error_type": type(e).__name__,
                "position": e.position,
                "message": f"编译失败: {e.reason}",
            }

        elapsed = (time.perf_counter() - start) * 1000
        self.log_manager.log_compile(sql, True, elapsed, len(table.fields))
        self._tables[table.name] = table
        return {
            "success": True,
            "type": "CREATE_TABLE",
            "table": table,
            "message": f"表 '{table.name}' 编译成功，共 {len(table.fields)} 列",
        }

    def compile_file(self, path: str) -> Dict[str, Any]:
        """读取文件内容并编译"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                sql = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.log_manager.log_file_read(path, False, str(e))
            return {
                "success": False,
                "error": str(e),
                "error_type": type(e).__name__,
                "position": None,
                "message": f"读取文件失败: {path}",
            }
        self.log_manager.log_file_read(path)
        return self.compile(sql)

    def compile_many(self, sqls: List[str]) -> List[Dict[str, Any]]:
        """批量编译，每条语句独立处理，一条失败不影响其他"""
        return [self.compile(sql) for sql in sqls]

    def list_tables(self) -> List[str]:
        return list(self._tables)

    def get_table(self, name: str) -> Optional[Table]:
        return self._tables.get(name)

    def set_log_level(self, level: str) -> Dict[str, Any]:
        """设置日志级别"""
        try:
            log_level = LogLevel.from_name(level)
        except ValueError as e:
            self.log_manager.log_warning("COMPILER", f"忽略日志级别设置: {e}")
            return {"success": False, "error": str(e), "message": str(e)}
        self.log_manager.set_log_level(log_level)
        return {"success": True, "message": f"日志级别已设置为 {log_level.name}"}

    def close(self):
        self.log_manager.close()
