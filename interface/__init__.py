"""
用户接口层模块
"""

from .config import CompilerConfig, load_config
from .compiler import SchemaCompiler
from .formatter import format_compile_result, format_table, table_to_text

__all__ = [
    "CompilerConfig",
    "load_config",
    "SchemaCompiler",
    "format_compile_result",
    "format_table",
    "table_to_text",
]
