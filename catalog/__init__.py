"""
表结构模型模块
"""

from .schema import Field, Table

__all__ = [
    "Field",
    "Table",
]
