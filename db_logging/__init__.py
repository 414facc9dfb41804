"""
编译器日志模块
"""

from .logger import SchemaLogger, LogLevel
from .log_manager import LogManager

__all__ = ["SchemaLogger", "LogLevel", "LogManager"]
