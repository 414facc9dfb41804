"""
编译器日志器
"""

import os
from datetime import datetime
from enum import Enum


class LogLevel(Enum):
    """日志级别"""

    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"无效的日志级别: {name}") from None


class SchemaLogger:
    """按行写入 <log_dir>/<name>.log 的文件日志器"""

    def __init__(self, name: str, log_dir: str = "logs", min_level: LogLevel = LogLevel.INFO):
        self.name = name
        self.log_dir = log_dir
        self.log_file = os.path.join(log_dir, f"{name}.log")
        self.min_level = min_level

        # 确保日志目录存在
        os.makedirs(log_dir, exist_ok=True)

        self._write_log(LogLevel.INFO, f"编译器 {self.name} 启动")

    def _write_log(self, level: LogLevel, message: str, component: str = "SYSTEM"):
        """写入日志"""
        if level.value < self.min_level.value:
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_line = f"[{timestamp}] [{level.name}] [{component}] {message}\n"

        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(log_line)
        except OSError as e:
            print(f"写入日志失败: {e}")

    def debug(self, message: str, component: str = "SYSTEM"):
        self._write_log(LogLevel.DEBUG, message, component)

    def info(self, message: str, component: str = "SYSTEM"):
        self._write_log(LogLevel.INFO, message, component)

    def warning(self, message: str, component: str = "SYSTEM"):
        self._write_log(LogLevel.WARNING, message, component)

    def error(self, message: str, component: str = "SYSTEM"):
        self._write_log(LogLevel.ERROR, message, component)

    def set_log_level(self, level: LogLevel):
        self.min_level = level

    def close(self):
        self._write_log(LogLevel.INFO, f"编译器 {self.name} 关闭")
