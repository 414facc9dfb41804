"""
日志管理器 - 为编译流程各组件提供统一的日志接口
"""

from .logger import SchemaLogger, LogLevel


class LogManager:
    """日志管理器"""

    def __init__(self, name: str, log_dir: str = "logs", level: LogLevel = LogLevel.INFO):
        self.logger = SchemaLogger(name, log_dir, level)

    def log_compile(
        self, sql: str, success: bool, execution_time: float, field_count: int = 0
    ):
        """记录一次编译"""
        status = "成功" if success else "失败"
        sql_preview = " ".join(sql.split())
        if len(sql_preview) > 100:
            sql_preview = sql_preview[:100] + "..."
        message = f"编译{status}: {sql_preview} (耗时: {execution_time:.3f}ms, 列数: {field_count})"

        if success:
            self.logger.info(message, "COMPILER")
        else:
            self.logger.error(message, "COMPILER")

    def log_file_read(self, path: str, success: bool = True, details: str = ""):
        """记录源文件读取"""
        status = "成功" if success else "失败"
        message = f"读取文件{status}: {path}"
        if details:
            message += f" - {details}"

        if success:
            self.logger.debug(message, "FILE_READER")
        else:
            self.logger.error(message, "FILE_READER")

    def log_warning(self, component: str, message: str):
        """记录警告"""
        self.logger.warning(message, component)

    def log_error(self, component: str, error_message: str, details: str = ""):
        """记录错误"""
        message = f"{error_message}"
        if details:
            message += f" - {details}"
        self.logger.error(message, component)

    def set_log_level(self, level: LogLevel):
        """设置日志级别"""
        self.logger.set_log_level(level)

    def close(self):
        self.logger.close()
