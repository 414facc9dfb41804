"""
编译器配置：构造参数 > 环境变量 > 默认值
"""

import os
from typing import NamedTuple, Optional

from db_logging import LogLevel

ENV_LOG_DIR = "DDLSCHEMA_LOG_DIR"
ENV_LOG_LEVEL = "DDLSCHEMA_LOG_LEVEL"


class CompilerConfig(NamedTuple):
    name: str = "ddlschema"
    log_dir: str = "logs"
    log_level: LogLevel = LogLevel.INFO


def load_config(
    name: str = "ddlschema",
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
) -> CompilerConfig:
    """读取配置，未给出的项从环境变量补齐（空值视为未设置）

    日志级别无效时抛出 ValueError。
    """
    log_dir = log_dir or os.environ.get(ENV_LOG_DIR) or "logs"
    level_name = log_level or os.environ.get(ENV_LOG_LEVEL) or "INFO"
    return CompilerConfig(name, log_dir, LogLevel.from_name(level_name))
