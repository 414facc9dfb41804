"""
词法/语法错误定义
"""

from typing import Optional


class DDLSyntaxError(SyntaxError):
    """DDL编译错误基类，error_list 格式为 [错误类型, 位置, 原因]"""

    def __init__(self, reason: str, position: Optional[int] = None):
        error_type = type(self).__name__
        where = f"位置{position}" if position is not None else "未知位置"
        self.reason = reason
        self.position = position
        self.error_list = [error_type, where, reason]
        super().__init__(str(self.error_list))

    def __str__(self):
        return str(self.error_list)


class LexError(DDLSyntaxError):
    """词法错误：当前位置没有任何匹配器能识别

    position 为字符偏移；byte 保存出错的字符本身，code 为该字符 UTF-8 编码的首字节。
    """

    def __init__(self, position: int, byte: str):
        self.byte = byte
        self.code = byte.encode("utf-8")[0]
        super().__init__(f"未识别的字符 '{byte}'", position)


class ParseError(DDLSyntaxError):
    """语法错误基类"""

    pass


class UnexpectedTokenError(ParseError):
    """读到了当前语法位置不允许的token"""

    def __init__(self, token, expected: Optional[str] = None):
        self.token = token
        reason = f"意外的token {token.type.name}({token.value!r})"
        if expected:
            reason = f"期望{expected}, 实际{token.type.name}({token.value!r})"
        super().__init__(reason, token.position)


class EofError(ParseError):
    """token流提前结束"""

    def __init__(self, expected: Optional[str] = None):
        reason = "语句意外结束" if not expected else f"语句意外结束，期望{expected}"
        super().__init__(reason)
