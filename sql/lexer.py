"""
CREATE TABLE 词法分析器
"""

import re
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Tuple

from .errors import LexError


class TokenType(Enum):
    # 关键字
    CREATE_TABLE = "CREATE TABLE"
    NOT_NULL = "NOT NULL"

    # 类型
    INT = "INT"
    VARCHAR = "VARCHAR"
    JSON = "JSON"
    DATE = "DATE"

    # 分隔符
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    COMMA = ","
    SEMICOLON = ";"

    # 标识符
    IDENTIFIER = "IDENTIFIER"


class Token(NamedTuple):
    type: TokenType
    value: str
    position: int


class Match(NamedTuple):
    """单个匹配器的结果，end 为匹配文本之后的位置"""

    type: TokenType
    value: str
    end: int


Matcher = Callable[[str, int], Optional[Match]]


# 按优先级排列，先匹配先得；integer 必须整体吃掉，否则会残留 eger
KEYWORD_PATTERNS: Tuple[Tuple["re.Pattern", TokenType], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE | re.ASCII), token_type)
    for pattern, token_type in (
        (r"CREATE TABLE", TokenType.CREATE_TABLE),
        (r"INT(EGER)?", TokenType.INT),
        (r"JSON", TokenType.JSON),
        (r"VARCHAR", TokenType.VARCHAR),
        (r"DATE", TokenType.DATE),
        (r"NOT NULL", TokenType.NOT_NULL),
    )
)

SYMBOLS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}

WHITESPACE = " \t\n"


def match_keyword(sql: str, position: int) -> Optional[Match]:
    """关键字/类型匹配（大小写不敏感，锚定在当前位置的前缀匹配）"""
    for pattern, token_type in KEYWORD_PATTERNS:
        m = pattern.match(sql, position)
        if m:
            return Match(token_type, m.group(0), m.end())
    return None


def match_symbol(sql: str, position: int) -> Optional[Match]:
    """单字符符号匹配"""
    char = sql[position]
    token_type = SYMBOLS.get(char)
    if token_type is None:
        return None
    return Match(token_type, char, position + 1)


def _is_identifier_char(char: str) -> bool:
    # 逗号永远不属于标识符
    return char != "," and char.isascii() and (char.isalnum() or char == "_")


def match_identifier(sql: str, position: int) -> Optional[Match]:
    """读取由字母、数字、下划线组成的最长串"""
    end = position
    while end < len(sql) and _is_identifier_char(sql[end]):
        end += 1
    if end == position:
        return None
    return Match(TokenType.IDENTIFIER, sql[position:end], end)


# 只读，可被多个并发的分析过程共享
MATCHERS: Tuple[Matcher, ...] = (match_keyword, match_symbol, match_identifier)


class SQLLexer:
    """CREATE TABLE 词法分析器

    在当前位置依次尝试 MATCHERS，取第一个成功的结果（不是最长匹配）。
    任何位置都匹配失败时抛出 LexError，不返回已识别的部分token。
    """

    def __init__(self, sql: str):
        self.sql = sql
        self.position = 0

    def tokenize(self) -> List[Token]:
        """将SQL文本分解为Token列表"""
        tokens: List[Token] = []
        while self.position < len(self.sql):
            self._skip_whitespace()

            if self.position >= len(self.sql):
                break

            match = self._dispatch()
            if match is None:
                raise LexError(self.position, self.sql[self.position])

            tokens.append(Token(match.type, match.value, self.position))
            self.position = match.end

        return tokens

    def _skip_whitespace(self):
        """跳过空白字符"""
        while self.position < len(self.sql) and self.sql[self.position] in WHITESPACE:
            self.position += 1

    def _dispatch(self) -> Optional[Match]:
        for matcher in MATCHERS:
            match = matcher(self.sql, self.position)
            if match is not None:
                return match
        return None


def tokenize(sql: str) -> List[Token]:
    return SQLLexer(sql).tokenize()
