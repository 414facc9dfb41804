"""
SQL处理层模块：词法分析 -> 语法分析 -> 表结构生成
"""

from .lexer import SQLLexer, Token, TokenType, tokenize
from .parser import SQLParser, parse
from .interpreter import SchemaBuilder, build
from .ast_nodes import Body, ColumnDecl, ColumnType, CreateTableStatement, Statement
from .errors import DDLSyntaxError, LexError, ParseError, UnexpectedTokenError, EofError


def compile_sql(sql: str):
    """执行完整流水线，返回 catalog.schema.Table；出错时直接抛出对应阶段的异常"""
    return build(parse(tokenize(sql)))


__all__ = [
    "SQLLexer",
    "SQLParser",
    "SchemaBuilder",
    "Token",
    "TokenType",
    "tokenize",
    "parse",
    "build",
    "compile_sql",
    "Statement",
    "CreateTableStatement",
    "Body",
    "ColumnDecl",
    "ColumnType",
    "DDLSyntaxError",
    "LexError",
    "ParseError",
    "UnexpectedTokenError",
    "EofError",
]
