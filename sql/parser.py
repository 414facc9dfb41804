"""
CREATE TABLE 语法分析器

文法：
    Statement  = "CREATE TABLE" Identifier "(" Body ")" ";"
    Body       = ColumnDecl { ColumnDecl }
    ColumnDecl = Identifier ColumnType ["NOT NULL"] ","
    ColumnType = "INT" | "JSON" | "VARCHAR" | "DATE"
"""

from typing import List, Optional

from .ast_nodes import Body, ColumnDecl, ColumnType, CreateTableStatement
from .errors import EofError, UnexpectedTokenError
from .lexer import Token, TokenType

COLUMN_TYPES = {
    TokenType.INT: ColumnType.INT,
    TokenType.JSON: ColumnType.JSON,
    TokenType.VARCHAR: ColumnType.VARCHAR,
    TokenType.DATE: ColumnType.DATE,
}


class SQLParser:
    """CREATE TABLE 语法分析器
    预测式递归下降，只向前看一个token，不回溯。
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.position = 0

    def parse(self) -> CreateTableStatement:
        """解析整条语句，分号之后的内容不再检查"""
        self._expect(TokenType.CREATE_TABLE)
        table_name = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.LEFT_PAREN)
        body = self._parse_body()
        self._expect(TokenType.RIGHT_PAREN)
        self._expect(TokenType.SEMICOLON)
        return CreateTableStatement(table_name, body)

    def _parse_body(self) -> Body:
        """一个或多个列定义，下一个token是标识符就继续"""
        columns = [self._parse_column_definition()]
        while self._peek_token_type() == TokenType.IDENTIFIER:
            columns.append(self._parse_column_definition())
        return Body(columns)

    def _parse_column_definition(self) -> ColumnDecl:
        name = self._expect(TokenType.IDENTIFIER).value

        token = self._next("数据类型")
        column_type = COLUMN_TYPES.get(token.type)
        if column_type is None:
            raise UnexpectedTokenError(token, "数据类型")

        nullable = True
        if self._peek_token_type() == TokenType.NOT_NULL:
            self._advance()
            nullable = False

        # 每列之后都必须有逗号，包括最后一列
        self._expect(TokenType.COMMA)
        return ColumnDecl(name, column_type, nullable)

    def _advance(self) -> Token:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _next(self, expected: str) -> Token:
        """消费下一个token，已无token时抛出EofError"""
        if self.position >= len(self.tokens):
            raise EofError(expected)
        return self._advance()

    def _expect(self, expected_type: TokenType) -> Token:
        """期望特定类型的token"""
        token = self._next(expected_type.value)
        if token.type != expected_type:
            raise UnexpectedTokenError(token, expected_type.value)
        return token

    def _peek_token_type(self) -> Optional[TokenType]:
        if self.position < len(self.tokens):
            return self.tokens[self.position].type
        return None


def parse(tokens: List[Token]) -> CreateTableStatement:
    return SQLParser(tokens).parse()
