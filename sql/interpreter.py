"""
AST 解释器：遍历语法树生成表结构
"""

from typing import List

from catalog.schema import Field, Table
from .ast_nodes import Body, ColumnDecl, CreateTableStatement


class SchemaBuilder:
    """将 CreateTableStatement 转换为 Table

    语法已经保证结构合法，这里不做任何校验，也不会失败（重复列名同样保留）。
    """

    def build(self, ast: CreateTableStatement) -> Table:
        fields: List[Field] = []
        self._visit_body(ast.body, fields)
        return Table(ast.table_name, tuple(fields))

    def _visit_body(self, body: Body, fields: List[Field]):
        for column in body:
            fields.append(self._visit_column(column))

    def _visit_column(self, column: ColumnDecl) -> Field:
        return Field(column.name, column.column_type.display_name, column.nullable)


def build(ast: CreateTableStatement) -> Table:
    return SchemaBuilder().build(ast)
