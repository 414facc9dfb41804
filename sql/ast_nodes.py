"""
抽象语法树节点定义
"""

from abc import ABC
from enum import Enum
from typing import List


class ColumnType(Enum):
    """支持的列类型"""

    INT = "INT"
    JSON = "JSON"
    VARCHAR = "VARCHAR"
    DATE = "DATE"

    @property
    def display_name(self) -> str:
        # Int / Json / Varchar / Date
        return self.value.capitalize()


class ASTNode(ABC):
    """抽象语法树节点基类"""

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__


class Statement(ASTNode):
    """语句基类"""

    pass


class ColumnDecl(ASTNode):
    """列定义"""

    def __init__(self, name: str, column_type: ColumnType, nullable: bool = True):
        self.name = name
        self.column_type = column_type
        self.nullable = nullable

    def __repr__(self):
        null = "" if self.nullable else " NOT NULL"
        return f"{self.name} {self.column_type.value}{null}"


class Body(ASTNode):
    """表体：按声明顺序排列的列定义，至少一列"""

    def __init__(self, columns: List[ColumnDecl]):
        if not columns:
            raise ValueError("表体至少需要一列")
        self.columns = list(columns)

    def __iter__(self):
        return iter(self.columns)

    def __len__(self):
        return len(self.columns)

    def __repr__(self):
        return ", ".join(repr(c) for c in self.columns)


class CreateTableStatement(Statement):
    """CREATE TABLE 语句"""

    def __init__(self, table_name: str, body: Body):
        self.table_name = table_name
        self.body = body

    def __repr__(self):
        return f"CREATE TABLE {self.table_name} ({self.body})"
