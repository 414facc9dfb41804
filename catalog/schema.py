"""
表结构定义
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Field:
    """列：名称、类型名（Int/Json/Varchar/Date）、是否可空"""

    name: str
    type_name: str
    nullable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type_name, "nullable": self.nullable}


@dataclass(frozen=True)
class Table:
    """表结构，fields 保持源文本中的声明顺序"""

    name: str
    fields: Tuple[Field, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # 允许传入list，统一转成tuple保证不可变
        object.__setattr__(self, "fields", tuple(self.fields))

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, field_name: str) -> Optional[Field]:
        """获取列定义，同名列取第一个"""
        for f in self.fields:
            if f.name == field_name:
                return f
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "fields": [f.to_dict() for f in self.fields]}
