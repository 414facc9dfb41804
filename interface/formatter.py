"""
编译结果格式化器
"""

from typing import Any, Dict

from catalog import Table


def format_compile_result(result: Dict[str, Any]):
    """格式化并打印编译结果"""
    if not result.get("success", True):
        print(f"❌ 错误: {result.get('error', '未知错误')}")
        return

    print(f"✅ {result.get('message', '编译成功')}")
    table = result.get("table")
    if table is not None:
        format_table(table)


def format_table(table: Table):
    """打印表结构"""
    print(table_to_text(table))


def table_to_text(table: Table) -> str:
    """表结构的文本形式，列名按最长列名对齐"""
    lines = [f"表: {table.name}", "=" * 50, "列定义:"]
    width = max([len(f.name) for f in table.fields] + [len("列名")])
    for f in table.fields:
        constraint = " NOT NULL" if not f.nullable else ""
        lines.append(f"  {f.name:<{width}}  {f.type_name:<8}{constraint}".rstrip())
    lines.append("")
    lines.append(f"共 {len(table.fields)} 列")
    return "\n".join(lines)
