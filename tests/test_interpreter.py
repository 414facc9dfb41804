"""
/tests/test_interpreter.py

表结构生成（AST解释器）与完整流水线测试
"""
import sys
import os
import dataclasses

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sql import compile_sql, LexError, EofError, UnexpectedTokenError
from sql.ast_nodes import Body, ColumnDecl, ColumnType, CreateTableStatement
from sql.interpreter import SchemaBuilder, build
from catalog import Field, Table

passed = 0
failed = 0

def assert_test(test_name, condition, message=""):
    global passed, failed
    if condition:
        print(f"✅ PASS: {test_name}")
        passed += 1
    else:
        print(f"❌ FAIL: {test_name} - {message}")
        failed += 1
    assert condition, f"{test_name} {message}"

def print_test_summary():
    total = passed + failed
    print("\n" + "=" * 60)
    print(f"📊 测试结果统计: 通过: {passed}  失败: {failed}")
    if total > 0:
        print(f"📈 通过率: {passed / total * 100:.1f}%")
    if failed == 0:
        print("🎉 所有测试通过！")
    else:
        print("⚠️  部分测试失败，请检查相关功能")

def test_build_from_ast():
    ast = CreateTableStatement("table_name", Body([ColumnDecl("name", ColumnType.INT, True)]))
    table = SchemaBuilder().build(ast)
    expected = Table("table_name", (Field("name", "Int"),))
    assert_test("测试由AST生成表结构", table == expected, table)

def test_type_names():
    names = [t.display_name for t in ColumnType]
    assert_test("测试类型名文本", names == ["Int", "Json", "Varchar", "Date"], names)

def test_users_table():
    table = compile_sql("CREATE TABLE users (id INT NOT NULL, name VARCHAR,);")
    print(table)
    assert_test("测试表名", table.name == "users")
    assert_test("测试列名与类型",
                [(f.name, f.type_name) for f in table.fields] == [("id", "Int"), ("name", "Varchar")])
    assert_test("测试可空性映射", [f.nullable for f in table.fields] == [False, True])

def test_single_json_column():
    table = compile_sql("CREATE TABLE t (x JSON,);")
    assert_test("测试单列JSON表", table == Table("t", [Field("x", "Json")]), table)

def test_field_count_matches_columns():
    columns = [f"c{i} {t}," for i, t in enumerate(["INT", "JSON", "VARCHAR", "DATE"] * 5)]
    table = compile_sql("CREATE TABLE wide (" + " ".join(columns) + ");")
    assert_test("测试列数与声明一致", len(table.fields) == 20)
    assert_test("测试列顺序与声明一致", table.field_names() == [f"c{i}" for i in range(20)])

def test_duplicate_columns_kept():
    table = compile_sql("CREATE TABLE t (a INT, a DATE,);")
    assert_test("测试重复列名不做校验", table.field_names() == ["a", "a"])
    assert_test("测试按名查找取第一个", table.get_field("a").type_name == "Int")
    assert_test("测试查找不存在的列", table.get_field("b") is None)

def test_multiline_statement():
    sql = """
    create table Orders (
        order_id integer not null,
        payload json,
        created DATE NOT NULL,
    );
    """
    table = compile_sql(sql)
    assert_test("测试多行语句", table.name == "Orders" and table.field_names() == ["order_id", "payload", "created"])
    assert_test("测试integer类型名", table.fields[0].type_name == "Int")

def test_pipeline_errors():
    for sql, error_class in (
        ("CREATE TABLE t (x INT,)", EofError),
        ("CREATE TABLE t (x INT);", UnexpectedTokenError),
        ("CREATE TABLE t (x INT,); @", LexError),
    ):
        try:
            compile_sql(sql)
            assert_test(f"测试流水线错误: {sql}", False, "未报错")
        except SyntaxError as e:
            assert_test(f"测试流水线错误: {sql}", isinstance(e, error_class), type(e).__name__)

def test_table_is_immutable():
    table = compile_sql("CREATE TABLE t (x JSON,);")
    try:
        table.name = "other"
        frozen = False
    except dataclasses.FrozenInstanceError:
        frozen = True
    assert_test("测试Table不可修改", frozen)
    assert_test("测试fields为tuple", isinstance(table.fields, tuple))

def test_build_is_idempotent():
    ast = CreateTableStatement("t", Body([ColumnDecl("a", ColumnType.DATE, False)]))
    assert_test("测试重复生成结果相等", build(ast) == build(ast))

def test_to_dict():
    table = compile_sql("CREATE TABLE users (id INT NOT NULL, name VARCHAR,);")
    expected = {
        "name": "users",
        "fields": [
            {"name": "id", "type": "Int", "nullable": False},
            {"name": "name", "type": "Varchar", "nullable": True},
        ],
    }
    assert_test("测试to_dict", table.to_dict() == expected, table.to_dict())

def main():
    test_build_from_ast()
    test_type_names()
    test_users_table()
    test_single_json_column()
    test_field_count_matches_columns()
    test_duplicate_columns_kept()
    test_multiline_statement()
    test_pipeline_errors()
    test_table_is_immutable()
    test_build_is_idempotent()
    test_to_dict()
    print_test_summary()

if __name__ == "__main__":
    main()
