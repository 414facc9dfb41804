#!/usr/bin/env python3
"""
CREATE TABLE 结构编译器主程序
"""

import sys

from interface import CompilerConfig, SchemaCompiler, format_compile_result, load_config


def print_usage():
    print("🗂️  CREATE TABLE 结构编译器")
    print("=" * 40)
    print("用法:")
    print("  python main.py <file>         # 编译文件中的建表语句并打印结果")
    print("  python main.py shell          # 启动交互式Shell")
    print("  python main.py web [port]     # 启动 Web API")
    print()
    print("环境变量:")
    print("  DDLSCHEMA_LOG_DIR             # 日志目录，默认 logs")
    print("  DDLSCHEMA_LOG_LEVEL           # 日志级别，默认 INFO")
    print()
    print("示例:")
    print("  python main.py users.sql")
    print("  python main.py web 8000")


def run_file(path: str, config: CompilerConfig) -> int:
    compiler = SchemaCompiler(config)
    try:
        result = compiler.compile_file(path)
        format_compile_result(result)
        return 0 if result["success"] else 1
    finally:
        compiler.close()


def run_shell(config: CompilerConfig) -> int:
    from interface.shell import interactive_schema_shell

    compiler = SchemaCompiler(config)
    try:
        interactive_schema_shell(compiler)
    finally:
        compiler.close()
    return 0


def run_web(port: int, config: CompilerConfig) -> int:
    from interface.web_api import SchemaWebAPI

    SchemaWebAPI(config).run(port=port)
    return 0


def main(argv=None) -> int:
    """主程序"""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print_usage()
        return 0

    command = argv[0].lower()
    if command in ("-h", "--help", "help"):
        print_usage()
        return 0

    try:
        config = load_config()
    except ValueError as e:
        print(f"配置错误: {e}")
        return 2

    if command == "shell":
        return run_shell(config)
    if command == "web":
        try:
            port = int(argv[1]) if len(argv) > 1 else 5000
        except ValueError:
            print(f"无效的端口: {argv[1]}")
            return 2
        return run_web(port, config)

    return run_file(argv[0], config)


if __name__ == "__main__":
    sys.exit(main())
