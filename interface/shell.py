"""
交互式 CREATE TABLE 编译 Shell
"""

from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from .compiler import SchemaCompiler
from .formatter import format_compile_result, format_table

KEYWORDS = [
    "CREATE TABLE", "INT", "INTEGER", "JSON", "VARCHAR", "DATE", "NOT NULL",
]

COMMANDS = ["help", "tables", "describe ", "log level ", "clear", "quit", "exit"]


class _SchemaCompleter(Completer):
    def __init__(self, compiler: SchemaCompiler):
        self.compiler = compiler

    def get_completions(self, document: Document, complete_event):
        word = document.get_word_before_cursor(WORD=True)
        low = word.lower()
        for kw in KEYWORDS:
            if kw.lower().startswith(low):
                yield Completion(kw, start_position=-len(word))
        # 已编译的表名，供 describe 使用
        for t in self.compiler.list_tables():
            if t.lower().startswith(low):
                yield Completion(t, start_position=-len(word))


class _InlineSuggest(AutoSuggest):
    def get_suggestion(self, buffer, document: Document):
        text = document.text_before_cursor
        if not text:
            return None
        for w in COMMANDS + ["CREATE TABLE "]:
            if w.lower().startswith(text.lower()) and w.lower() != text.lower():
                return Suggestion(w[len(text):])
        return None


class SchemaShell:
    """CREATE TABLE 交互式Shell"""

    def __init__(self, compiler: SchemaCompiler):
        self.compiler = compiler
        self.running = True
        self._pt_session: Optional[PromptSession] = None

    def start(self):
        """启动Shell"""
        self._pt_session = PromptSession(
            completer=_SchemaCompleter(self.compiler),
            auto_suggest=_InlineSuggest(),
        )
        print("=" * 60)
        print("🗂️  CREATE TABLE 结构编译 Shell")
        print("=" * 60)
        print("输入 'help' 查看帮助，输入 'quit' 或 'exit' 退出")
        print("多行输入时，空行表示提交")
        print()

        while self.running:
            try:
                user_input = self._get_input()
                if user_input:
                    self._process_command(user_input)
            except (KeyboardInterrupt, EOFError):
                print("\n再见！")
                break

    def _get_input(self) -> Optional[str]:
        """获取用户输入（多行，空行提交）"""
        lines = []
        while True:
            line = self._pt_session.prompt("DDL> " if not lines else "...> ")
            if not line.strip():
                if lines:
                    break
                continue
            lines.append(line)
            # 以分号结尾的单行命令直接提交
            if line.rstrip().endswith(";") and len(lines) == 1:
                break
            if len(lines) == 1 and self._is_shell_command(line):
                break
        return "\n".join(lines)

    @staticmethod
    def _is_shell_command(line: str) -> bool:
        word = line.strip().lower()
        return any(word == c.strip() or word.startswith(c) for c in COMMANDS)

    def _process_command(self, command: str):
        """处理命令"""
        stripped = command.strip()
        lower = stripped.lower()
        if not stripped:
            return

        if lower in ("quit", "exit"):
            print("再见！")
            self.running = False
            return

        if lower in ("help", "?"):
            self._show_help()
            return

        if lower == "clear":
            print("\033[2J\033[H", end="")  # 清屏
            return

        if lower == "tables":
            self._show_tables()
            return

        if lower.startswith("describe ") or lower.startswith("desc "):
            self._describe_table(stripped.split()[1])
            return

        if lower.startswith("log level "):
            result = self.compiler.set_log_level(stripped.split()[2])
            print(("✅ " if result["success"] else "❌ ") + result["message"])
            return

        format_compile_result(self.compiler.compile(command))

    def _show_tables(self):
        tables = self.compiler.list_tables()
        if not tables:
            print("尚未编译任何表")
            return
        print(f"已编译的表 ({len(tables)} 个):")
        for t in tables:
            print(f"  📋 {t}")

    def _describe_table(self, table_name: str):
        table = self.compiler.get_table(table_name)
        if table is None:
            print(f"表 '{table_name}' 不存在")
            return
        format_table(table)

    def _show_help(self):
        print(
            """
可用命令:
  CREATE TABLE ...;      编译一条建表语句（每列后必须有逗号）
  tables                 列出已编译的表
  describe <表名>         查看表结构
  log level <级别>        设置日志级别 (DEBUG/INFO/WARNING/ERROR/CRITICAL)
  clear                  清屏
  quit / exit            退出

示例:
  CREATE TABLE users (id INT NOT NULL, name VARCHAR,);
"""
        )


def interactive_schema_shell(compiler: SchemaCompiler):
    """启动交互式Shell"""
    SchemaShell(compiler).start()
