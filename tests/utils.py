"""Test utilities for the shprint test suite.

Builders for shell ASTs carrying realistic source positions. The renderer
lays output out from positions, so every node a test renders needs them.
Offsets are derived from line and column (``line * 1000 + col``), which keeps
them ordered as long as lines stay under 1000 characters.
"""

from shprint.ast import (
    BinaryCmd,
    CallExpr,
    Comment,
    File,
    Lit,
    ParamExp,
    Pos,
    Stmt,
    StmtList,
    Word,
)
from shprint.options import ShellRendererOptions
from shprint.renderers.shell import ShellRenderer


def pos(line: int, col: int = 1) -> Pos:
    """Return a valid position at ``line``/``col``."""
    return Pos(offset=line * 1000 + col, line=line, col=col)


def lit(value: str, line: int = 1, col: int = 1) -> Lit:
    return Lit(value=value, value_pos=pos(line, col))


def word(value: str, line: int = 1, col: int = 1) -> Word:
    return Word(parts=[lit(value, line, col)])


def words(text: str, line: int = 1, col: int = 1) -> list[Word]:
    """Split ``text`` on spaces, placing each word at its column."""
    result = []
    for token in text.split(" "):
        if token:
            result.append(word(token, line, col))
        col += len(token) + 1
    return result


def param(name: str, line: int = 1, col: int = 1, **kwargs) -> ParamExp:
    """Build ``${name}``; pass ``short=True`` for ``$name``."""
    if kwargs.get("short"):
        return ParamExp(param=lit(name, line, col + 1), dollar=pos(line, col), **kwargs)
    return ParamExp(param=lit(name, line, col + 2), dollar=pos(line, col), rbrace=pos(line, col + 2 + len(name)), **kwargs)


def call(text: str, line: int = 1, col: int = 1) -> CallExpr:
    return CallExpr(args=words(text, line, col))


def stmt(cmd, line: int = 1, col: int = 1, **kwargs) -> Stmt:
    return Stmt(cmd=cmd, position=pos(line, col), **kwargs)


def simple(text: str, line: int = 1, col: int = 1, **kwargs) -> Stmt:
    """Build a statement holding a simple command such as ``echo hi``."""
    return stmt(call(text, line, col), line, col, **kwargs)


def comment(text: str, line: int, col: int = 1) -> Comment:
    return Comment(text=text, hash_pos=pos(line, col))


def with_trailing(node: Stmt, text: str) -> Stmt:
    """Attach a comment one space after the end of ``node``."""
    end = node.end()
    node.comments.append(comment(text, end.line, end.col + 1))
    return node


def stmt_list(*stmts: Stmt, last=None) -> StmtList:
    return StmtList(stmts=list(stmts), last=list(last or []))


def script(*stmts: Stmt, last=None) -> File:
    return File(body=stmt_list(*stmts, last=last))


def chain(stages: list[str], op: str = "|") -> Stmt:
    """Build a right-nested binary command with one stage per line."""
    nodes = [simple(text, line=i + 1, col=1 if i == 0 else 2) for i, text in enumerate(stages)]
    result = nodes[-1]
    for x in reversed(nodes[:-1]):
        op_pos = x.end().add_col(1)
        result = Stmt(cmd=BinaryCmd(op=op, x=x, y=result, op_pos=op_pos), position=x.position)
    return result


def render(node, **options) -> str:
    """Render ``node`` with a fresh renderer configured by ``options``."""
    return ShellRenderer(ShellRendererOptions(**options)).render_to_string(node)
