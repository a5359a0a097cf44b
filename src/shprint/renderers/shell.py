#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/renderers/shell.py
"""Shell source rendering from AST.

This module provides the ShellRenderer class, which pretty-prints a shell AST
back into source text. Layout follows the source positions carried by the
nodes:

- a construct opened on the same line as its parent gains no indentation,
  one that wraps onto new lines gains one level;
- at most one blank line from the source is kept between statements;
- here-document bodies are queued when their redirect is printed and
  written after the next newline, in redirect order;
- trailing comments of consecutive one-line statements are aligned to a
  common column.

The widths used for comment alignment are measured by rendering single
statements into a ``LengthCounter`` through a private measuring renderer, so
visible output is produced exactly once.

A renderer holds mutable state while printing and must not be shared between
threads. All state is reset at the start of every render, so one instance can
be reused for any number of renders, including after a failed one.

"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from io import StringIO
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Union

from shprint.ast.nodes import (
    NO_POS,
    ArithmCmd,
    ArithmExp,
    ArithmExpr,
    ArrayElem,
    Assign,
    BinaryArithm,
    BinaryCmd,
    BinaryTest,
    Block,
    CallExpr,
    CaseClause,
    CmdSubst,
    Command,
    Comment,
    CoprocClause,
    CStyleLoop,
    DeclClause,
    DoubleQuoted,
    ExtGlob,
    File,
    ForClause,
    FuncDecl,
    IfClause,
    LetClause,
    Lit,
    Loop,
    Node,
    ParamExp,
    ParenArithm,
    ParenTest,
    Pos,
    ProcSubst,
    Redirect,
    SingleQuoted,
    Stmt,
    StmtList,
    Subshell,
    TestClause,
    TestExpr,
    TimeClause,
    UnaryArithm,
    UnaryTest,
    WhileClause,
    Word,
    WordIter,
    WordPart,
)
from shprint.ast.utils import is_valid_name, starts_with_lparen
from shprint.ast.visitors import NodeVisitor
from shprint.exceptions import OutputWriteError, RenderingError
from shprint.options.shell import ShellRendererOptions
from shprint.renderers.base import BaseRenderer
from shprint.renderers.writers import BaseWriter, BufferedWriter, ColumnWriter, LengthCounter
from shprint.utils.decorators import debug_timer
from shprint.utils.io_utils import describe_destination

logger = logging.getLogger(__name__)

_ESCAPED_CHAR = re.compile(r"\\(.?)", re.DOTALL)
_SPACED_PREFIX_OPERATORS = ("+", "-", "++", "--")


class ShellRenderer(NodeVisitor, BaseRenderer):
    """Render shell AST nodes to formatted shell source.

    Parameters
    ----------
    options : ShellRendererOptions or None, default = None
        Shell rendering options

    Examples
    --------
    Basic usage:

        >>> from shprint.ast import CallExpr, File, Lit, Pos, Stmt, StmtList, Word
        >>> from shprint.renderers.shell import ShellRenderer
        >>> word = Word(parts=[Lit(value="ls", value_pos=Pos(0, 1, 1))])
        >>> stmt = Stmt(cmd=CallExpr(args=[word]), position=Pos(0, 1, 1))
        >>> ShellRenderer().render_to_string(File(body=StmtList(stmts=[stmt])))
        'ls\\n'

    Four-space indentation:

        >>> from shprint.options import ShellRendererOptions
        >>> renderer = ShellRenderer(ShellRendererOptions(indent=4))

    """

    def __init__(self, options: ShellRendererOptions | None = None):
        """Initialize the shell renderer with options."""
        BaseRenderer._validate_options_type(options, ShellRendererOptions, "shell")
        options = options or ShellRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: ShellRendererOptions = options

        self._writer: BaseWriter = ColumnWriter() if options.keep_padding else BufferedWriter()
        self._measurer: Optional[ShellRenderer] = None
        self._is_measuring = False
        self._reset()

    def _reset(self) -> None:
        self._want_space = False
        self._want_newline = False
        self._wrote_semi = False
        self._comment_padding = 0
        self._line = 0
        self._level = 0
        self._last_level = 0
        self._level_incs: list[bool] = []
        self._nested_binary = False
        self._pending_hdocs: list[Redirect] = []
        self._next_part: Optional[WordPart] = None
        self._cmd_redirs: list[Redirect] = []

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def print_to(self, node: Union[File, StmtList, Stmt], stream: IO[Any]) -> None:
        """Render ``node`` into ``stream``.

        Output is buffered and written to the stream with a single write and
        flush once the whole tree has been rendered.

        Parameters
        ----------
        node : File, StmtList or Stmt
            Root of the tree to render
        stream : IO[str] or IO[bytes]
            Destination stream

        Raises
        ------
        OutputWriteError
            If the stream rejects the output
        RenderingError
            If the tree contains a node the renderer does not know

        """
        stmt_list = _as_stmt_list(node)
        self._reset()
        self._writer.reset(stream)
        logger.debug(f"Rendering {len(stmt_list.stmts)} top-level statements with {self.options}")

        with debug_timer(logger, "Rendering (shell)"):
            self._stmts(stmt_list)
            self._newline(NO_POS)
            try:
                self._writer.flush()
            except (OSError, ValueError) as e:
                raise OutputWriteError(describe_destination(stream), original_error=e) from e

    def render_to_string(self, node: Node) -> str:
        """Render a shell AST to a string.

        Parameters
        ----------
        node : File, StmtList or Stmt
            Root of the tree to render

        Returns
        -------
        str
            Shell source ending in exactly one newline

        """
        buffer = StringIO()
        self.print_to(node, buffer)  # type: ignore[arg-type]
        return buffer.getvalue()

    def render(self, node: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a shell AST and write it to a path or stream.

        Parameters
        ----------
        node : File, StmtList or Stmt
            Root of the tree to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the destination cannot be written

        """
        if not isinstance(output, (str, Path)):
            self.print_to(node, output)  # type: ignore[arg-type]
            return

        text = self.render_to_string(node)
        try:
            self.write_text_output(text, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e

    # ------------------------------------------------------------------
    # Whitespace and token primitives
    # ------------------------------------------------------------------

    def _write(self, text: str) -> None:
        self._writer.write(text)

    def _spaces(self, n: int) -> None:
        if n > 0:
            self._write(" " * n)

    def _space(self) -> None:
        self._write(" ")
        self._want_space = False

    def _space_pad(self, pos: Pos) -> None:
        if self._want_space:
            self._write(" ")
            self._want_space = False
        column = self._writer.column
        if 0 < column < pos.col:
            self._spaces(pos.col - column)

    def _bslash_newline(self) -> None:
        if self._want_space:
            self._space()
        self._write("\\\n")
        self._line += 1
        self._indent()

    def _spaced_string(self, text: str, pos: Pos) -> None:
        self._space_pad(pos)
        self._write(text)
        self._want_space = True

    def _spaced_token(self, text: str, pos: Pos) -> None:
        if self.options.minify:
            self._write(text)
            self._want_space = False
            return
        self._spaced_string(text, pos)

    def _semi_or_newline(self, text: str, pos: Pos) -> None:
        if self._want_newline:
            self._newline(pos)
            self._indent()
        else:
            if not self._wrote_semi:
                self._write(";")
            if not self.options.minify:
                self._space()
            self._line = pos.line
        self._write(text)
        self._want_space = True

    def _semi_rsrv(self, text: str, pos: Pos, fallback: bool) -> None:
        """Write a closing reserved word, after a newline or a ``;``."""
        if self._want_newline or pos.line > self._line:
            self._newlines(pos)
        else:
            if fallback and not self._wrote_semi:
                self._write(";")
            if not self.options.minify:
                self._space_pad(pos)
        self._write(text)
        self._want_space = True

    def _right_paren(self, pos: Pos) -> None:
        if not self.options.minify and (self._want_newline or pos.line > self._line):
            self._newlines(pos)
        self._write(")")
        self._want_space = True

    def _inc_level(self) -> None:
        # A scope opened on a line that already indented past its parent
        # reuses the parent's increment instead of adding its own.
        inc = False
        if self._level <= self._last_level or not self._level_incs:
            self._level += 1
            inc = True
        elif self._level_incs[-1]:
            self._level_incs[-1] = False
            inc = True
        self._level_incs.append(inc)

    def _dec_level(self) -> None:
        if not self._level_incs:
            raise RenderingError("Indentation level popped without a matching push", rendering_stage="indent")
        if self._level_incs.pop():
            self._level -= 1

    @contextmanager
    def _indented(self) -> Iterator[None]:
        self._inc_level()
        try:
            yield
        finally:
            self._dec_level()

    def _indent(self) -> None:
        if self.options.minify:
            return
        self._last_level = self._level
        if self._level == 0:
            return
        if self.options.indent == 0:
            self._write("\t" * self._level)
        else:
            self._spaces(self.options.indent * self._level)

    def _advance_line(self, line: int) -> None:
        if line > self._line:
            self._line = line

    def _newline(self, pos: Pos) -> None:
        self._want_newline = False
        self._want_space = False
        self._write("\n")
        if self._line < pos.line:
            self._line += 1

        hdocs, self._pending_hdocs = self._pending_hdocs, []
        for redir in hdocs:
            if redir.hdoc is not None:
                self._word(redir.hdoc)
                self._advance_line(redir.hdoc.end().line)
            self._unquoted_word(redir.word)
            self._line += 1
            self._write("\n")
            self._want_space = False

    def _newlines(self, pos: Pos) -> None:
        self._newline(pos)
        if pos.line > self._line:
            # keep at most one blank line from the source
            if not self.options.minify:
                self._write("\n")
            self._line += 1
        self._indent()

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _comment(self, comment: Comment) -> None:
        if self.options.minify:
            return
        if self._line == 0:
            pass
        elif comment.hash_pos.line > self._line:
            self._newlines(comment.hash_pos)
        elif self._want_space:
            if self.options.keep_padding:
                self._space_pad(comment.pos())
            else:
                self._spaces(self._comment_padding + 1)
        self._advance_line(comment.hash_pos.line)
        self._write("#")
        self._write(comment.text.rstrip())

    def _comments(self, comments: list[Comment]) -> None:
        for comment in comments:
            self._comment(comment)

    def _comments_before(self, comments: list[Comment], pos: Pos) -> Optional[Comment]:
        """Print the comments preceding ``pos`` and return the first one after it."""
        for comment in comments:
            if comment.pos().after(pos):
                return comment
            self._comment(comment)
        return None

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def _word_parts(self, parts: list[WordPart]) -> None:
        for i, part in enumerate(parts):
            self._next_part = parts[i + 1] if i + 1 < len(parts) else None
            part.accept(self)

    def _word(self, word: Word) -> None:
        self._word_parts(word.parts)
        self._want_space = True

    def _unquoted_word(self, word: Word) -> None:
        """Write a heredoc delimiter with its quoting removed."""
        for part in word.parts:
            if isinstance(part, SingleQuoted):
                self._write(part.value)
            elif isinstance(part, DoubleQuoted):
                self._word_parts(part.parts)
            elif isinstance(part, Lit):
                self._write(_ESCAPED_CHAR.sub(r"\1", part.value))

    def _word_join(self, words: list[Word], sep: str = "") -> None:
        any_newline = False
        for i, word in enumerate(words):
            if sep and i > 0:
                self._spaced_token(sep, NO_POS)
            pos = word.pos()
            if pos.line > self._line:
                if not any_newline:
                    self._inc_level()
                    any_newline = True
                self._bslash_newline()
            else:
                self._space_pad(pos)
            self._word(word)
        if any_newline:
            self._dec_level()

    def _elem_join(self, elems: list[ArrayElem], last: list[Comment]) -> None:
        with self._indented():
            for elem in elems:
                trailing = self._comments_before(elem.comments, elem.pos())
                pos = elem.pos()
                if pos.line > self._line:
                    self._newline(pos)
                    self._indent()
                elif self._want_space:
                    self._space()
                if self._wrote_index(elem.index):
                    self._write("=")
                self._word(elem.value)
                if trailing is not None:
                    self._comment(trailing)
            self._comments(last)

    def _wrote_index(self, index: Optional[ArithmExpr]) -> bool:
        if index is None:
            return False
        self._write("[")
        self._arithm_expr(index, False, False)
        self._write("]")
        return True

    def visit_lit(self, node: Lit) -> None:
        """Write a literal verbatim."""
        self._write(node.value)

    def visit_single_quoted(self, node: SingleQuoted) -> None:
        """Write a single-quoted string."""
        if node.dollar:
            self._write("$")
        self._write("'")
        self._write(node.value)
        self._write("'")
        self._advance_line(node.end().line)

    def visit_double_quoted(self, node: DoubleQuoted) -> None:
        """Write a double-quoted string and its parts."""
        if node.dollar:
            self._write("$")
        self._write('"')
        if node.parts:
            self._word_parts(node.parts)
            self._advance_line(node.parts[-1].end().line)
        self._write('"')

    def visit_cmd_subst(self, node: CmdSubst) -> None:
        """Write a command substitution and its nested statements."""
        self._line = node.pos().line
        if node.temp_file:
            self._write("${")
            self._want_space = True
            self._nested_stmts(node.body, node.right)
            self._want_space = False
            self._semi_rsrv("}", node.right, True)
        elif node.reply_var:
            self._write("${|")
            self._nested_stmts(node.body, node.right)
            self._want_space = False
            self._semi_rsrv("}", node.right, True)
        else:
            self._write("$(")
            self._want_space = bool(node.body.stmts) and starts_with_lparen(node.body.stmts[0])
            self._nested_stmts(node.body, node.right)
            self._right_paren(node.right)

    def visit_param_exp(self, node: ParamExp) -> None:
        """Write a parameter expansion, choosing ``$name`` when minifying allows it."""
        if self.options.minify and not node.short and self._can_shorten(node, self._next_part):
            self._write("$")
            self._write(node.param.value)
            return
        self._param_exp(node)

    @staticmethod
    def _can_shorten(node: ParamExp, next_part: Optional[WordPart]) -> bool:
        if node.has_modifiers():
            return False
        name = node.param.value
        if not (is_valid_name(name) or len(name) == 1):
            return False
        if next_part is None:
            return True
        # only a literal can be checked for gluing onto the name
        if not isinstance(next_part, Lit):
            return False
        return not is_valid_name(name + next_part.value[:1])

    def _param_exp(self, node: ParamExp) -> None:
        if node.naked_index():
            self._write(node.param.value)
            self._wrote_index(node.index)
            return
        if node.short:
            self._write("$")
            self._write(node.param.value)
            return

        self._write("${")
        if node.length:
            self._write("#")
        elif node.width:
            self._write("%")
        elif node.excl:
            self._write("!")
        self._write(node.param.value)
        self._wrote_index(node.index)
        if node.slice is not None:
            self._write(":")
            self._arithm_expr(node.slice.offset, True, True)
            if node.slice.length is not None:
                self._write(":")
                self._arithm_expr(node.slice.length, True, False)
        elif node.repl is not None:
            if node.repl.all:
                self._write("/")
            self._write("/")
            if node.repl.orig is not None:
                self._word(node.repl.orig)
            self._write("/")
            if node.repl.with_ is not None:
                self._word(node.repl.with_)
        elif node.names is not None:
            self._write(node.names)
        elif node.exp is not None:
            self._write(node.exp.op)
            if node.exp.word is not None:
                self._word(node.exp.word)
        self._write("}")

    def visit_arithm_exp(self, node: ArithmExp) -> None:
        """Write an arithmetic expansion."""
        self._write("$((")
        if node.unsigned:
            self._write("# ")
        self._arithm_expr(node.x, False, False)
        self._write("))")

    def visit_proc_subst(self, node: ProcSubst) -> None:
        """Write a process substitution."""
        # keep "< <(" from becoming "<<("
        if self._want_space:
            self._space()
        self._write(node.op)
        self._nested_stmts(node.body, NO_POS)
        self._write(")")

    def visit_ext_glob(self, node: ExtGlob) -> None:
        """Write an extended glob pattern."""
        self._write(node.op)
        self._write(node.pattern.value)
        self._write(")")

    # ------------------------------------------------------------------
    # Expressions and loop headers
    # ------------------------------------------------------------------

    def _arithm_expr(self, expr: ArithmExpr, compact: bool, space_plus_minus: bool) -> None:
        if self.options.minify:
            compact = True
        if isinstance(expr, Word):
            self._word(expr)
        elif isinstance(expr, BinaryArithm):
            self._arithm_expr(expr.x, compact, space_plus_minus)
            if compact:
                self._write(expr.op)
                self._arithm_expr(expr.y, compact, expr.op[-1] in "+-")
            else:
                if expr.op != ",":
                    self._space()
                self._write(expr.op)
                self._space()
                self._arithm_expr(expr.y, compact, False)
        elif isinstance(expr, UnaryArithm):
            if expr.post:
                self._arithm_expr(expr.x, compact, space_plus_minus)
                self._write(expr.op)
            else:
                if space_plus_minus and expr.op in _SPACED_PREFIX_OPERATORS:
                    self._space()
                self._write(expr.op)
                self._arithm_expr(expr.x, compact, False)
        elif isinstance(expr, ParenArithm):
            self._write("(")
            self._arithm_expr(expr.x, False, False)
            self._write(")")
        else:
            raise RenderingError(
                f"Unknown arithmetic expression type: {type(expr).__name__}", rendering_stage="arithmetic"
            )

    def _test_expr(self, expr: TestExpr) -> None:
        if isinstance(expr, Word):
            self._word(expr)
        elif isinstance(expr, BinaryTest):
            self._test_expr(expr.x)
            self._space()
            self._write(expr.op)
            self._space()
            self._test_expr(expr.y)
        elif isinstance(expr, UnaryTest):
            self._write(expr.op)
            self._space()
            self._test_expr(expr.x)
        elif isinstance(expr, ParenTest):
            self._write("(")
            self._test_expr(expr.x)
            self._write(")")
        else:
            raise RenderingError(f"Unknown test expression type: {type(expr).__name__}", rendering_stage="test")

    def _loop(self, loop: Loop) -> None:
        if isinstance(loop, WordIter):
            self._write(loop.name.value)
            if loop.items or loop.in_pos.is_valid():
                self._spaced_string(" in", NO_POS)
                self._word_join(loop.items)
        elif isinstance(loop, CStyleLoop):
            self._write("((")
            if loop.init is None:
                self._space()
            else:
                self._arithm_expr(loop.init, False, False)
            self._write("; ")
            if loop.cond is not None:
                self._arithm_expr(loop.cond, False, False)
            self._write("; ")
            if loop.post is not None:
                self._arithm_expr(loop.post, False, False)
            self._write("))")
        else:
            raise RenderingError(f"Unknown loop header type: {type(loop).__name__}", rendering_stage="loop")

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _redirect(self, redir: Redirect) -> None:
        if self.options.minify and redir.n is None:
            pass
        elif self._want_space:
            self._space_pad(redir.pos())
        if redir.n is not None:
            self._write(redir.n.value)
        self._write(redir.op)
        self._want_space = True
        self._word(redir.word)

    def _stmt(self, stmt: Stmt) -> None:
        if stmt.negated:
            self._spaced_string("!", stmt.pos())
        start_redirs = 0
        if stmt.cmd is not None:
            start_redirs = self._command(stmt.cmd, stmt.redirs)

        with self._indented():
            for redir in stmt.redirs[start_redirs:]:
                if redir.op_pos.line > self._line:
                    self._bslash_newline()
                self._redirect(redir)
                if redir.is_heredoc():
                    self._pending_hdocs.append(redir)

            self._wrote_semi = False
            if stmt.semicolon.is_valid() and stmt.semicolon.line > self._line:
                self._bslash_newline()
                self._write(";")
                self._wrote_semi = True
            elif stmt.background:
                if not self.options.minify:
                    self._space()
                self._write("&")
            elif stmt.coprocess:
                if not self.options.minify:
                    self._space()
                self._write("|&")

    def _command(self, cmd: Command, redirs: list[Redirect]) -> int:
        """Render ``cmd`` and return how many of ``redirs`` it already wrote."""
        self._space_pad(cmd.pos())
        self._cmd_redirs = redirs
        return cmd.accept(self) or 0

    def _has_inline(self, stmt: Stmt) -> bool:
        end_line = stmt.end().line
        return any(comment.pos().line == end_line for comment in stmt.comments)

    def _stmts(self, stmt_list: StmtList) -> None:
        stmts = stmt_list.stmts
        if not stmts:
            self._comments(stmt_list.last)
            return

        if len(stmts) == 1:
            stmt = stmts[0]
            pos = stmt.pos()
            trailing = self._comments_before(stmt.comments, pos)
            if pos.line <= self._line or (self.options.minify and not self._want_space):
                self._line = pos.line
                self._stmt(stmt)
            else:
                if self._line > 0:
                    self._newlines(pos)
                self._line = pos.line
                self._stmt(stmt)
                self._want_newline = True
            self._comment_padding = 0
            if trailing is not None:
                self._comment(trailing)
            self._comments(stmt_list.last)
            return

        inline_indent = 0
        last_indented_line = 0
        for i, stmt in enumerate(stmts):
            pos = stmt.pos()
            trailing = self._comments_before(stmt.comments, pos)
            if self.options.minify and i == 0 and not self._want_space:
                pass
            elif self._line > 0 or i > 0:
                self._newlines(pos)
            self._line = pos.line

            if not self._has_inline(stmt):
                inline_indent = 0
                self._comment_padding = 0
                self._stmt(stmt)
                if trailing is not None:
                    self._comment(trailing)
                continue

            self._stmt(stmt)
            if pos.line > last_indented_line + 1:
                inline_indent = 0
            if inline_indent == 0:
                inline_indent = self._run_width(stmts, i)
                if inline_indent > 0:
                    logger.debug(f"Aligning trailing comments from line {pos.line} after width {inline_indent}")
            self._comment_padding = 0
            if inline_indent > 0:
                width = self._stmt_cols(stmt)
                if width > 0:
                    self._comment_padding = inline_indent - width
                last_indented_line = self._line
            if trailing is not None:
                self._comment(trailing)

        self._comment_padding = 0
        self._want_newline = True
        self._comments(stmt_list.last)

    def _run_width(self, stmts: list[Stmt], start: int) -> int:
        """Return the widest one-line statement in the comment run starting at ``start``.

        The run ends at the first statement without a trailing comment or
        after a blank line.
        """
        widest = 0
        prev_end_line = 0
        for stmt in stmts[start:]:
            if not self._has_inline(stmt):
                break
            if prev_end_line and stmt.pos().line > prev_end_line + 1:
                break
            prev_end_line = stmt.end().line
            widest = max(widest, self._stmt_cols(stmt))
        return widest

    def _stmt_cols(self, stmt: Stmt) -> int:
        """Return the width of ``stmt`` on one line, or -1 if it spans several."""
        if self._is_measuring:
            return -1
        if self._measurer is None:
            measurer = ShellRenderer(self.options.create_updated(keep_padding=False))
            measurer._is_measuring = True
            measurer._writer = LengthCounter()
            self._measurer = measurer

        measurer = self._measurer
        measurer._reset()
        measurer._writer.reset()
        measurer._line = stmt.pos().line
        measurer._stmt(stmt)
        return measurer._writer.count  # type: ignore[attr-defined]

    def _nested_stmts(self, stmt_list: StmtList, closing: Pos) -> None:
        with self._indented():
            stmts = stmt_list.stmts
            if len(stmts) == 1 and closing.line > self._line and stmts[0].end().line <= self._line:
                self._newline(NO_POS)
                self._indent()
            self._stmts(stmt_list)

    def _assigns(self, assigns: list[Assign], always_equal: bool) -> None:
        with self._indented():
            for assign in assigns:
                pos = assign.pos()
                if pos.line > self._line:
                    self._bslash_newline()
                else:
                    self._space_pad(pos)
                if assign.name is not None:
                    self._write(assign.name.value)
                    self._wrote_index(assign.index)
                    if assign.append:
                        self._write("+")
                    if always_equal or assign.value is not None or assign.array is not None:
                        self._write("=")
                if assign.value is not None:
                    self._word(assign.value)
                elif assign.array is not None:
                    self._want_space = False
                    self._write("(")
                    self._elem_join(assign.array.elems, assign.array.last)
                    self._right_paren(assign.array.rparen)
                self._want_space = True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def visit_call_expr(self, node: CallExpr) -> int:
        """Write a simple command, moving redirects that sit right after the command name."""
        redirs = self._cmd_redirs
        self._assigns(node.assigns, True)
        if len(node.args) <= 1:
            self._word_join(node.args)
            return 0

        self._word_join(node.args[:1])
        second = node.args[1].pos()
        start_redirs = 0
        for redir in redirs:
            redir_pos = redir.pos()
            if not redir_pos.is_valid() or redir_pos.after(second) or redir.is_heredoc():
                break
            self._redirect(redir)
            start_redirs += 1
        self._word_join(node.args[1:])
        return start_redirs

    def visit_block(self, node: Block) -> None:
        """Write a brace group."""
        self._write("{")
        self._want_space = True
        self._nested_stmts(node.body, node.rbrace)
        self._semi_rsrv("}", node.rbrace, True)

    def visit_subshell(self, node: Subshell) -> None:
        """Write a subshell."""
        self._write("(")
        self._want_space = bool(node.body.stmts) and starts_with_lparen(node.body.stmts[0])
        self._space_pad(node.body.pos())
        self._nested_stmts(node.body, node.rparen)
        self._want_space = False
        self._space_pad(node.rparen)
        self._right_paren(node.rparen)

    def visit_if_clause(self, node: IfClause) -> None:
        """Write an if clause, including any elif chain."""
        self._if_clause(node, False)

    def _if_clause(self, node: IfClause, elif_: bool) -> None:
        if not elif_:
            self._spaced_string("if", node.pos())
        self._nested_stmts(node.cond, NO_POS)
        self._semi_or_newline("then", node.then_pos)
        self._nested_stmts(node.then, NO_POS)

        if node.followed_by_elif():
            self._semi_rsrv("elif", node.else_pos, True)
            self._if_clause(node.else_.stmts[0].cmd, True)  # type: ignore[arg-type]
            return

        if not node.else_.empty():
            self._semi_rsrv("else", node.else_pos, True)
            self._nested_stmts(node.else_, NO_POS)
        elif node.else_pos.is_valid():
            self._line = node.else_pos.line
        self._semi_rsrv("fi", node.fi_pos, True)

    def visit_while_clause(self, node: WhileClause) -> None:
        """Write a while or until loop."""
        self._spaced_string("until" if node.until else "while", node.pos())
        self._nested_stmts(node.cond, NO_POS)
        self._semi_or_newline("do", node.do_pos)
        self._nested_stmts(node.do, NO_POS)
        self._semi_rsrv("done", node.done_pos, True)

    def visit_for_clause(self, node: ForClause) -> None:
        """Write a for or select loop."""
        self._write("select " if node.select else "for ")
        self._loop(node.loop)
        self._semi_or_newline("do", node.do_pos)
        self._nested_stmts(node.do, NO_POS)
        self._semi_rsrv("done", node.done_pos, True)

    def visit_binary_cmd(self, node: BinaryCmd) -> None:
        """Write a binary command, breaking lines where the source did."""
        self._stmt(node.x)
        if self.options.minify or node.y.pos().line <= self._line:
            self._spaced_token(node.op, node.op_pos)
            self._line = node.y.pos().line
            self._stmt(node.y)
            return

        # the rest of a chain shares the indent of its first break
        indent = not self._nested_binary
        if indent:
            self._inc_level()
        if self.options.binary_next_line:
            if not self._pending_hdocs:
                self._bslash_newline()
            self._spaced_token(node.op, node.op_pos)
            if node.y.comments:
                self._want_space = False
                self._write("\n")
                self._indent()
                self._comments(node.y.comments)
                self._write("\n")
                self._indent()
        else:
            self._spaced_token(node.op, node.op_pos)
            self._line = node.op_pos.line
            self._comments(node.y.comments)
            self._newline(NO_POS)
            self._indent()
        self._line = node.y.pos().line
        self._nested_binary = isinstance(node.y.cmd, BinaryCmd)
        self._stmt(node.y)
        if indent:
            self._dec_level()
        self._nested_binary = False

    def visit_func_decl(self, node: FuncDecl) -> None:
        """Write a function declaration."""
        if node.rsrv_word:
            self._write("function ")
        self._write(node.name.value)
        self._write("()")
        if not self.options.minify:
            self._space()
        self._line = node.body.pos().line
        self._stmt(node.body)

    def visit_case_clause(self, node: CaseClause) -> None:
        """Write a case clause and its arms."""
        self._write("case ")
        self._word(node.word)
        self._write(" in")
        if self.options.switch_case_indent:
            self._inc_level()

        for i, item in enumerate(node.items):
            first_pattern = item.patterns[0].pos()
            trailing = self._comments_before(item.comments, first_pattern)
            if first_pattern.line > self._line:
                self._newlines(first_pattern)
            self._word_join(item.patterns, "|")
            self._write(")")
            self._want_space = not self.options.minify

            body = item.body
            sep = len(body.stmts) > 1 or body.pos().line > self._line
            if item.op_pos != node.esac and not body.empty() and item.op_pos.line > body.end().line:
                sep = True
            self._nested_stmts(body, NO_POS)

            # the last terminator is optional and dropped when minifying
            if not self.options.minify or i != len(node.items) - 1:
                self._level += 1
                if sep:
                    self._newlines(item.op_pos)
                    self._want_newline = True
                self._spaced_token(item.op, item.op_pos)
                if trailing is not None:
                    self._comment(trailing)
                self._level -= 1

        self._comments(node.last)
        if self.options.switch_case_indent:
            self._dec_level()
        self._semi_rsrv("esac", node.esac, not node.items)

    def visit_arithm_cmd(self, node: ArithmCmd) -> None:
        """Write an arithmetic command."""
        self._write("((")
        if node.unsigned:
            self._write("# ")
        self._arithm_expr(node.x, False, False)
        self._write("))")

    def visit_test_clause(self, node: TestClause) -> None:
        """Write a ``[[ ]]`` test."""
        self._write("[[ ")
        self._test_expr(node.x)
        self._spaced_string("]]", node.right)

    def visit_decl_clause(self, node: DeclClause) -> None:
        """Write a declare-family clause."""
        self._spaced_string(node.variant.value, node.pos())
        for opt in node.opts:
            self._space()
            self._word(opt)
        self._assigns(node.assigns, False)

    def visit_time_clause(self, node: TimeClause) -> None:
        """Write a time clause."""
        self._spaced_string("time", node.pos())
        if node.posix_format:
            self._spaced_string("-p", node.pos())
        if node.stmt is not None:
            self._stmt(node.stmt)

    def visit_coproc_clause(self, node: CoprocClause) -> None:
        """Write a coproc clause."""
        self._spaced_string("coproc", node.pos())
        if node.name is not None:
            self._space()
            self._write(node.name.value)
        self._space()
        self._stmt(node.stmt)

    def visit_let_clause(self, node: LetClause) -> None:
        """Write a let clause."""
        self._spaced_string("let", node.pos())
        for expr in node.exprs:
            self._space()
            self._arithm_expr(expr, True, False)


def _as_stmt_list(node: Union[File, StmtList, Stmt]) -> StmtList:
    if isinstance(node, File):
        return node.body
    if isinstance(node, StmtList):
        return node
    if isinstance(node, Stmt):
        return StmtList(stmts=[node])
    raise RenderingError(
        f"Cannot render a {type(node).__name__}; expected File, StmtList or Stmt", rendering_stage="dispatch"
    )
