#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/ast/nodes.py
"""AST node classes for shell program representation.

This module defines the node hierarchy for representing parsed POSIX and
bash-family shell scripts as Abstract Syntax Trees. The printer consumes these
nodes read-only; positions are used purely for layout decisions (whether a
token moved to a new line in the source, which column it started in) and
never for meaning.

Node Hierarchy
--------------
Structural nodes:
    - File, StmtList, Stmt, Comment, Redirect
    - Assign, ArrayExpr, ArrayElem, CaseItem

Word parts (visited through ``NodeVisitor``):
    - Lit, SingleQuoted, DoubleQuoted, ParamExp, CmdSubst
    - ArithmExp, ProcSubst, ExtGlob

Commands (visited through ``NodeVisitor``):
    - CallExpr, Block, Subshell, IfClause, WhileClause, ForClause
    - BinaryCmd, FuncDecl, CaseClause, ArithmCmd, TestClause
    - DeclClause, TimeClause, CoprocClause, LetClause

Expression trees (dispatched by type):
    - Arithmetic: Word, BinaryArithm, UnaryArithm, ParenArithm
    - Test: Word, BinaryTest, UnaryTest, ParenTest
    - Loop headers: WordIter, CStyleLoop

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

RedirOperator = Literal[">", ">>", "<", "<>", "<&", ">&", ">|", "<<", "<<-", "<<<", "&>", "&>>"]
BinCmdOperator = Literal["&&", "||", "|", "|&"]
CaseOperator = Literal[";;", ";&", ";;&", ";|"]
ProcOperator = Literal["<(", ">("]
GlobOperator = Literal["?(", "*(", "+(", "@(", "!("]
ParExpOperator = Literal[
    "+", ":+", "-", ":-", "?", ":?", "=", ":=", "%", "%%", "#", "##", "^", "^^", ",", ",,", "@"
]
NamesOperator = Literal["*", "@"]
DeclVariant = Literal["declare", "local", "export", "readonly", "typeset", "nameref"]

REDIR_OPERATORS = (">", ">>", "<", "<>", "<&", ">&", ">|", "<<", "<<-", "<<<", "&>", "&>>")
HEREDOC_OPERATORS = ("<<", "<<-")
BIN_CMD_OPERATORS = ("&&", "||", "|", "|&")
CASE_OPERATORS = (";;", ";&", ";;&", ";|")
PROC_OPERATORS = ("<(", ">(")
GLOB_OPERATORS = ("?(", "*(", "+(", "@(", "!(")
PAR_EXP_OPERATORS = ("+", ":+", "-", ":-", "?", ":?", "=", ":=", "%", "%%", "#", "##", "^", "^^", ",", ",,", "@")
NAMES_OPERATORS = ("*", "@")
DECL_VARIANTS = ("declare", "local", "export", "readonly", "typeset", "nameref")

BIN_ARITHM_OPERATORS = (
    "+", "-", "*", "/", "%", "**",
    "==", "!=", "<", ">", "<=", ">=",
    "&", "|", "^", "<<", ">>", "&&", "||",
    ",", "?", ":",
    "=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=",
)  # fmt: skip
UNARY_ARITHM_OPERATORS = ("!", "~", "++", "--", "+", "-")
BIN_TEST_OPERATORS = (
    "=~", "-nt", "-ot", "-ef", "-eq", "-ne", "-le", "-ge", "-lt", "-gt",
    "&&", "||", "==", "=", "!=", "<", ">",
)  # fmt: skip
UNARY_TEST_OPERATORS = (
    "-e", "-f", "-d", "-c", "-b", "-p", "-S", "-L", "-k", "-g", "-u", "-G", "-O",
    "-N", "-r", "-w", "-x", "-s", "-t", "-z", "-n", "-o", "-v", "-R", "-a", "-h", "!",
)  # fmt: skip


def _check_operator(node: str, op: str, valid: tuple[str, ...]) -> None:
    if op not in valid:
        raise ValueError(f"Invalid {node} operator: {op!r}")


@dataclass(frozen=True)
class Pos:
    """Position of a token in the original source.

    A line of 0 marks the zero position, meaning "no position": optional
    tokens that were absent from the source carry it.

    Parameters
    ----------
    offset : int, default = 0
        Byte offset from the start of the source
    line : int, default = 0
        1-based line number, or 0 when the position is unset
    col : int, default = 0
        1-based column number

    """

    offset: int = 0
    line: int = 0
    col: int = 0

    def is_valid(self) -> bool:
        """Return True if this position refers to a real source location."""
        return self.line > 0

    def after(self, other: Pos) -> bool:
        """Return True if this position comes strictly after ``other``."""
        return self.offset > other.offset

    def add_col(self, n: int) -> Pos:
        """Return the position ``n`` bytes further along the same line.

        The zero position stays unset.
        """
        if not self.is_valid():
            return self
        return Pos(offset=self.offset + n, line=self.line, col=self.col + n)

    def advance(self, text: str) -> Pos:
        """Return the position just past ``text`` written from here.

        Newlines in ``text`` move to the following lines. The zero position
        stays unset.
        """
        if not self.is_valid():
            return self
        newlines = text.count("\n")
        if not newlines:
            return self.add_col(len(text))
        return Pos(offset=self.offset + len(text), line=self.line + newlines, col=len(text) - text.rfind("\n"))


NO_POS = Pos()


class Node(ABC):
    """Base class for all shell AST nodes.

    Every node reports the position of its first and one-past-last byte in
    the source. Layout decisions in the printer are driven by these.
    """

    @abstractmethod
    def pos(self) -> Pos:
        """Return the position of the first character of the node."""

    @abstractmethod
    def end(self) -> Pos:
        """Return the position right after the last character of the node."""


class WordPart(Node):
    """Base class for the pieces a ``Word`` is made of."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this word part.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """


class Command(Node):
    """Base class for every command kind a ``Stmt`` can hold."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this command.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """


# ============================================================================
# Structural Nodes
# ============================================================================


@dataclass
class Comment(Node):
    """A single ``#`` comment.

    Parameters
    ----------
    text : str, default = ""
        Comment text without the leading ``#``
    hash_pos : Pos, default = Pos()
        Position of the ``#`` character

    """

    text: str = ""
    hash_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.hash_pos

    def end(self) -> Pos:
        return self.hash_pos.add_col(1 + len(self.text))


@dataclass
class StmtList(Node):
    """A sequence of statements plus the comments that follow the last one.

    Parameters
    ----------
    stmts : list of Stmt, default = empty list
        The statements, in source order
    last : list of Comment, default = empty list
        Orphan comments after the final statement (before a closing token)

    """

    stmts: list[Stmt] = field(default_factory=list)
    last: list[Comment] = field(default_factory=list)

    def pos(self) -> Pos:
        if self.stmts:
            return self.stmts[0].pos()
        if self.last:
            return self.last[0].pos()
        return NO_POS

    def end(self) -> Pos:
        if self.last:
            return self.last[-1].end()
        if self.stmts:
            return self.stmts[-1].end()
        return NO_POS

    def empty(self) -> bool:
        """Return True if the list holds neither statements nor comments."""
        return not self.stmts and not self.last


@dataclass
class File(Node):
    """Root node of a parsed shell program.

    Parameters
    ----------
    body : StmtList, default = empty StmtList
        Top-level statements and trailing comments
    name : str, default = ""
        Name of the source file, informational only

    """

    body: StmtList = field(default_factory=StmtList)
    name: str = ""

    def pos(self) -> Pos:
        return self.body.pos()

    def end(self) -> Pos:
        return self.body.end()


@dataclass
class Stmt(Node):
    """A command together with its redirects, comments and terminator.

    Parameters
    ----------
    cmd : Command or None, default = None
        The command; None for a statement that is only redirects
    comments : list of Comment, default = empty list
        Comments attached to the statement. Those positioned before the
        statement are printed above it, the first one positioned after its
        start is printed as a trailing comment.
    redirs : list of Redirect, default = empty list
        Redirections, in source order
    position : Pos, default = Pos()
        Position of the first character of the statement
    semicolon : Pos, default = Pos()
        Position of the ``;``, ``&`` or ``|&`` terminator, if any
    negated : bool, default = False
        Statement was prefixed with ``!``
    background : bool, default = False
        Statement was terminated with ``&``
    coprocess : bool, default = False
        Statement was terminated with ``|&``

    """

    cmd: Optional[Command] = None
    comments: list[Comment] = field(default_factory=list)
    redirs: list[Redirect] = field(default_factory=list)
    position: Pos = NO_POS
    semicolon: Pos = NO_POS
    negated: bool = False
    background: bool = False
    coprocess: bool = False

    def pos(self) -> Pos:
        return self.position

    def end(self) -> Pos:
        if self.semicolon.is_valid():
            end = self.semicolon.add_col(1)
            if self.coprocess:
                end = end.add_col(1)
            return end
        end = self.position
        if self.negated:
            end = end.add_col(1)
        if self.cmd is not None:
            end = self.cmd.end()
        if self.redirs:
            redir_end = self.redirs[-1].end()
            if redir_end.after(end):
                end = redir_end
        return end


@dataclass
class Redirect(Node):
    """An input/output redirection such as ``2>&1`` or ``<<EOF``.

    Parameters
    ----------
    op : str
        One of the redirect operators in ``REDIR_OPERATORS``
    word : Word
        Redirect target; for heredocs, the delimiter word
    n : Lit or None, default = None
        Explicit file descriptor before the operator
    hdoc : Word or None, default = None
        Body of a here-document
    op_pos : Pos, default = Pos()
        Position of the operator

    """

    op: RedirOperator
    word: Word
    n: Optional[Lit] = None
    hdoc: Optional[Word] = None
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("redirect", self.op, REDIR_OPERATORS)

    def pos(self) -> Pos:
        if self.n is not None:
            return self.n.pos()
        return self.op_pos

    def end(self) -> Pos:
        return self.word.end()

    def is_heredoc(self) -> bool:
        """Return True for ``<<`` and ``<<-`` redirects."""
        return self.op in HEREDOC_OPERATORS


@dataclass
class Assign(Node):
    """A variable assignment, e.g. ``foo=bar``, ``arr+=(a b)`` or ``arr[1]=x``.

    A naked assignment (``declare foo``) has a name but no ``=``.

    Parameters
    ----------
    name : Lit or None, default = None
        Variable name
    value : Word or None, default = None
        Scalar value
    array : ArrayExpr or None, default = None
        Array value
    index : ArithmExpr or None, default = None
        Array index on the left-hand side
    append : bool, default = False
        ``+=`` instead of ``=``
    naked : bool, default = False
        Name-only assignment inside a declare-family clause

    """

    name: Optional[Lit] = None
    value: Optional[Word] = None
    array: Optional[ArrayExpr] = None
    index: Optional[ArithmExpr] = None
    append: bool = False
    naked: bool = False

    def pos(self) -> Pos:
        if self.name is not None:
            return self.name.pos()
        if self.value is not None:
            return self.value.pos()
        if self.array is not None:
            return self.array.pos()
        return NO_POS

    def end(self) -> Pos:
        if self.value is not None:
            return self.value.end()
        if self.array is not None:
            return self.array.end()
        if self.index is not None:
            return self.index.end().add_col(1)
        if self.name is not None:
            return self.name.end()
        return NO_POS


@dataclass
class ArrayExpr(Node):
    """A parenthesized array value: ``(a b [3]=c)``."""

    elems: list[ArrayElem] = field(default_factory=list)
    last: list[Comment] = field(default_factory=list)
    lparen: Pos = NO_POS
    rparen: Pos = NO_POS

    def pos(self) -> Pos:
        return self.lparen

    def end(self) -> Pos:
        return self.rparen.add_col(1)


@dataclass
class ArrayElem(Node):
    """One element of an ``ArrayExpr``, optionally with an explicit index."""

    value: Word
    index: Optional[ArithmExpr] = None
    comments: list[Comment] = field(default_factory=list)

    def pos(self) -> Pos:
        if self.index is not None:
            return self.index.pos()
        return self.value.pos()

    def end(self) -> Pos:
        return self.value.end()


# ============================================================================
# Words and Word Parts
# ============================================================================


@dataclass
class Word(Node):
    """A shell word: a non-empty concatenation of word parts.

    Parameters
    ----------
    parts : list of WordPart, default = empty list
        The parts, written back to back with no separator

    """

    parts: list[WordPart] = field(default_factory=list)

    def pos(self) -> Pos:
        if not self.parts:
            return NO_POS
        return self.parts[0].pos()

    def end(self) -> Pos:
        if not self.parts:
            return NO_POS
        return self.parts[-1].end()

    def lit(self) -> str:
        """Return the word's value if it consists of literals only, else ""."""
        values = []
        for part in self.parts:
            if not isinstance(part, Lit):
                return ""
            values.append(part.value)
        return "".join(values)


@dataclass
class Lit(WordPart):
    """An unquoted literal string, copied verbatim by the printer.

    Parameters
    ----------
    value : str
        Literal text, including any backslash escapes
    value_pos : Pos, default = Pos()
        Position of the first character
    value_end : Pos, default = Pos()
        Position after the last character. When unset it is derived from
        ``value_pos`` and the length of ``value``.

    """

    value: str
    value_pos: Pos = NO_POS
    value_end: Pos = NO_POS

    def pos(self) -> Pos:
        return self.value_pos

    def end(self) -> Pos:
        if self.value_end.is_valid():
            return self.value_end
        return self.value_pos.advance(self.value)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this literal."""
        return visitor.visit_lit(self)


@dataclass
class SingleQuoted(WordPart):
    """A single-quoted string, ``'foo'`` or ANSI-C ``$'foo'``."""

    value: str = ""
    dollar: bool = False
    left: Pos = NO_POS
    right: Pos = NO_POS

    def pos(self) -> Pos:
        return self.left

    def end(self) -> Pos:
        return self.right.add_col(1)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this single-quoted string."""
        return visitor.visit_single_quoted(self)


@dataclass
class DoubleQuoted(WordPart):
    """A double-quoted string, ``"foo $bar"`` or localized ``$"foo"``."""

    parts: list[WordPart] = field(default_factory=list)
    dollar: bool = False
    left: Pos = NO_POS
    right: Pos = NO_POS

    def pos(self) -> Pos:
        return self.left

    def end(self) -> Pos:
        return self.right.add_col(1)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this double-quoted string."""
        return visitor.visit_double_quoted(self)


@dataclass
class Slice(Node):
    """The ``:offset[:length]`` trailer of a parameter expansion."""

    offset: ArithmExpr
    length: Optional[ArithmExpr] = None

    def pos(self) -> Pos:
        return self.offset.pos()

    def end(self) -> Pos:
        if self.length is not None:
            return self.length.end()
        return self.offset.end()


@dataclass
class Replace(Node):
    """The ``/orig/with`` trailer of a parameter expansion.

    Parameters
    ----------
    orig : Word or None, default = None
        Pattern to replace
    with_ : Word or None, default = None
        Replacement text
    all : bool, default = False
        Replace every match (``//``) instead of the first

    """

    orig: Optional[Word] = None
    with_: Optional[Word] = None
    all: bool = False

    def pos(self) -> Pos:
        if self.orig is not None:
            return self.orig.pos()
        if self.with_ is not None:
            return self.with_.pos()
        return NO_POS

    def end(self) -> Pos:
        if self.with_ is not None:
            return self.with_.end()
        if self.orig is not None:
            return self.orig.end()
        return NO_POS


@dataclass
class Expansion(Node):
    """A unary expansion trailer such as ``:-default`` or ``##prefix``."""

    op: ParExpOperator
    word: Optional[Word] = None

    def __post_init__(self) -> None:
        _check_operator("parameter expansion", self.op, PAR_EXP_OPERATORS)

    def pos(self) -> Pos:
        if self.word is not None:
            return self.word.pos()
        return NO_POS

    def end(self) -> Pos:
        if self.word is not None:
            return self.word.end()
        return NO_POS


@dataclass
class ParamExp(WordPart):
    """A parameter expansion: ``$foo``, ``${#foo}``, ``${foo:-bar}`` ...

    At most one of ``slice``, ``repl``, ``names`` and ``exp`` is set. The
    printer relies on the producer for this and does not re-check it.

    Parameters
    ----------
    param : Lit
        Parameter name, positional number or special parameter
    short : bool, default = False
        Written as ``$foo`` without braces
    excl : bool, default = False
        Indirection, ``${!foo}``
    length : bool, default = False
        Length operator, ``${#foo}``
    width : bool, default = False
        Width operator, ``${%foo}``
    index : ArithmExpr or None, default = None
        Array index, ``${foo[i]}``
    slice : Slice or None, default = None
        Substring trailer
    repl : Replace or None, default = None
        Pattern replacement trailer
    names : {"*", "@"} or None, default = None
        Name-prefix expansion, ``${!prefix*}``
    exp : Expansion or None, default = None
        Unary expansion operator and its word
    dollar : Pos, default = Pos()
        Position of the ``$``
    rbrace : Pos, default = Pos()
        Position of the closing brace, unset for the short form

    """

    param: Lit
    short: bool = False
    excl: bool = False
    length: bool = False
    width: bool = False
    index: Optional[ArithmExpr] = None
    slice: Optional[Slice] = None
    repl: Optional[Replace] = None
    names: Optional[NamesOperator] = None
    exp: Optional[Expansion] = None
    dollar: Pos = NO_POS
    rbrace: Pos = NO_POS

    def __post_init__(self) -> None:
        if self.names is not None:
            _check_operator("name expansion", self.names, NAMES_OPERATORS)

    def pos(self) -> Pos:
        return self.dollar

    def end(self) -> Pos:
        if self.rbrace.is_valid():
            return self.rbrace.add_col(1)
        return self.param.end()

    def naked_index(self) -> bool:
        """Return True for an indexed name without ``$``, as in ``declare a[1]``."""
        return self.short and self.index is not None

    def has_modifiers(self) -> bool:
        """Return True if any sigil, index or trailer is present."""
        return (
            self.excl
            or self.length
            or self.width
            or self.index is not None
            or self.slice is not None
            or self.repl is not None
            or self.names is not None
            or self.exp is not None
        )

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this parameter expansion."""
        return visitor.visit_param_exp(self)


@dataclass
class CmdSubst(WordPart):
    """A command substitution, ``$(cmd)``, ``${ cmd; }`` or ``${| cmd; }``.

    Parameters
    ----------
    body : StmtList, default = empty StmtList
        Statements run inside the substitution
    temp_file : bool, default = False
        mksh ``${ cmd; }`` form
    reply_var : bool, default = False
        mksh ``${| cmd; }`` form
    left : Pos, default = Pos()
        Position of the ``$``
    right : Pos, default = Pos()
        Position of the closing ``)`` or ``}``

    """

    body: StmtList = field(default_factory=StmtList)
    temp_file: bool = False
    reply_var: bool = False
    left: Pos = NO_POS
    right: Pos = NO_POS

    def pos(self) -> Pos:
        return self.left

    def end(self) -> Pos:
        return self.right.add_col(1)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this command substitution."""
        return visitor.visit_cmd_subst(self)


@dataclass
class ArithmExp(WordPart):
    """An arithmetic expansion, ``$((expr))`` or unsigned ``$((# expr))``."""

    x: ArithmExpr
    unsigned: bool = False
    left: Pos = NO_POS
    right: Pos = NO_POS

    def pos(self) -> Pos:
        return self.left

    def end(self) -> Pos:
        return self.right.add_col(2)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this arithmetic expansion."""
        return visitor.visit_arithm_exp(self)


@dataclass
class ProcSubst(WordPart):
    """A process substitution, ``<(cmd)`` or ``>(cmd)``."""

    op: ProcOperator
    body: StmtList = field(default_factory=StmtList)
    op_pos: Pos = NO_POS
    rparen: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("process substitution", self.op, PROC_OPERATORS)

    def pos(self) -> Pos:
        return self.op_pos

    def end(self) -> Pos:
        return self.rparen.add_col(1)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this process substitution."""
        return visitor.visit_proc_subst(self)


@dataclass
class ExtGlob(WordPart):
    """An extended glob such as ``+(foo|bar)``; ``pattern`` excludes the parens."""

    op: GlobOperator
    pattern: Lit
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("extended glob", self.op, GLOB_OPERATORS)

    def pos(self) -> Pos:
        return self.op_pos

    def end(self) -> Pos:
        return self.pattern.end().add_col(1)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this extended glob."""
        return visitor.visit_ext_glob(self)


# ============================================================================
# Arithmetic and Test Expressions
# ============================================================================


@dataclass
class BinaryArithm(Node):
    """A binary arithmetic operation, ``x op y``."""

    op: str
    x: ArithmExpr
    y: ArithmExpr
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("binary arithmetic", self.op, BIN_ARITHM_OPERATORS)

    def pos(self) -> Pos:
        return self.x.pos()

    def end(self) -> Pos:
        return self.y.end()


@dataclass
class UnaryArithm(Node):
    """A unary arithmetic operation, prefix (``-x``, ``++i``) or postfix (``i++``)."""

    op: str
    x: ArithmExpr
    post: bool = False
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("unary arithmetic", self.op, UNARY_ARITHM_OPERATORS)

    def pos(self) -> Pos:
        if self.post:
            return self.x.pos()
        return self.op_pos

    def end(self) -> Pos:
        if self.post:
            return self.op_pos.add_col(len(self.op))
        return self.x.end()


@dataclass
class ParenArithm(Node):
    """A parenthesized arithmetic sub-expression."""

    x: ArithmExpr
    lparen: Pos = NO_POS
    rparen: Pos = NO_POS

    def pos(self) -> Pos:
        return self.lparen

    def end(self) -> Pos:
        return self.rparen.add_col(1)


@dataclass
class BinaryTest(Node):
    """A binary ``[[ ]]`` test, such as ``a == b`` or ``x -nt y``."""

    op: str
    x: TestExpr
    y: TestExpr
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("binary test", self.op, BIN_TEST_OPERATORS)

    def pos(self) -> Pos:
        return self.x.pos()

    def end(self) -> Pos:
        return self.y.end()


@dataclass
class UnaryTest(Node):
    """A unary ``[[ ]]`` test, such as ``-f file`` or ``! expr``."""

    op: str
    x: TestExpr
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("unary test", self.op, UNARY_TEST_OPERATORS)

    def pos(self) -> Pos:
        return self.op_pos

    def end(self) -> Pos:
        return self.x.end()


@dataclass
class ParenTest(Node):
    """A parenthesized ``[[ ]]`` sub-expression."""

    x: TestExpr
    lparen: Pos = NO_POS
    rparen: Pos = NO_POS

    def pos(self) -> Pos:
        return self.lparen

    def end(self) -> Pos:
        return self.rparen.add_col(1)


ArithmExpr = Union[Word, BinaryArithm, UnaryArithm, ParenArithm]
TestExpr = Union[Word, BinaryTest, UnaryTest, ParenTest]


# ============================================================================
# Loop Headers
# ============================================================================


@dataclass
class WordIter(Node):
    """The ``name [in words...]`` header of a for or select loop.

    Parameters
    ----------
    name : Lit
        Loop variable
    items : list of Word, default = empty list
        Words iterated over
    in_pos : Pos, default = Pos()
        Position of the ``in`` keyword. A valid position with no items
        represents an explicit empty ``in``.

    """

    name: Lit
    items: list[Word] = field(default_factory=list)
    in_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.name.pos()

    def end(self) -> Pos:
        if self.items:
            return self.items[-1].end()
        if self.in_pos.is_valid():
            return self.in_pos.add_col(2)
        return self.name.end()


@dataclass
class CStyleLoop(Node):
    """The ``((init; cond; post))`` header of a C-style for loop."""

    init: Optional[ArithmExpr] = None
    cond: Optional[ArithmExpr] = None
    post: Optional[ArithmExpr] = None
    lparen: Pos = NO_POS
    rparen: Pos = NO_POS

    def pos(self) -> Pos:
        return self.lparen

    def end(self) -> Pos:
        return self.rparen.add_col(2)


Loop = Union[WordIter, CStyleLoop]


# ============================================================================
# Commands
# ============================================================================


@dataclass
class CallExpr(Command):
    """A simple command: optional assignments followed by arguments.

    Parameters
    ----------
    args : list of Word, default = empty list
        Command name and arguments
    assigns : list of Assign, default = empty list
        Leading variable assignments, e.g. ``LANG=C sort``

    """

    args: list[Word] = field(default_factory=list)
    assigns: list[Assign] = field(default_factory=list)

    def pos(self) -> Pos:
        if self.assigns:
            return self.assigns[0].pos()
        if self.args:
            return self.args[0].pos()
        return NO_POS

    def end(self) -> Pos:
        if self.args:
            return self.args[-1].end()
        if self.assigns:
            return self.assigns[-1].end()
        return NO_POS

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this simple command."""
        return visitor.visit_call_expr(self)


@dataclass
class Block(Command):
    """A brace group, ``{ stmts; }``."""

    body: StmtList = field(default_factory=StmtList)
    lbrace: Pos = NO_POS
    rbrace: Pos = NO_POS

    def pos(self) -> Pos:
        return self.lbrace

    def end(self) -> Pos:
        return self.rbrace.add_col(1)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this brace group."""
        return visitor.visit_block(self)


@dataclass
class Subshell(Command):
    """A subshell, ``(stmts)``."""

    body: StmtList = field(default_factory=StmtList)
    lparen: Pos = NO_POS
    rparen: Pos = NO_POS

    def pos(self) -> Pos:
        return self.lparen

    def end(self) -> Pos:
        return self.rparen.add_col(1)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subshell."""
        return visitor.visit_subshell(self)


@dataclass
class IfClause(Command):
    """An ``if``/``elif``/``else`` chain.

    An ``elif`` is represented as an else branch holding a single statement
    whose command is itself an ``IfClause``; ``else_pos`` then points at the
    ``elif`` keyword.

    Parameters
    ----------
    cond : StmtList, default = empty StmtList
        Condition statements
    then : StmtList, default = empty StmtList
        Statements run when the condition holds
    else_ : StmtList, default = empty StmtList
        Else branch, possibly an elif chain
    if_pos, then_pos, else_pos, fi_pos : Pos
        Keyword positions

    """

    cond: StmtList = field(default_factory=StmtList)
    then: StmtList = field(default_factory=StmtList)
    else_: StmtList = field(default_factory=StmtList)
    if_pos: Pos = NO_POS
    then_pos: Pos = NO_POS
    else_pos: Pos = NO_POS
    fi_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.if_pos

    def end(self) -> Pos:
        return self.fi_pos.add_col(2)

    def followed_by_elif(self) -> bool:
        """Return True if the else branch is a bare ``elif`` clause."""
        if len(self.else_.stmts) != 1:
            return False
        stmt = self.else_.stmts[0]
        return (
            isinstance(stmt.cmd, IfClause)
            and not stmt.comments
            and not stmt.redirs
            and not stmt.negated
            and not stmt.background
            and not stmt.coprocess
        )

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this if clause."""
        return visitor.visit_if_clause(self)


@dataclass
class WhileClause(Command):
    """A ``while`` loop, or an ``until`` loop when ``until`` is set."""

    cond: StmtList = field(default_factory=StmtList)
    do: StmtList = field(default_factory=StmtList)
    until: bool = False
    while_pos: Pos = NO_POS
    do_pos: Pos = NO_POS
    done_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.while_pos

    def end(self) -> Pos:
        return self.done_pos.add_col(4)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this while clause."""
        return visitor.visit_while_clause(self)


@dataclass
class ForClause(Command):
    """A ``for`` loop, or a ``select`` loop when ``select`` is set."""

    loop: Loop
    do: StmtList = field(default_factory=StmtList)
    select: bool = False
    for_pos: Pos = NO_POS
    do_pos: Pos = NO_POS
    done_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.for_pos

    def end(self) -> Pos:
        return self.done_pos.add_col(4)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this for clause."""
        return visitor.visit_for_clause(self)


@dataclass
class BinaryCmd(Command):
    """Two statements joined by ``&&``, ``||``, ``|`` or ``|&``.

    Longer chains nest to the right: ``a | b | c`` is ``a | (b | c)``.
    """

    op: BinCmdOperator
    x: Stmt
    y: Stmt
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("binary command", self.op, BIN_CMD_OPERATORS)

    def pos(self) -> Pos:
        return self.x.pos()

    def end(self) -> Pos:
        return self.y.end()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this binary command."""
        return visitor.visit_binary_cmd(self)


@dataclass
class FuncDecl(Command):
    """A function declaration, ``foo() body`` or ``function foo() body``."""

    name: Lit
    body: Stmt
    rsrv_word: bool = False
    position: Pos = NO_POS

    def pos(self) -> Pos:
        return self.position

    def end(self) -> Pos:
        return self.body.end()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this function declaration."""
        return visitor.visit_func_decl(self)


@dataclass
class CaseItem(Node):
    """One arm of a case clause: ``pat1 | pat2) body ;;``.

    Parameters
    ----------
    patterns : list of Word
        Patterns joined by ``|``; never empty
    body : StmtList, default = empty StmtList
        Statements run when a pattern matches
    op : str, default = ";;"
        Arm terminator, one of ``CASE_OPERATORS``
    comments : list of Comment, default = empty list
        Comments before the arm, plus at most one trailing the patterns
    op_pos : Pos, default = Pos()
        Position of the terminator; equal to the ``esac`` position when the
        last arm omits it

    """

    patterns: list[Word]
    body: StmtList = field(default_factory=StmtList)
    op: CaseOperator = ";;"
    comments: list[Comment] = field(default_factory=list)
    op_pos: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("case", self.op, CASE_OPERATORS)
        if not self.patterns:
            raise ValueError("Case items require at least one pattern")

    def pos(self) -> Pos:
        return self.patterns[0].pos()

    def end(self) -> Pos:
        return self.op_pos.add_col(len(self.op))


@dataclass
class CaseClause(Command):
    """A ``case word in ... esac`` statement."""

    word: Word
    items: list[CaseItem] = field(default_factory=list)
    last: list[Comment] = field(default_factory=list)
    case_pos: Pos = NO_POS
    esac: Pos = NO_POS

    def pos(self) -> Pos:
        return self.case_pos

    def end(self) -> Pos:
        return self.esac.add_col(4)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this case clause."""
        return visitor.visit_case_clause(self)


@dataclass
class ArithmCmd(Command):
    """An arithmetic command, ``((expr))``."""

    x: ArithmExpr
    unsigned: bool = False
    left: Pos = NO_POS
    right: Pos = NO_POS

    def pos(self) -> Pos:
        return self.left

    def end(self) -> Pos:
        return self.right.add_col(2)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this arithmetic command."""
        return visitor.visit_arithm_cmd(self)


@dataclass
class TestClause(Command):
    """A bash test command, ``[[ expr ]]``."""

    x: TestExpr
    left: Pos = NO_POS
    right: Pos = NO_POS

    def pos(self) -> Pos:
        return self.left

    def end(self) -> Pos:
        return self.right.add_col(2)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this test clause."""
        return visitor.visit_test_clause(self)


@dataclass
class DeclClause(Command):
    """A declare-family builtin: ``declare``, ``local``, ``export`` ...

    Parameters
    ----------
    variant : Lit
        The builtin name, one of ``DECL_VARIANTS``
    opts : list of Word, default = empty list
        Option words such as ``-r``
    assigns : list of Assign, default = empty list
        Assignments, which may be naked names
    position : Pos, default = Pos()
        Position of the builtin name

    """

    variant: Lit
    opts: list[Word] = field(default_factory=list)
    assigns: list[Assign] = field(default_factory=list)
    position: Pos = NO_POS

    def __post_init__(self) -> None:
        _check_operator("declaration", self.variant.value, DECL_VARIANTS)

    def pos(self) -> Pos:
        return self.position

    def end(self) -> Pos:
        if self.assigns:
            return self.assigns[-1].end()
        if self.opts:
            return self.opts[-1].end()
        return self.variant.end()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this declaration clause."""
        return visitor.visit_decl_clause(self)


@dataclass
class TimeClause(Command):
    """A ``time [-p] stmt`` clause; ``stmt`` may be absent."""

    stmt: Optional[Stmt] = None
    posix_format: bool = False
    time_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.time_pos

    def end(self) -> Pos:
        if self.stmt is not None:
            return self.stmt.end()
        return self.time_pos.add_col(4)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this time clause."""
        return visitor.visit_time_clause(self)


@dataclass
class CoprocClause(Command):
    """A ``coproc [name] stmt`` clause."""

    stmt: Stmt
    name: Optional[Lit] = None
    coproc_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.coproc_pos

    def end(self) -> Pos:
        return self.stmt.end()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this coproc clause."""
        return visitor.visit_coproc_clause(self)


@dataclass
class LetClause(Command):
    """A ``let expr...`` clause."""

    exprs: list[ArithmExpr] = field(default_factory=list)
    let_pos: Pos = NO_POS

    def pos(self) -> Pos:
        return self.let_pos

    def end(self) -> Pos:
        if self.exprs:
            return self.exprs[-1].end()
        return self.let_pos.add_col(3)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this let clause."""
        return visitor.visit_let_clause(self)


NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Comment, StmtList, File, Stmt, Redirect, Assign, ArrayExpr, ArrayElem,
        Word, Lit, SingleQuoted, DoubleQuoted, Slice, Replace, Expansion, ParamExp,
        CmdSubst, ArithmExp, ProcSubst, ExtGlob,
        BinaryArithm, UnaryArithm, ParenArithm, BinaryTest, UnaryTest, ParenTest,
        WordIter, CStyleLoop,
        CallExpr, Block, Subshell, IfClause, WhileClause, ForClause, BinaryCmd, FuncDecl,
        CaseItem, CaseClause, ArithmCmd, TestClause, DeclClause, TimeClause, CoprocClause, LetClause,
    )
}  # fmt: skip
