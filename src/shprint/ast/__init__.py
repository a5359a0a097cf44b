#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/ast/__init__.py
"""Shell AST nodes, visitor base class and JSON interchange helpers."""

from shprint.ast.nodes import (
    NO_POS,
    ArithmCmd,
    ArithmExp,
    ArithmExpr,
    ArrayElem,
    ArrayExpr,
    Assign,
    BinaryArithm,
    BinaryCmd,
    BinaryTest,
    Block,
    CallExpr,
    CaseClause,
    CaseItem,
    CmdSubst,
    Command,
    Comment,
    CoprocClause,
    CStyleLoop,
    DeclClause,
    DoubleQuoted,
    Expansion,
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
    Replace,
    SingleQuoted,
    Slice,
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
from shprint.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast, load_ast
from shprint.ast.utils import is_valid_name
from shprint.ast.visitors import NodeVisitor

__all__ = [
    "NO_POS",
    "ArithmCmd",
    "ArithmExp",
    "ArithmExpr",
    "ArrayElem",
    "ArrayExpr",
    "Assign",
    "BinaryArithm",
    "BinaryCmd",
    "BinaryTest",
    "Block",
    "CallExpr",
    "CaseClause",
    "CaseItem",
    "CmdSubst",
    "Command",
    "Comment",
    "CoprocClause",
    "CStyleLoop",
    "DeclClause",
    "DoubleQuoted",
    "Expansion",
    "ExtGlob",
    "File",
    "ForClause",
    "FuncDecl",
    "IfClause",
    "LetClause",
    "Lit",
    "Loop",
    "Node",
    "NodeVisitor",
    "ParamExp",
    "ParenArithm",
    "ParenTest",
    "Pos",
    "ProcSubst",
    "Redirect",
    "Replace",
    "SingleQuoted",
    "Slice",
    "Stmt",
    "StmtList",
    "Subshell",
    "TestClause",
    "TestExpr",
    "TimeClause",
    "UnaryArithm",
    "UnaryTest",
    "WhileClause",
    "Word",
    "WordIter",
    "WordPart",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "is_valid_name",
    "json_to_ast",
    "load_ast",
]
