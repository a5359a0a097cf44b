#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/ast/visitors.py
"""Visitor pattern implementation for shell AST traversal.

Word parts and commands are the two open-ended node families of the shell
AST. ``NodeVisitor`` declares one abstract ``visit_*`` method per kind in both
families, so a visitor that forgets a kind cannot be instantiated. The small
closed families (arithmetic and test expressions, loop headers) are matched
by type directly in the visitor that needs them.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from shprint.ast.nodes import (
    ArithmCmd,
    ArithmExp,
    BinaryCmd,
    Block,
    CallExpr,
    CaseClause,
    CmdSubst,
    CoprocClause,
    DeclClause,
    DoubleQuoted,
    ExtGlob,
    ForClause,
    FuncDecl,
    IfClause,
    LetClause,
    Lit,
    ParamExp,
    ProcSubst,
    SingleQuoted,
    Subshell,
    TestClause,
    TimeClause,
    WhileClause,
)


class NodeVisitor(ABC):
    """Abstract base class for shell AST visitors.

    Subclasses implement a ``visit_*`` method for every word part and every
    command kind. Nodes dispatch to them through their ``accept`` method.

    Examples
    --------
    Collecting the names of simple commands:

        >>> class CommandNames(NodeVisitor):
        ...     def __init__(self):
        ...         self.names = []
        ...
        ...     def visit_call_expr(self, node):
        ...         if node.args:
        ...             self.names.append(node.args[0].lit())
        ...
        ...     # remaining visit_* methods omitted

    """

    # Word parts

    @abstractmethod
    def visit_lit(self, node: Lit) -> Any:
        """Visit a Lit node.

        Parameters
        ----------
        node : Lit
            The literal to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_single_quoted(self, node: SingleQuoted) -> Any:
        """Visit a SingleQuoted node.

        Parameters
        ----------
        node : SingleQuoted
            The single-quoted string to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_double_quoted(self, node: DoubleQuoted) -> Any:
        """Visit a DoubleQuoted node.

        Parameters
        ----------
        node : DoubleQuoted
            The double-quoted string to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_param_exp(self, node: ParamExp) -> Any:
        """Visit a ParamExp node.

        Parameters
        ----------
        node : ParamExp
            The parameter expansion to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_cmd_subst(self, node: CmdSubst) -> Any:
        """Visit a CmdSubst node.

        Parameters
        ----------
        node : CmdSubst
            The command substitution to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_arithm_exp(self, node: ArithmExp) -> Any:
        """Visit a ArithmExp node.

        Parameters
        ----------
        node : ArithmExp
            The arithmetic expansion to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_proc_subst(self, node: ProcSubst) -> Any:
        """Visit a ProcSubst node.

        Parameters
        ----------
        node : ProcSubst
            The process substitution to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_ext_glob(self, node: ExtGlob) -> Any:
        """Visit a ExtGlob node.

        Parameters
        ----------
        node : ExtGlob
            The extended glob to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    # Commands

    @abstractmethod
    def visit_call_expr(self, node: CallExpr) -> Any:
        """Visit a CallExpr node.

        Parameters
        ----------
        node : CallExpr
            The simple command to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node.

        Parameters
        ----------
        node : Block
            The brace group to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_subshell(self, node: Subshell) -> Any:
        """Visit a Subshell node.

        Parameters
        ----------
        node : Subshell
            The subshell to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_if_clause(self, node: IfClause) -> Any:
        """Visit a IfClause node.

        Parameters
        ----------
        node : IfClause
            The if clause to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_while_clause(self, node: WhileClause) -> Any:
        """Visit a WhileClause node.

        Parameters
        ----------
        node : WhileClause
            The while or until loop to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_for_clause(self, node: ForClause) -> Any:
        """Visit a ForClause node.

        Parameters
        ----------
        node : ForClause
            The for or select loop to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_binary_cmd(self, node: BinaryCmd) -> Any:
        """Visit a BinaryCmd node.

        Parameters
        ----------
        node : BinaryCmd
            The binary command to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_func_decl(self, node: FuncDecl) -> Any:
        """Visit a FuncDecl node.

        Parameters
        ----------
        node : FuncDecl
            The function declaration to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_case_clause(self, node: CaseClause) -> Any:
        """Visit a CaseClause node.

        Parameters
        ----------
        node : CaseClause
            The case clause to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_arithm_cmd(self, node: ArithmCmd) -> Any:
        """Visit a ArithmCmd node.

        Parameters
        ----------
        node : ArithmCmd
            The arithmetic command to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_test_clause(self, node: TestClause) -> Any:
        """Visit a TestClause node.

        Parameters
        ----------
        node : TestClause
            The test clause to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_decl_clause(self, node: DeclClause) -> Any:
        """Visit a DeclClause node.

        Parameters
        ----------
        node : DeclClause
            The declaration clause to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_time_clause(self, node: TimeClause) -> Any:
        """Visit a TimeClause node.

        Parameters
        ----------
        node : TimeClause
            The time clause to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_coproc_clause(self, node: CoprocClause) -> Any:
        """Visit a CoprocClause node.

        Parameters
        ----------
        node : CoprocClause
            The coproc clause to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_let_clause(self, node: LetClause) -> Any:
        """Visit a LetClause node.

        Parameters
        ----------
        node : LetClause
            The let clause to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass
