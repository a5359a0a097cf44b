#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_shell_nodes.py
"""Unit tests for shell AST node classes and helpers."""

import pytest
from utils import call, comment, lit, param, pos, simple, stmt, stmt_list, word

from shprint.ast import (
    NO_POS,
    BinaryCmd,
    CaseItem,
    DeclClause,
    Expansion,
    IfClause,
    Lit,
    ParamExp,
    Pos,
    Redirect,
    Stmt,
    StmtList,
    Subshell,
    Word,
    is_valid_name,
)
from shprint.ast.utils import starts_with_lparen


@pytest.mark.unit
class TestPos:
    """Tests for source positions."""

    def test_zero_position_is_invalid(self):
        assert not NO_POS.is_valid()
        assert pos(1, 1).is_valid()

    def test_after_compares_offsets(self):
        assert pos(2, 1).after(pos(1, 50))
        assert not pos(1, 1).after(pos(1, 1))

    def test_add_col(self):
        assert pos(3, 4).add_col(2) == Pos(offset=3006, line=3, col=6)

    def test_add_col_keeps_zero_position(self):
        assert NO_POS.add_col(5) == NO_POS

    def test_advance_over_newlines(self):
        """Test advancing over multi-line text lands on a later line."""
        assert pos(2, 1).advance("ab\ncd\n") == Pos(offset=2007, line=4, col=1)
        assert pos(2, 1).advance("ab\ncd") == Pos(offset=2006, line=3, col=3)

    def test_positions_are_frozen(self):
        with pytest.raises(AttributeError):
            pos(1, 1).line = 2  # type: ignore[misc]


@pytest.mark.unit
class TestNodePositions:
    """Tests for pos()/end() of composite nodes."""

    def test_lit_end_derived_from_value(self):
        assert lit("echo", 1, 1).end() == pos(1, 5)

    def test_lit_explicit_end_wins(self):
        node = Lit(value="x", value_pos=pos(1, 1), value_end=pos(1, 9))
        assert node.end() == pos(1, 9)

    def test_multi_line_lit_end(self):
        """Test a here-document body ends on the line after its last newline."""
        assert lit("a\nb\n", 2, 1).end().line == 4

    def test_stmt_end_prefers_semicolon(self):
        node = simple("echo hi", semicolon=pos(1, 8))
        assert node.end() == pos(1, 9)

    def test_stmt_end_includes_redirects(self):
        node = stmt(call("cat"), redirs=[Redirect(op=">", word=word("out", 1, 6), op_pos=pos(1, 5))])
        assert node.end() == pos(1, 9)

    def test_empty_stmt_list(self):
        empty = StmtList()
        assert empty.empty()
        assert empty.pos() == NO_POS
        assert not stmt_list(last=[comment(" c", 1)]).empty()

    def test_short_param_end(self):
        assert param("x", 1, 1, short=True).end() == pos(1, 3)

    def test_braced_param_end(self):
        assert param("x", 1, 1).end() == pos(1, 5)


@pytest.mark.unit
class TestValidation:
    """Tests for operator and structure checks."""

    def test_invalid_redirect_operator(self):
        with pytest.raises(ValueError, match="redirect"):
            Redirect(op="=>", word=word("x"))

    def test_invalid_binary_operator(self):
        with pytest.raises(ValueError):
            BinaryCmd(op=";", x=simple("a"), y=simple("b"))

    def test_case_item_needs_pattern(self):
        with pytest.raises(ValueError, match="pattern"):
            CaseItem(patterns=[])

    def test_invalid_case_terminator(self):
        with pytest.raises(ValueError):
            CaseItem(patterns=[word("a")], op=";;;")

    def test_invalid_decl_variant(self):
        with pytest.raises(ValueError):
            DeclClause(variant=Lit(value="set"))

    def test_invalid_expansion_operator(self):
        with pytest.raises(ValueError):
            Expansion(op="~")

    def test_invalid_names_operator(self):
        with pytest.raises(ValueError):
            ParamExp(param=Lit(value="x"), names="#")  # type: ignore[arg-type]


@pytest.mark.unit
class TestNodeHelpers:
    """Tests for node query helpers."""

    def test_word_lit(self):
        assert Word(parts=[lit("a"), lit("b", 1, 2)]).lit() == "ab"
        assert Word(parts=[lit("a"), param("x", 1, 2)]).lit() == ""

    def test_heredoc_detection(self):
        assert Redirect(op="<<-", word=word("EOF")).is_heredoc()
        assert not Redirect(op="<<<", word=word("x")).is_heredoc()

    def test_param_modifiers(self):
        assert not param("x").has_modifiers()
        assert param("x", length=True).has_modifiers()
        assert param("x", exp=Expansion(op="-")).has_modifiers()

    def test_naked_index(self):
        assert ParamExp(param=Lit(value="a"), short=True, index=word("1")).naked_index()
        assert not ParamExp(param=Lit(value="a"), index=word("1")).naked_index()

    def test_followed_by_elif(self):
        """Test only a bare if clause in the else branch counts as elif."""
        inner = IfClause(cond=stmt_list(simple("b")), then=stmt_list(simple("c")))
        assert IfClause(else_=stmt_list(stmt(inner))).followed_by_elif()
        assert not IfClause(else_=stmt_list(stmt(inner, negated=True))).followed_by_elif()
        assert not IfClause(else_=stmt_list(stmt(inner, comments=[comment(" c", 1)]))).followed_by_elif()
        assert not IfClause(else_=stmt_list(stmt(inner), simple("d", 2))).followed_by_elif()
        assert not IfClause(else_=stmt_list(simple("d"))).followed_by_elif()

    @pytest.mark.parametrize(
        "value,expected",
        [("foo", True), ("_a1", True), ("A", True), ("1x", False), ("a-b", False), ("", False), ("@", False)],
    )
    def test_is_valid_name(self, value, expected):
        assert is_valid_name(value) is expected

    def test_starts_with_lparen(self):
        sub = stmt(Subshell(body=stmt_list(simple("a", 1, 2)), lparen=pos(1, 1), rparen=pos(1, 3)))
        assert starts_with_lparen(sub)
        assert starts_with_lparen(stmt(BinaryCmd(op="&&", x=sub, y=simple("b", 1, 8))))
        assert not starts_with_lparen(simple("a"))
        assert not starts_with_lparen(Stmt())
