#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the top-level from_ast / from_json functions."""

from io import StringIO

import pytest
from utils import pos, script, simple, stmt, stmt_list

import shprint
from shprint import from_ast, from_json
from shprint.ast import IfClause, ast_to_json
from shprint.exceptions import ParsingError, ValidationError
from shprint.options import ShellRendererOptions


def multi_line_if():
    return script(
        stmt(
            IfClause(
                cond=stmt_list(simple("true", 1, 4, semicolon=pos(1, 8))),
                then=stmt_list(simple("echo hi", 2, 2)),
                if_pos=pos(1, 1),
                then_pos=pos(1, 10),
                fi_pos=pos(3, 1),
            )
        )
    )


@pytest.mark.unit
class TestFromAst:
    """Tests for from_ast."""

    def test_returns_string_without_output(self):
        assert from_ast(multi_line_if()) == "if true; then\n\techo hi\nfi\n"

    def test_keyword_overrides(self):
        assert from_ast(multi_line_if(), indent=2) == "if true; then\n  echo hi\nfi\n"

    def test_overrides_apply_on_top_of_options(self):
        options = ShellRendererOptions(indent=2)
        assert from_ast(multi_line_if(), renderer_options=options, minify=True) == "if true;then\necho hi\nfi\n"

    def test_config_file(self, tmp_path):
        config = tmp_path / ".shprint.toml"
        config.write_text("indent = 3\n", encoding="utf-8")
        assert from_ast(multi_line_if(), config_file=config) == "if true; then\n   echo hi\nfi\n"

    def test_override_beats_config_file(self, tmp_path):
        config = tmp_path / ".shprint.toml"
        config.write_text("indent = 3\n", encoding="utf-8")
        assert from_ast(multi_line_if(), config_file=config, indent=1) == "if true; then\n echo hi\nfi\n"

    def test_config_file_applies_over_options(self, tmp_path):
        """Test config values replace explicit options but keep the options' other fields."""
        config = tmp_path / ".shprint.toml"
        config.write_text("indent = 3\n", encoding="utf-8")
        options = ShellRendererOptions(indent=8, switch_case_indent=True)
        result = from_ast(multi_line_if(), renderer_options=options, config_file=config)
        assert result == "if true; then\n   echo hi\nfi\n"

    def test_unknown_override(self):
        with pytest.raises(ValidationError):
            from_ast(multi_line_if(), tabs=True)

    def test_invalid_override_value(self):
        with pytest.raises(ValidationError):
            from_ast(multi_line_if(), indent=-1)

    def test_write_to_stream(self):
        buffer = StringIO()
        assert from_ast(multi_line_if(), buffer) is None
        assert buffer.getvalue() == "if true; then\n\techo hi\nfi\n"

    def test_write_to_path(self, tmp_path):
        target = tmp_path / "script.sh"
        from_ast(multi_line_if(), target, minify=True)
        assert target.read_text(encoding="utf-8") == "if true;then\necho hi\nfi\n"


@pytest.mark.unit
class TestFromJson:
    """Tests for from_json."""

    def test_json_text(self):
        assert from_json(ast_to_json(multi_line_if())) == "if true; then\n\techo hi\nfi\n"

    def test_json_file(self, tmp_path):
        source = tmp_path / "tree.json"
        source.write_text(ast_to_json(multi_line_if()), encoding="utf-8")
        assert from_json(source, indent=4) == "if true; then\n    echo hi\nfi\n"

    def test_statement_root(self):
        assert from_json(ast_to_json(simple("ls"))) == "ls\n"

    def test_non_statement_root_rejected(self):
        with pytest.raises(ValidationError, match="root"):
            from_json('{"node_type": "Lit", "value": "x"}')

    def test_invalid_json(self):
        with pytest.raises(ParsingError):
            from_json("{broken")


@pytest.mark.unit
def test_package_exports():
    """Test the public names are importable from the package root."""
    assert shprint.__version__
    for name in shprint.__all__:
        assert hasattr(shprint, name), name
