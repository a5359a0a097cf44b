#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_render_pipeline.py
"""Integration tests for rendering whole scripts end to end.

These tests exercise JSON loading, configuration discovery and file output
together on a script with a shebang, a function and a here-document.
"""

import pytest
from utils import call, comment, lit, pos, script, simple, stmt, stmt_list, with_trailing, word

from shprint import from_ast, from_json, load_options
from shprint.ast import BinaryCmd, Block, FuncDecl, Redirect, Stmt, Word, ast_to_json

EXPECTED = "#!/bin/sh\n\ngreet() {\n\techo hello # say hi\n}\n\ngreet && cat <<EOF\nbody\nEOF\n"


def sample_script():
    """Build the tree for the script in ``EXPECTED``."""
    block = Block(
        body=stmt_list(with_trailing(simple("echo hello", 4, 2), " say hi")),
        lbrace=pos(3, 9),
        rbrace=pos(5, 1),
    )
    func = FuncDecl(name=lit("greet", 3, 1), body=stmt(block, 3, 9), position=pos(3, 1))
    heredoc = Redirect(
        op="<<",
        word=word("EOF", 7, 16),
        hdoc=Word(parts=[lit("body\n", 8)]),
        op_pos=pos(7, 14),
    )
    binary = BinaryCmd(
        op="&&",
        x=simple("greet", 7, 1),
        y=stmt(call("cat", 7, 10), 7, 10, redirs=[heredoc]),
        op_pos=pos(7, 7),
    )
    return script(
        stmt(func, 3, 1, comments=[comment("!/bin/sh", 1)]),
        Stmt(cmd=binary, position=pos(7, 1)),
    )


@pytest.mark.integration
class TestRenderPipeline:
    """End-to-end rendering of a complete script."""

    def test_default_style(self):
        assert from_ast(sample_script()) == EXPECTED

    def test_minified(self):
        """Test minify drops comments, blank lines and optional spaces."""
        assert from_ast(sample_script(), minify=True) == "greet(){\necho hello\n}\ngreet&&cat<<EOF\nbody\nEOF\n"

    def test_json_file_to_output_file_with_discovered_config(self, isolated_config):
        """Test a serialized tree renders to disk using project settings."""
        (isolated_config / "pyproject.toml").write_text("[tool.shprint]\nindent = 2\n", encoding="utf-8")
        source = isolated_config / "tree.json"
        source.write_text(ast_to_json(sample_script(), indent=2), encoding="utf-8")
        target = isolated_config / "out.sh"

        from_json(source, target, renderer_options=load_options())

        assert target.read_text(encoding="utf-8") == EXPECTED.replace("\techo", "  echo")

    def test_rendering_is_repeatable(self):
        """Test rendering the same tree twice gives identical output."""
        tree = sample_script()
        assert from_ast(tree) == from_ast(tree)
