#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_writers.py
"""Unit tests for the renderer output sinks."""

from io import BytesIO, StringIO

import pytest

from shprint.renderers.writers import BufferedWriter, ColumnWriter, LengthCounter


@pytest.mark.unit
class TestBufferedWriter:
    """Tests for BufferedWriter."""

    def test_nothing_reaches_target_before_flush(self):
        """Test output stays buffered until flush."""
        target = StringIO()
        writer = BufferedWriter(target)
        writer.write("echo ")
        writer.write("hi\n")
        assert target.getvalue() == ""
        assert writer.getvalue() == "echo hi\n"

        writer.flush()
        assert target.getvalue() == "echo hi\n"
        assert writer.getvalue() == ""

    def test_flush_to_binary_target(self):
        """Test binary targets receive UTF-8."""
        target = BytesIO()
        writer = BufferedWriter(target)
        writer.write("é\n")
        writer.flush()
        assert target.getvalue() == "é\n".encode("utf-8")

    def test_flush_without_target_discards(self):
        """Test flushing a writer with no target just drops the buffer."""
        writer = BufferedWriter()
        writer.write("x")
        writer.flush()
        assert writer.getvalue() == ""

    def test_reset_drops_pending_output(self):
        """Test reset clears the buffer and swaps the target."""
        first, second = StringIO(), StringIO()
        writer = BufferedWriter(first)
        writer.write("lost")
        writer.reset(second)
        writer.write("kept")
        writer.flush()
        assert first.getvalue() == ""
        assert second.getvalue() == "kept"

    def test_no_column_tracking(self):
        """Test a plain buffered writer reports column 0."""
        writer = BufferedWriter()
        writer.write("abc")
        assert writer.column == 0


@pytest.mark.unit
class TestColumnWriter:
    """Tests for ColumnWriter."""

    def test_column_starts_at_one(self):
        assert ColumnWriter().column == 1

    def test_column_advances(self):
        """Test the column follows written characters."""
        writer = ColumnWriter()
        writer.write("abc")
        assert writer.column == 4

    def test_column_after_newline(self):
        """Test the column restarts after the last newline."""
        writer = ColumnWriter()
        writer.write("abc")
        writer.write("x\nyz")
        assert writer.column == 3
        writer.write("\n")
        assert writer.column == 1

    def test_reset_restores_column(self):
        writer = ColumnWriter()
        writer.write("abc")
        writer.reset()
        assert writer.column == 1
        assert writer.getvalue() == ""


@pytest.mark.unit
class TestLengthCounter:
    """Tests for LengthCounter."""

    def test_counts_characters(self):
        counter = LengthCounter()
        counter.write("echo")
        counter.write(" hi")
        assert counter.count == 7

    def test_newline_marks_overflow(self):
        """Test a newline makes the count -1 and keeps it there."""
        counter = LengthCounter()
        counter.write("ab")
        counter.write("\n")
        counter.write("cd")
        assert counter.count == -1

    def test_reset(self):
        counter = LengthCounter()
        counter.write("a\n")
        counter.reset()
        assert counter.count == 0

    def test_flush_is_noop(self):
        counter = LengthCounter()
        counter.write("abc")
        counter.flush()
        assert counter.count == 3
