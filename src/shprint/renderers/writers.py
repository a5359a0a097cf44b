#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/renderers/writers.py
"""Output sinks used by the shell renderer.

The renderer is written once against ``BaseWriter`` and never checks which
implementation is active:

- ``BufferedWriter`` collects output and hands it to the real destination in
  a single write on ``flush``.
- ``ColumnWriter`` also tracks the current output column, which the
  renderer needs to keep tokens in their source columns.
- ``LengthCounter`` discards output and only measures how wide it would be
  on one line. The renderer uses it to measure statements for comment
  alignment without producing visible output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Any, Optional

from shprint.utils.io_utils import write_content


class BaseWriter(ABC):
    """Interface shared by all renderer output sinks.

    Attributes
    ----------
    column : int
        Current 1-based output column, or 0 when the writer does not track
        columns.

    """

    column: int = 0

    @abstractmethod
    def write(self, text: str) -> None:
        """Write a chunk of text."""

    @abstractmethod
    def reset(self, target: Optional[IO[Any]] = None) -> None:
        """Drop pending output and retarget the writer."""

    @abstractmethod
    def flush(self) -> None:
        """Deliver pending output to the destination."""


class BufferedWriter(BaseWriter):
    """Buffer output in memory and deliver it to a stream on ``flush``.

    Parameters
    ----------
    target : IO or None, default = None
        Text or binary stream receiving the output

    """

    def __init__(self, target: Optional[IO[Any]] = None):
        self.target = target
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        self._chunks.append(text)

    def reset(self, target: Optional[IO[Any]] = None) -> None:
        self.target = target
        self._chunks = []

    def getvalue(self) -> str:
        """Return the output buffered since the last reset or flush."""
        return "".join(self._chunks)

    def flush(self) -> None:
        """Write the buffered text to the target and flush the target.

        Raises
        ------
        OSError
            If the target stream fails
        ValueError
            If the target stream is closed

        """
        content = self.getvalue()
        self._chunks = []
        if self.target is None:
            return
        write_content(content, self.target)
        target_flush = getattr(self.target, "flush", None)
        if callable(target_flush):
            target_flush()


class ColumnWriter(BufferedWriter):
    """A ``BufferedWriter`` that knows which column the next character lands in.

    The column starts at 1, advances by one per character and returns to 1
    after every newline.
    """

    def __init__(self, target: Optional[IO[Any]] = None):
        super().__init__(target)
        self.column = 1

    def write(self, text: str) -> None:
        newline = text.rfind("\n")
        if newline < 0:
            self.column += len(text)
        else:
            self.column = len(text) - newline
        super().write(text)

    def reset(self, target: Optional[IO[Any]] = None) -> None:
        super().reset(target)
        self.column = 1


class LengthCounter(BaseWriter):
    """A writer that only counts how many characters it receives.

    ``count`` becomes -1 as soon as a newline is written, meaning "does not
    fit on one line"; after that all writes are ignored until ``reset``.
    """

    def __init__(self) -> None:
        self.count = 0

    def write(self, text: str) -> None:
        if self.count < 0:
            return
        if "\n" in text:
            self.count = -1
        else:
            self.count += len(text)

    def reset(self, target: Optional[IO[Any]] = None) -> None:
        self.count = 0

    def flush(self) -> None:
        pass
