"""Bounded line reader for text streams such as /proc/cpuinfo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TextIO

from .string_view import index_of_char

DEFAULT_BUFFER_SIZE = 1024


@dataclass(frozen=True)
class LineResult:
    """One line read from a stream.

    ``eof`` marks the last result: its ``line`` holds whatever followed the
    final newline. ``full_line`` is False when the line did not fit in the
    buffer and was cut short.
    """

    line: str
    eof: bool
    full_line: bool


class StackLineReader:
    """Read lines through a fixed-size buffer, truncating lines that overflow it."""

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._view = ""
        self._skip_mode = False

    def _read(self, size: int) -> str:
        return self._stream.read(size) if size > 0 else ""

    def _skip_to_next_line(self) -> None:
        while True:
            self._view = self._read(self._buffer_size)
            if not self._view:
                return
            eol = index_of_char(self._view, "\n")
            if eol >= 0:
                self._view = self._view[eol + 1 :]
                return

    def next_line(self) -> LineResult:
        """Return the next line, without its newline."""
        if self._skip_mode:
            self._skip_to_next_line()
            self._skip_mode = False
        can_load_more = len(self._view) < self._buffer_size
        eol = index_of_char(self._view, "\n")
        if eol < 0 and can_load_more:
            chunk = self._read(self._buffer_size - len(self._view))
            if not chunk:
                return LineResult(self._view, eof=True, full_line=True)
            self._view += chunk
            eol = index_of_char(self._view, "\n")
        if eol < 0:
            self._skip_mode = True
            return LineResult(self._view, eof=False, full_line=False)
        line = self._view[:eol]
        self._view = self._view[eol + 1 :]
        return LineResult(line, eof=False, full_line=True)

    def __iter__(self) -> Iterator[LineResult]:
        """Yield results up to and including the end-of-file one."""
        while True:
            result = self.next_line()
            yield result
            if result.eof:
                return