"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 10

Source = Union[int, IO]
Chunk = Union[str, bytes]


class LineReader:
    """Return successive lines of a stream, each with its trailing newline.

    The stream is a file-like object with read(size), text or binary, or an
    integer file descriptor, which yields bytes. Data is read buffer_size at a
    time; text left over after a line is kept for the next call.
    """

    def __init__(self, stream: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(stream, int) and stream < 0:
            raise ValueError(f"invalid file descriptor {stream}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None
        self._eof = False

    def _read(self) -> Chunk:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)
        return self._stream.read(self._buffer_size)

    def _line_end(self) -> int:
        """Position of the first newline in the pending data, or -1."""
        pending = self._pending
        if not pending:
            return -1
        if isinstance(pending, str):
            return pending.find("\n")
        return pending.find(b"\n")

    def next_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        while not self._eof and self._line_end() < 0:
            try:
                chunk = self._read()
            except OSError:
                self._pending = None
                raise
            if not chunk:
                self._eof = True
            elif self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk
        if not self._pending:
            return None
        end = self._line_end()
        if end < 0:
            line, self._pending = self._pending, self._pending[:0]
        else:
            line, self._pending = self._pending[:end + 1], self._pending[end + 1:]
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line