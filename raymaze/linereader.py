"""Buffered line-by-line reading from a file descriptor or file object."""

from __future__ import annotations

import io
import os
from typing import IO, Iterator, Union

Source = Union[int, IO[bytes], IO[str]]


class LineReader:
    """Read lines, each with its trailing newline, in chunks of a fixed size."""

    def __init__(self, fd: Source, buffer_size: int = io.DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(fd, int) and fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._source = fd
        self._buffer_size = buffer_size
        self._pending: bytes | str | None = None
        self._eof = False

    def _read_chunk(self) -> bytes | str:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def _fill(self) -> None:
        """Read until the pending data holds a newline or the source ends."""
        while not self._eof:
            if self._pending is not None and _newline_in(self._pending):
                return
            chunk = self._read_chunk()
            if not chunk:
                self._eof = True
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def readline(self) -> str | None:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        newline = "\n" if isinstance(pending, str) else b"\n"
        cut = pending.find(newline)
        if cut == -1:
            line, self._pending = pending, None
        else:
            line, self._pending = pending[:cut + 1], pending[cut + 1:] or None
        if isinstance(line, bytes):
            return line.decode("utf-8", errors="surrogateescape")
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


def _newline_in(data: bytes | str) -> bool:
    return ("\n" if isinstance(data, str) else b"\n") in data


def read_lines(fd: Source, buffer_size: int = io.DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield every line from ``fd``."""
    yield from LineReader(fd, buffer_size)