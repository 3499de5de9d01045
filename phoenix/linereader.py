"""Line-by-line reading from file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 8


class LineReader:
    """Read a file descriptor one line at a time.

    Data is pulled from the descriptor in chunks of ``buffer_size`` bytes.
    Bytes that follow a returned line are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._cache = b""

    def next_line(self) -> str | None:
        """Return the next line, newline included, or None at end of input."""
        while b"\n" not in self._cache:
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                break
            self._cache += chunk
        if not self._cache:
            return None
        line, newline, self._cache = self._cache.partition(b"\n")
        return (line + newline).decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd``, keeping separate state per descriptor."""
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.next_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line