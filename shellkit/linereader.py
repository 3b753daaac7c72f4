"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 64


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Reads in chunks of ``buffer_size`` bytes. A chunk shorter than that ends
    the current read, so what has arrived so far is returned as a line.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE, encoding: str = "utf-8") -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._pending = bytearray()

    def _fill(self) -> bool:
        while True:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                return False
            self._pending += chunk
            if b"\n" in chunk or len(chunk) < self.buffer_size:
                return True

    def read_line(self) -> Optional[str]:
        """Return the next line, newline included, or None when nothing is left."""
        if b"\n" not in self._pending and not self._fill():
            return None
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode(self.encoding, errors="surrogateescape")

    @property
    def has_pending(self) -> bool:
        """True when bytes are buffered that were not yet returned."""
        return bool(self._pending)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of fd, keeping leftover input between calls."""
    if fd < 0:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    line = reader.read_line()
    if line is None and not reader.has_pending:
        del _readers[fd]
    return line