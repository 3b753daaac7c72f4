"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from shellkit.chars import itoa


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char_fd(char: str, fd: int) -> int:
    """Write one character to fd; return the number of bytes written."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _write_all(fd, char.encode())


def put_str_fd(text: str, fd: int) -> int:
    """Write text to fd; return the number of bytes written."""
    return _write_all(fd, text.encode())


def put_endl_fd(text: str, fd: int) -> int:
    """Write text followed by a newline to fd."""
    return _write_all(fd, text.encode() + b"\n")


def put_nbr_fd(number: int, fd: int) -> int:
    """Write the decimal form of a 32-bit signed integer to fd."""
    return _write_all(fd, itoa(number).encode())