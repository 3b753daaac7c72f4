"""Byte-buffer helpers working on bytearrays and other byte sequences."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: MutableSequence, value: int, n: int):
    """Fill the first n bytes of buffer with value (truncated to a byte)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: MutableSequence, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def memcpy(dest: MutableSequence, src: Buffer, n: int):
    """Copy the first n bytes of src over the start of dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: MutableSequence, dest: int, src: int, n: int):
    """Copy n bytes inside one buffer from offset src to offset dest.

    Overlapping regions are handled as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(buffer: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_count(n, buffer)
    index = bytes(buffer[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Compare n bytes as unsigned values.

    Returns 0 when they are equal, otherwise the difference of the first
    pair of bytes that differ.
    """
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0