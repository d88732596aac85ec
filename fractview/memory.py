"""Byte-buffer filling, copying, comparing and searching.

Buffers are ``bytes``-like objects; the functions that write need a
writable one such as ``bytearray`` or a writable ``memoryview``. A length
that is negative or runs past a buffer raises :class:`ValueError`.
"""

from __future__ import annotations

import operator

__all__ = [
    "memset",
    "bzero",
    "memcpy",
    "memmove",
    "memcmp",
    "memchr",
    "calloc",
]


def _length(length: int, *buffers: object) -> int:
    """Validate ``length`` against every buffer given and return it."""
    length = operator.index(length)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        size = memoryview(buffer).nbytes
        if length > size:
            raise ValueError(f"length {length} exceeds buffer of {size} bytes")
    return length


def memset(buffer: bytearray | memoryview, value: int, length: int) -> bytearray | memoryview:
    """Fill the first ``length`` bytes with ``value`` (taken modulo 256).

    Returns the buffer itself.
    """
    length = _length(length, buffer)
    byte = operator.index(value) & 0xFF
    memoryview(buffer).cast("B")[:length] = bytes([byte]) * length
    return buffer


def bzero(buffer: bytearray | memoryview, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def memcpy(
    dst: bytearray | memoryview, src: bytes | bytearray | memoryview, length: int
) -> bytearray | memoryview:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    length = _length(length, dst, src)
    memoryview(dst).cast("B")[:length] = memoryview(src).cast("B")[:length]
    return dst


def memmove(
    dst: bytearray | memoryview, src: bytes | bytearray | memoryview, length: int
) -> bytearray | memoryview:
    """Copy ``length`` bytes from ``src`` to ``dst``, safe when they overlap.

    Returns ``dst``.
    """
    length = _length(length, dst, src)
    data = bytes(memoryview(src).cast("B")[:length])
    memoryview(dst).cast("B")[:length] = data
    return dst


def memcmp(
    s1: bytes | bytearray | memoryview, s2: bytes | bytearray | memoryview, length: int
) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns zero when they are equal, otherwise the difference of the first
    pair of bytes that differ.
    """
    length = _length(length, s1, s2)
    first = memoryview(s1).cast("B")[:length]
    second = memoryview(s2).cast("B")[:length]
    for a, b in zip(first, second):
        if a != b:
            return a - b
    return 0


def memchr(buffer: bytes | bytearray | memoryview, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` (modulo 256).

    Only the first ``length`` bytes are searched; ``None`` when absent.
    """
    length = _length(length, buffer)
    byte = operator.index(value) & 0xFF
    index = bytes(memoryview(buffer).cast("B")[:length]).find(byte)
    return None if index < 0 else index


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count}, {size}")
    return bytearray(count * size)