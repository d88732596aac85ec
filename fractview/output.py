"""Unbuffered writes of characters, text and numbers to file descriptors."""

from __future__ import annotations

import operator
import os


def _write(fd: int, data: bytes) -> int:
    """Write all of ``data`` to ``fd``; a negative descriptor writes nothing."""
    if fd < 0:
        return 0
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char(c: str | int, fd: int) -> int:
    """Write one character (or byte value) to ``fd``; return bytes written."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _write(fd, c.encode("utf-8"))
    return _write(fd, bytes([operator.index(c)]))


def put_str(text: str, fd: int) -> int:
    """Write ``text`` to ``fd``; return bytes written."""
    return _write(fd, text.encode("utf-8"))


def put_endl(text: str, fd: int) -> int:
    """Write ``text`` followed by a newline to ``fd``; return bytes written."""
    return _write(fd, (text + "\n").encode("utf-8"))


def put_number(number: int, fd: int) -> int:
    """Write the decimal form of ``number`` to ``fd``; return bytes written."""
    return _write(fd, str(operator.index(number)).encode("ascii"))