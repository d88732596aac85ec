"""String searching, comparison, copying and splitting with C library semantics.

Positions are returned as indices into the string, and ``None`` stands for
"not found". Bounded copies return the new string together with the length
the C routine would report, so callers can detect truncation.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string; integers are code points."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _size(value: int, name: str) -> int:
    size = operator.index(value)
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")
    return size


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``text``, or ``None``.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``text``, or ``None``.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match over that span, otherwise the difference
    of the code points at the first position where they differ; the end of
    a string counts as code point zero.
    """
    n = _size(n, "n")
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns ``None`` when absent.
    """
    length = _size(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied string (at most ``size - 1`` characters; empty when
    ``size`` is zero) and ``len(src)``, the length that was attempted.
    """
    size = _size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length that was attempted:
    ``min(len(dst), size) + len(src)``. When ``dst`` already fills the
    buffer, it is returned unchanged.
    """
    size = _size(size, "size")
    dst_len = min(len(dst), size)
    total = dst_len + len(src)
    if size > 0 and dst_len < size - 1:
        return dst + src[: size - dst_len - 1], total
    return dst, total


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives the empty string.
    """
    start = _size(start, "start")
    length = _size(length, "length")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str | int) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    ch = _char(sep)
    return [word for word in text.split(ch) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` for every element of ``chars`` in place.

    When ``func`` returns a value, it replaces the element; ``None`` leaves
    the element as it was.
    """
    for index, ch in enumerate(list(chars)):
        result = func(index, ch)
        if result is not None:
            chars[index] = result