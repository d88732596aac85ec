"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

import operator
import re

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as the classic C routine does.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text with no digits yields 0.
    """
    match = _LEADING_INT.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(number))


def isalpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: str | int, low: str, high: str, shift: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged.

    A character in gives a character out, an integer in gives an integer out.
    """
    return _convert(c, "a", "z", -32)


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged.

    A character in gives a character out, an integer in gives an integer out.
    """
    return _convert(c, "A", "Z", 32)