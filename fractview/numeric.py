"""Decimal parsing and linear range mapping for the fractal plane."""

from __future__ import annotations

from fractview.ctext import atoi


def atod(text: str) -> float:
    """Parse a decimal number such as ``-0.75`` into a float.

    The integer part is read with :func:`atoi` and its magnitude taken;
    the sign comes from the minus signs before the decimal point, each one
    flipping it. Digits after the point are added one place at a time.
    Text without a point is read as its integer part alone.
    """
    number = float(abs(atoi(text)))
    head, point, tail = text.partition(".")
    sign = -1.0 if head.count("-") % 2 else 1.0
    if point:
        place = 1.0
        for ch in tail:
            if not "0" <= ch <= "9":
                break
            place *= 0.1
            number += place * (ord(ch) - ord("0"))
    return number * sign


def scale(
    value: float,
    old_min: float,
    old_max: float,
    new_min: float,
    new_max: float,
) -> float:
    """Map ``value`` linearly from [old_min, old_max] onto [new_min, new_max]."""
    return (value - old_min) * (new_max - new_min) / (old_max - old_min) + new_min