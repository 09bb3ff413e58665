"""Checks on numeric fields of a scene line."""

from __future__ import annotations

import re

_FLOAT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)(?:\.([0-9]*))?")
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_float(text: str) -> float:
    """Read the leading decimal number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    sign, whole, fraction = match.group(1), match.group(2), match.group(3) or ""
    if not whole and not fraction:
        return 0.0
    value = float(f"{whole or '0'}.{fraction or '0'}")
    return -value if sign == "-" else value


def parse_int(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def is_in_range_float(text: str | None, low: float, high: float) -> bool:
    """True if the number read from ``text`` lies within [low, high]."""
    if text is None:
        return False
    return low <= parse_float(text) <= high


def is_in_range_int(text: str | None, low: float, high: float) -> bool:
    """True if the integer read from ``text`` lies within [low, high]."""
    if text is None:
        return False
    return low <= parse_int(text) <= high


def is_valid_float(text: str | None) -> bool:
    """True for an optionally signed decimal with at most one dot."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    has_dot = False
    for char in body:
        if char == ".":
            if has_dot:
                return False
            has_dot = True
        elif not _is_digit(char):
            return False
    return _is_digit(text[-1]) or (has_dot and len(text) > 1)


def is_valid_number(text: str | None) -> bool:
    """True when ``text`` is an optional sign followed only by digits."""
    if text is None:
        return False
    body = text[1:] if text[:1] in ("+", "-") else text
    return all(_is_digit(char) for char in body)


def is_valid_brightness_ratio(text: str | None) -> bool:
    """True for a decimal between 0.0 and 1.0 inclusive."""
    return is_valid_float(text) and is_in_range_float(text, 0.0, 1.0)