"""Substring search and word splitting used when reading XPM text."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the first position of ``needle`` in ``text``, or -1.

    The search fails at once when ``needle`` is longer than ``limit``.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that start inside double quotes."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    for pos, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]