"""Checks on comma-separated fields: vectors, colours, angles and sizes."""

from __future__ import annotations

from .numbers import (
    is_in_range_float,
    is_in_range_int,
    is_valid_float,
    is_valid_number,
    parse_float,
)


def split_fields(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [piece for piece in text.split(separator) if piece]


def _triple(text: str | None) -> list[str] | None:
    if text is None:
        return None
    parts = split_fields(text, ",")
    return parts if len(parts) == 3 else None


def is_valid_position_vector(text: str | None) -> bool:
    """True for three comma-separated decimals."""
    parts = _triple(text)
    return parts is not None and all(is_valid_float(part) for part in parts)


def is_valid_rgb_argument(text: str | None) -> bool:
    """True for three comma-separated integers, each from 0 to 255."""
    parts = _triple(text)
    return parts is not None and all(
        is_valid_number(part) and is_in_range_int(part, 0, 255) for part in parts
    )


def is_valid_direction_vector(text: str | None) -> bool:
    """True for three comma-separated decimals, each from -1 to 1."""
    parts = _triple(text)
    return parts is not None and all(
        is_valid_float(part) and is_in_range_float(part, -1.0, 1.0) for part in parts
    )


def is_valid_fov(text: str) -> bool:
    """True for an unsigned or '+'-signed integer from 0 to 180."""
    body = text[1:] if text.startswith("+") else text
    if not all("0" <= char <= "9" for char in body):
        return False
    return is_in_range_int(text, 0, 180)


def is_valid_diameter(text: str | None) -> bool:
    """True for a non-negative size made of digits and dots."""
    if text is None:
        return False
    body = text[1:] if text.startswith("+") else text
    if not all("0" <= char <= "9" or char == "." for char in body):
        return False
    return parse_float(text) >= 0