"""Checking every line of a scene description."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from .elements import (
    is_valid_ambient,
    is_valid_camera,
    is_valid_cylinder,
    is_valid_light,
    is_valid_plane,
    is_valid_sphere,
)
from .errors import ErrorKind, SceneError
from .fields import split_fields
from .files import open_scene_file, read_scene_lines

_CHECKS: dict[str, Callable[[Sequence[str]], bool]] = {
    "A": is_valid_ambient,
    "C": is_valid_camera,
    "L": is_valid_light,
    "sp": is_valid_sphere,
    "pl": is_valid_plane,
    "cy": is_valid_cylinder,
}


def validate_line(fields: Sequence[str] | None) -> None:
    """Raise SceneError if the fields of one line do not form a valid element."""
    if not fields:
        return
    check = _CHECKS.get(fields[0])
    if check is None:
        raise SceneError(ErrorKind.INVALID_MAP, f"Unknown identifier: {fields[0]}")
    if not check(fields):
        raise SceneError(ErrorKind.INVALID_MAP)


def validate_scene(lines: Iterable[str]) -> None:
    """Check every line, splitting each on spaces."""
    for line in lines:
        validate_line(split_fields(line, " "))


def validate_file(path: str) -> list[str]:
    """Open, read and check the scene file at ``path``; return its lines."""
    with open_scene_file(path) as stream:
        lines = read_scene_lines(stream)
    validate_scene(lines)
    return lines