"""Opening and reading scene description files."""

from __future__ import annotations

from typing import IO, Iterable

from .errors import ErrorKind, SceneError


def has_content(path: str) -> bool:
    """True if ``path`` holds anything other than spaces."""
    return path.strip(" ") != ""


def has_rt_extension(path: str) -> bool:
    """True if the text from the last dot of ``path`` is exactly '.rt'."""
    dot = path.rfind(".")
    return dot != -1 and path[dot:] == ".rt"


def open_scene_file(path: str) -> IO[str]:
    """Check ``path`` and open the scene file it names for reading."""
    if not has_content(path):
        raise SceneError(ErrorKind.INVALID_PATH)
    words = [word for word in path.split(" ") if word]
    if len(words) != 1 or not has_rt_extension(path):
        raise SceneError(ErrorKind.INVALID_PATH)
    try:
        return open(words[0], encoding="utf-8", newline="")
    except OSError as exc:
        raise SceneError(ErrorKind.INVALID_FILE) from exc


def read_scene_lines(stream: Iterable[str]) -> list[str]:
    """Return every line of ``stream`` with surrounding newlines removed."""
    lines = [line.strip("\n") for line in stream]
    if not lines:
        raise SceneError(ErrorKind.INVALID_MAP)
    return lines