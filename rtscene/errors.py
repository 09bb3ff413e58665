"""Error kinds reported while checking a scene description."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Reasons a scene cannot be accepted; each value is the process exit status."""

    INVALID_ARGUMENT = 1
    INVALID_PATH = 2
    INVALID_FILE = 3
    INVALID_MAP = 4
    MALLOC_ERROR = 5

    def message(self) -> str:
        """Return the line printed to standard error for this kind."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.INVALID_ARGUMENT: "Error: Invalid argument",
    ErrorKind.INVALID_PATH: "Error: Invalid path",
    ErrorKind.INVALID_FILE: "Error: Failed to open file",
    ErrorKind.INVALID_MAP: "Error: Invalid map",
    ErrorKind.MALLOC_ERROR: "Error: Failed to malloc",
}


class SceneError(Exception):
    """Raised when a scene file or one of its lines is rejected."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        text = kind.message()
        if detail:
            text = f"{detail}\n{text}"
        super().__init__(text)

    @property
    def exit_code(self) -> int:
        """Exit status matching the error kind."""
        return self.kind.value