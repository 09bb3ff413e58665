"""Command line entry point: check one scene file."""

from __future__ import annotations

import sys
from typing import Sequence

from .errors import ErrorKind, SceneError
from .validation import validate_file


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the scene file named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise SceneError(ErrorKind.INVALID_ARGUMENT)
        validate_file(args[0])
    except SceneError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())