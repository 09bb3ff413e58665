"""Reading XPM pixmaps, from memory or from a file, into 32-bit pixel rows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .colors import text_to_rgb
from .numbers import parse_int
from .words import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_NONE_COLOR = -1


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap; ``pixels[y][x]`` is a 32-bit 0xAARRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


class XpmError(ValueError):
    """Raised when XPM data cannot be decoded."""


def _blank_comments(text: str, opener: str, closer: str, extra: int) -> str:
    while True:
        begin = find_unquoted(text, opener, len(text))
        if begin == -1:
            return text
        rest_start = begin + len(opener)
        end = find(text[rest_start:], closer, len(text) - rest_start)
        stop = min(begin + end + extra, len(text))
        text = text[:begin] + " " * (stop - begin) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside double quotes with spaces."""
    text = _blank_comments(text, "/*", "*/", 4)
    return _blank_comments(text, "//", "\n", 3)


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each complete double-quoted string in ``text``."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def color_key(chars: str) -> int:
    """Pack the characters naming a colour into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == _NONE_COLOR else color & 0xFFFFFFFF


def _read_palette(
    source: Iterator[str], count: int, chars_per_pixel: int
) -> dict[int, int]:
    # Short keys go into a direct table where later entries overwrite earlier
    # ones; longer keys are searched so that the first definition wins.
    direct = chars_per_pixel <= 2
    palette: dict[int, int] = {}
    for _ in range(count):
        line = _next_line(source, "colour definition")
        if len(line) < chars_per_pixel:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[chars_per_pixel:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour given in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour given in {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = color_key(line[:chars_per_pixel])
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode the header, colour table and pixel rows given as lines."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (parse_int(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")
    palette = _read_palette(source, ncolors, cpp)
    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(palette.get(color_key(line[x * cpp : (x + 1) * cpp]), 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def xpm_to_image(xpm_data: Sequence[str]) -> XpmImage:
    """Decode XPM data held as a sequence of strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))