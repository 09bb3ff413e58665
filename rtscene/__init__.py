"""Validation of .rt ray-tracing scene files, scene data types, XPM decoding and X11 colour names."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "colors",
    "elements",
    "errors",
    "fields",
    "files",
    "numbers",
    "scene",
    "validation",
    "words",
    "xpm",
]