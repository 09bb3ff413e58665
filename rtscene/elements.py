"""Checks on the fields of a single scene element line."""

from __future__ import annotations

from typing import Sequence

from .fields import (
    is_valid_diameter,
    is_valid_direction_vector,
    is_valid_fov,
    is_valid_position_vector,
    is_valid_rgb_argument,
)
from .numbers import is_valid_brightness_ratio


def _has_shape(fields: Sequence[str] | None, identifier: str, count: int) -> bool:
    return bool(fields) and fields[0] == identifier and len(fields) == count


def is_valid_ambient(fields: Sequence[str] | None) -> bool:
    """True for ``A <ratio> <r,g,b>``."""
    if not _has_shape(fields, "A", 3):
        return False
    return is_valid_brightness_ratio(fields[1]) and is_valid_rgb_argument(fields[2])


def is_valid_camera(fields: Sequence[str] | None) -> bool:
    """True for ``C <x,y,z> <dx,dy,dz> <fov>``."""
    if not _has_shape(fields, "C", 4):
        return False
    return (
        is_valid_position_vector(fields[1])
        and is_valid_direction_vector(fields[2])
        and is_valid_fov(fields[3])
    )


def is_valid_light(fields: Sequence[str] | None) -> bool:
    """True for ``L <x,y,z> <ratio> <r,g,b>``."""
    if not _has_shape(fields, "L", 4):
        return False
    return (
        is_valid_position_vector(fields[1])
        and is_valid_brightness_ratio(fields[2])
        and is_valid_rgb_argument(fields[3])
    )


def is_valid_sphere(fields: Sequence[str] | None) -> bool:
    """True for ``sp <x,y,z> <diameter> <r,g,b>``."""
    if not _has_shape(fields, "sp", 4):
        return False
    return (
        is_valid_position_vector(fields[1])
        and is_valid_diameter(fields[2])
        and is_valid_rgb_argument(fields[3])
    )


def is_valid_plane(fields: Sequence[str] | None) -> bool:
    """True for ``pl <x,y,z> <nx,ny,nz> <r,g,b>``; the normal is checked as a position."""
    if not _has_shape(fields, "pl", 4):
        return False
    return (
        is_valid_position_vector(fields[1])
        and is_valid_position_vector(fields[2])
        and is_valid_rgb_argument(fields[3])
    )


def is_valid_cylinder(fields: Sequence[str] | None) -> bool:
    """True for ``cy <x,y,z> <dx,dy,dz> <diameter> <height> <r,g,b>``."""
    if not _has_shape(fields, "cy", 6):
        return False
    return (
        is_valid_position_vector(fields[1])
        and is_valid_direction_vector(fields[2])
        and is_valid_diameter(fields[3])
        and is_valid_diameter(fields[4])
        and is_valid_rgb_argument(fields[5])
    )