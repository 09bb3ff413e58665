import pytest

from rtscene.elements import (
    is_valid_ambient,
    is_valid_camera,
    is_valid_cylinder,
    is_valid_light,
    is_valid_plane,
    is_valid_sphere,
)


@pytest.mark.parametrize(
    "check, line",
    [
        (is_valid_ambient, "A 0.2 255,255,255"),
        (is_valid_camera, "C -50.0,0,20 0,0,1 70"),
        (is_valid_light, "L -40.0,50.0,0.0 0.6 10,0,255"),
        (is_valid_sphere, "sp 0.0,0.0,20.6 12.6 10,0,255"),
        (is_valid_plane, "pl 0.0,0.0,-10.0 0.0,1.0,0.0 0,0,225"),
        (is_valid_cylinder, "cy 50.0,0.0,20.6 0.0,0.0,1.0 14.2 21.42 10,0,255"),
    ],
)
def test_valid_lines(check, line):
    assert check(line.split()) is True


@pytest.mark.parametrize(
    "check, line",
    [
        (is_valid_ambient, "A 1.5 255,255,255"),
        (is_valid_ambient, "A 0.2 256,0,0"),
        (is_valid_ambient, "A 0.2 255,255,255 extra"),
        (is_valid_ambient, "A 0.2"),
        (is_valid_camera, "C 0,0,0 2,0,0 70"),
        (is_valid_camera, "C 0,0,0 0,0,1 181"),
        (is_valid_camera, "C 0,0 0,0,1 70"),
        (is_valid_light, "L 0,0,0 -0.1 0,0,0"),
        (is_valid_light, "L 0,0,0 0.5 0,0"),
        (is_valid_sphere, "sp 0,0,0 -1 0,0,0"),
        (is_valid_sphere, "sp 0,0,0 abc 0,0,0"),
        (is_valid_plane, "pl 0,0,0 a,0,0 0,0,0"),
        (is_valid_cylinder, "cy 0,0,0 0,0,1 1 2"),
        (is_valid_cylinder, "cy 0,0,0 0,0,1 1 -2 0,0,0"),
        (is_valid_cylinder, "cy 0,0,0 0,3,1 1 2 0,0,0"),
    ],
)
def test_invalid_lines(check, line):
    assert check(line.split()) is False


def test_wrong_identifier_is_rejected():
    assert is_valid_ambient("C 0.2 255,255,255".split()) is False
    assert is_valid_sphere("pl 0,0,0 1 0,0,0".split()) is False


def test_empty_or_missing_fields():
    assert is_valid_camera([]) is False
    assert is_valid_light(None) is False


def test_plane_normal_is_not_range_checked():
    assert is_valid_plane("pl 0,0,0 5,5,5 0,0,0".split()) is True