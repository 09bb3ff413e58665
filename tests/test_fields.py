import pytest

from rtscene.fields import (
    is_valid_diameter,
    is_valid_direction_vector,
    is_valid_fov,
    is_valid_position_vector,
    is_valid_rgb_argument,
    split_fields,
)


def test_split_fields_drops_empty_pieces():
    assert split_fields("a,,b,", ",") == ["a", "b"]
    assert split_fields("  sp  1,2,3 ", " ") == ["sp", "1,2,3"]
    assert split_fields("", ",") == []


def test_split_fields_rejoins_to_nonempty_text():
    text = "x y  z"
    parts = split_fields(text, " ")
    assert " ".join(parts).split() == text.split()
    assert all(parts)


@pytest.mark.parametrize("text", ["0,0,0", "-50.0,0,20.6", "1,,2,3", "+1,-2,.5"])
def test_valid_positions(text):
    assert is_valid_position_vector(text)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "1,a,3", "", None, "1;2;3"])
def test_invalid_positions(text):
    assert not is_valid_position_vector(text)


@pytest.mark.parametrize("text", ["255,255,255", "0,0,0", "10,0,255", "+1,2,3"])
def test_valid_rgb(text):
    assert is_valid_rgb_argument(text)


@pytest.mark.parametrize("text", ["256,0,0", "-1,0,0", "1.5,0,0", "1,2", "1,2,3,4", None])
def test_invalid_rgb(text):
    assert not is_valid_rgb_argument(text)


@pytest.mark.parametrize("text", ["0,0,1", "0.0,1.0,0.0", "-1,-1,-1"])
def test_valid_directions(text):
    assert is_valid_direction_vector(text)


@pytest.mark.parametrize("text", ["0,0,1.5", "0,-2,0", "a,0,0", "0,1", None])
def test_invalid_directions(text):
    assert not is_valid_direction_vector(text)


@pytest.mark.parametrize("text", ["70", "+70", "0", "180"])
def test_valid_fov(text):
    assert is_valid_fov(text)


@pytest.mark.parametrize("text", ["181", "-5", "7a", "70.5"])
def test_invalid_fov(text):
    assert not is_valid_fov(text)


@pytest.mark.parametrize("text", ["12.6", "+3", "0", "21.42"])
def test_valid_diameter(text):
    assert is_valid_diameter(text)


@pytest.mark.parametrize("text", ["-1", "1e5", "abc", None, "1,2"])
def test_invalid_diameter(text):
    assert not is_valid_diameter(text)