import io

import pytest

from rtscene.errors import ErrorKind, SceneError
from rtscene.files import (
    has_content,
    has_rt_extension,
    open_scene_file,
    read_scene_lines,
)

SCENE_TEXT = "A 0.2 255,255,255\n\nC -50,0,20 0,0,1 70\n"


@pytest.fixture
def scene_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "scene.rt").write_text(SCENE_TEXT, encoding="utf-8")
    return tmp_path


def test_has_content():
    assert has_content("a.rt")
    assert has_content("   x")
    assert not has_content("")
    assert not has_content("     ")


def test_has_rt_extension():
    assert has_rt_extension("scene.rt")
    assert has_rt_extension("dir.v2/scene.rt")
    assert not has_rt_extension("scene.rtx")
    assert not has_rt_extension("scene.txt")
    assert not has_rt_extension("scene")
    assert not has_rt_extension("scene.rt.bak")


def test_open_and_read(scene_dir):
    with open_scene_file("scene.rt") as stream:
        lines = read_scene_lines(stream)
    assert lines == SCENE_TEXT.rstrip("\n").split("\n")


@pytest.mark.parametrize("path", ["", "   ", "scene.txt", "a.rt b.rt", "scene"])
def test_bad_paths(scene_dir, path):
    with pytest.raises(SceneError) as info:
        open_scene_file(path)
    assert info.value.kind is ErrorKind.INVALID_PATH


def test_missing_file(scene_dir):
    with pytest.raises(SceneError) as info:
        open_scene_file("missing.rt")
    assert info.value.kind is ErrorKind.INVALID_FILE


def test_read_strips_only_newlines():
    lines = read_scene_lines(io.StringIO("sp 0,0,0 1 1,2,3\r\n\n  pl x  \n"))
    assert lines == ["sp 0,0,0 1 1,2,3\r", "", "  pl x  "]


def test_read_keeps_last_line_without_newline():
    assert read_scene_lines(io.StringIO("L 1,1,1 0.5 1,1,1")) == ["L 1,1,1 0.5 1,1,1"]


def test_read_empty_stream_is_invalid_map():
    with pytest.raises(SceneError) as info:
        read_scene_lines(io.StringIO(""))
    assert info.value.kind is ErrorKind.INVALID_MAP


def test_read_from_list_of_lines():
    source = ["a\n", "b\n", "c"]
    assert read_scene_lines(source) == ["a", "b", "c"]