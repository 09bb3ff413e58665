from rtscene.cli import main
from rtscene.errors import ErrorKind


def test_no_arguments(capsys):
    assert main([]) == ErrorKind.INVALID_ARGUMENT.value
    assert ErrorKind.INVALID_ARGUMENT.message() in capsys.readouterr().err


def test_too_many_arguments(capsys):
    assert main(["a.rt", "b.rt"]) == ErrorKind.INVALID_ARGUMENT.value
    assert ErrorKind.INVALID_ARGUMENT.message() in capsys.readouterr().err


def test_valid_file(tmp_path, capsys):
    path = tmp_path / "ok.rt"
    path.write_text("A 0.2 255,255,255\nC 0,0,0 0,0,1 70\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().err == ""


def test_blank_path(capsys):
    assert main(["   "]) == ErrorKind.INVALID_PATH.value
    assert ErrorKind.INVALID_PATH.message() in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.rt")]) == ErrorKind.INVALID_FILE.value
    assert ErrorKind.INVALID_FILE.message() in capsys.readouterr().err


def test_unknown_identifier_reported(tmp_path, capsys):
    path = tmp_path / "bad.rt"
    path.write_text("zz 1 2 3\n", encoding="utf-8")
    assert main([str(path)]) == ErrorKind.INVALID_MAP.value
    err = capsys.readouterr().err
    assert "Unknown identifier: zz" in err
    assert ErrorKind.INVALID_MAP.message() in err
    assert err.index("Unknown identifier") < err.index(ErrorKind.INVALID_MAP.message())