import pytest

from rtscene.xpm import (
    XpmError,
    XpmImage,
    color_key,
    parse_xpm,
    quoted_lines,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["3 2 3 1", "a c #FF0000", "b c None", ". c black", "ab.", "..a"]


def test_parse_sample_pixels():
    image = parse_xpm(SAMPLE)
    assert image.width == 3
    assert image.height == 2
    assert image.pixels == (
        (0xFF0000, 0xFF000000, 0x0),
        (0x0, 0x0, 0xFF0000),
    )


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(SAMPLE) == parse_xpm(SAMPLE)


def test_dimensions_match_rows():
    image = parse_xpm(SAMPLE)
    assert len(image.pixels) == image.height
    assert all(len(row) == image.width for row in image.pixels)


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "x c light green", "x"])
    assert image.pixels == ((0x90EE90,),)


def test_words_before_colour_key_are_skipped():
    image = parse_xpm(["1 1 1 1", "a s sym c #00FF00", "a"])
    assert image.pixels == ((0x00FF00,),)


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.pixels == ((0x000001,),)


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == ((0x000002,),)


def test_multi_char_pixels():
    image = parse_xpm(["2 1 2 2", "aa c #000010", "bb c #000020", "bbaa"])
    assert image.pixels == ((0x000020, 0x000010),)


def test_unknown_key_gives_zero():
    image = parse_xpm(["1 1 1 1", "a c #ABCDEF", "z"])
    assert image.pixels == ((0,),)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["1 1"],
        ["0 1 1 1", "a c #FFFFFF", "a"],
        ["1 1 1 0", "a c #FFFFFF", "a"],
        ["w 1 1 1", "a c #FFFFFF", "a"],
        ["1 1 1 1", "a m #FFFFFF", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #FFFFFF", "a"],
        ["2 1 1 1", "a c #FFFFFF", "a"],
        ["1 1 2 1", "a c #FFFFFF"],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_color_key_distinguishes_and_is_stable():
    assert color_key("ab") == color_key("ab")
    assert color_key("ab") != color_key("ba")
    assert color_key("") == 0


def test_quoted_lines_complete_pairs_only():
    assert list(quoted_lines('"x" y "z" "w')) == ["x", "z"]


def test_strip_block_comment():
    text = "ab/* c */d"
    assert strip_comments(text) == "ab" + " " * len("/* c */") + "d"


def test_strip_line_comment_includes_newline():
    text = "x // note\ny"
    assert strip_comments(text) == "x " + " " * len("// note\n") + "y"


def test_strip_keeps_quoted_markers():
    text = '"/*" "//" x'
    assert strip_comments(text) == text


def test_strip_unterminated_block():
    assert strip_comments("a/*b") == "a   "


def test_strip_preserves_length():
    text = '/* XPM */\n"1 1 1 1", // header\n"a c red"'
    assert len(strip_comments(text)) == len(text)


def test_file_round_trip(tmp_path):
    content = (
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars */\n"
        '"2 1 2 1",\n'
        '"a c #0000FF",\n'
        '"b c white",\n'
        '"ab"\n'
        "};\n"
        "// trailing\n"
    )
    path = tmp_path / "img.xpm"
    path.write_text(content)
    image = xpm_file_to_image(path)
    assert image == XpmImage(2, 1, ((0x0000FF, 0xFFFFFF),))


def test_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.xpm"
    path.write_text("")
    with pytest.raises(XpmError):
        xpm_file_to_image(path)