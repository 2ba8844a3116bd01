import pytest

from minift.xpm import (
    XpmError,
    parse_xpm,
    split_words,
    str_str,
    str_str_quoted,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "3 2 3 1",
    "a c #FF0000",
    "b c blue",
    ". c None",
    "ab.",
    ".ba",
]


def test_str_str_finds_substring():
    text = "hello world"
    index = str_str(text, "world", len(text))
    assert text[index:index + 5] == "world"


def test_str_str_missing_and_too_long():
    assert str_str("abc", "abcd", 3) is None
    assert str_str("abcdef", "xy", 6) is None


def test_str_str_quoted_skips_quoted_match():
    text = '"/*" /* x */'
    index = str_str_quoted(text, "/*", len(text))
    assert index > 0
    assert text[index:index + 2] == "/*"
    assert text[:index].count('"') % 2 == 0


def test_str_str_quoted_only_quoted():
    text = '"a /* b */"'
    assert str_str_quoted(text, "/*", len(text)) is None


def test_split_words():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]
    assert split_words(" \t ") == []


def test_strip_block_comment():
    text = "a /* x */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert result.split() == ["a", "b"]


def test_strip_keeps_quoted_comment():
    text = '"/* keep */"'
    assert strip_comments(text) == text


def test_strip_line_comment():
    text = '// hi\n"x"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ['"x"']


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF
    assert image.get_pixel(2, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(2, 1) == 0xFF0000


def test_xpm_to_image_matches_parse():
    first = xpm_to_image(SAMPLE)
    second = parse_xpm(SAMPLE)
    assert bytes(first.data) == bytes(second.data)


def test_two_word_color_name():
    image = parse_xpm(["1 1 1 1", "x c light blue", "x"])
    assert image.get_pixel(0, 0) == 0xADD8E6


def test_multi_char_keys_first_definition_wins():
    lines = ["2 1 3 3", "aaa c #FF0000", "bbb c #00FF00", "aaa c #0000FF", "aaabbb"]
    image = parse_xpm(lines)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x00FF00


def test_short_keys_last_definition_wins():
    lines = ["1 1 2 1", "a c #FF0000", "a c #0000FF", "a"]
    image = parse_xpm(lines)
    assert image.get_pixel(0, 0) == 0x0000FF


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["3 1 1 1", "a c red", "aa"],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_file_to_image(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *open_xpm[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 2 1",\n'
        '"a c #FF0000",\n'
        '"b c None",\n'
        "// pixels\n"
        '"ab",\n'
        '"ba"\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_file_without_strings(tmp_path):
    path = tmp_path / "empty.xpm"
    path.write_text("/* XPM */\nstatic char *x[] = {};\n")
    with pytest.raises(XpmError):
        xpm_file_to_image(path)