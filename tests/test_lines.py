import os

import pytest

from minift.lines import LineReader, get_next_line


def _open(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return os.open(path, os.O_RDONLY)


def _read_all(reader, fd):
    results = []
    while True:
        line, more = reader.next_line(fd)
        results.append((line, more))
        if not more:
            return results


@pytest.mark.parametrize("size", [1, 3, 100])
def test_lines_in_order(tmp_path, size):
    fd = _open(tmp_path, "f.txt", b"one\ntwo\nthree")
    try:
        got = _read_all(LineReader(size), fd)
    finally:
        os.close(fd)
    assert got == [("one", True), ("two", True), ("three", False)]


def test_trailing_newline_gives_empty_last_line(tmp_path):
    fd = _open(tmp_path, "f.txt", b"a\n")
    try:
        got = _read_all(LineReader(), fd)
    finally:
        os.close(fd)
    assert got == [("a", True), ("", False)]


def test_empty_file(tmp_path):
    fd = _open(tmp_path, "e.txt", b"")
    try:
        assert LineReader().next_line(fd) == ("", False)
    finally:
        os.close(fd)


def test_after_end_returns_empty(tmp_path):
    fd = _open(tmp_path, "f.txt", b"x")
    reader = LineReader(2)
    try:
        assert reader.next_line(fd) == ("x", False)
        assert reader.next_line(fd) == ("", False)
    finally:
        os.close(fd)


def test_descriptors_are_independent(tmp_path):
    fd1 = _open(tmp_path, "a.txt", b"a1\na2\n")
    fd2 = _open(tmp_path, "b.txt", b"b1\nb2\n")
    reader = LineReader(4)
    try:
        assert reader.next_line(fd1) == ("a1", True)
        assert reader.next_line(fd2) == ("b1", True)
        assert reader.next_line(fd1) == ("a2", True)
        assert reader.next_line(fd2) == ("b2", True)
    finally:
        os.close(fd1)
        os.close(fd2)


def test_multibyte_characters_survive_small_buffer(tmp_path):
    text = "h\u00e9llo\nw\u00f6rld"
    fd = _open(tmp_path, "u.txt", text.encode("utf-8"))
    try:
        got = _read_all(LineReader(1), fd)
    finally:
        os.close(fd)
    assert [line for line, _ in got] == text.split("\n")


def test_pipe_input():
    read_end, write_end = os.pipe()
    os.write(write_end, b"first\nsecond")
    os.close(write_end)
    try:
        assert get_next_line(read_end) == ("first", True)
        assert get_next_line(read_end) == ("second", False)
    finally:
        os.close(read_end)


def test_buffer_size_must_be_positive():
    with pytest.raises(ValueError):
        LineReader(0)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader().next_line(-1)


def test_closed_descriptor_raises(tmp_path):
    fd = _open(tmp_path, "c.txt", b"data")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().next_line(fd)