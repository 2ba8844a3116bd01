import io
import os

import pytest

from minift.output import put_char, put_endl, put_nbr, put_str


@pytest.fixture
def pipe():
    read_end, write_end = os.pipe()
    ends = {"read": read_end, "write": write_end}
    yield ends
    for fd in ends.values():
        if fd is not None:
            os.close(fd)


def _drain(ends):
    os.close(ends["write"])
    ends["write"] = None
    chunks = []
    while True:
        chunk = os.read(ends["read"], 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode("utf-8")


def test_put_char_fd(pipe):
    put_char("x", pipe["write"])
    assert _drain(pipe) == "x"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_fd(pipe):
    put_str("hello", pipe["write"])
    assert _drain(pipe) == "hello"


def test_put_str_none_writes_nothing():
    stream = io.StringIO()
    put_str(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline(pipe):
    put_endl("line", pipe["write"])
    assert _drain(pipe) == "line\n"


def test_put_endl_none_writes_only_newline():
    stream = io.StringIO()
    put_endl(None, stream)
    assert stream.getvalue() == "\n"


@pytest.mark.parametrize("number", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trip(pipe, number):
    put_nbr(number, pipe["write"])
    assert int(_drain(pipe)) == number


def test_put_nbr_negative_sign():
    stream = io.StringIO()
    put_nbr(-5, stream)
    assert stream.getvalue() == "-5"


def test_writes_to_stream_accumulate():
    stream = io.StringIO()
    put_str("ab", stream)
    put_char("c", stream)
    put_nbr(12, stream)
    assert stream.getvalue() == "abc12"