"""Writing characters, strings and numbers to a file descriptor or stream."""

from __future__ import annotations

import os
from typing import TextIO

Target = int | TextIO


def _write(text: str, fd: Target) -> None:
    if isinstance(fd, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(fd, data)
            data = data[written:]
    else:
        fd.write(text)


def put_char(c: str, fd: Target) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, fd)


def put_str(text: str | None, fd: Target) -> None:
    """Write ``text``; ``None`` writes nothing."""
    if text:
        _write(text, fd)


def put_endl(text: str | None, fd: Target) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, fd)
    put_char("\n", fd)


def put_nbr(n: int, fd: Target) -> None:
    """Write the decimal representation of ``n``."""
    _write(str(int(n)), fd)