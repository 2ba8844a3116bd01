"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .chars import atoi
from .colors import text_to_rgb
from .image import Image

_TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _terminated(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def str_str(text: str, find: str, length: int) -> int | None:
    """Return the position of ``find`` in ``text``, or ``None``.

    ``find`` longer than ``length`` is never found.
    """
    if len(find) > length:
        return None
    index = _terminated(text).find(find)
    return None if index < 0 else index


def str_str_quoted(text: str, find: str, length: int) -> int | None:
    """Like :func:`str_str`, but ignore matches inside double quotes."""
    if len(find) > length:
        return None
    body = _terminated(text)
    quoted = False
    for index, ch in enumerate(body[:len(body) - len(find) + 1]):
        if ch == '"':
            quoted = not quoted
        if not quoted and body.startswith(find, index):
            return index
    return None


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(_terminated(text)) if word]


def _blank(text: str, start: int, count: int) -> str:
    count = min(count, len(text) - start)
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The text keeps its length, so positions stay the same.
    """
    while (begin := str_str_quoted(text, "/*", len(text))) is not None:
        end = str_str(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 4)
    while (begin := str_str_quoted(text, "//", len(text))) is not None:
        end = str_str(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 3)
    return text


def _next(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header {line!r}")
    values = tuple(atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        position = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no colour key in {line!r}") from None
    if position >= len(words):
        raise XpmError(f"no colour after key in {line!r}")
    suffix = words[position + 1] if position + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[position], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then pixel rows.

    Pixels whose colour is ``None`` are stored as 0xFF000000.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next(source, "header"))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _read_color(_next(source, "colour definition"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    image = Image(width, height)
    for y in range(height):
        row = _next(source, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from XPM data given as its sequence of strings."""
    return parse_xpm(data)


def _quoted_strings(text: str) -> Iterator[str]:
    body = _terminated(text)
    position = 0
    while True:
        start = body.find('"', position)
        if start < 0:
            return
        end = body.find('"', start + 1)
        if end < 0:
            return
        yield body[start + 1:end]
        position = end + 1


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(_quoted_strings(strip_comments(text)))