"""String helpers: slicing, joining, trimming, splitting, searching and bounded copies."""

from __future__ import annotations

from collections.abc import Callable


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; an int is truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _terminated(text: str) -> str:
    """Return ``text`` cut at its first NUL, as a C string would be read."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of ``first`` and ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the separator character, dropping empty pieces."""
    return [word for word in text.split(_char(sep)) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strchr(text: str, c: int | str) -> bool:
    """Tell whether ``c`` occurs in ``text``; the terminating NUL always counts."""
    ch = _char(c)
    return ch == "\0" or ch in _terminated(text)


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``, or ``None``.

    Searching for NUL finds the terminator, at index ``len(text)``.
    """
    body = _terminated(text)
    ch = _char(c)
    if ch == "\0":
        return len(body)
    index = body.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    left = _terminated(a)[:n]
    right = _terminated(b)[:n]
    for ca, cb in zip(left, right):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(left) == len(right):
        return 0
    if len(left) > len(right):
        return ord(left[len(right)])
    return -ord(right[len(left)])


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of ``needle`` within the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0; ``None`` means not found.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    index = _terminated(haystack)[:n].find(needle)
    return None if index < 0 else index


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting buffer contents and the full length of ``src``.
    With a size of 0 the buffer is left as ``dest``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _terminated(src)
    if size == 0:
        return dest, len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting buffer contents and the length the full string
    would have had: ``len(src)`` plus ``size`` when ``size`` is smaller than
    ``dest``, otherwise ``len(src) + len(dest)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest = _terminated(dest)
    src = _terminated(src)
    if size == 0:
        return dest, len(src)
    if size < len(dest):
        return dest, len(src) + size
    room = max(0, size - 1 - len(dest))
    return dest + src[:room], len(src) + len(dest)