"""Byte-buffer operations on bytearrays."""

from __future__ import annotations

from collections.abc import Sequence


def _check_span(buf: Sequence[int], n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _check_span(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray | None, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``; does nothing for ``None``."""
    if buf is None:
        return
    memset(buf, 0, n)


def memcpy(dest: bytearray | None, src: bytes, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    if dest is None:
        return None
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = src[:n]
    return dest


def memccpy(dest: bytearray, src: bytes, stop: int, n: int) -> int | None:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``stop``.

    Returns the index in ``dest`` just past the copied stop byte, or ``None``
    when the stop byte is not among the first ``n`` bytes of ``src``.
    """
    _check_span(src, n, "source")
    target = stop & 0xFF
    for index, byte in enumerate(src[:n]):
        if index >= len(dest):
            raise IndexError(f"destination holds {len(dest)} bytes")
        dest[index] = byte
        if byte == target:
            return index + 1
    return None


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dest, src) + n > len(buf):
        raise IndexError("move reaches past the end of the buffer")
    if dest != src:
        buf[dest:dest + n] = buf[src:src + n]
    return buf


def memchr(buf: bytes | None, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in ``buf[:n]``."""
    if buf is None:
        return None
    _check_span(buf, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    if n == 0:
        return 0
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)