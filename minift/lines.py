"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os

BUFFER_SIZE = 1


class LineReader:
    """Read lines from file descriptors, keeping unread data per descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.buffer_size = buffer_size
        self._saved: dict[int, bytes] = {}

    def next_line(self, fd: int) -> tuple[str, bool]:
        """Return the next line of ``fd`` without its newline.

        The flag is True when the line ended with a newline and False when
        the end of input was reached; after that, further calls return
        ``("", False)``. Read errors propagate as ``OSError``.
        """
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        saved = self._saved.get(fd)
        while saved is None or b"\n" not in saved:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            saved = (saved or b"") + chunk
        if saved is None:
            return "", False
        head, newline, rest = saved.partition(b"\n")
        if newline:
            self._saved[fd] = rest
            return head.decode("utf-8", errors="replace"), True
        self._saved.pop(fd, None)
        return head.decode("utf-8", errors="replace"), False


_default_reader = LineReader()


def get_next_line(fd: int) -> tuple[str, bool]:
    """Read the next line of ``fd`` with a shared reader."""
    return _default_reader.next_line(fd)