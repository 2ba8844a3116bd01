"""Small string, memory, list and line-reading helpers, plus an XPM image loader."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "colors",
    "image",
    "lines",
    "linkedlist",
    "memory",
    "output",
    "strings",
    "xpm",
]