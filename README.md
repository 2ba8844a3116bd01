# minift

A compact toolkit of everyday helpers, with no dependencies beyond the standard library.

- **`minift.chars`**: character tests (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`), which take an int code or a one-character string. It also has case conversion (`to_upper`, `to_lower`), which returns the same kind it was given. For integer/text conversion there are `atoi` and `itoa`.
- **`minift.memory`**: byte-buffer operations on `bytearray` objects: `memset`, `bzero`, `memcpy`, `memccpy`, `memchr`, `memcmp`, `calloc`, and `memmove(buf, dest, src, n)`, which moves bytes between offsets of one buffer and handles overlap.
- **`minift.strings`**: string helpers: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`. Search functions return an index or `None`. `strlcpy` and `strlcat` return a pair of the resulting buffer contents and the length the full string would have had.
- **`minift.output`**: `put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to an integer file descriptor or to a text stream such as `sys.stdout`.
- **`minift.linkedlist`**: a singly linked `LinkedList` made of `Node`s.
  - Adding: `push_front` and `push_back`.
  - Inspecting: `len()`, iteration and `last()`.
  - Working through the contents: `clear(delete)`, `iterate(func)` and `map(func, delete)`.
- **`minift.lines`**: line-at-a-time reading from file descriptors.
  - `LineReader(buffer_size)` keeps unread data separately for each descriptor.
  - `get_next_line(fd)` uses one shared reader.
- **`minift.colors`**: the X11 colour-name table.
  - `color_by_name` is case-insensitive; it returns -1 for `none` and `None` for an unknown name.
  - `text_to_rgb` resolves `#rrggbb` or a one- or two-word colour name.
- **`minift.image`**: `Image`, an in-memory 32-bit pixel buffer.
  - `Image(width, height, byte_order)` takes byte order 0 for little-endian pixels and 1 for big-endian ones.
  - It has `put_pixel`, `get_pixel` and `destroy`, and a `data` property; it can be used as a context manager.
  - `good_color(color, depth, shifts)` converts a 0xRRGGBB colour to a pixel value for displays below 24 bits of depth.
- **`minift.xpm`**: an XPM reader that builds `Image`s.
  - Builders: `parse_xpm` and `xpm_to_image`, from a sequence of strings, and `xpm_file_to_image`, from a file.
  - Text helpers: `strip_comments`, `split_words`, `str_str` and `str_str_quoted`.
  - Malformed XPM data raises `XpmError`, a `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from minift.chars import atoi, itoa
from minift.strings import split, strtrim

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("  a b  c ", " ")   # ["a", "b", "c"]
strtrim("xxhixx", "x")    # "hi"
```

```python
from minift.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items)                           # [0, 1, 2, 3]
doubled = items.map(lambda v: v * 2)
list(doubled)                         # [0, 2, 4, 6]
```

`LineReader.next_line` returns the line without its newline, together with a flag:

- `True` when the line ended with a newline.
- `False` once the end of input is reached.

```python
import os
from minift.lines import LineReader

reader = LineReader(buffer_size=1)
fd = os.open("notes.txt", os.O_RDONLY)
line, more = reader.next_line(fd)
```

```python
from minift.colors import color_by_name
from minift.xpm import xpm_to_image

color_by_name("dodger blue")          # 0x1e90ff

image = xpm_to_image([
    "2 1 2 1",
    "a c red",
    "b c #00ff00",
    "ab",
])
image.width, image.height             # (2, 1)
image.get_pixel(0, 0)                 # 0xff0000
image.get_pixel(1, 0)                 # 0x00ff00
```

In an XPM, pixels whose colour is `None` are stored as `0xFF000000`.

## What it does not do

`minift` only holds images in memory. It opens no windows, talks to no display server and draws nothing on screen. An `Image` is a byte buffer that you read and write pixel by pixel.