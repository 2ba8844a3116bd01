"""In-memory 32-bit pixel images and colour conversion for the display depth."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType

BITS_PER_PIXEL = 32
LITTLE_ENDIAN = 0
BIG_ENDIAN = 1


class Image:
    """A ZPixmap-style image: rows of 32-bit pixels in a byte buffer.

    ``byte_order`` is 0 for little-endian pixels and 1 for big-endian ones.
    """

    def __init__(self, width: int, height: int, byte_order: int = LITTLE_ENDIAN) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image width and height must be positive")
        if byte_order not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError("byte order must be 0 (little) or 1 (big)")
        self.width = width
        self.height = height
        self.byte_order = byte_order
        self.bpp = BITS_PER_PIXEL
        self.size_line = width * (self.bpp // 8)
        self._data: bytearray | None = bytearray(self.size_line * height)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width={self.width}, height={self.height}, "
            f"byte_order={self.byte_order})"
        )

    def __enter__(self) -> Image:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._data is not None:
            self.destroy()

    @property
    def data(self) -> bytearray:
        """The raw pixel bytes, ``size_line`` bytes per row."""
        if self._data is None:
            raise RuntimeError("image has been destroyed")
        return self._data

    @property
    def _endian(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.size_line + x * (self.bpp // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)`` in the image's byte order."""
        data = self.data
        offset = self._offset(x, y)
        opp = self.bpp // 8
        data[offset:offset + opp] = (color & 0xFFFFFFFF).to_bytes(opp, self._endian)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at ``(x, y)``."""
        data = self.data
        offset = self._offset(x, y)
        return int.from_bytes(data[offset:offset + self.bpp // 8], self._endian)

    def destroy(self) -> None:
        """Release the pixel buffer; the image cannot be used afterwards."""
        if self._data is None:
            raise RuntimeError("image has already been destroyed")
        self._data = None


def good_color(color: int, depth: int, shifts: Sequence[int] | None = None) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a display of ``depth`` bits.

    At 24 bits or more the colour is returned unchanged. Below that,
    ``shifts`` gives six numbers: the shift and bit count of the red, green
    and blue fields of a pixel, in that order.
    """
    if depth >= 24:
        return color
    if shifts is None or len(shifts) != 6:
        raise ValueError("six channel shifts are needed below 24 bits of depth")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )