"""A monochrome framebuffer with one byte per pixel and a page-packed export."""

from __future__ import annotations

DISPLAY_WIDTH = 256
DISPLAY_HEIGHT = 120

PIXEL_ON = 0
PIXEL_OFF = 1


class Framebuffer:
    """A black-on-white pixel grid that can be packed for a paged display."""

    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid framebuffer size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = bytearray([PIXEL_OFF]) * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int) -> None:
        """Turn a pixel on (black); coordinates outside the buffer are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = PIXEL_ON

    def clear_pixel(self, x: int, y: int) -> None:
        """Turn a pixel off (white); coordinates outside the buffer are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = PIXEL_OFF

    def is_on(self, x: int, y: int) -> bool:
        """Return whether a pixel is on; pixels outside the buffer are off."""
        return self._contains(x, y) and self._pixels[y * self.width + x] == PIXEL_ON

    def clear(self) -> None:
        """Turn every pixel off."""
        self._pixels[:] = bytes([PIXEL_OFF]) * len(self._pixels)

    def pack(self) -> bytes:
        """Pack into vertical 8-pixel pages, MSB at the top; a set bit is white."""
        pages = (self.height + 7) // 8
        packed = bytearray(b"\xff") * (self.width * pages)
        for index, value in enumerate(self._pixels):
            if value != PIXEL_ON:
                continue
            y, x = divmod(index, self.width)
            packed[x + (y // 8) * self.width] &= ~(1 << (7 - y % 8)) & 0xFF
        return bytes(packed)

    def render_text(self, on: str = "#", off: str = ".") -> str:
        """Render the buffer as lines of text, one line per pixel row."""
        return "\n".join(
            "".join(
                on if value == PIXEL_ON else off
                for value in self._pixels[row * self.width:(row + 1) * self.width]
            )
            for row in range(self.height)
        )