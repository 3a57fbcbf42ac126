"""Bitmap fonts and text drawing onto any canvas with a set_pixel(x, y) method."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterator, Mapping, Protocol


class Canvas(Protocol):
    def set_pixel(self, x: int, y: int) -> None: ...


@dataclass(frozen=True)
class BitmapFont:
    """A fixed-width bitmap font.

    Column-major glyphs store one byte per column, bit 0 at the top.
    Row-major glyphs store one byte per row, bit 7 at the left.
    """

    glyphs: Mapping[str, tuple[int, ...]]
    width: int
    height: int
    advance: int
    column_major: bool

    def glyph_pixels(self, char: str) -> Iterator[tuple[int, int]]:
        """Yield the (dx, dy) offsets of the lit pixels of a character."""
        data = self.glyphs.get(char)
        if data is None:
            return
        if self.column_major:
            for col, line in enumerate(data[: self.width]):
                for row in range(self.height):
                    if line & (1 << row):
                        yield col, row
        else:
            for row, line in enumerate(data[: self.height]):
                for col in range(self.width):
                    if line & (1 << (7 - col)):
                        yield col, row

    def draw_char(self, canvas: Canvas, char: str, x: int, y: int) -> None:
        """Draw one character with its top-left corner at (x, y)."""
        for dx, dy in self.glyph_pixels(char):
            canvas.set_pixel(x + dx, y + dy)

    def draw_string(self, canvas: Canvas, text: str, x: int, y: int) -> None:
        """Draw a string left to right; unsupported characters leave a gap."""
        for offset, char in enumerate(text):
            self.draw_char(canvas, char, x + offset * self.advance, y)


def _table(keys: str, rows: list[tuple[int, ...]], size: int) -> dict[str, tuple[int, ...]]:
    if len(keys) != len(rows):
        raise ValueError("glyph table does not match its character list")
    return {key: tuple(row) + (0,) * (size - len(row)) for key, row in zip(keys, rows)}


# The comma slot holds a degree sign in every table.
_KEYS_5X7 = " !" + string.ascii_uppercase + string.ascii_lowercase + ".," + string.digits
_ROWS_5X7 = [
    (0x00, 0x00, 0x00, 0x00, 0x00), (0x00, 0x00, 0x5F, 0x00, 0x00),
    (0x7C, 0x12, 0x11, 0x12, 0x7C), (0x7F, 0x49, 0x49, 0x49, 0x36),
    (0x3E, 0x41, 0x41, 0x41, 0x22), (0x7F, 0x41, 0x41, 0x22, 0x1C),
    (0x7F, 0x49, 0x49, 0x49, 0x41), (0x7F, 0x09, 0x09, 0x09, 0x01),
    (0x3E, 0x41, 0x49, 0x49, 0x7A), (0x7F, 0x08, 0x08, 0x08, 0x7F),
    (0x00, 0x41, 0x7F, 0x41, 0x00), (0x20, 0x40, 0x41, 0x3F, 0x01),
    (0x7F, 0x08, 0x14, 0x22, 0x41), (0x7F, 0x40, 0x40, 0x40, 0x40),
    (0x7F, 0x02, 0x0C, 0x02, 0x7F), (0x7F, 0x04, 0x08, 0x10, 0x7F),
    (0x3E, 0x41, 0x41, 0x41, 0x3E), (0x7F, 0x09, 0x09, 0x09, 0x06),
    (0x3E, 0x41, 0x51, 0x21, 0x5E), (0x7F, 0x09, 0x19, 0x29, 0x46),
    (0x26, 0x49, 0x49, 0x49, 0x32), (0x01, 0x01, 0x7F, 0x01, 0x01),
    (0x3F, 0x40, 0x40, 0x40, 0x3F), (0x1F, 0x20, 0x40, 0x20, 0x1F),
    (0x7F, 0x20, 0x18, 0x20, 0x7F), (0x63, 0x14, 0x08, 0x14, 0x63),
    (0x07, 0x08, 0x70, 0x08, 0x07), (0x61, 0x51, 0x49, 0x45, 0x43),
    (0x20, 0x54, 0x54, 0x54, 0x78), (0x7F, 0x48, 0x44, 0x44, 0x38),
    (0x38, 0x44, 0x44, 0x44, 0x20), (0x38, 0x44, 0x44, 0x48, 0x7F),
    (0x38, 0x54, 0x54, 0x54, 0x18), (0x08, 0x7E, 0x09, 0x01, 0x02),
    (0x08, 0x14, 0x54, 0x54, 0x3C), (0x7F, 0x08, 0x04, 0x04, 0x78),
    (0x00, 0x44, 0x7D, 0x40, 0x00), (0x20, 0x40, 0x44, 0x3D, 0x00),
    (0x7F, 0x10, 0x28, 0x44, 0x00), (0x00, 0x41, 0x7F, 0x40, 0x00),
    (0x7C, 0x04, 0x18, 0x04, 0x78), (0x7C, 0x08, 0x04, 0x04, 0x78),
    (0x38, 0x44, 0x44, 0x44, 0x38), (0x7C, 0x14, 0x14, 0x14, 0x08),
    (0x08, 0x14, 0x14, 0x18, 0x7C), (0x7C, 0x08, 0x04, 0x04, 0x08),
    (0x48, 0x54, 0x54, 0x54, 0x20), (0x04, 0x3F, 0x44, 0x40, 0x20),
    (0x3C, 0x40, 0x40, 0x20, 0x7C), (0x1C, 0x20, 0x40, 0x20, 0x1C),
    (0x3C, 0x40, 0x30, 0x40, 0x3C), (0x44, 0x28, 0x10, 0x28, 0x44),
    (0x0C, 0x50, 0x50, 0x50, 0x3C), (0x44, 0x64, 0x54, 0x4C, 0x44),
    (0x00, 0x60, 0x60, 0x00, 0x00), (0x00, 0x06, 0x09, 0x09, 0x06),
    (0x3E, 0x51, 0x49, 0x45, 0x3E), (0x00, 0x41, 0x7F, 0x01, 0x00),
    (0x43, 0x65, 0x59, 0x49, 0x31), (0x42, 0x41, 0x51, 0x69, 0x46),
    (0x18, 0x14, 0x12, 0x7F, 0x10), (0x4F, 0x49, 0x49, 0x49, 0x71),
    (0x3E, 0x49, 0x49, 0x49, 0x32), (0x01, 0x01, 0x71, 0x0D, 0x03),
    (0x36, 0x49, 0x49, 0x49, 0x36), (0x26, 0x49, 0x49, 0x49, 0x3E),
]

_KEYS_7X9 = " !" + string.digits + string.ascii_uppercase + string.ascii_lowercase + ".,"
_ROWS_7X9 = [
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x18, 0x3C, 0x3C, 0x18, 0x18, 0x00, 0x18, 0x00),
    (0x3C, 0x42, 0x46, 0x4A, 0x52, 0x62, 0x42, 0x3C),
    (0x10, 0x30, 0x10, 0x10, 0x10, 0x10, 0x10, 0x38),
    (0x3C, 0x42, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7E),
    (0x3C, 0x42, 0x02, 0x1C, 0x02, 0x02, 0x42, 0x3C),
    (0x08, 0x18, 0x28, 0x48, 0x88, 0x7E, 0x08, 0x08),
    (0x7E, 0x40, 0x40, 0x7C, 0x02, 0x02, 0x42, 0x3C),
    (0x3C, 0x42, 0x40, 0x7C, 0x42, 0x42, 0x42, 0x3C),
    (0x7E, 0x02, 0x04, 0x08, 0x10, 0x10, 0x10, 0x10),
    (0x3C, 0x42, 0x42, 0x3C, 0x42, 0x42, 0x42, 0x3C),
    (0x3C, 0x42, 0x42, 0x42, 0x3E, 0x02, 0x42, 0x3C),
    (0x18, 0x24, 0x42, 0x42, 0x7E, 0x42, 0x42, 0x42),
    (0x7C, 0x42, 0x42, 0x7C, 0x42, 0x42, 0x42, 0x7C),
    (0x3C, 0x42, 0x40, 0x40, 0x40, 0x40, 0x42, 0x3C),
    (0x78, 0x44, 0x42, 0x42, 0x42, 0x42, 0x44, 0x78),
    (0x7E, 0x40, 0x40, 0x7C, 0x40, 0x40, 0x40, 0x7E),
    (0x7E, 0x40, 0x40, 0x7C, 0x40, 0x40, 0x40, 0x40),
    (0x3C, 0x42, 0x40, 0x5E, 0x42, 0x42, 0x42, 0x3C),
    (0x42, 0x42, 0x42, 0x7E, 0x42, 0x42, 0x42, 0x42),
    (0x3C, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C),
    (0x1E, 0x0C, 0x0C, 0x0C, 0x0C, 0x4C, 0x4C, 0x38),
    (0x42, 0x44, 0x48, 0x70, 0x48, 0x44, 0x42, 0x42),
    (0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x7E),
    (0x42, 0x66, 0x5A, 0x5A, 0x42, 0x42, 0x42, 0x42),
    (0x42, 0x62, 0x52, 0x4A, 0x46, 0x42, 0x42, 0x42),
    (0x3C, 0x42, 0x42, 0x42, 0x42, 0x42, 0x42, 0x3C),
    (0x7C, 0x42, 0x42, 0x7C, 0x40, 0x40, 0x40, 0x40),
    (0x3C, 0x42, 0x42, 0x42, 0x4A, 0x44, 0x3A, 0x00),
    (0x7C, 0x42, 0x42, 0x7C, 0x48, 0x44, 0x42, 0x42),
    (0x3C, 0x42, 0x40, 0x3C, 0x02, 0x42, 0x42, 0x3C),
    (0x7E, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18),
    (0x42, 0x42, 0x42, 0x42, 0x42, 0x42, 0x42, 0x3C),
    (0x42, 0x42, 0x42, 0x42, 0x42, 0x24, 0x18, 0x18),
    (0x42, 0x42, 0x42, 0x5A, 0x5A, 0x66, 0x42, 0x42),
    (0x42, 0x24, 0x18, 0x18, 0x18, 0x24, 0x42, 0x42),
    (0x42, 0x42, 0x24, 0x18, 0x18, 0x18, 0x18, 0x18),
    (0x7E, 0x04, 0x08, 0x10, 0x20, 0x40, 0x40, 0x7E),
    (0x00, 0x00, 0x38, 0x04, 0x3C, 0x44, 0x3A, 0x00),
    (0x40, 0x40, 0x5C, 0x62, 0x42, 0x62, 0x5C, 0x00),
    (0x00, 0x00, 0x3C, 0x40, 0x40, 0x40, 0x3C, 0x00),
    (0x02, 0x02, 0x3A, 0x46, 0x42, 0x46, 0x3A, 0x00),
    (0x00, 0x00, 0x3C, 0x44, 0x7C, 0x40, 0x3C, 0x00),
    (0x1C, 0x20, 0x7C, 0x20, 0x20, 0x20, 0x20, 0x00),
    (0x00, 0x00, 0x3A, 0x46, 0x42, 0x46, 0x3A, 0x02),
    (0x40, 0x40, 0x5C, 0x62, 0x42, 0x42, 0x42, 0x00),
    (0x18, 0x00, 0x38, 0x18, 0x18, 0x18, 0x3C, 0x00),
    (0x06, 0x00, 0x0E, 0x06, 0x06, 0x46, 0x46, 0x3C),
    (0x40, 0x40, 0x44, 0x48, 0x70, 0x48, 0x44, 0x00),
    (0x38, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C, 0x00),
    (0x00, 0x00, 0x6C, 0x52, 0x52, 0x52, 0x52, 0x00),
    (0x00, 0x00, 0x5C, 0x62, 0x42, 0x42, 0x42, 0x00),
    (0x00, 0x00, 0x3C, 0x42, 0x42, 0x42, 0x3C, 0x00),
    (0x00, 0x00, 0x5C, 0x62, 0x42, 0x62, 0x5C, 0x40),
    (0x00, 0x00, 0x3A, 0x46, 0x42, 0x46, 0x3A, 0x02),
    (0x00, 0x00, 0x5C, 0x62, 0x40, 0x40, 0x40, 0x00),
    (0x00, 0x00, 0x3C, 0x40, 0x38, 0x04, 0x78, 0x00),
    (0x20, 0x20, 0x7C, 0x20, 0x20, 0x20, 0x1C, 0x00),
    (0x00, 0x00, 0x42, 0x42, 0x42, 0x46, 0x3A, 0x00),
    (0x00, 0x00, 0x42, 0x42, 0x24, 0x18, 0x18, 0x00),
    (0x00, 0x00, 0x42, 0x52, 0x52, 0x52, 0x24, 0x00),
    (0x00, 0x00, 0x42, 0x24, 0x18, 0x24, 0x42, 0x00),
    (0x00, 0x00, 0x42, 0x42, 0x46, 0x3A, 0x02, 0x3C),
    (0x00, 0x00, 0x7E, 0x08, 0x10, 0x20, 0x7E, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x18, 0x18),
    (0x06, 0x09, 0x09, 0x06, 0x00, 0x00, 0x00),
]

_KEYS_8X10 = " " + string.digits + string.ascii_uppercase + string.ascii_lowercase + ",.%"
_ROWS_8X10 = [
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x3C, 0x66, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0x66, 0x3C),
    (0x18, 0x38, 0x58, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x7E),
    (0x3C, 0x66, 0x03, 0x03, 0x06, 0x0C, 0x18, 0x30, 0x60, 0x7F),
    (0x3C, 0x66, 0x03, 0x03, 0x1E, 0x03, 0x03, 0x03, 0x66, 0x3C),
    (0x06, 0x0E, 0x1E, 0x36, 0x66, 0xC6, 0xFF, 0x06, 0x06, 0x06),
    (0x7E, 0x60, 0x60, 0x7C, 0x06, 0x03, 0x03, 0x03, 0x66, 0x3C),
    (0x1C, 0x30, 0x60, 0x7C, 0x66, 0xC3, 0xC3, 0xC3, 0x66, 0x3C),
    (0xFF, 0x03, 0x06, 0x0C, 0x18, 0x30, 0x30, 0x30, 0x30, 0x30),
    (0x3C, 0x66, 0xC3, 0x66, 0x3C, 0x66, 0xC3, 0xC3, 0x66, 0x3C),
    (0x3C, 0x66, 0xC3, 0xC3, 0x67, 0x3F, 0x03, 0x06, 0x0C, 0x38),
    (0x18, 0x3C, 0x66, 0x66, 0x66, 0x7E, 0x66, 0x66, 0x66, 0x66),
    (0x7C, 0x66, 0x66, 0x66, 0x7C, 0x66, 0x66, 0x66, 0x66, 0x7C),
    (0x3C, 0x66, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0x66, 0x3C),
    (0x78, 0x6C, 0x66, 0x66, 0x66, 0x66, 0x66, 0x66, 0x6C, 0x78),
    (0x7E, 0x60, 0x60, 0x60, 0x7C, 0x60, 0x60, 0x60, 0x60, 0x7E),
    (0x7E, 0x60, 0x60, 0x60, 0x7C, 0x60, 0x60, 0x60, 0x60, 0x60),
    (0x3C, 0x66, 0xC0, 0xC0, 0xCE, 0xC6, 0xC6, 0xC6, 0x66, 0x3C),
    (0x66, 0x66, 0x66, 0x66, 0x7E, 0x66, 0x66, 0x66, 0x66, 0x66),
    (0x3C, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C),
    (0x1E, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0xCC, 0xCC, 0x78),
    (0x66, 0x6C, 0x78, 0x70, 0x60, 0x70, 0x78, 0x6C, 0x66, 0x66),
    (0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x7E),
    (0xC3, 0xE7, 0xFF, 0xFF, 0xDB, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3),
    (0xC3, 0xC3, 0xE3, 0xF3, 0xFB, 0xDF, 0xCF, 0xC7, 0xC3, 0xC3),
    (0x3C, 0x66, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0x66, 0x3C),
    (0x7C, 0x66, 0x66, 0x66, 0x7C, 0x60, 0x60, 0x60, 0x60, 0x60),
    (0x3C, 0x66, 0xC3, 0xC3, 0xC3, 0xC3, 0xCB, 0xCF, 0x66, 0x3F),
    (0x7C, 0x66, 0x66, 0x66, 0x7C, 0x70, 0x78, 0x6C, 0x66, 0x66),
    (0x3E, 0x60, 0x60, 0x60, 0x3C, 0x06, 0x06, 0x06, 0x06, 0x7C),
    (0x7E, 0x5A, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18),
    (0x66, 0x66, 0x66, 0x66, 0x66, 0x66, 0x66, 0x66, 0x66, 0x3C),
    (0xC3, 0xC3, 0x66, 0x66, 0x66, 0x3C, 0x3C, 0x18, 0x18, 0x18),
    (0xC3, 0xC3, 0xC3, 0xC3, 0xDB, 0xFF, 0xFF, 0x66, 0x66, 0x66),
    (0xC3, 0x66, 0x66, 0x3C, 0x18, 0x18, 0x3C, 0x66, 0x66, 0xC3),
    (0x66, 0x66, 0x66, 0x3C, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18),
    (0xFF, 0x03, 0x06, 0x0C, 0x18, 0x30, 0x60, 0xC0, 0x80, 0xFF),
    (0x00, 0x00, 0x00, 0x3C, 0x06, 0x3E, 0x66, 0x66, 0x66, 0x3F),
    (0x60, 0x60, 0x60, 0x7C, 0x66, 0x66, 0x66, 0x66, 0x66, 0x7C),
    (0x00, 0x00, 0x00, 0x3C, 0x66, 0x60, 0x60, 0x60, 0x66, 0x3C),
    (0x06, 0x06, 0x06, 0x3E, 0x66, 0x66, 0x66, 0x66, 0x66, 0x3E),
    (0x00, 0x00, 0x00, 0x3C, 0x66, 0x7E, 0x60, 0x60, 0x66, 0x3C),
    (0x0E, 0x18, 0x18, 0x3E, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18),
    (0x00, 0x00, 0x00, 0x3E, 0x66, 0x66, 0x66, 0x66, 0x3E, 0x06),
    (0x60, 0x60, 0x60, 0x7C, 0x66, 0x66, 0x66, 0x66, 0x66, 0x66),
    (0x18, 0x00, 0x00, 0x38, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C),
    (0x0C, 0x00, 0x00, 0x1C, 0x0C, 0x0C, 0x0C, 0x0C, 0x6C, 0x38),
    (0x60, 0x60, 0x60, 0x66, 0x6C, 0x78, 0x78, 0x6C, 0x66, 0x66),
    (0x38, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C),
    (0x00, 0x00, 0x00, 0xEC, 0xFE, 0xD6, 0xD6, 0xD6, 0xD6, 0xD6),
    (0x00, 0x00, 0x00, 0x7C, 0x66, 0x66, 0x66, 0x66, 0x66, 0x66),
    (0x00, 0x00, 0x00, 0x3C, 0x66, 0x66, 0x66, 0x66, 0x66, 0x3C),
    (0x00, 0x00, 0x00, 0x7C, 0x66, 0x66, 0x66, 0x66, 0x7C, 0x60),
    (0x00, 0x00, 0x00, 0x3E, 0x66, 0x66, 0x66, 0x66, 0x3E, 0x06),
    (0x00, 0x00, 0x00, 0x7C, 0x66, 0x60, 0x60, 0x60, 0x60, 0x60),
    (0x00, 0x00, 0x00, 0x3E, 0x60, 0x3C, 0x06, 0x06, 0x66, 0x3C),
    (0x30, 0x30, 0x30, 0x7E, 0x30, 0x30, 0x30, 0x30, 0x36, 0x1C),
    (0x00, 0x00, 0x00, 0x66, 0x66, 0x66, 0x66, 0x66, 0x66, 0x3E),
    (0x00, 0x00, 0x00, 0x66, 0x66, 0x66, 0x3C, 0x3C, 0x18, 0x18),
    (0x00, 0x00, 0x00, 0xC3, 0xC3, 0xC3, 0xDB, 0xFF, 0x66, 0x66),
    (0x00, 0x00, 0x00, 0xC3, 0x66, 0x3C, 0x18, 0x3C, 0x66, 0xC3),
    (0x00, 0x00, 0x00, 0x66, 0x66, 0x66, 0x66, 0x3E, 0x06, 0x3C),
    (0x00, 0x00, 0x00, 0x7E, 0x06, 0x0C, 0x18, 0x30, 0x60, 0x7E),
    (0x18, 0x3C, 0x3C, 0x18, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x18, 0x18, 0x00),
    (0x60, 0x92, 0x94, 0x68, 0x10, 0x20, 0x4C, 0x52, 0x92, 0x0C),
]

FONT_5X7 = BitmapFont(_table(_KEYS_5X7, _ROWS_5X7, 5), width=5, height=7, advance=6, column_major=True)
FONT_7X9 = BitmapFont(_table(_KEYS_7X9, _ROWS_7X9, 8), width=8, height=8, advance=9, column_major=False)
FONT_8X10 = BitmapFont(_table(_KEYS_8X10, _ROWS_8X10, 10), width=8, height=10, advance=9, column_major=False)


def draw_char_5x7(canvas: Canvas, char: str, x: int, y: int) -> None:
    """Draw one character in the 5x7 font."""
    FONT_5X7.draw_char(canvas, char, x, y)


def draw_string_5x7(canvas: Canvas, text: str, x: int, y: int) -> None:
    """Draw a string in the 5x7 font, six pixels per character."""
    FONT_5X7.draw_string(canvas, text, x, y)


def draw_char_7x9(canvas: Canvas, char: str, x: int, y: int) -> None:
    """Draw one character in the 7x9 font."""
    FONT_7X9.draw_char(canvas, char, x, y)


def draw_string_7x9(canvas: Canvas, text: str, x: int, y: int) -> None:
    """Draw a string in the 7x9 font, nine pixels per character."""
    FONT_7X9.draw_string(canvas, text, x, y)


def draw_char_8x10(canvas: Canvas, char: str, x: int, y: int) -> None:
    """Draw one character in the 8x10 font."""
    FONT_8X10.draw_char(canvas, char, x, y)


def draw_string_8x10(canvas: Canvas, text: str, x: int, y: int) -> None:
    """Draw a string in the 8x10 font, nine pixels per character."""
    FONT_8X10.draw_string(canvas, text, x, y)