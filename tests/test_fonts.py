import string

import pytest

from sonarpanel.fonts import (
    FONT_5X7,
    FONT_7X9,
    FONT_8X10,
    draw_char_5x7,
    draw_char_7x9,
    draw_char_8x10,
    draw_string_5x7,
    draw_string_7x9,
    draw_string_8x10,
)
from sonarpanel.framebuffer import Framebuffer


class RecordingCanvas:
    def __init__(self):
        self.pixels = set()

    def set_pixel(self, x, y):
        self.pixels.add((x, y))


def _assert_glyphs_within(glyphs, width, height):
    for char, pixels in glyphs.items():
        assert pixels, char
        assert all(0 <= dx < width and 0 <= dy < height for dx, dy in pixels), char


def test_space_is_blank():
    assert list(FONT_5X7.glyph_pixels(" ")) == []
    assert list(FONT_7X9.glyph_pixels(" ")) == []
    assert list(FONT_8X10.glyph_pixels(" ")) == []


def test_unsupported_char_is_blank():
    assert list(FONT_5X7.glyph_pixels("~")) == []
    assert list(FONT_7X9.glyph_pixels("~")) == []
    assert list(FONT_8X10.glyph_pixels("~")) == []
    canvas = RecordingCanvas()
    draw_char_5x7(canvas, "~", 0, 0)
    draw_char_7x9(canvas, "~", 0, 0)
    draw_char_8x10(canvas, "~", 0, 0)
    assert canvas.pixels == set()


def test_glyphs_within_cell_5x7():
    glyphs = {c: list(FONT_5X7.glyph_pixels(c)) for c in string.ascii_letters + string.digits}
    _assert_glyphs_within(glyphs, FONT_5X7.width, FONT_5X7.height)


def test_glyphs_within_cell_7x9():
    glyphs = {c: list(FONT_7X9.glyph_pixels(c)) for c in string.ascii_letters + string.digits}
    _assert_glyphs_within(glyphs, FONT_7X9.width, FONT_7X9.height)


def test_glyphs_within_cell_8x10():
    glyphs = {c: list(FONT_8X10.glyph_pixels(c)) for c in string.ascii_letters + string.digits}
    _assert_glyphs_within(glyphs, FONT_8X10.width, FONT_8X10.height)


def test_5x7_exclamation():
    assert set(FONT_5X7.glyph_pixels("!")) == {(2, r) for r in (0, 1, 2, 3, 4, 6)}


def test_8x10_period():
    assert set(FONT_8X10.glyph_pixels(".")) == {(3, 7), (4, 7), (3, 8), (4, 8)}


def test_8x10_zero_matches_capital_o():
    assert set(FONT_8X10.glyph_pixels("0")) == set(FONT_8X10.glyph_pixels("O"))


def test_8x10_percent_supported():
    assert len(list(FONT_8X10.glyph_pixels("%"))) > 0
    assert list(FONT_7X9.glyph_pixels("%")) == []


@pytest.mark.parametrize(
    "font,draw", [(FONT_5X7, draw_string_5x7), (FONT_7X9, draw_string_7x9), (FONT_8X10, draw_string_8x10)]
)
def test_string_advances_per_char(font, draw):
    text = "Ab1"
    whole = RecordingCanvas()
    draw(whole, text, 10, 5)
    expected = RecordingCanvas()
    for i, char in enumerate(text):
        font.draw_char(expected, char, 10 + i * font.advance, 5)
    assert whole.pixels == expected.pixels


def test_unsupported_char_leaves_gap():
    with_gap = RecordingCanvas()
    draw_string_8x10(with_gap, "A~B", 0, 0)
    spaced = RecordingCanvas()
    draw_string_8x10(spaced, "A B", 0, 0)
    assert with_gap.pixels == spaced.pixels


def test_draw_char_offsets():
    canvas = RecordingCanvas()
    draw_char_8x10(canvas, "H", 20, 30)
    assert canvas.pixels == {(20 + dx, 30 + dy) for dx, dy in FONT_8X10.glyph_pixels("H")}


def test_draw_onto_framebuffer_clips():
    fb = Framebuffer(10, 10)
    draw_char_5x7(fb, "B", -2, 5)
    lit = {(x, y) for x in range(10) for y in range(10) if fb.is_on(x, y)}
    expected = {
        (dx - 2, dy + 5)
        for dx, dy in FONT_5X7.glyph_pixels("B")
        if 0 <= dx - 2 < 10 and dy + 5 < 10
    }
    assert lit == expected


def test_string_on_framebuffer_counts():
    fb = Framebuffer()
    draw_string_8x10(fb, "Distance", 32, 49)
    total = sum(len(list(FONT_8X10.glyph_pixels(c))) for c in "Distance")
    assert fb.render_text().count("#") == total