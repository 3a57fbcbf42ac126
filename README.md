# sonarpanel

Draw text on a small 1-bit panel and turn ultrasonic echo pulse widths into
distance readings shown on it.

The package has three modules:

- `sonarpanel.framebuffer`: `Framebuffer`, a one-byte-per-pixel canvas
  (256x120 by default). `pack()` returns the page layout that monochrome
  display controllers expect: each byte holds eight vertical pixels, the most
  significant bit at the top, and a cleared bit means the pixel is dark.
  `render_text(on, off)` draws the buffer as lines of text.
- `sonarpanel.fonts`: three built-in bitmap fonts, exposed as `BitmapFont`
  objects (`FONT_5X7`, `FONT_7X9`, `FONT_8X10`) and as the helper functions
  `draw_char_5x7`, `draw_string_5x7`, `draw_char_7x9`, `draw_string_7x9`,
  `draw_char_8x10` and `draw_string_8x10`. Each takes any canvas with a
  `set_pixel(x, y)` method.
- `sonarpanel.monitor`: converts echo pulse widths to centimetres, formats
  them, and `DistanceDisplay` redraws the panel only when the reading changes.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Drawing text

```python
from sonarpanel.framebuffer import Framebuffer
from sonarpanel.fonts import draw_string_8x10

fb = Framebuffer(256, 120)
draw_string_8x10(fb, "Distance is 12.34 cm", 32, 49)
print(fb.render_text("#", "."))
packed = fb.pack()  # bytes ready to send to a panel
```

The fonts cover letters, digits, space and `.`; the 5x7 and 7x9 fonts also
have `!`, the 8x10 font has `%`, and in every font `,` draws a degree sign.
Characters a font has no glyph for are skipped, and their space is still
advanced. Pixels that fall outside the canvas are ignored.

`BitmapFont.glyph_pixels(char)` yields the lit pixel offsets of a character,
which is handy for drawing onto other surfaces.

## Distance readings

```python
from sonarpanel.monitor import pulse_to_distance_cm, format_distance

cm = pulse_to_distance_cm(580)  # 10.0 (58 microseconds per centimetre)
print(format_distance(cm))      # "Distance is 10.00 cm"
```

Distances are shown with two decimals, rounded half up; negative pulse widths
or distances raise `ValueError`.

`DistanceDisplay(write, framebuffer)` draws the formatted text in the 8x10
font, alternating between two nearby positions on each redraw, and passes the
packed frame to `write`. `update(distance_cm)` returns `False` without writing
when the distance equals the last one shown.

`run(measure, display, interval, iterations)` calls `measure()` for an echo
pulse width in microseconds, prints a line such as `Distance: 10.00 cm`,
updates the display and sleeps `interval` seconds. It returns the number of
frames written; with `iterations=None` it runs until interrupted.

## Command line

```
sonarpanel 580 1160 1160
echo "580 1160" | sonarpanel --show
```

Pulse widths in microseconds are taken from the arguments, or from standard
input when none are given. Options:

- `--interval SECONDS`: wait between readings (default 0).
- `--output FILE`: append each packed frame to `FILE`.
- `--show`: print each frame as text, `#` for dark pixels.

An invalid or negative pulse width is reported as a usage error.

## What it does not do

The package does not talk to a sensor or a display. It never triggers or
times an echo pulse; readings come from your `measure` callable or from the
command line. Frames are handed to a callback, a file or the terminal; sending
them to real panel hardware is up to you.