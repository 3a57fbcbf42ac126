"""Turn ultrasonic echo pulse widths into distances and show them on a framebuffer."""

from __future__ import annotations

import argparse
import sys
import time
from itertools import count as _counter
from typing import Callable, Iterable, Sequence

from .fonts import draw_string_8x10
from .framebuffer import Framebuffer

# Round-trip echo time per centimetre of distance, in microseconds.
MICROSECONDS_PER_CM = 58.0

DEFAULT_INTERVAL = 0.2

# The text is drawn at one of two origins, alternating on every redraw.
TEXT_ORIGINS = ((32, 49), (33, 50))


def pulse_to_distance_cm(pulse_us: float) -> float:
    """Convert an echo pulse width in microseconds to a distance in centimetres."""
    if pulse_us < 0:
        raise ValueError(f"pulse width cannot be negative: {pulse_us}")
    return pulse_us / MICROSECONDS_PER_CM


def distance_hundredths(distance_cm: float) -> int:
    """Return the distance in hundredths of a centimetre, rounded half up."""
    if distance_cm < 0:
        raise ValueError(f"distance cannot be negative: {distance_cm}")
    return int(distance_cm * 100.0 + 0.5)


def _fixed_point(distance_cm: float) -> str:
    whole, fraction = divmod(distance_hundredths(distance_cm), 100)
    return f"{whole}.{fraction:02d}"


def format_distance(distance_cm: float) -> str:
    """Return the text shown on the display for a distance."""
    return f"Distance is {_fixed_point(distance_cm)} cm"


def _console_line(distance_cm: float) -> str:
    return f"Distance: {_fixed_point(distance_cm)} cm"


class DistanceDisplay:
    """Draws the latest distance and hands packed frames to a writer.

    A frame is written only when the distance differs from the last one shown.
    """

    def __init__(
        self,
        write: Callable[[bytes], object],
        framebuffer: Framebuffer | None = None,
    ) -> None:
        self.write = write
        self.framebuffer = framebuffer if framebuffer is not None else Framebuffer()
        self.frames_written = 0
        self.last_distance: float | None = None

    def update(self, distance_cm: float) -> bool:
        """Show a distance; return whether a new frame was written."""
        self.framebuffer.clear()
        if self.last_distance is not None and self.last_distance == distance_cm:
            return False
        text = format_distance(distance_cm)
        x, y = TEXT_ORIGINS[self.frames_written % len(TEXT_ORIGINS)]
        draw_string_8x10(self.framebuffer, text, x, y)
        self.write(self.framebuffer.pack())
        self.framebuffer.clear()
        self.frames_written += 1
        self.last_distance = distance_cm
        return True


def run(
    measure: Callable[[], float],
    display: DistanceDisplay,
    interval: float = DEFAULT_INTERVAL,
    iterations: int | None = None,
) -> int:
    """Measure, report and display repeatedly; return the number of frames written.

    ``measure`` returns an echo pulse width in microseconds. With no
    ``iterations`` the loop runs until interrupted.
    """
    if interval < 0:
        raise ValueError(f"interval cannot be negative: {interval}")
    if iterations is not None and iterations < 0:
        raise ValueError(f"iterations cannot be negative: {iterations}")
    steps = _counter() if iterations is None else range(iterations)
    written = 0
    for _ in steps:
        distance = pulse_to_distance_cm(measure())
        print(_console_line(distance))
        if display.update(distance):
            written += 1
        if interval > 0:
            time.sleep(interval)
    return written


def _unpack(packed: bytes, width: int, height: int) -> str:
    def lit(x: int, y: int) -> bool:
        return not packed[x + (y // 8) * width] & (1 << (7 - y % 8))

    return "\n".join(
        "".join("#" if lit(x, y) else "." for x in range(width)) for y in range(height)
    )


def _parse_pulse(token: str) -> float:
    value = float(token)
    if value < 0:
        raise ValueError(token)
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Show distances for echo pulse widths given as arguments or on standard input."""
    parser = argparse.ArgumentParser(
        prog="sonarpanel",
        description="Render distance readings from ultrasonic echo pulse widths.",
    )
    parser.add_argument(
        "pulses", nargs="*", help="echo pulse widths in microseconds (default: read stdin)"
    )
    parser.add_argument(
        "--interval", type=float, default=0.0, help="seconds to wait between readings"
    )
    parser.add_argument("--output", help="append each packed frame to this file")
    parser.add_argument("--show", action="store_true", help="print each frame as text")
    args = parser.parse_args(argv)

    tokens: Iterable[str] = args.pulses or sys.stdin.read().split()
    try:
        pulses = [_parse_pulse(token) for token in tokens]
    except ValueError as exc:
        parser.error(f"invalid pulse width: {exc}")
    if args.interval < 0:
        parser.error("interval cannot be negative")

    framebuffer = Framebuffer()
    sink = open(args.output, "ab") if args.output else None
    try:
        def write(frame: bytes) -> None:
            if sink is not None:
                sink.write(frame)
            if args.show:
                print(_unpack(frame, framebuffer.width, framebuffer.height))

        display = DistanceDisplay(write, framebuffer)
        readings = iter(pulses)
        run(lambda: next(readings), display, args.interval, len(pulses))
    finally:
        if sink is not None:
            sink.close()
    return 0