import io

import pytest

from sonarpanel.fonts import draw_string_8x10
from sonarpanel.framebuffer import Framebuffer
from sonarpanel.monitor import (
    DistanceDisplay,
    distance_hundredths,
    format_distance,
    main,
    pulse_to_distance_cm,
    run,
)

FRAME_SIZE = 256 * ((120 + 7) // 8)


def lit_pixels(frame, width=256, height=120):
    return {
        (x, y)
        for y in range(height)
        for x in range(width)
        if not frame[x + (y // 8) * width] & (1 << (7 - y % 8))
    }


def test_pulse_to_distance_uses_58_us_per_cm():
    assert pulse_to_distance_cm(58) == 1.0
    assert pulse_to_distance_cm(0) == 0.0
    assert pulse_to_distance_cm(116) == 2 * pulse_to_distance_cm(58)


def test_negative_pulse_rejected():
    with pytest.raises(ValueError):
        pulse_to_distance_cm(-1)


def test_distance_hundredths_rounds_half_up():
    assert distance_hundredths(1.0) == 100
    assert distance_hundredths(0.004) == 0
    assert distance_hundredths(0.006) == 1


def test_distance_hundredths_rejects_negative():
    with pytest.raises(ValueError):
        distance_hundredths(-0.5)


def test_format_distance_two_decimals():
    assert format_distance(12.5) == "Distance is 12.50 cm"
    assert format_distance(0.0) == "Distance is 0.00 cm"
    assert format_distance(3.07) == "Distance is 3.07 cm"


def test_update_writes_packed_frame():
    frames = []
    display = DistanceDisplay(frames.append, Framebuffer())
    assert display.update(10.0) is True
    assert len(frames) == 1
    assert len(frames[0]) == FRAME_SIZE
    assert lit_pixels(frames[0])


def test_first_frame_matches_text_at_first_origin():
    frames = []
    display = DistanceDisplay(frames.append, Framebuffer())
    display.update(10.0)
    expected = Framebuffer()
    draw_string_8x10(expected, format_distance(10.0), 32, 49)
    assert frames[0] == expected.pack()


def test_same_distance_not_redrawn():
    frames = []
    display = DistanceDisplay(frames.append, Framebuffer())
    display.update(7.0)
    assert display.update(7.0) is False
    assert len(frames) == 1
    assert display.frames_written == 1


def test_alternate_frames_shift_by_one_pixel():
    frames = []
    display = DistanceDisplay(frames.append, Framebuffer())
    display.update(10.0)
    display.update(10.001)
    assert len(frames) == 2
    first = lit_pixels(frames[0])
    second = lit_pixels(frames[1])
    assert second == {(x + 1, y + 1) for x, y in first}


def test_framebuffer_cleared_after_update():
    fb = Framebuffer()
    display = DistanceDisplay(lambda frame: None, fb)
    display.update(42.0)
    assert display.last_distance == 42.0
    assert not any(fb.is_on(x, y) for y in range(fb.height) for x in range(fb.width))


def test_run_reports_and_counts_frames(capsys):
    frames = []
    display = DistanceDisplay(frames.append, Framebuffer())
    readings = iter([58, 58, 116])
    written = run(lambda: next(readings), display, 0, 3)
    assert written == 2
    assert len(frames) == 2
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Distance: 1.00 cm", "Distance: 1.00 cm", "Distance: 2.00 cm"]


def test_run_zero_iterations_measures_nothing():
    calls = []

    def measure():
        calls.append(1)
        return 58

    display = DistanceDisplay(lambda frame: None, Framebuffer())
    assert run(measure, display, 0, 0) == 0
    assert calls == []


def test_run_rejects_negative_interval():
    display = DistanceDisplay(lambda frame: None, Framebuffer())
    with pytest.raises(ValueError):
        run(lambda: 58, display, -1, 1)


def test_main_writes_frames_to_file(tmp_path, capsys):
    target = tmp_path / "frames.bin"
    assert main(["58", "116", "--output", str(target)]) == 0
    assert target.stat().st_size == 2 * FRAME_SIZE
    assert "Distance: 2.00 cm" in capsys.readouterr().out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("58\n58\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["Distance: 1.00 cm"] * 2


def test_main_show_prints_frame(capsys):
    assert main(["58", "--show"]) == 0
    out = capsys.readouterr().out
    assert "#" in out
    assert len(out.splitlines()) == 1 + 120


def test_main_rejects_invalid_pulse():
    with pytest.raises(SystemExit):
        main(["abc"])