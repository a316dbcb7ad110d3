from wirecanvas.canvas import Canvas
from wirecanvas.demo import draw_clock, main


def test_draw_clock_marks_centre_and_axes():
    canvas = Canvas(200, 200)
    draw_clock(canvas)
    assert canvas.pixels[100][100] == 1.0
    assert canvas.pixels[100][150] > 0.0
    assert canvas.pixels[100][50] > 0.0
    assert canvas.pixels[150][100] > 0.0
    assert canvas.pixels[50][100] > 0.0


def test_draw_clock_leaves_outside_radius_blank():
    canvas = Canvas(200, 200)
    draw_clock(canvas, radius=80.0)
    assert canvas.pixels[0][0] == 0.0
    assert canvas.pixels[100][195] == 0.0
    assert canvas.pixels[5][100] == 0.0


def test_draw_clock_values_in_range():
    canvas = Canvas(60, 60)
    draw_clock(canvas, radius=25.0, thickness=3.0)
    values = [v for row in canvas.pixels for v in row]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert any(v > 0.0 for v in values)


def test_main_writes_requested_file(tmp_path, capsys):
    out = tmp_path / "clock.pgm"
    assert main(["--output", str(out)]) == 0

    expected = Canvas(200, 200)
    draw_clock(expected)
    text = out.read_text(encoding="ascii")
    assert text.startswith("P2\n200 200\n255\n")
    assert text == expected.to_pgm()
    assert str(out) in capsys.readouterr().out


def test_main_default_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert (tmp_path / "clock_lines.pgm").read_text(encoding="ascii").startswith("P2\n")


def test_main_reports_unwritable_path(tmp_path, capsys):
    out = tmp_path / "missing" / "clock.pgm"
    assert main(["-o", str(out)]) == 1
    assert "Failed to open file" in capsys.readouterr().err
    assert not out.exists()