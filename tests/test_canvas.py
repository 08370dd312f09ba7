from PIL import Image

from bbcore.canvas import PreviewCanvas


def test_dimensions_scaled():
    canvas = PreviewCanvas(10, 20, 2)
    assert (canvas.width, canvas.height) == (20, 40)
    assert canvas.image.size == (20, 40)
    assert canvas.scale == 2


def test_default_scale():
    canvas = PreviewCanvas(10, 20)
    assert canvas.scale == 1
    assert canvas.image.size == (10, 20)


def test_starts_white():
    canvas = PreviewCanvas(8, 8)
    assert canvas.image.getextrema() == (255, 255)


def test_horizontal_line():
    canvas = PreviewCanvas(10, 10)
    canvas.line(0.0, 1.0, 5.0, 1.0)
    assert [canvas.pixel(x, 1) for x in range(6)] == [0] * 6
    assert canvas.pixel(6, 1) == 255
    assert [canvas.pixel(x, 2) for x in range(6)] == [255] * 6


def test_vertical_line():
    canvas = PreviewCanvas(10, 10)
    canvas.line(3.0, 7.0, 3.0, 2.0)
    assert [canvas.pixel(3, y) for y in range(2, 8)] == [0] * 6
    assert canvas.pixel(4, 5) == 255


def test_direction_does_not_matter():
    forward = PreviewCanvas(20, 20)
    backward = PreviewCanvas(20, 20)
    forward.line(1.0, 2.0, 15.0, 9.0)
    backward.line(15.0, 9.0, 1.0, 2.0)
    assert forward.image.tobytes() == backward.image.tobytes()


def test_diagonal_endpoints_dark():
    canvas = PreviewCanvas(20, 20)
    canvas.line(1.0, 2.0, 15.0, 9.0)
    assert canvas.pixel(1, 2) == 0
    assert canvas.pixel(15, 9) == 0


def test_scale_applies_to_coordinates():
    canvas = PreviewCanvas(10, 10, 2)
    canvas.line(2.0, 1.0, 4.0, 1.0)
    assert canvas.pixel(4, 2) == 0
    assert canvas.pixel(8, 2) == 0
    assert canvas.pixel(3, 2) == 255


def test_line_outside_canvas_changes_nothing():
    canvas = PreviewCanvas(10, 10)
    canvas.line(-50.0, -50.0, -20.0, -30.0)
    canvas.line(100.0, 100.0, 200.0, 150.0)
    assert canvas.image.getextrema() == (255, 255)


def test_save_round_trip(tmp_path):
    canvas = PreviewCanvas(12, 12)
    canvas.line(0.0, 0.0, 11.0, 6.0)
    path = tmp_path / "out.png"
    canvas.save(path)
    with Image.open(path) as loaded:
        assert loaded.format == "PNG"
        assert loaded.mode == "L"
        assert loaded.tobytes() == canvas.image.tobytes()