import struct

import pytest
from PIL import Image

from bbcore.drawing import DrawSurface
from bbcore.errors import DrawingOutOfBoundsError
from bbcore.hardware import PhysicalDimensions
from bbcore.instructions import InstructionSet
from bbcore.lines import LinesMethod, LinesParameters
from bbcore.preview import PAPER_HEIGHT, PAPER_WIDTH, PREVIEW_SCALE, generate_preview

DIMS = PhysicalDimensions(
    motor_interspace=800.0,
    page_horizontal_offset=295.0,
    page_vertical_offset=200.0,
    page_width=210.0,
    page_height=297.0,
)

NEAR_TOP = PhysicalDimensions(
    motor_interspace=800.0,
    page_horizontal_offset=400.0,
    page_vertical_offset=10.0,
    page_width=210.0,
    page_height=297.0,
)


def _instruction(left, right):
    return struct.pack(">hhB", left, right, 0x0C)


def test_preview_of_lines_is_saved(tmp_path):
    data = LinesMethod().generate(DIMS, LinesParameters(3, 10))
    path = tmp_path / "preview.png"
    canvas = generate_preview((0.0, 0.0), DIMS, InstructionSet(data), path)
    with Image.open(path) as loaded:
        assert loaded.size == (PAPER_WIDTH * PREVIEW_SCALE, PAPER_HEIGHT * PREVIEW_SCALE)
        assert loaded.tobytes() == canvas.image.tobytes()
        assert loaded.getextrema()[0] == 0


def test_preview_draws_where_surface_moved(tmp_path):
    surface = DrawSurface(DIMS)
    surface.sample_xy(50.0, 50.0)
    canvas = generate_preview(
        (0.0, 0.0), DIMS, InstructionSet(surface.instructions), tmp_path / "p.png"
    )
    assert canvas.pixel(0, 0) == 0
    assert canvas.pixel(PAPER_WIDTH * PREVIEW_SCALE - 1, PAPER_HEIGHT * PREVIEW_SCALE - 1) == 255


def test_zero_steps_marks_start_point(tmp_path):
    canvas = generate_preview(
        (20.0, 30.0), DIMS, InstructionSet(_instruction(0, 0)), tmp_path / "p.png"
    )
    assert canvas.pixel(20 * PREVIEW_SCALE, 30 * PREVIEW_SCALE) == 0


def test_out_of_bounds_first_instruction(tmp_path):
    path = tmp_path / "bad.png"
    with pytest.raises(DrawingOutOfBoundsError) as info:
        generate_preview((0.0, 0.0), NEAR_TOP, InstructionSet(_instruction(-32767, 0)), path)
    assert info.value.instruction_idx == 0
    assert info.value.step_x == -32767
    assert info.value.step_y == 0
    assert info.value.prev_x == pytest.approx(NEAR_TOP.page_horizontal_offset)
    assert info.value.prev_y == pytest.approx(NEAR_TOP.page_vertical_offset)
    assert not path.exists()


def test_out_of_bounds_reports_index(tmp_path):
    data = _instruction(0, 0) + _instruction(5, 5) + _instruction(-32767, 0)
    with pytest.raises(DrawingOutOfBoundsError) as info:
        generate_preview((0.0, 0.0), NEAR_TOP, InstructionSet(data), tmp_path / "bad.png")
    assert info.value.instruction_idx == 2
    assert "Instruction index 2" in str(info.value)