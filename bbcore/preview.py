"""Rendering instruction sets to preview images."""

from __future__ import annotations

import math
import os

from bbcore.belts import Belts
from bbcore.canvas import PreviewCanvas
from bbcore.errors import DrawingOutOfBoundsError
from bbcore.hardware import PhysicalDimensions
from bbcore.instructions import InstructionSet

PAPER_WIDTH = 210
PAPER_HEIGHT = 297
PREVIEW_SCALE = 2


def generate_preview(
    init_xy: tuple[float, float],
    physical_dim: PhysicalDimensions,
    instruction_set: InstructionSet,
    path: str | os.PathLike[str],
) -> PreviewCanvas:
    """Replay ``instruction_set`` on a canvas and save it as a PNG at ``path``.

    ``init_xy`` is the pen's start relative to the top-left of the page.
    Raises DrawingOutOfBoundsError if an instruction moves the pen somewhere
    unreachable; the image is then not saved.
    """
    canvas = PreviewCanvas(PAPER_WIDTH, PAPER_HEIGHT, PREVIEW_SCALE)
    steps = instruction_set.numerical_steps()

    h_offset = physical_dim.page_horizontal_offset
    v_offset = physical_dim.page_vertical_offset
    belts = Belts.from_cartesian(
        h_offset + init_xy[0], v_offset + init_xy[1], physical_dim.motor_interspace
    )
    last_x, last_y = belts.as_cartesian()

    for index, (left, right) in enumerate(steps):
        belts.move_by_steps(left, -right)
        x, y = belts.as_cartesian()

        if math.isnan(x) or (math.isnan(y) and not math.isnan(last_x) and not math.isnan(last_y)):
            raise DrawingOutOfBoundsError(index, left, right, last_x, last_y, x, y)

        canvas.line(last_x - h_offset, last_y - v_offset, x - h_offset, y - v_offset)
        last_x, last_y = x, y

    canvas.save(path)
    return canvas