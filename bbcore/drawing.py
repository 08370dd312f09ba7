"""Drawing surfaces and the interface shared by drawing methods."""

from __future__ import annotations

import math
import struct
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from bbcore.beltmath import cartesian_to_belt, steps_per_mm
from bbcore.belts import Belts
from bbcore.hardware import PhysicalDimensions

_INSTRUCTION = struct.Struct(">hhB")
_TERMINATOR = 0x0C
_STEP_MIN = -(2**15)
_STEP_MAX = 2**15 - 1


class StepsOutOfRangeError(ValueError):
    """A single movement needs more steps than one instruction can hold."""


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero; NaN becomes 0."""
    if math.isnan(value):
        return 0
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


class DrawMethod(ABC):
    """A way of turning parameters into drawing instructions.

    Subclasses set ``id`` (unique identifier) and ``formatted_name``.
    """

    id: ClassVar[str]
    formatted_name: ClassVar[str]

    @abstractmethod
    def generate(self, physical_dimensions: PhysicalDimensions, parameters: Any) -> bytes:
        """Return the instruction bytes for a drawing on the given machine."""


class DrawSurface:
    """An abstract page the pen is moved over, recording the instructions used.

    Positions are in millimetres relative to the top-left corner of the page.
    """

    def __init__(
        self,
        physical_dimensions: PhysicalDimensions,
        init_x: float = 0.0,
        init_y: float = 0.0,
    ) -> None:
        self.physical_dimensions = physical_dimensions
        self.init_x = init_x
        self.init_y = init_y
        self.belts = Belts.from_cartesian(
            physical_dimensions.page_horizontal_offset + init_x,
            physical_dimensions.page_vertical_offset + init_y,
            physical_dimensions.motor_interspace,
        )
        self._instructions = bytearray()

    @property
    def instructions(self) -> bytes:
        """The instruction bytes recorded so far."""
        return bytes(self._instructions)

    def sample_xy(self, x: float, y: float) -> None:
        """Move the pen to (x, y), recording a line from the current position."""
        dims = self.physical_dimensions
        new_left, new_right = cartesian_to_belt(
            dims.page_horizontal_offset + x,
            dims.page_vertical_offset + y,
            dims.motor_interspace,
        )
        current_left, current_right = self.belts.lengths()
        left_steps = (new_left - current_left) * steps_per_mm()
        right_steps = -((new_right - current_right) * steps_per_mm())

        for steps in (left_steps, right_steps):
            if steps >= _STEP_MAX or steps <= _STEP_MIN:
                raise StepsOutOfRangeError(f"Steps are outside range: {steps}")

        ls = _round_half_away(left_steps)
        rs = _round_half_away(right_steps)
        # The right belt's steps are stored inverted, so undo that for the belts.
        self.belts.move_by_steps(ls, -rs)
        self._instructions += _INSTRUCTION.pack(ls, rs, _TERMINATOR)

    def pop_sample(self) -> None:
        """Remove the last recorded movement and move the belts back."""
        if len(self._instructions) < _INSTRUCTION.size:
            raise IndexError("cannot pop instructions - there are none")
        ls, rs, _ = _INSTRUCTION.unpack(self._instructions[-_INSTRUCTION.size :])
        del self._instructions[-_INSTRUCTION.size :]
        self.belts.move_by_steps(-ls, rs)

    def position(self) -> tuple[float, float]:
        """Return the current pen position relative to the top-left of the page."""
        total_x, total_y = self.belts.as_cartesian()
        dims = self.physical_dimensions
        return total_x - dims.page_horizontal_offset, total_y - dims.page_vertical_offset