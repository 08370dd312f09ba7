"""State of the two drive belts."""

from __future__ import annotations

from dataclasses import dataclass

from bbcore.beltmath import belt_to_cartesian, cartesian_to_belt, steps_to_mm


@dataclass
class Belts:
    """The two belts, by length in millimetres from their motor shafts to the pen."""

    left_belt_length: float
    right_belt_length: float
    motor_interspace: float

    @classmethod
    def from_cartesian(cls, canvas_x: float, canvas_y: float, motor_interspace: float) -> Belts:
        """Create belts holding the pen at (canvas_x, canvas_y) from the left motor shaft."""
        left, right = cartesian_to_belt(canvas_x, canvas_y, motor_interspace)
        return cls(left, right, motor_interspace)

    def move_by_steps(self, left_steps: int, right_steps: int) -> None:
        """Lengthen (or shorten, if negative) each belt by the given motor steps."""
        self.left_belt_length += steps_to_mm(left_steps)
        self.right_belt_length += steps_to_mm(right_steps)

    def as_cartesian(self) -> tuple[float, float]:
        """Return the pen position (x, y) relative to the left motor shaft."""
        return belt_to_cartesian(self.left_belt_length, self.right_belt_length, self.motor_interspace)

    def lengths(self) -> tuple[float, float]:
        """Return the (left, right) belt lengths."""
        return self.left_belt_length, self.right_belt_length