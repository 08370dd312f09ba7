"""Conversions between pen coordinates, belt lengths and motor steps.

All lengths are in millimetres.  Coordinates are relative to the left motor
shaft and grow rightwards and downwards.
"""

from __future__ import annotations

import math

STEPS_PER_REV = 3200.0
"""Number of motor steps for one full revolution."""

WHEEL_DIAMETER = 12.63
"""Diameter of the pulley wheel, in millimetres."""


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    if value < 0 or math.isnan(value):
        return math.nan
    return math.sqrt(value)


def cartesian_to_belt(x: float, y: float, motor_interspace: float) -> tuple[float, float]:
    """Return the (left, right) belt lengths for the pen at (x, y)."""
    left_belt = _sqrt(x**2 + y**2)
    right_belt = _sqrt((motor_interspace - x) ** 2 + y**2)
    return left_belt, right_belt


def belt_to_cartesian(
    left_length: float, right_length: float, motor_interspace: float
) -> tuple[float, float]:
    """Return the (x, y) pen position for the given belt lengths.

    When the lengths describe no reachable point, y is NaN.
    """
    x = (motor_interspace**2 + left_length**2 - right_length**2) / (2.0 * motor_interspace)
    y = _sqrt(left_length**2 - x**2)
    return x, y


def steps_per_mm() -> float:
    """Return the number of motor steps that move a belt by one millimetre."""
    return STEPS_PER_REV / (math.pi * WHEEL_DIAMETER)


def steps_to_mm(steps: int) -> float:
    """Return the belt movement, in millimetres, caused by ``steps`` motor steps."""
    return steps / steps_per_mm()