"""Physical layout of the drawing machine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalDimensions:
    """Physical dimensions of the machine layout, all in millimetres.

    ``page_horizontal_offset`` and ``page_vertical_offset`` give the position of
    the top-left corner of the page relative to the left motor shaft.
    """

    motor_interspace: float
    page_horizontal_offset: float
    page_vertical_offset: float
    page_width: float
    page_height: float