"""Errors raised while validating, chunking or replaying instructions."""

from __future__ import annotations

import math


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class InstructionError(Exception):
    """Base class for all instruction errors."""


class StartOutOfBoundsError(InstructionError):
    """A start index lies outside the instruction bytes."""

    def __init__(self, start_idx: int, upper_bound: int) -> None:
        self.start_idx = start_idx
        self.upper_bound = upper_bound
        super().__init__(f"Invalid start index: {start_idx}, expected between 0 and {upper_bound}")


class DrawingOutOfBoundsError(InstructionError):
    """An instruction moved the pen to an unreachable position."""

    def __init__(
        self,
        instruction_idx: int,
        step_x: int,
        step_y: int,
        prev_x: float,
        prev_y: float,
        target_x: float,
        target_y: float,
    ) -> None:
        self.instruction_idx = instruction_idx
        self.step_x = step_x
        self.step_y = step_y
        self.prev_x = prev_x
        self.prev_y = prev_y
        self.target_x = target_x
        self.target_y = target_y
        super().__init__(
            f"The pen is out of bounds. Instruction index {instruction_idx} called steps "
            f"l:{step_x} r:{step_y}. The belt has moved from "
            f"x:{_format_float(prev_x)} y:{_format_float(prev_y)} to "
            f"x:{_format_float(target_x)} y:{_format_float(target_y)}"
        )


class IncompleteInstructionsError(InstructionError):
    """An instruction did not end with the 0x0C terminator."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        super().__init__(
            f"An instruction did not end with the instruction termination 0x0C, instead {byte:#04x}"
        )


class EmptyInstructionSetError(InstructionError):
    """The instruction bytes are empty."""

    def __init__(self) -> None:
        super().__init__("The provided instruction set is empty")


class InvalidLengthError(InstructionError):
    """The number of instruction bytes is not a multiple of five."""

    def __init__(self) -> None:
        super().__init__("The provided instruction set is of invalid length, `length % 5 != 0`")


class BufferTooSmallError(InstructionError):
    """The requested transmission buffer is too small."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"The configured instruction buffer size is too small {size}")