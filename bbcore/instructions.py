"""Binary motor instructions: validation, chunking and decoding.

Each instruction is five bytes: the left and right step counts as big-endian
signed 16-bit integers followed by the 0x0C terminator.
"""

from __future__ import annotations

import struct

from bbcore.errors import (
    BufferTooSmallError,
    EmptyInstructionSetError,
    IncompleteInstructionsError,
    InvalidLengthError,
    StartOutOfBoundsError,
)

TERMINATOR = 0x0C
INSTRUCTION_SIZE = 5
MIN_CHUNK_SIZE = 8
PREVIEW_CHUNK_SIZE = 512

_INSTRUCTION = struct.Struct(">hhx")


def validate_stream(ins_bytes: bytes) -> None:
    """Raise an InstructionError if ``ins_bytes`` is not a valid instruction stream."""
    if not ins_bytes:
        raise EmptyInstructionSetError()
    if len(ins_bytes) % INSTRUCTION_SIZE:
        raise InvalidLengthError()
    terminators = ins_bytes[INSTRUCTION_SIZE - 1 : len(ins_bytes) - 1 : INSTRUCTION_SIZE]
    if any(byte != TERMINATOR for byte in terminators):
        raise IncompleteInstructionsError(ins_bytes[-1])


class InstructionSet:
    """A validated sequence of instruction bytes."""

    __slots__ = ("_binary",)

    def __init__(self, ins_bytes: bytes) -> None:
        data = bytes(ins_bytes)
        validate_stream(data)
        self._binary = data

    @classmethod
    def from_index(cls, ins_bytes: bytes, start_idx: int) -> InstructionSet:
        """Create a set from the bytes starting at ``start_idx``."""
        if start_idx >= len(ins_bytes):
            raise StartOutOfBoundsError(start_idx, len(ins_bytes))
        return cls(bytes(ins_bytes)[start_idx:])

    def __bytes__(self) -> bytes:
        return self._binary

    def __len__(self) -> int:
        return len(self._binary)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._binary!r})"

    def buffer_bounds(self, max_chunk_size: int) -> list[tuple[int, int]]:
        """Split the bytes into chunks of whole instructions.

        Returns inclusive (start, end) index pairs; each chunk ends at most
        ``max_chunk_size`` bytes after its start.
        """
        if max_chunk_size < MIN_CHUNK_SIZE:
            raise BufferTooSmallError(max_chunk_size)

        data = self._binary
        last = len(data) - 1
        bounds: list[tuple[int, int]] = []
        start = 0
        while True:
            limit = min(start + max_chunk_size, last)
            end = next(
                (
                    idx
                    for idx in range(limit, start - 1, -1)
                    if (idx - start + 1) % INSTRUCTION_SIZE == 0 and data[idx] == TERMINATOR
                ),
                None,
            )
            if end is None:
                raise IncompleteInstructionsError(data[-1])
            bounds.append((start, end))
            if end == last:
                return bounds
            start = end + 1

    def numerical_steps(self) -> list[tuple[int, int]]:
        """Decode the instructions into (left, right) step pairs."""
        return [
            steps
            for start, end in self.buffer_bounds(PREVIEW_CHUNK_SIZE)
            for steps in _INSTRUCTION.iter_unpack(self._binary[start : end + 1])
        ]