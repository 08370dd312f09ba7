"""Greyscale canvas for previewing drawings."""

from __future__ import annotations

import math
import os

from PIL import Image

_WHITE = 255
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _floor_to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, math.floor(value)))


def _scale_floor_coordinates(x: float, y: float, scale: int) -> tuple[int, int]:
    return _floor_to_i32(x * scale), _floor_to_i32(y * scale)


def _clamp_u8(value: float) -> int:
    if value < 255.0:
        return int(value) if value > 0.0 else 0
    return 255


class PreviewCanvas:
    """A white greyscale image, ``scale`` pixels per millimetre of paper."""

    def __init__(self, paper_width: int, paper_height: int, scale: int | None = None) -> None:
        self.scale = 1 if scale is None else scale
        self.width = paper_width * self.scale
        self.height = paper_height * self.scale
        self.image = Image.new("L", (self.width, self.height), _WHITE)
        self._pixels = self.image.load()

    def pixel(self, x: int, y: int) -> int:
        """Return the grey value of the pixel at (x, y)."""
        return self._pixels[x, y]

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the canvas to ``path`` as a PNG image."""
        self.image.save(path, format="PNG")

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw an antialiased black line between two points given in millimetres."""
        x0, y0 = _scale_floor_coordinates(x1, y1, self.scale)
        xe, ye = _scale_floor_coordinates(x2, y2, self.scale)

        if abs(ye - y0) > abs(xe - x0):
            if y0 > ye:
                x0, y0, xe, ye = xe, ye, x0, y0
            self._plot_wu_line((y0, x0), (ye, xe), transposed=True)
        else:
            if x0 > xe:
                x0, y0, xe, ye = xe, ye, x0, y0
            self._plot_wu_line((x0, y0), (xe, ye), transposed=False)

    def _plot_wu_line(self, start: tuple[int, int], end: tuple[int, int], transposed: bool) -> None:
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        gradient = dy / dx if dx else 0.0
        fy = float(start[1])
        for x in range(start[0], end[0] + 1):
            base = math.trunc(fy)
            fraction = fy - base
            self._blend(x, base, 1.0 - fraction, transposed)
            self._blend(x, base + 1, fraction, transposed)
            fy += gradient

    def _blend(self, x: int, y: int, weight: float, transposed: bool) -> None:
        if transposed:
            x, y = y, x
        if 0 <= x < self.width and 0 <= y < self.height:
            original = self._pixels[x, y]
            # Line colour is black, so only the original pixel contributes.
            self._pixels[x, y] = _clamp_u8(original * (1.0 - weight))