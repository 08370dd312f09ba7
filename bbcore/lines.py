"""A drawing method that draws back-and-forth horizontal lines."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields

from bbcore.drawing import DrawMethod, DrawSurface
from bbcore.hardware import PhysicalDimensions

_U32_MAX = 2**32 - 1
_SEGMENTS = 100
_LINE_SPACING = 10


@dataclass(frozen=True)
class LinesParameters:
    """Parameters for the lines method: line count and horizontal margin in mm."""

    num_lines: int
    horizontal_margin: int

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field.name} must be an integer, got {value!r}")
            if not 0 <= value <= _U32_MAX:
                raise ValueError(f"{field.name} out of range: {value}")

    def to_json(self) -> str:
        """Serialise the parameters as compact JSON."""
        return json.dumps(asdict(self), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> LinesParameters:
        """Parse parameters from JSON; raises ValueError when invalid."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        try:
            return cls(**{field.name: data[field.name] for field in fields(cls)})
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]}") from exc


class LinesMethod(DrawMethod):
    """Draws ``num_lines`` horizontal lines, alternating direction, 10 mm apart."""

    id = "lines"
    formatted_name = "Lines"

    def generate(self, physical_dimensions: PhysicalDimensions, parameters: LinesParameters) -> bytes:
        surface = DrawSurface(physical_dimensions, 0.0, 0.0)
        page_width = physical_dimensions.page_width
        margin = float(parameters.horizontal_margin)
        segment = (page_width - 2.0 * margin) / _SEGMENTS

        for line in range(parameters.num_lines):
            y = float(line * _LINE_SPACING)
            for step in range(_SEGMENTS + 1):
                if line % 2 == 0:
                    x = segment * step + margin
                else:
                    x = page_width - margin - segment * step
                surface.sample_xy(x, y)

            current_x, current_y = surface.position()
            for offset in range(_LINE_SPACING):
                surface.sample_xy(current_x, current_y + offset)

        return surface.instructions