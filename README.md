# bbcore

Core logic for a wall-hung drawing machine whose pen hangs from two belts,
each driven by a stepper motor. The package turns drawings into the machine's
binary step instructions, checks instruction streams, works out how to split
them into chunks for sending, and renders a PNG preview of what the pen will
draw.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Concepts

- **`PhysicalDimensions`** (`bbcore.hardware`) is a frozen dataclass that
  describes the machine layout in millimetres: `motor_interspace` (the
  distance between the motor shafts), `page_horizontal_offset` and
  `page_vertical_offset` (where the top-left corner of the page sits relative
  to the left motor shaft), and `page_width` / `page_height`.
- **Instructions** are five bytes each: a big-endian signed 16-bit step count
  for the left belt, one for the right belt, and the terminator byte `0x0C`.
- **`Belts`** (`bbcore.belts`) holds the two belt lengths. Create it with
  `Belts.from_cartesian(x, y, motor_interspace)`, apply steps with
  `move_by_steps(left, right)`, and read back `lengths()` or the pen position
  with `as_cartesian()`.
- **`bbcore.beltmath`** has the conversions underneath: `cartesian_to_belt`,
  `belt_to_cartesian` (y is NaN for an unreachable position), `steps_per_mm()`
  and `steps_to_mm(steps)`.

## Generating instructions

```python
from bbcore.hardware import PhysicalDimensions
from bbcore.lines import LinesMethod, LinesParameters

dims = PhysicalDimensions(
    motor_interspace=500.0,
    page_horizontal_offset=145.0,
    page_vertical_offset=100.0,
    page_width=210.0,
    page_height=297.0,
)

params = LinesParameters(num_lines=10, horizontal_margin=20)
data = LinesMethod().generate(dims, params)  # bytes
```

`LinesMethod` draws `num_lines` horizontal lines 10 mm apart, alternating
direction, each split into 100 segments between the margins. Both parameters
must be non-negative integers that fit in 32 bits; otherwise `ValueError` is
raised. `LinesParameters` can be stored and loaded as JSON with `to_json()`
and `LinesParameters.from_json(text)`.

To write your own method, subclass `bbcore.drawing.DrawMethod`, set its `id`
and `formatted_name`, implement `generate(physical_dimensions, parameters)`,
and drive a `DrawSurface`:

- `DrawSurface(physical_dimensions, init_x=0.0, init_y=0.0)` starts the pen at
  a position on the page;
- `sample_xy(x, y)` moves the pen and records one instruction;
- `pop_sample()` takes the last one back (`IndexError` if there is none);
- `position()` gives the current pen position on the page;
- `instructions` holds the recorded bytes.

A move too large to fit in one instruction raises `StepsOutOfRangeError`.

## Validating and chunking

```python
from bbcore.instructions import InstructionSet, validate_stream

validate_stream(data)                      # raises on an invalid stream
ins = InstructionSet(data)                 # also validates
chunks = ins.buffer_bounds(512)            # inclusive (start, end) byte ranges
steps = ins.numerical_steps()              # [(left, right), ...]

resumed = InstructionSet.from_index(data, 500)  # start part-way through
```

`bytes(ins)` and `len(ins)` give the stored bytes and their count. Each chunk
from `buffer_bounds` holds whole instructions only.

Invalid input raises a subclass of `bbcore.errors.InstructionError`:
`EmptyInstructionSetError`, `InvalidLengthError`,
`IncompleteInstructionsError`, `StartOutOfBoundsError` or
`BufferTooSmallError` (chunk sizes below 8).

## Previews

```python
from bbcore.preview import generate_preview

canvas = generate_preview((0.0, 0.0), dims, ins, "preview.png")
```

The preview is drawn on a 210 × 297 mm canvas at two pixels per millimetre,
saved as PNG, and the `PreviewCanvas` is returned. If an instruction would
move the pen to a position the belts cannot reach, `DrawingOutOfBoundsError`
is raised with the offending instruction index and no image is written.

`bbcore.canvas.PreviewCanvas(paper_width, paper_height, scale=None)` can also
be used directly: `line(x1, y1, x2, y2)` draws an antialiased black line,
`pixel(x, y)` reads a grey value, and `save(path)` writes a PNG.

## What it does not do

bbcore has no command-line tool and does not talk to the machine itself:
`buffer_bounds` only computes the byte ranges to send, and sending them is
left to the caller. The only drawing method included is `LinesMethod`.