import dataclasses

import pytest

from bbcore.hardware import PhysicalDimensions


def _dims():
    return PhysicalDimensions(
        motor_interspace=800.0,
        page_horizontal_offset=295.0,
        page_vertical_offset=150.0,
        page_width=210.0,
        page_height=297.0,
    )


def test_fields_hold_given_values():
    dims = _dims()
    assert dims.motor_interspace == 800.0
    assert dims.page_horizontal_offset == 295.0
    assert dims.page_vertical_offset == 150.0
    assert dims.page_width == 210.0
    assert dims.page_height == 297.0


def test_positional_order_matches_fields():
    dims = PhysicalDimensions(1.0, 2.0, 3.0, 4.0, 5.0)
    assert dataclasses.astuple(dims) == (1.0, 2.0, 3.0, 4.0, 5.0)


def test_is_immutable():
    dims = _dims()
    with pytest.raises(dataclasses.FrozenInstanceError):
        dims.page_width = 100.0  # type: ignore[misc]
    assert dims.page_width == 210.0


def test_equality_by_value():
    assert _dims() == _dims()
    assert dataclasses.replace(_dims(), page_width=100.0).page_width == 100.0