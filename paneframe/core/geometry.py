"""Rotation of cell coordinates within a bounded grid."""

from __future__ import annotations

from paneframe.core.models import VALID_ROTATIONS


def rotate_clockwise(x: int, y: int, width: int, height: int, degrees: int) -> tuple[int, int]:
    """Rotate a cell clockwise around the centre of a y-down grid.

    Non-zero rotations are only defined on square grids.
    """
    _check_rotation(width, height, degrees)
    last = width - 1
    if degrees == 90:
        return last - y, x
    if degrees == 180:
        return last - x, last - y
    if degrees == 270:
        return y, last - x
    return x, y


def rotate_counter_clockwise(x: int, y: int, width: int, height: int, degrees: int) -> tuple[int, int]:
    """Undo :func:`rotate_clockwise` for the same grid and angle."""
    _check_rotation(width, height, degrees)
    last = width - 1
    if degrees == 90:
        return y, last - x
    if degrees == 180:
        return last - x, last - y
    if degrees == 270:
        return last - y, x
    return x, y


def _check_rotation(width: int, height: int, degrees: int) -> None:
    if degrees not in VALID_ROTATIONS:
        raise ValueError(f"rotation must be one of {VALID_ROTATIONS}, got {degrees}")
    if degrees != 0 and width != height:
        raise ValueError(f"rotation requires a square grid, got {width}x{height}")
