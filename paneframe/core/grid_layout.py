"""Conversions between container slots and transformed pane cells."""

from __future__ import annotations

from paneframe.core.geometry import rotate_clockwise, rotate_counter_clockwise
from paneframe.core.models import GridPosition, PaneArea, PaneTransform, PaneViewport


def render_cell(x: int, y: int, length: int, height: int, transform: PaneTransform) -> GridPosition:
    """Map a logical cell to the cell it is drawn in: flips first, then rotation."""
    if transform.flip_horizontally:
        x = length - x - 1
    if transform.flip_vertically:
        y = height - y - 1
    rx, ry = rotate_clockwise(x, y, length, height, transform.rotation)
    return GridPosition(rx, ry)


def logical_cell(x: int, y: int, length: int, height: int, transform: PaneTransform) -> GridPosition:
    """Inverse of :func:`render_cell`: undo rotation, then undo flips."""
    lx, ly = rotate_counter_clockwise(x, y, length, height, transform.rotation)
    if transform.flip_horizontally:
        lx = length - lx - 1
    if transform.flip_vertically:
        ly = height - ly - 1
    return GridPosition(lx, ly)


def slot_for_cell(
    cell: GridPosition,
    area: PaneArea,
    viewport: PaneViewport,
    container_width: int,
) -> int:
    """Return the linear container slot of a pane-local cell."""
    row = area.y + cell.y + viewport.offset_y
    col = area.x + cell.x + viewport.offset_x
    return row * container_width + col


def cell_for_slot(
    slot: int,
    area: PaneArea,
    viewport: PaneViewport,
    length: int,
    height: int,
    container_width: int,
) -> GridPosition | None:
    """Convert a container slot to a pane-local cell, or None outside the pane."""
    x = slot % container_width - area.x - viewport.offset_x
    y = slot // container_width - area.y - viewport.offset_y
    if not (0 <= x < length and 0 <= y < height):
        return None
    return GridPosition(x, y)
