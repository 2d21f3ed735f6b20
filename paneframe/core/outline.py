"""Outline pane placement and its inverse click resolution.

Items are laid out along the fill axis starting at the top-left cell,
skipping ``gap`` cells between consecutive items and optionally cycling the
sequence until the pane is full. Resolution recovers the item index from a
clicked slot under the same transform snapshot, so both functions must agree
on every step of the mapping.
"""

from __future__ import annotations

from collections.abc import Sequence

from paneframe.core.container import SlotContainer
from paneframe.core.grid_layout import cell_for_slot, logical_cell, render_cell, slot_for_cell
from paneframe.core.models import (
    CONTAINER_WIDTH,
    GuiItem,
    Orientation,
    PaneArea,
    PaneTransform,
    PaneViewport,
    Placement,
)


def place_outline(
    items: Sequence[GuiItem],
    area: PaneArea,
    transform: PaneTransform,
    container: SlotContainer,
    viewport: PaneViewport,
) -> list[Placement]:
    """Write visible items into the container and return what was written."""
    length, height = area.clamped(viewport.max_length, viewport.max_height)
    if not items:
        return []

    placements: list[Placement] = []
    count = length * height if transform.repeat else len(items)
    x = y = 0
    for i in range(count):
        index = i % len(items)
        entry = items[index]
        if entry.visible:
            cell = render_cell(x, y, length, height, transform)
            slot = slot_for_cell(cell, area, viewport, container.width)
            container.set_item(slot, entry.item)
            placements.append(Placement(index=index, slot=slot))

        x, y = _advance(x, y, length, height, transform)
        if x >= length or y >= height:
            break
    return placements


def resolve_outline(
    items: Sequence[GuiItem],
    area: PaneArea,
    transform: PaneTransform,
    slot: int,
    current_item: object | None,
    viewport: PaneViewport,
    *,
    container_width: int = CONTAINER_WIDTH,
) -> int | None:
    """Return the index of the item drawn in ``slot``, or None if it is not ours."""
    length, height = area.clamped(viewport.max_length, viewport.max_height)
    cell = cell_for_slot(slot, area, viewport, length, height, container_width)
    if cell is None or not items:
        return None

    logical = logical_cell(cell.x, cell.y, length, height, transform)
    if transform.orientation is Orientation.HORIZONTAL:
        fill_index = logical.y * length + logical.x
    else:
        fill_index = logical.x * height + logical.y

    step = transform.gap + 1
    if fill_index % step:
        # Gap cell between two items.
        return None
    index = fill_index // step

    if index >= len(items):
        if not transform.repeat:
            return None
        index %= len(items)

    entry = items[index]
    if not entry.visible or entry.item != current_item:
        return None
    return index


def _advance(x: int, y: int, length: int, height: int, transform: PaneTransform) -> tuple[int, int]:
    step = transform.gap + 1
    if transform.orientation is Orientation.HORIZONTAL:
        x += step
        if x >= length:
            y += x // length
            x %= length
    else:
        y += step
        if y >= height:
            x += y // height
            y %= height
    return x, y
