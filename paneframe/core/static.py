"""Static pane placement and resolution for items pinned to fixed cells."""

from __future__ import annotations

from collections.abc import Sequence

from paneframe.core.container import SlotContainer
from paneframe.core.grid_layout import cell_for_slot, logical_cell, render_cell, slot_for_cell
from paneframe.core.models import (
    CONTAINER_WIDTH,
    PaneArea,
    PaneTransform,
    PaneViewport,
    Placement,
    PositionedItem,
)


def place_static(
    items: Sequence[PositionedItem],
    area: PaneArea,
    transform: PaneTransform,
    container: SlotContainer,
    viewport: PaneViewport,
) -> list[Placement]:
    """Write each visible item at its pinned cell when it fits the clamped pane."""
    length, height = area.clamped(viewport.max_length, viewport.max_height)
    placements: list[Placement] = []
    for index, pinned in enumerate(items):
        position = pinned.position
        if not pinned.entry.visible:
            continue
        if not (0 <= position.x < length and 0 <= position.y < height):
            continue
        cell = render_cell(position.x, position.y, length, height, transform)
        slot = slot_for_cell(cell, area, viewport, container.width)
        container.set_item(slot, pinned.entry.item)
        placements.append(Placement(index=index, slot=slot))
    return placements


def resolve_static(
    items: Sequence[PositionedItem],
    area: PaneArea,
    transform: PaneTransform,
    slot: int,
    current_item: object | None,
    viewport: PaneViewport,
    *,
    container_width: int = CONTAINER_WIDTH,
) -> int | None:
    """Return the index of the pinned item drawn in ``slot``, or None."""
    length, height = area.clamped(viewport.max_length, viewport.max_height)
    cell = cell_for_slot(slot, area, viewport, length, height, container_width)
    if cell is None:
        return None
    logical = logical_cell(cell.x, cell.y, length, height, transform)

    # Later items overwrite earlier ones on placement, so search newest first.
    for index in range(len(items) - 1, -1, -1):
        pinned = items[index]
        if pinned.position != logical or not pinned.entry.visible:
            continue
        if pinned.entry.item != current_item:
            return None
        return index
    return None
