"""Placement, resolution and the pane model."""

from paneframe.core.container import InventoryContainer, SlotContainer
from paneframe.core.events import ClickEvent
from paneframe.core.geometry import rotate_clockwise, rotate_counter_clockwise
from paneframe.core.models import (
    CONTAINER_WIDTH,
    GridPosition,
    GuiItem,
    ItemStack,
    Orientation,
    PaneArea,
    PaneKind,
    PaneTransform,
    PaneViewport,
    Placement,
    PositionedItem,
)
from paneframe.core.outline import place_outline, resolve_outline
from paneframe.core.pane import Pane
from paneframe.core.static import place_static, resolve_static

__all__ = [
    "CONTAINER_WIDTH",
    "ClickEvent",
    "GridPosition",
    "GuiItem",
    "InventoryContainer",
    "ItemStack",
    "Orientation",
    "Pane",
    "PaneArea",
    "PaneKind",
    "PaneTransform",
    "PaneViewport",
    "Placement",
    "PositionedItem",
    "SlotContainer",
    "place_outline",
    "place_static",
    "resolve_outline",
    "resolve_static",
    "rotate_clockwise",
    "rotate_counter_clockwise",
]
