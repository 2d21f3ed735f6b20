"""Pane layout and click resolution for fixed-width slot containers."""

from paneframe.core import (
    ClickEvent,
    GuiItem,
    InventoryContainer,
    ItemStack,
    Orientation,
    Pane,
    PaneKind,
    PaneViewport,
)
from paneframe.markup import CallbackRegistry, load_pane, load_panes

__all__ = [
    "CallbackRegistry",
    "ClickEvent",
    "GuiItem",
    "InventoryContainer",
    "ItemStack",
    "Orientation",
    "Pane",
    "PaneKind",
    "PaneViewport",
    "load_pane",
    "load_panes",
]
