"""Declarative pane markup loading."""

from paneframe.markup.loader import default_pane_loaders, load_item, load_pane, load_panes
from paneframe.markup.registry import CallbackRegistry, PaneLoaderRegistry

__all__ = [
    "CallbackRegistry",
    "PaneLoaderRegistry",
    "default_pane_loaders",
    "load_item",
    "load_pane",
    "load_panes",
]
