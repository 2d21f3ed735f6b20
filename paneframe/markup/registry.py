"""Name-keyed registries used to wire markup to application code."""

from __future__ import annotations

from collections.abc import Callable
from xml.etree.ElementTree import Element

from paneframe.core.models import ClickAction
from paneframe.core.pane import Pane

PaneLoader = Callable[[Element, "CallbackRegistry", int], Pane]
PopulateHandler = Callable[[Pane], None]


class CallbackRegistry:
    """Explicit table of named callbacks supplied by the embedding application."""

    def __init__(
        self,
        *,
        click_handlers: dict[str, ClickAction] | None = None,
        populate_handlers: dict[str, PopulateHandler] | None = None,
    ) -> None:
        self._click_handlers: dict[str, ClickAction] = dict(click_handlers or {})
        self._populate_handlers: dict[str, PopulateHandler] = dict(populate_handlers or {})

    def register_click(self, name: str, handler: ClickAction) -> None:
        """Register a click callback under ``name``."""
        if name in self._click_handlers:
            raise ValueError(f"click handler already registered: {name!r}")
        self._click_handlers[name] = handler

    def register_populate(self, name: str, handler: PopulateHandler) -> None:
        """Register a pane populate callback under ``name``."""
        if name in self._populate_handlers:
            raise ValueError(f"populate handler already registered: {name!r}")
        self._populate_handlers[name] = handler

    def click_handler(self, name: str) -> ClickAction:
        """Return the click callback for ``name``. Raise KeyError when unknown."""
        handler = self._click_handlers.get(name)
        if handler is None:
            raise KeyError(f"unknown click handler: {name!r}")
        return handler

    def populate_handler(self, name: str) -> PopulateHandler:
        """Return the populate callback for ``name``. Raise KeyError when unknown."""
        handler = self._populate_handlers.get(name)
        if handler is None:
            raise KeyError(f"unknown populate handler: {name!r}")
        return handler


class PaneLoaderRegistry:
    """Map of markup element names to pane loader functions."""

    def __init__(self) -> None:
        self._loaders: dict[str, PaneLoader] = {}

    def register(self, name: str, loader: PaneLoader) -> None:
        """Register a loader for a pane element name."""
        key = name.strip().lower()
        if key in self._loaders:
            raise ValueError(f"pane name already registered: {name!r}")
        self._loaders[key] = loader

    def get(self, name: str) -> PaneLoader | None:
        return self._loaders.get(name.strip().lower())

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._loaders))
