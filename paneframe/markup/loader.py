"""XML markup loader for panes.

A document root holds one element per pane, for example::

    <gui>
      <outlinepane x="0" y="0" length="9" height="1" gap="1" repeat="true">
        <item id="DIAMOND" amount="2" onClick="buy"/>
        <empty/>
      </outlinepane>
      <staticpane x="0" y="1" length="3" height="3" populate="fill_static"/>
    </gui>

Malformed panes are logged and dropped; the rest of the document still loads.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.etree.ElementTree import Element

from paneframe.core.models import CONTAINER_WIDTH, GuiItem, ItemStack, Orientation, PaneKind
from paneframe.core.pane import Pane
from paneframe.infra.errors import RECOVERABLE_CONFIG_ERRORS, log_recoverable
from paneframe.markup.registry import CallbackRegistry, PaneLoaderRegistry

logger = logging.getLogger(__name__)

EMPTY_ELEMENT = "empty"


def default_pane_loaders() -> PaneLoaderRegistry:
    """Return a registry holding the built-in pane element loaders."""
    registry = PaneLoaderRegistry()
    registry.register("outlinepane", load_outline_pane)
    registry.register("staticpane", load_static_pane)
    return registry


def load_panes(
    source: str | bytes | Path,
    callbacks: CallbackRegistry,
    *,
    loaders: PaneLoaderRegistry | None = None,
    container_width: int = CONTAINER_WIDTH,
) -> list[Pane]:
    """Load every pane element under the document root.

    ``source`` is either a path to an XML file or the XML text itself. Every
    pane is bound to ``container_width``, the row width of the container it
    will be displayed in.
    """
    try:
        if isinstance(source, Path):
            root = ET.parse(source).getroot()
        else:
            root = ET.fromstring(source)
    except (ET.ParseError, OSError):
        log_recoverable(logger, "markup_parse_failed source=%s", _describe(source))
        return []

    registry = loaders or default_pane_loaders()
    panes: list[Pane] = []
    for element in root:
        pane = load_pane(element, callbacks, loaders=registry, container_width=container_width)
        if pane is not None:
            panes.append(pane)
    logger.debug("markup_loaded panes=%d elements=%d", len(panes), len(root))
    return panes


def load_pane(
    element: Element,
    callbacks: CallbackRegistry,
    *,
    loaders: PaneLoaderRegistry | None = None,
    container_width: int = CONTAINER_WIDTH,
) -> Pane | None:
    """Load a single pane element. Return None when it cannot be loaded."""
    registry = loaders or default_pane_loaders()
    loader = registry.get(element.tag)
    if loader is None:
        logger.warning("pane_load_skipped unknown_element=%s", element.tag)
        return None
    try:
        return loader(element, callbacks, container_width)
    except RECOVERABLE_CONFIG_ERRORS:
        log_recoverable(logger, "pane_load_failed element=%s", element.tag)
        return None


def load_outline_pane(
    element: Element,
    callbacks: CallbackRegistry,
    container_width: int = CONTAINER_WIDTH,
) -> Pane:
    """Build an outline pane from its element."""
    pane = _new_pane(element, PaneKind.OUTLINE, container_width)
    if element.get("orientation") is not None:
        pane.set_orientation(Orientation(element.get("orientation", "").strip().upper()))
    if element.get("gap") is not None:
        pane.set_gap(_int_attribute(element, "gap"))
    if element.get("repeat") is not None:
        pane.set_repeat(_bool_attribute(element, "repeat"))

    if _populate(pane, element, callbacks):
        return pane
    for child in element:
        pane.add_item(load_item(child, callbacks))
    return pane


def load_static_pane(
    element: Element,
    callbacks: CallbackRegistry,
    container_width: int = CONTAINER_WIDTH,
) -> Pane:
    """Build a static pane; each child carries its own ``x``/``y`` cell."""
    pane = _new_pane(element, PaneKind.STATIC, container_width)
    if _populate(pane, element, callbacks):
        return pane
    for child in element:
        pane.add_item_at(
            load_item(child, callbacks),
            _int_attribute(child, "x"),
            _int_attribute(child, "y"),
        )
    return pane


def load_item(element: Element, callbacks: CallbackRegistry) -> GuiItem:
    """Build an item entry; ``<empty/>`` yields an invisible placeholder."""
    if element.tag == EMPTY_ELEMENT:
        return GuiItem(ItemStack.air(), visible=False)

    material = element.get("id", "").strip().upper()
    if not material:
        raise ValueError(f"item element <{element.tag}> is missing an id")
    amount = _int_attribute(element, "amount") if element.get("amount") is not None else 1
    if amount < 1:
        raise ValueError(f"item amount must be positive: {amount}")
    stack = ItemStack(material=material, amount=amount, name=element.get("name"))

    handler_name = element.get("onClick")
    action = callbacks.click_handler(handler_name) if handler_name else None
    return GuiItem(stack, action=action)


def _new_pane(element: Element, kind: PaneKind, container_width: int) -> Pane:
    pane = Pane(
        _int_attribute(element, "x"),
        _int_attribute(element, "y"),
        _int_attribute(element, "length"),
        _int_attribute(element, "height"),
        kind=kind,
        container_width=container_width,
    )
    if element.get("rotation") is not None:
        pane.set_rotation(_int_attribute(element, "rotation"))
    if element.get("flipHorizontally") is not None:
        pane.set_flip_horizontally(_bool_attribute(element, "flipHorizontally"))
    if element.get("flipVertically") is not None:
        pane.set_flip_vertically(_bool_attribute(element, "flipVertically"))
    return pane


def _populate(pane: Pane, element: Element, callbacks: CallbackRegistry) -> bool:
    name = element.get("populate")
    if name is None:
        return False
    callbacks.populate_handler(name.strip())(pane)
    return True


def _int_attribute(element: Element, name: str) -> int:
    raw = element.get(name)
    if raw is None:
        raise ValueError(f"<{element.tag}> is missing attribute {name!r}")
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"<{element.tag}> attribute {name!r} is not an integer: {raw!r}") from exc


def _bool_attribute(element: Element, name: str) -> bool:
    # Anything other than "true" reads as false.
    return element.get(name, "").strip().lower() == "true"


def _describe(source: str | bytes | Path) -> str:
    if isinstance(source, Path):
        return str(source)
    return f"<inline {len(source)} chars>"
