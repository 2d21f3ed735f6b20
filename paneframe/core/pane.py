"""Mutable pane state with tag-dispatched placement and click resolution."""

from __future__ import annotations

import logging

from paneframe.core.container import SlotContainer
from paneframe.core.events import ClickEvent
from paneframe.core.models import (
    CONTAINER_WIDTH,
    GridPosition,
    GuiItem,
    Orientation,
    PaneArea,
    PaneKind,
    PaneTransform,
    PaneViewport,
    Placement,
    PositionedItem,
)
from paneframe.core.outline import place_outline, resolve_outline
from paneframe.core.static import place_static, resolve_static

logger = logging.getLogger(__name__)


class Pane:
    """Rectangular grid of items mapped onto a region of a container.

    A pane is bound to the row width of the container it is displayed in; that
    width is used both to place items and to resolve clicks.

    Transform parameters are changed through validated setters. Every display
    or click pass reads them once through :meth:`transform`, so a pass never
    mixes parameter values.
    """

    def __init__(
        self,
        x: int,
        y: int,
        length: int,
        height: int,
        *,
        kind: PaneKind = PaneKind.OUTLINE,
        container_width: int = CONTAINER_WIDTH,
    ) -> None:
        if length < 1 or height < 1:
            raise ValueError(f"pane dimensions must be positive, got {length}x{height}")
        if x < 0 or y < 0:
            raise ValueError(f"pane origin must not be negative, got ({x}, {y})")
        if container_width < 1:
            raise ValueError(f"container width must be positive, got {container_width}")
        self._area = PaneArea(x=x, y=y, length=length, height=height)
        self._kind = kind
        self._container_width = container_width
        self._items: list[GuiItem] = []
        self._positions: list[GridPosition] = []
        self._orientation = Orientation.HORIZONTAL
        self._rotation = 0
        self._gap = 0
        self._repeat = False
        self._flip_horizontally = False
        self._flip_vertically = False

    def area(self) -> PaneArea:
        return self._area

    def container_width(self) -> int:
        return self._container_width

    def kind(self) -> PaneKind:
        return self._kind

    def items(self) -> tuple[GuiItem, ...]:
        """Return item entries in placement order."""
        return tuple(self._items)

    def add_item(self, item: GuiItem) -> None:
        """Append an item to an outline pane."""
        self._require_kind(PaneKind.OUTLINE, "add_item")
        self._items.append(item)

    def insert_item(self, item: GuiItem, index: int) -> None:
        """Insert an item into an outline pane before ``index``."""
        self._require_kind(PaneKind.OUTLINE, "insert_item")
        self._items.insert(index, item)

    def add_item_at(self, item: GuiItem, x: int, y: int) -> None:
        """Pin an item to a pane-local cell of a static pane."""
        self._require_kind(PaneKind.STATIC, "add_item_at")
        if x < 0 or y < 0:
            raise ValueError(f"item position must not be negative, got ({x}, {y})")
        self._items.append(item)
        self._positions.append(GridPosition(x, y))

    def clear_items(self) -> None:
        self._items.clear()
        self._positions.clear()

    def set_orientation(self, orientation: Orientation) -> None:
        self._orientation = orientation

    def orientation(self) -> Orientation:
        return self._orientation

    def set_rotation(self, degrees: int) -> None:
        """Set clockwise rotation in multiples of 90, normalised into [0, 360).

        Non-zero rotations require a square pane.
        """
        if degrees % 90 != 0:
            raise ValueError(f"rotation isn't divisible by 90: {degrees}")
        normalized = degrees % 360
        if normalized and self._area.length != self._area.height:
            raise ValueError(
                f"rotation requires equal length and height, got {self._area.length}x{self._area.height}"
            )
        self._rotation = normalized

    def rotation(self) -> int:
        return self._rotation

    def set_gap(self, gap: int) -> None:
        if gap < 0:
            raise ValueError(f"gap must not be negative: {gap}")
        self._gap = gap

    def gap(self) -> int:
        return self._gap

    def set_repeat(self, repeat: bool) -> None:
        self._repeat = repeat

    def does_repeat(self) -> bool:
        return self._repeat

    def set_flip_horizontally(self, flip: bool) -> None:
        self._flip_horizontally = flip

    def is_flipped_horizontally(self) -> bool:
        return self._flip_horizontally

    def set_flip_vertically(self, flip: bool) -> None:
        self._flip_vertically = flip

    def is_flipped_vertically(self) -> bool:
        return self._flip_vertically

    def transform(self) -> PaneTransform:
        """Return an immutable snapshot of the current transform parameters."""
        return PaneTransform(
            orientation=self._orientation,
            rotation=self._rotation,
            gap=self._gap,
            repeat=self._repeat,
            flip_horizontally=self._flip_horizontally,
            flip_vertically=self._flip_vertically,
        )

    def display(self, container: SlotContainer, viewport: PaneViewport | None = None) -> list[Placement]:
        """Render visible items into the container."""
        if container.width != self._container_width:
            raise ValueError(
                f"container width {container.width} does not match pane container width {self._container_width}"
            )
        viewport = viewport or PaneViewport()
        transform = self.transform()
        if self._kind is PaneKind.STATIC:
            placements = place_static(self._pinned(), self._area, transform, container, viewport)
        else:
            placements = place_outline(tuple(self._items), self._area, transform, container, viewport)
        logger.debug(
            "pane_displayed kind=%s placed=%d items=%d",
            self._kind.value,
            len(placements),
            len(self._items),
        )
        return placements

    def resolve(
        self,
        slot: int,
        current_item: object | None,
        viewport: PaneViewport | None = None,
    ) -> int | None:
        """Return the index of the item drawn in ``slot``, or None if it is not ours."""
        viewport = viewport or PaneViewport()
        transform = self.transform()
        if self._kind is PaneKind.STATIC:
            return resolve_static(
                self._pinned(),
                self._area,
                transform,
                slot,
                current_item,
                viewport,
                container_width=self._container_width,
            )
        return resolve_outline(
            tuple(self._items),
            self._area,
            transform,
            slot,
            current_item,
            viewport,
            container_width=self._container_width,
        )

    def click(self, event: ClickEvent, viewport: PaneViewport | None = None) -> bool:
        """Claim a click and run the bound action. Return whether it was handled."""
        index = self.resolve(event.slot, event.current_item, viewport)
        if index is None:
            return False
        logger.debug("pane_click_claimed slot=%d index=%d", event.slot, index)
        action = self._items[index].action
        if action is not None:
            action(event)
        return True

    def _pinned(self) -> tuple[PositionedItem, ...]:
        return tuple(
            PositionedItem(entry=item, position=position)
            for item, position in zip(self._items, self._positions, strict=True)
        )

    def _require_kind(self, kind: PaneKind, operation: str) -> None:
        if self._kind is not kind:
            raise ValueError(f"{operation} is not supported by {self._kind.value.lower()} panes")
