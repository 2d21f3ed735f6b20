"""Core domain models shared by placement and resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paneframe.core.events import ClickEvent

CONTAINER_WIDTH = 9
MAX_CONTAINER_ROWS = 6
VALID_ROTATIONS: tuple[int, ...] = (0, 90, 180, 270)

ClickAction = Callable[["ClickEvent"], None]


class Orientation(StrEnum):
    """Primary fill axis of an outline pane."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class PaneKind(StrEnum):
    """Closed set of pane placement policies."""

    OUTLINE = "OUTLINE"
    STATIC = "STATIC"


@dataclass(frozen=True, slots=True)
class ItemStack:
    """Rendered representation of an item in a container slot."""

    material: str
    amount: int = 1
    name: str | None = None

    @classmethod
    def air(cls) -> ItemStack:
        return cls("AIR")


@dataclass(slots=True, eq=False)
class GuiItem:
    """Item entry owned by a pane.

    Entries compare by identity; ``item`` is the value compared against the
    payload of a click.
    """

    item: object
    action: ClickAction | None = None
    visible: bool = True


@dataclass(frozen=True, slots=True)
class GridPosition:
    """Pane-local cell coordinate."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class PositionedItem:
    """Item entry pinned to a fixed cell of a static pane."""

    entry: GuiItem
    position: GridPosition


@dataclass(frozen=True, slots=True)
class PaneTransform:
    """Immutable snapshot of the transform parameters used for one pass."""

    orientation: Orientation = Orientation.HORIZONTAL
    rotation: int = 0
    gap: int = 0
    repeat: bool = False
    flip_horizontally: bool = False
    flip_vertically: bool = False


@dataclass(frozen=True, slots=True)
class PaneArea:
    """Origin and size of a pane inside its container."""

    x: int
    y: int
    length: int
    height: int

    def clamped(self, max_length: int, max_height: int) -> tuple[int, int]:
        """Return effective length/height limited by the available area."""
        return min(self.length, max_length), min(self.height, max_height)


@dataclass(frozen=True, slots=True)
class PaneViewport:
    """Caller-supplied offset and maximum bounds for a display or click pass."""

    offset_x: int = 0
    offset_y: int = 0
    max_length: int = CONTAINER_WIDTH
    max_height: int = MAX_CONTAINER_ROWS


@dataclass(frozen=True, slots=True)
class Placement:
    """Record of one item written into a container slot."""

    index: int
    slot: int
