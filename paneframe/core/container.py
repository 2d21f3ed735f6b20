"""Slot container contract and a numpy-backed implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import numpy as np

from paneframe.core.models import CONTAINER_WIDTH, MAX_CONTAINER_ROWS

if TYPE_CHECKING:
    from paneframe.infra.config import PaneFrameConfig


class SlotContainer(Protocol):
    """Fixed-size flat slot array addressed row-major with a fixed row width."""

    @property
    def width(self) -> int: ...

    @property
    def size(self) -> int: ...

    def set_item(self, index: int, item: object | None) -> None: ...

    def get_item_at(self, index: int) -> object | None: ...


@dataclass(slots=True)
class InventoryContainer:
    """Numpy-backed container of ``rows * width`` slots."""

    rows: int = MAX_CONTAINER_ROWS
    width: int = CONTAINER_WIDTH
    slots: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.width < 1:
            raise ValueError(f"container dimensions must be positive, got {self.rows}x{self.width}")
        self.slots = np.full(self.rows * self.width, None, dtype=object)

    @classmethod
    def from_config(cls, config: PaneFrameConfig) -> InventoryContainer:
        """Build an empty container sized by runtime configuration."""
        return cls(rows=config.container_rows, width=config.container_width)

    @property
    def size(self) -> int:
        return int(self.slots.shape[0])

    def set_item(self, index: int, item: object | None) -> None:
        """Write an item into a slot."""
        self.slots[self._checked(index)] = item

    def get_item_at(self, index: int) -> object | None:
        """Return the item in a slot, or None when empty."""
        return self.slots[self._checked(index)]

    def clear(self) -> None:
        """Empty every slot."""
        self.slots[:] = None

    def occupied_slots(self) -> list[int]:
        """Return indices of non-empty slots in ascending order."""
        return [index for index, item in enumerate(self.slots) if item is not None]

    def _checked(self, index: int) -> int:
        if not 0 <= index < self.size:
            raise IndexError(f"slot {index} outside container of size {self.size}")
        return index
