"""Click event value passed from the host into pane resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """Absolute slot that was clicked and the item found there."""

    slot: int
    current_item: object | None = None
