from __future__ import annotations

from collections.abc import Callable

import pytest

from paneframe.core.container import InventoryContainer
from paneframe.core.models import GuiItem, ItemStack


def make_items(*materials: str) -> list[GuiItem]:
    return [GuiItem(ItemStack(material)) for material in materials]


@pytest.fixture
def container() -> InventoryContainer:
    return InventoryContainer(rows=6)


@pytest.fixture
def abc_items() -> list[GuiItem]:
    return make_items("A", "B", "C")


@pytest.fixture
def item_factory() -> Callable[..., list[GuiItem]]:
    return make_items
