from __future__ import annotations

import pytest

from paneframe.core.container import InventoryContainer
from paneframe.core.models import (
    GuiItem,
    Orientation,
    PaneArea,
    PaneTransform,
    PaneViewport,
)
from paneframe.core.outline import place_outline, resolve_outline

ROW = PaneArea(x=0, y=0, length=3, height=1)
VIEWPORT = PaneViewport(max_length=9, max_height=6)


def _round_trip(
    items: list[GuiItem],
    area: PaneArea,
    transform: PaneTransform,
    viewport: PaneViewport = VIEWPORT,
) -> None:
    container = InventoryContainer(rows=6)
    placements = place_outline(items, area, transform, container, viewport)
    assert placements
    for placement in placements:
        payload = container.get_item_at(placement.slot)
        resolved = resolve_outline(items, area, transform, placement.slot, payload, viewport)
        assert resolved == placement.index


def test_three_item_row_places_in_order(container, abc_items) -> None:
    place_outline(abc_items, ROW, PaneTransform(), container, VIEWPORT)
    assert [container.get_item_at(slot) for slot in range(3)] == [entry.item for entry in abc_items]
    assert container.occupied_slots() == [0, 1, 2]


def test_three_item_row_resolves_click(container, abc_items) -> None:
    place_outline(abc_items, ROW, PaneTransform(), container, VIEWPORT)
    b = abc_items[1].item
    assert resolve_outline(abc_items, ROW, PaneTransform(), 1, b, VIEWPORT) == 1
    assert resolve_outline(abc_items, ROW, PaneTransform(), 5, None, VIEWPORT) is None


def test_gap_skips_cells(abc_items) -> None:
    area = PaneArea(x=0, y=0, length=9, height=1)
    transform = PaneTransform(gap=1)
    container = InventoryContainer(rows=1)
    placements = place_outline(abc_items, area, transform, container, VIEWPORT)
    assert [p.slot for p in placements] == [0, 2, 4]
    assert container.occupied_slots() == [0, 2, 4]
    for gap_slot in (1, 3):
        assert resolve_outline(abc_items, area, transform, gap_slot, None, VIEWPORT) is None
        assert resolve_outline(abc_items, area, transform, gap_slot, abc_items[0].item, VIEWPORT) is None
    assert resolve_outline(abc_items, area, transform, 4, abc_items[2].item, VIEWPORT) == 2


def test_gap_stops_when_pane_runs_out(abc_items) -> None:
    # Only slots 0 and 2 fit in a 3-wide pane with gap 1.
    container = InventoryContainer(rows=1)
    placements = place_outline(abc_items, ROW, PaneTransform(gap=1), container, VIEWPORT)
    assert [p.index for p in placements] == [0, 1]
    assert [p.slot for p in placements] == [0, 2]


@pytest.mark.parametrize("gap", [0, 1, 2, 4])
def test_gap_item_index_matches_fill_index(item_factory, gap: int) -> None:
    items = item_factory("A", "B", "C", "D")
    area = PaneArea(x=0, y=0, length=5, height=4)
    container = InventoryContainer(rows=4)
    placements = place_outline(items, area, PaneTransform(gap=gap), container, VIEWPORT)
    for placement in placements:
        assert placement.slot // 9 * 5 + placement.slot % 9 == placement.index * (gap + 1)


def test_repeat_wraps_items_to_fill_pane(item_factory) -> None:
    items = item_factory("A", "B")
    area = PaneArea(x=1, y=1, length=3, height=2)
    transform = PaneTransform(repeat=True)
    container = InventoryContainer(rows=6)
    placements = place_outline(items, area, transform, container, VIEWPORT)
    assert len(placements) == 6
    assert [p.index for p in placements] == [0, 1, 0, 1, 0, 1]
    for fill_index in range(6):
        slot = (1 + fill_index // 3) * 9 + 1 + fill_index % 3
        payload = container.get_item_at(slot)
        assert payload == items[fill_index % 2].item
        assert resolve_outline(items, area, transform, slot, payload, VIEWPORT) == fill_index % 2


def test_repeat_with_gap_round_trip(item_factory) -> None:
    items = item_factory("A", "B", "C")
    area = PaneArea(x=0, y=0, length=4, height=4)
    _round_trip(items, area, PaneTransform(repeat=True, gap=2))


def test_without_repeat_trailing_cells_are_not_claimed(container, abc_items) -> None:
    area = PaneArea(x=0, y=0, length=3, height=3)
    place_outline(abc_items, area, PaneTransform(), container, VIEWPORT)
    assert resolve_outline(abc_items, area, PaneTransform(), 9, abc_items[0].item, VIEWPORT) is None


def test_vertical_orientation_fills_columns(item_factory) -> None:
    items = item_factory("A", "B", "C", "D")
    area = PaneArea(x=0, y=0, length=2, height=2)
    transform = PaneTransform(orientation=Orientation.VERTICAL)
    container = InventoryContainer(rows=2)
    placements = place_outline(items, area, transform, container, VIEWPORT)
    assert [p.slot for p in placements] == [0, 9, 1, 10]
    _round_trip(items, area, transform)


def test_flip_horizontally_reverses_x_only(container, abc_items) -> None:
    area = PaneArea(x=0, y=0, length=3, height=2)
    transform = PaneTransform(flip_horizontally=True)
    placements = place_outline(abc_items, area, transform, container, VIEWPORT)
    assert [p.slot for p in placements] == [2, 1, 0]
    _round_trip(abc_items, area, transform)


def test_flip_vertically_reverses_y(container, abc_items) -> None:
    area = PaneArea(x=0, y=0, length=3, height=2)
    transform = PaneTransform(flip_vertically=True)
    placements = place_outline(abc_items, area, transform, container, VIEWPORT)
    assert [p.slot for p in placements] == [9, 10, 11]
    _round_trip(abc_items, area, transform)


@pytest.mark.parametrize("rotation", [0, 90, 180, 270])
@pytest.mark.parametrize("orientation", [Orientation.HORIZONTAL, Orientation.VERTICAL])
@pytest.mark.parametrize("flips", [(False, False), (True, False), (False, True), (True, True)])
def test_transformed_round_trip_recovers_every_index(
    item_factory,
    rotation: int,
    orientation: Orientation,
    flips: tuple[bool, bool],
) -> None:
    items = item_factory(*(f"M{i}" for i in range(9)))
    area = PaneArea(x=2, y=1, length=3, height=3)
    transform = PaneTransform(
        orientation=orientation,
        rotation=rotation,
        flip_horizontally=flips[0],
        flip_vertically=flips[1],
    )
    container = InventoryContainer(rows=6)
    placements = place_outline(items, area, transform, container, VIEWPORT)
    assert len(placements) == 9
    assert len({p.slot for p in placements}) == 9
    _round_trip(items, area, transform)


def test_rotation_moves_first_item_to_top_right(abc_items) -> None:
    area = PaneArea(x=0, y=0, length=3, height=3)
    container = InventoryContainer(rows=3)
    placements = place_outline(abc_items, area, PaneTransform(rotation=90), container, VIEWPORT)
    assert [p.slot for p in placements] == [2, 11, 20]


def test_invisible_items_consume_a_cell(container, abc_items) -> None:
    abc_items[1].visible = False
    placements = place_outline(abc_items, ROW, PaneTransform(), container, VIEWPORT)
    assert [(p.index, p.slot) for p in placements] == [(0, 0), (2, 2)]
    assert container.get_item_at(1) is None
    assert resolve_outline(abc_items, ROW, PaneTransform(), 1, abc_items[1].item, VIEWPORT) is None
    assert resolve_outline(abc_items, ROW, PaneTransform(), 2, abc_items[2].item, VIEWPORT) == 2


def test_payload_mismatch_is_not_claimed(container, abc_items) -> None:
    place_outline(abc_items, ROW, PaneTransform(), container, VIEWPORT)
    assert resolve_outline(abc_items, ROW, PaneTransform(), 0, abc_items[1].item, VIEWPORT) is None


def test_offset_and_origin_shift_slots(abc_items) -> None:
    area = PaneArea(x=2, y=1, length=3, height=1)
    viewport = PaneViewport(offset_x=1, offset_y=2, max_length=9, max_height=6)
    container = InventoryContainer(rows=6)
    placements = place_outline(abc_items, area, PaneTransform(), container, viewport)
    assert [p.slot for p in placements] == [30, 31, 32]
    assert resolve_outline(abc_items, area, PaneTransform(), 31, abc_items[1].item, viewport) == 1
    assert resolve_outline(abc_items, area, PaneTransform(), 31, abc_items[1].item, VIEWPORT) is None


def test_max_bounds_clamp_pane(item_factory) -> None:
    items = item_factory("A", "B", "C", "D", "E", "F")
    area = PaneArea(x=0, y=0, length=3, height=2)
    viewport = PaneViewport(max_length=2, max_height=1)
    container = InventoryContainer(rows=2)
    placements = place_outline(items, area, PaneTransform(), container, viewport)
    assert [p.slot for p in placements] == [0, 1]
    assert resolve_outline(items, area, PaneTransform(), 2, None, viewport) is None


def test_out_of_grid_clicks_are_not_claimed(abc_items) -> None:
    area = PaneArea(x=3, y=2, length=3, height=1)
    edges = [
        2 * 9 + 2,  # left of pane
        2 * 9 + 6,  # x == length
        3 * 9 + 3,  # y == height
        1 * 9 + 3,  # above pane
    ]
    for slot in edges:
        assert resolve_outline(abc_items, area, PaneTransform(), slot, abc_items[0].item, VIEWPORT) is None


def test_no_items_places_and_claims_nothing(container) -> None:
    transform = PaneTransform(repeat=True)
    assert place_outline([], ROW, transform, container, VIEWPORT) == []
    assert resolve_outline([], ROW, transform, 0, None, VIEWPORT) is None


def test_rotation_on_clamped_rectangle_fails_fast(abc_items) -> None:
    area = PaneArea(x=0, y=0, length=3, height=3)
    viewport = PaneViewport(max_length=3, max_height=2)
    with pytest.raises(ValueError):
        place_outline(abc_items, area, PaneTransform(rotation=90), InventoryContainer(rows=3), viewport)
