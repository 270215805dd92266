from __future__ import annotations

import pytest

from lazysnap.api.layout import capture_layout
from lazysnap.runtime.fling_behavior import SnappingFlingBehavior
from lazysnap.ui_runtime.list_layout import current_item
from lazysnap.ui_runtime.snap_offsets import snap_to_center, snap_to_start
from lazysnap.ui_runtime.virtual_list import VirtualListHost
from tests.lazysnap.conftest import HalfConsumingHost


def _resting_item(host: VirtualListHost, snap_offset_for_item):
    snapshot = capture_layout(host)
    item = current_item(snapshot, snap_offset_for_item)
    assert item is not None
    return item, snap_offset_for_item(snapshot, item)


def test_zero_velocity_on_anchored_item_keeps_position() -> None:
    host = VirtualListHost([100] * 5, 300)
    host.scroll_to_item(2)
    behavior = SnappingFlingBehavior(host, snap_offset_for_item=snap_to_center)

    behavior.perform_fling(0.0)

    item, anchor = _resting_item(host, snap_to_center)
    assert item.index == 2
    assert item.offset == anchor
    assert host.scroll == pytest.approx(200.0, abs=0.5)


def test_zero_velocity_springs_to_next_item_past_half_way() -> None:
    host = VirtualListHost([100] * 10, 300)
    host.scroll_to_item(2, offset=-60)
    behavior = SnappingFlingBehavior(host, snap_offset_for_item=snap_to_center)
    seen: list[int | None] = []
    behavior.subscribe_animation_target(seen.append)

    behavior.perform_fling(0.0)

    item, anchor = _resting_item(host, snap_to_center)
    assert seen == [3, None]
    assert item.index == 3
    assert item.offset == anchor


def test_zero_velocity_springs_back_before_half_way() -> None:
    host = VirtualListHost([100] * 10, 300)
    host.scroll_to_item(4, offset=-30)
    behavior = SnappingFlingBehavior(host, snap_offset_for_item=snap_to_start)

    behavior.perform_fling(0.0)

    assert host.item_offset(4) == 0


@pytest.mark.parametrize("velocity", [600.0, 1500.0, 3200.0, -600.0, -1500.0, -3200.0])
def test_decay_fling_comes_to_rest_on_an_item(velocity: float) -> None:
    host = VirtualListHost([100] * 40, 300)
    host.scroll_to_item(20)
    behavior = SnappingFlingBehavior(host, snap_offset_for_item=snap_to_start)
    seen: list[int | None] = []
    behavior.subscribe_animation_target(seen.append)

    behavior.perform_fling(velocity)

    target = seen[0]
    assert seen[-1] is None
    assert host.item_offset(target) == 0
    if velocity > 0:
        assert target > 20
    else:
        assert target < 20


@pytest.mark.parametrize("anchor", [snap_to_start, snap_to_center])
@pytest.mark.parametrize("velocity", [1500.0, 2500.0, -1500.0, -2500.0])
@pytest.mark.parametrize("start_offset", [-30, -60, -90])
def test_decay_fling_from_partial_offset_rests_on_anchor(start_offset: int, velocity: float, anchor) -> None:
    host = VirtualListHost([100] * 40, 300)
    host.scroll_to_item(20, offset=start_offset)
    behavior = SnappingFlingBehavior(host, snap_offset_for_item=anchor)
    seen: list[int | None] = []
    behavior.subscribe_animation_target(seen.append)

    behavior.perform_fling(velocity)

    item, resting_anchor = _resting_item(host, anchor)
    assert seen == [item.index, None]
    assert item.offset == resting_anchor


def test_backward_fling_with_custom_anchor_settles_on_lagging_item() -> None:
    host = VirtualListHost([100] * 40, 300)
    host.scroll_to_item(20, offset=-50)

    def anchor(snapshot, item):
        return 40

    behavior = SnappingFlingBehavior(host, snap_offset_for_item=anchor)
    seen: list[int | None] = []
    behavior.subscribe_animation_target(seen.append)

    behavior.perform_fling(-714.0)

    assert seen == [20, None]
    assert host.item_offset(20) == 40


def test_custom_anchor_with_item_spacing() -> None:
    host = VirtualListHost([80] * 30, 400, item_spacing=20)

    def anchor(snapshot, item):
        return 40

    behavior = SnappingFlingBehavior(host, snap_offset_for_item=anchor)
    seen: list[int | None] = []
    behavior.subscribe_animation_target(seen.append)

    behavior.perform_fling(2000.0)

    assert host.item_offset(seen[0]) == 40


def test_huge_velocity_clamps_to_last_item_and_stops_at_boundary() -> None:
    host = VirtualListHost([100] * 5, 300)
    behavior = SnappingFlingBehavior(host, snap_offset_for_item=snap_to_start)
    seen: list[int | None] = []
    behavior.subscribe_animation_target(seen.append)

    leftover = behavior.perform_fling(1e6)

    assert seen == [4, None]
    assert host.scroll == host.max_scroll
    assert leftover > 0.0
    assert behavior.animation_target is None


def test_under_consuming_host_halts_decay_on_first_tick() -> None:
    host = HalfConsumingHost(VirtualListHost([100] * 20, 300))
    behavior = SnappingFlingBehavior(host, snap_offset_for_item=snap_to_start)

    leftover = behavior.perform_fling(1000.0)

    assert len(host.requests) == 1
    assert 0.0 < leftover < 1000.0
    assert behavior.animation_target is None
