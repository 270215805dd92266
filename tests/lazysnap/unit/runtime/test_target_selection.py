from __future__ import annotations

from lazysnap.api.fling import FlingMode, FlingPlan
from lazysnap.api.layout import ItemInfo
from lazysnap.runtime.curves import ExponentialDecayCurve
from lazysnap.runtime.target_selection import (
    can_fling_past_current_item,
    decide_fling_plan,
    target_index_for_decay,
    target_index_for_spring,
)
from lazysnap.ui_runtime.snap_offsets import snap_to_start
from tests.lazysnap.conftest import make_snapshot

DECAY = ExponentialDecayCurve()

UNIFORM = make_snapshot([(0, 0, 100), (1, 100, 100), (2, 200, 100)], total=20)


def _can_pass(snapshot, item: ItemInfo, velocity: float) -> bool:
    return can_fling_past_current_item(
        snapshot,
        item,
        velocity,
        snap_offset_for_item=snap_to_start,
        decay_curve=DECAY,
    )


def _decay_target(snapshot, item: ItemInfo, velocity: float, limit: int = 10**9, anchor=snap_to_start) -> int:
    return target_index_for_decay(
        snapshot,
        item,
        velocity,
        snap_offset_for_item=anchor,
        decay_curve=DECAY,
        maximum_fling_distance=lambda layout: limit,
    )


def test_near_zero_velocity_never_passes_current_item() -> None:
    item = UNIFORM.visible_items[0]
    for velocity in (0.0, 0.49, -0.49):
        assert not _can_pass(UNIFORM, item, velocity)


def test_positive_velocity_passes_when_projection_reaches_snap_offset() -> None:
    lagging = make_snapshot([(0, -60, 100), (1, 40, 100)], total=20)
    item = lagging.visible_items[0]

    assert not _can_pass(lagging, item, 100.0)
    assert _can_pass(lagging, item, 420.0)


def test_negative_velocity_must_project_past_whole_item() -> None:
    item = UNIFORM.visible_items[0]

    assert _can_pass(UNIFORM, item, -430.0)
    assert not _can_pass(UNIFORM, item, -400.0)


def test_item_spacing_raises_the_bar_for_passing() -> None:
    spaced = make_snapshot([(0, 0, 100), (1, 110, 100)], total=20)
    item = spaced.visible_items[0]

    assert _can_pass(spaced, item, 42.5)
    assert not _can_pass(spaced, item, 30.0)


def test_decay_target_extrapolates_whole_items() -> None:
    item = UNIFORM.visible_items[0]

    assert _decay_target(UNIFORM, item, 1050.0) == 2
    assert _decay_target(UNIFORM, item, 4305.0) == 10


def test_decay_target_moves_backwards_for_negative_velocity() -> None:
    snapshot = make_snapshot([(5, 0, 100), (6, 100, 100), (7, 200, 100)], total=20)
    assert _decay_target(snapshot, snapshot.visible_items[0], -1050.0) == 3


def test_decay_target_counts_distance_from_the_current_anchor() -> None:
    snapshot = make_snapshot([(20, -60, 100), (21, 40, 100), (22, 140, 100), (23, 240, 100)], total=40)
    item = snapshot.visible_items[0]

    assert _decay_target(snapshot, item, -630.0) == 20
    assert _decay_target(snapshot, item, 630.0) == 22


def test_decay_target_uses_lag_behind_a_custom_anchor() -> None:
    snapshot = make_snapshot([(20, -50, 100), (21, 50, 100), (22, 150, 100), (23, 250, 100)], total=40)
    item = snapshot.visible_items[0]

    assert _decay_target(snapshot, item, -714.0, anchor=lambda layout, info: 40) == 20


def test_decay_target_clamps_to_list_bounds() -> None:
    five = make_snapshot([(0, 0, 100), (1, 100, 100), (2, 200, 100)], total=5)
    item = five.visible_items[0]

    assert _decay_target(five, item, 1e6) == 4
    assert _decay_target(five, item, -1e6) == 0


def test_decay_target_respects_maximum_fling_distance() -> None:
    item = UNIFORM.visible_items[0]
    assert _decay_target(UNIFORM, item, 4305.0, limit=150) == 1


def test_decay_target_stays_put_without_distance_per_child() -> None:
    degenerate = make_snapshot([(3, 0, 0)], total=20)
    assert _decay_target(degenerate, degenerate.visible_items[0], 5000.0) == 3


def test_spring_target_moves_on_when_past_half_the_item() -> None:
    snapshot = make_snapshot([(2, -60, 100), (3, 40, 100)], total=10)

    assert target_index_for_spring(snapshot, ItemInfo(2, -60, 100), 0.0, snap_offset_for_item=snap_to_start) == 3
    assert target_index_for_spring(snapshot, ItemInfo(2, -50, 100), 0.0, snap_offset_for_item=snap_to_start) == 2


def test_spring_target_ignores_velocity_and_clamps() -> None:
    last = make_snapshot([(2, -60, 100)], total=3)
    item = last.visible_items[0]

    assert target_index_for_spring(last, item, -1000.0, snap_offset_for_item=snap_to_start) == 2
    assert target_index_for_spring(last, item, 1000.0, snap_offset_for_item=snap_to_start) == 2


def test_decide_fling_plan_chooses_mode() -> None:
    item = UNIFORM.visible_items[0]

    assert decide_fling_plan(UNIFORM, item, 0.0, snap_offset_for_item=snap_to_start, decay_curve=DECAY) == FlingPlan(
        mode=FlingMode.SPRING, target_index=0
    )
    assert decide_fling_plan(UNIFORM, item, 1050.0, snap_offset_for_item=snap_to_start, decay_curve=DECAY) == FlingPlan(
        mode=FlingMode.DECAY, target_index=2
    )


def test_selected_targets_follow_velocity_direction_and_bounds() -> None:
    snapshot = make_snapshot([(4, -30, 100), (5, 70, 100), (6, 170, 100)], total=9)
    item = snapshot.visible_items[0]

    for velocity in (-1e6, -5000.0, -800.0, -1.0, 0.0, 1.0, 300.0, 800.0, 5000.0, 1e6):
        plan = decide_fling_plan(snapshot, item, velocity, snap_offset_for_item=snap_to_start, decay_curve=DECAY)
        assert 0 <= plan.target_index <= 8
        if velocity > 0:
            assert plan.target_index >= item.index
        if velocity < 0 and plan.mode is FlingMode.DECAY:
            assert plan.target_index <= item.index
