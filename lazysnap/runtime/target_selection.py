"""Decay-versus-spring decision and target item selection."""

from __future__ import annotations

import math
import sys

from lazysnap.api.curves import DecayCurve
from lazysnap.api.fling import FlingMode, FlingPlan, MaximumFlingDistance, SnapOffsetForItem
from lazysnap.api.layout import ItemInfo, LayoutSnapshot
from lazysnap.runtime.logging import get_snap_logger, log_fling_event
from lazysnap.ui_runtime.list_layout import clamp_index, distance_per_child, item_spacing

logger = get_snap_logger(__name__)

MIN_FLING_VELOCITY = 0.5


def unbounded_fling_distance(snapshot: LayoutSnapshot) -> int:
    """Default maximum fling distance: no limit."""
    del snapshot
    return sys.maxsize


def can_fling_past_current_item(
    snapshot: LayoutSnapshot,
    current: ItemInfo,
    initial_velocity: float,
    *,
    snap_offset_for_item: SnapOffsetForItem,
    decay_curve: DecayCurve,
) -> bool:
    """Return whether a decay from `current` would travel beyond it."""
    if abs(initial_velocity) < MIN_FLING_VELOCITY:
        return False

    target_value = decay_curve.target_value(float(current.offset), initial_velocity)
    snap_offset = snap_offset_for_item(snapshot, current)
    spacing = item_spacing(snapshot)

    log_fling_event(
        logger,
        "fling.can_pass",
        velocity=initial_velocity,
        current=current,
        target_value=target_value,
        snap_offset=snap_offset,
        spacing=spacing,
    )

    if initial_velocity < 0:
        return target_value <= snap_offset - (current.size + spacing)
    return target_value >= snap_offset + spacing


def target_index_for_decay(
    snapshot: LayoutSnapshot,
    current: ItemInfo,
    initial_velocity: float,
    *,
    snap_offset_for_item: SnapOffsetForItem,
    decay_curve: DecayCurve,
    maximum_fling_distance: MaximumFlingDistance,
) -> int:
    """Extrapolate how many items the decay spans and return the clamped index.

    The distance is measured from the current item's anchor, so a list resting part way into
    an item counts the remainder of that item toward the fling.
    """
    per_child = distance_per_child(snapshot)
    if per_child <= 0:
        return current.index

    max_distance = float(maximum_fling_distance(snapshot))
    fling_distance = decay_curve.target_value(0.0, initial_velocity)
    fling_distance = max(-max_distance, min(fling_distance, max_distance))
    anchor_lag = current.offset - snap_offset_for_item(snapshot, current)
    index_delta = math.trunc((fling_distance - anchor_lag) / per_child)

    log_fling_event(
        logger,
        "fling.decay_target",
        current=current,
        per_child=per_child,
        fling_distance=fling_distance,
        anchor_lag=anchor_lag,
        index_delta=index_delta,
    )
    return clamp_index(snapshot, current.index + index_delta)


def target_index_for_spring(
    snapshot: LayoutSnapshot,
    current: ItemInfo,
    initial_velocity: float,
    *,
    snap_offset_for_item: SnapOffsetForItem,
) -> int:
    """Spring to whichever of the current and next item is closer."""
    # TODO: bias toward the fling direction once release velocities from the host are reliable.
    del initial_velocity
    snap_offset = snap_offset_for_item(snapshot, current)
    if current.offset < snap_offset - current.size // 2:
        return clamp_index(snapshot, current.index + 1)
    return current.index


def decide_fling_plan(
    snapshot: LayoutSnapshot,
    current: ItemInfo,
    initial_velocity: float,
    *,
    snap_offset_for_item: SnapOffsetForItem,
    decay_curve: DecayCurve,
    maximum_fling_distance: MaximumFlingDistance = unbounded_fling_distance,
) -> FlingPlan:
    """Choose trajectory mode and the item index it should land on."""
    if can_fling_past_current_item(
        snapshot,
        current,
        initial_velocity,
        snap_offset_for_item=snap_offset_for_item,
        decay_curve=decay_curve,
    ):
        return FlingPlan(
            mode=FlingMode.DECAY,
            target_index=target_index_for_decay(
                snapshot,
                current,
                initial_velocity,
                snap_offset_for_item=snap_offset_for_item,
                decay_curve=decay_curve,
                maximum_fling_distance=maximum_fling_distance,
            ),
        )
    return FlingPlan(
        mode=FlingMode.SPRING,
        target_index=target_index_for_spring(
            snapshot,
            current,
            initial_velocity,
            snap_offset_for_item=snap_offset_for_item,
        ),
    )
