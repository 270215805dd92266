"""Overshoot detection and absolute snap-back correction."""

from __future__ import annotations

from lazysnap.api.fling import SnapOffsetForItem
from lazysnap.api.layout import ItemInfo, LayoutSnapshot, ScrollableListHost, capture_layout
from lazysnap.runtime.logging import get_snap_logger, log_fling_event
from lazysnap.ui_runtime.list_layout import current_item, nearest_item

logger = get_snap_logger(__name__)


def calculate_snap_back(
    snapshot: LayoutSnapshot,
    current: ItemInfo,
    initial_velocity: float,
    target_index: int,
    *,
    snap_offset_for_item: SnapOffsetForItem,
) -> int:
    """Return the scroll needed to settle the target at its snap offset, or 0.

    A non-zero result means the list has reached or passed the target in the fling direction.
    """
    forwards = initial_velocity > 0 and current.index >= target_index
    backwards = initial_velocity <= 0 and current.index <= target_index
    if not (forwards or backwards):
        return 0

    # The target may have left the layout on a fast tick; settle on the closest laid-out item.
    target = nearest_item(snapshot, target_index)
    if target is None:
        return 0
    target_snap_offset = snap_offset_for_item(snapshot, target)

    if forwards:
        passed = current.index > target_index or (
            current.index == target_index and current.offset < target_snap_offset
        )
    else:
        passed = current.index < target_index or (
            current.index == target_index and current.offset > target_snap_offset
        )
    return target.offset - target_snap_offset if passed else 0


def check_snap_back(
    host: ScrollableListHost,
    initial_velocity: float,
    target_index: int,
    *,
    snap_offset_for_item: SnapOffsetForItem,
) -> bool:
    """Snap back onto the target if it was reached; True means stop the trajectory."""
    snapshot = capture_layout(host)
    current = current_item(snapshot, snap_offset_for_item)
    if current is None:
        return True

    snap_back = calculate_snap_back(
        snapshot,
        current,
        initial_velocity,
        target_index,
        snap_offset_for_item=snap_offset_for_item,
    )
    if snap_back == 0:
        return False

    log_fling_event(
        logger,
        "fling.snap_back",
        velocity=initial_velocity,
        current=current,
        target=target_index,
        amount=snap_back,
    )
    host.scroll_by(float(snap_back))
    return True
