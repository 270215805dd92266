"""Snapping fling behavior for one-dimensional scrollable lists."""

from lazysnap.api import (
    FlingBehavior,
    ItemInfo,
    LayoutSnapshot,
    ScrollableListHost,
    create_snapping_fling_behavior,
)
from lazysnap.ui_runtime.snap_offsets import snap_to_center, snap_to_end, snap_to_start

__all__ = [
    "FlingBehavior",
    "ItemInfo",
    "LayoutSnapshot",
    "ScrollableListHost",
    "create_snapping_fling_behavior",
    "snap_to_center",
    "snap_to_end",
    "snap_to_start",
]
