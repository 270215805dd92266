"""Pure list-layout helpers and reference host."""

from lazysnap.ui_runtime.list_layout import (
    UNKNOWN_DISTANCE,
    clamp_index,
    current_item,
    distance_per_child,
    find_item,
    item_spacing,
    last_index,
    layout_extent,
    nearest_item,
)
from lazysnap.ui_runtime.snap_offsets import (
    SNAP_OFFSETS,
    resolve_snap_offset,
    snap_to_center,
    snap_to_end,
    snap_to_start,
)
from lazysnap.ui_runtime.virtual_list import ScrollRequest, VirtualListHost

__all__ = [
    "SNAP_OFFSETS",
    "ScrollRequest",
    "UNKNOWN_DISTANCE",
    "VirtualListHost",
    "clamp_index",
    "current_item",
    "distance_per_child",
    "find_item",
    "item_spacing",
    "last_index",
    "layout_extent",
    "nearest_item",
    "resolve_snap_offset",
    "snap_to_center",
    "snap_to_end",
    "snap_to_start",
]
