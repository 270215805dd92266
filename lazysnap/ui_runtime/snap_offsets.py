"""Canonical snap offsets: where an item rests relative to the viewport."""

from __future__ import annotations

from lazysnap.api.fling import SnapOffsetForItem
from lazysnap.api.layout import ItemInfo, LayoutSnapshot
from lazysnap.ui_runtime.list_layout import layout_extent


def snap_to_start(snapshot: LayoutSnapshot, item: ItemInfo) -> int:
    """Snap the item's start edge to the leading edge of the list."""
    del snapshot, item
    return 0


def snap_to_center(snapshot: LayoutSnapshot, item: ItemInfo) -> int:
    """Snap the item to the center of the list."""
    # Truncates toward zero when the item is larger than the extent.
    return int((layout_extent(snapshot) - item.size) / 2)


def snap_to_end(snapshot: LayoutSnapshot, item: ItemInfo) -> int:
    """Snap the item's end edge to the trailing edge of the list."""
    return layout_extent(snapshot) - item.size


SNAP_OFFSETS: dict[str, SnapOffsetForItem] = {
    "start": snap_to_start,
    "center": snap_to_center,
    "end": snap_to_end,
}


def resolve_snap_offset(name: str) -> SnapOffsetForItem:
    """Return named snap offset, falling back to center."""
    return SNAP_OFFSETS.get(name.strip().lower(), snap_to_center)
