"""Pure geometry queries over a captured list layout."""

from __future__ import annotations

from lazysnap.api.fling import SnapOffsetForItem
from lazysnap.api.layout import ItemInfo, LayoutSnapshot

UNKNOWN_DISTANCE = -1.0


def current_item(snapshot: LayoutSnapshot, snap_offset_for_item: SnapOffsetForItem) -> ItemInfo | None:
    """Return the last visible item at or before its snap offset."""
    current: ItemInfo | None = None
    for item in snapshot.visible_items:
        if item.offset <= snap_offset_for_item(snapshot, item):
            current = item
    return current


def find_item(snapshot: LayoutSnapshot, index: int) -> ItemInfo | None:
    """Return the visible item with `index`, if laid out."""
    for item in snapshot.visible_items:
        if item.index == index:
            return item
    return None


def nearest_item(snapshot: LayoutSnapshot, index: int) -> ItemInfo | None:
    """Return the visible item whose index is closest to `index`."""
    if not snapshot.visible_items:
        return None
    return min(snapshot.visible_items, key=lambda item: abs(item.index - index))


def item_spacing(snapshot: LayoutSnapshot) -> int:
    """Infer the gap between items from the first two visible items."""
    if len(snapshot.visible_items) < 2:
        return 0
    first, second = snapshot.visible_items[0], snapshot.visible_items[1]
    return second.offset - (first.offset + first.size)


def layout_extent(snapshot: LayoutSnapshot) -> int:
    """Return first non-empty item size, else the viewport extent."""
    for item in snapshot.visible_items:
        if item.size > 0:
            return item.size
    return snapshot.viewport_extent


def last_index(snapshot: LayoutSnapshot) -> int:
    return max(snapshot.total_item_count - 1, 0)


def clamp_index(snapshot: LayoutSnapshot, index: int) -> int:
    """Clamp item index to valid list bounds."""
    return max(0, min(index, last_index(snapshot)))


def distance_per_child(snapshot: LayoutSnapshot) -> float:
    """Average pixels needed to scroll past one item.

    Returns `UNKNOWN_DISTANCE` (negative) when it cannot be computed.
    """
    items = snapshot.visible_items
    if not items:
        return UNKNOWN_DISTANCE
    start = min(item.offset for item in items)
    end = max(item.offset + item.size for item in items)
    distance = end - start
    if distance == 0:
        return UNKNOWN_DISTANCE
    return distance / len(items)
