"""Public list-layout API contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ItemInfo:
    """One laid-out list item, valid only for the snapshot it was read from."""

    index: int
    offset: int
    size: int

    def describe(self) -> str:
        return f"[i:{self.index},o:{self.offset},s:{self.size}]"


@dataclass(frozen=True, slots=True)
class LayoutSnapshot:
    """Immutable view of host list geometry captured at one instant."""

    visible_items: tuple[ItemInfo, ...]
    total_item_count: int
    viewport_start: int
    viewport_end: int

    @property
    def viewport_extent(self) -> int:
        return self.viewport_end - self.viewport_start


class ScrollableListHost(Protocol):
    """Host list surface consumed by the fling engine."""

    def visible_items(self) -> Sequence[ItemInfo]:
        """Return laid-out items ordered by ascending index."""

    def total_item_count(self) -> int:
        """Return number of items in the list."""

    def viewport_range(self) -> tuple[int, int]:
        """Return visible pixel range including content padding."""

    def scroll_by(self, delta: float) -> float:
        """Scroll by `delta` pixels and return the amount actually consumed."""


def capture_layout(host: ScrollableListHost) -> LayoutSnapshot:
    """Freeze current host geometry into a snapshot."""
    start, end = host.viewport_range()
    return LayoutSnapshot(
        visible_items=tuple(host.visible_items()),
        total_item_count=max(0, int(host.total_item_count())),
        viewport_start=int(start),
        viewport_end=int(end),
    )
