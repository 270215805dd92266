from __future__ import annotations

from collections.abc import Sequence

from lazysnap.api.layout import ItemInfo, LayoutSnapshot
from lazysnap.runtime.errors import FlingCancelledError
from lazysnap.ui_runtime.virtual_list import VirtualListHost


def make_snapshot(
    items: Sequence[tuple[int, int, int]],
    *,
    total: int | None = None,
    viewport: tuple[int, int] = (0, 300),
) -> LayoutSnapshot:
    """Build a snapshot from `(index, offset, size)` triples."""
    infos = tuple(ItemInfo(index=index, offset=offset, size=size) for index, offset, size in items)
    return LayoutSnapshot(
        visible_items=infos,
        total_item_count=len(infos) if total is None else total,
        viewport_start=viewport[0],
        viewport_end=viewport[1],
    )


class HalfConsumingHost:
    """Applies and reports only half of every scroll request."""

    def __init__(self, inner: VirtualListHost) -> None:
        self.inner = inner
        self.requests: list[float] = []

    def visible_items(self) -> list[ItemInfo]:
        return self.inner.visible_items()

    def total_item_count(self) -> int:
        return self.inner.total_item_count()

    def viewport_range(self) -> tuple[int, int]:
        return self.inner.viewport_range()

    def scroll_by(self, delta: float) -> float:
        self.requests.append(delta)
        self.inner.scroll_by(delta / 2)
        return delta / 2


class ObservingHost:
    """Records an observed value on every scroll request."""

    def __init__(self, inner: VirtualListHost) -> None:
        self.inner = inner
        self.observe = lambda: None
        self.observed: list[object] = []

    def visible_items(self) -> list[ItemInfo]:
        return self.inner.visible_items()

    def total_item_count(self) -> int:
        return self.inner.total_item_count()

    def viewport_range(self) -> tuple[int, int]:
        return self.inner.viewport_range()

    def scroll_by(self, delta: float) -> float:
        self.observed.append(self.observe())
        return self.inner.scroll_by(delta)


class CancellingTicker:
    """Fixed 60 Hz ticker that cancels the fling on frame `cancel_at`."""

    def __init__(self, cancel_at: int) -> None:
        self.cancel_at = cancel_at
        self.frames = 0

    def next_frame(self) -> float:
        self.frames += 1
        if self.frames >= self.cancel_at:
            raise FlingCancelledError("gesture interrupted")
        return 1.0 / 60.0
