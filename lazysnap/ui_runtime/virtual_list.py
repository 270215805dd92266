"""In-memory scrollable list host with clamped pixel scrolling."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from lazysnap.api.layout import ItemInfo


@dataclass(frozen=True, slots=True)
class ScrollRequest:
    """One `scroll_by` call and what the host consumed."""

    requested: float
    consumed: float


class VirtualListHost:
    """Reference list host laid out along a single axis.

    Offsets are measured from the leading content edge (after the leading padding), so the
    viewport spans `[-padding_before, viewport_size - padding_before)`. The scroll position is
    clamped to the content bounds, which makes boundary requests under-consume.
    """

    def __init__(
        self,
        item_sizes: Sequence[int],
        viewport_size: int,
        *,
        item_spacing: int = 0,
        content_padding: tuple[int, int] = (0, 0),
        scroll: float = 0.0,
    ) -> None:
        if viewport_size <= 0:
            raise ValueError("viewport_size must be > 0")
        if any(size < 0 for size in item_sizes):
            raise ValueError("item sizes must be >= 0")
        self._sizes = tuple(int(size) for size in item_sizes)
        self._viewport_size = int(viewport_size)
        self._spacing = int(item_spacing)
        self._padding_before, self._padding_after = (int(value) for value in content_padding)
        self._starts = self._layout_starts()
        self._scroll = self.clamp_scroll(scroll)
        self.requests: list[ScrollRequest] = []

    @property
    def scroll(self) -> float:
        return self._scroll

    @property
    def max_scroll(self) -> float:
        content = self._padding_before + self._content_length() + self._padding_after
        return float(max(0, content - self._viewport_size))

    def clamp_scroll(self, scroll: float) -> float:
        """Clamp scroll position to valid content bounds."""
        return max(0.0, min(float(scroll), self.max_scroll))

    def scroll_to_item(self, index: int, offset: int = 0) -> None:
        """Place item `index` at `offset` from the leading content edge."""
        self._scroll = self.clamp_scroll(self._starts[index] - offset)

    def item_offset(self, index: int) -> int:
        return math.floor(self._starts[index] - self._scroll + 0.5)

    def visible_items(self) -> list[ItemInfo]:
        low, high = self.viewport_range()
        visible: list[ItemInfo] = []
        for index, size in enumerate(self._sizes):
            offset = self.item_offset(index)
            if offset + size > low and offset < high:
                visible.append(ItemInfo(index=index, offset=offset, size=size))
        return visible

    def total_item_count(self) -> int:
        return len(self._sizes)

    def viewport_range(self) -> tuple[int, int]:
        return -self._padding_before, self._viewport_size - self._padding_before

    def scroll_by(self, delta: float) -> float:
        previous = self._scroll
        self._scroll = self.clamp_scroll(previous + delta)
        consumed = self._scroll - previous
        self.requests.append(ScrollRequest(requested=delta, consumed=consumed))
        return consumed

    def _layout_starts(self) -> tuple[float, ...]:
        starts: list[float] = []
        cursor = 0
        for size in self._sizes:
            starts.append(float(cursor))
            cursor += size + self._spacing
        return tuple(starts)

    def _content_length(self) -> int:
        if not self._sizes:
            return 0
        return sum(self._sizes) + self._spacing * (len(self._sizes) - 1)
