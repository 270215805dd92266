"""PyQt6 item-view adapter for the snapping fling engine."""

from __future__ import annotations

import math

from lazysnap.api.layout import ItemInfo
from lazysnap.runtime.errors import RECOVERABLE_HOST_ERRORS, log_recoverable
from lazysnap.runtime.logging import get_snap_logger

try:
    from PyQt6.QtCore import QCoreApplication, QElapsedTimer, QEventLoop, QPoint, Qt
    from PyQt6.QtWidgets import QAbstractItemView
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt host. Install dependency 'PyQt6'.") from exc

logger = get_snap_logger(__name__)


class QtListViewHost:
    """Exposes a `QAbstractItemView` as a scrollable list host.

    The view is switched to per-pixel scrolling. Scroll bars hold integers, so the
    fractional part of each request is carried to the next one instead of being
    reported as unconsumed.
    """

    def __init__(
        self,
        view: QAbstractItemView,
        *,
        orientation: Qt.Orientation = Qt.Orientation.Vertical,
    ) -> None:
        self._view = view
        self._vertical = orientation == Qt.Orientation.Vertical
        self._remainder = 0.0
        if self._vertical:
            view.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        else:
            view.setHorizontalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)

    def visible_items(self) -> list[ItemInfo]:
        try:
            return self._collect_visible_items()
        except RECOVERABLE_HOST_ERRORS:
            log_recoverable(logger, "qt_host.visible_items_failed")
            return []

    def total_item_count(self) -> int:
        try:
            model = self._view.model()
            return 0 if model is None else int(model.rowCount())
        except RECOVERABLE_HOST_ERRORS:
            log_recoverable(logger, "qt_host.total_item_count_failed")
            return 0

    def viewport_range(self) -> tuple[int, int]:
        try:
            return 0, self._viewport_extent()
        except RECOVERABLE_HOST_ERRORS:
            log_recoverable(logger, "qt_host.viewport_range_failed")
            return 0, 0

    def scroll_by(self, delta: float) -> float:
        bar = self._view.verticalScrollBar() if self._vertical else self._view.horizontalScrollBar()
        before = bar.value()
        wanted = before + delta + self._remainder
        rounded = math.floor(wanted + 0.5)
        bar.setValue(rounded)
        after = bar.value()
        if after == rounded:
            self._remainder = wanted - after
            return delta
        self._remainder = 0.0
        return float(after - before)

    def _collect_visible_items(self) -> list[ItemInfo]:
        model = self._view.model()
        if model is None:
            return []
        extent = self._viewport_extent()
        first = self._view.indexAt(QPoint(0, 0))
        # Start one row early so a row hidden behind item spacing is not skipped.
        start_row = max(0, first.row() - 1) if first.isValid() else 0
        items: list[ItemInfo] = []
        for row in range(start_row, model.rowCount()):
            rect = self._view.visualRect(model.index(row, 0))
            if not rect.isValid():
                continue
            offset, size = (rect.top(), rect.height()) if self._vertical else (rect.left(), rect.width())
            if offset >= extent:
                break
            if offset + size > 0:
                items.append(ItemInfo(index=row, offset=int(offset), size=int(size)))
        return items

    def _viewport_extent(self) -> int:
        viewport = self._view.viewport()
        return int(viewport.height() if self._vertical else viewport.width())


class QtFrameTicker:
    """Paces trajectory ticks to a frame rate while keeping the Qt event loop responsive."""

    def __init__(self, *, frame_rate: float = 60.0, max_delta_seconds: float = 0.25) -> None:
        if frame_rate <= 0.0:
            raise ValueError("frame_rate must be > 0")
        self._frame_ms = 1000.0 / frame_rate
        self._max_delta_seconds = max_delta_seconds
        self._timer = QElapsedTimer()
        self._last_ms = 0

    def next_frame(self) -> float:
        if not self._timer.isValid():
            self._timer.start()
            self._last_ms = 0
        deadline = self._last_ms + self._frame_ms
        remaining = deadline - self._timer.elapsed()
        while remaining > 0:
            QCoreApplication.processEvents(QEventLoop.ProcessEventsFlag.AllEvents, max(1, int(remaining)))
            remaining = deadline - self._timer.elapsed()
        now = self._timer.elapsed()
        delta = (now - self._last_ms) / 1000.0
        self._last_ms = now
        return min(delta, self._max_delta_seconds)
