"""Frame tickers pacing trajectory simulation."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic


class FixedFrameTicker:
    """Deterministic ticker returning a constant frame delta."""

    def __init__(self, *, frame_rate: float = 60.0) -> None:
        if frame_rate <= 0.0:
            raise ValueError("frame_rate must be > 0")
        self._step_seconds = 1.0 / frame_rate

    def next_frame(self) -> float:
        return self._step_seconds


class MonotonicFrameTicker:
    """Monotonic wall-clock ticker with bounded frame deltas."""

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
    ) -> None:
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._last_seconds: float | None = None

    def next_frame(self) -> float:
        """Return seconds since previous frame; the first frame is 0."""
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last_seconds), self._max_delta_seconds)
        self._last_seconds = now
        return delta
