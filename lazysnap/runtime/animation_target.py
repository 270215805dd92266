"""Owned-write, shared-read cell for the running trajectory's target index."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from lazysnap.api.fling import AnimationTargetListener, Subscription


class AnimationTargetCell:
    """Versioned animation target with change listeners."""

    def __init__(self) -> None:
        self._value: int | None = None
        self._revision = 0
        self._next_id = 1
        self._listeners: dict[int, AnimationTargetListener] = {}

    @property
    def value(self) -> int | None:
        return self._value

    def revision(self) -> int:
        return self._revision

    def subscribe(self, listener: AnimationTargetListener) -> Subscription:
        """Register listener for value changes."""
        sub_id = self._next_id
        self._next_id += 1
        self._listeners[sub_id] = listener
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a listener if present."""
        self._listeners.pop(subscription.id, None)

    @contextmanager
    def hold(self, target_index: int) -> Iterator[None]:
        """Publish `target_index` for the duration of the block, then clear it."""
        self._set(target_index)
        try:
            yield
        finally:
            self._set(None)

    def _set(self, value: int | None) -> None:
        self._value = value
        self._revision += 1
        for listener in tuple(self._listeners.values()):
            listener(value)
