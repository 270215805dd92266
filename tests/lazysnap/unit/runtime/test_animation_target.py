from __future__ import annotations

import pytest

from lazysnap.runtime.animation_target import AnimationTargetCell


def test_hold_publishes_and_clears_target() -> None:
    cell = AnimationTargetCell()
    seen: list[int | None] = []
    cell.subscribe(seen.append)

    assert cell.value is None
    with cell.hold(3):
        assert cell.value == 3
    assert cell.value is None
    assert seen == [3, None]
    assert cell.revision() == 2


def test_hold_clears_target_when_block_raises() -> None:
    cell = AnimationTargetCell()

    with pytest.raises(RuntimeError):
        with cell.hold(7):
            raise RuntimeError("boom")

    assert cell.value is None


def test_unsubscribe_stops_notifications() -> None:
    cell = AnimationTargetCell()
    seen: list[int | None] = []
    subscription = cell.subscribe(seen.append)
    cell.unsubscribe(subscription)
    cell.unsubscribe(subscription)

    with cell.hold(1):
        pass

    assert seen == []
