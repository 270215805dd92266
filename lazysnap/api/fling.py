"""Public snapping-fling API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, TypeAlias

from lazysnap.api.curves import DecayCurve, FrameTicker, SpringCurve
from lazysnap.api.layout import ItemInfo, LayoutSnapshot, ScrollableListHost

if TYPE_CHECKING:
    from lazysnap.runtime.config import FlingConfig

SnapOffsetForItem: TypeAlias = Callable[[LayoutSnapshot, ItemInfo], int]
MaximumFlingDistance: TypeAlias = Callable[[LayoutSnapshot], int]
AnimationTargetListener: TypeAlias = Callable[[int | None], None]


class FlingMode(Enum):
    DECAY = "decay"
    SPRING = "spring"


@dataclass(frozen=True, slots=True)
class FlingPlan:
    """Trajectory choice for one fling."""

    mode: FlingMode
    target_index: int


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


class FlingBehavior(Protocol):
    """Fling entry point invoked by the host once per gesture."""

    @property
    def animation_target(self) -> int | None:
        """Return item index of the running trajectory, if any."""

    def perform_fling(self, initial_velocity: float) -> float:
        """Run one fling and return leftover velocity."""

    def subscribe_animation_target(self, listener: AnimationTargetListener) -> Subscription:
        """Observe animation target changes."""

    def unsubscribe_animation_target(self, subscription: Subscription) -> None:
        """Stop observing animation target changes."""


def create_snapping_fling_behavior(
    host: ScrollableListHost,
    *,
    config: "FlingConfig | None" = None,
    snap_offset_for_item: SnapOffsetForItem | None = None,
    maximum_fling_distance: MaximumFlingDistance | None = None,
    decay_curve: DecayCurve | None = None,
    spring_curve: SpringCurve | None = None,
    frame_ticker: FrameTicker | None = None,
) -> FlingBehavior:
    """Create snapping fling behavior from config, with explicit overrides winning."""
    from lazysnap.runtime.fling_behavior import build_snapping_fling_behavior

    return build_snapping_fling_behavior(
        host,
        config=config,
        snap_offset_for_item=snap_offset_for_item,
        maximum_fling_distance=maximum_fling_distance,
        decay_curve=decay_curve,
        spring_curve=spring_curve,
        frame_ticker=frame_ticker,
    )
