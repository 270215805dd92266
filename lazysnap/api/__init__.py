"""Public lazysnap API contracts."""

from lazysnap.api.curves import (
    CurveState,
    DecayCurve,
    FrameTicker,
    SpringCurve,
    create_exponential_decay,
    create_frame_ticker,
    create_spring,
)
from lazysnap.api.fling import (
    AnimationTargetListener,
    FlingBehavior,
    FlingMode,
    FlingPlan,
    MaximumFlingDistance,
    SnapOffsetForItem,
    Subscription,
    create_snapping_fling_behavior,
)
from lazysnap.api.layout import ItemInfo, LayoutSnapshot, ScrollableListHost, capture_layout
from lazysnap.api.logging import SnapLoggingConfig

__all__ = [
    "AnimationTargetListener",
    "CurveState",
    "DecayCurve",
    "FlingBehavior",
    "FlingMode",
    "FlingPlan",
    "FrameTicker",
    "ItemInfo",
    "LayoutSnapshot",
    "MaximumFlingDistance",
    "ScrollableListHost",
    "SnapLoggingConfig",
    "SnapOffsetForItem",
    "SpringCurve",
    "Subscription",
    "capture_layout",
    "create_exponential_decay",
    "create_frame_ticker",
    "create_snapping_fling_behavior",
    "create_spring",
]
