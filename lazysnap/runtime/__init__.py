"""lazysnap runtime implementations."""

from lazysnap.runtime.animation_target import AnimationTargetCell
from lazysnap.runtime.config import DecayConfig, FlingConfig, SpringConfig, load_fling_config
from lazysnap.runtime.curves import DampedSpringCurve, ExponentialDecayCurve
from lazysnap.runtime.errors import FlingCancelledError
from lazysnap.runtime.fling_behavior import SnappingFlingBehavior, build_snapping_fling_behavior
from lazysnap.runtime.logging import (
    configure_snap_logging,
    get_snap_logger,
    log_fling_event,
    setup_snap_logging,
    shutdown_snap_logging,
)
from lazysnap.runtime.snap_back import calculate_snap_back, check_snap_back
from lazysnap.runtime.target_selection import (
    can_fling_past_current_item,
    decide_fling_plan,
    target_index_for_decay,
    target_index_for_spring,
    unbounded_fling_distance,
)
from lazysnap.runtime.time import FixedFrameTicker, MonotonicFrameTicker
from lazysnap.runtime.trajectory import StopReason, TrajectoryDriver, TrajectoryResult

__all__ = [
    "AnimationTargetCell",
    "DampedSpringCurve",
    "DecayConfig",
    "ExponentialDecayCurve",
    "FixedFrameTicker",
    "FlingCancelledError",
    "FlingConfig",
    "MonotonicFrameTicker",
    "SnappingFlingBehavior",
    "SpringConfig",
    "StopReason",
    "TrajectoryDriver",
    "TrajectoryResult",
    "build_snapping_fling_behavior",
    "calculate_snap_back",
    "can_fling_past_current_item",
    "check_snap_back",
    "configure_snap_logging",
    "decide_fling_plan",
    "get_snap_logger",
    "load_fling_config",
    "log_fling_event",
    "setup_snap_logging",
    "shutdown_snap_logging",
    "target_index_for_decay",
    "target_index_for_spring",
    "unbounded_fling_distance",
]
