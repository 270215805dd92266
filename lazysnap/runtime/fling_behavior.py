"""Snapping fling behavior: one entry point per fling gesture."""

from __future__ import annotations

from lazysnap.api.curves import DecayCurve, FrameTicker, SpringCurve
from lazysnap.api.fling import (
    AnimationTargetListener,
    FlingMode,
    MaximumFlingDistance,
    SnapOffsetForItem,
    Subscription,
)
from lazysnap.api.layout import ScrollableListHost, capture_layout
from lazysnap.runtime.animation_target import AnimationTargetCell
from lazysnap.runtime.config import FlingConfig, load_fling_config
from lazysnap.runtime.curves import DampedSpringCurve, ExponentialDecayCurve
from lazysnap.runtime.logging import get_snap_logger, log_fling_event, setup_snap_logging
from lazysnap.runtime.target_selection import decide_fling_plan, unbounded_fling_distance
from lazysnap.runtime.time import FixedFrameTicker
from lazysnap.runtime.trajectory import TrajectoryDriver, TrajectoryResult
from lazysnap.ui_runtime.list_layout import current_item, item_spacing
from lazysnap.ui_runtime.snap_offsets import resolve_snap_offset, snap_to_center

logger = get_snap_logger(__name__)


class SnappingFlingBehavior:
    """Lands every fling with an item resting at its snap offset.

    The host must not call `perform_fling` concurrently on one instance; flings on the
    same list are expected to be serialized by the host's scroll owner.
    """

    def __init__(
        self,
        host: ScrollableListHost,
        *,
        snap_offset_for_item: SnapOffsetForItem = snap_to_center,
        maximum_fling_distance: MaximumFlingDistance = unbounded_fling_distance,
        decay_curve: DecayCurve | None = None,
        spring_curve: SpringCurve | None = None,
        frame_ticker: FrameTicker | None = None,
        debug_trace: bool = False,
    ) -> None:
        self._host = host
        self._snap_offset_for_item = snap_offset_for_item
        self._maximum_fling_distance = maximum_fling_distance
        self._decay_curve = decay_curve or ExponentialDecayCurve()
        self._spring_curve = spring_curve or DampedSpringCurve()
        self._animation_target = AnimationTargetCell()
        self._driver = TrajectoryDriver(
            host,
            snap_offset_for_item=snap_offset_for_item,
            frame_ticker=frame_ticker or FixedFrameTicker(),
            animation_target=self._animation_target,
            debug_trace=debug_trace,
        )

    @property
    def animation_target(self) -> int | None:
        return self._animation_target.value

    def subscribe_animation_target(self, listener: AnimationTargetListener) -> Subscription:
        return self._animation_target.subscribe(listener)

    def unsubscribe_animation_target(self, subscription: Subscription) -> None:
        self._animation_target.unsubscribe(subscription)

    def perform_fling(self, initial_velocity: float) -> float:
        """Run one fling and return leftover velocity for the host."""
        log_fling_event(logger, "fling.perform", initial_velocity=initial_velocity)
        snapshot = capture_layout(self._host)
        current = current_item(snapshot, self._snap_offset_for_item)
        if current is None:
            return initial_velocity

        plan = decide_fling_plan(
            snapshot,
            current,
            initial_velocity,
            snap_offset_for_item=self._snap_offset_for_item,
            decay_curve=self._decay_curve,
            maximum_fling_distance=self._maximum_fling_distance,
        )
        log_fling_event(logger, "fling.plan", mode=plan.mode, current=current, target=plan.target_index)
        if plan.mode is FlingMode.DECAY:
            result = self._driver.run_decay(
                self._decay_curve,
                target_index=plan.target_index,
                initial_velocity=initial_velocity,
            )
        else:
            spring_result = self._perform_spring(plan.target_index, initial_velocity)
            if spring_result is None:
                return initial_velocity
            result = spring_result

        log_fling_event(
            logger,
            "fling.finished",
            mode=plan.mode,
            distance=result.distance,
            velocity_left=result.velocity_left,
            ticks=result.ticks,
            reason=result.stop_reason,
        )
        return result.velocity_left

    def _perform_spring(self, target_index: int, initial_velocity: float) -> TrajectoryResult | None:
        snapshot = capture_layout(self._host)
        initial = current_item(snapshot, self._snap_offset_for_item)
        if initial is None:
            return None
        travel = float(initial.size + item_spacing(snapshot))
        return self._driver.run_spring(
            self._spring_curve,
            target_value=travel if target_index > initial.index else -travel,
            target_index=target_index,
            initial_velocity=initial_velocity,
        )


def build_snapping_fling_behavior(
    host: ScrollableListHost,
    *,
    config: FlingConfig | None = None,
    snap_offset_for_item: SnapOffsetForItem | None = None,
    maximum_fling_distance: MaximumFlingDistance | None = None,
    decay_curve: DecayCurve | None = None,
    spring_curve: SpringCurve | None = None,
    frame_ticker: FrameTicker | None = None,
) -> SnappingFlingBehavior:
    """Build behavior from config (env when omitted); explicit arguments take precedence.

    With the debug trace on, lazysnap installs its own log handlers when the host has none.
    """
    resolved = config if config is not None else load_fling_config()
    if resolved.debug_trace:
        setup_snap_logging(debug_trace=True)
    if maximum_fling_distance is None:
        maximum_fling_distance = _configured_fling_distance(resolved)
    return SnappingFlingBehavior(
        host,
        snap_offset_for_item=snap_offset_for_item or resolve_snap_offset(resolved.snap_anchor),
        maximum_fling_distance=maximum_fling_distance,
        decay_curve=decay_curve
        or ExponentialDecayCurve(
            friction_multiplier=resolved.decay.friction_multiplier,
            abs_velocity_threshold=resolved.decay.abs_velocity_threshold,
        ),
        spring_curve=spring_curve
        or DampedSpringCurve(
            stiffness=resolved.spring.stiffness,
            damping_ratio=resolved.spring.damping_ratio,
            visibility_threshold=resolved.spring.visibility_threshold,
        ),
        frame_ticker=frame_ticker or FixedFrameTicker(frame_rate=resolved.frame_rate),
        debug_trace=resolved.debug_trace,
    )


def _configured_fling_distance(config: FlingConfig) -> MaximumFlingDistance:
    limit = config.max_fling_distance
    if limit is None:
        return unbounded_fling_distance
    return lambda snapshot: limit
