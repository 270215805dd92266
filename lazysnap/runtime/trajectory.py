"""Tick-by-tick decay and spring trajectories applied to a host list."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from lazysnap.api.curves import CurveState, DecayCurve, FrameTicker, SpringCurve
from lazysnap.api.fling import SnapOffsetForItem
from lazysnap.api.layout import ScrollableListHost
from lazysnap.runtime.animation_target import AnimationTargetCell
from lazysnap.runtime.logging import get_snap_logger, log_fling_event
from lazysnap.runtime.snap_back import check_snap_back

logger = get_snap_logger(__name__)

CONSUMPTION_TOLERANCE = 0.5

CurveStep = Callable[[CurveState, float], CurveState]


class StopReason(Enum):
    FINISHED = "finished"
    SNAP_BACK = "snap_back"
    UNDER_CONSUMED = "under_consumed"


@dataclass(frozen=True, slots=True)
class TrajectoryResult:
    """Outcome of one trajectory run."""

    velocity_left: float
    distance: float
    ticks: int
    stop_reason: StopReason


class TrajectoryDriver:
    """Runs curves frame by frame, feeding value deltas to the host as scroll requests."""

    def __init__(
        self,
        host: ScrollableListHost,
        *,
        snap_offset_for_item: SnapOffsetForItem,
        frame_ticker: FrameTicker,
        animation_target: AnimationTargetCell,
        debug_trace: bool = False,
    ) -> None:
        self._host = host
        self._snap_offset_for_item = snap_offset_for_item
        self._frame_ticker = frame_ticker
        self._animation_target = animation_target
        self._debug_trace = debug_trace

    def run_decay(
        self,
        decay_curve: DecayCurve,
        *,
        target_index: int,
        initial_velocity: float,
    ) -> TrajectoryResult:
        """Decelerate freely until rest or until the target is reached."""
        return self._drive(
            decay_curve.step,
            target_index=target_index,
            initial_velocity=initial_velocity,
        )

    def run_spring(
        self,
        spring_curve: SpringCurve,
        *,
        target_value: float,
        target_index: int,
        initial_velocity: float,
    ) -> TrajectoryResult:
        """Spring from 0 toward `target_value` pixels of travel."""
        return self._drive(
            lambda state, delta_seconds: spring_curve.step(state, target_value, delta_seconds),
            target_index=target_index,
            initial_velocity=initial_velocity,
        )

    def _drive(
        self,
        step: CurveStep,
        *,
        target_index: int,
        initial_velocity: float,
    ) -> TrajectoryResult:
        state = CurveState(value=0.0, velocity=initial_velocity)
        last_value = 0.0
        velocity_left = initial_velocity
        ticks = 0
        stop_reason = StopReason.FINISHED

        with self._animation_target.hold(target_index):
            while not state.finished:
                state = step(state, self._frame_ticker.next_frame())
                ticks += 1
                delta = state.value - last_value
                consumed = self._host.scroll_by(delta)
                last_value = state.value
                velocity_left = state.velocity

                if self._debug_trace:
                    log_fling_event(
                        logger,
                        "fling.tick",
                        n=ticks,
                        value=state.value,
                        velocity=state.velocity,
                        delta=delta,
                        consumed=consumed,
                    )

                if check_snap_back(
                    self._host,
                    initial_velocity,
                    target_index,
                    snap_offset_for_item=self._snap_offset_for_item,
                ):
                    stop_reason = StopReason.SNAP_BACK
                    break
                if abs(delta - consumed) > CONSUMPTION_TOLERANCE:
                    stop_reason = StopReason.UNDER_CONSUMED
                    break

        return TrajectoryResult(
            velocity_left=velocity_left,
            distance=last_value,
            ticks=ticks,
            stop_reason=stop_reason,
        )
