"""Public animation-curve and frame-timing API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class CurveState:
    """One simulated point of a one-dimensional animation."""

    value: float
    velocity: float
    finished: bool = False


class DecayCurve(Protocol):
    """Decelerating curve that comes to rest on its own."""

    def step(self, state: CurveState, delta_seconds: float) -> CurveState:
        """Advance state by `delta_seconds`."""

    def target_value(self, initial_value: float, initial_velocity: float) -> float:
        """Return the value the curve settles at."""


class SpringCurve(Protocol):
    """Curve pulled toward a target value."""

    def step(self, state: CurveState, target_value: float, delta_seconds: float) -> CurveState:
        """Advance state toward `target_value` by `delta_seconds`."""


class FrameTicker(Protocol):
    """Source of animation frame boundaries."""

    def next_frame(self) -> float:
        """Wait for the next frame and return its delta in seconds."""


def create_exponential_decay(
    *,
    friction_multiplier: float = 1.0,
    abs_velocity_threshold: float = 0.1,
) -> DecayCurve:
    """Create default exponential decay curve."""
    from lazysnap.runtime.curves import ExponentialDecayCurve

    return ExponentialDecayCurve(
        friction_multiplier=friction_multiplier,
        abs_velocity_threshold=abs_velocity_threshold,
    )


def create_spring(
    *,
    stiffness: float = 400.0,
    damping_ratio: float = 1.0,
    visibility_threshold: float = 0.01,
) -> SpringCurve:
    """Create default damped spring curve."""
    from lazysnap.runtime.curves import DampedSpringCurve

    return DampedSpringCurve(
        stiffness=stiffness,
        damping_ratio=damping_ratio,
        visibility_threshold=visibility_threshold,
    )


def create_frame_ticker(
    *,
    frame_rate: float = 60.0,
    time_source: Callable[[], float] | None = None,
) -> FrameTicker:
    """Create fixed-step ticker, or wall-clock ticker when `time_source` is given."""
    from lazysnap.runtime.time import FixedFrameTicker, MonotonicFrameTicker

    if time_source is None:
        return FixedFrameTicker(frame_rate=frame_rate)
    return MonotonicFrameTicker(time_source=time_source)
