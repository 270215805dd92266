"""Centralized fling configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from lazysnap.ui_runtime.snap_offsets import SNAP_OFFSETS


@dataclass(frozen=True, slots=True)
class DecayConfig:
    friction_multiplier: float = 1.0
    abs_velocity_threshold: float = 0.1


@dataclass(frozen=True, slots=True)
class SpringConfig:
    stiffness: float = 400.0
    damping_ratio: float = 1.0
    visibility_threshold: float = 0.01


@dataclass(frozen=True, slots=True)
class FlingConfig:
    """Immutable snapping fling configuration."""

    snap_anchor: str = "center"
    max_fling_distance: int | None = None  # None means unbounded
    decay: DecayConfig = DecayConfig()
    spring: SpringConfig = SpringConfig()
    frame_rate: float = 60.0
    debug_trace: bool = False


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(name: str, default: int, *, env: Mapping[str, str] | None = None) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        return int(default)
    try:
        return int(raw.strip())
    except ValueError:
        return int(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_snap_anchor(raw: str, fallback: str) -> str:
    value = raw.strip().lower()
    if value not in SNAP_OFFSETS:
        return fallback
    return value


def load_fling_config(*, env: Mapping[str, str] | None = None) -> FlingConfig:
    """Load immutable fling configuration from env vars."""
    defaults = FlingConfig()
    max_distance = _int("LAZYSNAP_MAX_FLING_DISTANCE", 0, env=env)
    return FlingConfig(
        snap_anchor=_normalize_snap_anchor(
            _text("LAZYSNAP_SNAP_ANCHOR", defaults.snap_anchor, env=env),
            defaults.snap_anchor,
        ),
        max_fling_distance=max_distance if max_distance > 0 else None,
        decay=DecayConfig(
            friction_multiplier=_float(
                "LAZYSNAP_DECAY_FRICTION", defaults.decay.friction_multiplier, minimum=0.01, env=env
            ),
            abs_velocity_threshold=_float(
                "LAZYSNAP_DECAY_VELOCITY_THRESHOLD",
                defaults.decay.abs_velocity_threshold,
                minimum=0.001,
                env=env,
            ),
        ),
        spring=SpringConfig(
            stiffness=_float("LAZYSNAP_SPRING_STIFFNESS", defaults.spring.stiffness, minimum=1.0, env=env),
            damping_ratio=_float(
                "LAZYSNAP_SPRING_DAMPING_RATIO", defaults.spring.damping_ratio, minimum=0.0, env=env
            ),
            visibility_threshold=_float(
                "LAZYSNAP_SPRING_VISIBILITY_THRESHOLD",
                defaults.spring.visibility_threshold,
                minimum=0.0001,
                env=env,
            ),
        ),
        frame_rate=_float("LAZYSNAP_FRAME_RATE", defaults.frame_rate, minimum=1.0, env=env),
        debug_trace=_flag("LAZYSNAP_DEBUG_TRACE", defaults.debug_trace, env=env),
    )
