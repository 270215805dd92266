"""Closed-form decay and spring curves advanced one frame at a time."""

from __future__ import annotations

import math

from lazysnap.api.curves import CurveState

_DECAY_FRICTION = -4.2


class ExponentialDecayCurve:
    """Velocity decays exponentially; value approaches `x0 - v0 / friction`."""

    def __init__(self, *, friction_multiplier: float = 1.0, abs_velocity_threshold: float = 0.1) -> None:
        if friction_multiplier <= 0.0:
            raise ValueError("friction_multiplier must be > 0")
        if abs_velocity_threshold <= 0.0:
            raise ValueError("abs_velocity_threshold must be > 0")
        self._friction = _DECAY_FRICTION * friction_multiplier
        self._abs_velocity_threshold = abs_velocity_threshold

    def step(self, state: CurveState, delta_seconds: float) -> CurveState:
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        if state.finished:
            return state
        decay = math.exp(self._friction * delta_seconds)
        velocity = state.velocity * decay
        value = state.value + state.velocity / self._friction * (decay - 1.0)
        return CurveState(
            value=value,
            velocity=velocity,
            finished=abs(velocity) <= self._abs_velocity_threshold,
        )

    def target_value(self, initial_value: float, initial_velocity: float) -> float:
        return initial_value - initial_velocity / self._friction


class DampedSpringCurve:
    """Damped harmonic oscillator with unit mass.

    The state is propagated analytically from the current displacement and velocity, so
    frame size does not change the trajectory.
    """

    def __init__(
        self,
        *,
        stiffness: float = 400.0,
        damping_ratio: float = 1.0,
        visibility_threshold: float = 0.01,
    ) -> None:
        if stiffness <= 0.0:
            raise ValueError("stiffness must be > 0")
        if damping_ratio < 0.0:
            raise ValueError("damping_ratio must be >= 0")
        if visibility_threshold <= 0.0:
            raise ValueError("visibility_threshold must be > 0")
        self._natural_freq = math.sqrt(stiffness)
        self._damping_ratio = damping_ratio
        self._visibility_threshold = visibility_threshold

    def step(self, state: CurveState, target_value: float, delta_seconds: float) -> CurveState:
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        if state.finished:
            return state
        displacement, velocity = self._advance(state.value - target_value, state.velocity, delta_seconds)
        if abs(displacement) < self._visibility_threshold and abs(velocity) < self._visibility_threshold:
            return CurveState(value=target_value, velocity=0.0, finished=True)
        return CurveState(value=target_value + displacement, velocity=velocity)

    def _advance(self, x0: float, v0: float, t: float) -> tuple[float, float]:
        omega = self._natural_freq
        zeta = self._damping_ratio
        if zeta > 1.0:
            root = omega * math.sqrt(zeta * zeta - 1.0)
            gamma_plus = -zeta * omega + root
            gamma_minus = -zeta * omega - root
            coeff_b = (gamma_minus * x0 - v0) / (gamma_minus - gamma_plus)
            coeff_a = x0 - coeff_b
            exp_minus = math.exp(gamma_minus * t)
            exp_plus = math.exp(gamma_plus * t)
            return (
                coeff_a * exp_minus + coeff_b * exp_plus,
                coeff_a * gamma_minus * exp_minus + coeff_b * gamma_plus * exp_plus,
            )
        if zeta == 1.0:
            coeff_a = x0
            coeff_b = v0 + omega * x0
            decay = math.exp(-omega * t)
            value = (coeff_a + coeff_b * t) * decay
            return value, -omega * value + coeff_b * decay
        damped_freq = omega * math.sqrt(1.0 - zeta * zeta)
        cos_coeff = x0
        sin_coeff = (zeta * omega * x0 + v0) / damped_freq
        decay = math.exp(-zeta * omega * t)
        cos_term = math.cos(damped_freq * t)
        sin_term = math.sin(damped_freq * t)
        value = decay * (cos_coeff * cos_term + sin_coeff * sin_term)
        velocity = -zeta * omega * value + decay * damped_freq * (sin_coeff * cos_term - cos_coeff * sin_term)
        return value, velocity
