"""Per-field interpolation for animated card transforms.

Every animated quantity is a :class:`FieldAnimator`: it remembers where the
current motion started (value, velocity and timestamp), which target it is
heading to and which spec drives it. Rendering asks for ``value_at(now)`` once
per frame; a new target starts a fresh motion from the currently rendered
value, and springs also carry the current velocity over.

Times are seconds on a monotonic clock supplied by the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple, Union

Easing = Callable[[float], float]
Rgb = Tuple[int, int, int]


# ----------------------------------------------------------------------
# Easing
# ----------------------------------------------------------------------
def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Return a CSS-style cubic Bezier easing through (0,0), (x1,y1), (x2,y2), (1,1)."""

    def _coord(t: float, p1: float, p2: float) -> float:
        return 3 * (1 - t) ** 2 * t * p1 + 3 * (1 - t) * t ** 2 * p2 + t ** 3

    def _slope(t: float, p1: float, p2: float) -> float:
        return 3 * (1 - t) ** 2 * p1 + 6 * (1 - t) * t * (p2 - p1) + 3 * t ** 2 * (1 - p2)

    def _solve_t(x: float) -> float:
        t = x
        for _ in range(8):
            err = _coord(t, x1, x2) - x
            if abs(err) < 1e-7:
                return t
            d = _slope(t, x1, x2)
            if abs(d) < 1e-6:
                break
            t -= err / d
        lo, hi = 0.0, 1.0
        t = x
        while hi - lo > 1e-7:
            if _coord(t, x1, x2) < x:
                lo = t
            else:
                hi = t
            t = (lo + hi) / 2
        return t

    def easing(fraction: float) -> float:
        if fraction <= 0.0:
            return 0.0
        if fraction >= 1.0:
            return 1.0
        return _coord(_solve_t(fraction), y1, y2)

    return easing


FAST_OUT_SLOW_IN: Easing = cubic_bezier(0.4, 0.0, 0.2, 1.0)


# ----------------------------------------------------------------------
# Specs
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class TweenSpec:
    """Fixed-duration transition along an easing curve."""

    duration_ms: int = 500
    easing: Easing = field(default=FAST_OUT_SLOW_IN, compare=False)

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ValueError("duration_ms must be non-negative.")


@dataclass(frozen=True)
class SpringSpec:
    """Damped spring with unit mass; carries velocity across retargets."""

    damping_ratio: float = 1.0
    stiffness: float = 1500.0
    threshold: float = 0.01

    def __post_init__(self) -> None:
        if self.damping_ratio <= 0:
            raise ValueError("damping_ratio must be positive.")
        if self.stiffness <= 0:
            raise ValueError("stiffness must be positive.")
        if self.threshold <= 0:
            raise ValueError("threshold must be positive.")


AnimationSpec = Union[TweenSpec, SpringSpec]


class AnimationPolicy(Enum):
    """How a card field picks its animation spec for a new target."""

    DEFAULT_AWARE = "default_aware"
    UNIFORM = "uniform"


def choose_spec(
    policy: AnimationPolicy,
    target: float,
    identity: float,
    *,
    tween: TweenSpec,
    spring: SpringSpec,
) -> AnimationSpec:
    """Tween back to the identity default, spring everywhere else.

    Under :attr:`AnimationPolicy.UNIFORM` every target uses the spring.
    """
    if policy is AnimationPolicy.DEFAULT_AWARE and target == identity:
        return tween
    return spring


# ----------------------------------------------------------------------
# Motions
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class _Motion:
    start: float
    target: float
    start_velocity: float
    started_at: float
    spec: AnimationSpec

    def elapsed(self, now: float) -> float:
        return max(0.0, now - self.started_at)

    def sample(self, now: float) -> Tuple[float, float, bool]:
        """Return ``(value, velocity, finished)`` at ``now``."""
        t = self.elapsed(now)
        if isinstance(self.spec, TweenSpec):
            return self._tween(t)
        return self._spring(t)

    def _tween(self, t: float) -> Tuple[float, float, bool]:
        duration = self.spec.duration_ms / 1000.0
        if duration <= 0 or t >= duration:
            return self.target, 0.0, True
        easing = self.spec.easing
        delta = self.target - self.start
        fraction = t / duration
        value = self.start + delta * easing(fraction)
        step = min(1e-3, duration - t)
        ahead = self.start + delta * easing((t + step) / duration)
        return value, (ahead - value) / step, False

    def _spring(self, t: float) -> Tuple[float, float, bool]:
        spec: SpringSpec = self.spec  # type: ignore[assignment]
        x0 = self.start - self.target
        v0 = self.start_velocity
        omega = math.sqrt(spec.stiffness)
        zeta = spec.damping_ratio

        if math.isclose(zeta, 1.0):
            c = v0 + omega * x0
            decay = math.exp(-omega * t)
            x = (x0 + c * t) * decay
            v = (v0 - omega * c * t) * decay
        elif zeta < 1.0:
            omega_d = omega * math.sqrt(1.0 - zeta * zeta)
            a = x0
            b = (v0 + zeta * omega * x0) / omega_d
            decay = math.exp(-zeta * omega * t)
            cos_t = math.cos(omega_d * t)
            sin_t = math.sin(omega_d * t)
            x = decay * (a * cos_t + b * sin_t)
            v = decay * (
                -zeta * omega * (a * cos_t + b * sin_t) + omega_d * (b * cos_t - a * sin_t)
            )
        else:
            root = omega * math.sqrt(zeta * zeta - 1.0)
            r1 = -zeta * omega + root
            r2 = -zeta * omega - root
            c2 = (v0 - r1 * x0) / (r2 - r1)
            c1 = x0 - c2
            e1 = math.exp(r1 * t)
            e2 = math.exp(r2 * t)
            x = c1 * e1 + c2 * e2
            v = c1 * r1 * e1 + c2 * r2 * e2

        if abs(x) < spec.threshold and abs(v) < spec.threshold:
            return self.target, 0.0, True
        return self.target + x, v, False


class FieldAnimator:
    """Animated value of a single transform field."""

    def __init__(
        self,
        value: float,
        *,
        identity: float,
        policy: AnimationPolicy = AnimationPolicy.DEFAULT_AWARE,
        tween: Optional[TweenSpec] = None,
        spring: Optional[SpringSpec] = None,
    ) -> None:
        self.identity = float(identity)
        self.policy = policy
        self.tween = tween or TweenSpec()
        self.spring = spring or SpringSpec()
        self._target = float(value)
        self._motion: Optional[_Motion] = None

    @property
    def target(self) -> float:
        return self._target

    @property
    def motion_spec(self) -> Optional[AnimationSpec]:
        """Spec of the motion in flight (``None`` once settled)."""
        return self._motion.spec if self._motion else None

    def animate_to(self, target: float, now: float) -> bool:
        """Head toward ``target`` from the value rendered at ``now``.

        Returns False when ``target`` is already the current target.
        """
        target = float(target)
        if target == self._target:
            return False
        value, velocity = self._sample(now)[:2]
        spec = choose_spec(
            self.policy, target, self.identity, tween=self.tween, spring=self.spring
        )
        if isinstance(spec, TweenSpec):
            velocity = 0.0
        self._target = target
        self._motion = _Motion(
            start=value,
            target=target,
            start_velocity=velocity,
            started_at=now,
            spec=spec,
        )
        return True

    def value_at(self, now: float) -> float:
        return self._sample(now)[0]

    def velocity_at(self, now: float) -> float:
        return self._sample(now)[1]

    def is_running(self, now: float) -> bool:
        return not self._sample(now)[2]

    def _sample(self, now: float) -> Tuple[float, float, bool]:
        if self._motion is None:
            return self._target, 0.0, True
        value, velocity, finished = self._motion.sample(now)
        if finished:
            self._motion = None
        return value, velocity, finished


# ----------------------------------------------------------------------
# Colors
# ----------------------------------------------------------------------
def parse_hex(color: str) -> Rgb:
    text = color.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ValueError(f"Unsupported color '{color}'.")
    try:
        return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)
    except ValueError as exc:
        raise ValueError(f"Unsupported color '{color}'.") from exc


def to_hex(rgb: Rgb) -> str:
    return "#{:02x}{:02x}{:02x}".format(*(min(255, max(0, int(round(c)))) for c in rgb))


class ColorAnimator:
    """Tween between hex colors, retargeting from the rendered color."""

    def __init__(self, color: str, spec: Optional[TweenSpec] = None) -> None:
        self.spec = spec or TweenSpec(duration_ms=1000)
        rgb = parse_hex(color)
        self._channels = [
            FieldAnimator(c, identity=c, policy=AnimationPolicy.DEFAULT_AWARE, tween=self.spec)
            for c in rgb
        ]

    def animate_to(self, color: str, now: float) -> bool:
        changed = False
        for channel, value in zip(self._channels, parse_hex(color)):
            # identity tracks the target so every channel takes the tween path
            channel.identity = float(value)
            changed = channel.animate_to(value, now) or changed
        return changed

    def value_at(self, now: float) -> str:
        return to_hex(tuple(channel.value_at(now) for channel in self._channels))  # type: ignore[arg-type]

    def is_running(self, now: float) -> bool:
        return any(channel.is_running(now) for channel in self._channels)


__all__ = [
    "AnimationPolicy",
    "AnimationSpec",
    "ColorAnimator",
    "FAST_OUT_SLOW_IN",
    "FieldAnimator",
    "SpringSpec",
    "TweenSpec",
    "choose_spec",
    "cubic_bezier",
    "parse_hex",
    "to_hex",
]
