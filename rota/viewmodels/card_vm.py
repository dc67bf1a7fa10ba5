from __future__ import annotations

from typing import Dict, Optional

from ..domain.animation import AnimationPolicy, FieldAnimator, SpringSpec, TweenSpec
from ..domain.transformations import TRANSFORM_FIELDS, Transformations, identity_value


class CardAnimator:
    """Animated rendering state of one card: one FieldAnimator per field."""

    def __init__(
        self,
        initial: Optional[Transformations] = None,
        *,
        policy: AnimationPolicy = AnimationPolicy.DEFAULT_AWARE,
        tween: Optional[TweenSpec] = None,
        spring: Optional[SpringSpec] = None,
    ) -> None:
        initial = initial or Transformations()
        self._fields: Dict[str, FieldAnimator] = {
            name: FieldAnimator(
                initial.value_of(name),
                identity=identity_value(name),
                policy=policy,
                tween=tween,
                spring=spring,
            )
            for name in TRANSFORM_FIELDS
        }

    def field(self, name: str) -> FieldAnimator:
        return self._fields[name]

    def configure(
        self,
        *,
        policy: Optional[AnimationPolicy] = None,
        tween: Optional[TweenSpec] = None,
    ) -> None:
        """Change specs for future targets; motions in flight keep theirs."""
        for animator in self._fields.values():
            if policy is not None:
                animator.policy = policy
            if tween is not None:
                animator.tween = tween

    def retarget(self, transform: Transformations, now: float) -> bool:
        """Animate every field toward ``transform``; True if anything moved."""
        changed = False
        for name, animator in self._fields.items():
            changed = animator.animate_to(transform.value_of(name), now) or changed
        return changed

    def sample(self, now: float) -> Transformations:
        return Transformations(**{name: a.value_at(now) for name, a in self._fields.items()})

    def target(self) -> Transformations:
        return Transformations(**{name: a.target for name, a in self._fields.items()})

    def is_running(self, now: float) -> bool:
        return any(a.is_running(now) for a in self._fields.values())


__all__ = ["CardAnimator"]
