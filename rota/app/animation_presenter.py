"""UI-facing presenter that turns transform targets into animated frames."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Optional

from ..domain.animation import AnimationPolicy, ColorAnimator, TweenSpec
from ..domain.ports import FrameClock
from ..domain.transformations import Selection, Transformations
from ..viewmodels.card_vm import CardAnimator
from ..viewmodels.home_vm import HomeVM
from ..viewmodels.settings_vm import SettingsVM
from .frame_scheduler import FrameScheduler

CardFrame = Dict[Selection, Transformations]


class AnimationPresenter:
    """Drive card and status-strip animations from HomeVM state.

    Call chain:
        ``HomeVM.on_changed`` -> :meth:`sync` retargets the animators and
        renders one frame right away. While anything is still moving, the
        frame scheduler keeps calling :meth:`_on_frame`; once all animators
        have settled no further frame is requested.
    """

    def __init__(
        self,
        *,
        scheduler: FrameScheduler,
        render_cards: Callable[[CardFrame], None],
        render_status: Optional[Callable[[str], None]] = None,
        card_colors: Dict[Selection, str],
        clock: FrameClock = time.monotonic,
        policy: AnimationPolicy = AnimationPolicy.DEFAULT_AWARE,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.scheduler = scheduler
        self._render_cards = render_cards
        self._render_status = render_status
        self._card_colors = dict(card_colors)
        self._clock = clock
        self._cards: Dict[Selection, CardAnimator] = {
            which: CardAnimator(policy=policy) for which in Selection
        }
        self._status: Optional[ColorAnimator] = None
        self._selected = Selection.BLUE

    # ------------------------------------------------------------------
    def card(self, which: Selection) -> CardAnimator:
        return self._cards[which]

    def apply_settings(self, settings: SettingsVM) -> None:
        """Use the current policy/timings for future targets."""
        tween = TweenSpec(duration_ms=settings.tween_duration_ms)
        for animator in self._cards.values():
            animator.configure(policy=settings.animation_policy, tween=tween)
        self.scheduler.interval_ms = max(1, settings.frame_interval_ms)
        if not settings.status_tint or self._render_status is None:
            self._status = None
            return
        if self._status is not None and self._status.spec.duration_ms == settings.status_tint_ms:
            return
        now = self._clock()
        target = self._card_colors[self._selected]
        start = target if self._status is None else self._status.value_at(now)
        self._status = ColorAnimator(start, TweenSpec(duration_ms=settings.status_tint_ms))
        # a tint still in flight continues from the rendered color
        if self._status.animate_to(target, now):
            self._render(now)
        else:
            self._render_status(target)

    def sync(self, vm: HomeVM) -> None:
        """Retarget both cards (and the status tint) to ``vm``'s state."""
        now = self._clock()
        moved = False
        for which, animator in self._cards.items():
            moved = animator.retarget(vm.transform_for(which), now) or moved
        self._selected = vm.selected
        if self._status is not None:
            moved = self._status.animate_to(self._card_colors[vm.selected], now) or moved
        if moved:
            self._log.debug("Retargeted animations (selected=%s)", vm.selected.value)
        self._render(now)

    def is_running(self, now: Optional[float] = None) -> bool:
        now = self._clock() if now is None else now
        if any(animator.is_running(now) for animator in self._cards.values()):
            return True
        return self._status is not None and self._status.is_running(now)

    def close(self) -> None:
        self.scheduler.cancel()

    # ------------------------------------------------------------------
    def _on_frame(self) -> None:
        self._render(self._clock())

    def _render(self, now: float) -> None:
        self._render_cards({which: a.sample(now) for which, a in self._cards.items()})
        if self._status is not None and self._render_status is not None:
            self._render_status(self._status.value_at(now))
        if self.is_running(now):
            self.scheduler.request_frame(self._on_frame)


__all__ = ["AnimationPresenter", "CardFrame"]
