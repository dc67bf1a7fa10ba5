"""Scheduler helper that owns the animation frame timer.

The app passes Tk ``after`` and ``after_cancel`` callables into this class so
only one frame callback is ever pending and it can be canceled safely when
animations settle or the window closes.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.ports import CancelFn, ScheduleFn


class FrameScheduler:
    """Keep at most one pending frame callback on a UI scheduler (for example Tk)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn, interval_ms: int = 16) -> None:
        """Store schedule/cancel functions.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
            interval_ms: Delay between frames in milliseconds.
        """
        self._schedule = schedule
        self._cancel = cancel
        self.interval_ms = max(1, int(interval_ms))
        self._token: Optional[str] = None
        self._log = logging.getLogger(__name__)

    @property
    def pending(self) -> bool:
        return self._token is not None

    def request_frame(self, callback: Callable[[], None]) -> None:
        """Schedule ``callback`` for the next frame unless one is already pending."""
        if self._token is not None:
            return

        def _run() -> None:
            self._token = None
            callback()

        self._token = self._schedule(self.interval_ms, _run)

    def cancel(self) -> None:
        """Cancel the pending frame, if any."""
        token, self._token = self._token, None
        if token is None:
            return
        try:
            self._cancel(token)
        except Exception as exc:
            # Tk raises once the interpreter is gone; nothing left to cancel then.
            self._log.debug("Frame cancel failed: %s", exc)


__all__ = ["FrameScheduler"]
