from __future__ import annotations

from typing import Callable, Dict, Protocol


# ---- Ports (Hexagonal boundaries) ----
class StoragePort(Protocol):
    """Persistence for user preferences. Transform state is never stored."""

    def save_user_prefs(self, prefs: Dict) -> None: ...
    def load_user_prefs(self) -> Dict: ...


class FrameClock(Protocol):
    """Monotonic time source in seconds (``time.monotonic`` in the app)."""

    def __call__(self) -> float: ...


ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]
