from __future__ import annotations

from typing import Callable, Dict, List, Tuple


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTk:
    """Stand-in for Tk's ``after``/``after_cancel`` pair."""

    def __init__(self) -> None:
        self.pending: Dict[str, Tuple[int, Callable[[], None]]] = {}
        self.cancelled: List[str] = []
        self._next = 0

    def after(self, delay_ms: int, callback: Callable[[], None]) -> str:
        self._next += 1
        token = f"after#{self._next}"
        self.pending[token] = (delay_ms, callback)
        return token

    def after_cancel(self, token: str) -> None:
        self.cancelled.append(token)
        self.pending.pop(token, None)

    def fire_all(self) -> int:
        due = list(self.pending.items())
        self.pending.clear()
        for _token, (_delay, callback) in due:
            callback()
        return len(due)


__all__ = ["FakeClock", "FakeTk"]
