from __future__ import annotations

from rota.app.frame_scheduler import FrameScheduler
from rota.tests.unit.app.fakes import FakeTk


def test_request_frame_keeps_single_pending_callback() -> None:
    tk = FakeTk()
    scheduler = FrameScheduler(tk.after, tk.after_cancel, interval_ms=20)
    calls = []

    scheduler.request_frame(lambda: calls.append("a"))
    scheduler.request_frame(lambda: calls.append("b"))

    assert len(tk.pending) == 1
    assert next(iter(tk.pending.values()))[0] == 20
    assert scheduler.pending

    tk.fire_all()

    assert calls == ["a"]
    assert not scheduler.pending


def test_cancel_clears_pending_frame() -> None:
    tk = FakeTk()
    scheduler = FrameScheduler(tk.after, tk.after_cancel)
    scheduler.request_frame(lambda: None)

    scheduler.cancel()
    scheduler.cancel()

    assert tk.pending == {}
    assert tk.cancelled == ["after#1"]


def test_cancel_tolerates_scheduler_errors() -> None:
    def broken_cancel(_token: str) -> None:
        raise RuntimeError("application has been destroyed")

    tk = FakeTk()
    scheduler = FrameScheduler(tk.after, broken_cancel)
    scheduler.request_frame(lambda: None)

    scheduler.cancel()

    assert not scheduler.pending


def test_interval_is_at_least_one_ms() -> None:
    tk = FakeTk()

    assert FrameScheduler(tk.after, tk.after_cancel, interval_ms=0).interval_ms == 1
