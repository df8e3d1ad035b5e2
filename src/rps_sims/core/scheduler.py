# src/rps_sims/core/scheduler.py

from __future__ import annotations

from typing import Any, Callable, Protocol

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """
    Host-side frame loop, in the spirit of requestAnimationFrame.

    `request_frame` schedules a single call of `callback(now)` on the next
    frame, where `now` is a timestamp in seconds. The returned handle can be
    passed to `cancel_frame` to drop the call if it has not run yet.
    """

    def request_frame(self, callback: FrameCallback) -> Any:
        ...

    def cancel_frame(self, handle: Any) -> None:
        ...


class ManualFrameScheduler:
    """
    Headless scheduler driven by hand, with a virtual clock.

    Typical usage:
        scheduler = ManualFrameScheduler()
        sim = Simulation(config, scheduler=scheduler)
        sim.init(config.game)
        sim.start()
        scheduler.run(n_frames=600, dt=1 / 60)
    """

    def __init__(self, start_time: float = 0.0):
        self.now = float(start_time)
        self._pending: dict[int, FrameCallback] = {}
        self._next_handle = 1

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def advance(self, dt: float) -> int:
        """
        Move the clock forward by dt and fire the callbacks that were pending
        before this frame started. Returns how many ran.
        """
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self.now += dt
        due = list(self._pending.items())
        self._pending.clear()
        for _, callback in due:
            callback(self.now)
        return len(due)

    def run(self, n_frames: int, dt: float) -> int:
        """Advance up to n_frames; stops early once nothing is pending."""
        frames = 0
        for _ in range(n_frames):
            if not self._pending:
                break
            self.advance(dt)
            frames += 1
        return frames
