"""Frame timing, fixed-step accumulation and callback timers."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable

TimerCallback = Callable[["CustomTimer"], None]

_FPS_SAMPLES = 100


@dataclass(eq=False)
class CustomTimer:
    """A countdown that invokes its callback when it runs out, optionally renewing."""

    duration: float
    callback: TimerCallback
    auto_renew: bool = False
    renew_count: int = -1
    running: bool = True
    expired: bool = False
    remaining: float = field(init=False)
    renewals: int = 0
    remaining_renewals: int = 0

    def __post_init__(self) -> None:
        self.remaining = self.duration
        if self.renew_count > 0:
            self.remaining_renewals = self.renew_count

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        self.running = True

    def expire(self) -> None:
        self.running = False
        self.expired = True


class Timer:
    """Measures frame deltas, FPS and fixed-step readiness, and drives custom timers."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self.fixed_timestep = 1.0 / 60.0
        self._delta_time = 0.0
        self._fixed_accumulator = 0.0
        self._frame_count = 0
        self._fps = 0.0
        self._samples: deque[float] = deque(maxlen=_FPS_SAMPLES)
        self._timers: list[CustomTimer] = []
        self._pending: list[CustomTimer] = []
        self._timers_paused = False
        self._last_time: float | None = None

    @property
    def delta_time(self) -> float:
        return self._delta_time

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def active_timers(self) -> tuple[CustomTimer, ...]:
        """Timers currently being updated (not including ones created this frame)."""
        return tuple(self._timers)

    def tick(self, tick_custom_timers: bool = True) -> None:
        """Advance one frame."""
        now = self._clock()
        self._delta_time = 0.0 if self._last_time is None else now - self._last_time
        self._last_time = now
        self._frame_count += 1
        self._fixed_accumulator += self._delta_time

        # the fixed update runs at least once on the first frame
        if self._frame_count == 1:
            self._fixed_accumulator = self.fixed_timestep

        self._refresh_fps()

        if tick_custom_timers:
            self._update_custom_timers()

    def is_fixed_update_ready(self) -> bool:
        """True, consuming one step, if a fixed step has accumulated."""
        if self._fixed_accumulator >= self.fixed_timestep:
            self._fixed_accumulator -= self.fixed_timestep
            return True
        return False

    def create_timer(
        self,
        duration: float,
        callback: TimerCallback,
        auto_renew: bool = False,
        renew_count: int = -1,
    ) -> CustomTimer:
        """Queue a timer; it starts counting from the next tick."""
        timer = CustomTimer(duration, callback, auto_renew, renew_count)
        self._pending.append(timer)
        return timer

    def pause_timers(self, pause: bool = True) -> None:
        self._timers_paused = pause

    def clear_timers(self) -> None:
        """Drop all timers without invoking their callbacks."""
        self._timers.clear()
        self._pending.clear()

    def _refresh_fps(self) -> None:
        self._samples.append(self._delta_time)
        average = sum(self._samples) / len(self._samples)
        self._fps = 1.0 / average if average > 0.0 else 0.0

    def _update_custom_timers(self) -> None:
        if not self._timers_paused and self._timers:
            for timer in list(self._timers):
                if not timer.running:
                    continue
                timer.remaining -= self._delta_time
                if timer.remaining > 0.0:
                    continue
                timer.expired = True
                if timer.auto_renew and (timer.renew_count == -1 or timer.remaining_renewals > 0):
                    timer.remaining += timer.duration
                    timer.expired = False
                    timer.renewals += 1
                    if timer.renew_count > 0:
                        timer.remaining_renewals -= 1
                if timer.expired:
                    timer.running = False
                timer.callback(timer)

            self._timers = [t for t in self._timers if not t.expired]

        if self._pending:
            self._timers.extend(self._pending)
            self._pending.clear()