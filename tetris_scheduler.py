
"""Cooperative timers: recurring ticks and one-shot delays"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass
class _Timer:
    due: float
    period: Optional[float]
    callback: Callable[[], None]
    seq: int


class TickScheduler:
    """
    Millisecond timers driven by the host loop instead of a clock thread.

    • The host calls advance(dt_ms) once per frame with the elapsed time.
    • Every timer whose due time has been reached fires, oldest due first;
      an interval that fell behind fires once per missed period.
    • cancel() may be called from inside a callback and takes effect at once.
    """
    def __init__(self):
        self.now = 0.0
        self._timers: Dict[int, _Timer] = {}
        self._next_handle = 1
        self._seq = 0

    def _add(self, delay_ms: float, period: Optional[float], callback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._seq += 1
        self._timers[handle] = _Timer(self.now + delay_ms, period, callback, self._seq)
        return handle

    def set_interval(self, period_ms: float, callback: Callable[[], None]) -> int:
        if period_ms <= 0:
            raise ValueError("interval period must be positive")
        return self._add(period_ms, period_ms, callback)

    def set_timeout(self, delay_ms: float, callback: Callable[[], None]) -> int:
        return self._add(max(0.0, delay_ms), None, callback)

    def cancel(self, handle: Optional[int]):
        if handle is not None:
            self._timers.pop(handle, None)

    def active(self, handle: Optional[int]) -> bool:
        return handle in self._timers

    def advance(self, dt_ms: float):
        target = self.now + dt_ms
        while True:
            due = [(t.due, t.seq, h) for h, t in self._timers.items() if t.due <= target]
            if not due:
                break
            when, _, handle = min(due)
            timer = self._timers[handle]
            self.now = when
            if timer.period is None:
                del self._timers[handle]
            else:
                timer.due += timer.period
            timer.callback()
        self.now = target
