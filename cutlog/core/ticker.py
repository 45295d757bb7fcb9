# cutlog/core/ticker.py
# Cancellable periodic callback for live timer displays

from __future__ import annotations

import threading
from threading import Timer
from typing import Callable, Optional


# repeating Timer chain; callback returning False stops it
class Ticker:
    def __init__(self, interval: float, callback: Callable[[], Optional[bool]]):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.callback = callback
        self._timer: Timer | None = None
        self._lock = threading.Lock()
        self._running = False
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            self._running = True
            self._schedule()

    # safe to call repeatedly & from inside the callback
    def stop(self) -> None:
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _schedule(self) -> None:
        self._timer = Timer(self.interval, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self) -> None:
        if not self._running:
            return
        self.ticks += 1
        try:
            keep_going = self.callback()
        except Exception:
            self.stop()
            raise
        with self._lock:
            if keep_going is False:
                self._running = False
                self._timer = None
            elif self._running:
                self._schedule()

    def __enter__(self) -> "Ticker":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
