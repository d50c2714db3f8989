from __future__ import annotations

import threading
from typing import Callable, Optional


class IdleTimer:
    """
    Cancel-then-restart one-shot timer.
    The callback runs on the timer thread.
    """

    def __init__(self) -> None:
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        with self._lock:
            return self._timer is not None and self._timer.is_alive()

    def rearm(self, delay_ms: float, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(max(0.0, delay_ms) / 1000.0, callback)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
