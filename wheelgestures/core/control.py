from __future__ import annotations
from dataclasses import dataclass, field
from threading import Lock


@dataclass
class ControlState:
    """
    Shared control plane.
    swipe=False keeps the analyzer from committing new swipes.
    """
    _swipe: bool = True
    _lock: Lock = field(default_factory=Lock)

    def is_swipeable(self) -> bool:
        with self._lock:
            return self._swipe

    def set_swipeable(self, value: bool) -> None:
        with self._lock:
            self._swipe = value

    def toggle(self) -> bool:
        with self._lock:
            self._swipe = not self._swipe
            return self._swipe
