from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional, Protocol

from wheelgestures.core.config import WheelConfig, DEFAULT_CONFIG
from wheelgestures.core.types import FrameSample, WheelSample
from wheelgestures.interpreter.emitter import GestureEmitter
from wheelgestures.interpreter.state_machine import WheelAnalyzer
from wheelgestures.interpreter.wheelstop import idle_delay
from wheelgestures.runtime.idle_timer import IdleTimer

logger = logging.getLogger(__name__)


class Passthrough(Protocol):
    def scroll(self, hwheel: int, wheel: int) -> None: ...


class Timer(Protocol):
    def rearm(self, delay_ms: float, callback) -> None: ...
    def cancel(self) -> None: ...


def should_prevent(sample: WheelSample, config: WheelConfig) -> bool:
    """Whether native scrolling is withheld for this sample."""
    vertical = abs(sample.delta_x) < abs(sample.delta_y)
    return (
        (config.prevent_horizontal_default and config.prevent_vertical_default)
        or (config.prevent_vertical_default and vertical)
        or (config.prevent_horizontal_default and not vertical)
    )


@dataclass
class WheelHost:
    """
    Glue between a wheel source and the analyzer.

    Per sample:
      - forwards the native scroll when it is not prevented
      - analyzes and emits gesture notifications
      - emits <prefix>start on the first sample after an idle period
      - rearms the idle timer; when it fires, emits <prefix>stop and
        forgets the gesture history
    """
    config: WheelConfig = DEFAULT_CONFIG
    passthrough: Optional[Passthrough] = None
    timer: Timer = field(default_factory=IdleTimer)

    def __post_init__(self) -> None:
        self.analyzer = WheelAnalyzer(self.config)
        self.emitter = GestureEmitter(self.config.event_prefix)
        self.active = False
        self._lock = threading.Lock()
        # a timer that fired while a new sample held the lock must not stop the gesture
        self._generation = 0

    def on_wheel(self, sample: WheelSample) -> FrameSample:
        with self._lock:
            if not should_prevent(sample, self.config) and self.passthrough is not None and sample.raw:
                self.passthrough.scroll(*sample.raw)

            frame = self.analyzer.analyze(sample)

            # bookkeeping first, a failing listener must not leave the gesture unarmed
            starting = not self.active
            self.active = True
            self._generation += 1
            gen = self._generation
            self.timer.rearm(idle_delay(frame, self.config), lambda: self._on_idle(gen))

            self.emitter.emit(frame)
            if starting:
                self.emitter.notify("start")
            return frame

    def _on_idle(self, generation: int) -> None:
        with self._lock:
            if not self.active or generation != self._generation:
                return
            logger.debug("wheel idle, clearing %d frame(s)", len(self.analyzer.history))
            self.active = False
            self.analyzer.reset()
            self.emitter.notify("stop")

    # runtime control, forwarded to the analyzer
    def enable_swipe(self) -> None:
        self.analyzer.enable_swipe()

    def disable_swipe(self) -> None:
        self.analyzer.disable_swipe()

    def is_swipeable(self) -> bool:
        return self.analyzer.is_swipeable()

    def set_swipeable(self, value: bool) -> None:
        if value:
            self.enable_swipe()
        else:
            self.disable_swipe()

    def close(self) -> None:
        self.timer.cancel()
