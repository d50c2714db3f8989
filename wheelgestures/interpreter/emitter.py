from __future__ import annotations

from typing import Callable, List

from wheelgestures.core.types import (
    AxisDetail, AxisState, FrameSample, GestureEvent,
    TriggerName, TRIGGER_NAMES,
)

Listener = Callable[[GestureEvent], None]


def axis_detail(axis: AxisState, name: TriggerName) -> AxisDetail:
    if axis.trigger.get(name) and axis.delta != 0:
        return AxisDetail(delta=axis.delta, sign=axis.sign, speed=axis.speed)
    return AxisDetail()


class GestureEmitter:
    """
    Turns classified frames into named notifications.

    Names are <prefix><trigger>, e.g. "wheelscrollstart". Listeners are called
    synchronously, in registration order, for every notification.
    """

    def __init__(self, prefix: str = "wheel") -> None:
        self.prefix = prefix
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def events_for(self, frame: FrameSample) -> list[GestureEvent]:
        events: list[GestureEvent] = []
        for name in TRIGGER_NAMES:
            if frame.x.trigger.get(name) or frame.y.trigger.get(name):
                events.append(GestureEvent(
                    name=f"{self.prefix}{name.value}",
                    x=axis_detail(frame.x, name),
                    y=axis_detail(frame.y, name),
                ))
        return events

    def emit(self, frame: FrameSample) -> list[GestureEvent]:
        events = self.events_for(frame)
        for ev in events:
            self._dispatch(ev)
        return events

    def notify(self, suffix: str) -> GestureEvent:
        """Lifecycle notification without detail (start / stop)."""
        ev = GestureEvent(name=f"{self.prefix}{suffix}")
        self._dispatch(ev)
        return ev

    def _dispatch(self, ev: GestureEvent) -> None:
        for listener in list(self._listeners):
            listener(ev)
