from __future__ import annotations

import math
from collections import deque
from dataclasses import replace

from wheelgestures.core.types import (
    AxisState, FrameSample, TriggerSet, WheelSample,
    initial_frame, sign_of,
)
from wheelgestures.core.config import WheelConfig, DEFAULT_CONFIG


def _rate(distance: float, elapsed: float) -> float:
    # IEEE semantics for a zero time step instead of ZeroDivisionError
    if elapsed == 0:
        return math.inf if distance else math.nan
    return distance / elapsed


def classify_axis(
    delta: float,
    prev: AxisState,
    elapsed: float,
    config: WheelConfig,
    swipe_enabled: bool = True,
) -> AxisState:
    """
    Classify one axis of a frame against the same axis of the previous frame.

    speed_up only flips once a contrary sample has been seen max_fails times
    in a row; a sign reversal commits immediately.
    """
    unchanged = delta == prev.delta
    sign = sign_of(delta)
    restart = False
    direction_change = False

    if unchanged:
        speed_up = prev.speed_up
        fails = prev.fails
    else:
        sign_sum = sign + prev.sign
        direction_change = sign_sum == 0
        speeding_up = (
            direction_change
            or (sign_sum > 0 and delta > prev.delta)
            or (sign_sum < 0 and delta < prev.delta)
        )

        if not direction_change and speeding_up != prev.speed_up and prev.fails < config.max_fails:
            speed_up = prev.speed_up
            fails = prev.fails + 1
        else:
            speed_up = speeding_up
            fails = 0
            restart = not prev.speed_up and speed_up != prev.speed_up

    # a 1-unit tick while swiping may be the start of a restart: commit the next change right away
    if prev.swiping and not direction_change and abs(delta) == 1 and abs(prev.delta) >= 1:
        fails = config.max_fails

    speed = _rate(abs(delta), elapsed)

    swiping = (prev.swiping and not restart) or (swipe_enabled and speed_up and speed > config.velocity)

    scroll = speed_up and not swiping and (prev.trigger.scroll if unchanged else True)
    ghostscroll = not speed_up and not swiping and (prev.trigger.ghostscroll if unchanged else True)

    trigger = TriggerSet(
        scroll=scroll,
        scrollstart=scroll and not prev.trigger.scroll,
        scrollstop=not scroll and prev.trigger.scroll,
        ghostscroll=ghostscroll,
        ghostscrollstart=ghostscroll and not prev.trigger.ghostscroll,
        ghostscrollstop=not ghostscroll and prev.trigger.ghostscroll,
        swipe=swiping and (not prev.swiping or restart),
    )

    wmv = config.wheelstop_max_velocity
    if scroll and speed < wmv:
        delay_offset_fact = (wmv - speed) / wmv
    else:
        delay_offset_fact = 0.0

    return AxisState(
        delta=delta,
        sign=sign,
        speed_up=speed_up,
        fails=fails,
        speed=speed,
        swiping=swiping,
        trigger=trigger,
        delay_offset_fact=delay_offset_fact,
    )


def resolve_axis(a: AxisState, b: AxisState) -> AxisState:
    """Drop a's weaker signal when b swipes, or when a scrolls while b ghost-scrolls."""
    a_scrolls_while_b_swipes = b.swiping and (a.trigger.scroll or a.trigger.ghostscroll)
    a_scrolls_while_b_ghosts = a.trigger.scroll and b.trigger.ghostscroll

    if a_scrolls_while_b_swipes or a_scrolls_while_b_ghosts:
        return replace(a, trigger=TriggerSet())
    return a


class WheelAnalyzer:
    """
    Deterministic wheel gesture analyzer.
    Converts WheelSample -> FrameSample. One instance per event stream;
    calls must be serialized by the host.
    """

    HISTORY = 2

    def __init__(self, config: WheelConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._swipeable = True
        self._history: deque[FrameSample] = deque(maxlen=self.HISTORY)

    # runtime control
    def enable_swipe(self) -> None:
        self._swipeable = True

    def disable_swipe(self) -> None:
        self._swipeable = False

    def is_swipeable(self) -> bool:
        return self._swipeable

    @property
    def history(self) -> tuple[FrameSample, ...]:
        return tuple(self._history)

    def previous(self) -> FrameSample:
        if self._history:
            return self._history[-1]
        return initial_frame()

    def reset(self) -> None:
        """Forget the gesture; the next sample is compared against the resting state."""
        self._history.clear()

    def analyze(self, sample: WheelSample) -> FrameSample:
        prev = self.previous()
        elapsed = sample.timestamp - prev.timestamp

        x = classify_axis(sample.delta_x, prev.x, elapsed, self.config, self._swipeable)
        y = classify_axis(sample.delta_y, prev.y, elapsed, self.config, self._swipeable)

        # order matters: y is resolved against the already resolved x
        x = resolve_axis(x, y)
        y = resolve_axis(y, x)

        frame = FrameSample(timestamp=sample.timestamp, x=x, y=y)
        self._history.append(frame)
        return frame
