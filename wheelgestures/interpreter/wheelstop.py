from __future__ import annotations

from wheelgestures.core.config import WheelConfig
from wheelgestures.core.types import FrameSample


def extra_wheelstop_delay(frame: FrameSample, config: WheelConfig) -> float:
    """
    Extra idle time for a frame, in ms.

    Scales from 0 (scroll at or above wheelstop_max_velocity) up to
    wheelstop_delay_max - wheelstop_delay as the scroll speed approaches 0.
    """
    offset_fact = max(frame.x.delay_offset_fact, frame.y.delay_offset_fact)
    return offset_fact * config.wheelstop_delay_offset


def idle_delay(frame: FrameSample, config: WheelConfig) -> float:
    return config.wheelstop_delay + extra_wheelstop_delay(frame, config)
