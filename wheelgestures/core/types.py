"""
wheelgestures: core contracts

Shared data types between the input source, the analyzer and the emitter.
Every frame carries exactly one fully populated AxisState per axis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


# ============================================================
# Source → Analyzer (device → logic)
# ============================================================

@dataclass(frozen=True)
class WheelSample:
    """
    One wheel report.

    delta_x / delta_y use the browser convention: positive y scrolls down,
    positive x scrolls right. timestamp is in ms and must increase strictly
    between two samples of the same gesture.
    """
    delta_x: float
    delta_y: float
    timestamp: float
    raw: Optional[Tuple[int, int]] = None  # (hwheel, wheel) detents, for passthrough


# ============================================================
# Analyzer state
# ============================================================

class TriggerName(str, Enum):
    SCROLL = "scroll"
    SCROLLSTART = "scrollstart"
    SCROLLSTOP = "scrollstop"
    GHOSTSCROLL = "ghostscroll"
    GHOSTSCROLLSTART = "ghostscrollstart"
    GHOSTSCROLLSTOP = "ghostscrollstop"
    SWIPE = "swipe"


# emission order
TRIGGER_NAMES: Tuple[TriggerName, ...] = tuple(TriggerName)


@dataclass(frozen=True)
class TriggerSet:
    scroll: bool = False
    scrollstart: bool = False
    scrollstop: bool = False
    ghostscroll: bool = False
    ghostscrollstart: bool = False
    ghostscrollstop: bool = False
    swipe: bool = False

    def get(self, name: TriggerName) -> bool:
        return getattr(self, TriggerName(name).value)

    def any(self) -> bool:
        return any(self.get(n) for n in TRIGGER_NAMES)


@dataclass(frozen=True)
class AxisState:
    delta: float
    sign: int
    speed_up: bool = True
    fails: int = 0
    speed: float = 0.0
    swiping: bool = False
    trigger: TriggerSet = field(default_factory=TriggerSet)
    delay_offset_fact: float = 0.0


@dataclass(frozen=True)
class FrameSample:
    """A classified snapshot of both axes."""
    timestamp: float
    x: AxisState
    y: AxisState


# ============================================================
# Analyzer → Host (notifications)
# ============================================================

@dataclass(frozen=True)
class AxisDetail:
    delta: float = 0
    sign: int = 0
    speed: float = 0


@dataclass(frozen=True)
class GestureEvent:
    """
    A named notification.

    Gesture events carry a detail per axis; lifecycle events
    (<prefix>start / <prefix>stop) carry none.
    """
    name: str
    x: Optional[AxisDetail] = None
    y: Optional[AxisDetail] = None


def sign_of(val: float) -> int:
    if val == 0:
        return 0
    return 1 if val > 0 else -1


def initial_axis_state(delta: float = 0) -> AxisState:
    return AxisState(delta=delta, sign=sign_of(delta))


def initial_frame() -> FrameSample:
    return FrameSample(timestamp=0, x=initial_axis_state(), y=initial_axis_state())
