"""
wheelgestures defaults (presets)

Velocities are in px/ms, delays in ms.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PresetName(str, Enum):
    DEFAULT = "Default"
    TRACKPAD = "Trackpad"
    MOUSE = "Mouse"


@dataclass(frozen=True)
class WheelConfig:
    velocity: float = 1.5                  # swipe commit speed
    wheelstop_delay: float = 250.0
    wheelstop_delay_max: float = 500.0     # >= wheelstop_delay
    max_fails: int = 3                     # hysteresis budget
    wheelstop_max_velocity: float = 0.1    # below this a scroll extends the idle delay
    event_prefix: str = "wheel"
    # host only, never read by the classifier
    prevent_vertical_default: bool = True
    prevent_horizontal_default: bool = True

    def __post_init__(self) -> None:
        if self.wheelstop_max_velocity > self.velocity:
            object.__setattr__(self, "wheelstop_max_velocity", self.velocity)

    @property
    def wheelstop_delay_offset(self) -> float:
        return self.wheelstop_delay_max - self.wheelstop_delay


@dataclass(frozen=True)
class SensorSettings:
    device_path: Optional[str] = None   # None = first device with a wheel
    grab: bool = False                  # exclusive access, native scroll via passthrough
    px_per_detent: float = 100.0
    prefer_hi_res: bool = True


DEFAULT_CONFIG = WheelConfig()

# Trackpads deliver many small deltas; allow a longer trail-off before stop.
TRACKPAD_CONFIG = WheelConfig(
    velocity=1.5,
    wheelstop_delay=250.0,
    wheelstop_delay_max=650.0,
    max_fails=4,
    wheelstop_max_velocity=0.15,
)

# Notched wheels jump in whole detents, so a single notch is already fast.
MOUSE_CONFIG = WheelConfig(
    velocity=2.5,
    wheelstop_delay=200.0,
    wheelstop_delay_max=400.0,
    max_fails=2,
    wheelstop_max_velocity=0.1,
)

PRESETS = {
    PresetName.DEFAULT: DEFAULT_CONFIG,
    PresetName.TRACKPAD: TRACKPAD_CONFIG,
    PresetName.MOUSE: MOUSE_CONFIG,
}


def preset_by_name(name: Optional[str]) -> WheelConfig:
    if not name:
        return DEFAULT_CONFIG
    for preset_name, cfg in PRESETS.items():
        if preset_name.value.lower() == name.lower():
            return cfg
    raise ValueError(f"unknown preset {name!r}; expected one of {[p.value for p in PRESETS]}")
