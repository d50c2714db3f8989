from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

import evdev
from evdev import InputDevice, ecodes

from wheelgestures.core.config import SensorSettings
from wheelgestures.core.types import WheelSample

logger = logging.getLogger(__name__)

HI_RES_PER_DETENT = 120

REL_WHEEL_HI_RES = ecodes.REL_WHEEL_HI_RES
REL_HWHEEL_HI_RES = ecodes.REL_HWHEEL_HI_RES

WHEEL_CODES = (ecodes.REL_WHEEL, ecodes.REL_HWHEEL, REL_WHEEL_HI_RES, REL_HWHEEL_HI_RES)
HI_RES_CODES = (REL_WHEEL_HI_RES, REL_HWHEEL_HI_RES)


class DeviceNotFoundError(RuntimeError):
    pass


def is_wheel_event(ev) -> bool:
    return ev.type == ecodes.EV_REL and ev.code in WHEEL_CODES


def find_wheel_device(path: Optional[str] = None) -> InputDevice:
    """Open the given device, or the first one that reports a vertical wheel."""
    if path:
        return InputDevice(path)

    for dev_path in evdev.list_devices():
        device = InputDevice(dev_path)
        rel = device.capabilities().get(ecodes.EV_REL, [])
        if ecodes.REL_WHEEL in rel:
            logger.info("Found wheel device: %s (%s)", device.name, device.path)
            return device
        device.close()

    logger.error("No wheel device found")
    raise DeviceNotFoundError("no input device reports REL_WHEEL")


@dataclass
class WheelDecoder:
    """
    Folds the wheel events of one SYN_REPORT into a WheelSample.

    evdev reports wheel-up as positive REL_WHEEL; samples use the
    browser convention (positive delta_y scrolls down), so y is negated.
    """
    px_per_detent: float = 100.0
    hi_res: bool = False

    def decode(self, events: Iterable) -> Optional[WheelSample]:
        wheel = hwheel = 0
        wheel_hr = hwheel_hr = 0
        t_ms = None

        for ev in events:
            if not is_wheel_event(ev):
                continue
            if ev.code == ecodes.REL_WHEEL:
                wheel += ev.value
            elif ev.code == ecodes.REL_HWHEEL:
                hwheel += ev.value
            elif ev.code == REL_WHEEL_HI_RES:
                wheel_hr += ev.value
            else:
                hwheel_hr += ev.value
            t_ms = ev.timestamp() * 1000.0

        if t_ms is None:
            return None

        if self.hi_res:
            dy = wheel_hr / HI_RES_PER_DETENT
            dx = hwheel_hr / HI_RES_PER_DETENT
        else:
            dy, dx = wheel, hwheel

        if dx == 0 and dy == 0 and wheel == 0 and hwheel == 0:
            return None

        return WheelSample(
            delta_x=dx * self.px_per_detent,
            delta_y=-dy * self.px_per_detent,
            timestamp=t_ms,
            raw=(hwheel, wheel),
        )


class EvdevWheelSource:
    """
    Reads wheel reports from a Linux input device.

    When grabbed, every non-wheel event of a report (pointer motion,
    buttons, the closing SYN) is handed to `forward` so the pointer keeps
    working through the passthrough device.
    """

    def __init__(self, settings: SensorSettings = SensorSettings(),
                 forward: Optional[Callable] = None) -> None:
        self.settings = settings
        self.forward = forward
        self.device: Optional[InputDevice] = None
        self.decoder = WheelDecoder(px_per_detent=settings.px_per_detent)
        self._grabbed = False

    def open(self) -> InputDevice:
        device = find_wheel_device(self.settings.device_path)
        rel = device.capabilities().get(ecodes.EV_REL, [])
        self.decoder = WheelDecoder(
            px_per_detent=self.settings.px_per_detent,
            hi_res=self.settings.prefer_hi_res and REL_WHEEL_HI_RES in rel,
        )
        if self.settings.grab:
            device.grab()
            self._grabbed = True
        self.device = device
        return device

    def samples(self) -> Iterator[WheelSample]:
        if self.device is None:
            self.open()

        batch = []
        for ev in self.device.read_loop():
            if ev.type == ecodes.EV_SYN and ev.code == ecodes.SYN_REPORT:
                if self.forward is not None:
                    other = [e for e in batch if not is_wheel_event(e)]
                    if other:
                        for e in other + [ev]:
                            self.forward(e)
                sample = self.decoder.decode(batch)
                batch = []
                if sample is not None:
                    yield sample
            else:
                batch.append(ev)

    def close(self) -> None:
        if self.device is None:
            return
        if self._grabbed:
            try:
                self.device.ungrab()
            except OSError as exc:
                logger.warning("ungrab failed: %s", exc)
            self._grabbed = False
        self.device.close()
        self.device = None
