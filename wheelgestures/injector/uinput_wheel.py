from __future__ import annotations

from dataclasses import dataclass
from evdev import InputDevice, UInput, ecodes as e

from wheelgestures.sensor.evdev_wheel import HI_RES_CODES


@dataclass
class UInputWheel:
    """
    Virtual twin of a grabbed wheel device.
    Keep it boring. The analyzer is the brain; this only re-injects
    what the host decided not to swallow.
    """
    ui: UInput

    @classmethod
    def clone(cls, device: InputDevice) -> "UInputWheel":
        # hi-res codes are left out: passthrough only writes whole detents
        caps = {
            t: codes for t, codes in device.capabilities().items()
            if t not in (e.EV_SYN, e.EV_FF)
        }
        caps[e.EV_REL] = [c for c in caps.get(e.EV_REL, []) if c not in HI_RES_CODES]
        ui = UInput(caps, name=f"{device.name} (wheelgestures)")
        return cls(ui=ui)

    def scroll(self, hwheel: int, wheel: int) -> None:
        if hwheel:
            self.ui.write(e.EV_REL, e.REL_HWHEEL, int(hwheel))
        if wheel:
            # raw evdev sign, no browser-style inversion here
            self.ui.write(e.EV_REL, e.REL_WHEEL, int(wheel))
        self.ui.syn()

    def forward(self, event) -> None:
        self.ui.write_event(event)

    def close(self) -> None:
        self.ui.close()
