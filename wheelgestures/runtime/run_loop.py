from __future__ import annotations

import logging
import os

from wheelgestures.core.config import SensorSettings, preset_by_name
from wheelgestures.core.ipc_state import init_swipe, get_swipe
from wheelgestures.core.types import GestureEvent
from wheelgestures.injector.uinput_wheel import UInputWheel
from wheelgestures.runtime.profile import load_config
from wheelgestures.runtime.wheel_host import WheelHost
from wheelgestures.sensor.evdev_wheel import EvdevWheelSource, DeviceNotFoundError
from wheelgestures.tools.frame_recorder import FrameRecorder


def _print_event(ev: GestureEvent) -> None:
    if ev.x is None:
        print(f"[{ev.name}]")
        return
    print(f"[{ev.name}] x={ev.x.delta:+.0f} ({ev.x.speed:.3f}/ms)  y={ev.y.delta:+.0f} ({ev.y.speed:.3f}/ms)")


def run():
    logging.basicConfig(level=os.environ.get("WHEEL_LOG_LEVEL", "INFO"))

    config = load_config(preset_by_name(os.environ.get("WHEEL_PRESET")))
    settings = SensorSettings(
        device_path=os.environ.get("WHEEL_DEVICE"),
        grab=os.environ.get("WHEEL_GRAB", "0") == "1",
    )

    # swipe toggle is shared with control_daemon through the IPC file
    init_swipe(True)

    src = EvdevWheelSource(settings)
    try:
        device = src.open()
    except DeviceNotFoundError as exc:
        print(f"[WheelGestures] {exc}")
        return

    passthrough = None
    if settings.grab:
        passthrough = UInputWheel.clone(device)
        src.forward = passthrough.forward

    host = WheelHost(config=config, passthrough=passthrough)
    host.emitter.subscribe(_print_event)

    recorder = None
    log_path = os.environ.get("WHEEL_LOG_PATH")
    if log_path:
        recorder = FrameRecorder(log_path)
        print(f"[WheelGestures] recording frames to {recorder.path}")

    print(f"[WheelGestures] listening on {device.name}. Ctrl+C to exit.")
    print("Tip: run control_daemon in another terminal to toggle swipe detection.")
    print("  - Ctrl+Alt+Space toggles swipe")
    print("  - Ctrl+Alt+Esc disables swipe")

    try:
        for sample in src.samples():
            # sync swipe gate from IPC (daemon may have toggled it)
            host.set_swipeable(get_swipe())

            frame = host.on_wheel(sample)
            if recorder is not None:
                recorder.record(sample, frame, host.emitter.events_for(frame))
    except KeyboardInterrupt:
        print("\n[WheelGestures] exiting")
    finally:
        host.close()
        src.close()
        if passthrough is not None:
            passthrough.close()
        if recorder is not None:
            recorder.close()


if __name__ == "__main__":
    run()
