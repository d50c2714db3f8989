from __future__ import annotations

import threading
import time

import pystray
from PIL import Image, ImageDraw

from wheelgestures.core.control import ControlState
from wheelgestures.core.ipc_state import set_swipe


def _make_icon(swipe: bool) -> Image.Image:
    # wheel outline, the center notch shows whether swipes are detected
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    d = ImageDraw.Draw(img)

    d.rounded_rectangle((20, 8, 44, 56), radius=12, outline=(255, 255, 255, 220), width=3)

    notch = (255, 255, 255, 255) if swipe else (255, 255, 255, 80)
    d.rectangle((30, 18, 34, 30), fill=notch)
    return img


def run_tray(state: ControlState, stop_flag: threading.Event) -> None:
    icon = pystray.Icon("wheelgestures")

    def update_icon():
        swipe = state.is_swipeable()
        icon.icon = _make_icon(swipe)
        icon.title = f"wheelgestures (swipe {'ON' if swipe else 'OFF'})"

    def publish(swipe: bool):
        set_swipe(swipe)
        update_icon()

    def on_toggle(_icon, _item):
        publish(state.toggle())

    def on_off(_icon, _item):
        state.set_swipeable(False)
        publish(False)

    def on_on(_icon, _item):
        state.set_swipeable(True)
        publish(True)

    def on_quit(_icon, _item):
        stop_flag.set()
        icon.stop()

    icon.menu = pystray.Menu(
        pystray.MenuItem("Toggle swipe", on_toggle),
        pystray.MenuItem("Swipe ON", on_on),
        pystray.MenuItem("Swipe OFF", on_off),
        pystray.Menu.SEPARATOR,
        pystray.MenuItem("Quit", on_quit),
    )

    update_icon()

    # background updater keeps icon state fresh even if hotkeys toggle it
    def watcher():
        last = None
        while not stop_flag.is_set():
            cur = state.is_swipeable()
            if cur != last:
                update_icon()
                last = cur
            time.sleep(0.2)

    threading.Thread(target=watcher, daemon=True).start()
    try:
        icon.run()
    except Exception as e:
        # Tray backends can be fragile; do not kill the daemon.
        print(f"[WheelGestures] Tray backend crashed: {e}")
