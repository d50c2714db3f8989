from __future__ import annotations

import threading
import time

from wheelgestures.core.control import ControlState
from wheelgestures.ui.hotkeys import run_hotkeys
from wheelgestures.core.ipc_state import init_swipe, get_swipe
try:
    from wheelgestures.ui.tray import run_tray
except Exception:
    run_tray = None


def main():
    # start from whatever the runtime last saw
    init_swipe(True)
    state = ControlState(_swipe=get_swipe())
    stop = threading.Event()

    # Hotkeys always-on (never dependent on tray)
    t_hotkeys = threading.Thread(target=run_hotkeys, args=(state,), daemon=True)
    t_hotkeys.start()

    print("[WheelGestures] Control daemon started.")
    print("  Hotkeys:")
    print("   - Ctrl+Alt+Space = Toggle swipe detection")
    print("   - Ctrl+Alt+Esc   = Swipe OFF")

    # Tray: best effort. If it crashes, keep hotkeys alive.
    if run_tray is None:
        print("  Tray: unavailable (missing backend). Hotkeys only.")
    else:
        print("  Tray: Toggle / ON / OFF / Quit")
        t_tray = threading.Thread(target=run_tray, args=(state, stop), daemon=True)
        t_tray.start()

    try:
        while not stop.is_set():
            time.sleep(0.5)
    except KeyboardInterrupt:
        stop.set()
        print("\n[WheelGestures] exiting")


if __name__ == "__main__":
    main()
