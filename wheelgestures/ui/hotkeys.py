from __future__ import annotations
from pynput import keyboard
from wheelgestures.core.control import ControlState
from wheelgestures.core.ipc_state import set_swipe


def run_hotkeys(state: ControlState) -> None:
    """
    Global hotkeys (X11):
    - Ctrl+Alt+Space: Toggle swipe detection
    - Ctrl+Alt+Esc:   Swipe OFF
    """

    pressed = set()

    CTRL_KEYS = {keyboard.Key.ctrl, keyboard.Key.ctrl_l, keyboard.Key.ctrl_r}
    ALT_KEYS  = {keyboard.Key.alt, keyboard.Key.alt_l, keyboard.Key.alt_r}

    def is_ctrl():
        return any(k in pressed for k in CTRL_KEYS)

    def is_alt():
        return any(k in pressed for k in ALT_KEYS)

    def on_press(k):
        pressed.add(k)

        if is_ctrl() and is_alt():
            if k == keyboard.Key.space:
                swipe = state.toggle()
                set_swipe(swipe)
                print(f"[WheelGestures] swipe {'ON' if swipe else 'OFF'} (Ctrl+Alt+Space)")
            elif k == keyboard.Key.esc:
                state.set_swipeable(False)
                set_swipe(False)
                print("[WheelGestures] swipe OFF (Ctrl+Alt+Esc)")

    def on_release(k):
        pressed.discard(k)

    with keyboard.Listener(on_press=on_press, on_release=on_release) as listener:
        listener.join()
