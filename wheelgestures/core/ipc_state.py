from __future__ import annotations

from pathlib import Path

STATE_PATH = Path("/tmp/wheelgestures_swipe")


def init_swipe(default: bool = True) -> None:
    if not STATE_PATH.exists():
        set_swipe(default)


def set_swipe(enabled: bool) -> None:
    STATE_PATH.write_text("1" if enabled else "0")


def get_swipe() -> bool:
    try:
        return STATE_PATH.read_text().strip() == "1"
    except FileNotFoundError:
        return True
