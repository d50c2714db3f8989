from __future__ import annotations

import json
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Optional

from wheelgestures.core.config import WheelConfig, DEFAULT_CONFIG


def _profile_path() -> Path:
    p = Path.home() / ".config" / "wheelgestures"
    p.mkdir(parents=True, exist_ok=True)
    return p / "profile.json"


def save_profile(config: WheelConfig, path: Optional[Path] = None) -> None:
    (path or _profile_path()).write_text(json.dumps(asdict(config), indent=2))


def load_profile(path: Optional[Path] = None) -> Optional[dict]:
    p = path or _profile_path()
    if not p.exists():
        return None
    return json.loads(p.read_text())


def config_from_profile(prof: Optional[dict], base: WheelConfig = DEFAULT_CONFIG) -> WheelConfig:
    """
    Overlay a saved profile on a preset.
    Unknown keys are ignored; the velocity clamp is applied again.
    """
    if not prof:
        return base
    if not isinstance(prof, dict):
        raise TypeError(f"profile must be a JSON object, got {type(prof).__name__}")
    known = {f.name for f in fields(WheelConfig)}
    overrides = {k: v for k, v in prof.items() if k in known}
    return replace(base, **overrides)


def load_config(base: WheelConfig = DEFAULT_CONFIG, path: Optional[Path] = None) -> WheelConfig:
    try:
        return config_from_profile(load_profile(path), base)
    except (ValueError, TypeError) as exc:
        # json.JSONDecodeError is a ValueError
        print(f"[Profile] failed to apply profile, using preset: {exc}")
        return base
