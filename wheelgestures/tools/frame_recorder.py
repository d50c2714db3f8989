from __future__ import annotations

"""
wheelgestures Frame Recorder
Writes JSONL logs to ~/.cache/wheelgestures/frame_logs/frames_<timestamp>.jsonl
One line = one sample + its classified frame + emitted notifications.

Replay a log:
  python -m wheelgestures.tools.frame_recorder <path.jsonl> [preset]
"""

import json
import sys
import time
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Iterator, List, Optional

from wheelgestures.core.config import WheelConfig, DEFAULT_CONFIG, preset_by_name
from wheelgestures.core.types import FrameSample, GestureEvent, WheelSample
from wheelgestures.interpreter.emitter import GestureEmitter
from wheelgestures.interpreter.state_machine import WheelAnalyzer


def _ser(x):
    if x is None:
        return None
    if is_dataclass(x):
        return asdict(x)
    if hasattr(x, "__dict__"):
        return dict(x.__dict__)
    return str(x)


def log_path() -> Path:
    outdir = Path.home() / ".cache" / "wheelgestures" / "frame_logs"
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    return outdir / f"frames_{ts}.jsonl"


class FrameRecorder:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path).expanduser() if path else log_path()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._f = open(self.path, "a", buffering=1)

    def record(self, sample: WheelSample, frame: FrameSample, events: List[GestureEvent]) -> None:
        line = {
            "sample": _ser(sample),
            "frame": _ser(frame),
            "events": [_ser(ev) for ev in events],
        }
        # speed may be inf/nan on a zero time step; json writes them as Infinity/NaN
        self._f.write(json.dumps(line) + "\n")

    def close(self) -> None:
        self._f.close()

    def __enter__(self) -> "FrameRecorder":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def read_samples(path: Path) -> Iterator[WheelSample]:
    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            s = json.loads(line)["sample"]
            raw = s.get("raw")
            yield WheelSample(
                delta_x=s["delta_x"],
                delta_y=s["delta_y"],
                timestamp=s["timestamp"],
                raw=tuple(raw) if raw is not None else None,
            )


def replay(path: Path, config: WheelConfig = DEFAULT_CONFIG) -> List[GestureEvent]:
    """Run a recording through a fresh analyzer. Idle gaps are not re-simulated."""
    analyzer = WheelAnalyzer(config)
    emitter = GestureEmitter(config.event_prefix)
    events: List[GestureEvent] = []
    for sample in read_samples(path):
        events.extend(emitter.emit(analyzer.analyze(sample)))
    return events


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("[FrameRecorder] usage: python -m wheelgestures.tools.frame_recorder <log.jsonl> [preset]")
        print("[FrameRecorder] record with: WHEEL_LOG_PATH=<log.jsonl> python -m wheelgestures.runtime.run_loop")
        sys.exit(2)

    cfg = preset_by_name(sys.argv[2] if len(sys.argv) > 2 else None)
    for ev in replay(Path(sys.argv[1]), cfg):
        print(ev.name, _ser(ev.x), _ser(ev.y))
