import json

from wheelgestures.core.types import WheelSample
from wheelgestures.core.config import DEFAULT_CONFIG
from wheelgestures.interpreter.emitter import GestureEmitter
from wheelgestures.interpreter.state_machine import WheelAnalyzer
from wheelgestures.tools.frame_recorder import FrameRecorder, read_samples, replay


def test_recording_replays_to_same_notifications(tmp_path):
    path = tmp_path / "frames.jsonl"
    it = WheelAnalyzer(DEFAULT_CONFIG)
    em = GestureEmitter()
    live = []

    with FrameRecorder(path) as rec:
        t = 0
        for dy, raw in ((5, (0, -1)), (40, None), (40, None), (1, None)):
            t += 16
            s = WheelSample(delta_x=0, delta_y=dy, timestamp=t, raw=raw)
            frame = it.analyze(s)
            events = em.emit(frame)
            live.extend(events)
            rec.record(s, frame, events)

    lines = path.read_text().splitlines()
    assert len(lines) == 4
    assert json.loads(lines[1])["frame"]["y"]["swiping"] is True

    samples = list(read_samples(path))
    assert samples[0].raw == (0, -1)
    assert samples[1].raw is None

    assert [e.name for e in replay(path)] == [e.name for e in live]


def test_recorder_expands_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    with FrameRecorder("~/logs/frames.jsonl") as rec:
        assert rec.path == tmp_path / "logs" / "frames.jsonl"

    assert (tmp_path / "logs" / "frames.jsonl").exists()
