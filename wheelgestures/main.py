from __future__ import annotations

from wheelgestures.core.config import DEFAULT_CONFIG
from wheelgestures.core.types import GestureEvent, WheelSample
from wheelgestures.interpreter.emitter import GestureEmitter
from wheelgestures.interpreter.state_machine import WheelAnalyzer
from wheelgestures.interpreter.wheelstop import idle_delay


def fake_stream(t0: float = 1000.0):
	"""Slow scroll down, a fast flick, then a short trail-off to the left."""
	t = t0
	for dy in (2, 4, 6, 8, 10, 12):
		t += 16
		yield WheelSample(delta_x=0, delta_y=dy, timestamp=t)
	for dy in (30, 60, 60):
		t += 16
		yield WheelSample(delta_x=0, delta_y=dy, timestamp=t)
	for dx in (-3, -2, -1, -1):
		t += 16
		yield WheelSample(delta_x=dx, delta_y=0, timestamp=t)


def show(ev: GestureEvent) -> None:
	print(f"  {ev.name:<22} x={ev.x.delta:+6.1f}  y={ev.y.delta:+6.1f}")


def main():
	analyzer = WheelAnalyzer(DEFAULT_CONFIG)
	emitter = GestureEmitter(DEFAULT_CONFIG.event_prefix)
	emitter.subscribe(show)

	print("wheelgestures fake input demo.")
	for sample in fake_stream():
		frame = analyzer.analyze(sample)
		print(f"t={sample.timestamp:.0f} dx={sample.delta_x:+} dy={sample.delta_y:+}  stop in {idle_delay(frame, DEFAULT_CONFIG):.0f}ms")
		emitter.emit(frame)

	analyzer.reset()
	print("done")


if __name__ == "__main__":
	main()
