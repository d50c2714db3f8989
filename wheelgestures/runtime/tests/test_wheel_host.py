import threading

import pytest

from wheelgestures.core.types import WheelSample
from wheelgestures.core.config import DEFAULT_CONFIG, WheelConfig
from wheelgestures.runtime.idle_timer import IdleTimer
from wheelgestures.runtime.wheel_host import WheelHost, should_prevent


class FakeTimer:
    def __init__(self):
        self.delay = None
        self.callback = None
        self.cancelled = False

    def rearm(self, delay_ms, callback):
        self.delay = delay_ms
        self.callback = callback

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.callback()


class FakePassthrough:
    def __init__(self):
        self.scrolls = []

    def scroll(self, hwheel, wheel):
        self.scrolls.append((hwheel, wheel))


def make_host(config=DEFAULT_CONFIG, passthrough=None):
    timer = FakeTimer()
    host = WheelHost(config=config, passthrough=passthrough, timer=timer)
    names = []
    host.emitter.subscribe(lambda ev: names.append(ev.name))
    return host, timer, names


def sample(t, dy, dx=0, raw=None):
    return WheelSample(delta_x=dx, delta_y=dy, timestamp=t, raw=raw)


def test_start_fires_once_after_first_gesture_events():
    host, timer, names = make_host()

    host.on_wheel(sample(16, 2))
    assert names == ["wheelscroll", "wheelscrollstart", "wheelstart"]
    assert host.active

    host.on_wheel(sample(32, 4))
    assert names[3:] == ["wheelscroll"]


def test_timer_is_rearmed_with_dynamic_delay():
    host, timer, _ = make_host()

    host.on_wheel(sample(16, 2))
    assert timer.delay == pytest.approx(250)

    host.on_wheel(sample(1016, 2))  # same delta, long gap: 0.002 px/ms, scroll carried over
    assert timer.delay == pytest.approx(250 + 0.98 * 250)


def test_idle_emits_stop_and_forgets_history():
    host, timer, names = make_host()
    host.on_wheel(sample(16, 2))
    host.on_wheel(sample(32, 4))

    timer.fire()
    assert names[-1] == "wheelstop"
    assert not host.active
    assert host.analyzer.history == ()

    # next gesture starts over
    host.on_wheel(sample(2000, 4))
    assert names[-2:] == ["wheelscrollstart", "wheelstart"]


def test_stale_timer_does_not_stop_new_gesture():
    host, timer, names = make_host()
    host.on_wheel(sample(16, 2))
    stale = timer.callback

    host.on_wheel(sample(32, 4))
    stale()
    assert "wheelstop" not in names
    assert host.active


def test_passthrough_only_when_not_prevented():
    pt = FakePassthrough()
    host, _, _ = make_host(WheelConfig(prevent_vertical_default=False, prevent_horizontal_default=False), pt)
    host.on_wheel(sample(16, 100, raw=(0, -1)))
    assert pt.scrolls == [(0, -1)]

    pt = FakePassthrough()
    host, _, _ = make_host(DEFAULT_CONFIG, pt)
    host.on_wheel(sample(16, 100, raw=(0, -1)))
    assert pt.scrolls == []


def test_should_prevent_follows_dominant_axis():
    cfg = WheelConfig(prevent_vertical_default=True, prevent_horizontal_default=False)
    assert should_prevent(sample(16, 100), cfg)
    assert not should_prevent(sample(16, 0, dx=100), cfg)

    cfg = WheelConfig(prevent_vertical_default=False, prevent_horizontal_default=True)
    assert not should_prevent(sample(16, 100), cfg)
    assert should_prevent(sample(16, 0, dx=100), cfg)

    assert should_prevent(sample(16, 0, dx=100), DEFAULT_CONFIG)


def test_swipe_toggle_reaches_analyzer():
    host, _, names = make_host()
    host.disable_swipe()
    assert not host.is_swipeable()
    assert not host.analyzer.is_swipeable()

    host.on_wheel(sample(16, 5))
    host.on_wheel(sample(32, 40))
    assert "wheelswipe" not in names

    host.set_swipeable(True)
    assert host.is_swipeable()


def test_close_cancels_timer():
    host, timer, _ = make_host()
    host.on_wheel(sample(16, 2))
    host.close()
    assert timer.cancelled


def test_idle_timer_fires_and_cancels():
    fired = threading.Event()
    t = IdleTimer()
    t.rearm(10, fired.set)
    assert fired.wait(2.0)

    fired.clear()
    t.rearm(200, fired.set)
    assert t.active
    t.cancel()
    assert not t.active
    assert not fired.wait(0.4)


def test_failing_listener_still_arms_the_gesture():
    host, timer, _ = make_host()

    def boom(ev):
        raise RuntimeError(ev.name)

    host.emitter.subscribe(boom)
    with pytest.raises(RuntimeError):
        host.on_wheel(sample(16, 2))

    assert host.active
    assert timer.callback is not None
    assert len(host.analyzer.history) == 1


def test_failing_stop_listener_still_clears_gesture():
    host, timer, _ = make_host()
    host.on_wheel(sample(16, 2))

    def boom(ev):
        if ev.name == "wheelstop":
            raise RuntimeError(ev.name)

    host.emitter.subscribe(boom)
    with pytest.raises(RuntimeError):
        timer.fire()

    assert not host.active
    assert host.analyzer.history == ()
