import pytest

from core.recall.countdown import Countdown


@pytest.mark.unit
def test_armed_countdown():
    countdown = Countdown.arm(token=1, duration=30, anchor=100.0)
    assert countdown.remaining == 30
    assert countdown.deadline == 130.0
    assert not countdown.expired


@pytest.mark.unit
def test_due_ticks_follow_wall_clock():
    countdown = Countdown.arm(token=1, duration=30, anchor=100.0)
    assert countdown.due_ticks(99.0) == 0
    assert countdown.due_ticks(100.9) == 0
    assert countdown.due_ticks(103.2) == 3
    countdown.consume_tick()
    assert countdown.due_ticks(103.2) == 2


@pytest.mark.unit
def test_due_ticks_capped_at_duration():
    countdown = Countdown.arm(token=1, duration=5, anchor=0.0)
    assert countdown.due_ticks(1000.0) == 5


@pytest.mark.unit
def test_expires_after_duration_ticks():
    countdown = Countdown.arm(token=1, duration=2, anchor=0.0)
    countdown.consume_tick()
    countdown.consume_tick()
    assert countdown.expired
    assert countdown.remaining == 0


@pytest.mark.unit
def test_seconds_until_next_tick():
    countdown = Countdown.arm(token=1, duration=5, anchor=10.0)
    assert countdown.seconds_until_next_tick(10.4) == pytest.approx(0.6)
    countdown.consume_tick()
    assert countdown.seconds_until_next_tick(11.5) == pytest.approx(0.5)
    assert countdown.seconds_until_next_tick(20.0) == 0.0
