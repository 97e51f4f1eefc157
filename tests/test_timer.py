from datetime import timedelta

import pytest

from studytimer.timer import Timer


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timer(clock):
    return Timer(clock=clock)


def test_new_timer_is_idle(timer):
    assert timer.is_running is False
    assert timer.elapsed() == timedelta(0)
    assert timer.elapsed_minutes() == 0.0


def test_running_time_counts(timer, clock):
    timer.start()
    clock.now += 30
    assert timer.elapsed() == timedelta(seconds=30)


def test_pause_freezes_elapsed(timer, clock):
    timer.start()
    clock.now += 45
    timer.pause()
    clock.now += 100
    assert timer.is_running is False
    assert timer.elapsed() == timedelta(seconds=45)


def test_resume_accumulates(timer, clock):
    timer.start()
    clock.now += 20
    timer.pause()
    timer.start()
    clock.now += 40
    assert timer.elapsed() == timedelta(seconds=20) + timedelta(seconds=40)


def test_start_twice_keeps_original_start(timer, clock):
    timer.start()
    clock.now += 10
    timer.start()
    clock.now += 10
    assert timer.elapsed() == timedelta(seconds=20)


def test_pause_when_idle_does_nothing(timer):
    timer.pause()
    assert timer.elapsed() == timedelta(0)
    assert timer.is_running is False


def test_add_time_goes_to_offset(timer):
    timer.add_time(1.5)
    assert timer.time_offset == timedelta(minutes=1.5)
    assert timer.elapsed_minutes() == pytest.approx(1.5)


def test_add_time_negative_adds_nothing(timer):
    timer.add_time(-5.0)
    assert timer.time_offset == timedelta(0)


def test_reset_keeps_offset(timer, clock):
    timer.add_time(30.0)
    timer.start()
    clock.now += 60
    timer.reset()
    assert timer.is_running is False
    assert timer.accumulated_time == timedelta(0)
    assert timer.elapsed() == timedelta(minutes=30)


def test_elapsed_minutes_matches_elapsed(timer, clock):
    timer.start()
    clock.now += 90
    timer.add_time(60.0)
    assert timer.elapsed_minutes() == pytest.approx(timer.elapsed().total_seconds() / 60)