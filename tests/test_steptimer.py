import pytest

from jumpin.steptimer import (
    TICKS_PER_SECOND,
    StepTimer,
    seconds_to_ticks,
    ticks_to_seconds,
)


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def make_timer(frequency=1000):
    clock = FakeClock()
    return clock, StepTimer(clock=clock, frequency=frequency)


def test_conversion_round_trip():
    assert ticks_to_seconds(TICKS_PER_SECOND) == 1.0
    assert seconds_to_ticks(ticks_to_seconds(123456)) == 123456


def test_seconds_to_ticks_truncates():
    assert seconds_to_ticks(1.5 / TICKS_PER_SECOND) == 1


def test_variable_step_reports_elapsed_time():
    clock, timer = make_timer()
    calls = []
    clock.now += 16
    timer.tick(lambda: calls.append(timer.elapsed_seconds))
    assert len(calls) == 1
    assert calls[0] == pytest.approx(0.016)
    assert timer.frame_count == 1
    assert timer.total_ticks == timer.elapsed_ticks == seconds_to_ticks(0.016)


def test_large_delta_is_clamped_to_a_tenth_of_a_second():
    clock, timer = make_timer()
    clock.now += 5000
    timer.tick(lambda: None)
    assert timer.elapsed_ticks == TICKS_PER_SECOND // 10


def test_fixed_step_runs_multiple_updates():
    clock, timer = make_timer(frequency=TICKS_PER_SECOND)
    timer.fixed_time_step = True
    calls = []
    clock.now += 3 * timer.target_elapsed_ticks
    timer.tick(lambda: calls.append(timer.elapsed_ticks))
    assert calls == [timer.target_elapsed_ticks] * 3
    assert timer.total_ticks == 3 * timer.target_elapsed_ticks


def test_fixed_step_snaps_small_deviation():
    clock, timer = make_timer(frequency=TICKS_PER_SECOND)
    timer.fixed_time_step = True
    calls = []
    clock.now += timer.target_elapsed_ticks - 10
    timer.tick(lambda: calls.append(1))
    assert len(calls) == 1
    assert timer.total_ticks == timer.target_elapsed_ticks


def test_fixed_step_without_enough_time_skips_update():
    clock, timer = make_timer(frequency=TICKS_PER_SECOND)
    timer.fixed_time_step = True
    calls = []
    clock.now += timer.target_elapsed_ticks // 2
    timer.tick(lambda: calls.append(1))
    assert calls == []
    assert timer.frame_count == 0


def test_frames_per_second_after_one_second():
    clock, timer = make_timer()
    frames = 100
    for _ in range(frames):
        clock.now += 1000 // frames
        timer.tick(lambda: None)
    assert timer.frames_per_second == frames


def test_reset_elapsed_time_discards_pending_time():
    clock, timer = make_timer()
    clock.now += 50
    timer.reset_elapsed_time()
    clock.now += 10
    timer.tick(lambda: None)
    assert timer.elapsed_ticks == seconds_to_ticks(0.010)


def test_target_seconds_setter_round_trip():
    _, timer = make_timer()
    timer.target_elapsed_seconds = 0.5
    assert timer.target_elapsed_ticks == seconds_to_ticks(0.5)
    assert timer.target_elapsed_seconds == pytest.approx(0.5)


def test_invalid_target_raises():
    _, timer = make_timer()
    with pytest.raises(ValueError):
        timer.target_elapsed_ticks = 0
    assert timer.target_elapsed_ticks == TICKS_PER_SECOND // 60


def test_invalid_frequency_raises():
    with pytest.raises(ValueError):
        StepTimer(clock=FakeClock(), frequency=0)