import pytest

from wfengine.timer import CustomTimer, Timer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def step(timer, clock, dt):
    clock.now += dt
    timer.tick()


def test_first_tick_has_zero_delta_and_one_fixed_step(clock):
    timer = Timer(clock)
    timer.tick()
    assert timer.delta_time == 0.0
    assert timer.fps == 0.0
    assert timer.is_fixed_update_ready() is True
    assert timer.is_fixed_update_ready() is False


def test_delta_time_follows_clock(clock):
    timer = Timer(clock)
    timer.tick()
    step(timer, clock, 0.5)
    assert timer.delta_time == pytest.approx(0.5)
    assert timer.frame_count == 2
    assert timer.fps > 0.0


def test_fixed_steps_accumulate(clock):
    timer = Timer(clock)
    timer.fixed_timestep = 0.1
    timer.tick()
    assert timer.is_fixed_update_ready()
    step(timer, clock, 0.35)
    ready = 0
    while timer.is_fixed_update_ready():
        ready += 1
    assert ready == 3


def test_default_fixed_timestep():
    assert Timer().fixed_timestep == pytest.approx(1.0 / 60.0)


def test_timer_fires_once_and_is_removed(clock):
    timer = Timer(clock)
    fired = []
    timer.create_timer(1.0, fired.append)
    timer.tick()
    step(timer, clock, 0.5)
    assert fired == []
    step(timer, clock, 0.6)
    assert len(fired) == 1
    assert fired[0].expired
    assert not fired[0].running
    assert timer.active_timers == ()


def test_pending_timer_not_updated_on_creation_tick(clock):
    timer = Timer(clock)
    timer.tick()
    fired = []
    timer.create_timer(0.1, fired.append)
    step(timer, clock, 5.0)
    assert fired == []
    step(timer, clock, 5.0)
    assert len(fired) == 1


def test_limited_renewals(clock):
    timer = Timer(clock)
    fired = []
    handle = timer.create_timer(1.0, fired.append, auto_renew=True, renew_count=2)
    timer.tick()
    for _ in range(6):
        step(timer, clock, 1.0)
    assert len(fired) == 3
    assert handle.renewals == 2
    assert handle.expired


def test_unlimited_renewals(clock):
    timer = Timer(clock)
    fired = []
    handle = timer.create_timer(1.0, fired.append, auto_renew=True)
    timer.tick()
    for _ in range(5):
        step(timer, clock, 1.0)
    assert len(fired) == 5
    assert not handle.expired
    assert handle in timer.active_timers


def test_pause_timers_stops_progress(clock):
    timer = Timer(clock)
    fired = []
    timer.create_timer(1.0, fired.append)
    timer.tick()
    timer.pause_timers()
    step(timer, clock, 5.0)
    assert fired == []
    timer.pause_timers(False)
    step(timer, clock, 1.0)
    assert len(fired) == 1


def test_individual_pause_and_resume(clock):
    timer = Timer(clock)
    fired = []
    handle = timer.create_timer(1.0, fired.append)
    timer.tick()
    handle.pause()
    step(timer, clock, 5.0)
    assert fired == []
    assert handle.remaining == pytest.approx(1.0)
    handle.resume()
    step(timer, clock, 1.0)
    assert len(fired) == 1


def test_clear_timers_skips_callbacks(clock):
    timer = Timer(clock)
    fired = []
    timer.create_timer(1.0, fired.append)
    timer.tick()
    timer.clear_timers()
    step(timer, clock, 2.0)
    assert fired == []
    assert timer.active_timers == ()


def test_expired_timer_is_dropped_without_callback(clock):
    timer = Timer(clock)
    fired = []
    handle = timer.create_timer(10.0, fired.append)
    timer.tick()
    assert handle in timer.active_timers
    handle.expire()
    step(timer, clock, 0.1)
    assert fired == []
    assert handle not in timer.active_timers


def test_custom_timer_renewals_initialised():
    t = CustomTimer(2.0, lambda _: None, auto_renew=True, renew_count=4)
    assert t.remaining == 2.0
    assert t.remaining_renewals == 4
    unlimited = CustomTimer(2.0, lambda _: None)
    assert unlimited.remaining_renewals == 0