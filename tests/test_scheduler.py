import pytest

from core.scheduler import Scheduler


def test_interval_fires_at_fixed_rate():
    sched = Scheduler()
    fired = []
    sched.set_interval(lambda: fired.append(sched.now_ms), 100)
    sched.advance(99)
    assert fired == []
    sched.advance(1)
    assert fired == [100]
    sched.advance(250)
    assert fired == [100, 200, 300]
    assert sched.now_ms == 350


def test_fractional_period_does_not_drift():
    sched = Scheduler()
    count = []
    sched.set_interval(lambda: count.append(1), 1000 / 30)
    for _ in range(60):
        sched.advance(1000 / 60)
    sched.advance(1)
    assert len(count) == 30


def test_timers_fire_in_due_order():
    sched = Scheduler()
    order = []
    sched.set_interval(lambda: order.append("slow"), 30)
    sched.set_interval(lambda: order.append("fast"), 20)
    sched.advance(60)
    assert order == ["fast", "slow", "fast", "slow", "fast"]


def test_cancel_is_idempotent():
    sched = Scheduler()
    fired = []
    handle = sched.set_interval(lambda: fired.append(1), 10)
    handle.cancel()
    handle.cancel()
    sched.advance(100)
    assert fired == []
    assert not handle.active
    assert sched.active_count() == 0


def test_callback_can_cancel_a_timer_due_in_the_same_step():
    sched = Scheduler()
    fired = []
    victims = []

    def killer():
        fired.append("killer")
        victims[0].cancel()

    sched.set_interval(killer, 10)
    victims.append(sched.set_interval(lambda: fired.append("victim"), 10))
    sched.advance(10)
    assert fired == ["killer"]
    assert sched.active_count() == 1


def test_callback_can_cancel_itself():
    sched = Scheduler()
    fired = []
    handles = []

    def once():
        fired.append(sched.now_ms)
        handles[0].cancel()

    handles.append(sched.set_interval(once, 10))
    sched.advance(100)
    assert fired == [10]


@pytest.mark.parametrize("period", [0, -5])
def test_non_positive_period_rejected(period):
    with pytest.raises(ValueError):
        Scheduler().set_interval(lambda: None, period)


def test_cannot_go_backwards():
    with pytest.raises(ValueError):
        Scheduler().advance(-1)
