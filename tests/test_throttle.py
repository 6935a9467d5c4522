import threading

import pytest

from resgate.throttle import Throttle


def test_runs_immediately_under_limit():
    t = Throttle(2)
    calls = []
    t.add(lambda: calls.append("a"))
    t.add(lambda: calls.append("b"))
    assert calls == ["a", "b"]
    assert t.running == 2


def test_queues_over_limit_and_runs_on_done():
    t = Throttle(1)
    calls = []
    ran = threading.Event()

    def queued():
        calls.append("b")
        ran.set()

    t.add(lambda: calls.append("a"))
    t.add(queued)
    assert calls == ["a"]
    assert t.pending == 1

    t.done()
    assert ran.wait(2)
    assert calls == ["a", "b"]
    assert t.pending == 0
    assert t.running == 1


def test_queued_callbacks_keep_order():
    t = Throttle(1)
    calls = []
    events = [threading.Event() for _ in range(3)]

    def make(i):
        def cb():
            calls.append(i)
            events[i].set()

        return cb

    for i in range(3):
        t.add(make(i))
    assert calls == [0]
    assert t.running == 1
    assert t.pending == 2

    t.done()
    assert events[1].wait(2)
    assert t.pending == 1
    assert t.running == 1

    t.done()
    assert events[2].wait(2)
    assert t.pending == 0
    assert t.running == 1
    assert calls == [0, 1, 2]

    t.done()
    assert t.running == 0


def test_done_releases_slot():
    t = Throttle(1)
    t.add(lambda: None)
    t.done()
    assert t.running == 0
    calls = []
    t.add(lambda: calls.append(1))
    assert calls == [1]


def test_done_without_running_raises():
    t = Throttle(3)
    with pytest.raises(RuntimeError, match="negative running counter"):
        t.done()