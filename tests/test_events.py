from dataclasses import dataclass

from wfengine.events import EventDispatcher


@dataclass
class Hit:
    damage: int = 0


@dataclass
class Heal:
    amount: int = 0


class SubHit(Hit):
    pass


def test_dispatch_reaches_listeners_in_order():
    d = EventDispatcher()
    seen = []
    d.on(Hit, lambda e: seen.append(("a", e.damage)))
    d.on(Hit, lambda e: seen.append(("b", e.damage)))
    d.dispatch(Hit(7))
    assert seen == [("a", 7), ("b", 7)]


def test_dispatch_only_matches_exact_type():
    d = EventDispatcher()
    seen = []
    d.on(Hit, seen.append)
    d.dispatch(Heal(3))
    d.dispatch(SubHit(1))
    assert seen == []


def test_dispatch_without_listeners_leaves_event():
    d = EventDispatcher()
    event = Hit(2)
    d.dispatch(event)
    assert event == Hit(2)


def test_listener_can_mutate_event():
    d = EventDispatcher()

    def double(e):
        e.damage *= 2

    d.on(Hit, double)
    event = Hit(4)
    d.dispatch(event)
    assert event.damage == 8


def test_trigger_builds_default_event():
    d = EventDispatcher()
    seen = []
    d.on(Heal, seen.append)
    returned = d.trigger(Heal)
    assert seen == [Heal(0)]
    assert returned is seen[0]


def test_on_notify_ignores_payload():
    d = EventDispatcher()
    count = []
    d.on_notify(Hit, lambda: count.append(1))
    d.dispatch(Hit(5))
    d.trigger(Hit)
    assert count == [1, 1]