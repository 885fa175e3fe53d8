"""Tests for the synchronous event bus."""

from aquarium.events.domain_events import FishAddedEvent, FoodDroppedEvent
from aquarium.events.event_bus import EventBus


def test_emit_routes_by_class_in_registration_order():
    bus = EventBus()
    calls = []
    bus.subscribe(FoodDroppedEvent, lambda e: calls.append(("first", e.x)))
    bus.subscribe(FoodDroppedEvent, lambda e: calls.append(("second", e.x)))
    bus.subscribe(FishAddedEvent, lambda e: calls.append(("fish", e.species_name)))

    delivered = bus.emit(FoodDroppedEvent(x=12, y=34, frame=0))

    assert delivered == 2
    assert calls == [("first", 12), ("second", 12)]


def test_emit_without_listeners_reaches_nobody():
    bus = EventBus()
    assert bus.emit(FoodDroppedEvent(x=0, y=0, frame=0)) == 0
    assert bus.handlers_for(FoodDroppedEvent) == ()


def test_detach_callable_and_unsubscribe():
    bus = EventBus()
    seen = []
    detach = bus.subscribe(FishAddedEvent, seen.append)
    assert bus.handlers_for(FishAddedEvent) == (seen.append,)

    assert detach() is True
    assert bus.unsubscribe(FishAddedEvent, seen.append) is False

    bus.emit(FishAddedEvent("Goldfish", 1, 2, 3))
    assert seen == []


def test_subscribe_all():
    bus = EventBus()
    names = []
    bus.subscribe_all((FoodDroppedEvent, FishAddedEvent), lambda e: names.append(e.name))

    bus.emit(FishAddedEvent("Angelfish", 0, 0, 0))
    bus.emit(FoodDroppedEvent(0, 0, 0))

    assert names == ["splash", "feed"]


def test_handler_may_detach_during_dispatch():
    bus = EventBus()
    seen = []

    def once(event):
        seen.append(event)
        bus.unsubscribe(FoodDroppedEvent, once)

    bus.subscribe(FoodDroppedEvent, once)
    bus.subscribe(FoodDroppedEvent, seen.append)
    bus.emit(FoodDroppedEvent(1, 1, 0))
    bus.emit(FoodDroppedEvent(2, 2, 0))

    assert [e.x for e in seen] == [1, 1, 2]


def test_clear():
    bus = EventBus()
    bus.subscribe(FoodDroppedEvent, print)
    bus.clear()
    assert bus.handlers_for(FoodDroppedEvent) == ()


def test_notification_names():
    assert FoodDroppedEvent.name == "feed"
    assert FishAddedEvent.name == "splash"
