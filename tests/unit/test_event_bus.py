from uuid import uuid4

from nexus_kernel.domain import DomainEvent
from nexus_kernel.infrastructure.messaging import ALL_EVENTS, EventBus


def make_event(event_type="user.activated"):
    return DomainEvent(event_type, uuid4())


async def test_handlers_receive_their_event_type_in_order():
    bus = EventBus()
    received = []

    async def first(event):
        received.append(("first", event.event_type))

    async def second(event):
        received.append(("second", event.event_type))

    async def other(event):
        received.append(("other", event.event_type))

    bus.subscribe("user.activated", first)
    bus.subscribe("user.activated", second)
    bus.subscribe("user.registered", other)

    await bus.publish(make_event())

    assert received == [("first", "user.activated"), ("second", "user.activated")]


async def test_catch_all_handlers_see_every_event():
    bus = EventBus()
    seen = []

    async def audit(event):
        seen.append(event.event_type)

    bus.subscribe(ALL_EVENTS, audit)
    await bus.publish_many([make_event("a.one"), make_event("b.two")])

    assert seen == ["a.one", "b.two"]


async def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    seen = []

    async def broken(event):
        raise RuntimeError("handler down")

    async def healthy(event):
        seen.append(event.event_id)

    bus.subscribe("user.activated", broken)
    bus.subscribe("user.activated", healthy)

    event = make_event()
    await bus.publish(event)

    assert seen == [event.event_id]


async def test_unsubscribe_and_clear():
    bus = EventBus()
    seen = []

    async def handler(event):
        seen.append(event)

    bus.subscribe("user.activated", handler)
    bus.unsubscribe("user.activated", handler)
    await bus.publish(make_event())

    bus.subscribe("user.activated", handler)
    bus.clear_handlers()
    await bus.publish(make_event())

    assert seen == []
