import threading
from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from nexus_kernel.domain import BaseAggregateRoot, BaseEntity, DomainEvent
from nexus_kernel.exceptions import InvalidValueError


class FixedIds:
    def __init__(self, *ids):
        self._ids = list(ids)

    def generate(self) -> UUID:
        return self._ids.pop(0)


class Widget(BaseEntity):
    pass


class Order(BaseAggregateRoot):
    def place(self):
        return self.raise_event("order.placed", {"total": 10})

    def cancel(self):
        return self.raise_event("order.cancelled")


def test_id_is_assigned_lazily_and_stable():
    the_id = uuid4()
    widget = Widget(id_generator=FixedIds(the_id))
    assert widget._id is None
    assert widget.id == the_id
    assert widget.id == the_id


def test_explicit_id_is_kept():
    the_id = uuid4()
    assert Widget(id=the_id).id == the_id


def test_identity_and_timestamps_are_read_only():
    widget = Widget()
    with pytest.raises(AttributeError):
        widget.id = uuid4()
    with pytest.raises(AttributeError):
        widget.created_at = datetime.now(timezone.utc)


def test_updated_at_defaults_to_created_at_and_moves_on_mark():
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    widget = Widget(created_at=created)
    assert widget.updated_at == created
    widget.mark_updated()
    assert widget.updated_at > created
    assert widget.created_at == created


def test_equality_is_by_id_and_type():
    the_id = uuid4()
    assert Widget(id=the_id) == Widget(id=the_id)
    assert Widget(id=the_id) != Widget()
    assert Widget(id=the_id) != Order(id=the_id)
    assert len({Widget(id=the_id), Widget(id=the_id)}) == 1


def test_domain_event_stamps_id_and_time():
    aggregate_id = uuid4()
    event = DomainEvent("order.placed", aggregate_id, {"total": 10})
    assert isinstance(event.event_id, UUID)
    assert event.occurred_at.tzinfo is not None
    assert event.to_dict()["aggregate_id"] == str(aggregate_id)


def test_domain_event_is_immutable_and_equal_by_id():
    aggregate_id = uuid4()
    a = DomainEvent("order.placed", aggregate_id)
    b = DomainEvent("order.placed", aggregate_id)
    assert a != b
    assert a == a
    with pytest.raises(AttributeError):
        a.event_type = "other"


@pytest.mark.parametrize("event_type", ["", "   ", None])
def test_domain_event_requires_type(event_type):
    with pytest.raises(InvalidValueError):
        DomainEvent(event_type, uuid4())


def test_events_are_drained_in_order():
    order = Order()
    placed = order.place()
    cancelled = order.cancel()

    assert order.has_domain_events
    assert order.pending_events == (placed, cancelled)
    assert order.drain_events() == [placed, cancelled]
    assert order.drain_events() == []
    assert not order.has_domain_events


def test_raising_event_bumps_version_and_updated_at():
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    order = Order(created_at=created, version=3)
    order.place()
    assert order.version == 4
    assert order.updated_at > created


def test_events_carry_the_aggregate_id():
    order = Order()
    event = order.place()
    assert event.aggregate_id == order.id


def test_foreign_event_is_rejected():
    order = Order()
    with pytest.raises(InvalidValueError):
        order.record_event(DomainEvent("order.placed", uuid4()))
    assert not order.has_domain_events


def test_pending_events_snapshot_does_not_drain():
    order = Order()
    order.place()
    assert len(order.pending_events) == 1
    assert len(order.drain_events()) == 1


def test_events_recorded_from_threads_are_drained_once():
    order = Order(id=uuid4())
    drained = []

    def place_many():
        for _ in range(200):
            order.place()

    def drain_while_recording():
        for _ in range(200):
            if order.has_domain_events:
                drained.extend(order.drain_events())

    workers = [threading.Thread(target=place_many) for _ in range(4)]
    workers.append(threading.Thread(target=drain_while_recording))
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    drained.extend(order.drain_events())

    assert len(drained) == 800
    assert len({id(e) for e in drained}) == 800
    assert not order.has_domain_events
