"""
Aggregate Root Base Class
Manages domain events and acts as consistency boundary
"""
from __future__ import annotations

import threading
from typing import Any
from uuid import UUID

from nexus_kernel.domain.base_entity import BaseEntity
from nexus_kernel.domain.domain_event import DomainEvent
from nexus_kernel.exceptions import InvalidValueError


class BaseAggregateRoot(BaseEntity):
    """
    Base class for aggregate roots.

    Aggregate roots are entities that serve as the entry point to an aggregate.
    They keep an ordered buffer of domain events raised during their in-memory
    lifetime. The buffer is drained by whoever persists the aggregate, never by
    the aggregate itself. Events of an aggregate discarded before draining are
    lost.

    Attributes:
        _domain_events: FIFO list of undrained domain events
        version: Number of events recorded since construction
    """

    def __init__(self, id: UUID | None = None, version: int = 0, **kwargs: Any) -> None:
        """
        Initialize aggregate root.

        Args:
            id: Aggregate UUID
            version: Starting version (when rehydrating from storage)
            **kwargs: Additional arguments for BaseEntity
        """
        super().__init__(id=id, **kwargs)
        self._domain_events: list[DomainEvent] = []
        self._events_lock = threading.Lock()
        self.version = version

    def record_event(self, event: DomainEvent) -> None:
        """
        Append a domain event to the aggregate's buffer.

        Raises:
            InvalidValueError: If the event belongs to another aggregate
        """
        if event.aggregate_id != self.id:
            raise InvalidValueError(
                "event aggregate_id does not match aggregate",
                details={"event_id": str(event.event_id)},
            )
        with self._events_lock:
            self._domain_events.append(event)
            self.version += 1

    def raise_event(self, event_type: str, payload: Any = None) -> DomainEvent:
        """Build a DomainEvent for this aggregate, record it and mark the aggregate updated."""
        event = DomainEvent(event_type, self.id, payload, id_generator=self.id_generator)
        self.record_event(event)
        self.mark_updated()
        return event

    def drain_events(self) -> list[DomainEvent]:
        """
        Return and clear the buffered events in one step.

        A second drain, by this or another consumer, only sees events
        recorded after the first one.
        """
        with self._events_lock:
            events, self._domain_events = self._domain_events, []
        return events

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Snapshot of the buffer without draining it."""
        with self._events_lock:
            return tuple(self._domain_events)

    @property
    def has_domain_events(self) -> bool:
        """Check if aggregate has undrained events."""
        with self._events_lock:
            return len(self._domain_events) > 0
