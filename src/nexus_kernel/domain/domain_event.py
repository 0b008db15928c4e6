"""
Domain Event Record
Immutable fact raised by an aggregate
"""
from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from nexus_kernel.domain.base_entity import utcnow
from nexus_kernel.domain.identity import IdentityGenerator, get_identity_service
from nexus_kernel.exceptions import InvalidValueError


@dataclass(frozen=True, eq=False)
class DomainEvent:
    """
    Record of something that happened to an aggregate.

    event_id and occurred_at are stamped by the constructor and cannot be
    supplied by callers. Two events are equal only if they share an event_id.

    Attributes:
        event_type: Stable string tag, e.g. "user.activated"
        aggregate_id: Identity of the raising aggregate
        payload: Opaque event data
        event_id: Unique identifier for this event occurrence
        occurred_at: UTC timestamp when the event was raised
    """

    event_type: str
    aggregate_id: UUID
    payload: Any = None
    id_generator: InitVar[IdentityGenerator | None] = None
    event_id: UUID = field(init=False)
    occurred_at: datetime = field(init=False)

    def __post_init__(self, id_generator: IdentityGenerator | None) -> None:
        if not isinstance(self.event_type, str) or not self.event_type.strip():
            raise InvalidValueError("event_type must be a non-empty string")
        generator = id_generator or get_identity_service()
        object.__setattr__(self, "event_id", generator.generate())
        object.__setattr__(self, "occurred_at", utcnow())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainEvent):
            return NotImplemented
        return self.event_id == other.event_id

    def __hash__(self) -> int:
        return hash(self.event_id)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of event
        """
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "aggregate_id": str(self.aggregate_id),
            "occurred_at": self.occurred_at.isoformat(),
            "payload": self.payload,
        }
