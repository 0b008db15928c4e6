"""
Base Entity Contract for Domain Layer
Provides lazily assigned UUID identity, equality, and audit fields
"""
from __future__ import annotations

from abc import ABC
from datetime import datetime, timezone
from uuid import UUID

from nexus_kernel.domain.identity import IdentityGenerator, get_identity_service


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseEntity(ABC):
    """
    Abstract base class for all domain entities.

    Entities are defined by their identity (id), not their attributes.
    Two entities are equal if they have the same id, regardless of other attributes.

    Identity and audit timestamps are owned by the entity: they are set through
    __init__ only and exposed read-only. A missing id is assigned from the
    identity generator on first access and stays fixed afterwards.

    Attributes:
        id: Unique identifier (UUID)
        created_at: Timestamp of creation (set once)
        updated_at: Timestamp of last mutation
    """

    def __init__(
        self,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        id_generator: IdentityGenerator | None = None,
    ) -> None:
        """
        Initialize entity with identity and audit fields.

        Args:
            id: Entity UUID (assigned lazily if None)
            created_at: Creation timestamp (now if None)
            updated_at: Update timestamp (created_at if None)
            id_generator: Identity source (process default if None)
        """
        self._id: UUID | None = id
        self._id_generator = id_generator
        self._created_at: datetime = created_at or utcnow()
        self._updated_at: datetime = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        if self._id is None:
            self._id = self.id_generator.generate()
        return self._id

    @property
    def id_generator(self) -> IdentityGenerator:
        return self._id_generator or get_identity_service()

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same id and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on id for use in sets/dicts."""
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"

    def mark_updated(self) -> None:
        """Refresh updated_at; every mutating behavior method calls this."""
        self._updated_at = utcnow()
