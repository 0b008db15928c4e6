"""
Repository Contracts (Protocol)
Interfaces aggregates and the transactional boundary are written against
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, Sequence, TypeVar
from uuid import UUID

from nexus_kernel.domain.base_aggregate_root import BaseAggregateRoot
from nexus_kernel.domain.context import TransactionContext
from nexus_kernel.exceptions import InvalidValueError

TAggregate = TypeVar("TAggregate", bound=BaseAggregateRoot)
T = TypeVar("T", covariant=True)

SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class Filter:
    """
    Generic read filter.

    Attributes:
        limit: Maximum number of records to return
        offset: Number of records to skip
        sort: Field name to order by
        order: "asc" or "desc"
        where: Equality constraints keyed by field name
    """

    limit: int = 10
    offset: int = 0
    sort: str = "created_at"
    order: SortOrder = "desc"
    where: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise InvalidValueError("limit must be >= 1")
        if self.offset < 0:
            raise InvalidValueError("offset must be >= 0")
        if self.order not in ("asc", "desc"):
            raise InvalidValueError("order must be 'asc' or 'desc'")


class Repository(Protocol[TAggregate]):
    """
    Write-side repository for one aggregate type.

    Every method receives the caller's TransactionContext; implementations
    resolve their session with transaction_from_context() so calls made inside
    a transactional boundary join its transaction automatically.
    """

    async def save(self, ctx: TransactionContext, aggregate: TAggregate) -> None:
        """Insert or update the aggregate."""
        ...

    async def find_by_id(self, ctx: TransactionContext, aggregate_id: UUID) -> TAggregate | None:
        """Return the aggregate, or None if it does not exist."""
        ...

    async def delete(self, ctx: TransactionContext, aggregate_id: UUID) -> bool:
        """Delete by id; True if a row was removed."""
        ...

    async def exists(self, ctx: TransactionContext, aggregate_id: UUID) -> bool:
        ...


class ReadOnlyRepository(Protocol[T]):
    """Read-side repository supporting filtered listing and counting."""

    async def find_by_id(self, ctx: TransactionContext, entity_id: UUID) -> T | None:
        ...

    async def find_all(self, ctx: TransactionContext, filter: Filter) -> Sequence[T]:
        """
        List records matching filter.where, ordered and paginated.

        Args:
            ctx: Call context
            filter: Pagination, sort and equality constraints

        Returns:
            Matching records (possibly empty)
        """
        ...

    async def count(self, ctx: TransactionContext, filter: Filter) -> int:
        """Count records matching filter.where (pagination ignored)."""
        ...

    async def exists(self, ctx: TransactionContext, entity_id: UUID) -> bool:
        ...
