"""
SQLAlchemy Implementation of the Repository Contracts
Generic async repository that joins the ambient transaction of its context
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from nexus_kernel.domain.base_aggregate_root import BaseAggregateRoot
from nexus_kernel.domain.repository import Filter
from nexus_kernel.exceptions import ConflictError, InvalidValueError
from nexus_kernel.infrastructure.database.base_model import Base
from nexus_kernel.infrastructure.database.transaction import (
    TransactionContext,
    transaction_from_context,
)
from nexus_kernel.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TAggregate = TypeVar("TAggregate", bound=BaseAggregateRoot)
TModel = TypeVar("TModel", bound=Base)


class SQLAlchemyRepository(Generic[TAggregate, TModel]):
    """
    Generic async SQLAlchemy repository implementation.

    Satisfies both Repository and ReadOnlyRepository. Every call resolves its
    session from the context: inside a transactional boundary it uses the
    ambient transaction and never commits; outside one it opens a short-lived
    session of its own and commits it.

    Type Parameters:
        TAggregate: Domain aggregate type
        TModel: SQLAlchemy ORM model type

    Attributes:
        session_factory: Source of sessions for calls made outside a transaction
        model_class: ORM model class
    """

    model_class: Type[TModel]

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    def _to_entity(self, model: TModel) -> TAggregate:
        """Map an ORM row to its aggregate. Subclasses implement."""
        raise NotImplementedError("Subclass must implement _to_entity")

    def _to_model(self, aggregate: TAggregate) -> TModel:
        """Map an aggregate to an ORM row. Subclasses implement."""
        raise NotImplementedError("Subclass must implement _to_model")

    @asynccontextmanager
    async def _session(self, ctx: TransactionContext) -> AsyncIterator[AsyncSession]:
        ambient = transaction_from_context(ctx, None)
        if ambient is not None:
            yield ambient
            return
        async with self.session_factory() as session:
            yield session
            await session.commit()

    # ── write side ──────────────────────────────────────────────────────────

    async def save(self, ctx: TransactionContext, aggregate: TAggregate) -> None:
        """
        Insert or update the aggregate's row.

        Raises:
            ConflictError: If the row violates a unique or integrity constraint
        """
        name = self.model_class.__name__
        try:
            async with self._session(ctx) as session:
                await session.merge(self._to_model(aggregate))
                await session.flush()
        except IntegrityError as e:
            logger.error(f"Constraint violation saving {name}", entity_id=str(aggregate.id), error=str(e.orig))
            raise ConflictError(
                f"{name} conflicts with an existing record",
                details={"entity_id": str(aggregate.id)},
            ) from e
        except Exception as e:
            logger.error(f"Failed to save {name}", entity_id=str(aggregate.id), error=str(e))
            raise
        logger.debug(f"Saved {name}", entity_id=str(aggregate.id), in_transaction=ctx.in_transaction)

    async def find_by_id(self, ctx: TransactionContext, aggregate_id: UUID) -> TAggregate | None:
        async with self._session(ctx) as session:
            model = await session.get(self.model_class, aggregate_id)
            if model is None:
                logger.debug(f"{self.model_class.__name__} not found", entity_id=str(aggregate_id))
                return None
            return self._to_entity(model)

    async def delete(self, ctx: TransactionContext, aggregate_id: UUID) -> bool:
        async with self._session(ctx) as session:
            result = await session.execute(
                delete(self.model_class).where(self.model_class.id == aggregate_id)
            )
        deleted = (result.rowcount or 0) > 0
        logger.debug(f"Deleted {self.model_class.__name__}", entity_id=str(aggregate_id), deleted=deleted)
        return deleted

    async def exists(self, ctx: TransactionContext, aggregate_id: UUID) -> bool:
        async with self._session(ctx) as session:
            stmt = select(func.count()).select_from(self.model_class).where(self.model_class.id == aggregate_id)
            return (await session.execute(stmt)).scalar_one() > 0

    # ── read side ───────────────────────────────────────────────────────────

    async def find_all(self, ctx: TransactionContext, filter: Filter) -> Sequence[TAggregate]:
        """
        List aggregates matching filter.where, ordered and paginated.

        Raises:
            InvalidValueError: If a where key or the sort field is not a column
        """
        column = self._column(filter.sort)
        stmt = self._apply_where(select(self.model_class), filter)
        stmt = stmt.order_by(column.asc() if filter.order == "asc" else column.desc())
        stmt = stmt.offset(filter.offset).limit(filter.limit)
        async with self._session(ctx) as session:
            models = (await session.execute(stmt)).scalars().all()
            return [self._to_entity(model) for model in models]

    async def count(self, ctx: TransactionContext, filter: Filter) -> int:
        stmt = self._apply_where(select(func.count()).select_from(self.model_class), filter)
        async with self._session(ctx) as session:
            return int((await session.execute(stmt)).scalar_one())

    def _apply_where(self, stmt: Select, filter: Filter) -> Select:
        for key, value in filter.where.items():
            stmt = stmt.where(self._column(key) == value)
        return stmt

    def _column(self, name: str):
        column = self.model_class.__table__.columns.get(name)
        if column is None:
            raise InvalidValueError(
                f"unknown field for {self.model_class.__name__}: {name}",
                details={"field": name},
            )
        return column
