"""
Unit of Work
Single-use transaction over one async SQLAlchemy session
"""
from __future__ import annotations

import enum
from typing import Any, Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession

from nexus_kernel.exceptions import TransactionStateError
from nexus_kernel.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class TransactionState(str, enum.Enum):
    IDLE = "idle"
    ACTIVE = "active"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


@runtime_checkable
class IUnitOfWork(Protocol):
    """
    Unit of Work interface for transaction management.

    Usage:
        async with uow:
            await repository.save(ctx, aggregate)
            await uow.commit()  # Commits all changes atomically
    """

    state: TransactionState

    async def __aenter__(self) -> IUnitOfWork:
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...


class SQLAlchemyUnitOfWork:
    """
    SQLAlchemy-based Unit of Work implementation.

    State machine: IDLE -> ACTIVE on enter; ACTIVE -> COMMITTED on commit;
    ACTIVE -> ROLLED_BACK on rollback, on a failed commit, or on leaving the
    context without committing. Terminal states are final; an instance
    cannot be reused.

    Attributes:
        session: Async SQLAlchemy session carrying the transaction
        state: Current TransactionState
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.state = TransactionState.IDLE

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        if self.state is not TransactionState.IDLE:
            raise TransactionStateError(
                f"unit of work is single-use (state={self.state.value})",
            )
        if not self.session.in_transaction():
            await self.session.begin()
        self.state = TransactionState.ACTIVE
        logger.debug("UnitOfWork transaction started")
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """
        Roll back unless committed.

        A failing rollback is logged and the original exception, if any, is
        what propagates.
        """
        if self.state is not TransactionState.ACTIVE:
            return
        if exc_type is None:
            logger.warning("UnitOfWork left without commit, rolling back")
            await self.rollback()
            return
        try:
            await self.rollback()
        except Exception:
            logger.exception("UnitOfWork rollback failed", original_error=repr(exc_val))
        else:
            logger.info("UnitOfWork rolled back due to exception", error=repr(exc_val))

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            TransactionStateError: If the unit of work is not active
            Exception: Whatever the engine raised; the transaction is rolled back first
        """
        self._require_active("commit")
        try:
            await self.session.commit()
        except BaseException as e:
            logger.error("UnitOfWork commit failed", error=repr(e))
            try:
                await self.rollback()
            except Exception:
                logger.exception("UnitOfWork rollback after failed commit failed")
            raise
        self.state = TransactionState.COMMITTED
        logger.debug("UnitOfWork transaction committed")

    async def rollback(self) -> None:
        """Discard all changes made within this unit of work."""
        self._require_active("rollback")
        self.state = TransactionState.ROLLED_BACK
        await self.session.rollback()
        logger.debug("UnitOfWork transaction rolled back")

    def _require_active(self, action: str) -> None:
        if self.state is not TransactionState.ACTIVE:
            raise TransactionStateError(
                f"cannot {action} a unit of work in state {self.state.value}",
            )
