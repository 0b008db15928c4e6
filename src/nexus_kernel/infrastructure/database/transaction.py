"""
Transactional Boundary
Opens, joins, commits and rolls back transactions carried by a TransactionContext
"""
from __future__ import annotations

from typing import Awaitable, Callable, Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from nexus_kernel.domain.context import TransactionContext, transaction_from_context
from nexus_kernel.infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork
from nexus_kernel.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Operation = Callable[[TransactionContext], Awaitable[T]]

__all__ = [
    "ITransactionManager",
    "Operation",
    "SQLAlchemyTransactionManager",
    "TransactionContext",
    "transaction_from_context",
]


class ITransactionManager(Protocol):
    async def with_transaction(self, ctx: TransactionContext, operation: Operation[T]) -> T:
        ...


class SQLAlchemyTransactionManager:
    """
    Runs operations inside a single database transaction.

    A context that already carries a transaction is passed through as is: the
    nested operation joins the outer transaction, and only the outermost
    boundary commits or rolls back.

    Usage:
        async def transfer(ctx: TransactionContext) -> None:
            await accounts.save(ctx, debit)
            await accounts.save(ctx, credit)

        await tx_manager.with_transaction(ctx, transfer)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def with_transaction(self, ctx: TransactionContext, operation: Operation[T]) -> T:
        """
        Run `operation` in a transaction and commit if it returns.

        Args:
            ctx: Caller context
            operation: Coroutine function receiving the transactional child context

        Returns:
            Whatever `operation` returned

        Raises:
            Exception: The operation's (or commit's) own exception, unchanged,
                after the transaction was rolled back
        """
        if ctx.transaction is not None:
            logger.debug("Joining ambient transaction")
            return await operation(ctx)

        async with self._session_factory() as session:
            async with SQLAlchemyUnitOfWork(session) as uow:
                result = await operation(ctx.with_transaction(session))
                await uow.commit()
        return result
