"""
Database Infrastructure
Session management, unit of work, transactional boundary and repositories
"""
from nexus_kernel.infrastructure.database.base_model import Base
from nexus_kernel.infrastructure.database.session import DatabaseSessionFactory
from nexus_kernel.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from nexus_kernel.infrastructure.database.transaction import (
    ITransactionManager,
    SQLAlchemyTransactionManager,
    TransactionContext,
    transaction_from_context,
)
from nexus_kernel.infrastructure.database.unit_of_work import (
    IUnitOfWork,
    SQLAlchemyUnitOfWork,
    TransactionState,
)

__all__ = [
    "Base",
    "DatabaseSessionFactory",
    "SQLAlchemyRepository",
    "ITransactionManager",
    "SQLAlchemyTransactionManager",
    "TransactionContext",
    "transaction_from_context",
    "IUnitOfWork",
    "SQLAlchemyUnitOfWork",
    "TransactionState",
]
