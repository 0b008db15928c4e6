import pytest

from nexus_kernel.domain.context import TransactionContext
from nexus_kernel.infrastructure.database import (
    Base,
    DatabaseSessionFactory,
    SQLAlchemyTransactionManager,
)
from nexus_kernel.users.infrastructure import SQLAlchemyUserRepository


@pytest.fixture
async def database(tmp_path):
    """Fresh file-backed SQLite database per test, schema created."""
    factory = DatabaseSessionFactory(f"sqlite+aiosqlite:///{tmp_path / 'kernel.db'}")
    async with factory.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield factory
    await factory.dispose()


@pytest.fixture
def session_factory(database):
    return database.session_factory


@pytest.fixture
def tx_manager(session_factory):
    return SQLAlchemyTransactionManager(session_factory)


@pytest.fixture
def users(session_factory):
    return SQLAlchemyUserRepository(session_factory)


@pytest.fixture
def ctx():
    return TransactionContext()


@pytest.fixture
def user_factory():
    """Build registered (unsaved) users with unique, valid email and CPF."""
    from itertools import count
    from uuid import uuid4

    from nexus_kernel.domain.value_objects import CPF, Email
    from nexus_kernel.domain.value_objects.national_id import cpf_check_digits
    from nexus_kernel.users import User

    seq = count(1)
    tenant_id = uuid4()

    def build(name=None, email=None, cpf=None, tenant=None):
        n = next(seq)
        base = f"{100000000 + n:09d}"
        return User.register(
            tenant_id=tenant or tenant_id,
            name=name or f"User {n}",
            email=Email(email or f"user{n}@example.com"),
            cpf=CPF(cpf or base + cpf_check_digits(base)),
        )

    return build
