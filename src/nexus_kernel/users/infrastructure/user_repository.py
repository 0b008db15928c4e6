"""
SQLAlchemy User Repository
"""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select

from nexus_kernel.domain.value_objects import CPF, Email, Phone
from nexus_kernel.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from nexus_kernel.infrastructure.database.transaction import TransactionContext
from nexus_kernel.users.domain.user import User
from nexus_kernel.users.infrastructure.user_model import UserModel


def _aware(moment: datetime) -> datetime:
    # SQLite hands timestamps back naive; they were written in UTC
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


class SQLAlchemyUserRepository(SQLAlchemyRepository[User, UserModel]):
    model_class = UserModel

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            tenant_id=model.tenant_id,
            name=model.name,
            email=Email(model.email),
            cpf=CPF(model.cpf),
            phone=Phone(model.phone) if model.phone else None,
            is_active=model.is_active,
            version=model.version,
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    def _to_model(self, aggregate: User) -> UserModel:
        return UserModel(
            id=aggregate.id,
            tenant_id=aggregate.tenant_id,
            name=aggregate.name,
            email=str(aggregate.email),
            cpf=str(aggregate.cpf),
            phone=str(aggregate.phone) if aggregate.phone else None,
            is_active=aggregate.is_active,
            version=aggregate.version,
            created_at=aggregate.created_at,
            updated_at=aggregate.updated_at,
        )

    async def find_by_email(self, ctx: TransactionContext, email: Email) -> User | None:
        async with self._session(ctx) as session:
            result = await session.execute(select(UserModel).where(UserModel.email == str(email)))
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model is not None else None
