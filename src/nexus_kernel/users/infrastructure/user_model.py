"""
User ORM Model
Maps to the users table
"""
from uuid import UUID

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nexus_kernel.infrastructure.database.base_model import Base


class UserModel(Base):
    """SQLAlchemy model for the users table (one row per User aggregate)."""

    __tablename__ = "users"

    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    cpf: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(11), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
