from nexus_kernel.users.infrastructure.user_model import UserModel
from nexus_kernel.users.infrastructure.user_repository import SQLAlchemyUserRepository

__all__ = ["UserModel", "SQLAlchemyUserRepository"]
