"""
Register User use case
"""
from __future__ import annotations

from nexus_kernel.application.use_case import EventCollector, TransactionalUseCase
from nexus_kernel.domain.value_objects import CPF, Email, Phone
from nexus_kernel.exceptions import ConflictError
from nexus_kernel.infrastructure.database.transaction import ITransactionManager, TransactionContext
from nexus_kernel.infrastructure.messaging.event_bus import EventBus
from nexus_kernel.users.api.schemas import RegisterUserRequest
from nexus_kernel.users.domain.user import User
from nexus_kernel.users.infrastructure.user_repository import SQLAlchemyUserRepository
from nexus_kernel.validation import ensure_valid


class RegisterUser(TransactionalUseCase[dict, User]):
    """
    Validate the raw payload, reject duplicate emails, persist the new user.

    Raises:
        ValidationError: Payload invalid
        ConflictError: Email already registered
    """

    def __init__(
        self,
        tx_manager: ITransactionManager,
        users: SQLAlchemyUserRepository,
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__(tx_manager, event_bus)
        self.users = users

    async def execute(self, ctx: TransactionContext, input_data: dict, events: EventCollector) -> User:
        request = ensure_valid(RegisterUserRequest, input_data)
        email = Email(request.email)

        if await self.users.find_by_email(ctx, email) is not None:
            raise ConflictError("email already registered", details={"email": str(email)})

        user = User.register(
            tenant_id=request.tenant_id,
            name=request.name,
            email=email,
            cpf=CPF(request.cpf),
            phone=Phone(request.phone) if request.phone else None,
        )
        await self.users.save(ctx, user)
        events.track(user)
        return user
