"""
Activate User use case
"""
from __future__ import annotations

from uuid import UUID

from nexus_kernel.application.use_case import EventCollector, TransactionalUseCase
from nexus_kernel.exceptions import NotFoundError
from nexus_kernel.infrastructure.database.transaction import ITransactionManager, TransactionContext
from nexus_kernel.infrastructure.messaging.event_bus import EventBus
from nexus_kernel.users.domain.user import User
from nexus_kernel.users.infrastructure.user_repository import SQLAlchemyUserRepository


class ActivateUser(TransactionalUseCase[UUID, User]):
    def __init__(
        self,
        tx_manager: ITransactionManager,
        users: SQLAlchemyUserRepository,
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__(tx_manager, event_bus)
        self.users = users

    async def execute(self, ctx: TransactionContext, input_data: UUID, events: EventCollector) -> User:
        user = await self.users.find_by_id(ctx, input_data)
        if user is None:
            raise NotFoundError("user not found", details={"user_id": str(input_data)})
        user.activate()
        await self.users.save(ctx, user)
        events.track(user)
        return user
