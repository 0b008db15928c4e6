"""
Use Case Base Class
Transactional orchestrator for business workflows
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from nexus_kernel.domain.base_aggregate_root import BaseAggregateRoot
from nexus_kernel.domain.domain_event import DomainEvent
from nexus_kernel.infrastructure.database.transaction import ITransactionManager, TransactionContext
from nexus_kernel.infrastructure.messaging.event_bus import EventBus
from nexus_kernel.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")

EVENT_COLLECTOR_KEY = "event_collector"


class EventCollector:
    """
    Aggregates touched during one transactional use case.

    Events stay inside the aggregates until the transaction outcome is known;
    they are drained once, after commit (to be published) or after rollback
    (to be dropped).
    """

    def __init__(self) -> None:
        self._aggregates: list[BaseAggregateRoot] = []

    def track(self, aggregate: BaseAggregateRoot) -> None:
        if not any(tracked is aggregate for tracked in self._aggregates):
            self._aggregates.append(aggregate)

    def drain(self) -> list[DomainEvent]:
        """Drain every tracked aggregate, in tracking order."""
        events: list[DomainEvent] = []
        for aggregate in self._aggregates:
            events.extend(aggregate.drain_events())
        self._aggregates.clear()
        return events


class TransactionalUseCase(ABC, Generic[TInput, TOutput]):
    """
    Abstract base class for use cases that write.

    Calling the use case runs `execute` inside a transactional boundary.
    Aggregates passed to `events.track()` have their events drained after the
    transaction commits and published on the event bus; on failure, including
    cancellation, the events are discarded.

    Called from inside another use case, it joins the outer transaction and
    hands its aggregates to the outer use case, which publishes once the outer
    transaction commits. Called with a context whose transaction was opened
    directly through `with_transaction`, it cannot see that commit: it
    publishes nothing and leaves the events on the aggregates for the
    transaction's owner to drain after committing.

    Type Parameters:
        TInput: Input data type
        TOutput: Output/result type

    Example:
        class ActivateUser(TransactionalUseCase[UUID, User]):
            async def execute(self, ctx, user_id, events):
                user = await self.users.find_by_id(ctx, user_id)
                user.activate()
                await self.users.save(ctx, user)
                events.track(user)
                return user
    """

    def __init__(self, tx_manager: ITransactionManager, event_bus: EventBus | None = None) -> None:
        self.tx_manager = tx_manager
        self.event_bus = event_bus

    @abstractmethod
    async def execute(self, ctx: TransactionContext, input_data: TInput, events: EventCollector) -> TOutput:
        """
        Execute the use case inside the transaction.

        Args:
            ctx: Transactional context; pass it to every repository call
            input_data: Input parameters for the use case
            events: Collector for aggregates whose events must be published

        Returns:
            Result of use case execution
        """

    async def __call__(self, ctx: TransactionContext, input_data: TInput) -> TOutput:
        use_case_name = self.__class__.__name__
        outer_collector = ctx.get(EVENT_COLLECTOR_KEY)
        owns_events = outer_collector is None
        collector: EventCollector = EventCollector() if owns_events else outer_collector
        run_ctx = ctx.with_values(**{EVENT_COLLECTOR_KEY: collector}) if owns_events else ctx

        logger.info("Executing use case", use_case=use_case_name)

        async def operation(tx_ctx: TransactionContext) -> TOutput:
            return await self.execute(tx_ctx, input_data, collector)

        try:
            result = await self.tx_manager.with_transaction(run_ctx, operation)
        except BaseException as e:
            if owns_events:
                dropped = collector.drain()
                logger.info("Discarded events of failed use case", use_case=use_case_name, event_count=len(dropped))
            logger.error("Use case execution failed", use_case=use_case_name, error=repr(e))
            raise

        if owns_events and ctx.in_transaction:
            logger.debug("Transaction owned by caller, events left on aggregates", use_case=use_case_name)
        elif owns_events:
            await self._publish(collector.drain())

        logger.info("Use case completed successfully", use_case=use_case_name)
        return result

    async def _publish(self, events: list[DomainEvent]) -> None:
        if not events:
            return
        if self.event_bus is None:
            logger.debug("No event bus configured, dropping events", event_count=len(events))
            return
        await self.event_bus.publish_many(events)
