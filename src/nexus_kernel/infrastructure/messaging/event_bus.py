"""
Domain Event Bus
In-memory event bus for publishing and subscribing to domain events
"""
from __future__ import annotations

from collections import defaultdict
from typing import Awaitable, Callable, Iterable

from nexus_kernel.domain.domain_event import DomainEvent
from nexus_kernel.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]

ALL_EVENTS = "*"


class EventBus:
    """
    In-memory event bus for domain event publication and subscription.

    Handlers subscribe to an event type tag ("user.activated") or to
    ALL_EVENTS. Handlers run in subscription order; a failing handler is
    logged and the remaining handlers still run.

    Attributes:
        _handlers: Dictionary mapping event type tags to handler lists
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """
        Subscribe a handler to an event type.

        Example:
            async def send_welcome_email(event: DomainEvent) -> None:
                ...

            event_bus.subscribe("user.registered", send_welcome_email)
        """
        self._handlers[event_type].append(handler)
        logger.debug("Handler subscribed", event_type=event_type, handler=handler.__name__)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug("Handler unsubscribed", event_type=event_type, handler=handler.__name__)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver one event to its type's handlers, then to catch-all handlers."""
        handlers = [*self._handlers.get(event.event_type, []), *self._handlers.get(ALL_EVENTS, [])]

        if not handlers:
            logger.debug("No handlers for event", event_type=event.event_type, event_id=str(event.event_id))
            return

        logger.info(
            "Publishing event",
            event_type=event.event_type,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                # Other handlers still run
                logger.error(
                    "Event handler failed",
                    handler=handler.__name__,
                    event_type=event.event_type,
                    event_id=str(event.event_id),
                    error=str(e),
                )

    async def publish_many(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)

    def clear_handlers(self, event_type: str | None = None) -> None:
        if event_type is None:
            self._handlers.clear()
        else:
            self._handlers.pop(event_type, None)
