"""
Messaging Infrastructure
In-process domain event dispatch
"""
from nexus_kernel.infrastructure.messaging.event_bus import ALL_EVENTS, EventBus, EventHandler

__all__ = ["ALL_EVENTS", "EventBus", "EventHandler"]
