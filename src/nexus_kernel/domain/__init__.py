"""
Domain Layer
Pure domain contracts with no framework dependencies
"""
from nexus_kernel.domain.base_aggregate_root import BaseAggregateRoot
from nexus_kernel.domain.base_entity import BaseEntity
from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.domain.context import TransactionContext, transaction_from_context
from nexus_kernel.domain.domain_event import DomainEvent
from nexus_kernel.domain.identity import (
    IdentityGenerator,
    IdentityService,
    UUIDIdentityGenerator,
    get_identity_service,
)
from nexus_kernel.domain.repository import Filter, ReadOnlyRepository, Repository

__all__ = [
    "BaseEntity",
    "BaseValueObject",
    "BaseAggregateRoot",
    "DomainEvent",
    "IdentityGenerator",
    "IdentityService",
    "UUIDIdentityGenerator",
    "get_identity_service",
    "Repository",
    "ReadOnlyRepository",
    "Filter",
    "TransactionContext",
    "transaction_from_context",
]
