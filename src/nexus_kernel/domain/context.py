"""
Call Context
Immutable context passed explicitly down every call chain; carries the
ambient transaction handle, if any
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

D = TypeVar("D")


@dataclass(frozen=True)
class TransactionContext:
    """
    Deriving a child never mutates the parent, so concurrent call chains
    never observe each other's transaction.

    Attributes:
        transaction: Opaque handle of the active transaction (an AsyncSession
            for the SQLAlchemy adapter), or None
        values: Request-scoped values (tenant_id, correlation_id, ...)
    """

    transaction: Any = None
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def in_transaction(self) -> bool:
        return self.transaction is not None

    def with_transaction(self, transaction: Any) -> TransactionContext:
        return replace(self, transaction=transaction)

    def with_values(self, **values: Any) -> TransactionContext:
        return replace(self, values={**self.values, **values})

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


def transaction_from_context(ctx: TransactionContext, default: D) -> Any | D:
    """
    Return the transaction carried by ctx, else `default`.

    Repositories call this for every operation so they never need to know
    whether they run inside a unit of work.
    """
    if ctx.transaction is not None:
        return ctx.transaction
    return default
