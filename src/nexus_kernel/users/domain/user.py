"""
User Aggregate
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from nexus_kernel.domain.base_aggregate_root import BaseAggregateRoot
from nexus_kernel.domain.identity import IdentityGenerator
from nexus_kernel.domain.value_objects import CPF, Email, Phone
from nexus_kernel.exceptions import InvalidValueError

USER_REGISTERED = "user.registered"
USER_ACTIVATED = "user.activated"
USER_DEACTIVATED = "user.deactivated"
USER_EMAIL_CHANGED = "user.email_changed"


class User(BaseAggregateRoot):
    """
    User aggregate root, scoped to a tenant.

    State changes go through behavior methods; each one records the matching
    domain event. Rehydration from storage uses __init__ directly and records
    nothing.

    Attributes:
        tenant_id: Owning tenant
        name: Display name
        email: Unique contact address
        cpf: National identifier
        phone: Optional contact phone
        is_active: Whether the user may sign in
    """

    def __init__(
        self,
        tenant_id: UUID,
        name: str,
        email: Email,
        cpf: CPF,
        phone: Optional[Phone] = None,
        is_active: bool = False,
        id: Optional[UUID] = None,
        version: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id_generator: Optional[IdentityGenerator] = None,
    ) -> None:
        super().__init__(
            id=id,
            version=version,
            created_at=created_at,
            updated_at=updated_at,
            id_generator=id_generator,
        )
        if not name or not name.strip():
            raise InvalidValueError("name is required")
        self._tenant_id = tenant_id
        self._name = name.strip()
        self._email = email
        self._cpf = cpf
        self._phone = phone
        self._is_active = is_active

    @classmethod
    def register(
        cls,
        tenant_id: UUID,
        name: str,
        email: Email,
        cpf: CPF,
        phone: Optional[Phone] = None,
        id_generator: Optional[IdentityGenerator] = None,
    ) -> User:
        """Create a new, inactive user and record user.registered."""
        user = cls(tenant_id, name, email, cpf, phone, id_generator=id_generator)
        user.raise_event(
            USER_REGISTERED,
            {"tenant_id": str(tenant_id), "email": str(email), "cpf": str(cpf)},
        )
        return user

    # Properties

    @property
    def tenant_id(self) -> UUID:
        return self._tenant_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Email:
        return self._email

    @property
    def cpf(self) -> CPF:
        return self._cpf

    @property
    def phone(self) -> Optional[Phone]:
        return self._phone

    @property
    def is_active(self) -> bool:
        return self._is_active

    # Behavior

    def activate(self) -> None:
        """Activate the user. Activating an active user changes nothing and records nothing."""
        if self._is_active:
            return
        self._is_active = True
        self.raise_event(USER_ACTIVATED, {"email": str(self._email)})

    def deactivate(self) -> None:
        if not self._is_active:
            return
        self._is_active = False
        self.raise_event(USER_DEACTIVATED, {"email": str(self._email)})

    def change_email(self, new_email: Email) -> None:
        if new_email == self._email:
            return
        previous = self._email
        self._email = new_email
        self.raise_event(USER_EMAIL_CHANGED, {"from": str(previous), "to": str(new_email)})
