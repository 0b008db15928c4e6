"""
User request schemas
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nexus_kernel.domain.value_objects import CPF, Email, Phone
from nexus_kernel.exceptions import InvalidValueError


def _as_value_error(factory, raw: str) -> str:
    try:
        return str(factory(raw))
    except InvalidValueError as e:
        raise ValueError(e.message) from e


class RegisterUserRequest(BaseModel):
    """Payload for registering a user; fields arrive normalized."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    tenant_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    email: str
    cpf: str
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return _as_value_error(Email, v)

    @field_validator("cpf")
    @classmethod
    def _cpf(cls, v: str) -> str:
        return _as_value_error(CPF, v)

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: Optional[str]) -> Optional[str]:
        return _as_value_error(Phone, v) if v else None
