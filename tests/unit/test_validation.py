from uuid import uuid4

import pytest
from pydantic import BaseModel, Field, model_validator

from nexus_kernel.domain.value_objects import Money
from nexus_kernel.exceptions import ValidationError
from nexus_kernel.users.api.schemas import RegisterUserRequest
from nexus_kernel.validation import FieldError, ensure_valid, validate


def valid_payload(**overrides):
    payload = {
        "tenant_id": str(uuid4()),
        "name": "Maria Silva",
        "email": "Maria@Example.com",
        "cpf": "529.982.247-25",
        "phone": "(11) 98765-4321",
    }
    payload.update(overrides)
    return payload


class Charge(BaseModel):
    amount: float = Field(..., gt=0)
    currency: str

    @model_validator(mode="after")
    def _money(self):
        Money(self.amount, self.currency)
        return self


def test_valid_payload_has_no_errors():
    assert validate(RegisterUserRequest, valid_payload()) == []


def test_ensure_valid_returns_normalized_model():
    request = ensure_valid(RegisterUserRequest, valid_payload())
    assert request.email == "maria@example.com"
    assert request.cpf == "52998224725"
    assert request.phone == "11987654321"


def test_missing_field_reported_with_tag():
    payload = valid_payload()
    del payload["email"]
    assert validate(RegisterUserRequest, payload) == [
        FieldError(field="email", tag="missing", message="Field required")
    ]


def test_value_object_failure_reported_on_its_field():
    errors = validate(RegisterUserRequest, valid_payload(cpf="11111111111"))
    assert [(e.field, e.tag) for e in errors] == [("cpf", "value_error")]


def test_every_violation_is_reported():
    errors = validate(RegisterUserRequest, valid_payload(name="", email="nope", extra=1))
    assert {e.field for e in errors} == {"name", "email", "extra"}
    assert {e.tag for e in errors} == {"string_too_short", "value_error", "extra_forbidden"}


def test_ensure_valid_raises_with_field_errors():
    with pytest.raises(ValidationError) as exc_info:
        ensure_valid(Charge, {"amount": -1, "currency": "BRL"})
    assert exc_info.value.code == "validation_error"
    assert exc_info.value.details["errors"][0]["field"] == "amount"
    assert exc_info.value.details["errors"][0]["tag"] == "greater_than"


def test_domain_error_in_model_validator_reported_at_root():
    errors = validate(Charge, {"amount": 10, "currency": "REAL"})
    assert [(e.field, e.tag) for e in errors] == [("__root__", "invalid_input")]


def test_accepts_model_instances():
    request = ensure_valid(RegisterUserRequest, valid_payload())
    assert validate(RegisterUserRequest, request) == []
