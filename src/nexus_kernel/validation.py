"""
Declarative input validation.

Request payloads are described as pydantic models; validate() runs the model
against raw data and reports failures as (field, constraint-tag) pairs, the
shape the rest of the kernel and the HTTP envelope expect.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from nexus_kernel.exceptions import DomainError, ValidationError

TModel = TypeVar("TModel", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    field: str
    tag: str
    message: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "tag": self.tag, "message": self.message}


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def _field_errors(exc: PydanticValidationError) -> list[FieldError]:
    return [
        FieldError(field=_field_name(err["loc"]), tag=err["type"], message=err["msg"])
        for err in exc.errors()
    ]


def validate(model_cls: Type[TModel], data: Mapping[str, Any] | BaseModel) -> list[FieldError]:
    """
    Validate `data` against `model_cls`.

    Returns:
        One FieldError per violated constraint; empty when valid. Value-object
        failures raised inside validators are reported with the domain error
        code as the tag.
    """
    try:
        ensure_valid(model_cls, data)
    except ValidationError as e:
        return [FieldError(**err) for err in (e.details or {}).get("errors", [])]
    return []


def ensure_valid(model_cls: Type[TModel], data: Mapping[str, Any] | BaseModel) -> TModel:
    """
    Validate and return the model instance.

    Raises:
        ValidationError: With the field errors under details["errors"]
    """
    raw = data.model_dump() if isinstance(data, BaseModel) else dict(data)
    try:
        return model_cls.model_validate(raw)
    except PydanticValidationError as e:
        errors = _field_errors(e)
    except DomainError as e:
        # Raised by a value object inside a model validator
        errors = [FieldError(field="__root__", tag=e.code, message=e.message)]
    raise ValidationError(
        "validation failed",
        details={"errors": [err.to_dict() for err in errors]},
    )
