"""Email value object."""
from __future__ import annotations

import re

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class Email(BaseValueObject):
    """
    Email address, trimmed and lower-cased.

    Validation is a conservative format check, not deliverability.
    """

    def __init__(self, raw: str) -> None:
        if not isinstance(raw, str):
            raise InvalidValueError("email must be a string")
        normalized = raw.strip().lower()
        if not normalized:
            raise InvalidValueError("email cannot be empty")
        if not EMAIL_REGEX.match(normalized):
            raise InvalidValueError(f"invalid email format: {normalized}")
        self.value = normalized
        self._finalize_init()

    def __str__(self) -> str:
        return self.value

    @property
    def domain(self) -> str:
        """Part after the @."""
        return self.value.split("@", 1)[1]

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]
