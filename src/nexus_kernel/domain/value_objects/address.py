"""Postal address value object."""
from __future__ import annotations

import re

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

ZIP_CODE_LENGTH = 8

_NON_DIGIT = re.compile(r"\D")


class Address(BaseValueObject):
    """
    Brazilian postal address.

    street, city, state and zip_code are mandatory; zip_code (CEP) is reduced
    to its 8 digits.
    """

    def __init__(
        self,
        street: str,
        city: str,
        state: str,
        zip_code: str,
        number: str = "",
        complement: str = "",
        district: str = "",
        country: str = "",
    ) -> None:
        required = {"street": street, "city": city, "state": state, "zip_code": zip_code}
        missing = [name for name, value in required.items() if not (value or "").strip()]
        if missing:
            raise InvalidValueError(
                "street, city, state and zip_code are required",
                details={"missing": missing},
            )

        digits = _NON_DIGIT.sub("", zip_code)
        if len(digits) != ZIP_CODE_LENGTH:
            raise InvalidValueError("invalid zip code format", details={"zip_code": zip_code})

        self.street = street.strip()
        self.number = (number or "").strip()
        self.complement = (complement or "").strip()
        self.district = (district or "").strip()
        self.city = city.strip()
        self.state = state.strip().upper()
        self.zip_code = digits
        self.country = (country or "").strip()
        self._finalize_init()

    def __str__(self) -> str:
        return self.full_address()

    def formatted_zip_code(self) -> str:
        return f"{self.zip_code[:5]}-{self.zip_code[5:]}"

    def full_address(self) -> str:
        """Comma-joined, skipping empty optional parts."""
        parts = [self.street, self.number, self.complement, self.district, self.city, self.state,
                 self.formatted_zip_code(), self.country]
        return ", ".join(part for part in parts if part)
