"""Percentage value object."""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.domain.value_objects.money import Money
from nexus_kernel.exceptions import InvalidValueError

MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0


class Percentage(BaseValueObject):
    """
    A share between 0 and 100 inclusive.

    Results of add/subtract are validated like any other input: a sum above
    100 or a difference below 0 raises instead of being clamped.
    """

    def __init__(self, value: Union[int, float]) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidValueError(f"percentage must be a number, got {value!r}")
        value = float(value)
        if math.isnan(value) or not MIN_PERCENTAGE <= value <= MAX_PERCENTAGE:
            raise InvalidValueError("percentage must be between 0 and 100", details={"value": value})
        self.value = value
        self._finalize_init()

    def __str__(self) -> str:
        return f"{self.value:.2f}%"

    @property
    def fraction(self) -> Decimal:
        """value / 100 as an exact decimal (50% -> 0.5)."""
        return Decimal(str(self.value)) / 100

    def apply_to(self, amount: Money) -> Money:
        """Portion of amount this percentage represents, truncated to the cent."""
        return amount.multiply(self.fraction)

    def add(self, other: Percentage) -> Percentage:
        """
        Raises:
            InvalidValueError: If the sum exceeds 100
        """
        return Percentage(self.value + other.value)

    def subtract(self, other: Percentage) -> Percentage:
        """
        Raises:
            InvalidValueError: If the difference is negative
        """
        return Percentage(self.value - other.value)
