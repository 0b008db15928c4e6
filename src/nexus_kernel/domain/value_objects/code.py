"""Alphanumeric code value object."""
from __future__ import annotations

import re

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

_ALPHANUMERIC = re.compile(r"^[A-Z0-9]+$")


class Code(BaseValueObject):
    """
    Upper-case alphanumeric code (SKUs, coupon codes, short references).

    Args:
        raw: Input text; trimmed and upper-cased
        min_length: Minimum accepted length after normalization
        max_length: Maximum accepted length after normalization
    """

    def __init__(self, raw: str, min_length: int = 1, max_length: int = 32) -> None:
        if not isinstance(raw, str):
            raise InvalidValueError("code must be a string")
        if min_length < 1 or max_length < min_length:
            raise InvalidValueError("code length bounds must satisfy 1 <= min_length <= max_length")
        value = raw.strip().upper()
        if not min_length <= len(value) <= max_length:
            raise InvalidValueError(f"code must be between {min_length} and {max_length} characters")
        if not _ALPHANUMERIC.match(value):
            raise InvalidValueError("code must contain only letters and numbers")
        self.value = value
        self._finalize_init()

    def __str__(self) -> str:
        return self.value
