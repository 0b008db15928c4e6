"""Brazilian phone number value object."""
from __future__ import annotations

import re

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

_NON_DIGIT = re.compile(r"\D")

# DDD (area) codes assigned by Anatel.
VALID_AREA_CODES = frozenset(
    {
        "11", "12", "13", "14", "15", "16", "17", "18", "19",
        "21", "22", "24", "27", "28",
        "31", "32", "33", "34", "35", "37", "38",
        "41", "42", "43", "44", "45", "46",
        "47", "48", "49",
        "51", "53", "54", "55",
        "61", "62", "63", "64", "65", "66", "67", "68", "69",
        "71", "73", "74", "75", "77", "79",
        "81", "82", "83", "84", "85", "86", "87", "88", "89",
        "91", "92", "93", "94", "95", "96", "97", "98", "99",
    }
)


class Phone(BaseValueObject):
    """
    Local phone number: area code followed by an 8 (landline) or 9 (mobile)
    digit subscriber number, stored as digits only.
    """

    def __init__(self, raw: str) -> None:
        if not isinstance(raw, str):
            raise InvalidValueError("phone must be a string")
        value = _NON_DIGIT.sub("", raw)
        if len(value) not in (10, 11):
            raise InvalidValueError("phone must have 10 or 11 digits")
        area_code = value[:2]
        if area_code not in VALID_AREA_CODES:
            raise InvalidValueError(f"invalid area code: {area_code}")
        self.value = value
        self._finalize_init()

    def __str__(self) -> str:
        return self.value

    @property
    def area_code(self) -> str:
        return self.value[:2]

    @property
    def is_mobile(self) -> bool:
        return len(self.value) == 11 and self.value[2] == "9"

    def formatted(self) -> str:
        """(AA) NNNN-NNNN or (AA) NNNNN-NNNN"""
        v = self.value
        split = 6 if len(v) == 10 else 7
        return f"({v[:2]}) {v[2:split]}-{v[split:]}"
