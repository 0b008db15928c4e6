"""
Brazilian national identifiers (CPF for individuals, CNPJ for companies).

Both are digit strings whose last two digits are check digits computed from
weighted sums modulo 11 over the preceding digits.
"""
from __future__ import annotations

import re

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

_NON_DIGIT = re.compile(r"\D")

CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _digits(raw: str) -> str:
    if not isinstance(raw, str):
        raise InvalidValueError("identifier must be a string")
    return _NON_DIGIT.sub("", raw)


def _weighted_sum(digits: str, weights: tuple[int, ...]) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights))


def cpf_check_digits(base: str) -> str:
    """Return the two check digits for the first 9 digits of a CPF."""
    first = 11 - _weighted_sum(base[:9], tuple(range(10, 1, -1))) % 11
    if first >= 10:
        first = 0
    second = 11 - _weighted_sum(base[:9] + str(first), tuple(range(11, 1, -1))) % 11
    if second >= 10:
        second = 0
    return f"{first}{second}"


def cnpj_check_digits(base: str) -> str:
    """Return the two check digits for the first 12 digits of a CNPJ."""
    remainder = _weighted_sum(base[:12], CNPJ_WEIGHTS_1) % 11
    first = 0 if remainder < 2 else 11 - remainder
    remainder = _weighted_sum(base[:12] + str(first), CNPJ_WEIGHTS_2) % 11
    second = 0 if remainder < 2 else 11 - remainder
    return f"{first}{second}"


class CPF(BaseValueObject):
    """Cadastro de Pessoas Físicas: 11 digits, stored unpunctuated."""

    LENGTH = 11

    def __init__(self, raw: str) -> None:
        value = _digits(raw)
        if len(value) != self.LENGTH:
            raise InvalidValueError("CPF must have 11 digits")
        if value == value[0] * self.LENGTH:
            raise InvalidValueError(f"invalid CPF: {value}")
        if value[9:] != cpf_check_digits(value):
            raise InvalidValueError(f"invalid CPF: {value}")
        self.value = value
        self._finalize_init()

    def __str__(self) -> str:
        return self.value

    def formatted(self) -> str:
        """DDD.DDD.DDD-DD"""
        v = self.value
        return f"{v[:3]}.{v[3:6]}.{v[6:9]}-{v[9:]}"


class CNPJ(BaseValueObject):
    """Cadastro Nacional da Pessoa Jurídica: 14 digits, stored unpunctuated."""

    LENGTH = 14

    def __init__(self, raw: str) -> None:
        value = _digits(raw)
        if len(value) != self.LENGTH:
            raise InvalidValueError("CNPJ must have 14 digits")
        if value[12:] != cnpj_check_digits(value):
            raise InvalidValueError(f"invalid CNPJ: {value}")
        self.value = value
        self._finalize_init()

    def __str__(self) -> str:
        return self.value

    def formatted(self) -> str:
        """DD.DDD.DDD/DDDD-DD"""
        v = self.value
        return f"{v[:2]}.{v[2:5]}.{v[5:8]}/{v[8:12]}-{v[12:]}"
